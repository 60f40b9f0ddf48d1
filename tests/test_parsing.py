"""Test map loading."""

import io

import pytest

from src.pathfinding import parse_map, load_map


class TestParseMap:
    """Test cases for splitting map text into a grid."""

    def test_rows_of_characters(self):
        """Each line becomes a row of characters."""
        assert parse_map("@-\n x") == [["@", "-"], [" ", "x"]]

    def test_keeps_spaces(self):
        """Leading and trailing spaces are kept."""
        grid = parse_map("  @  \n")
        assert grid == [[" ", " ", "@", " ", " "]]

    def test_trailing_newline_dropped_once(self):
        """Only the final newline is dropped."""
        assert parse_map("@\n\n") == [["@"], []]

    def test_keeps_interior_empty_rows(self):
        """Blank lines inside the map stay as empty rows."""
        assert parse_map("@\n\nx") == [["@"], [], ["x"]]

    def test_windows_line_endings(self):
        """Carriage returns are stripped."""
        assert parse_map("@-\r\n-x\r\n") == [["@", "-"], ["-", "x"]]

    def test_empty_text(self):
        """Empty text gives an empty grid."""
        assert parse_map("") == []


class TestLoadMap:
    """Test cases for reading maps from files and stdin."""

    def test_from_file(self, tmp_path):
        """Maps load from a file path."""
        path = tmp_path / "map.txt"
        path.write_text("@-x\n")
        assert load_map(str(path)) == [["@", "-", "x"]]

    def test_missing_file(self, tmp_path):
        """A missing map file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Map file not found"):
            load_map(str(tmp_path / "missing.txt"))

    def test_from_stdin(self, monkeypatch):
        """'-' reads the map from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("@\n|\nx\n"))
        assert load_map("-") == [["@"], ["|"], ["x"]]
