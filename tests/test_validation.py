"""Test start/end marker validation and input checks."""

from src.pathfinding import Position, validate_start_and_end, parse_map
from src.pathfinding.validation import is_valid_grid, is_valid_position, is_single_character


class TestValidateStartAndEnd:
    """Test cases for marker validation."""

    def test_valid_markers(self):
        """One start and one end give both positions."""
        markers, error = validate_start_and_end(parse_map("  @--\n    x"))
        assert error is None
        assert markers == (Position(0, 2), Position(1, 4))

    def test_missing_start(self):
        """A map without '@' is rejected."""
        result = validate_start_and_end(parse_map("---x"))
        assert result.error.code == "START_OR_END_NOT_FOUND"
        assert result.error.message == "Start or end not found"

    def test_missing_end(self):
        """A map without 'x' is rejected."""
        result = validate_start_and_end(parse_map("@---"))
        assert result.error.code == "START_OR_END_NOT_FOUND"

    def test_missing_both(self):
        """A map without markers is rejected."""
        result = validate_start_and_end(parse_map("   "))
        assert result.error.code == "START_OR_END_NOT_FOUND"

    def test_multiple_starts(self):
        """Two starts are rejected."""
        result = validate_start_and_end(parse_map("@-@\n  x"))
        assert result.error.code == "MULTIPLE_START_OR_END"
        assert result.error.message == "Multiple start or end characters found"

    def test_multiple_ends(self):
        """Two ends are rejected."""
        result = validate_start_and_end(parse_map("@-x\nx"))
        assert result.error.code == "MULTIPLE_START_OR_END"

    def test_missing_wins_over_multiple(self):
        """Two starts and no end is reported as not found."""
        result = validate_start_and_end(parse_map("@-@"))
        assert result.error.code == "START_OR_END_NOT_FOUND"

    def test_empty_grid(self):
        """An empty map fails the marker search."""
        result = validate_start_and_end([])
        assert result.error.code == "INVALID_GRID"


class TestInputChecks:
    """Test cases for the input predicates."""

    def test_valid_grids(self):
        """Lists of rows, strings and None rows are valid maps."""
        assert is_valid_grid([list("@x")]) is True
        assert is_valid_grid(["@x", "", None]) is True

    def test_invalid_grids(self):
        """Empty, missing and flat inputs are not maps."""
        assert is_valid_grid([]) is False
        assert is_valid_grid(None) is False
        assert is_valid_grid("@x") is False
        assert is_valid_grid([1, 2]) is False

    def test_positions(self):
        """Positions must be present and non-negative."""
        assert is_valid_position(Position(0, 0)) is True
        assert is_valid_position(Position(0, -1)) is False
        assert is_valid_position(None) is False

    def test_single_character(self):
        """Search characters are exactly one character."""
        assert is_single_character("@") is True
        assert is_single_character("") is False
        assert is_single_character("ab") is False
