"""Map loading utilities."""

import sys
from pathlib import Path
from typing import List


def parse_map(text: str) -> List[List[str]]:
    """
    Split map text into a grid of single characters.

    Rows keep their leading and trailing spaces and may differ in length.
    A final newline does not produce an extra empty row.
    """
    lines = [line.rstrip('\r') for line in text.split('\n')]
    if lines and lines[-1] == "":
        lines.pop()
    return [list(line) for line in lines]


def load_map(source: str) -> List[List[str]]:
    """Read a map from a file path, or from stdin when `source` is '-'."""
    if source == "-":
        return parse_map(sys.stdin.read())

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Map file not found: {source}")

    return parse_map(path.read_text(encoding="utf-8"))
