"""Grid access, position math and neighbor lookup."""

from typing import Callable, List, Optional, Iterable

from .models import (
    Grid,
    Position,
    Direction,
    DIRECTIONS,
    Result,
    HORIZONTAL,
    VERTICAL,
    INVALID_GRID,
    INVALID_CHARACTER,
    INVALID_POSITION,
    failure,
)
from .characters import is_capital_letter, is_end_character, is_intersection_character
from .validation import is_valid_grid, is_valid_position, is_single_character


def character_at(grid: Grid, position: Position) -> Optional[str]:
    """Return the character at `position`, or None if there is nothing there."""
    if not is_valid_position(position):
        return None
    if position.row >= len(grid):
        return None
    row = grid[position.row]
    if not row or position.column >= len(row):
        return None
    return row[position.column] or None


def find_all(grid: Grid, character: str) -> Result:
    """Return every position holding `character`, in row-major order."""
    if not is_valid_grid(grid):
        return Result(error=failure(INVALID_GRID))
    if not is_single_character(character):
        return Result(error=failure(INVALID_CHARACTER))

    positions: List[Position] = []
    for row_index, row in enumerate(grid):
        if not row:
            continue
        for column_index, cell in enumerate(row):
            if cell == character:
                positions.append(Position(row_index, column_index))

    return Result(value=positions)


def direction_between(start: Position, end: Position) -> Result:
    """Component-wise difference from `start` to `end`."""
    if not is_valid_position(start):
        return Result(error=failure(INVALID_POSITION, start))
    if not is_valid_position(end):
        return Result(error=failure(INVALID_POSITION, end))
    return Result(value=Direction(end.row - start.row, end.column - start.column))


def positions_equal(first: Position, second: Position) -> bool:
    return first.row == second.row and first.column == second.column


def step(position: Position, direction: Direction) -> Position:
    return Position(position.row + direction.vertical, position.column + direction.horizontal)


def is_moving_horizontally(previous: Position, following: Position) -> bool:
    return previous.row == following.row and previous.column != following.column


def is_moving_vertically(previous: Position, following: Position) -> bool:
    return previous.column == following.column and previous.row != following.row


def is_compatible_with_direction(character: str, direction: Direction) -> bool:
    """
    Whether `character` can be entered by moving one cell in `direction`.

    Junctions, letters and the end marker accept any axis-aligned unit step;
    `-` only accepts left/right and `|` only up/down. Zero, diagonal and
    longer steps are never compatible.
    """
    horizontal = abs(direction.horizontal) == 1 and direction.vertical == 0
    vertical = abs(direction.vertical) == 1 and direction.horizontal == 0

    if not horizontal and not vertical:
        return False

    if (
        is_intersection_character(character)
        or is_capital_letter(character)
        or is_end_character(character)
    ):
        return True

    if horizontal:
        return character == HORIZONTAL
    return character == VERTICAL


def neighbors(
    grid: Grid,
    position: Position,
    is_valid: Callable[[str], bool],
) -> List[Position]:
    """
    Orthogonal neighbors of `position` that can be stepped onto.

    Candidates are checked up, down, left, right; a candidate is kept when a
    character exists there, `is_valid` accepts it and it is compatible with
    the direction of the move into it.
    """
    if not is_valid_position(position):
        return []

    found: List[Position] = []
    for direction in DIRECTIONS:
        candidate = step(position, direction)
        character = character_at(grid, candidate)
        if (
            character
            and is_valid(character)
            and is_compatible_with_direction(character, direction)
        ):
            found.append(candidate)

    return found


def render_path(grid: Grid, positions: Iterable[Position]) -> str:
    """Render the map keeping only the visited cells; everything else becomes '.'."""
    visited = set(positions)
    width = max((len(row) for row in grid if row), default=0)

    lines = []
    for row_index, row in enumerate(grid):
        row = row or ""
        lines.append(''.join(
            row[column] if column < len(row) and (row_index, column) in visited else '.'
            for column in range(width)
        ))

    return '\n'.join(lines)
