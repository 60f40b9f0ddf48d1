"""Input checks and start/end marker validation."""

from .models import (
    Grid,
    Position,
    Result,
    START,
    END,
    INVALID_POSITION,
    START_OR_END_NOT_FOUND,
    MULTIPLE_START_OR_END,
    failure,
)


def is_valid_grid(grid) -> bool:
    """A map must be a non-empty list of rows; a row may be missing or empty."""
    if not isinstance(grid, (list, tuple)) or not grid:
        return False
    return all(row is None or isinstance(row, (list, tuple, str)) for row in grid)


def is_valid_position(position) -> bool:
    if position is None:
        return False
    return position.row >= 0 and position.column >= 0


def is_single_character(character) -> bool:
    return isinstance(character, str) and len(character) == 1


def validate_start_and_end(grid: Grid) -> Result:
    """
    Check the map has exactly one start and exactly one end marker.

    Returns a Result whose value is the (start, end) position pair.
    """
    from .grid import find_all

    starts, error = find_all(grid, START)
    if error:
        return Result(error=error)
    ends, error = find_all(grid, END)
    if error:
        return Result(error=error)

    if not starts or not ends:
        return Result(error=failure(START_OR_END_NOT_FOUND))
    if len(starts) > 1 or len(ends) > 1:
        return Result(error=failure(MULTIPLE_START_OR_END))

    start: Position = starts[0]
    end: Position = ends[0]
    if not is_valid_position(start):
        return Result(error=failure(INVALID_POSITION, start))
    if not is_valid_position(end):
        return Result(error=failure(INVALID_POSITION, end))

    return Result(value=(start, end))
