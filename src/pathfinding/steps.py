"""
Step resolution: picks the next position of the path.

Two modes:
1. First step (no previous position): the start must have exactly one
   forward-valid neighbor.
2. Subsequent steps: keep going straight whenever possible; only junctions
   and letters may turn, and a turn must have exactly one perpendicular exit.
"""

from typing import Callable, NamedTuple, Optional

from .models import (
    Grid,
    Position,
    Result,
    BROKEN_PATH,
    MULTIPLE_STARTING_PATHS,
    FAKE_TURN,
    FORK_IN_PATH,
    INVALID_POSITION,
    CHARACTER_NOT_FOUND_AT_CURRENT_POSITION,
    failure,
)
from .characters import (
    is_capital_letter,
    is_intersection_character,
    is_valid_forward_character,
)
from .grid import (
    character_at,
    direction_between,
    neighbors,
    step,
    is_moving_horizontally,
    is_moving_vertically,
)
from .validation import is_valid_position


def first_step(grid: Grid, current: Position) -> Result:
    """Leave the start marker through its only forward-valid neighbor."""
    if not is_valid_position(current):
        return Result(error=failure(INVALID_POSITION, current))

    candidates = neighbors(grid, current, is_valid_forward_character)

    if not candidates:
        return Result(error=failure(BROKEN_PATH, current))
    if len(candidates) > 1:
        return Result(error=failure(MULTIPLE_STARTING_PATHS, current))

    return Result(value=candidates[0])


def forward_step(grid: Grid, current: Position, previous: Position) -> Optional[Position]:
    """Continue in the direction of travel, or None if the cell ahead is not walkable."""
    direction, error = direction_between(previous, current)
    if error:
        return None

    ahead = step(current, direction)
    character = character_at(grid, ahead)
    if character and is_valid_forward_character(character):
        return ahead

    return None


def turn_step(grid: Grid, current: Position, previous: Position) -> Result:
    """Turn onto the axis perpendicular to the approach."""
    came_from_horizontal = is_moving_horizontally(previous, current)
    candidates = neighbors(grid, current, is_valid_forward_character)

    # Coming in horizontally only up/down exits count, and vice versa
    if came_from_horizontal:
        turns = [c for c in candidates if is_moving_vertically(current, c)]
    else:
        turns = [c for c in candidates if is_moving_horizontally(current, c)]

    if not turns:
        return Result(error=failure(FAKE_TURN, current))
    if len(turns) > 1:
        return Result(error=failure(FORK_IN_PATH, current))

    return Result(value=turns[0])


class StepStrategies(NamedTuple):
    """The pieces `next_step` is built from; swap any of them to change how steps resolve."""
    first: Callable[[Grid, Position], Result] = first_step
    forward: Callable[[Grid, Position, Position], Optional[Position]] = forward_step
    turn: Callable[[Grid, Position, Position], Result] = turn_step


DEFAULT_STRATEGIES = StepStrategies()


def next_step(
    grid: Grid,
    current: Position,
    previous: Optional[Position],
    strategies: StepStrategies = DEFAULT_STRATEGIES,
) -> Result:
    """Resolve the position that follows `current` when arriving from `previous`."""
    if previous is None:
        return strategies.first(grid, current)

    character = character_at(grid, current)
    if not character:
        return Result(error=failure(CHARACTER_NOT_FOUND_AT_CURRENT_POSITION, current))

    if not is_intersection_character(character):
        ahead = strategies.forward(grid, current, previous)
        if ahead is not None:
            return Result(value=ahead)

    # Junctions always turn; letters turn when they cannot go straight
    if is_intersection_character(character) or is_capital_letter(character):
        return strategies.turn(grid, current, previous)

    return Result(error=failure(BROKEN_PATH, current))
