"""
Path traversal for ASCII maps.

Walks the map from the start marker to the end marker, collecting:
1. Every character on the path, in order (revisited cells appear again)
2. The letters on the path, each grid cell counted only on its first visit

`run` is the public entry point: it validates the markers, traverses and
raises InvalidMapError on the first failure.
"""

from typing import List, Optional, Set, Tuple

from .models import (
    Grid,
    Position,
    PathTrace,
    Result,
    TracerConfig,
    InvalidMapError,
    INVALID_POSITION,
    CHARACTER_NOT_FOUND_AT_CURRENT_POSITION,
    PATH_DID_NOT_TERMINATE,
    failure,
)
from .characters import is_capital_letter
from .grid import character_at, positions_equal
from .steps import StepStrategies, DEFAULT_STRATEGIES, next_step
from .validation import is_valid_position, validate_start_and_end


def traverse(
    grid: Grid,
    start: Position,
    end: Position,
    strategies: StepStrategies = DEFAULT_STRATEGIES,
    max_steps: Optional[int] = None,
    detect_cycles: bool = True,
) -> Result:
    """
    Follow the path from `start` until `end` is reached.

    Returns a Result holding a PathTrace, or the first failure met on the way.
    With `detect_cycles`, reaching the same (previous, current) pair twice
    fails with PATH_DID_NOT_TERMINATE, since the walk would repeat forever.
    """
    if not is_valid_position(start):
        return Result(error=failure(INVALID_POSITION, start))
    if not is_valid_position(end):
        return Result(error=failure(INVALID_POSITION, end))

    character_path: List[str] = []
    letters: List[str] = []
    positions: List[Position] = []
    visited: Set[Position] = set()

    def record(position: Position) -> bool:
        character = character_at(grid, position)
        if not character:
            return False

        character_path.append(character)
        positions.append(position)
        if position not in visited and is_capital_letter(character):
            letters.append(character)
        visited.add(position)
        return True

    if not record(start):
        return Result(error=failure(CHARACTER_NOT_FOUND_AT_CURRENT_POSITION, start))

    current = start
    previous: Optional[Position] = None
    seen_states: Set[Tuple[Optional[Position], Position]] = set()
    steps = 0

    while not positions_equal(current, end):
        if detect_cycles:
            state = (previous, current)
            if state in seen_states:
                return Result(error=failure(PATH_DID_NOT_TERMINATE, current))
            seen_states.add(state)

        if max_steps is not None and steps >= max_steps:
            return Result(error=failure(PATH_DID_NOT_TERMINATE, current))

        following, error = next_step(grid, current, previous, strategies)
        if error:
            return Result(error=error)

        previous, current = current, Position(*following)
        steps += 1

        if not record(current):
            return Result(error=failure(CHARACTER_NOT_FOUND_AT_CURRENT_POSITION, current))

    return Result(value=PathTrace(
        character_path=character_path,
        letters=letters,
        positions=positions,
        steps=steps,
    ))


def run(grid: Grid, config: Optional[TracerConfig] = None) -> PathTrace:
    """
    Trace the path drawn on `grid`.

    Raises InvalidMapError carrying the first failure if the map is not a
    single valid path from `@` to `x`.
    """
    config = config or TracerConfig()

    markers, error = validate_start_and_end(grid)
    if error:
        raise InvalidMapError(error)

    start, end = markers
    trace, error = traverse(
        grid,
        start,
        end,
        max_steps=config.max_steps,
        detect_cycles=config.detect_cycles,
    )
    if error:
        raise InvalidMapError(error)

    return trace
