"""Path tracing for ASCII maps."""

from .traversal import run, traverse
from .models import (
    Position,
    Direction,
    PathFailure,
    PathTrace,
    Result,
    TracerConfig,
    InvalidMapError,
    ERROR_MESSAGES,
)
from .characters import (
    is_direction_character,
    is_capital_letter,
    is_start_character,
    is_end_character,
    is_intersection_character,
    is_valid_forward_character,
)
from .grid import character_at, find_all, direction_between, positions_equal, neighbors, render_path
from .validation import validate_start_and_end
from .steps import StepStrategies, next_step
from .parsing import parse_map, load_map

__all__ = [
    # Main entry points
    "run",
    "traverse",
    # Models
    "Position",
    "Direction",
    "PathFailure",
    "PathTrace",
    "Result",
    "TracerConfig",
    "InvalidMapError",
    "ERROR_MESSAGES",
    # Character classes
    "is_direction_character",
    "is_capital_letter",
    "is_start_character",
    "is_end_character",
    "is_intersection_character",
    "is_valid_forward_character",
    # Grid utilities
    "character_at",
    "find_all",
    "direction_between",
    "positions_equal",
    "neighbors",
    "render_path",
    # Validation and steps
    "validate_start_and_end",
    "StepStrategies",
    "next_step",
    # Loading
    "parse_map",
    "load_map",
]
