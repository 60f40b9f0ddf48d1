"""Data models for path tracing."""

from typing import Any, List, Optional, NamedTuple, Sequence, Union
from pydantic import BaseModel, Field


# A map is a list of rows; a row is a list of single characters or a plain string
Row = Union[Sequence[str], str]
Grid = Sequence[Row]


# Map vocabulary
START = "@"
END = "x"
INTERSECTION = "+"
HORIZONTAL = "-"
VERTICAL = "|"
CAPITAL_LETTER_START = "A"
CAPITAL_LETTER_END = "Z"


# Error codes
INVALID_GRID = "INVALID_GRID"
INVALID_CHARACTER = "INVALID_CHARACTER"
INVALID_POSITION = "INVALID_POSITION"
START_OR_END_NOT_FOUND = "START_OR_END_NOT_FOUND"
MULTIPLE_START_OR_END = "MULTIPLE_START_OR_END"
CHARACTER_NOT_FOUND_AT_CURRENT_POSITION = "CHARACTER_NOT_FOUND_AT_CURRENT_POSITION"
BROKEN_PATH = "BROKEN_PATH"
MULTIPLE_STARTING_PATHS = "MULTIPLE_STARTING_PATHS"
FAKE_TURN = "FAKE_TURN"
FORK_IN_PATH = "FORK_IN_PATH"
PATH_DID_NOT_TERMINATE = "PATH_DID_NOT_TERMINATE"

ERROR_MESSAGES = {
    INVALID_GRID: "Invalid map",
    INVALID_CHARACTER: "Invalid character",
    INVALID_POSITION: "Invalid position",
    START_OR_END_NOT_FOUND: "Start or end not found",
    MULTIPLE_START_OR_END: "Multiple start or end characters found",
    CHARACTER_NOT_FOUND_AT_CURRENT_POSITION: "Character not found at current position",
    BROKEN_PATH: "Broken path",
    MULTIPLE_STARTING_PATHS: "Multiple starting paths",
    FAKE_TURN: "Fake turn",
    FORK_IN_PATH: "Fork in path",
    PATH_DID_NOT_TERMINATE: "Path did not terminate",
}


class Position(NamedTuple):
    """A cell on the map."""
    row: int
    column: int


class Direction(NamedTuple):
    """A step between two cells."""
    vertical: int
    horizontal: int


UP = Direction(-1, 0)
DOWN = Direction(1, 0)
LEFT = Direction(0, -1)
RIGHT = Direction(0, 1)

# Neighbor lookup order
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class PathFailure(BaseModel):
    """A single tracing failure."""
    code: str
    message: str
    position: Optional[Position] = None


def failure(code: str, position: Optional[Position] = None) -> PathFailure:
    """Build a PathFailure carrying the canonical message for `code`."""
    return PathFailure(code=code, message=ERROR_MESSAGES[code], position=position)


class Result(NamedTuple):
    """
    Outcome of a fallible call: a value or a failure, never both.

    Unpacks like the other tuple-returning helpers:

        positions, error = find_all(grid, "@")
    """
    value: Any = None
    error: Optional[PathFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class InvalidMapError(ValueError):
    """Raised by the public entry point when a map cannot be traced."""

    def __init__(self, path_failure: PathFailure):
        super().__init__(path_failure.message)
        self.failure = path_failure

    @property
    def code(self) -> str:
        return self.failure.code


class PathTrace(BaseModel):
    """Result of a successful traversal."""
    character_path: List[str] = Field(default_factory=list)
    letters: List[str] = Field(default_factory=list)
    positions: List[Position] = Field(default_factory=list)
    steps: int = 0

    @property
    def path_string(self) -> str:
        return "".join(self.character_path)

    @property
    def letters_string(self) -> str:
        return "".join(self.letters)


class TracerConfig(BaseModel):
    """Configuration for a tracing run."""
    max_steps: Optional[int] = Field(None, ge=1)
    detect_cycles: bool = True
