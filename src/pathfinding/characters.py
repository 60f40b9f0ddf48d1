"""Character classification for map cells."""

from .models import (
    START,
    END,
    INTERSECTION,
    HORIZONTAL,
    VERTICAL,
    CAPITAL_LETTER_START,
    CAPITAL_LETTER_END,
)


def is_direction_character(character) -> bool:
    return character in (HORIZONTAL, VERTICAL, INTERSECTION)


def is_capital_letter(character) -> bool:
    if not isinstance(character, str) or not character:
        return False
    return CAPITAL_LETTER_START <= character <= CAPITAL_LETTER_END


def is_start_character(character) -> bool:
    return character == START


def is_end_character(character) -> bool:
    return character == END


def is_intersection_character(character) -> bool:
    return character == INTERSECTION


def is_valid_forward_character(character) -> bool:
    """True for anything the path may step onto while moving (never `@`)."""
    return (
        is_direction_character(character)
        or is_capital_letter(character)
        or is_end_character(character)
    )
