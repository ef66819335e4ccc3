from enum import Enum
from typing import TypeVar

from utils.constants import ID_MAX

Option = TypeVar('Option', bound=Enum)


def parse_choice(options: type[Option], raw: str) -> Option | None:
    """
    Map raw user text to the option at that 1-based position.

    Only a plain decimal integer in [1, len(options)] matches; anything else
    (empty, words, '0', negatives, out of range) returns None.
    """
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        return None

    number = int(text)
    for position, option in enumerate(options, start=1):
        if position == number:
            return option
    return None


def parse_id(raw: str) -> int | None:
    """A positive id that fits in an SQLite INTEGER, or None."""
    text = raw.strip()
    try:
        value = int(text)
    except ValueError:
        return None
    return value if 0 < value <= ID_MAX else None


def optional_text(raw: str) -> str | None:
    """Blank input means 'leave unchanged'."""
    text = raw.strip()
    return text or None
