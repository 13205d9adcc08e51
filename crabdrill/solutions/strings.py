"""Reference solutions for the string exercises."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is green, blue or red."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")