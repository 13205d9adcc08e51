"""Reference solution for the option exercise."""

from __future__ import annotations

FULL_STOCK = 5


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at a given hour: 5 before 22, 0 until 23, None for invalid hours."""
    if time_of_day < 0:
        raise ValueError(f"{time_of_day} is not a valid hour")
    if time_of_day <= 21:
        return FULL_STOCK
    if time_of_day <= 23:
        return 0
    return None