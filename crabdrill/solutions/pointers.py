"""Reference solutions for the smart pointer exercises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Cons:
    """A cons cell; the empty list is None."""

    value: int
    rest: Cons | None = None


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding a single 1."""
    return Cons(1, None)


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Make every value non-negative, copying only when needed.

    A list is changed in place and returned. Any other sequence is returned
    unchanged if it holds no negative value, and otherwise copied into a new
    list that is changed and returned.
    """
    result = values
    for index, value in enumerate(values):
        if value < 0:
            if not isinstance(result, list):
                result = list(result)
            result[index] = -value
    return result