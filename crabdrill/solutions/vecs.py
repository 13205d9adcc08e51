"""Reference solutions for the vector exercises."""

from __future__ import annotations

from typing import Iterable


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Double every element, building the result in a loop."""
    result = list(values)
    for index, element in enumerate(result):
        result[index] = element * 2
    return result


def vec_map(values: Iterable[int]) -> list[int]:
    """Double every element by mapping."""
    return [element + element for element in values]