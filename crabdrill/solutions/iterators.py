"""Reference solutions for the iterator exercises."""

from __future__ import annotations

import enum
import math
from typing import Iterable, Mapping, Sequence

_U64_MAX = 2**64 - 1


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that could not be carried out exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide a by b if it divides evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def result_with_list() -> list[int]:
    """All quotients, or the first DivisionError raised."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def _attempt(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def list_of_results() -> list[int | DivisionError]:
    """Each quotient, or the DivisionError in its place."""
    return [_attempt(n, _DIVISOR) for n in _NUMBERS]


def factorial(num: int) -> int:
    """num! for an unsigned 64-bit value; raise OverflowError when it does not fit."""
    if num < 0:
        raise ValueError(f"{num} is not an unsigned integer")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(enum.Enum):
    """How far an exercise has come."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using a loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an iterator."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(collection: Sequence[Mapping[str, Progress]], value: Progress) -> int:
    """Count entries with the given progress across maps using loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using iterators."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)