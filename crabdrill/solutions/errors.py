"""Reference solutions for the error handling exercises."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_SIGNED = re.compile(r"[+-]?[0-9]+")
_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_signed(text: str, bounds: tuple[int, int]) -> int:
    """Parse a signed integer strictly; ValueError carries the reason."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not text.isascii() or not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    low, high = bounds
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Nametag text for a non-empty name; raise ValueError for an empty one."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of the typed quantity; raise ValueError if it is not a number."""
    qty = _parse_signed(item_quantity, _I32)
    cost = qty * COST_PER_ITEM + PROCESSING_FEE
    if not _I32[0] <= cost <= _I32[1]:
        raise OverflowError("attempt to multiply with overflow")
    return cost


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Tokens left after buying; raise ValueError when the purchase is unaffordable."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationErrorKind(enum.Enum):
    """Why a positive non-zero integer could not be made."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """Raised for a value that is not positive."""

    def __init__(self, kind: CreationErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing failed either as an integer or as a positive non-zero value."""

    def __init__(
        self,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ):
        if (creation is None) == (parse_int is None):
            raise TypeError("exactly one underlying error is required")
        cause = creation if creation is not None else parse_int
        super().__init__(str(cause))
        self.creation = creation
        self.parse_int = parse_int

    @classmethod
    def from_creation(cls, error: CreationError) -> "ParsePosNonzeroError":
        return cls(creation=error)

    @classmethod
    def from_parse_int(cls, error: ValueError) -> "ParsePosNonzeroError":
        return cls(parse_int=error)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError on failure."""
    try:
        value = _parse_signed(text, _I64)
    except ValueError as exc:
        raise ParsePosNonzeroError.from_parse_int(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError.from_creation(exc) from exc