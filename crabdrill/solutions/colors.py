"""Reference solution for building an RGB colour from integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

_CHANNEL_MAX = 255


class IntoColorErrorKind(enum.Enum):
    """Why a colour could not be built."""

    BAD_LEN = "bad_len"
    INT_CONVERSION = "int_conversion"


class IntoColorError(ValueError):
    """Raised when values cannot be turned into a Color."""

    def __init__(self, kind: IntoColorErrorKind):
        super().__init__(kind.value)
        self.kind = kind


def _channel(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise IntoColorError(IntoColorErrorKind.INT_CONVERSION)
    if not 0 <= value <= _CHANNEL_MAX:
        raise IntoColorError(IntoColorErrorKind.INT_CONVERSION)
    return value


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_triple(cls, red: int, green: int, blue: int) -> "Color":
        """Build a colour from three channel values; raise IntoColorError when out of range."""
        return cls(_channel(red), _channel(green), _channel(blue))

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "Color":
        """Build a colour from exactly three values; raise IntoColorError otherwise."""
        items = list(values)
        if len(items) != 3:
            raise IntoColorError(IntoColorErrorKind.BAD_LEN)
        red, green, blue = items
        return cls.from_triple(red, green, blue)