"""Reference solutions for building a Person from text."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_usize(text: str) -> int:
    """Parse an unsigned machine-size integer, strictly."""
    if text in ("", "+"):
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text) or not text.isascii():
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class ParsePersonErrorKind(enum.Enum):
    """Why parsing a Person failed."""

    EMPTY = "empty"
    BAD_LEN = "bad_len"
    NO_NAME = "no_name"
    PARSE_INT = "parse_int"


class ParsePersonError(ValueError):
    """Raised by Person.parse; the cause holds the integer error for PARSE_INT."""

    def __init__(self, kind: ParsePersonErrorKind, message: str | None = None):
        super().__init__(message or kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> "Person":
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def from_loose(cls, text: str) -> "Person":
        """Build a Person from "name,age", falling back to the default on any problem."""
        if not text:
            return cls.default()
        fields = text.split(",")
        if len(fields) < 2:
            return cls.default()
        name, age_text = fields[0], fields[1]
        if not name:
            return cls.default()
        try:
            age = _parse_usize(age_text)
        except ValueError:
            return cls.default()
        return cls(name=name, age=age)

    @classmethod
    def parse(cls, text: str) -> "Person":
        """Parse exactly "name,age"; raise ParsePersonError otherwise."""
        if not text:
            raise ParsePersonError(ParsePersonErrorKind.EMPTY)
        fields = text.split(",")
        if len(fields) != 2:
            raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
        name, age_text = fields
        if not name:
            raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
        try:
            age = _parse_usize(age_text)
        except ValueError as exc:
            raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, str(exc)) from exc
        return cls(name=name, age=age)