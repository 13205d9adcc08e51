"""Reference solutions for the three quizzes."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

APPLE_PRICE = 2


def calculate_price_of_apples(amount: int) -> int:
    """Apples cost 2 each, or 1 each when buying more than 40."""
    if amount > 40:
        return amount
    return APPLE_PRICE * amount


class Command(enum.Enum):
    """String transformations without arguments."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int


def transformer(items: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        if isinstance(command, Append):
            output.append(text + "bar" * command.times)
        elif command is Command.UPPERCASE:
            output.append(text.upper())
        elif command is Command.TRIM:
            output.append(text.strip())
        else:
            raise TypeError(f"unknown command: {command!r}")
    return output


_GRADE_TABLE = (
    (1.0, 1.0, "F-"),
    (1.1, 1.5, "F"),
    (1.6, 2.0, "F+"),
    (2.1, 2.5, "D-"),
    (2.6, 3.0, "D"),
    (3.1, 3.5, "C"),
    (3.6, 4.0, "B"),
    (4.1, 4.5, "A-"),
    (4.6, 5.0, "A"),
    (5.1, 5.5, "A+"),
)


def alphabetical_grade(grade: float) -> str:
    """Map a numeric grade onto a letter grade."""
    return next(
        (letter for low, high, letter in _GRADE_TABLE if low <= grade <= high),
        "Invalid Grade",
    )


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ReportCard(ABC):
    """A printable report card."""

    @abstractmethod
    def print(self) -> str:
        """Return the report line."""


@dataclass
class NumericalReportCard(ReportCard):
    grade: float
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - achieved a grade of "
            f"{_format_number(self.grade)}"
        )


@dataclass
class AlphabeticalReportCard(ReportCard):
    grade: float
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - achieved a grade of "
            f"{alphabetical_grade(self.grade)}"
        )