"""Reference solutions for the hash map exercises."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and five fruits in total."""
    return {"banana": 2, "Apple": 2, "Mango": 1}


class Fruit(enum.Enum):
    """Kinds of fruit for the cake basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


_NEW_FRUIT_COUNT = 4


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add four of every kind of fruit not yet in the basket, leaving the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_COUNT)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def _record(self, scored: int, conceded: int) -> None:
        self.goals_scored = _add_u8(self.goals_scored, scored)
        self.goals_conceded = _add_u8(self.goals_conceded, conceded)


def _parse_u8(text: str) -> int:
    if text in ("", "+"):
        raise ValueError("cannot parse integer from empty string")
    if not text.isascii() or not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _add_u8(left: int, right: int) -> int:
    total = left + right
    if total > _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return total


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_u8(fields[2])
        team_2_score = _parse_u8(fields[3])

        scores.setdefault(team_1_name, Team())._record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team())._record(team_2_score, team_1_score)
    return scores