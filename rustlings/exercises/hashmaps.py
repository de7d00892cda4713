"""Hash map exercises: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import MutableMapping

_U8_MAX = 255


def fruit_basket() -> dict[str, int]:
    """Return a basket with at least three kinds and five fruits."""
    return {"banana": 2, "mango": 4, "a": 17}


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add 120 of every fruit kind not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 120)


@dataclass
class Team:
    """A team with the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.lstrip("+").isdigit() or text.count("+") > 1:
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _add_goals(current: int, extra: int) -> int:
    total = current + extra
    if total > _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return total


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.goals_scored = _add_goals(team_1.goals_scored, team_1_score)
        team_1.goals_conceded = _add_goals(team_1.goals_conceded, team_2_score)

        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.goals_scored = _add_goals(team_2.goals_scored, team_2_score)
        team_2.goals_conceded = _add_goals(team_2.goals_conceded, team_1_score)
    return scores