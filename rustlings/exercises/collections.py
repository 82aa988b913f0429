"""Solutions to the hash map exercises: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_U8 = re.compile(r"\+?[0-9]+")


def default_fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    return {"banana": 2, "apple": 2, "mango": 2}


class Fruit(enum.Enum):
    """Kinds of fruit that can go into a cake."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Add one of every kind of fruit that is missing; existing counts are kept."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)
    return basket


@dataclass
class Team:
    """A team with the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _U8.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(text)
    if goals > 255:
        raise ValueError(f"goal count out of range: {text!r}")
    return goals


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team = scores.setdefault(team_1_name, Team(team_1_name))
        team.goals_scored += team_1_score
        team.goals_conceded += team_2_score

        team = scores.setdefault(team_2_name, Team(team_2_name))
        team.goals_scored += team_2_score
        team.goals_conceded += team_1_score
    return scores