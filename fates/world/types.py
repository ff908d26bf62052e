"""
Outcomes of the world model.

An ordinary year is an `int`. The three ways the ordinary world can end are
string sentinels; once reached, they are never left.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Union

from fates.odds import Odds

DEAD = "dead"
HEAVEN = "heaven"
RESET = "reset"

TERMINAL_OUTCOMES: FrozenSet[str] = frozenset({DEAD, HEAVEN, RESET})

Year = int
World = Union[Year, str]


def is_year(world: World) -> bool:
    # bool is an int subclass but never a year.
    return isinstance(world, int) and not isinstance(world, bool)


def is_terminal(world: World) -> bool:
    return isinstance(world, str) and world in TERMINAL_OUTCOMES


@dataclass(frozen=True)
class SubModelForecast:
    """
    One sub-model's view of a single year.

    Attributes:
        p: Probability that the sub-model's event happens this year.
        odds: How that probability splits across heaven, dead and reset.
    """

    p: float
    odds: Odds

    def __post_init__(self) -> None:
        p = float(self.p)
        if not (0.0 <= p <= 1.0):
            raise ValueError(f"Event probability must be in [0, 1], got {p}")
        object.__setattr__(self, "p", p)
