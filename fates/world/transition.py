"""
Per-year transition function of the world model.

A year either passes uneventfully (the world moves to `year + 1`) or one of
the sub-models' events ends the ordinary world. Sub-model contributions are
added per outcome; the terminal outcomes absorb.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from fates.types import Distribution
from fates.world.types import DEAD, HEAVEN, RESET, SubModelForecast, World, Year, is_terminal, is_year

SubModel = Callable[[Year], SubModelForecast]


@dataclass(frozen=True)
class CombinedTransition:
    """
    Transition function combining an AGI, a nuke and a plague sub-model.

    For a year y, with p_m the event probability of sub-model m and
    f_m(o) = probability_from_odds(odds_m, o), the fraction of its odds on
    outcome o:

        P(heaven) = p_agi * f_agi(heaven)
        P(dead)   = sum_m p_m * f_m(dead)
        P(reset)  = sum_m p_m * f_m(reset)
        P(y + 1)  = 1 - P(heaven) - P(dead) - P(reset)

    If the event probabilities add up to more than one, they are scaled down
    to sum to one and nothing survives to `y + 1`.
    """

    agi: SubModel
    nukes: SubModel
    plague: SubModel

    def __call__(self, world: World) -> Distribution[World]:
        if is_terminal(world):
            return Distribution.point(world)
        if not is_year(world):
            raise ValueError(f"Unknown world outcome: {world!r}")

        year: Year = world
        p_heaven = 0.0
        p_dead = 0.0
        p_reset = 0.0
        for forecast in (self.agi(year), self.nukes(year), self.plague(year)):
            if forecast.p == 0.0:
                continue
            fractions = forecast.odds.normalized()
            p_heaven += forecast.p * fractions.heaven
            p_dead += forecast.p * fractions.dead
            p_reset += forecast.p * fractions.reset

        total = p_heaven + p_dead + p_reset
        if total > 1.0:
            p_heaven, p_dead, p_reset = p_heaven / total, p_dead / total, p_reset / total
            survive = 0.0
        else:
            survive = 1.0 - total

        return Distribution(
            {
                HEAVEN: p_heaven,
                DEAD: p_dead,
                RESET: p_reset,
                year + 1: survive,
            }
        )


def combined_transition(agi: SubModel, nukes: SubModel, plague: SubModel) -> CombinedTransition:
    """Build the per-year transition function for one (agi, nukes, plague) choice."""
    return CombinedTransition(agi=agi, nukes=nukes, plague=plague)
