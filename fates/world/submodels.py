"""
Parametrized risk sub-models.

Each sub-model is a frozen, callable dataclass: calling it with a year
returns a `SubModelForecast` with the probability that its event happens
that year and the odds of the event ending in heaven, death or reset.
`acceleration` multiplies the annual hazard; it models extra collective
effort speeding the event up.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from scipy.special import expit

from fates.odds import Odds
from fates.world.types import SubModelForecast, Year


def _check_share(name: str, value: float) -> None:
    if not (0.0 <= float(value) <= 1.0):
        raise ValueError(f"{name} must be in [0, 1], got {value}")


def _check_non_negative(name: str, value: float) -> None:
    if float(value) < 0.0:
        raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class AGIModel:
    """
    AGI arrival hazard with a time-dependent chance of alignment.

    The annual probability of AGI starts at `base_rate` in `reference_year`
    and doubles every `doubling_years`, capped at 1. Whether arrival goes well
    follows a logistic curve centred on `midpoint_year` with width
    `midpoint_scale`: the later AGI arrives, the likelier it is that safety
    was solved first (heaven). The remaining (failure) mass is split into
    dead and reset by `dead_share` and `reset_share`. With both shares at 0,
    arrival always goes well.
    """

    name: str
    base_rate: float
    doubling_years: float
    midpoint_year: float
    midpoint_scale: float
    dead_share: float
    reset_share: float
    reference_year: Year = 2022
    acceleration: float = 1.0

    def __post_init__(self) -> None:
        _check_share("base_rate", self.base_rate)
        if float(self.doubling_years) <= 0.0:
            raise ValueError(f"doubling_years must be positive, got {self.doubling_years}")
        if float(self.midpoint_scale) <= 0.0:
            raise ValueError(f"midpoint_scale must be positive, got {self.midpoint_scale}")
        _check_share("dead_share", self.dead_share)
        _check_share("reset_share", self.reset_share)
        _check_non_negative("acceleration", self.acceleration)

    def hazard(self, year: Year) -> float:
        growth = 2.0 ** ((year - self.reference_year) / self.doubling_years)
        return min(1.0, self.acceleration * self.base_rate * growth)

    def alignment(self, year: Year) -> float:
        """Probability that AGI arriving in `year` goes well."""
        return float(expit((year - self.midpoint_year) / self.midpoint_scale))

    def __call__(self, year: Year) -> SubModelForecast:
        s = self.alignment(year)
        return SubModelForecast(
            p=self.hazard(year),
            odds=Odds(
                heaven=s,
                dead=(1.0 - s) * self.dead_share,
                reset=(1.0 - s) * self.reset_share,
            ),
        )

    def with_acceleration(self, factor: float) -> "AGIModel":
        return replace(self, acceleration=float(factor))


@dataclass(frozen=True)
class _ConstantHazardModel:
    name: str
    annual_probability: float
    dead: float
    reset: float
    acceleration: float = 1.0

    def __post_init__(self) -> None:
        _check_share("annual_probability", self.annual_probability)
        _check_non_negative("dead", self.dead)
        _check_non_negative("reset", self.reset)
        _check_non_negative("acceleration", self.acceleration)

    def hazard(self, year: Year) -> float:
        return min(1.0, self.acceleration * self.annual_probability)

    def __call__(self, year: Year) -> SubModelForecast:
        return SubModelForecast(p=self.hazard(year), odds=Odds(dead=self.dead, reset=self.reset))

    def with_acceleration(self, factor: float):
        return replace(self, acceleration=float(factor))


@dataclass(frozen=True)
class NukeModel(_ConstantHazardModel):
    """Constant annual probability of nuclear war; never ends in heaven."""


@dataclass(frozen=True)
class PlagueModel(_ConstantHazardModel):
    """Constant annual probability of a civilization-scale pandemic; never ends in heaven."""
