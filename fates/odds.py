"""
Odds normalization.

Sub-models describe how an event's probability mass splits across outcomes
with relative weights ("odds") rather than with probabilities that already
sum to one. This module turns such weights into probabilities.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Hashable, Mapping, TypeVar, Union

from fates.types import Distribution

K = TypeVar("K", bound=Hashable)


def _checked_total(values: Mapping[K, float]) -> float:
    for key, v in values.items():
        if float(v) < 0.0:
            raise ValueError(f"Weight for {key!r} must be non-negative, got {v}")
    total = float(sum(float(v) for v in values.values()))
    if not math.isfinite(total) or total <= 0.0:
        raise ValueError(f"Weights must have a positive finite sum, got {total}")
    return total


def normalize(weights: Mapping[K, float]) -> Distribution[K]:
    """
    Scale a mapping of non-negative weights so that it sums to one.

    Args:
        weights: Mapping from outcome to relative weight.

    Returns:
        Distribution with the same keys and values divided by their sum.

    Raises:
        ValueError: If any weight is negative or the weights sum to zero.
    """
    total = _checked_total(weights)
    return Distribution((k, float(v) / total) for k, v in weights.items())


@dataclass(frozen=True)
class Odds:
    """
    Relative weights of the three ways an event can end the ordinary world.

    Only the ratios matter. An all-zero record is invalid once it is asked
    for fractions.
    """

    heaven: float = 0.0
    dead: float = 0.0
    reset: float = 0.0

    def __post_init__(self) -> None:
        for name in ("heaven", "dead", "reset"):
            v = float(getattr(self, name))
            if math.isnan(v) or v < 0.0:
                raise ValueError(f"Odds weight {name!r} must be non-negative, got {v}")
            object.__setattr__(self, name, v)

    def total(self) -> float:
        return self.heaven + self.dead + self.reset

    def normalized(self) -> "Odds":
        """Return the same odds scaled to sum to one."""
        total = self.total()
        if not math.isfinite(total) or total <= 0.0:
            raise ValueError(f"Odds must have a positive finite sum, got {total}")
        return Odds(heaven=self.heaven / total, dead=self.dead / total, reset=self.reset / total)

    def to_dict(self) -> Dict[str, float]:
        return {"heaven": self.heaven, "dead": self.dead, "reset": self.reset}


def probability_from_odds(odds: Union[Odds, Mapping[K, float]], key: Union[str, K]) -> float:
    """
    Return the fraction of the total odds carried by `key`.

    Args:
        odds: An `Odds` record or any mapping of relative weights.
        key: Field name (for `Odds`) or mapping key.

    Raises:
        ValueError: If the odds sum to zero.
        KeyError: If `key` is not part of the record.
    """
    if isinstance(odds, Odds):
        values: Mapping = odds.to_dict()
    else:
        values = odds
    total = _checked_total(values)
    return float(values[key]) / total
