"""
Mixing of distributions and trajectories under model uncertainty.

When several transition functions compete, each is run on its own and the
results are pooled by model weight. The pooled trajectory is the marginal
forecast.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Sequence, Tuple

from fates.chain import extrapolate
from fates.types import Distribution, ModelEnsemble, T, Trajectory

logger = logging.getLogger(__name__)


def _total_weight(weights: Sequence[float]) -> float:
    if not weights:
        raise ValueError("Cannot mix an empty collection")
    for w in weights:
        if math.isnan(float(w)) or float(w) < 0.0:
            raise ValueError(f"Mixing weights must be non-negative, got {w}")
    total = float(sum(float(w) for w in weights))
    if not math.isfinite(total):
        raise ValueError(f"Mixing weights must have a finite sum, got {total}")
    if total <= 0.0:
        raise ValueError("At least one mixing weight must be positive")
    return total


def mix(weighted: Sequence[Tuple[Distribution[T], float]]) -> Distribution[T]:
    """
    Pool several distributions into one, weighted.

    Each distribution contributes `probability * weight / total_weight` to
    each of its outcomes. Weights need not be normalized.

    Args:
        weighted: Sequence of (distribution, weight) pairs.

    Returns:
        Pooled distribution.

    Raises:
        ValueError: If the sequence is empty, a weight is negative or NaN,
            the weights do not have a finite sum, or all weights are zero.
    """
    total = _total_weight([w for _, w in weighted])
    result: Dict[T, float] = {}
    for dist, weight in weighted:
        scale = float(weight) / total
        for outcome, p in dist.items():
            result[outcome] = result.get(outcome, 0.0) + p * scale
    return Distribution(result)


def mix_histories(weighted: Sequence[Tuple[Trajectory[T], float]]) -> Trajectory[T]:
    """
    Pool trajectories step by step.

    Args:
        weighted: Sequence of (trajectory, weight) pairs. All trajectories
            must have the same length.

    Returns:
        Trajectory whose i-th element mixes the i-th elements of the inputs.

    Raises:
        ValueError: If the inputs are empty or differ in length, or if the
            weights are invalid.
    """
    _total_weight([w for _, w in weighted])
    length = len(weighted[0][0])
    for trajectory, _ in weighted:
        if len(trajectory) != length:
            raise ValueError(
                f"All trajectories must have the same length; expected {length}, "
                f"got {len(trajectory)}"
            )

    out: List[Distribution[T]] = []
    for i in range(length):
        out.append(mix([(trajectory[i], w) for trajectory, w in weighted]))
    return tuple(out)


def extrapolate_and_mix(start: T, models: ModelEnsemble[T], n_steps: int) -> Trajectory[T]:
    """
    Extrapolate every model in an ensemble and pool the trajectories.

    Args:
        start: Initial outcome shared by all models.
        models: Distribution over transition functions.
        n_steps: Length of the returned trajectory.

    Returns:
        Marginal forecast trajectory of length `n_steps`.
    """
    logger.debug("Extrapolating %d models for %d steps from %r", len(models), n_steps, start)
    histories = [(extrapolate(start, model, n_steps), weight) for model, weight in models.items()]
    return mix_histories(histories)
