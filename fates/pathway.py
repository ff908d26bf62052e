"""
Read helpers for trajectories.

Distributions omit outcomes that carry no mass, so these helpers read
missing outcomes as zero and return per-step arrays that can be plotted or
compared directly.
"""

from __future__ import annotations

from typing import Callable, Hashable

import numpy as np

from fates.types import Distribution, T, Trajectory


def outcome_timeline(trajectory: Trajectory[T], outcome: Hashable) -> np.ndarray:
    """
    Probability of one outcome at every step.

    Args:
        trajectory: Sequence of distributions.
        outcome: Outcome to read.

    Returns:
        Float array of length `len(trajectory)`; 0.0 where the outcome is absent.
    """
    return np.array([float(d.get(outcome, 0.0)) for d in trajectory], dtype=float)


def mass_timeline(trajectory: Trajectory[T], predicate: Callable[[T], bool]) -> np.ndarray:
    """
    Total probability of all outcomes matching `predicate` at every step.
    """
    return np.array(
        [sum(float(p) for o, p in d.items() if predicate(o)) for d in trajectory],
        dtype=float,
    )


def final_distribution(trajectory: Trajectory[T]) -> Distribution[T]:
    """
    Return the last distribution of a trajectory.

    Raises:
        ValueError: If the trajectory is empty.
    """
    if not trajectory:
        raise ValueError("trajectory cannot be empty")
    return trajectory[-1]
