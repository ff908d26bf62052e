"""
Markov-chain propagation.

A transition function maps one outcome to a distribution over next outcomes.
`step` pushes a whole distribution through it once; `extrapolate` repeats
this to produce a trajectory.
"""

from __future__ import annotations

from typing import Dict, List

from fates.types import Distribution, T, Trajectory, TransitionFunction


def step(distribution: Distribution[T], transition: TransitionFunction[T]) -> Distribution[T]:
    """
    Apply one Markov step to a distribution.

    Mass flowing from several source outcomes into the same destination is
    summed. If the input and every transition row sum to one, so does the
    result.

    Args:
        distribution: Current distribution over outcomes.
        transition: One-step kernel, outcome -> distribution of next outcomes.

    Returns:
        New distribution after one step.
    """
    result: Dict[T, float] = {}
    for current, p in distribution.items():
        for nxt, q in transition(current).items():
            result[nxt] = result.get(nxt, 0.0) + p * q
    return Distribution(result)


def extrapolate(start: T, transition: TransitionFunction[T], n_steps: int) -> Trajectory[T]:
    """
    Run the chain forward from a point mass on `start`.

    The distribution is recorded before each step, so element 0 is
    `{start: 1.0}` and element `n_steps - 1` is the distribution after
    `n_steps - 1` applications of `transition`.

    Args:
        start: Initial outcome.
        transition: One-step kernel.
        n_steps: Number of distributions to produce.

    Returns:
        Tuple of exactly `n_steps` distributions.

    Raises:
        ValueError: If n_steps is negative or not a whole number.
    """
    if int(n_steps) != n_steps:
        raise ValueError(f"n_steps must be a whole number, got {n_steps}")
    n_steps = int(n_steps)
    if n_steps < 0:
        raise ValueError(f"n_steps must be non-negative, got {n_steps}")

    history: List[Distribution[T]] = []
    current: Distribution[T] = Distribution.point(start)
    for i in range(n_steps):
        history.append(current)
        # The final step would be discarded.
        if i < n_steps - 1:
            current = step(current, transition)
    return tuple(history)
