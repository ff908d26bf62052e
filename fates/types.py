"""
Core data types for ensemble Markov forecasts.

A `Distribution` maps outcomes to probability mass. A `Trajectory` is the
time-indexed sequence of distributions produced by repeatedly applying a
`TransitionFunction` to a start state. A model ensemble is itself a
distribution whose outcomes are transition functions.
"""

from __future__ import annotations

from typing import (
    Callable,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    Tuple,
    TypeVar,
    Union,
)

T = TypeVar("T", bound=Hashable)


class Distribution(Mapping[T, float]):
    """
    Immutable mapping from outcome to probability mass.

    Outcomes can be any hashable value. Missing outcomes carry no mass:
    `get(outcome)` returns None and `get(outcome, 0.0)` returns 0.0.

    The container does not force its values to sum to one, since the mixer
    also accepts unnormalized weights. Use `total()` to check.
    """

    def __init__(
        self,
        probs: Union[Mapping[T, float], Iterable[Tuple[T, float]], None] = None,
    ) -> None:
        data: Dict[T, float] = {}
        if probs is not None:
            items = probs.items() if isinstance(probs, Mapping) else probs
            for outcome, p in items:
                data[outcome] = float(p)
        self._probs = data

    @classmethod
    def point(cls, outcome: T) -> "Distribution[T]":
        """Return the point mass `{outcome: 1.0}`."""
        return cls({outcome: 1.0})

    def __getitem__(self, outcome: T) -> float:
        return self._probs[outcome]

    def __iter__(self) -> Iterator[T]:
        return iter(self._probs)

    def __len__(self) -> int:
        return len(self._probs)

    def __repr__(self) -> str:
        return f"Distribution({self._probs!r})"

    def total(self) -> float:
        """Sum of all probability mass."""
        return float(sum(self._probs.values()))

    def to_dict(self) -> Dict[T, float]:
        return dict(self._probs)


Trajectory = Tuple[Distribution[T], ...]
TransitionFunction = Callable[[T], Distribution[T]]
ModelEnsemble = Distribution[Callable[[T], Distribution[T]]]
