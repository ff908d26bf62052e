from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fates.types import Trajectory


@dataclass(frozen=True)
class DiagnosticsReport:
    n_steps: int
    sum_to_one_error: float
    min_probability: float
    max_probability: float
    negative_entries: int
    tol: float

    @property
    def ok(self) -> bool:
        """True when every step sums to one and no mass is negative (within tol)."""
        if self.n_steps == 0:
            return True
        return bool(
            self.sum_to_one_error <= self.tol and self.min_probability >= -self.tol
        )

    @staticmethod
    def from_trajectory(trajectory: Trajectory, *, tol: float = 1e-9) -> "DiagnosticsReport":
        if not trajectory:
            return DiagnosticsReport(
                n_steps=0,
                sum_to_one_error=0.0,
                min_probability=float("nan"),
                max_probability=float("nan"),
                negative_entries=0,
                tol=float(tol),
            )

        totals = np.array([d.total() for d in trajectory], dtype=float)
        values = np.concatenate(
            [np.fromiter((float(p) for p in d.values()), dtype=float, count=len(d)) for d in trajectory]
        )
        sum_err = float(np.max(np.abs(totals - 1.0)))
        min_p = float(np.min(values)) if values.size else float("nan")
        max_p = float(np.max(values)) if values.size else float("nan")

        return DiagnosticsReport(
            n_steps=len(trajectory),
            sum_to_one_error=sum_err,
            min_probability=min_p,
            max_probability=max_p,
            negative_entries=int(np.sum(values < -float(tol))),
            tol=float(tol),
        )
