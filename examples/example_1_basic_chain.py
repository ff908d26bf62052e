#!/usr/bin/env python3
"""
Example 1: Basic Markov Chain

This example demonstrates the generic engine:
- Defining a transition function over arbitrary outcomes
- Extrapolating a trajectory from a start state
- Mixing two competing models into one forecast
"""

import sys
import os

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fates import DiagnosticsReport, Distribution, extrapolate, extrapolate_and_mix

print("=" * 60)
print("Example 1: Basic Markov Chain")
print("=" * 60)


def make_weather(p_stay: float):
    """A two-state weather chain with an absorbing "flood" state."""

    def transition(state):
        if state == "flood":
            return Distribution.point("flood")
        other = "rain" if state == "sun" else "sun"
        p_flood = 0.02 if state == "rain" else 0.0
        return Distribution(
            {state: p_stay - p_flood, other: 1.0 - p_stay, "flood": p_flood}
        )

    return transition


# A single model is extrapolated.
persistent = make_weather(0.8)
trajectory = extrapolate("sun", persistent, 6)

print("\nSingle model (p_stay=0.8):")
for day, dist in enumerate(trajectory):
    row = ", ".join(f"{k}={v:.3f}" for k, v in sorted(dist.items()))
    print(f"  day {day}: {row}")

# Two competing models are mixed 3:1.
ensemble = Distribution({persistent: 3.0, make_weather(0.5): 1.0})
mixed = extrapolate_and_mix("sun", ensemble, 6)

print("\nMixed ensemble (3:1):")
for day, dist in enumerate(mixed):
    row = ", ".join(f"{k}={v:.3f}" for k, v in sorted(dist.items()))
    print(f"  day {day}: {row}")

report = DiagnosticsReport.from_trajectory(mixed)
print(f"\nDiagnostics: max sum-to-one error={report.sum_to_one_error:.2e}, ok={report.ok}")
