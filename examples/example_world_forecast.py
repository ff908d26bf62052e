#!/usr/bin/env python3
"""
Example 2: World Forecast

Builds the AGI / nuclear / pandemic ensemble, extrapolates it for a century
and prints the probability of each fate every decade.
"""

import sys
import os

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fates import DiagnosticsReport, extrapolate_and_mix, mass_timeline, outcome_timeline
from fates.world import DEAD, HEAVEN, RESET, START_YEAR, build_models, is_year

N_YEARS = 100

print("=" * 60)
print("Example 2: World Forecast")
print("=" * 60)

ensemble = build_models(work=False)
print(f"\nEnsemble size: {len(ensemble)} transition functions")

history = extrapolate_and_mix(START_YEAR, ensemble, N_YEARS)

heaven = outcome_timeline(history, HEAVEN)
dead = outcome_timeline(history, DEAD)
reset = outcome_timeline(history, RESET)
normal = mass_timeline(history, is_year)

print(f"\n{'year':>6} {'heaven':>8} {'dead':>8} {'reset':>8} {'normal':>8}")
for i in range(0, N_YEARS, 10):
    print(f"{START_YEAR + i:>6} {heaven[i]:>8.4f} {dead[i]:>8.4f} {reset[i]:>8.4f} {normal[i]:>8.4f}")

report = DiagnosticsReport.from_trajectory(history)
print(f"\nDiagnostics: max sum-to-one error={report.sum_to_one_error:.2e}, ok={report.ok}")
