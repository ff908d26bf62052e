"""
Integration tests for the world forecast.

Tests that the ensemble, extrapolation and mixing work together: the
forecast stays a probability distribution, terminal mass only grows, and
speeding up hazards never lowers the probability of extinction.
"""

import numpy as np
import pytest

from fates.diagnostics import DiagnosticsReport
from fates.mixing import extrapolate_and_mix
from fates.pathway import mass_timeline, outcome_timeline
from fates.world import DEAD, HEAVEN, RESET, START_YEAR, build_model_ensemble, build_models, is_year


@pytest.fixture(scope="module")
def baseline():
    return extrapolate_and_mix(START_YEAR, build_models(work=False), 100)


class TestWorldForecast:
    """Test suite for the mixed world forecast."""

    def test_shape_and_start(self, baseline) -> None:
        assert len(baseline) == 100
        assert baseline[0] == {START_YEAR: 1.0}
        assert baseline[0].get(DEAD) is None

    def test_forecast_is_a_distribution(self, baseline) -> None:
        report = DiagnosticsReport.from_trajectory(baseline)
        assert report.ok
        assert report.negative_entries == 0

    def test_single_year_outcome_per_step(self, baseline) -> None:
        for i, dist in enumerate(baseline):
            years = [o for o in dist if is_year(o)]
            assert years == [START_YEAR + i]

    def test_terminal_mass_non_decreasing(self, baseline) -> None:
        for outcome in (DEAD, HEAVEN, RESET):
            timeline = outcome_timeline(baseline, outcome)
            assert np.all(np.diff(timeline) >= -1e-12)

    def test_alive_mass_non_increasing(self, baseline) -> None:
        alive = mass_timeline(baseline, is_year)
        assert alive[0] == 1.0
        assert np.all(np.diff(alive) <= 1e-12)

    @pytest.mark.parametrize("families", [("agi",), ("agi", "nukes", "plague")])
    def test_acceleration_never_lowers_death(self, baseline, families) -> None:
        n = len(baseline)
        slow = extrapolate_and_mix(START_YEAR, build_model_ensemble(1.0, accelerate=families), n)
        fast = extrapolate_and_mix(START_YEAR, build_model_ensemble(2.0, accelerate=families), n)

        dead_slow = outcome_timeline(slow, DEAD)
        dead_fast = outcome_timeline(fast, DEAD)
        assert np.all(dead_fast >= dead_slow - 1e-12)
        assert dead_fast[1] > dead_slow[1]

    def test_work_flag_changes_forecast(self, baseline) -> None:
        working = extrapolate_and_mix(START_YEAR, build_models(work=True), len(baseline))
        dead_working = outcome_timeline(working, DEAD)
        dead_idle = outcome_timeline(baseline, DEAD)
        assert dead_working[0] == dead_idle[0] == 0.0
        assert np.all(dead_working >= dead_idle - 1e-12)
        assert dead_working[1] > dead_idle[1]
        delta = outcome_timeline(working, HEAVEN)[-1] - outcome_timeline(baseline, HEAVEN)[-1]
        assert np.isfinite(delta)
        assert abs(delta) < 1e-5
