"""
Unit tests for the combined per-year transition function.
"""

import math

import pytest

from fates.world.catalog import AGI_DOOMED, NUKES_BASELINE, PLAGUE_ACTIVE, PLAGUE_PLACEBO
from fates.world.submodels import AGIModel
from fates.world.transition import combined_transition
from fates.world.types import DEAD, HEAVEN, RESET


def _sigmoid(x: float) -> float:
    return 1.0 / (1.0 + math.exp(-x))


@pytest.fixture
def transition():
    return combined_transition(AGI_DOOMED, NUKES_BASELINE, PLAGUE_ACTIVE)


class TestCombinedTransition:
    """Test suite for CombinedTransition."""

    @pytest.mark.parametrize("terminal", [DEAD, HEAVEN, RESET])
    def test_terminal_outcomes_absorb(self, transition, terminal: str) -> None:
        assert transition(terminal) == {terminal: 1.0}

    def test_year_outcomes(self, transition) -> None:
        s = _sigmoid((2022 - 2080) / 20)
        out = transition(2022)

        assert set(out) == {HEAVEN, DEAD, RESET, 2023}
        assert math.isclose(out[HEAVEN], 0.05 * s)
        assert math.isclose(out[DEAD], 0.05 * (1 - s) + 0.01 * 0.1 + 0.005 * 0.1)
        assert math.isclose(out[RESET], 0.01 * 0.9 + 0.005 * 0.9)
        assert math.isclose(out.total(), 1.0, abs_tol=1e-12)

    def test_placebo_adds_nothing(self) -> None:
        with_placebo = combined_transition(AGI_DOOMED, NUKES_BASELINE, PLAGUE_PLACEBO)(2030)
        assert math.isclose(with_placebo[RESET], 0.01 * 0.9)

    def test_saturated_hazard_stays_a_distribution(self) -> None:
        certain = AGIModel(
            name="certain",
            base_rate=1.0,
            doubling_years=10,
            midpoint_year=2080,
            midpoint_scale=20,
            dead_share=1.0,
            reset_share=0.0,
        )
        out = combined_transition(certain, NUKES_BASELINE, PLAGUE_ACTIVE)(2022)

        assert out[2023] == 0.0
        assert all(p >= 0.0 for p in out.values())
        assert math.isclose(out.total(), 1.0, abs_tol=1e-12)
        s = _sigmoid((2022 - 2080) / 20)
        assert math.isclose(out[HEAVEN], s / 1.015)
        assert math.isclose(out[DEAD], ((1 - s) + 0.001 + 0.0005) / 1.015)
        assert math.isclose(out[RESET], (0.009 + 0.0045) / 1.015)

    def test_unknown_outcome_raises(self, transition) -> None:
        with pytest.raises(ValueError, match="Unknown world outcome"):
            transition("purgatory")
        with pytest.raises(ValueError):
            transition(True)

    def test_equal_submodels_give_equal_transitions(self) -> None:
        a = combined_transition(AGI_DOOMED, NUKES_BASELINE, PLAGUE_ACTIVE)
        b = combined_transition(AGI_DOOMED, NUKES_BASELINE, PLAGUE_ACTIVE)
        assert a == b
        assert hash(a) == hash(b)
