"""
Unit tests for the AGI, nuke and plague sub-models.
"""

import math

import pytest

from fates.odds import Odds
from fates.world.catalog import AGI_DOOMED, AGI_MODERATE_RISK, AGI_WAY_HARDER, NUKES_BASELINE, PLAGUE_PLACEBO
from fates.world.submodels import AGIModel, NukeModel, PlagueModel


def _sigmoid(x: float) -> float:
    return 1.0 / (1.0 + math.exp(-x))


class TestAGIModel:
    """Test suite for AGIModel."""

    def test_hazard_doubles(self) -> None:
        assert math.isclose(AGI_DOOMED(2022).p, 0.05)
        assert math.isclose(AGI_DOOMED(2032).p, 0.10)
        assert math.isclose(AGI_WAY_HARDER(2052).p, 0.002)

    def test_hazard_capped_at_one(self) -> None:
        assert AGI_DOOMED(2200).p == 1.0

    def test_odds_split(self) -> None:
        s = _sigmoid((2040 - 2030) / 10)
        forecast = AGI_MODERATE_RISK(2040)
        assert math.isclose(forecast.odds.heaven, s)
        assert math.isclose(forecast.odds.dead, (1 - s) * 2 / 3)
        assert math.isclose(forecast.odds.reset, (1 - s) / 3)

    def test_solved_safety_only_heaven(self) -> None:
        odds = AGI_WAY_HARDER(2022).odds.normalized()
        assert odds == Odds(heaven=1.0, dead=0.0, reset=0.0)

    def test_acceleration(self) -> None:
        faster = AGI_DOOMED.with_acceleration(2.0)
        assert faster.acceleration == 2.0
        assert AGI_DOOMED.acceleration == 1.0
        assert math.isclose(faster(2022).p, 0.10)
        assert faster(2022).odds == AGI_DOOMED(2022).odds

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"base_rate": -0.1},
            {"base_rate": 1.5},
            {"doubling_years": 0},
            {"midpoint_scale": -1},
            {"dead_share": 1.2},
            {"acceleration": -1.0},
        ],
    )
    def test_validation(self, kwargs: dict) -> None:
        params = dict(
            name="x",
            base_rate=0.01,
            doubling_years=10,
            midpoint_year=2050,
            midpoint_scale=10,
            dead_share=1.0,
            reset_share=0.0,
        )
        params.update(kwargs)
        with pytest.raises(ValueError):
            AGIModel(**params)

    def test_hashable(self) -> None:
        assert {AGI_DOOMED: 1}[AGI_DOOMED.with_acceleration(1.0)] == 1


class TestConstantHazardModels:
    """Test suite for NukeModel and PlagueModel."""

    def test_nuke_forecast(self) -> None:
        forecast = NUKES_BASELINE(2050)
        assert forecast.p == 0.01
        assert forecast.odds == Odds(heaven=0.0, dead=0.1, reset=0.9)

    def test_placebo_never_fires(self) -> None:
        assert PLAGUE_PLACEBO(2022).p == 0.0

    def test_acceleration(self) -> None:
        plague = PlagueModel(name="p", annual_probability=0.2, dead=1.0, reset=1.0)
        assert math.isclose(plague.with_acceleration(3.0)(2022).p, 0.6)
        assert plague.with_acceleration(10.0)(2022).p == 1.0

    def test_validation(self) -> None:
        with pytest.raises(ValueError):
            NukeModel(name="n", annual_probability=2.0, dead=0.1, reset=0.9)
        with pytest.raises(ValueError):
            NukeModel(name="n", annual_probability=0.1, dead=-0.1, reset=0.9)
