"""
World model: years pass until AGI, nuclear war or a pandemic ends them.

Outcomes are integer years plus the absorbing sentinels "dead", "heaven" and
"reset". `build_models` returns a weighted ensemble of per-year transition
functions; feed it to `fates.extrapolate_and_mix` to get the forecast.
"""

from fates.world.types import (
    DEAD,
    HEAVEN,
    RESET,
    TERMINAL_OUTCOMES,
    SubModelForecast,
    World,
    Year,
    is_terminal,
    is_year,
)
from fates.world.submodels import AGIModel, NukeModel, PlagueModel
from fates.world.transition import CombinedTransition, combined_transition
from fates.world.catalog import START_YEAR, WORK_ACCELERATION
from fates.world.ensemble import ModelCatalog, build_model_ensemble, build_models

__all__ = [
    "DEAD",
    "HEAVEN",
    "RESET",
    "TERMINAL_OUTCOMES",
    "SubModelForecast",
    "World",
    "Year",
    "is_terminal",
    "is_year",
    "AGIModel",
    "NukeModel",
    "PlagueModel",
    "CombinedTransition",
    "combined_transition",
    "START_YEAR",
    "WORK_ACCELERATION",
    "ModelCatalog",
    "build_model_ensemble",
    "build_models",
]
