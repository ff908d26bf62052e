"""
Default sub-model catalogue for the world model.

Each family maps a sub-model to its relative prior weight. Weights within a
family are normalized when the ensemble is built, so only their ratios
matter.
"""

from __future__ import annotations

from typing import Dict

from fates.world.submodels import AGIModel, NukeModel, PlagueModel

# First year of every forecast.
START_YEAR = 2022

# Hazard multiplier applied when extra collective effort is assumed.
WORK_ACCELERATION = 1e-7


# ---------------------------
# AGI hypotheses.
# ---------------------------

# 5% chance of AGI this year, doubling every decade. Safety is not solved
# this decade but could be within a century; unaligned AGI kills everyone.
AGI_DOOMED = AGIModel(
    name="doomed",
    base_rate=0.05,
    doubling_years=10,
    midpoint_year=2080,
    midpoint_scale=20,
    dead_share=1.0,
    reset_share=0.0,
)

# AGI a couple of decades away; failure is survivable a third of the time.
AGI_MODERATE_RISK = AGIModel(
    name="moderate_risk",
    base_rate=0.02,
    doubling_years=10,
    midpoint_year=2030,
    midpoint_scale=10,
    dead_share=2.0 / 3.0,
    reset_share=1.0 / 3.0,
)

# AGI is hard but coming. Unaligned AGI-ish systems probably wreck
# industrial civilization, with a good chance of extinction.
AGI_HARD_BUT_COMING = AGIModel(
    name="hard_but_coming",
    base_rate=0.03,
    doubling_years=10,
    midpoint_year=2080,
    midpoint_scale=20,
    dead_share=0.5,
    reset_share=0.5,
)

# AGI is far harder than expected: 0.1% a year, doubling every 30 years.
# Building it requires understanding it well enough to make it safe.
AGI_WAY_HARDER = AGIModel(
    name="way_harder",
    base_rate=0.001,
    doubling_years=30,
    midpoint_year=2080,
    midpoint_scale=20,
    dead_share=0.0,
    reset_share=0.0,
)

AGI_MODELS: Dict[AGIModel, float] = {
    AGI_DOOMED: 1.0,
    AGI_MODERATE_RISK: 1.0,
    AGI_HARD_BUT_COMING: 1.0,
    AGI_WAY_HARDER: 0.2,
}


# ---------------------------
# Nuclear war.
# ---------------------------

NUKES_BASELINE = NukeModel(name="baseline", annual_probability=0.01, dead=0.1, reset=0.9)

NUKE_MODELS: Dict[NukeModel, float] = {
    NUKES_BASELINE: 1.0,
}


# ---------------------------
# Pandemics. The placebo never fires.
# ---------------------------

PLAGUE_ACTIVE = PlagueModel(name="active", annual_probability=0.005, dead=0.1, reset=0.9)
PLAGUE_PLACEBO = PlagueModel(name="placebo", annual_probability=0.0, dead=0.0, reset=1.0)

PLAGUE_MODELS: Dict[PlagueModel, float] = {
    PLAGUE_ACTIVE: 1.0,
    PLAGUE_PLACEBO: 1.0,
}
