"""
Ensemble Markov forecasts of world trajectories.

This package propagates probability distributions through discrete-time
Markov chains and pools the forecasts of competing transition models by
their weights. The `fates.world` subpackage builds the AGI / nuclear /
pandemic world model on top of it.
"""

from fates.types import Distribution, ModelEnsemble, Trajectory, TransitionFunction
from fates.odds import Odds, normalize, probability_from_odds
from fates.chain import extrapolate, step
from fates.mixing import extrapolate_and_mix, mix, mix_histories
from fates.pathway import final_distribution, mass_timeline, outcome_timeline
from fates.diagnostics import DiagnosticsReport
from fates.network_analysis import (
    TransitionGraphBuilder,
    absorbing_outcomes,
    transient_outcomes,
)

__version__ = "1.0.0"

__all__ = [
    "Distribution",
    "ModelEnsemble",
    "Trajectory",
    "TransitionFunction",
    "Odds",
    "normalize",
    "probability_from_odds",
    "step",
    "extrapolate",
    "mix",
    "mix_histories",
    "extrapolate_and_mix",
    "outcome_timeline",
    "mass_timeline",
    "final_distribution",
    "DiagnosticsReport",
    "TransitionGraphBuilder",
    "absorbing_outcomes",
    "transient_outcomes",
]
