"""
Model ensemble for the world forecast.

Which AGI, nuke and plague hypothesis is right is uncertain. Each family
carries prior weights over its hypotheses; the families are treated as
independent, so every (agi, nukes, plague) triple becomes one combined
transition function weighted by the product of its three weights.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Sequence

from fates.odds import normalize
from fates.types import Distribution, TransitionFunction
from fates.world.catalog import AGI_MODELS, NUKE_MODELS, PLAGUE_MODELS, WORK_ACCELERATION
from fates.world.transition import SubModel, combined_transition
from fates.world.types import World

logger = logging.getLogger(__name__)

FAMILIES = ("agi", "nukes", "plague")


@dataclass(frozen=True)
class ModelCatalog:
    """
    Prior weights over sub-models, one mapping per family.

    Weights within a family need not sum to one.
    """

    agi: Mapping[SubModel, float] = field(default_factory=lambda: dict(AGI_MODELS))
    nukes: Mapping[SubModel, float] = field(default_factory=lambda: dict(NUKE_MODELS))
    plague: Mapping[SubModel, float] = field(default_factory=lambda: dict(PLAGUE_MODELS))

    def __post_init__(self) -> None:
        for name in FAMILIES:
            if not getattr(self, name):
                raise ValueError(f"Sub-model family {name!r} cannot be empty")

    def family(self, name: str) -> Mapping[SubModel, float]:
        if name not in FAMILIES:
            raise ValueError(f"Unknown sub-model family: {name!r}")
        return getattr(self, name)


def _accelerated(models: Mapping[SubModel, float], factor: float) -> Dict[SubModel, float]:
    out: Dict[SubModel, float] = {}
    for model, weight in models.items():
        with_acceleration = getattr(model, "with_acceleration", None)
        if with_acceleration is None:
            raise ValueError(f"Sub-model {model!r} does not support acceleration")
        faster = with_acceleration(factor)
        out[faster] = out.get(faster, 0.0) + float(weight)
    return out


def build_model_ensemble(
    acceleration_factor: float = 1.0,
    *,
    catalog: Optional[ModelCatalog] = None,
    accelerate: Sequence[str] = ("agi",),
) -> Distribution[TransitionFunction[World]]:
    """
    Build the weighted ensemble of combined transition functions.

    Args:
        acceleration_factor: Multiplier on the annual hazard of every
            sub-model in the families named by `accelerate`. At 1.0 the
            sub-models are used as given.
        catalog: Sub-models and their prior weights. Defaults to the
            built-in catalogue.
        accelerate: Families the acceleration applies to. Only AGI arrival
            is sped up by default.

    Returns:
        Distribution over transition functions with weights summing to 1.

    Raises:
        ValueError: If the factor is negative, a family name is unknown, a
            family's weights sum to zero, or a sub-model to be accelerated has
            no `with_acceleration`.
    """
    factor = float(acceleration_factor)
    if factor < 0.0:
        raise ValueError(f"acceleration_factor must be non-negative, got {factor}")
    catalog = catalog or ModelCatalog()
    unknown = set(accelerate) - set(FAMILIES)
    if unknown:
        raise ValueError(f"Unknown sub-model families: {sorted(unknown)!r}")

    families: Dict[str, Distribution[SubModel]] = {}
    for name in FAMILIES:
        models = catalog.family(name)
        if name in accelerate and factor != 1.0:
            models = _accelerated(models, factor)
        families[name] = normalize(models)

    weights: Dict[TransitionFunction[World], float] = {}
    for agi, w_agi in families["agi"].items():
        for nukes, w_nukes in families["nukes"].items():
            for plague, w_plague in families["plague"].items():
                fn = combined_transition(agi, nukes, plague)
                weights[fn] = weights.get(fn, 0.0) + w_agi * w_nukes * w_plague

    ensemble = normalize(weights)
    logger.debug(
        "Built model ensemble with %d transition functions (acceleration=%g)",
        len(ensemble),
        factor,
    )
    return ensemble


def build_models(work: bool) -> Distribution[TransitionFunction[World]]:
    """
    Build the ensemble with or without the extra-effort hazard boost.

    Args:
        work: If True, AGI hazards are multiplied by `1 + WORK_ACCELERATION`.
    """
    factor = 1.0 + (WORK_ACCELERATION if work else 0.0)
    return build_model_ensemble(factor)
