"""Public Jyotish helpers for aspects, dignity and affliction scoring."""

from __future__ import annotations

from .affliction import (
    CancellationResult,
    benefic_aspect_boost,
    cancellation_factor,
    combustion_factor,
    has_neecha_bhanga,
    is_papakartari,
    is_vedic_aspecting,
    malefic_affliction_factor,
    moon_phase_strength,
    neecha_bhanga_reasons,
)
from .aspects import (
    ASPECT_KINDS,
    ArgalaAnalysis,
    AspectKind,
    AspectMatrix,
    AspectRelation,
    HouseAspect,
    PlanetaryAspectStrength,
    compute_argala,
    compute_aspect_matrix,
    compute_house_aspects,
    compute_planetary_aspect_strength,
    evaluate_aspect,
)
from .dignity import (
    compound_relationship,
    dignity_of,
    is_debilitated,
    is_exalted,
    is_functional_benefic,
    is_functional_malefic,
    is_in_moolatrikona,
    is_in_own_sign,
    relationship_between,
)

__all__ = [
    "ASPECT_KINDS",
    "AspectKind",
    "AspectRelation",
    "AspectMatrix",
    "PlanetaryAspectStrength",
    "HouseAspect",
    "ArgalaAnalysis",
    "compute_aspect_matrix",
    "compute_planetary_aspect_strength",
    "compute_house_aspects",
    "compute_argala",
    "evaluate_aspect",
    "CancellationResult",
    "combustion_factor",
    "is_papakartari",
    "is_vedic_aspecting",
    "malefic_affliction_factor",
    "moon_phase_strength",
    "benefic_aspect_boost",
    "neecha_bhanga_reasons",
    "has_neecha_bhanga",
    "cancellation_factor",
    "dignity_of",
    "is_exalted",
    "is_debilitated",
    "is_in_own_sign",
    "is_in_moolatrikona",
    "relationship_between",
    "compound_relationship",
    "is_functional_benefic",
    "is_functional_malefic",
]
