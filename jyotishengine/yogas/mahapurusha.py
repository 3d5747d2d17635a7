"""Pancha Mahapurusha (five great-person) yogas.

Each of Mars, Mercury, Jupiter, Venus and Saturn forms its yoga when it
occupies its own or exaltation sign and one of the four kendra houses.
"""

from __future__ import annotations

from collections.abc import Mapping

from ..jyotish.data import KENDRA_HOUSES
from .models import Yoga
from .primitives import UNAFFLICTED, YogaContext, is_strong, mahapurusha_strength

__all__ = ["DETECTORS", "MAHAPURUSHA_YOGAS"]

# planet -> (yoga name, effects)
MAHAPURUSHA_YOGAS: Mapping[str, tuple[str, str]] = {
    "Mars": (
        "Ruchaka",
        "Commander, valorous, muscular body, successful in conflicts, "
        "wealth through martial arts or defense",
    ),
    "Mercury": (
        "Bhadra",
        "Learned, eloquent, sharp intellect, skilled in commerce and writing, long-lived",
    ),
    "Jupiter": (
        "Hamsa",
        "Righteous, respected by the learned, spiritual inclination, good fortune",
    ),
    "Venus": (
        "Malavya",
        "Refined, wealthy, attractive, fond of arts and comforts, happy family life",
    ),
    "Saturn": (
        "Sasa",
        "Authority over many, disciplined, leader of groups or institutions, "
        "success through perseverance",
    ),
}


def _collect_mahapurusha(ctx: YogaContext) -> list[Yoga]:
    yogas: list[Yoga] = []
    for planet, (label, effects) in MAHAPURUSHA_YOGAS.items():
        position = ctx.pos(planet)
        if position is None:
            continue
        if position.house not in KENDRA_HOUSES or not is_strong(position):
            continue
        strength, notes = mahapurusha_strength(position, ctx.chart)
        yogas.append(
            Yoga(
                name=f"{label} Yoga",
                sanskrit_name=f"{label} Mahapurusha Yoga",
                category="mahapurusha",
                planets=(planet,),
                houses=(position.house,),
                description=f"{planet} in own/exalted sign in Kendra",
                effects=effects,
                strength=strength,
                auspicious=True,
                activation_period=f"{planet} Mahadasha and related Antardashas",
                cancellation_factors=notes or (UNAFFLICTED,),
            )
        )
    return yogas


DETECTORS = (_collect_mahapurusha,)
