"""Birth-star and dignity-reinforcement markers."""

from __future__ import annotations

from ..jyotish.data import MAIN_PLANETS, NAKSHATRA_NAMES
from ..jyotish.utils import nakshatra_index
from .models import Yoga
from .primitives import YogaContext, is_strong, yoga_strength

__all__ = ["DETECTORS", "DASA_MULA_NAKSHATRAS"]

# Ashwini, Mula, Dhanishtha, Revati
DASA_MULA_NAKSHATRAS = frozenset({0, 18, 22, 26})


def _collect_dasa_mula(ctx: YogaContext) -> list[Yoga]:
    moon = ctx.pos("Moon")
    if moon is None:
        return []
    index = nakshatra_index(moon.longitude)
    if index not in DASA_MULA_NAKSHATRAS:
        return []
    return [
        Yoga(
            name="Dasa-Mula Yoga",
            sanskrit_name="Dasa-Mula Yoga",
            category="negative",
            planets=("Moon",),
            houses=(moon.house,),
            description=f"Birth in Dasa-Mula Nakshatra ({NAKSHATRA_NAMES[index]})",
            effects="Requires mitigation; obstacles in early life, need for protective measures",
            strength=60.0,
            auspicious=False,
            activation_period="Early life period",
            cancellation_factors=(
                "Jupiter aspect",
                "Lord of nakshatra strong",
                "Benefic in 4th/7th",
            ),
        )
    ]


def _collect_dignity_reinforcement(ctx: YogaContext) -> list[Yoga]:
    yogas: list[Yoga] = []
    for position in ctx.chart.positions:
        if position.planet not in MAIN_PLANETS or not is_strong(position):
            continue
        strength, notes = yoga_strength([position], ctx.chart, multiplier=1.1)
        yogas.append(
            Yoga(
                name=f"{position.planet} Vargottama Strength",
                sanskrit_name="Vargottama Bala",
                category="special",
                planets=(position.planet,),
                houses=(position.house,),
                description=f"{position.planet} in own/exalted sign",
                effects=(
                    "Exceptional strength, power and effectiveness in the planet's significations"
                ),
                strength=strength,
                auspicious=True,
                activation_period=f"{position.planet} Dasha",
                cancellation_factors=notes,
            )
        )
    return yogas


DETECTORS = (_collect_dasa_mula, _collect_dignity_reinforcement)
