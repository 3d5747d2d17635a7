"""Dhana (wealth) yogas."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .models import Yoga
from .primitives import GOOD_HOUSES, UNAFFLICTED, YogaContext, is_strong, yoga_strength

__all__ = ["DETECTORS", "HOUSE_SIGNIFICATIONS"]

LOG = logging.getLogger(__name__)

HOUSE_SIGNIFICATIONS: Mapping[int, str] = {
    1: "self-effort and personality",
    2: "family wealth and speech",
    3: "courage and communication",
    4: "property and domestic comfort",
    5: "speculation and creative ventures",
    6: "service and defeating competition",
    7: "partnership and business",
    8: "inheritance and unexpected gains",
    9: "fortune and higher pursuits",
    10: "career and public recognition",
    11: "gains and social networks",
    12: "foreign connections and spiritual pursuits",
}

_LABHA_HOUSES = frozenset({1, 2, 5, 9, 10, 11})


def _collect_wealth_lords(ctx: YogaContext) -> list[Yoga]:
    lords: list[str] = []
    for house in (2, 5, 9, 11):
        lord = ctx.lord(house)
        if lord not in lords:
            lords.append(lord)
    yogas: list[Yoga] = []
    for idx, first_lord in enumerate(lords):
        for second_lord in lords[idx + 1 :]:
            first = ctx.pos(first_lord)
            second = ctx.pos(second_lord)
            if first is None or second is None or not ctx.conjunct(first, second):
                continue
            strength, notes = yoga_strength([first, second], ctx.chart)
            yogas.append(
                Yoga(
                    name=f"{first_lord}-{second_lord} Dhana Yoga",
                    sanskrit_name="Dhana Yoga",
                    category="dhana",
                    planets=(first_lord, second_lord),
                    houses=(first.house, second.house),
                    description="Lords of wealth houses in conjunction",
                    effects=f"Wealth accumulation through {HOUSE_SIGNIFICATIONS[first.house]}",
                    strength=strength,
                    auspicious=True,
                    activation_period=f"{first_lord} or {second_lord} Dasha",
                    cancellation_factors=notes or (UNAFFLICTED,),
                )
            )
    return yogas


def _collect_lakshmi(ctx: YogaContext) -> list[Yoga]:
    venus = ctx.pos("Venus")
    if venus is None:
        return []
    if not (is_strong(venus) and venus.house in GOOD_HOUSES):
        return []
    strength, notes = yoga_strength([venus], ctx.chart, multiplier=1.2)
    return [
        Yoga(
            name="Lakshmi Yoga",
            sanskrit_name="Lakshmi Yoga",
            category="dhana",
            planets=("Venus",),
            houses=(venus.house,),
            description="Venus in own/exalted sign in Kendra/Trikona",
            effects="Abundant wealth, luxury, beauty, artistic success",
            strength=strength,
            auspicious=True,
            activation_period="Venus Mahadasha and Antardashas",
            cancellation_factors=notes,
        )
    ]


def _collect_kubera(ctx: YogaContext) -> list[Yoga]:
    jupiter, mercury = ctx.pos("Jupiter"), ctx.pos("Mercury")
    if jupiter is None or mercury is None:
        return []
    if jupiter.house != 2 or not ctx.conjunct(jupiter, mercury):
        return []
    strength, notes = yoga_strength([jupiter, mercury], ctx.chart)
    return [
        Yoga(
            name="Kubera Yoga",
            sanskrit_name="Kubera Yoga",
            category="dhana",
            planets=("Jupiter", "Mercury"),
            houses=(2,),
            description="Jupiter and Mercury in 2nd house",
            effects="Treasury of wealth, excellent financial acumen, banking success",
            strength=strength,
            auspicious=True,
            activation_period="Jupiter-Mercury periods",
            cancellation_factors=notes,
        )
    ]


def _collect_chandra_mangala(ctx: YogaContext) -> list[Yoga]:
    moon, mars = ctx.pos("Moon"), ctx.pos("Mars")
    if moon is None or mars is None or not ctx.conjunct(moon, mars):
        return []
    strength, notes = yoga_strength([moon, mars], ctx.chart)
    return [
        Yoga(
            name="Chandra-Mangala Yoga",
            sanskrit_name="Chandra-Mangala Yoga",
            category="dhana",
            planets=("Moon", "Mars"),
            houses=(moon.house,),
            description="Moon and Mars in conjunction",
            effects="Wealth through business, enterprise, real estate, aggressive financial pursuits",
            strength=strength,
            auspicious=True,
            activation_period="Moon-Mars periods",
            cancellation_factors=notes,
        )
    ]


def _collect_labha(ctx: YogaContext) -> list[Yoga]:
    lord = ctx.lord(11)
    position = ctx.pos(lord)
    if position is None:
        LOG.debug("Labha Yoga skipped: 11th lord %s missing", lord)
        return []
    if position.house not in _LABHA_HOUSES:
        return []
    strength, notes = yoga_strength([position], ctx.chart)
    return [
        Yoga(
            name="Labha Yoga",
            sanskrit_name="Labha Yoga",
            category="dhana",
            planets=(lord,),
            houses=(position.house,),
            description="11th lord well-placed",
            effects=(
                "Continuous gains, fulfillment of desires, income through "
                f"{HOUSE_SIGNIFICATIONS[position.house]}"
            ),
            strength=strength,
            auspicious=True,
            activation_period=f"{lord} Dasha",
            cancellation_factors=notes,
        )
    ]


DETECTORS = (
    _collect_wealth_lords,
    _collect_lakshmi,
    _collect_kubera,
    _collect_chandra_mangala,
    _collect_labha,
)
