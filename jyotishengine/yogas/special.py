"""Special yogas that do not belong to one of the larger families."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..jyotish.affliction import is_vedic_aspecting
from ..jyotish.data import KENDRA_HOUSES, MAIN_PLANETS
from ..jyotish.dignity import is_exalted
from ..jyotish.utils import circular_separation
from .models import Yoga
from .primitives import (
    GOOD_HOUSES,
    YogaContext,
    are_connected,
    house_from_position,
    yoga_strength,
)

if TYPE_CHECKING:
    from ..chart.models import PlanetPosition

__all__ = ["DETECTORS", "BUDHA_ADITYA_ORB", "MERCURY_COMBUST_DEG", "SANYASA_HOUSES"]

BUDHA_ADITYA_ORB = 6.0
MERCURY_COMBUST_DEG = 12.0
COMBUST_BUDHA_ADITYA_STRENGTH = 45.0
SANYASA_HOUSES = frozenset({1, 5, 9, 10, 12})

_AMALA_BENEFICS = ("Jupiter", "Venus", "Mercury", "Moon")
_PARVATA_BENEFICS = ("Jupiter", "Venus", "Mercury")
_PARVATA_MALEFICS = frozenset({"Saturn", "Mars", "Rahu", "Ketu"})
_KARTARI_BENEFICS = frozenset(_AMALA_BENEFICS)


def _special(
    name: str,
    planets: tuple[str, ...],
    houses: tuple[int, ...],
    description: str,
    effects: str,
    strength: float,
    activation: str,
    notes: tuple[str, ...] = (),
    *,
    sanskrit_name: str | None = None,
) -> Yoga:
    return Yoga(
        name=name,
        sanskrit_name=sanskrit_name or name,
        category="special",
        planets=planets,
        houses=houses,
        description=description,
        effects=effects,
        strength=strength,
        auspicious=True,
        activation_period=activation,
        cancellation_factors=notes,
    )


def _collect_budha_aditya(ctx: YogaContext) -> list[Yoga]:
    sun, mercury = ctx.pos("Sun"), ctx.pos("Mercury")
    if sun is None or mercury is None or not ctx.conjunct(sun, mercury, BUDHA_ADITYA_ORB):
        return []
    if circular_separation(sun.longitude, mercury.longitude) < MERCURY_COMBUST_DEG:
        strength = COMBUST_BUDHA_ADITYA_STRENGTH
        notes: tuple[str, ...] = ("Mercury is combust - effects reduced",)
    else:
        strength, notes = yoga_strength([sun, mercury], ctx.chart)
    return [
        _special(
            "Budha-Aditya Yoga",
            ("Sun", "Mercury"),
            (sun.house,),
            "Sun and Mercury in conjunction",
            "Intelligence, skilled in many arts, famous, sweet speech, scholarly",
            strength,
            "Sun and Mercury Dashas",
            notes,
        )
    ]


def _collect_amala(ctx: YogaContext) -> list[Yoga]:
    moon = ctx.pos("Moon")
    yogas: list[Yoga] = []
    for benefic in ctx.positions_in(_AMALA_BENEFICS):
        from_lagna = benefic.house == 10
        from_moon = (
            moon is not None
            and benefic.planet != "Moon"
            and house_from_position(benefic, moon) == 10
        )
        if not (from_lagna or from_moon):
            continue
        strength, notes = yoga_strength([benefic], ctx.chart)
        reference = "Lagna" if from_lagna else "Moon"
        yogas.append(
            _special(
                f"{benefic.planet} Amala Yoga",
                (benefic.planet,),
                (benefic.house,),
                f"{benefic.planet} (benefic) in 10th from {reference}",
                "Pure character, lasting fame, prosperous, ethical conduct, respected by rulers",
                strength,
                f"{benefic.planet} Dasha",
                notes,
                sanskrit_name="Amala Yoga",
            )
        )
    return yogas


def _collect_saraswati(ctx: YogaContext) -> list[Yoga]:
    trio = ctx.positions_in(("Jupiter", "Venus", "Mercury"))
    if len(trio) < 3:
        return []
    if not all(p.house in GOOD_HOUSES for p in trio):
        return []
    strength, notes = yoga_strength(trio, ctx.chart)
    return [
        _special(
            "Saraswati Yoga",
            ("Jupiter", "Venus", "Mercury"),
            tuple(p.house for p in trio),
            "Jupiter, Venus, Mercury well-placed with Jupiter strong",
            "Highly learned, poet, prose writer, famous speaker, skilled in all arts",
            strength,
            "Jupiter, Venus, Mercury periods",
            notes,
        )
    ]


def _collect_parvata(ctx: YogaContext) -> list[Yoga]:
    benefics = [p for p in ctx.positions_in(_PARVATA_BENEFICS) if p.house in KENDRA_HOUSES]
    if not benefics:
        return []
    if any(p.planet in _PARVATA_MALEFICS and p.house in KENDRA_HOUSES for p in ctx.chart.positions):
        return []
    strength, notes = yoga_strength(benefics, ctx.chart)
    return [
        _special(
            "Parvata Yoga",
            tuple(p.planet for p in benefics),
            tuple(p.house for p in benefics),
            "Only benefics in Kendra houses",
            "Ruler or minister, famous, generous, wealthy, charitable, mountain-like stability",
            strength,
            "Benefic planet Dashas",
            notes,
        )
    ]


def _lord_connection(
    ctx: YogaContext, first_house: int, second_house: int
) -> tuple[PlanetPosition, PlanetPosition] | None:
    first_lord, second_lord = ctx.lord(first_house), ctx.lord(second_house)
    if first_lord == second_lord:
        return None
    first, second = ctx.pos(first_lord), ctx.pos(second_lord)
    if first is None or second is None:
        return None
    if are_connected(ctx, first, second) is None:
        return None
    return first, second


def _collect_kahala(ctx: YogaContext) -> list[Yoga]:
    linked = _lord_connection(ctx, 4, 9)
    if linked is None:
        return []
    fourth, ninth = linked
    strength, notes = yoga_strength([fourth, ninth], ctx.chart)
    return [
        _special(
            "Kahala Yoga",
            (fourth.planet, ninth.planet),
            (fourth.house, ninth.house),
            "Lords of 4th and 9th connected",
            "Bold, energetic, leads armies, stubborn, wealthy, fortunate",
            strength,
            f"{fourth.planet} and {ninth.planet} Dashas",
            notes,
        )
    ]


def _collect_shubhakartari(ctx: YogaContext) -> list[Yoga]:
    second = [p for p in ctx.chart.planets_in_house(2) if p.planet in _KARTARI_BENEFICS]
    twelfth = [p for p in ctx.chart.planets_in_house(12) if p.planet in _KARTARI_BENEFICS]
    if not (second and twelfth):
        return []
    flanking = second + twelfth
    strength, notes = yoga_strength(flanking, ctx.chart)
    return [
        _special(
            "Shubhakartari Yoga",
            tuple(dict.fromkeys(p.planet for p in flanking)),
            (1, 2, 12),
            "Ascendant hemmed between benefics in 2nd and 12th houses",
            "Protected life, good health, success in endeavors, helpful people around",
            strength,
            "Throughout life, enhanced during benefic Dashas",
            notes,
        )
    ]


def _collect_sanyasa(ctx: YogaContext) -> list[Yoga]:
    yogas: list[Yoga] = []
    for house in range(1, 13):
        occupants = [p for p in ctx.chart.planets_in_house(house) if p.planet in MAIN_PLANETS]
        if len(occupants) < 4:
            continue
        planets = {p.planet for p in occupants}
        if house not in SANYASA_HOUSES and not planets & {"Saturn", "Ketu"}:
            continue
        strength, notes = yoga_strength(occupants, ctx.chart)
        yogas.append(
            _special(
                "Sanyasa Yoga",
                tuple(p.planet for p in occupants),
                (house,),
                f"{len(occupants)} planets conjunct in {house}th house",
                "Renunciation tendencies, spiritual inclinations, detachment from worldly matters",
                strength,
                "During Dashas of conjunct planets",
                notes,
            )
        )
    return yogas


def _collect_chamara(ctx: YogaContext) -> list[Yoga]:
    lord = ctx.lord(1)
    lagna_lord, jupiter = ctx.pos(lord), ctx.pos("Jupiter")
    if lagna_lord is None or jupiter is None or lord == "Jupiter":
        return []
    if not is_exalted(lagna_lord.planet, lagna_lord.sign):
        return []
    if not is_vedic_aspecting(jupiter, lagna_lord):
        return []
    strength, notes = yoga_strength([lagna_lord, jupiter], ctx.chart)
    return [
        _special(
            "Chamara Yoga",
            (lord, "Jupiter"),
            (lagna_lord.house, jupiter.house),
            "Exalted Lagna lord aspected by Jupiter",
            "Royal honors, fame, eloquence, learned, respected by rulers",
            strength,
            f"{lord} and Jupiter Dashas",
            notes,
        )
    ]


def _collect_dharma_karmadhipati(ctx: YogaContext) -> list[Yoga]:
    linked = _lord_connection(ctx, 9, 10)
    if linked is None:
        return []
    ninth, tenth = linked
    strength, notes = yoga_strength([ninth, tenth], ctx.chart, multiplier=1.15)
    return [
        _special(
            "Dharma-Karmadhipati Yoga",
            (ninth.planet, tenth.planet),
            (ninth.house, tenth.house),
            "9th lord (fortune) and 10th lord (karma) connected",
            "Highly successful career, fortune through profession, fame, authority positions",
            strength,
            f"{ninth.planet}-{tenth.planet} periods",
            notes,
        )
    ]


DETECTORS = (
    _collect_budha_aditya,
    _collect_amala,
    _collect_saraswati,
    _collect_parvata,
    _collect_kahala,
    _collect_shubhakartari,
    _collect_sanyasa,
    _collect_chamara,
    _collect_dharma_karmadhipati,
)
