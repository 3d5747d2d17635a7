"""Chandra (lunar) yogas: planets flanking the Moon and Moon-anchored benefics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..jyotish.data import KENDRA_HOUSES, MAIN_PLANETS
from .models import Yoga
from .primitives import YogaContext, house_from_position, yoga_strength

if TYPE_CHECKING:
    from ..chart.models import PlanetPosition

__all__ = ["DETECTORS", "planets_flanking_moon"]

_ADHI_BENEFICS = ("Jupiter", "Venus", "Mercury")
_ADHI_HOUSES = frozenset({6, 7, 8})


def planets_flanking_moon(ctx: YogaContext, house: int) -> list[PlanetPosition]:
    """Classical planets other than the luminaries in ``house`` counted from the Moon."""

    moon = ctx.pos("Moon")
    if moon is None:
        return []
    return [
        p
        for p in ctx.chart.positions
        if p.planet in MAIN_PLANETS
        and p.planet not in ("Sun", "Moon")
        and house_from_position(p, moon) == house
    ]


def _flank_yoga(
    ctx: YogaContext,
    positions: list[PlanetPosition],
    *,
    name: str,
    description: str,
    effects: str,
    activation: str,
) -> Yoga:
    strength, notes = yoga_strength(positions, ctx.chart)
    return Yoga(
        name=name,
        sanskrit_name=name,
        category="chandra",
        planets=tuple(p.planet for p in positions),
        houses=tuple(p.house for p in positions),
        description=description,
        effects=effects,
        strength=strength,
        auspicious=True,
        activation_period=activation,
        cancellation_factors=notes,
    )


def _names(positions: list[PlanetPosition]) -> str:
    return ", ".join(p.planet for p in positions)


def _collect_sunafa(ctx: YogaContext) -> list[Yoga]:
    second = planets_flanking_moon(ctx, 2)
    if not second:
        return []
    return [
        _flank_yoga(
            ctx,
            second,
            name="Sunafa Yoga",
            description=f"{_names(second)} in 2nd from Moon",
            effects="Self-made wealth, intelligent, good status, praised by rulers",
            activation="Moon Dasha and related periods",
        )
    ]


def _collect_anafa(ctx: YogaContext) -> list[Yoga]:
    twelfth = planets_flanking_moon(ctx, 12)
    if not twelfth:
        return []
    return [
        _flank_yoga(
            ctx,
            twelfth,
            name="Anafa Yoga",
            description=f"{_names(twelfth)} in 12th from Moon",
            effects="Good reputation, health, happiness, self-respect",
            activation="Moon Dasha and related periods",
        )
    ]


def _collect_durudhara(ctx: YogaContext) -> list[Yoga]:
    second = planets_flanking_moon(ctx, 2)
    twelfth = planets_flanking_moon(ctx, 12)
    if not (second and twelfth):
        return []
    return [
        _flank_yoga(
            ctx,
            second + twelfth,
            name="Durudhara Yoga",
            description="Planets on both sides of Moon (2nd and 12th)",
            effects="Highly fortunate, wealthy, vehicles, servants, charitable, enjoys life",
            activation="Moon Dasha",
        )
    ]


def _collect_gaja_kesari(ctx: YogaContext) -> list[Yoga]:
    moon, jupiter = ctx.pos("Moon"), ctx.pos("Jupiter")
    if moon is None or jupiter is None:
        return []
    from_moon = house_from_position(jupiter, moon)
    if from_moon not in KENDRA_HOUSES:
        return []
    strength, notes = yoga_strength([jupiter, moon], ctx.chart)
    return [
        Yoga(
            name="Gaja-Kesari Yoga",
            sanskrit_name="Gaja-Kesari Yoga",
            category="chandra",
            planets=("Jupiter", "Moon"),
            houses=(jupiter.house, moon.house),
            description=f"Jupiter in Kendra ({from_moon}th) from Moon",
            effects=(
                "Destroyer of enemies like a lion, eloquent speaker, virtuous, "
                "long-lived, famous"
            ),
            strength=strength,
            auspicious=True,
            activation_period="Jupiter and Moon Dashas",
            cancellation_factors=notes,
        )
    ]


def _collect_adhi(ctx: YogaContext) -> list[Yoga]:
    moon = ctx.pos("Moon")
    if moon is None:
        return []
    benefics = [
        p for p in ctx.positions_in(_ADHI_BENEFICS) if house_from_position(p, moon) in _ADHI_HOUSES
    ]
    if len(benefics) < 2:
        return []
    strength, notes = yoga_strength(benefics, ctx.chart)
    return [
        Yoga(
            name="Adhi Yoga",
            sanskrit_name="Adhi Yoga",
            category="chandra",
            planets=tuple(p.planet for p in benefics),
            houses=tuple(p.house for p in benefics),
            description="Multiple benefics in 6th, 7th, 8th from Moon",
            effects=(
                "Commander, minister or ruler; polite, trustworthy, healthy, wealthy, "
                "defeats enemies"
            ),
            strength=strength,
            auspicious=True,
            activation_period="Benefic planet Dashas",
            cancellation_factors=notes,
        )
    ]


DETECTORS = (
    _collect_sunafa,
    _collect_anafa,
    _collect_durudhara,
    _collect_gaja_kesari,
    _collect_adhi,
)
