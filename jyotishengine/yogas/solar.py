"""Solar yogas: Vesi, Vosi and Ubhayachari."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..jyotish.data import MAIN_PLANETS
from .models import Yoga
from .primitives import YogaContext, house_from_position, yoga_strength

if TYPE_CHECKING:
    from ..chart.models import PlanetPosition

__all__ = ["DETECTORS"]

_SOLAR_BENEFICS = frozenset({"Jupiter", "Venus", "Mercury"})


def _flanking_sun(ctx: YogaContext, house: int) -> list[PlanetPosition]:
    sun = ctx.pos("Sun")
    if sun is None:
        return []
    return [
        p
        for p in ctx.chart.positions
        if p.planet in MAIN_PLANETS
        and p.planet not in ("Sun", "Moon")
        and house_from_position(p, sun) == house
    ]


def _has_benefic(positions: list[PlanetPosition]) -> bool:
    return any(p.planet in _SOLAR_BENEFICS for p in positions)


def _solar_yoga(
    ctx: YogaContext,
    positions: list[PlanetPosition],
    name: str,
    description: str,
    effects: str,
    auspicious: bool,
    activation: str = "Sun Dasha and related periods",
) -> Yoga:
    strength, notes = yoga_strength(positions, ctx.chart)
    return Yoga(
        name=name,
        sanskrit_name=name,
        category="solar",
        planets=tuple(p.planet for p in positions),
        houses=tuple(p.house for p in positions),
        description=description,
        effects=effects,
        strength=strength,
        auspicious=auspicious,
        activation_period=activation,
        cancellation_factors=notes,
    )


def _collect_vesi(ctx: YogaContext) -> list[Yoga]:
    second = _flanking_sun(ctx, 2)
    if not second:
        return []
    benefic = _has_benefic(second)
    effects = (
        "Truthful, balanced perspective, learned, happy"
        if benefic
        else "Brave but may face challenges, determined"
    )
    names = ", ".join(p.planet for p in second)
    return [_solar_yoga(ctx, second, "Vesi Yoga", f"{names} in 2nd from Sun", effects, benefic)]


def _collect_vosi(ctx: YogaContext) -> list[Yoga]:
    twelfth = _flanking_sun(ctx, 12)
    if not twelfth:
        return []
    benefic = _has_benefic(twelfth)
    effects = (
        "Learned, skilled, wealthy, charitable, famous"
        if benefic
        else "Active, may face expenditure, spiritually inclined"
    )
    names = ", ".join(p.planet for p in twelfth)
    return [_solar_yoga(ctx, twelfth, "Vosi Yoga", f"{names} in 12th from Sun", effects, benefic)]


def _collect_ubhayachari(ctx: YogaContext) -> list[Yoga]:
    second = _flanking_sun(ctx, 2)
    twelfth = _flanking_sun(ctx, 12)
    if not (second and twelfth):
        return []
    both = second + twelfth
    return [
        _solar_yoga(
            ctx,
            both,
            "Ubhayachari Yoga",
            "Planets on both sides of Sun (2nd and 12th)",
            "Equal to a ruler, eloquent, handsome, all comforts",
            True,
            activation="Sun Dasha",
        )
    ]


DETECTORS = (_collect_vesi, _collect_vosi, _collect_ubhayachari)
