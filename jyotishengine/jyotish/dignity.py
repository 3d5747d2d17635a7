"""Dignity, friendship and house-class predicates for classical Jyotish."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from .data import (
    DEBILITATION_SIGNS,
    DIG_BALA_HOUSES,
    DUSTHANA_HOUSES,
    EXALTATION_DEGREES,
    EXALTATION_SIGNS,
    KENDRA_HOUSES,
    MOOLATRIKONA_SPANS,
    NATURAL_BENEFICS,
    NATURAL_MALEFICS,
    OWN_SIGNS,
    PLANET_ENEMIES,
    PLANET_FRIENDS,
    SIGN_LORDS,
    TRIKONA_HOUSES,
    UPACHAYA_HOUSES,
    ZODIAC_SIGNS,
)
from .utils import circular_separation, house_from

if TYPE_CHECKING:
    from ..chart.models import Chart, PlanetPosition

__all__ = [
    "DIGNITY_LABELS",
    "RELATIONSHIPS",
    "is_exalted",
    "is_debilitated",
    "is_in_own_sign",
    "is_in_moolatrikona",
    "is_in_friend_sign",
    "is_in_enemy_sign",
    "dignity_of",
    "relationship_between",
    "compound_relationship",
    "has_dig_bala",
    "has_directional_strength",
    "is_kendra",
    "is_trikona",
    "is_dusthana",
    "is_upachaya",
    "is_natural_benefic",
    "is_natural_malefic",
    "is_functional_benefic",
    "is_functional_malefic",
]

DIGNITY_LABELS: tuple[str, ...] = (
    "exaltation",
    "moolatrikona",
    "own_sign",
    "friend_sign",
    "neutral_sign",
    "enemy_sign",
    "debilitation",
)

RELATIONSHIPS: tuple[str, ...] = (
    "best_friend",
    "friend",
    "neutral",
    "enemy",
    "bitter_enemy",
)

DEEP_DIGNITY_ORB = 1.0

# Temporary (Tatkalika) friends sit 2, 3, 4, 10, 11 or 12 houses away.
_TEMPORARY_FRIEND_HOUSES = frozenset({2, 3, 4, 10, 11, 12})

# (natural, temporary) -> compound relationship, BPHS Panchadha Maitri.
_COMPOUND: Mapping[tuple[str, bool], str] = {
    ("friend", True): "best_friend",
    ("friend", False): "neutral",
    ("neutral", True): "friend",
    ("neutral", False): "enemy",
    ("enemy", True): "neutral",
    ("enemy", False): "bitter_enemy",
}


def _near_exact_degree(planet: str, degree: float | None) -> bool:
    exact = EXALTATION_DEGREES.get(planet)
    if exact is None or degree is None:
        return False
    return circular_separation(degree, exact) <= DEEP_DIGNITY_ORB


def is_exalted(
    planet: str, sign: str, *, degree: float | None = None, deep: bool = False
) -> bool:
    """Return ``True`` when ``planet`` occupies its exaltation sign.

    With ``deep=True`` the degree within the sign must also lie within 1° of
    the exact exaltation point.
    """

    if EXALTATION_SIGNS.get(planet) != sign:
        return False
    return _near_exact_degree(planet, degree) if deep else True


def is_debilitated(
    planet: str, sign: str, *, degree: float | None = None, deep: bool = False
) -> bool:
    if DEBILITATION_SIGNS.get(planet) != sign:
        return False
    return _near_exact_degree(planet, degree) if deep else True


def is_in_own_sign(planet: str, sign: str) -> bool:
    return sign in OWN_SIGNS.get(planet, ()) or SIGN_LORDS.get(sign) == planet


def is_in_moolatrikona(planet: str, sign: str, degree: float) -> bool:
    span = MOOLATRIKONA_SPANS.get(planet)
    if span is None:
        return False
    span_sign, start, end = span
    return sign == span_sign and start <= degree <= end


def relationship_between(planet_a: str, planet_b: str) -> str:
    """Return the natural relationship ``planet_a`` holds towards ``planet_b``.

    The lookup is keyed by the acting planet, so the result is not symmetric
    (the Moon is a friend of Mercury while Mercury treats the Moon as an
    enemy).  A planet is its own best friend.
    """

    if planet_a == planet_b:
        return "best_friend"
    if planet_b in PLANET_FRIENDS.get(planet_a, ()):
        return "friend"
    if planet_b in PLANET_ENEMIES.get(planet_a, ()):
        return "enemy"
    return "neutral"


def compound_relationship(planet_a: str, planet_b: str, chart: Chart) -> str:
    """Combine natural and temporary friendship as of ``chart``."""

    natural = relationship_between(planet_a, planet_b)
    if natural == "best_friend":
        return natural
    pos_a = chart.position(planet_a)
    pos_b = chart.position(planet_b)
    if pos_a is None or pos_b is None:
        return natural
    temporary_friend = house_from(pos_b.sign_index, pos_a.sign_index) in _TEMPORARY_FRIEND_HOUSES
    return _COMPOUND[(natural, temporary_friend)]


def is_in_friend_sign(planet: str, sign: str) -> bool:
    return relationship_between(planet, SIGN_LORDS.get(sign, "")) == "friend"


def is_in_enemy_sign(planet: str, sign: str) -> bool:
    return relationship_between(planet, SIGN_LORDS.get(sign, "")) == "enemy"


def dignity_of(position: PlanetPosition) -> str:
    """Return the dignity label for ``position``, strongest condition first."""

    planet = position.planet
    sign = position.sign
    if is_exalted(planet, sign):
        return "exaltation"
    if is_debilitated(planet, sign):
        return "debilitation"
    if is_in_moolatrikona(planet, sign, position.degree_in_sign):
        return "moolatrikona"
    if is_in_own_sign(planet, sign):
        return "own_sign"
    if is_in_friend_sign(planet, sign):
        return "friend_sign"
    if is_in_enemy_sign(planet, sign):
        return "enemy_sign"
    return "neutral_sign"


def has_dig_bala(planet: str, house: int) -> bool:
    return DIG_BALA_HOUSES.get(planet) == house


def has_directional_strength(position: PlanetPosition) -> bool:
    return has_dig_bala(position.planet, position.house)


def is_kendra(house: int) -> bool:
    return house in KENDRA_HOUSES


def is_trikona(house: int) -> bool:
    return house in TRIKONA_HOUSES


def is_dusthana(house: int) -> bool:
    return house in DUSTHANA_HOUSES


def is_upachaya(house: int) -> bool:
    return house in UPACHAYA_HOUSES


def is_natural_benefic(planet: str) -> bool:
    return planet in NATURAL_BENEFICS


def is_natural_malefic(planet: str) -> bool:
    return planet in NATURAL_MALEFICS


def _ruled_houses(planet: str, ascendant_sign: str) -> tuple[int, ...]:
    asc_index = ZODIAC_SIGNS.index(ascendant_sign)
    return tuple(
        house_from(ZODIAC_SIGNS.index(sign), asc_index)
        for sign in OWN_SIGNS.get(planet, ())
    )


def is_functional_benefic(planet: str, ascendant_sign: str) -> bool:
    """A planet ruling a kendra or trikona is benefic for the ascendant."""

    return any(
        house in KENDRA_HOUSES or house in TRIKONA_HOUSES
        for house in _ruled_houses(planet, ascendant_sign)
    )


def is_functional_malefic(planet: str, ascendant_sign: str) -> bool:
    return any(house in DUSTHANA_HOUSES for house in _ruled_houses(planet, ascendant_sign))
