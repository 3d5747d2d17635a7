"""Utility helpers for Jyotish calculations."""

from __future__ import annotations

from typing import Final

from .data import NAKSHATRA_NAMES, SIGN_LORDS, ZODIAC_SIGNS

__all__ = [
    "norm360",
    "circular_separation",
    "forward_angle",
    "orb_from",
    "sign_index",
    "sign_name",
    "degree_in_sign",
    "sign_distance",
    "house_from",
    "house_offset",
    "whole_sign_house",
    "sign_lord",
    "nakshatra_index",
    "nakshatra_name",
]

EPSILON_DEG: Final[float] = 1e-9
NAKSHATRA_SPAN: Final[float] = 360.0 / 27.0


def norm360(value: float) -> float:
    """Normalise ``value`` to the range [0, 360).

    Values within ``1e-9`` of ``360`` are folded to ``0`` so the contract
    holds for tiny negative inputs as well.
    """

    wrapped = float(value) % 360.0
    if wrapped >= 360.0 - EPSILON_DEG:
        wrapped = 0.0
    return wrapped


def circular_separation(a: float, b: float) -> float:
    """Return the smallest angular separation between ``a`` and ``b`` degrees."""

    diff = abs(a - b) % 360.0
    return min(diff, 360.0 - diff)


def forward_angle(from_lon: float, to_lon: float) -> float:
    """Return the zodiacal distance travelled from ``from_lon`` to ``to_lon``."""

    return norm360(to_lon - from_lon)


def orb_from(angle: float, target: float) -> float:
    """Return how far ``angle`` sits from ``target`` on the circle."""

    diff = abs(norm360(angle) - target)
    return min(diff, 360.0 - diff)


def sign_index(longitude: float) -> int:
    """Return the 0-based sign index for ``longitude``."""

    return int(norm360(longitude) // 30.0) % 12


def sign_name(index: int) -> str:
    return ZODIAC_SIGNS[index % 12]


def degree_in_sign(longitude: float) -> float:
    """Return the degree within the active sign (0-30)."""

    return norm360(longitude) % 30.0


def sign_distance(from_index: int, to_index: int) -> int:
    """Whole-sign distance counted inclusively, so a sign is 1 from itself."""

    diff = (to_index - from_index + 12) % 12
    return 1 if diff == 0 else diff + 1


def house_from(target_index: int, reference_index: int) -> int:
    """Return the house (1-12) ``target_index`` occupies counted from ``reference_index``."""

    return sign_distance(reference_index, target_index)


def house_offset(house: int, offset: int) -> int:
    """Return the house ``offset`` places from ``house``, counted inclusively."""

    return ((house + offset - 2) % 12) + 1


def whole_sign_house(longitude: float, ascendant: float) -> int:
    return house_from(sign_index(longitude), sign_index(ascendant))


def sign_lord(sign: str) -> str:
    return SIGN_LORDS[sign]


def nakshatra_index(longitude: float) -> int:
    """Return the 0-based lunar mansion index (27 divisions of 13°20')."""

    return min(int(norm360(longitude) // NAKSHATRA_SPAN), 26)


def nakshatra_name(longitude: float) -> str:
    return NAKSHATRA_NAMES[nakshatra_index(longitude)]
