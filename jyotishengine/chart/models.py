"""Immutable chart snapshots consumed by the Jyotish engines."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from ..errors import ChartError
from ..jyotish.data import PLANET_ORDER, ZODIAC_SIGNS
from ..jyotish.utils import degree_in_sign, norm360, sign_index, whole_sign_house

__all__ = ["PlanetPosition", "Chart", "KNOWN_PLANETS"]

KNOWN_PLANETS: frozenset[str] = frozenset(PLANET_ORDER)


@dataclass(frozen=True)
class PlanetPosition:
    """Per-planet snapshot supplied by the ephemeris collaborator.

    ``longitude`` is normalised into ``[0, 360)`` on construction and the
    house is a whole-sign house number (1 is the ascendant's sign).  When
    ``retrograde`` is omitted it is derived from the sign of ``speed``.
    """

    planet: str
    longitude: float
    house: int
    speed: float = 0.0
    retrograde: bool | None = None

    def __post_init__(self) -> None:
        if self.planet not in KNOWN_PLANETS:
            raise ChartError(f"Unknown planet identifier: {self.planet!r}")
        house = int(self.house)
        if not 1 <= house <= 12:
            raise ChartError(f"House for {self.planet} must be in 1..12, got {self.house!r}")
        object.__setattr__(self, "house", house)
        object.__setattr__(self, "longitude", norm360(self.longitude))
        object.__setattr__(self, "speed", float(self.speed))
        if self.retrograde is None:
            object.__setattr__(self, "retrograde", self.speed < 0)

    @property
    def sign_index(self) -> int:
        return sign_index(self.longitude)

    @property
    def sign(self) -> str:
        return ZODIAC_SIGNS[self.sign_index]

    @property
    def degree_in_sign(self) -> float:
        return degree_in_sign(self.longitude)


@dataclass(frozen=True)
class Chart:
    """Ascendant plus at most one :class:`PlanetPosition` per planet."""

    ascendant: float
    positions: tuple[PlanetPosition, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ascendant", norm360(self.ascendant))
        positions = tuple(self.positions)
        seen: set[str] = set()
        for position in positions:
            if position.planet in seen:
                raise ChartError(f"Duplicate position for {position.planet}")
            seen.add(position.planet)
        object.__setattr__(self, "positions", positions)

    @classmethod
    def from_longitudes(
        cls,
        ascendant: float,
        longitudes: Mapping[str, float],
        *,
        speeds: Mapping[str, float] | None = None,
    ) -> Chart:
        """Build a chart assigning whole-sign houses from ``ascendant``."""

        speeds = speeds or {}
        positions = tuple(
            PlanetPosition(
                planet=planet,
                longitude=longitude,
                house=whole_sign_house(longitude, ascendant),
                speed=speeds.get(planet, 0.0),
            )
            for planet, longitude in longitudes.items()
        )
        return cls(ascendant=ascendant, positions=positions)

    def __iter__(self) -> Iterator[PlanetPosition]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def ascendant_sign_index(self) -> int:
        return sign_index(self.ascendant)

    @property
    def ascendant_sign(self) -> str:
        return ZODIAC_SIGNS[self.ascendant_sign_index]

    def position(self, planet: str) -> PlanetPosition | None:
        for position in self.positions:
            if position.planet == planet:
                return position
        return None

    def planets_in_house(self, house: int) -> tuple[PlanetPosition, ...]:
        return tuple(position for position in self.positions if position.house == house)
