"""Chart data contract shared by the aspect and yoga engines."""

from __future__ import annotations

from .models import KNOWN_PLANETS, Chart, PlanetPosition

__all__ = ["Chart", "PlanetPosition", "KNOWN_PLANETS"]
