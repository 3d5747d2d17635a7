"""Exception hierarchy for the Jyotish engine."""

from __future__ import annotations

__all__ = ["JyotishError", "ChartError", "SettingsError"]


class JyotishError(Exception):
    """Base class for errors raised at the engine's input boundaries."""


class ChartError(JyotishError, ValueError):
    """Raised when chart data handed to the engine is malformed."""


class SettingsError(JyotishError, ValueError):
    """Raised when a settings document cannot be interpreted."""
