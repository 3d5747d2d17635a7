"""Shared chart builders for the jyotishengine test-suite."""

from __future__ import annotations

from collections.abc import Callable, Mapping

import pytest

from jyotishengine.chart import Chart


def build_chart(
    ascendant: float,
    longitudes: Mapping[str, float],
    speeds: Mapping[str, float] | None = None,
) -> Chart:
    return Chart.from_longitudes(ascendant, longitudes, speeds=speeds)


@pytest.fixture
def make_chart() -> Callable[..., Chart]:
    return build_chart


@pytest.fixture
def spread_chart() -> Chart:
    """Aries rising with the grahas scattered and no tight conjunctions."""

    return build_chart(
        5.0,
        {
            "Sun": 40.0,
            "Moon": 95.0,
            "Mercury": 62.0,
            "Venus": 150.0,
            "Mars": 200.0,
            "Jupiter": 250.0,
            "Saturn": 310.0,
            "Rahu": 120.0,
            "Ketu": 300.0,
        },
    )
