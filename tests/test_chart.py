from __future__ import annotations

import pytest

from jyotishengine.chart import Chart, PlanetPosition
from jyotishengine.errors import ChartError, JyotishError


def test_unknown_planet_rejected() -> None:
    with pytest.raises(ChartError):
        PlanetPosition("Vulcan", 10.0, 1)


def test_house_out_of_range_rejected() -> None:
    with pytest.raises(ValueError):
        PlanetPosition("Sun", 10.0, 13)
    with pytest.raises(JyotishError):
        PlanetPosition("Sun", 10.0, 0)


def test_duplicate_planet_rejected() -> None:
    with pytest.raises(ChartError):
        Chart(0.0, (PlanetPosition("Sun", 10.0, 1), PlanetPosition("Sun", 40.0, 2)))


def test_position_normalises_and_derives_fields() -> None:
    pos = PlanetPosition("Mars", -10.0, 12, speed=-0.3)
    assert pos.longitude == pytest.approx(350.0)
    assert pos.sign == "Pisces"
    assert pos.degree_in_sign == pytest.approx(20.0)
    assert pos.retrograde is True
    assert PlanetPosition("Mars", 10.0, 1, speed=0.5).retrograde is False
    assert PlanetPosition("Mars", 10.0, 1, speed=0.5, retrograde=True).retrograde is True


def test_from_longitudes_assigns_whole_sign_houses(make_chart) -> None:
    chart = make_chart(65.0, {"Sun": 70.0, "Moon": 10.0, "Saturn": 250.0})
    assert chart.ascendant_sign == "Gemini"
    assert chart.position("Sun").house == 1
    assert chart.position("Moon").house == 11
    assert chart.position("Saturn").house == 7
    assert chart.position("Jupiter") is None
    assert len(chart) == 3
    assert [p.planet for p in chart.planets_in_house(1)] == ["Sun"]
