"""Moon- and Sun-flanking detectors against hand-worked charts."""

from __future__ import annotations

import pytest

from jyotishengine.yogas import compute_yoga_analysis


def _named(chart, name: str):
    return [yoga for yoga in compute_yoga_analysis(chart).yogas if yoga.name == name]


@pytest.mark.parametrize(
    ("placements", "name", "planets", "strength"),
    [
        ({"Moon": 100.0, "Mars": 130.0}, "Sunafa Yoga", ("Mars",), 64.0),
        ({"Moon": 100.0, "Venus": 70.0}, "Anafa Yoga", ("Venus",), 56.0),
        (
            {"Moon": 100.0, "Mars": 130.0, "Venus": 70.0},
            "Durudhara Yoga",
            ("Mars", "Venus"),
            70.0,
        ),
    ],
)
def test_moon_flanking_yogas(make_chart, placements, name, planets, strength) -> None:
    (yoga,) = _named(make_chart(5.0, placements), name)
    assert yoga.category == "chandra"
    assert yoga.planets == planets
    assert yoga.strength == pytest.approx(strength)
    assert yoga.auspicious


@pytest.mark.parametrize(
    ("placements", "name"),
    [
        ({"Moon": 100.0, "Mars": 190.0}, "Sunafa Yoga"),
        ({"Moon": 100.0, "Venus": 40.0}, "Anafa Yoga"),
        ({"Moon": 100.0, "Mars": 130.0}, "Durudhara Yoga"),
    ],
)
def test_moon_flanking_absent(make_chart, placements, name) -> None:
    assert not _named(make_chart(5.0, placements), name)


def test_adhi(make_chart) -> None:
    chart = make_chart(5.0, {"Moon": 10.0, "Jupiter": 190.0, "Venus": 220.0})
    (yoga,) = _named(chart, "Adhi Yoga")
    assert yoga.category == "chandra"
    assert yoga.planets == ("Jupiter", "Venus")
    # Jupiter sits in Venus's sign but takes the full Moon's glance.
    assert yoga.strength == pytest.approx(48.0 * 0.85 * 1.05)
    assert yoga.cancellation_factors == ("Jupiter in enemy sign",)


def test_adhi_needs_two_benefics(make_chart) -> None:
    chart = make_chart(5.0, {"Moon": 10.0, "Jupiter": 190.0, "Venus": 250.0})
    assert not _named(chart, "Adhi Yoga")


def test_ubhayachari(make_chart) -> None:
    chart = make_chart(5.0, {"Sun": 100.0, "Mercury": 130.0, "Venus": 70.0})
    (yoga,) = _named(chart, "Ubhayachari Yoga")
    assert yoga.category == "solar"
    assert yoga.planets == ("Mercury", "Venus")
    assert yoga.strength == pytest.approx(70.0)
    assert yoga.auspicious


def test_ubhayachari_needs_both_sides(make_chart) -> None:
    chart = make_chart(5.0, {"Sun": 100.0, "Mercury": 130.0})
    assert not _named(chart, "Ubhayachari Yoga")
    (vesi,) = _named(chart, "Vesi Yoga")
    assert vesi.strength == pytest.approx(64.0)
