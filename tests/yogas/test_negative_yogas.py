"""Fixed-strength negative detectors and their mitigations."""

from __future__ import annotations

import pytest

from jyotishengine.yogas import compute_yoga_analysis


def _negative(chart, name: str):
    return [y for y in compute_yoga_analysis(chart).of_category("negative") if y.name == name]


@pytest.mark.parametrize(
    ("placements", "name", "strength"),
    [
        ({"Saturn": 160.0}, "Daridra Yoga", 60.0),
        ({"Jupiter": 10.0, "Moon": 160.0}, "Shakata Yoga", 50.0),
        ({"Jupiter": 100.0, "Rahu": 104.0}, "Guru-Chandal Yoga", 65.0),
        ({"Sun": 100.0, "Ketu": 104.0}, "Surya-Ketu Grahan Yoga", 55.0),
        ({"Moon": 190.0, "Rahu": 192.0}, "Chandra Grahan Yoga", 70.0),
        ({"Moon": 190.0, "Ketu": 193.0}, "Chandra-Ketu Yoga", 50.0),
        ({"Mars": 130.0, "Rahu": 133.0}, "Angarak Yoga", 80.0),
        ({"Saturn": 250.0, "Rahu": 253.0}, "Shrapit Yoga", 75.0),
        ({"Saturn": 40.0, "Mars": 340.0}, "Papakartari Yoga", 60.0),
    ],
)
def test_negative_yoga_present(make_chart, placements, name, strength) -> None:
    (yoga,) = _negative(make_chart(5.0, placements), name)
    assert yoga.category == "negative"
    assert not yoga.auspicious
    assert yoga.strength == strength


@pytest.mark.parametrize(
    ("placements", "name"),
    [
        ({"Saturn": 310.0}, "Daridra Yoga"),
        ({"Jupiter": 10.0, "Moon": 190.0}, "Shakata Yoga"),
        ({"Jupiter": 100.0, "Rahu": 120.0}, "Guru-Chandal Yoga"),
        ({"Sun": 100.0, "Ketu": 120.0}, "Surya-Ketu Grahan Yoga"),
        ({"Moon": 190.0, "Rahu": 210.0}, "Chandra Grahan Yoga"),
        ({"Moon": 190.0, "Ketu": 215.0}, "Chandra-Ketu Yoga"),
        ({"Mars": 130.0, "Rahu": 150.0}, "Angarak Yoga"),
        ({"Saturn": 250.0, "Rahu": 270.0}, "Shrapit Yoga"),
        ({"Saturn": 40.0, "Mars": 100.0}, "Papakartari Yoga"),
    ],
)
def test_negative_yoga_absent(make_chart, placements, name) -> None:
    assert not _negative(make_chart(5.0, placements), name)


def test_chandra_grahan_uncancelled(make_chart) -> None:
    (yoga,) = _negative(make_chart(5.0, {"Moon": 190.0, "Rahu": 192.0}), "Chandra Grahan Yoga")
    assert yoga.strength >= 70.0
    assert yoga.cancellation_factors == ("None identified",)


@pytest.mark.parametrize(
    ("placements", "note"),
    [
        ({"Moon": 100.0, "Rahu": 102.0}, "Moon is strong - reduces negative effects"),
        ({"Moon": 190.0, "Rahu": 192.0, "Jupiter": 12.0}, "Jupiter aspects/conjoins Moon"),
    ],
)
def test_chandra_grahan_mitigated(make_chart, placements, note) -> None:
    (yoga,) = _negative(make_chart(5.0, placements), "Chandra Grahan Yoga")
    assert yoga.strength == 30.0
    assert yoga.cancellation_factors == (note,)


def test_angarak_mitigated_by_exalted_mars_in_upachaya(make_chart) -> None:
    (yoga,) = _negative(make_chart(5.0, {"Mars": 280.0, "Rahu": 282.0}), "Angarak Yoga")
    assert yoga.strength == 50.0
    assert yoga.cancellation_factors == (
        "Mars is strong - can channel energy positively",
        "Mars in Upachaya - aggression becomes drive",
    )


def test_lagna_papakartari_lists_flanking_malefics(make_chart) -> None:
    (yoga,) = _negative(make_chart(5.0, {"Saturn": 40.0, "Mars": 340.0}), "Papakartari Yoga")
    assert yoga.planets == ("Saturn", "Mars")
    assert yoga.houses == (1, 2, 12)
