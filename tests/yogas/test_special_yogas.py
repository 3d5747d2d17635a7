"""Special-family detectors and the dignity reinforcement marker."""

from __future__ import annotations

import pytest

from jyotishengine.yogas import compute_yoga_analysis


def _named(chart, name: str):
    return [yoga for yoga in compute_yoga_analysis(chart).yogas if yoga.name == name]


def _only(chart, name: str):
    matches = _named(chart, name)
    assert len(matches) == 1, f"expected one {name}, got {len(matches)}"
    yoga = matches[0]
    assert yoga.category == "special"
    assert yoga.auspicious
    return yoga


def test_amala_from_lagna(make_chart) -> None:
    yoga = _only(make_chart(5.0, {"Venus": 280.0}), "Venus Amala Yoga")
    assert yoga.sanskrit_name == "Amala Yoga"
    assert yoga.houses == (10,)
    assert yoga.strength == pytest.approx(64.0)


def test_amala_from_moon(make_chart) -> None:
    yoga = _only(make_chart(35.0, {"Moon": 100.0, "Venus": 10.0}), "Venus Amala Yoga")
    assert yoga.description.endswith("10th from Moon")
    assert yoga.strength == pytest.approx(40.0)


def test_amala_absent(make_chart) -> None:
    assert not _named(make_chart(5.0, {"Venus": 250.0}), "Venus Amala Yoga")


def test_saraswati(make_chart) -> None:
    chart = make_chart(5.0, {"Jupiter": 250.0, "Venus": 100.0, "Mercury": 20.0})
    yoga = _only(chart, "Saraswati Yoga")
    assert yoga.houses == (9, 4, 1)
    assert yoga.strength == pytest.approx(85.0)
    assert yoga.cancellation_factors == ("Venus in enemy sign",)


def test_saraswati_needs_all_three_well_placed(make_chart) -> None:
    chart = make_chart(5.0, {"Jupiter": 250.0, "Venus": 160.0, "Mercury": 20.0})
    assert not _named(chart, "Saraswati Yoga")


def test_parvata(make_chart) -> None:
    yoga = _only(make_chart(5.0, {"Jupiter": 100.0}), "Parvata Yoga")
    assert yoga.planets == ("Jupiter",)
    assert yoga.strength == pytest.approx(79.0)


def test_parvata_spoilt_by_malefic_in_kendra(make_chart) -> None:
    assert not _named(make_chart(5.0, {"Jupiter": 100.0, "Saturn": 190.0}), "Parvata Yoga")


def test_kahala(make_chart) -> None:
    yoga = _only(make_chart(5.0, {"Moon": 125.0, "Jupiter": 130.0}), "Kahala Yoga")
    assert yoga.planets == ("Moon", "Jupiter")
    assert yoga.strength == pytest.approx(78.0)
    assert not _named(make_chart(5.0, {"Moon": 125.0, "Jupiter": 200.0}), "Kahala Yoga")


def test_shubhakartari(make_chart) -> None:
    yoga = _only(make_chart(5.0, {"Venus": 40.0, "Jupiter": 340.0}), "Shubhakartari Yoga")
    assert yoga.planets == ("Venus", "Jupiter")
    assert yoga.houses == (1, 2, 12)
    assert yoga.strength == pytest.approx(68.0)
    assert not _named(make_chart(5.0, {"Venus": 40.0, "Jupiter": 250.0}), "Shubhakartari Yoga")


def test_sanyasa(make_chart) -> None:
    placements = {"Moon": 10.0, "Mercury": 15.0, "Venus": 20.0, "Saturn": 25.0}
    yoga = _only(make_chart(5.0, placements), "Sanyasa Yoga")
    assert yoga.planets == ("Moon", "Mercury", "Venus", "Saturn")
    assert yoga.houses == (1,)
    assert yoga.strength == pytest.approx(74.0 * 0.85)
    assert yoga.cancellation_factors == ("Saturn in enemy sign",)


def test_sanyasa_needs_four_planets(make_chart) -> None:
    chart = make_chart(5.0, {"Moon": 10.0, "Mercury": 15.0, "Venus": 20.0})
    assert not _named(chart, "Sanyasa Yoga")


def test_chamara(make_chart) -> None:
    # Exalted lagna lord Mars receives Jupiter's 5th-house glance.
    yoga = _only(make_chart(5.0, {"Mars": 280.0, "Jupiter": 160.0}), "Chamara Yoga")
    assert yoga.planets == ("Mars", "Jupiter")
    assert yoga.strength == pytest.approx(70.0 * 1.15 * 0.85)
    assert yoga.cancellation_factors == ("Jupiter in enemy sign",)


def test_chamara_needs_jupiter_aspect(make_chart) -> None:
    assert not _named(make_chart(5.0, {"Mars": 280.0, "Jupiter": 190.0}), "Chamara Yoga")


def test_dharma_karmadhipati(make_chart) -> None:
    yoga = _only(make_chart(5.0, {"Jupiter": 250.0, "Saturn": 255.0}), "Dharma-Karmadhipati Yoga")
    assert yoga.planets == ("Jupiter", "Saturn")
    assert yoga.strength == pytest.approx(78.0 * 1.15)
    assert not _named(make_chart(5.0, {"Jupiter": 250.0, "Saturn": 300.0}), "Dharma-Karmadhipati Yoga")


def test_vargottama_strength_multiplier(make_chart) -> None:
    yoga = _only(make_chart(5.0, {"Venus": 190.0}), "Venus Vargottama Strength")
    assert yoga.sanskrit_name == "Vargottama Bala"
    assert yoga.strength == pytest.approx(70.0 * 1.1)
    assert not _named(make_chart(5.0, {"Venus": 160.0}), "Venus Vargottama Strength")
