from __future__ import annotations

import pytest

from jyotishengine.config import DrishtiCfg
from jyotishengine.jyotish.aspects import (
    ASPECT_KINDS,
    applicable_kinds,
    compute_argala,
    compute_aspect_matrix,
    compute_house_aspects,
    compute_planetary_aspect_strength,
    evaluate_aspect,
    strength_label,
)


def _kinds(planet: str, **overrides) -> set[str]:
    return {kind.name for kind in applicable_kinds(planet, DrishtiCfg(**overrides))}


def test_applicable_kinds_per_planet() -> None:
    assert _kinds("Sun") == {"conjunction", "seventh_house"}
    assert _kinds("Mars") == {"conjunction", "seventh_house", "mars_4th", "mars_8th"}
    assert _kinds("Rahu") == {"conjunction", "seventh_house"}
    assert "jupiter_9th" in _kinds("Ketu", include_node_aspects=True)


@pytest.mark.parametrize(
    ("strength", "label"),
    [
        (1.0, "Exact (Purna)"),
        (0.8, "Strong (Adhika)"),
        (0.5, "Medium (Madhya)"),
        (0.3, "Weak (Alpa)"),
        (0.1, "Negligible (Sunya)"),
    ],
)
def test_strength_label(strength: float, label: str) -> None:
    assert strength_label(strength) == label


def test_opposition_is_mutual_seventh(make_chart) -> None:
    matrix = compute_aspect_matrix(make_chart(0.0, {"Sun": 10.0, "Moon": 190.0}))
    assert len(matrix) == 2
    sun_to_moon = matrix.aspect_between("Sun", "Moon")
    assert sun_to_moon is not None
    assert sun_to_moon.kind.name == "seventh_house"
    assert sun_to_moon.orb == pytest.approx(0.0)
    assert sun_to_moon.strength == pytest.approx(1.0)
    assert sun_to_moon.strength_label == "Exact (Purna)"
    assert sun_to_moon.is_full_aspect
    assert len(matrix.mutual_pairs) == 1
    assert matrix.has_mutual_aspect("Moon", "Sun")
    assert matrix.seventh_house == matrix.aspects
    assert matrix.conjunctions == ()
    assert sun_to_moon.describe() == (
        "Sun casts 7th House Aspect on Moon (Separating) - "
        "Exact (Purna) [100.00% Drishti Bala]"
    )


@pytest.mark.parametrize(
    ("mode", "expected"),
    [("sign_based", 0.75), ("degree_based", 0.4375), ("hybrid", 0.75)],
)
def test_mars_fourth_by_mode(make_chart, mode: str, expected: float) -> None:
    chart = make_chart(0.0, {"Mars": 0.0, "Moon": 100.0})
    relation = evaluate_aspect(
        chart.position("Mars"), chart.position("Moon"), ASPECT_KINDS["mars_4th"], DrishtiCfg(mode=mode)
    )
    assert relation is not None
    assert relation.strength == pytest.approx(expected)


def test_hybrid_accepts_adjacent_sign_within_orb(make_chart) -> None:
    chart = make_chart(0.0, {"Mars": 25.0, "Moon": 125.0})
    mars, moon = chart.position("Mars"), chart.position("Moon")
    kind = ASPECT_KINDS["mars_4th"]
    assert evaluate_aspect(mars, moon, kind, DrishtiCfg(mode="sign_based")) is None
    hybrid = evaluate_aspect(mars, moon, kind, DrishtiCfg(mode="hybrid"))
    assert hybrid is not None
    assert not hybrid.sign_based
    assert hybrid.strength == pytest.approx(0.4125)
    degree = evaluate_aspect(mars, moon, kind, DrishtiCfg(mode="degree_based"))
    assert degree is not None
    assert degree.strength == pytest.approx(0.4375)


def test_outer_planets_excluded_by_default(make_chart) -> None:
    chart = make_chart(0.0, {"Uranus": 10.0, "Sun": 190.0})
    assert len(compute_aspect_matrix(chart)) == 0
    included = compute_aspect_matrix(chart, DrishtiCfg(include_outer_planets=True))
    assert included.aspect_between("Uranus", "Sun") is not None


def test_node_aspects_are_opt_in(make_chart) -> None:
    chart = make_chart(0.0, {"Rahu": 0.0, "Sun": 120.0})
    assert len(compute_aspect_matrix(chart)) == 0
    matrix = compute_aspect_matrix(chart, DrishtiCfg(include_node_aspects=True))
    assert [a.kind.name for a in matrix.aspects] == ["jupiter_5th"]
    assert matrix.aspects[0].strength == pytest.approx(0.5)
    assert matrix.special == matrix.aspects


def test_applying_depends_on_relative_speed(make_chart) -> None:
    closing = make_chart(0.0, {"Sun": 10.0, "Moon": 185.0}, speeds={"Sun": 1.0, "Moon": 3.0})
    relation = compute_aspect_matrix(closing).aspect_between("Sun", "Moon")
    assert relation is not None and relation.applying
    parting = make_chart(0.0, {"Sun": 10.0, "Moon": 185.0}, speeds={"Sun": 1.0, "Moon": 0.0})
    relation = compute_aspect_matrix(parting).aspect_between("Sun", "Moon")
    assert relation is not None and not relation.applying


def test_matrix_sorted_by_strength(spread_chart) -> None:
    matrix = compute_aspect_matrix(spread_chart)
    strengths = [a.strength for a in matrix.aspects]
    assert strengths == sorted(strengths, reverse=True)
    grouped = matrix.by_receiver()
    assert sum(len(items) for items in grouped.values()) == len(matrix)
    for planet, items in matrix.by_caster().items():
        assert all(item.caster == planet for item in items)


def test_planetary_strength_summary(make_chart) -> None:
    chart = make_chart(0.0, {"Moon": 120.0, "Jupiter": 0.0, "Saturn": 60.0})
    summary = compute_planetary_aspect_strength("Moon", chart)
    assert len(summary.benefic_aspects) == 1
    assert len(summary.malefic_aspects) == 1
    assert summary.total_drishti_bala_received == pytest.approx(1.25)
    assert summary.net_influence == pytest.approx(-0.25)
    assert not summary.is_under_benefic_influence
    assert summary.strongest_received is not None
    assert summary.strongest_received.kind.name == "saturn_3rd"


def test_house_aspects_by_sign_distance(make_chart) -> None:
    chart = make_chart(0.0, {"Mars": 10.0, "Jupiter": 60.0, "Saturn": 280.0})
    aspects = compute_house_aspects(7, chart)
    assert {a.planet for a in aspects} == {"Mars", "Jupiter", "Saturn"}
    kinds = {a.planet: a.kind.name for a in aspects}
    assert kinds == {"Mars": "seventh_house", "Jupiter": "jupiter_5th", "Saturn": "saturn_10th"}
    assert aspects[-1].planet == "Jupiter"


def test_argala_and_obstruction(make_chart) -> None:
    chart = make_chart(0.0, {"Moon": 0.0, "Jupiter": 40.0, "Venus": 100.0, "Saturn": 340.0})
    argala = compute_argala("Moon", chart)
    by_planet = {item.planet: item for item in argala.primary}
    assert by_planet["Jupiter"].house_from == 2
    assert by_planet["Jupiter"].obstructed
    assert not by_planet["Venus"].obstructed
    assert argala.net_unobstructed == 1
    assert [item.planet for item in argala.obstructions] == ["Saturn"]


def test_argala_for_missing_planet(make_chart) -> None:
    argala = compute_argala("Moon", make_chart(0.0, {"Sun": 10.0}))
    assert argala.primary == () and argala.secondary == () and argala.obstructions == ()
