from __future__ import annotations

import pytest

from jyotishengine.yogas import (
    Yoga,
    compute_yoga_analysis,
    dominant_category,
    overall_strength,
    strength_band,
)


def _yoga(category: str, strength: float = 60.0, *, auspicious: bool = True) -> Yoga:
    return Yoga(
        name=f"{category} test",
        sanskrit_name=f"{category} test",
        category=category,
        planets=("Sun",),
        houses=(1,),
        description="",
        effects="",
        strength=strength,
        auspicious=auspicious,
        activation_period="",
    )


def test_dominant_category_counts_non_negative() -> None:
    yogas = [_yoga("raja"), _yoga("raja"), _yoga("dhana"), _yoga("negative", auspicious=False)]
    assert dominant_category(yogas) == "raja"
    assert dominant_category([_yoga("negative"), _yoga("negative")]) == "raja"
    assert dominant_category([]) == "raja"


def test_dominant_category_tie_prefers_earlier_family() -> None:
    assert dominant_category([_yoga("dhana"), _yoga("raja")]) == "raja"
    assert dominant_category([_yoga("special"), _yoga("chandra")]) == "chandra"


def test_overall_strength() -> None:
    assert overall_strength([]) == 50.0
    pair = [_yoga("raja", 80.0), _yoga("dhana", 60.0)]
    assert overall_strength(pair) == pytest.approx(70.0)
    with_negative = [*pair, _yoga("negative", 75.0, auspicious=False)]
    assert overall_strength(with_negative) == pytest.approx(63.0)
    crushed = [*pair, *(_yoga("negative", auspicious=False) for _ in range(11))]
    assert overall_strength(crushed) == 0.0


def test_overall_strength_neutral_when_only_inauspicious() -> None:
    assert overall_strength([_yoga("negative", 80.0, auspicious=False)]) == 50.0


@pytest.mark.parametrize(
    ("value", "band"),
    [(90.0, "extremely_strong"), (70.0, "strong"), (55.0, "moderate"), (30.0, "weak"), (5.0, "very_weak")],
)
def test_strength_band(value: float, band: str) -> None:
    assert strength_band(value) == band


def test_analysis_is_deterministic(spread_chart) -> None:
    first = compute_yoga_analysis(spread_chart)
    second = compute_yoga_analysis(spread_chart)
    assert first == second
    assert len(first) > 0


def test_analysis_strengths_within_bounds(spread_chart) -> None:
    analysis = compute_yoga_analysis(spread_chart)
    for yoga in analysis.yogas:
        floor = 30.0 if yoga.category == "mahapurusha" else 10.0
        assert floor <= yoga.strength <= 100.0, yoga.name
    assert 0.0 <= analysis.overall_strength <= 100.0
    grouped = analysis.by_category()
    assert sum(len(items) for items in grouped.values()) == len(analysis)
    assert set(analysis.negative) <= set(analysis.yogas)


def test_empty_chart_has_no_yogas(make_chart) -> None:
    analysis = compute_yoga_analysis(make_chart(0.0, {}))
    assert analysis.yogas == ()
    assert analysis.dominant_category == "raja"
    assert analysis.overall_strength == 50.0
