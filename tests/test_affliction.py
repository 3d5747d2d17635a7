from __future__ import annotations

import pytest

from jyotishengine.jyotish.affliction import (
    benefic_aspect_boost,
    cancellation_factor,
    combustion_factor,
    has_neecha_bhanga,
    is_papakartari,
    is_vedic_aspecting,
    malefic_affliction_factor,
    moon_phase_strength,
    neecha_bhanga_reasons,
)


@pytest.mark.parametrize(
    ("mars_lon", "expected"),
    [
        (120.0, 1.0),
        (102.0, 0.2),
        (110.0, 1.0 - (7.0 / 17.0) * 0.6),
    ],
)
def test_combustion_ramp(make_chart, mars_lon: float, expected: float) -> None:
    chart = make_chart(0.0, {"Sun": 100.0, "Mars": mars_lon})
    assert combustion_factor(chart.position("Mars"), chart) == pytest.approx(expected)


def test_retrograde_mercury_uses_reduced_orb(make_chart) -> None:
    direct = make_chart(0.0, {"Sun": 100.0, "Mercury": 113.0})
    retro = make_chart(0.0, {"Sun": 100.0, "Mercury": 113.0}, speeds={"Mercury": -0.5})
    assert combustion_factor(direct.position("Mercury"), direct) < 1.0
    assert combustion_factor(retro.position("Mercury"), retro) == 1.0


def test_combustion_neutral_without_sun_or_orb(make_chart) -> None:
    chart = make_chart(0.0, {"Mars": 100.0, "Rahu": 101.0})
    assert combustion_factor(chart.position("Mars"), chart) == 1.0
    with_sun = make_chart(0.0, {"Sun": 100.0, "Rahu": 101.0})
    assert combustion_factor(with_sun.position("Rahu"), with_sun) == 1.0


def test_papakartari_requires_both_flanks(make_chart) -> None:
    hemmed = make_chart(0.0, {"Moon": 130.0, "Mars": 100.0, "Saturn": 160.0})
    assert is_papakartari(hemmed.position("Moon"), hemmed)
    open_side = make_chart(0.0, {"Moon": 130.0, "Mars": 100.0})
    assert not is_papakartari(open_side.position("Moon"), open_side)


@pytest.mark.parametrize(
    ("caster", "caster_lon", "target_lon", "expected"),
    [
        ("Jupiter", 0.0, 120.0, True),
        ("Jupiter", 0.0, 128.0, False),
        ("Venus", 0.0, 120.0, False),
        ("Saturn", 0.0, 270.0, True),
        ("Venus", 0.0, 183.0, True),
        ("Mars", 0.0, 210.0, True),
        ("Jupiter", 0.0, 242.0, True),
        ("Saturn", 0.0, 60.0, True),
        ("Rahu", 120.0, 180.0, True),
        ("Ketu", 0.0, 280.0, True),
        ("Rahu", 0.0, 120.0, False),
    ],
)
def test_vedic_aspecting(
    make_chart, caster: str, caster_lon: float, target_lon: float, expected: bool
) -> None:
    chart = make_chart(0.0, {caster: caster_lon, "Moon": target_lon})
    assert is_vedic_aspecting(chart.position(caster), chart.position("Moon")) is expected


def test_malefic_affliction_accumulates_and_caps(make_chart) -> None:
    one = make_chart(0.0, {"Moon": 180.0, "Saturn": 0.0})
    assert malefic_affliction_factor(one.position("Moon"), one) == pytest.approx(0.75)
    two = make_chart(0.0, {"Moon": 180.0, "Saturn": 0.0, "Mars": 2.0})
    assert malefic_affliction_factor(two.position("Moon"), two) == pytest.approx(0.55)
    three = make_chart(0.0, {"Moon": 180.0, "Saturn": 0.0, "Mars": 2.0, "Rahu": 1.0})
    assert malefic_affliction_factor(three.position("Moon"), three) == pytest.approx(0.4)


def test_rahu_afflicts_third_house_by_sign(make_chart) -> None:
    chart = make_chart(0.0, {"Moon": 180.0, "Rahu": 120.0})
    assert malefic_affliction_factor(chart.position("Moon"), chart) == pytest.approx(0.82)
    # Same sign distance, far from any exact angle.
    wide = make_chart(0.0, {"Moon": 209.0, "Rahu": 120.0})
    assert malefic_affliction_factor(wide.position("Moon"), wide) == pytest.approx(0.82)
    sixth = make_chart(0.0, {"Moon": 280.0, "Ketu": 130.0})
    assert malefic_affliction_factor(sixth.position("Moon"), sixth) == 1.0


@pytest.mark.parametrize(("moon_lon", "expected"), [(90.0, 0.5), (180.0, 1.0), (270.0, 0.5)])
def test_moon_phase_strength(make_chart, moon_lon: float, expected: float) -> None:
    chart = make_chart(0.0, {"Sun": 0.0, "Moon": moon_lon})
    assert moon_phase_strength(chart) == pytest.approx(expected)


def test_moon_phase_defaults_when_moon_missing(make_chart) -> None:
    assert moon_phase_strength(make_chart(0.0, {"Sun": 0.0})) == 0.5


def test_benefic_boost_from_jupiter(make_chart) -> None:
    chart = make_chart(0.0, {"Jupiter": 0.0, "Mars": 180.0})
    assert benefic_aspect_boost(chart.position("Mars"), chart) == pytest.approx(1.15)


def test_dark_moon_gives_no_boost(make_chart) -> None:
    chart = make_chart(0.0, {"Sun": 10.0, "Moon": 0.0, "Mars": 180.0})
    assert benefic_aspect_boost(chart.position("Mars"), chart) == 1.0


def test_neecha_bhanga_by_kendra_placement(make_chart) -> None:
    chart = make_chart(5.0, {"Sun": 190.0, "Venus": 40.0, "Mars": 70.0})
    sun = chart.position("Sun")
    assert neecha_bhanga_reasons(sun, chart) == ("kendra_placement",)
    assert has_neecha_bhanga(sun, chart)


def test_neecha_bhanga_by_sign_lord(make_chart) -> None:
    chart = make_chart(65.0, {"Sun": 190.0, "Venus": 160.0, "Mars": 40.0, "Jupiter": 95.0})
    assert neecha_bhanga_reasons(chart.position("Sun"), chart) == ("sign_lord_in_kendra",)


def test_neecha_bhanga_only_for_debilitated(make_chart) -> None:
    chart = make_chart(5.0, {"Sun": 10.0})
    assert neecha_bhanga_reasons(chart.position("Sun"), chart) == ()


def test_cancellation_neutral_for_clean_planet(make_chart) -> None:
    chart = make_chart(0.0, {"Jupiter": 250.0})
    result = cancellation_factor([chart.position("Jupiter")], chart)
    assert result.factor == pytest.approx(1.0)
    assert result.notes == ()


def test_cancellation_debilitated_in_enemy_sign(make_chart) -> None:
    chart = make_chart(35.0, {"Saturn": 10.0, "Mars": 100.0, "Venus": 160.0})
    result = cancellation_factor([chart.position("Saturn")], chart)
    assert result.factor == pytest.approx(0.425)
    assert result.notes == (
        "Saturn debilitated without cancellation",
        "Saturn in enemy sign",
    )


def test_cancellation_is_clamped(make_chart) -> None:
    chart = make_chart(0.0, {"Sun": 100.0, "Mars": 101.0, "Saturn": 280.0})
    result = cancellation_factor([chart.position("Mars")] * 3, chart)
    assert result.factor == pytest.approx(0.1)
    assert "Mars is deeply combust" in result.notes
