"""Reference tables for classical Jyotish dignity, friendship and aspect data.

The constants in this module are drawn from widely cited Vedic astrology
sources:

* Sign lordship follows the classical Parasara scheme from *Brihat Parashara
  Hora Shastra* (BPHS), chapters 4-6.  The nodes are given the co-rulership
  of Aquarius (Rahu) and Scorpio (Ketu) that most modern Parasari software
  uses for own-sign checks.
* Exaltation and debilitation signs, together with the exact exaltation
  degrees used by the "deep" dignity checks, follow BPHS chapter 3 as
  tabulated by B. V. Raman in *Graha and Bhava Balas* (1984).  The nodes use
  the Gemini/Sagittarius convention.
* Moolatrikona spans are the degree ranges quoted in the same table.
* Natural friendship and enmity mirror BPHS chapter 3 (Naisargika Maitri).
  Anything not listed as friend or enemy is neutral.
* Combustion orbs (Asta) are the Surya Siddhanta values, with the reduced
  orbs for retrograde Mercury and Venus.
* Directional strength (Dig Bala) peaks in the house facing the planet's
  favoured direction: Jupiter and Mercury in the east (1st), Moon and Venus in
  the north (4th), Saturn in the west (7th), Sun and Mars in the south (10th).
* Aspect kinds encode the Parasara graha drishti.  Every graha casts a full
  glance on the 7th; Mars, Jupiter and Saturn add their special glances.

The tables are plain mappings so they can be indexed efficiently and shared,
read-only, by every computation in the process.
"""

from __future__ import annotations

from collections.abc import Mapping

__all__ = [
    "ZODIAC_SIGNS",
    "SIGN_LORDS",
    "SIGN_MODALITIES",
    "PLANET_ORDER",
    "MAIN_PLANETS",
    "OUTER_PLANETS",
    "NATURAL_BENEFICS",
    "NATURAL_MALEFICS",
    "OWN_SIGNS",
    "EXALTATION_SIGNS",
    "DEBILITATION_SIGNS",
    "EXALTATION_DEGREES",
    "MOOLATRIKONA_SPANS",
    "PLANET_FRIENDS",
    "PLANET_ENEMIES",
    "COMBUSTION_ORBS",
    "RETROGRADE_COMBUSTION_ORBS",
    "DIG_BALA_HOUSES",
    "KENDRA_HOUSES",
    "TRIKONA_HOUSES",
    "DUSTHANA_HOUSES",
    "UPACHAYA_HOUSES",
    "SPECIAL_ASPECT_OFFSETS",
    "NODE_ASPECT_OFFSETS",
    "NAKSHATRA_NAMES",
]

ZODIAC_SIGNS: tuple[str, ...] = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)

# Primary sign lords (classical Parasara scheme).
SIGN_LORDS: Mapping[str, str] = {
    "Aries": "Mars",
    "Taurus": "Venus",
    "Gemini": "Mercury",
    "Cancer": "Moon",
    "Leo": "Sun",
    "Virgo": "Mercury",
    "Libra": "Venus",
    "Scorpio": "Mars",
    "Sagittarius": "Jupiter",
    "Capricorn": "Saturn",
    "Aquarius": "Saturn",
    "Pisces": "Jupiter",
}

# Chara (movable), Sthira (fixed) and Dwiswabhava (dual) signs.
SIGN_MODALITIES: Mapping[str, str] = {
    "Aries": "movable",
    "Taurus": "fixed",
    "Gemini": "dual",
    "Cancer": "movable",
    "Leo": "fixed",
    "Virgo": "dual",
    "Libra": "movable",
    "Scorpio": "fixed",
    "Sagittarius": "dual",
    "Capricorn": "movable",
    "Aquarius": "fixed",
    "Pisces": "dual",
}

# Canonical ordering used for deterministic tie-breaks and pair keys.
PLANET_ORDER: tuple[str, ...] = (
    "Sun",
    "Moon",
    "Mercury",
    "Venus",
    "Mars",
    "Jupiter",
    "Saturn",
    "Rahu",
    "Ketu",
    "Uranus",
    "Neptune",
    "Pluto",
)

MAIN_PLANETS: frozenset[str] = frozenset(
    {"Sun", "Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn", "Rahu", "Ketu"}
)
OUTER_PLANETS: frozenset[str] = frozenset({"Uranus", "Neptune", "Pluto"})

NATURAL_BENEFICS: frozenset[str] = frozenset({"Jupiter", "Venus", "Mercury", "Moon"})
NATURAL_MALEFICS: frozenset[str] = frozenset({"Sun", "Mars", "Saturn", "Rahu", "Ketu"})

OWN_SIGNS: Mapping[str, tuple[str, ...]] = {
    "Sun": ("Leo",),
    "Moon": ("Cancer",),
    "Mars": ("Aries", "Scorpio"),
    "Mercury": ("Gemini", "Virgo"),
    "Jupiter": ("Sagittarius", "Pisces"),
    "Venus": ("Taurus", "Libra"),
    "Saturn": ("Capricorn", "Aquarius"),
    "Rahu": ("Aquarius",),
    "Ketu": ("Scorpio",),
}

EXALTATION_SIGNS: Mapping[str, str] = {
    "Sun": "Aries",
    "Moon": "Taurus",
    "Mars": "Capricorn",
    "Mercury": "Virgo",
    "Jupiter": "Cancer",
    "Venus": "Pisces",
    "Saturn": "Libra",
    "Rahu": "Gemini",
    "Ketu": "Sagittarius",
}

DEBILITATION_SIGNS: Mapping[str, str] = {
    "Sun": "Libra",
    "Moon": "Scorpio",
    "Mars": "Cancer",
    "Mercury": "Pisces",
    "Jupiter": "Capricorn",
    "Venus": "Virgo",
    "Saturn": "Aries",
    "Rahu": "Sagittarius",
    "Ketu": "Gemini",
}

# Degree within the exaltation sign of maximum exaltation.  Deep debilitation
# falls on the same degree of the opposite sign.
EXALTATION_DEGREES: Mapping[str, float] = {
    "Sun": 10.0,
    "Moon": 3.0,
    "Mars": 28.0,
    "Mercury": 15.0,
    "Jupiter": 5.0,
    "Venus": 27.0,
    "Saturn": 20.0,
}

# Moolatrikona spans stored as (sign, start_degree, end_degree), inclusive.
MOOLATRIKONA_SPANS: Mapping[str, tuple[str, float, float]] = {
    "Sun": ("Leo", 0.0, 20.0),
    "Moon": ("Taurus", 4.0, 20.0),
    "Mars": ("Aries", 0.0, 12.0),
    "Mercury": ("Virgo", 16.0, 20.0),
    "Jupiter": ("Sagittarius", 0.0, 10.0),
    "Venus": ("Libra", 0.0, 15.0),
    "Saturn": ("Aquarius", 0.0, 20.0),
}

PLANET_FRIENDS: Mapping[str, frozenset[str]] = {
    "Sun": frozenset({"Moon", "Mars", "Jupiter"}),
    "Moon": frozenset({"Sun", "Mercury"}),
    "Mars": frozenset({"Sun", "Moon", "Jupiter"}),
    "Mercury": frozenset({"Sun", "Venus"}),
    "Jupiter": frozenset({"Sun", "Moon", "Mars"}),
    "Venus": frozenset({"Mercury", "Saturn"}),
    "Saturn": frozenset({"Mercury", "Venus"}),
    "Rahu": frozenset({"Mercury", "Venus", "Saturn"}),
    "Ketu": frozenset({"Mars", "Venus", "Saturn"}),
}

PLANET_ENEMIES: Mapping[str, frozenset[str]] = {
    "Sun": frozenset({"Saturn", "Venus"}),
    "Moon": frozenset(),
    "Mars": frozenset({"Mercury"}),
    "Mercury": frozenset({"Moon"}),
    "Jupiter": frozenset({"Mercury", "Venus"}),
    "Venus": frozenset({"Sun", "Moon"}),
    "Saturn": frozenset({"Sun", "Moon", "Mars"}),
    "Rahu": frozenset({"Sun", "Moon", "Mars"}),
    "Ketu": frozenset({"Sun", "Moon"}),
}

COMBUSTION_ORBS: Mapping[str, float] = {
    "Moon": 12.0,
    "Mars": 17.0,
    "Mercury": 14.0,
    "Jupiter": 11.0,
    "Venus": 10.0,
    "Saturn": 15.0,
}

RETROGRADE_COMBUSTION_ORBS: Mapping[str, float] = {
    "Mercury": 12.0,
    "Venus": 8.0,
}

DIG_BALA_HOUSES: Mapping[str, int] = {
    "Sun": 10,
    "Mars": 10,
    "Moon": 4,
    "Venus": 4,
    "Mercury": 1,
    "Jupiter": 1,
    "Saturn": 7,
}

KENDRA_HOUSES: frozenset[int] = frozenset({1, 4, 7, 10})
TRIKONA_HOUSES: frozenset[int] = frozenset({1, 5, 9})
DUSTHANA_HOUSES: frozenset[int] = frozenset({6, 8, 12})
UPACHAYA_HOUSES: frozenset[int] = frozenset({3, 6, 10, 11})

# Special glances (house offsets counted inclusively) beyond the universal 7th.
SPECIAL_ASPECT_OFFSETS: Mapping[str, tuple[int, ...]] = {
    "Mars": (4, 8),
    "Jupiter": (5, 9),
    "Saturn": (3, 10),
}

# The nodes glance on the 3rd and 10th houses, counted by sign alone.
NODE_ASPECT_OFFSETS: tuple[int, ...] = (3, 10)

NAKSHATRA_NAMES: tuple[str, ...] = (
    "Ashwini",
    "Bharani",
    "Krittika",
    "Rohini",
    "Mrigashira",
    "Ardra",
    "Punarvasu",
    "Pushya",
    "Ashlesha",
    "Magha",
    "Purva Phalguni",
    "Uttara Phalguni",
    "Hasta",
    "Chitra",
    "Swati",
    "Vishakha",
    "Anuradha",
    "Jyeshtha",
    "Mula",
    "Purva Ashadha",
    "Uttara Ashadha",
    "Shravana",
    "Dhanishtha",
    "Shatabhisha",
    "Purva Bhadrapada",
    "Uttara Bhadrapada",
    "Revati",
)
