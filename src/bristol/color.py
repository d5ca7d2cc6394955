# SPDX-License-Identifier: MIT

from typing import Optional

# Canonical display names, in the order the entry form offers them
STOOL_COLORS = [
    "Brown",
    "Dark brown",
    "Light brown",
    "Yellow",
    "Green",
    "Black",
    "Red",
]

DEFAULT_COLOR = "Brown"

# Accepted raw spellings (lower case) to canonical name. Legacy records were
# saved with Russian names, so both vocabularies resolve here.
COLOR_SYNONYMS: dict[str, str] = {
    "brown": "Brown",
    "коричневый": "Brown",
    "dark brown": "Dark brown",
    "dark-brown": "Dark brown",
    "dark_brown": "Dark brown",
    "тёмно-коричневый": "Dark brown",
    "темно-коричневый": "Dark brown",
    "light brown": "Light brown",
    "light-brown": "Light brown",
    "light_brown": "Light brown",
    "светло-коричневый": "Light brown",
    "yellow": "Yellow",
    "жёлтый": "Yellow",
    "желтый": "Yellow",
    "green": "Green",
    "зелёный": "Green",
    "зеленый": "Green",
    "black": "Black",
    "чёрный": "Black",
    "черный": "Black",
    "red": "Red",
    "красный": "Red",
}

# Rich styles for calendar badges and distribution bars. Dark brown shares
# the brown swatch.
COLOR_SWATCHES: dict[str, str] = {
    "Brown": "rgb(102,51,26)",
    "Dark brown": "rgb(102,51,26)",
    "Light brown": "rgb(153,102,51)",
    "Yellow": "yellow",
    "Green": "green",
    "Black": "grey11",
    "Red": "red",
}

LIGHT_SWATCHES = {"Yellow"}

# Color constants for the terminal chrome
ACCENT_COLOR = "dark_orange"
SYMPTOM_COLOR = "red"
WARNING_COLOR = "orange1"
INFO_COLOR = "blue"


def normalize_color(raw: Optional[str]) -> str:
    """
    Map a stored or typed color to its canonical display name.

    Matching is case-insensitive and ignores surrounding whitespace. Anything
    not in COLOR_SYNONYMS falls back to DEFAULT_COLOR, so this is lossy
    and must not be used to validate input.
    """
    if raw is None:
        return DEFAULT_COLOR
    return COLOR_SYNONYMS.get(raw.strip().lower(), DEFAULT_COLOR)


def is_known_color(raw: Optional[str]) -> bool:
    if raw is None:
        return False
    return raw.strip().lower() in COLOR_SYNONYMS


def get_swatch(color: str) -> str:
    return COLOR_SWATCHES[normalize_color(color)]


def get_badge_style(color: Optional[str]) -> str:
    """Rich style for a day badge; plain bold when the day has no color."""
    if color is None:
        return "bold"
    canonical = normalize_color(color)
    foreground = "black" if canonical in LIGHT_SWATCHES else "white"
    return f"bold {foreground} on {COLOR_SWATCHES[canonical]}"
