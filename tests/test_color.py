"""Canonical stool colors and the synonym table."""

import pytest

from bristol.color import (
    COLOR_SWATCHES,
    COLOR_SYNONYMS,
    DEFAULT_COLOR,
    STOOL_COLORS,
    get_badge_style,
    is_known_color,
    normalize_color,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Brown", "Brown"),
        ("  DARK BROWN ", "Dark brown"),
        ("light-brown", "Light brown"),
        ("жёлтый", "Yellow"),
        ("черный", "Black"),
        ("красный", "Red"),
    ],
)
def test_normalize_color(raw, expected):
    assert normalize_color(raw) == expected


def test_unknown_and_missing_fall_back_to_brown():
    assert normalize_color("purple") == DEFAULT_COLOR
    assert normalize_color(None) == DEFAULT_COLOR
    assert not is_known_color("purple")


def test_normalize_is_idempotent():
    for raw in list(COLOR_SYNONYMS) + STOOL_COLORS + ["purple"]:
        once = normalize_color(raw)
        assert normalize_color(once) == once


def test_every_synonym_targets_a_canonical_color_with_a_swatch():
    assert set(COLOR_SYNONYMS.values()) == set(STOOL_COLORS)
    assert set(COLOR_SWATCHES) == set(STOOL_COLORS)


def test_badge_style():
    assert get_badge_style(None) == "bold"
    assert get_badge_style("Yellow").startswith("bold black on")
    assert get_badge_style("красный") == "bold white on red"
