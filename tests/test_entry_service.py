"""Building and validating new entries."""

import pytest

from bristol.service.entry import (
    EntryValidationError,
    create_entry,
    parse_color,
    parse_volume,
    validate_stool_form,
)
from conftest import at


def test_defaults_follow_the_entry_form():
    entry = create_entry(timestamp=at(5, 8))
    assert entry["id"] is None
    assert entry["timestamp"] == at(5, 8)
    assert entry["stool_form"] == 4
    assert entry["color"] == "Brown"
    assert entry["volume"] == "medium"
    assert not (entry["has_pain"] or entry["has_blood"] or entry["has_mucus"])
    assert entry["comment"] is None


def test_missing_timestamp_means_now():
    assert create_entry()["timestamp"] is not None


def test_explicit_values():
    entry = create_entry(
        timestamp=at(5),
        stool_form=1,
        color="dark-brown",
        volume="LARGE",
        has_blood=True,
        comment="note",
    )
    assert entry["stool_form"] == 1
    assert entry["color"] == "Dark brown"
    assert entry["volume"] == "large"
    assert entry["has_blood"] is True
    assert entry["comment"] == "note"


def test_blank_comment_is_dropped():
    assert create_entry(comment="   ")["comment"] is None


def test_blank_color_and_volume_clear_the_defaults():
    entry = create_entry(color="", volume="  ")
    assert entry["color"] is None
    assert entry["volume"] is None


@pytest.mark.parametrize("stool_form", [0, 1, 7])
def test_valid_forms(stool_form):
    assert validate_stool_form(stool_form) == stool_form


@pytest.mark.parametrize("stool_form", [-1, 8])
def test_invalid_forms(stool_form):
    with pytest.raises(EntryValidationError):
        create_entry(stool_form=stool_form)


def test_unknown_color_is_rejected():
    with pytest.raises(EntryValidationError):
        parse_color("purple")
    assert parse_color("") is None


def test_unknown_volume_is_rejected():
    with pytest.raises(EntryValidationError):
        parse_volume("huge")
    assert parse_volume(None) is None
