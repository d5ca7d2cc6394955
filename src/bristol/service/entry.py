# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum

from bristol.color import STOOL_COLORS, is_known_color, normalize_color
from bristol.model.entry import VOLUMES, Entry, Volume
from bristol.model.stool_form import (
    MAX_STOOL_FORM,
    MIN_STOOL_FORM,
    UNSPECIFIED_STOOL_FORM,
)
from bristol.template.entry import get_entry_template
from bristol.time import now_utc


class EntryValidationError(Exception):
    """Raised when entry validation fails."""

    pass


def validate_stool_form(stool_form: int) -> int:
    """
    Accept a form on the 1-7 scale, or 0 for unspecified.

    Returns the form if valid, raises EntryValidationError if not.
    """
    if stool_form == UNSPECIFIED_STOOL_FORM:
        return stool_form
    if not (MIN_STOOL_FORM <= stool_form <= MAX_STOOL_FORM):
        raise EntryValidationError(
            f"Stool form must be between {MIN_STOOL_FORM} and {MAX_STOOL_FORM} "
            f"(or {UNSPECIFIED_STOOL_FORM} for unspecified). Got: {stool_form}"
        )
    return stool_form


def parse_color(color: Optional[str]) -> Optional[str]:
    """
    Resolve user input to a canonical color name.

    Unlike normalize_color, unknown names are rejected here so that new
    records only ever hold the canonical vocabulary.
    """
    if color is None or color.strip() == "":
        return None
    if not is_known_color(color):
        raise EntryValidationError(
            f"Unknown color: '{color}'. Valid options: {', '.join(STOOL_COLORS)}"
        )
    return normalize_color(color)


def parse_volume(volume: Optional[str]) -> Optional[Volume]:
    if volume is None or volume.strip() == "":
        return None
    normalized = volume.strip().lower()
    if normalized not in VOLUMES:
        raise EntryValidationError(
            f"Unknown volume: '{volume}'. Valid options: {', '.join(VOLUMES)}"
        )
    return cast(Volume, normalized)


def create_entry(
    timestamp: Optional[pendulum.DateTime] = None,
    stool_form: Optional[int] = None,
    color: Optional[str] = None,
    volume: Optional[str] = None,
    has_pain: bool = False,
    has_blood: bool = False,
    has_mucus: bool = False,
    comment: Optional[str] = None,
) -> Entry:
    """
    Build a validated entry, starting from the entry form defaults.

    Options left as None keep the template value. An empty color, volume or
    comment is stored as no value.
    """
    entry = get_entry_template()

    entry["timestamp"] = timestamp if timestamp is not None else now_utc()
    if stool_form is not None:
        entry["stool_form"] = validate_stool_form(stool_form)
    if color is not None:
        entry["color"] = parse_color(color)
    if volume is not None:
        entry["volume"] = parse_volume(volume)

    entry["has_pain"] = has_pain
    entry["has_blood"] = has_blood
    entry["has_mucus"] = has_mucus
    entry["comment"] = comment if comment is not None and comment.strip() != "" else None

    return entry
