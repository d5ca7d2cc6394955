# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from bristol.configuration import Period
from bristol.service.entry import (
    EntryValidationError,
    parse_color,
    parse_volume,
    validate_stool_form,
)
from bristol.service.metrics import WINDOWS


def validate_form(stool_form: Optional[int]) -> Optional[int]:
    if stool_form is None:
        return None
    try:
        return validate_stool_form(stool_form)
    except EntryValidationError as e:
        raise typer.BadParameter(str(e))


def validate_color(color: Optional[str]) -> Optional[str]:
    if color is None:
        return None
    # Blank input is passed on so that it clears the default color
    if color.strip() == "":
        return ""
    try:
        return parse_color(color)
    except EntryValidationError as e:
        raise typer.BadParameter(str(e))


def validate_volume(volume: Optional[str]) -> Optional[str]:
    if volume is None:
        return None
    if volume.strip() == "":
        return ""
    try:
        return parse_volume(volume)
    except EntryValidationError as e:
        raise typer.BadParameter(str(e))


def validate_period(period: Optional[str]) -> Optional[Period]:
    if period is None:
        return None
    normalized = period.strip().lower()
    if normalized not in WINDOWS:
        raise typer.BadParameter(
            f"Unknown period: '{period}'. Valid options: {', '.join(WINDOWS)}"
        )
    return normalized  # type: ignore[return-value]


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if log_level.upper() not in levels:
        raise typer.BadParameter(f"Log level must be one of {', '.join(levels)}")
    return log_level.upper()
