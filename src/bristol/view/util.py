# SPDX-License-Identifier: MIT

from typing import Optional

from rich.text import Text

from bristol.color import normalize_color
from bristol.model.entry import Entry
from bristol.model.stool_form import STOOL_FORM_DESCRIPTIONS, is_specified_stool_form

BAR_CHARACTER = "█"
BAR_BACKGROUND_CHARACTER = "░"


def format_stool_form(stool_form: int, with_description: bool = False) -> str:
    if not is_specified_stool_form(stool_form):
        return ""
    if with_description:
        return f"Type {stool_form}. {STOOL_FORM_DESCRIPTIONS[stool_form]}"
    return f"Type {stool_form}"


def format_color(color: Optional[str]) -> str:
    if color is None or color.strip() == "":
        return ""
    return normalize_color(color)


def format_volume(entry: Entry) -> str:
    if entry["volume"] is None:
        return ""
    return entry["volume"].capitalize()


def format_symptoms(entry: Entry) -> str:
    """Comma-separated symptom flags, e.g. "Pain, Blood"."""
    symptoms = []
    if entry["has_pain"]:
        symptoms.append("Pain")
    if entry["has_blood"]:
        symptoms.append("Blood")
    if entry["has_mucus"]:
        symptoms.append("Mucus")
    return ", ".join(symptoms)


def format_hour(hour: float) -> str:
    """Average hour as shown on the statistics card (rounded, e.g. "8:00")."""
    return f"{hour:.0f}:00"


def format_frequency(frequency: float) -> str:
    return f"{frequency:.1f}"


def render_bar(count: int, max_count: int, width: int, style: str) -> Text:
    """
    Horizontal bar scaled so the largest count fills the width.
    """
    filled = 0
    if max_count > 0:
        filled = max(0, min(width, round(width * count / max_count)))
    bar = Text()
    bar.append(BAR_CHARACTER * filled, style=style)
    bar.append(BAR_BACKGROUND_CHARACTER * (width - filled), style="grey35")
    return bar
