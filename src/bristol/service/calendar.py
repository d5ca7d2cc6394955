# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from bristol.color import normalize_color
from bristol.model.entry import Entry
from bristol.model.stool_form import is_specified_stool_form
from bristol.service.metrics import day_bucket, last_entry_of_day


class DaySummary(TypedDict):
    date: pendulum.Date
    entry_count: int
    badge_form: Optional[int]  # stool form of the day's last entry
    badge_color: Optional[str]  # canonical color of the day's last entry
    entries: list[Entry]  # newest first


def get_day_summary(entries: list[Entry], date: pendulum.Date) -> DaySummary:
    """
    Summarize one calendar day.

    The badge reflects only the last entry of the day: if that entry has no
    stool form or no color, the badge has none either.
    """
    day_entries = day_bucket(entries, date)
    day_entries.sort(key=lambda entry: entry["timestamp"], reverse=True)  # type: ignore[arg-type, return-value]
    last = last_entry_of_day(entries, date)

    badge_form: Optional[int] = None
    badge_color: Optional[str] = None
    if last is not None:
        if is_specified_stool_form(last["stool_form"]):
            badge_form = last["stool_form"]
        if last["color"] is not None and last["color"].strip() != "":
            badge_color = normalize_color(last["color"])

    return {
        "date": date,
        "entry_count": len(day_entries),
        "badge_form": badge_form,
        "badge_color": badge_color,
        "entries": day_entries,
    }


def get_month_days(
    month: pendulum.Date | pendulum.DateTime,
) -> list[Optional[pendulum.Date]]:
    """
    Dates of the month laid out for a Monday-first grid.

    The list starts with one None per weekday before the 1st.
    """
    first_day = pendulum.date(month.year, month.month, 1)

    # Pendulum's day_of_week: Monday = 0, ..., Sunday = 6
    days: list[Optional[pendulum.Date]] = [None] * int(first_day.day_of_week)

    current = first_day
    while current.month == first_day.month:
        days.append(current)
        current = current.add(days=1)

    return days


def get_calendar_month(
    entries: list[Entry],
    month: pendulum.Date | pendulum.DateTime,
) -> list[list[Optional[DaySummary]]]:
    """Weeks of the month, seven cells each, padded with None."""
    cells: list[Optional[DaySummary]] = [
        get_day_summary(entries, date) if date is not None else None
        for date in get_month_days(month)
    ]
    while len(cells) % 7 != 0:
        cells.append(None)
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]
