# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from bristol.color import normalize_color
from bristol.model.entry import Entry
from bristol.model.stool_form import (
    MAX_STOOL_FORM,
    MIN_STOOL_FORM,
    is_specified_stool_form,
)
from bristol.time import local_date, now_local

Window = Literal["week", "month", "all"]

WINDOWS: list[Window] = ["week", "month", "all"]

# Days with at least this many entries count as too frequent
TOO_FREQUENT_THRESHOLD = 4


class IrregularityStreaks(TypedDict):
    days_without_entry: int
    too_frequent_days: int


class Statistics(TypedDict):
    window: Window
    entry_count: int
    frequency_per_day: float
    type_distribution: dict[int, int]
    color_distribution: dict[str, int]
    average_hour_of_day: float
    irregularity_streaks: IrregularityStreaks


def _entry_day(entry: Entry) -> Optional[pendulum.Date]:
    if entry["timestamp"] is None:
        return None
    return local_date(entry["timestamp"])


def _as_date(date: pendulum.Date | pendulum.DateTime) -> pendulum.Date:
    if isinstance(date, pendulum.DateTime):
        return local_date(date)
    return date


def _distinct_days(entries: list[Entry]) -> set[pendulum.Date]:
    days = set()
    for entry in entries:
        day = _entry_day(entry)
        if day is not None:
            days.add(day)
    return days


def day_bucket(
    entries: list[Entry], date: pendulum.Date | pendulum.DateTime
) -> list[Entry]:
    """
    Entries that fall on the same local calendar day as date.

    A DateTime is reduced to its local year/month/day first. Input order is
    kept.
    """
    target = _as_date(date)
    return [entry for entry in entries if _entry_day(entry) == target]


def last_entry_of_day(
    entries: list[Entry], date: pendulum.Date | pendulum.DateTime
) -> Optional[Entry]:
    """
    The latest entry of the day, which decides the calendar badge.

    Entries sharing the maximum timestamp resolve to the first one in input
    order.
    """
    last: Optional[Entry] = None
    for entry in day_bucket(entries, date):
        if last is None or entry["timestamp"] > last["timestamp"]:  # type: ignore[operator]
            last = entry
    return last


def filter_by_window(
    entries: list[Entry],
    window: Window,
    now: Optional[pendulum.DateTime] = None,
) -> list[Entry]:
    """
    Restrict entries to a statistics period ending at now.

    week keeps the last 7 days, month the last calendar month (pendulum clamps
    e.g. Mar 31 to Feb 28/29), all keeps everything. Entries without a
    timestamp never pass.

    Raises:
        ValueError: If window is not one of week, month or all. Periods typed
            by users are checked by the command line before they get here.
    """
    timestamped = [entry for entry in entries if entry["timestamp"] is not None]
    if window == "all":
        return timestamped

    if now is None:
        now = now_local()

    if window == "week":
        start = now.subtract(days=7)
    elif window == "month":
        start = now.subtract(months=1)
    else:
        raise ValueError(f"Unknown window: {window}")

    return [
        entry
        for entry in timestamped
        if entry["timestamp"] >= start  # type: ignore[operator]
    ]


def distinct_day_count(entries: list[Entry]) -> int:
    """
    Number of local days the entries cover.

    With no usable day the inclusive span between the earliest and latest
    timestamp is used instead, never less than 1.
    """
    if len(entries) == 0:
        return 0

    days = _distinct_days(entries)
    if len(days) > 0:
        return len(days)

    timestamps = [entry["timestamp"] for entry in entries if entry["timestamp"] is not None]
    if len(timestamps) == 0:
        return 1
    first = local_date(min(timestamps))
    last = local_date(max(timestamps))
    return max(1, (last - first).in_days() + 1)


def entry_count(entries: list[Entry]) -> int:
    return len(entries)


def frequency_per_day(entries: list[Entry]) -> float:
    if len(entries) == 0:
        return 0.0
    return len(entries) / distinct_day_count(entries)


def type_distribution(entries: list[Entry]) -> dict[int, int]:
    """Count per stool form, ascending by form. Unspecified forms are skipped."""
    counts: dict[int, int] = {}
    for entry in entries:
        if is_specified_stool_form(entry["stool_form"]):
            counts[entry["stool_form"]] = counts.get(entry["stool_form"], 0) + 1
    return {
        form: counts[form]
        for form in range(MIN_STOOL_FORM, MAX_STOOL_FORM + 1)
        if form in counts
    }


def color_distribution(entries: list[Entry]) -> dict[str, int]:
    """
    Count per canonical color, most frequent first.

    Equal counts are ordered by color name.
    """
    counts: dict[str, int] = {}
    for entry in entries:
        if entry["color"] is None or entry["color"].strip() == "":
            continue
        color = normalize_color(entry["color"])
        counts[color] = counts.get(color, 0) + 1
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return dict(ordered)


def average_hour_of_day(entries: list[Entry]) -> float:
    """
    Arithmetic mean of the local hour of each timestamp.

    Hours are averaged linearly, so 23:00 and 01:00 give 12.
    """
    hours = [
        entry["timestamp"].in_tz("local").hour
        for entry in entries
        if entry["timestamp"] is not None
    ]
    if len(hours) == 0:
        return 0.0
    return sum(hours) / len(hours)


def irregularity_streaks(entries: list[Entry]) -> IrregularityStreaks:
    """
    Count days without an entry and days with too many entries.

    Every local day from the first to the last entry day is scanned. A run of
    two or more empty days adds its length minus one to days_without_entry; a
    single missed day adds nothing. too_frequent_days counts days with at
    least TOO_FREQUENT_THRESHOLD entries.
    """
    day_counts: dict[pendulum.Date, int] = {}
    for entry in entries:
        day = _entry_day(entry)
        if day is not None:
            day_counts[day] = day_counts.get(day, 0) + 1

    if len(day_counts) == 0:
        return {"days_without_entry": 0, "too_frequent_days": 0}

    days_without_entry = 0
    consecutive_empty = 0
    current = min(day_counts)
    end = max(day_counts)
    while current <= end:
        if current in day_counts:
            if consecutive_empty >= 2:
                days_without_entry += consecutive_empty - 1
            consecutive_empty = 0
        else:
            consecutive_empty += 1
        current = current.add(days=1)

    if consecutive_empty >= 2:
        days_without_entry += consecutive_empty - 1

    too_frequent_days = len(
        [count for count in day_counts.values() if count >= TOO_FREQUENT_THRESHOLD]
    )

    return {
        "days_without_entry": days_without_entry,
        "too_frequent_days": too_frequent_days,
    }


def get_statistics(
    entries: list[Entry],
    window: Window,
    now: Optional[pendulum.DateTime] = None,
) -> Statistics:
    """Everything the statistics view shows, for one period."""
    window_entries = filter_by_window(entries, window, now)
    return {
        "window": window,
        "entry_count": entry_count(window_entries),
        "frequency_per_day": frequency_per_day(window_entries),
        "type_distribution": type_distribution(window_entries),
        "color_distribution": color_distribution(window_entries),
        "average_hour_of_day": average_hour_of_day(window_entries),
        "irregularity_streaks": irregularity_streaks(window_entries),
    }
