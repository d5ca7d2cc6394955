# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from bristol.model.entry import Entry
from bristol.time import now_local


class ProfileSummary(TypedDict):
    total_entries: int
    first_entry: Optional[pendulum.DateTime]
    days_tracking: Optional[int]


def get_profile_summary(
    entries: list[Entry], now: Optional[pendulum.DateTime] = None
) -> ProfileSummary:
    """
    General statistics for the profile view.

    days_tracking counts whole days elapsed since the earliest entry and is
    None when no entry has a timestamp.
    """
    if now is None:
        now = now_local()

    timestamps = [entry["timestamp"] for entry in entries if entry["timestamp"] is not None]
    if len(timestamps) == 0:
        return {"total_entries": len(entries), "first_entry": None, "days_tracking": None}

    first_entry = min(timestamps)
    days_tracking = max(0, (now - first_entry).in_days())

    return {
        "total_entries": len(entries),
        "first_entry": first_entry,
        "days_tracking": days_tracking,
    }
