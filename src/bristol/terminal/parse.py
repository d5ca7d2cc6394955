# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from bristol.time import datetime_from_str, datetime_from_str_utc, now_local

TIME_OF_DAY_P = re.compile(r"^(\d{1,2}):(\d{2})$")
UTC_OFFSET_P = re.compile(r"(Z|[+-]\d{2}(:?\d{2})?)$")

RELATIVE_DAYS = {
    "today": 0,
    "t": 0,
    "yesterday": -1,
    "y": -1,
}


def _parse_time_of_day(value: str) -> Optional[tuple[int, int]]:
    time_match = TIME_OF_DAY_P.match(value)
    if not time_match:
        return None

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))
    if hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    if minute > 59:
        raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")
    return (hour, minute)


def parse_datetime(datetime_param: Optional[str]) -> Optional[pendulum.DateTime]:
    """
    Parse a point in time given on the command line, returned in UTC.

    Accepts YYYY-MM-DD[ HH:mm], ISO 8601 with an explicit offset (kept as
    given), (H)H:mm for today, now, today and yesterday
    (or n, t, y), and a day offset such as -1.
    """
    if datetime_param is None:
        return None

    value = str(datetime_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}", value):
        try:
            if UTC_OFFSET_P.search(value[10:]):
                return datetime_from_str(value).in_tz("UTC")
            return datetime_from_str_utc(value)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    time_of_day = _parse_time_of_day(value)
    if time_of_day is not None:
        hour, minute = time_of_day
        return (
            now_local()
            .set(hour=hour, minute=minute, second=0, microsecond=0)
            .in_tz("UTC")
        )

    if value in ("now", "n"):
        return now_local().in_tz("UTC")

    if value in RELATIVE_DAYS:
        return now_local().add(days=RELATIVE_DAYS[value]).start_of("day").in_tz("UTC")

    if re.match(r"^-?\d+$", value):
        return now_local().add(days=int(value)).start_of("day").in_tz("UTC")

    raise typer.BadParameter("Incorrect datetime format")


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    """Like parse_datetime, reduced to the local calendar day."""
    datetime = parse_datetime(date_param)
    if datetime is None:
        return None
    return datetime.in_tz("local").date()


def parse_time(time_str: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse a (H)H:mm time of day into (hour, minute).

    Raises:
        typer.BadParameter: If the format is wrong or a value is out of range
    """
    if time_str is None:
        return None

    time_of_day = _parse_time_of_day(time_str.strip())
    if time_of_day is None:
        raise typer.BadParameter(
            f"Time must be in HH:mm format (e.g., 8:00 or 20:30), got '{time_str}'"
        )
    return time_of_day


def parse_id_list(id_param: str) -> list[int]:
    """
    Parse listing ids: "3", "1,4,7", "2-5" or a mix such as "1,3-5".

    Returns the ids sorted without duplicates.
    """
    ids: set[int] = set()
    for part in (s.strip() for s in id_param.split(",")):
        if not part:
            continue

        bounds = part.split("-")
        try:
            if len(bounds) == 1:
                ids.add(int(part))
                continue
            if len(bounds) != 2:
                raise typer.BadParameter(
                    f"Invalid range format: '{part}' (expected format: 'start-end')"
                )
            start, end = int(bounds[0].strip()), int(bounds[1].strip())
        except ValueError:
            raise typer.BadParameter(f"Invalid ID: '{part}' is not a valid integer")

        if start > end:
            raise typer.BadParameter(f"Invalid range: '{part}' (start must be <= end)")
        ids.update(range(start, end + 1))

    if len(ids) == 0:
        raise typer.BadParameter("No valid IDs provided")

    return sorted(ids)
