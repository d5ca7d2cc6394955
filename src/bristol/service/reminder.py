# SPDX-License-Identifier: MIT

import time as system_time
from typing import Callable, Optional, TypedDict

import pendulum

from bristol.configuration import Configuration
from bristol.logger import get_logger
from bristol.repository.configuration import ConfigurationRepository
from bristol.time import now_local, time_of_day_from_str, time_of_day_to_str

REMINDER_TITLE = "Reminder"
REMINDER_BODY = "Haven't had a bowel movement in a while, record how you feel"

logger = get_logger(__name__)


class Reminder(TypedDict):
    enabled: bool
    hour: int
    minute: int


def get_reminder(config: Configuration) -> Reminder:
    hour, minute = time_of_day_from_str(config["reminder_time"])
    return {"enabled": config["reminder_enabled"], "hour": hour, "minute": minute}


def schedule_reminder(
    configuration_repository: ConfigurationRepository, hour: int, minute: int
) -> Reminder:
    """
    Replace the pending daily trigger with one at hour:minute.

    There is only ever one trigger; scheduling again overwrites it.
    """
    configuration_repository.update_config(
        reminder_enabled=True,
        reminder_time=time_of_day_to_str(hour, minute),
    )
    logger.info("reminder_scheduled", hour=hour, minute=minute)
    return get_reminder(configuration_repository.get_config())


def cancel_reminder(configuration_repository: ConfigurationRepository) -> Reminder:
    configuration_repository.update_config(reminder_enabled=False)
    logger.info("reminder_cancelled")
    return get_reminder(configuration_repository.get_config())


def next_fire_time(
    hour: int, minute: int, now: Optional[pendulum.DateTime] = None
) -> pendulum.DateTime:
    """Next local occurrence of hour:minute strictly after now."""
    if now is None:
        now = now_local()
    local_now = now.in_tz("local")
    candidate = local_now.set(hour=hour, minute=minute, second=0, microsecond=0)
    if candidate <= local_now:
        candidate = candidate.add(days=1)
    return candidate


def watch_reminder(
    reminder: Reminder,
    notify: Callable[[str, str], None],
    clock: Callable[[], pendulum.DateTime] = now_local,
    sleep: Callable[[float], None] = system_time.sleep,
    max_fires: Optional[int] = None,
) -> int:
    """
    Fire the reminder once a day at its time, best effort.

    Blocks until max_fires notifications were sent (forever when None).
    Returns the number of notifications sent.
    """
    if not reminder["enabled"]:
        return 0

    fires = 0
    fire_at = next_fire_time(reminder["hour"], reminder["minute"], clock())
    while max_fires is None or fires < max_fires:
        wait = (fire_at - clock()).total_seconds()
        if wait > 0:
            sleep(wait)
        notify(REMINDER_TITLE, REMINDER_BODY)
        fires += 1
        logger.info("reminder_fired", at=fire_at.isoformat())
        fire_at = next_fire_time(reminder["hour"], reminder["minute"], fire_at)
    return fires
