# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from bristol.cleanup import flush_all
from bristol.service.reminder import (
    cancel_reminder,
    get_reminder,
    schedule_reminder,
    watch_reminder,
)
from bristol.state import get_app_state
from bristol.terminal.custom_typer import AliasedTyperGroup
from bristol.terminal.error import exit_on_store_error
from bristol.terminal.parse import parse_time
from bristol.view.views import reminder as reminder_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("enable, e")
def enable(
    ctx: typer.Context,
    time: Annotated[
        Optional[str],
        typer.Option(
            "--time",
            "-t",
            help="Daily time in (H)H:mm, e.g. 20:00 (defaults to the configured time)",
        ),
    ] = None,
) -> None:
    """Turn on the daily reminder, replacing any earlier time."""
    app_state = get_app_state(ctx)
    time_of_day = parse_time(time)

    with exit_on_store_error():
        if time_of_day is None:
            current = get_reminder(app_state.configuration_repository.get_config())
            time_of_day = (current["hour"], current["minute"])
        reminder = schedule_reminder(
            app_state.configuration_repository, time_of_day[0], time_of_day[1]
        )
        flush_all(app_state)

    reminder_report.reminder_view(reminder)


@app.command("disable, d")
def disable(ctx: typer.Context) -> None:
    """Turn off the daily reminder."""
    app_state = get_app_state(ctx)

    with exit_on_store_error():
        reminder = cancel_reminder(app_state.configuration_repository)
        flush_all(app_state)

    reminder_report.reminder_view(reminder)


@app.command("show, s")
def show(ctx: typer.Context) -> None:
    """Show whether the reminder is on and when it fires next."""
    app_state = get_app_state(ctx)

    with exit_on_store_error():
        reminder = get_reminder(app_state.configuration_repository.get_config())

    reminder_report.reminder_view(reminder)


@app.command("watch, w")
def watch(
    ctx: typer.Context,
    count: Annotated[
        Optional[int],
        typer.Option("--count", "-n", min=1, help="Stop after this many reminders"),
    ] = None,
) -> None:
    """Stay in the foreground and notify at the reminder time every day."""
    app_state = get_app_state(ctx)

    with exit_on_store_error():
        reminder = get_reminder(app_state.configuration_repository.get_config())

    if not reminder["enabled"]:
        typer.echo("Reminder is disabled, run `bristol reminder enable` first")
        raise typer.Exit(1)

    reminder_report.watching_view(reminder)
    try:
        watch_reminder(reminder, reminder_report.notification_view, max_fires=count)
    except KeyboardInterrupt:
        raise typer.Exit(0)
