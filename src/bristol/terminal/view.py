# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from bristol.service.calendar import get_calendar_month, get_day_summary
from bristol.service.metrics import get_statistics
from bristol.service.profile import get_profile_summary
from bristol.state import get_app_state
from bristol.terminal.completion import complete_period
from bristol.terminal.custom_typer import AliasedTyperGroup
from bristol.terminal.error import exit_on_store_error
from bristol.terminal.parse import parse_date
from bristol.terminal.validate import validate_period
from bristol.time import now_local
from bristol.view.views import calendar as calendar_report
from bristol.view.views import profile as profile_report
from bristol.view.views import statistics as statistics_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, or day offset like -1"


@app.command("calendar, cal")
def calendar(
    ctx: typer.Context,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help=f"Any day of the month to show; {DATE_HELP}",
        ),
    ] = None,
    color_chart: Annotated[
        bool,
        typer.Option("--color-chart/--no-color-chart", help="Show the color legend"),
    ] = True,
) -> None:
    """Month calendar with a badge for each day that has entries."""
    app_state = get_app_state(ctx)
    month = date if date is not None else now_local().date()

    with exit_on_store_error():
        entries = app_state.entry_repository.get_all_entries()

    calendar_report.calendar_month_view(
        "calendar",
        month,
        get_calendar_month(entries, month),
        show_color_chart=color_chart,
    )


@app.command("day, d")
def day(
    ctx: typer.Context,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """Entries recorded on one day."""
    app_state = get_app_state(ctx)
    selected = date if date is not None else now_local().date()

    with exit_on_store_error():
        entries = app_state.entry_repository.get_all_entries()

    app_state.id_map_repository.clear_ids()
    calendar_report.calendar_day_view(
        get_day_summary(entries, selected), app_state.id_map_repository
    )


@app.command("stats, s")
def stats(
    ctx: typer.Context,
    period: Annotated[
        Optional[str],
        typer.Option(
            "--period",
            "-p",
            callback=validate_period,
            autocompletion=complete_period,
            help="week, month, all (defaults to the configured period)",
        ),
    ] = None,
) -> None:
    """Frequency, type and color distribution, average time and special days."""
    app_state = get_app_state(ctx)

    with exit_on_store_error():
        config = app_state.configuration_repository.get_config()
        entries = app_state.entry_repository.get_all_entries()

    window = period or config["default_period"]
    statistics_report.statistics_view(get_statistics(entries, window))  # type: ignore[arg-type]


@app.command("profile, p")
def profile(ctx: typer.Context) -> None:
    """Total entries and how long you have been tracking."""
    app_state = get_app_state(ctx)

    with exit_on_store_error():
        entries = app_state.entry_repository.get_all_entries()

    profile_report.profile_view(get_profile_summary(entries))
