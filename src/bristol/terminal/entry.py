# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from bristol.cleanup import flush_all
from bristol.model.entity_id import EntityId
from bristol.model.entry import Entry
from bristol.service.calendar import get_day_summary
from bristol.service.entry import create_entry
from bristol.service.metrics import filter_by_window
from bristol.state import AppState, get_app_state
from bristol.terminal.completion import complete_color, complete_period, complete_volume
from bristol.terminal.custom_typer import AliasedTyperGroup
from bristol.terminal.error import exit_on_store_error
from bristol.terminal.parse import parse_datetime, parse_id_list
from bristol.terminal.validate import (
    validate_color,
    validate_form,
    validate_period,
    validate_volume,
)
from bristol.time import local_date
from bristol.view.views import calendar as calendar_report
from bristol.view.views import entry as entry_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _entry_day(entry: Entry) -> Optional[pendulum.Date]:
    if entry["timestamp"] is None:
        return None
    return local_date(entry["timestamp"])


def _show_changed_days(
    app_state: AppState, days_by_id: dict[EntityId, Optional[pendulum.Date]]
) -> None:
    """Re-fetch the store and show each day touched by the recorded changes."""
    changed_days: list[pendulum.Date] = []
    for _, entity_id in app_state.take_changes():
        day = days_by_id.get(entity_id)
        if day is not None and day not in changed_days:
            changed_days.append(day)

    if len(changed_days) == 0:
        return

    entries = app_state.entry_repository.get_all_entries()
    for day in changed_days:
        calendar_report.calendar_day_view(
            get_day_summary(entries, day), app_state.id_map_repository
        )


@app.command("add, a")
def add(
    ctx: typer.Context,
    timestamp: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--timestamp",
            "-t",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD HH:mm, YYYY-MM-DD, (H)H:mm, now, today, yesterday, or day offset like -1 (defaults to now)",
        ),
    ] = None,
    stool_form: Annotated[
        Optional[int],
        typer.Option(
            "--form",
            "-f",
            callback=validate_form,
            help="Bristol stool scale type, 1-7 (0 = unspecified, defaults to 4)",
        ),
    ] = None,
    color: Annotated[
        Optional[str],
        typer.Option(
            "--color",
            "-c",
            callback=validate_color,
            autocompletion=complete_color,
            help="Brown, Dark brown, Light brown, Yellow, Green, Black, Red",
        ),
    ] = None,
    volume: Annotated[
        Optional[str],
        typer.Option(
            "--volume",
            "-v",
            callback=validate_volume,
            autocompletion=complete_volume,
            help="small, medium, large",
        ),
    ] = None,
    has_pain: Annotated[bool, typer.Option("--pain", help="Pain was felt")] = False,
    has_blood: Annotated[bool, typer.Option("--blood", help="Blood was noticed")] = False,
    has_mucus: Annotated[bool, typer.Option("--mucus", help="Mucus was noticed")] = False,
    comment: Annotated[Optional[str], typer.Option("--comment", "-m")] = None,
) -> None:
    """Record a bowel movement."""
    app_state = get_app_state(ctx)

    with exit_on_store_error():
        entry = create_entry(
            timestamp=timestamp,
            stool_form=stool_form,
            color=color,
            volume=volume,
            has_pain=has_pain,
            has_blood=has_blood,
            has_mucus=has_mucus,
            comment=comment,
        )
        entry_id = app_state.entry_repository.save_new_entry(entry)
        synthetic_id = app_state.id_map_repository.associate_id(entry_id)
        flush_all(app_state)

        saved = app_state.entry_repository.get_entry(entry_id)
        entry_report.single_entry_view(saved, synthetic_id)
        _show_changed_days(app_state, {entry_id: _entry_day(saved)})


@app.command("delete, d", no_args_is_help=True)
def delete(
    ctx: typer.Context,
    id: Annotated[str, typer.Argument(help="ids from `entry list`, e.g. 3 or 1,4-6")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Delete without asking")
    ] = False,
) -> None:
    """Delete entries by their listing ids."""
    app_state = get_app_state(ctx)
    ids = parse_id_list(id)

    with exit_on_store_error():
        real_ids: list[EntityId] = []
        days_by_id: dict[EntityId, Optional[pendulum.Date]] = {}
        for synthetic_id in ids:
            real_id = app_state.id_map_repository.get_real_id(synthetic_id)
            if real_id is None or not app_state.entry_repository.has_entry(real_id):
                typer.echo(f"Entry {synthetic_id} not found, run `bristol entry list`")
                raise typer.Exit(1)
            real_ids.append(real_id)
            days_by_id[real_id] = _entry_day(
                app_state.entry_repository.get_entry(real_id)
            )

        if not yes:
            typer.confirm(
                f"Delete {len(real_ids)} entr{'y' if len(real_ids) == 1 else 'ies'}?",
                abort=True,
            )

        for real_id in real_ids:
            app_state.entry_repository.delete_entry(real_id)
        flush_all(app_state)

        typer.echo(f"Deleted {len(real_ids)}")
        _show_changed_days(app_state, days_by_id)


@app.command("list, ls")
def list_entries(
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
    """List entries, newest first."""
    app_state = get_app_state(ctx)

    with exit_on_store_error():
        config = app_state.configuration_repository.get_config()
        window = period or config["default_period"]

        entries = app_state.entry_repository.get_all_entries()
        if window != "all":
            entries = filter_by_window(entries, window)  # type: ignore[arg-type]

        app_state.id_map_repository.clear_ids()
        entry_report.entries_view(f"entries: {window}", entries, app_state.id_map_repository)
