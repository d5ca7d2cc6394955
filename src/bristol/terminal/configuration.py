# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bristol import configuration
from bristol.cleanup import flush_all
from bristol.state import get_app_state
from bristol.terminal.completion import complete_period
from bristol.terminal.custom_typer import AliasedTyperGroup
from bristol.terminal.error import exit_on_store_error
from bristol.terminal.parse import parse_time
from bristol.terminal.validate import validate_log_level, validate_period
from bristol.time import time_of_day_to_str

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view(ctx: typer.Context) -> None:
    """Display current configuration settings."""
    app_state = get_app_state(ctx)
    with exit_on_store_error():
        config = app_state.configuration_repository.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("data_path", escape(str(configuration.DATA_PATH)))
    table.add_row("log_level", config["log_level"])
    table.add_row("default_period", config["default_period"])
    table.add_row("reminder_enabled", _enabled(config["reminder_enabled"]))
    table.add_row("reminder_time", config["reminder_time"])
    table.add_row("onboarding_complete", _enabled(config["onboarding_complete"]))

    console.print(table)

    console.print()
    console.print(f"Config file: {escape(str(configuration.APP_CONFIG_PATH))}")
    console.print(f"Log file: {escape(str(configuration.LOG_FILE_PATH))}")


@app.command("set, s")
def set(
    ctx: typer.Context,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Print the bristol header above reports",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory for entry files (takes effect on the next run)",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Go back to the default data directory",
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=validate_log_level,
            help="DEBUG, INFO, WARNING, ERROR, CRITICAL",
        ),
    ] = None,
    default_period: Annotated[
        Optional[str],
        typer.Option(
            "--default-period",
            callback=validate_period,
            autocompletion=complete_period,
            help="Period used by `entry list` and `view stats`: week, month, all",
        ),
    ] = None,
    reminder_time: Annotated[
        Optional[str],
        typer.Option(
            "--reminder-time",
            help="Daily reminder time in (H)H:mm",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    app_state = get_app_state(ctx)

    time_of_day = parse_time(reminder_time)

    with exit_on_store_error():
        app_state.configuration_repository.update_config(
            show_header=show_header,
            data_path=data_path,
            remove_data_path=remove_data_path,
            log_level=log_level,
            default_period=default_period,  # type: ignore[arg-type]
            reminder_time=(
                time_of_day_to_str(*time_of_day) if time_of_day is not None else None
            ),
        )
        flush_all(app_state)

    typer.echo("Configuration updated")
