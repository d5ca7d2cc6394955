# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bristol.color import ACCENT_COLOR, INFO_COLOR
from bristol.service.reminder import Reminder, next_fire_time
from bristol.time import datetime_to_display_local_datetime_str, time_of_day_to_str
from bristol.view.views.header import header


def reminder_view(reminder: Reminder) -> None:
    header("reminder")

    reminder_table = Table(box=box.SIMPLE)
    reminder_table.add_column("property")
    reminder_table.add_column("value")

    reminder_table.add_row("enabled", "yes" if reminder["enabled"] else "no")
    reminder_table.add_row(
        "time", time_of_day_to_str(reminder["hour"], reminder["minute"])
    )
    if reminder["enabled"]:
        reminder_table.add_row(
            "next",
            datetime_to_display_local_datetime_str(
                next_fire_time(reminder["hour"], reminder["minute"])
            ),
        )

    console = Console()
    console.print(reminder_table)


def notification_view(title: str, body: str) -> None:
    """Print a fired reminder; the terminal bell doubles as the alert."""
    console = Console()
    console.bell()
    console.print(
        Panel(body, title=f"[bold]{title}[/bold]", border_style=ACCENT_COLOR, expand=False)
    )


def watching_view(reminder: Reminder) -> None:
    console = Console()
    console.print(
        f"[{INFO_COLOR}]Waiting for the daily reminder at "
        f"{time_of_day_to_str(reminder['hour'], reminder['minute'])}, "
        f"press Ctrl+C to stop[/{INFO_COLOR}]"
    )
