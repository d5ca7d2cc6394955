# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from bristol.service.profile import ProfileSummary
from bristol.time import datetime_to_display_local_datetime_str_optional
from bristol.view.views.header import header


def profile_view(summary: ProfileSummary) -> None:
    """Display general tracking statistics."""
    header("profile")

    profile_table = Table(box=box.SIMPLE)
    profile_table.add_column("property")
    profile_table.add_column("value")

    profile_table.add_row("total entries", str(summary["total_entries"]))
    profile_table.add_row(
        "first entry",
        datetime_to_display_local_datetime_str_optional(summary["first_entry"]) or "",
    )
    profile_table.add_row(
        "days tracking",
        str(summary["days_tracking"]) if summary["days_tracking"] is not None else "",
    )

    console = Console()
    console.print(profile_table)
