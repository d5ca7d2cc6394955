# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bristol.color import ACCENT_COLOR, WARNING_COLOR, get_swatch
from bristol.model.stool_form import STOOL_FORM_DESCRIPTIONS
from bristol.service.metrics import TOO_FREQUENT_THRESHOLD, Statistics
from bristol.view.util import format_frequency, format_hour, render_bar
from bristol.view.views.header import header

PERIOD_NAMES = {"week": "Week", "month": "Month", "all": "All time"}

BAR_WIDTH = 24


def statistics_view(statistics: Statistics) -> None:
    """
    Display the statistics cards for one period.

    Args:
        statistics: Precomputed metrics, see bristol.service.metrics
    """
    header(f"statistics: {PERIOD_NAMES[statistics['window']]}")

    console = Console()

    if statistics["entry_count"] == 0:
        console.print(" No entries in this period")
        return

    overview = Table(box=None, show_header=False, padding=(0, 2))
    overview.add_column("metric")
    overview.add_column("value", justify="right")
    overview.add_row("Total", str(statistics["entry_count"]))
    overview.add_row(
        "Frequency",
        f"{format_frequency(statistics['frequency_per_day'])} per day",
    )
    overview.add_row(
        "Average time", format_hour(statistics["average_hour_of_day"])
    )
    console.print(
        Panel(overview, title="Overview", border_style=ACCENT_COLOR, expand=False)
    )

    type_distribution = statistics["type_distribution"]
    if len(type_distribution) > 0:
        types_table = Table(box=box.SIMPLE, show_header=False)
        types_table.add_column("type")
        types_table.add_column("bar")
        types_table.add_column("count", justify="right")
        max_count = max(type_distribution.values())
        for form, count in type_distribution.items():
            types_table.add_row(
                f"Type {form}",
                render_bar(count, max_count, BAR_WIDTH, ACCENT_COLOR),
                str(count),
            )
        console.print(
            Panel(types_table, title="Stool types", border_style="bright_black", expand=False)
        )
        for form in type_distribution:
            console.print(f"  [dim]Type {form}: {STOOL_FORM_DESCRIPTIONS[form]}[/dim]")

    color_distribution = statistics["color_distribution"]
    if len(color_distribution) > 0:
        colors_table = Table(box=box.SIMPLE, show_header=False)
        colors_table.add_column("color")
        colors_table.add_column("bar")
        colors_table.add_column("count", justify="right")
        max_count = max(color_distribution.values())
        for color, count in color_distribution.items():
            colors_table.add_row(
                color,
                render_bar(count, max_count, BAR_WIDTH, get_swatch(color)),
                str(count),
            )
        console.print(
            Panel(colors_table, title="Colors", border_style="bright_black", expand=False)
        )

    streaks = statistics["irregularity_streaks"]
    special_days = Table(box=None, show_header=False, padding=(0, 2))
    special_days.add_column("kind")
    special_days.add_column("days", justify="right")
    special_days.add_row("Days without entry", str(streaks["days_without_entry"]))
    special_days.add_row(
        f"Days with {TOO_FREQUENT_THRESHOLD}+ entries",
        str(streaks["too_frequent_days"]),
    )
    border_style = (
        WARNING_COLOR
        if streaks["days_without_entry"] > 0 or streaks["too_frequent_days"] > 0
        else "bright_black"
    )
    console.print(
        Panel(special_days, title="Special days", border_style=border_style, expand=False)
    )
