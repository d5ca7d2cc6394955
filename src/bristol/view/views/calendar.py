# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from bristol.color import STOOL_COLORS, get_badge_style
from bristol.repository.id_map import IdMapRepository
from bristol.service.calendar import DaySummary
from bristol.time import date_to_display_str, now_local
from bristol.view.views.entry import entries_view
from bristol.view.views.header import header

TODAY_STYLE = "bold black on bright_cyan"


def calendar_month_view(
    report_name: str,
    month: pendulum.Date,
    weeks: list[list[Optional[DaySummary]]],
    cell_width: int = 6,
    show_color_chart: bool = True,
) -> None:
    """
    Display a month as a Monday-first grid of day badges.

    Each day with entries shows the stool form of its last entry on a swatch
    of that entry's color. A day whose last entry has no form shows a dot.

    Args:
        report_name: The name of the report
        month: Any date inside the month to display
        weeks: Rows of seven day summaries, None for padding cells
        cell_width: Width of each day cell in characters
        show_color_chart: Whether to print the color legend under the grid
    """
    header(report_name)

    console = Console()
    console.print(f"\n[bold]{month.format('MMMM YYYY')}[/bold]")

    console.print(_render_month_grid(weeks, cell_width))

    if show_color_chart:
        console.print(_render_color_chart())
    console.print()


def _render_month_grid(
    weeks: list[list[Optional[DaySummary]]], cell_width: int
) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]:
        table.add_column(day_name, style="bold", width=cell_width)

    today = now_local().date()

    for week in weeks:
        row: list[Text] = []
        for summary in week:
            cell = Text()
            if summary is None:
                row.append(cell)
                continue

            day_num = f"{summary['date'].day:2d}"
            if summary["date"] == today:
                cell.append(day_num, style=TODAY_STYLE)
            else:
                cell.append(day_num, style="bold")
            cell.append("\n")

            if summary["entry_count"] > 0:
                badge = (
                    str(summary["badge_form"])
                    if summary["badge_form"] is not None
                    else "•"
                )
                cell.append(f" {badge} ", style=get_badge_style(summary["badge_color"]))
                if summary["entry_count"] > 1:
                    cell.append(f"{summary['entry_count']}", style="dim")
            row.append(cell)
        table.add_row(*row)

    return table


def _render_color_chart() -> Text:
    chart = Text(" ")
    for color in STOOL_COLORS:
        chart.append(f" {color} ", style=get_badge_style(color))
        chart.append(" ")
    return chart


def calendar_day_view(
    summary: DaySummary,
    id_map_repository: IdMapRepository,
) -> None:
    """Display all entries recorded on one day, newest first."""
    entries_view(
        f"day: {date_to_display_str(summary['date'])}",
        summary["entries"],
        id_map_repository,
    )
