# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bristol.color import SYMPTOM_COLOR, get_badge_style
from bristol.model.entity_id import EntityId
from bristol.model.entry import Entry
from bristol.repository.id_map import IdMapRepository
from bristol.time import (
    datetime_to_display_local_datetime_str_optional,
    datetime_to_iso_str,
)
from bristol.view.util import (
    format_color,
    format_stool_form,
    format_symptoms,
    format_volume,
)
from bristol.view.views.header import header


def entries_view(
    report_name: str,
    entries: list[Entry],
    id_map_repository: IdMapRepository,
    columns: list[str] = [
        "id",
        "timestamp",
        "form",
        "color",
        "volume",
        "symptoms",
        "comment",
    ],
) -> None:
    """Display a list of entries, numbering them for later reference."""
    header(report_name)

    console = Console()
    if len(entries) == 0:
        console.print(" No entries")
        return

    entries_table = Table(box=box.SIMPLE)
    for column in columns:
        entries_table.add_column(column)

    for entry in entries:
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(
                    id_map_repository.associate_id(cast(EntityId, entry["id"]))
                )
            elif column == "timestamp":
                column_value = (
                    datetime_to_display_local_datetime_str_optional(entry["timestamp"])
                    or ""
                )
            elif column == "form":
                column_value = format_stool_form(entry["stool_form"])
            elif column == "color":
                color = format_color(entry["color"])
                if color != "":
                    column_value = f"[{get_badge_style(color)}] {color} [/]"
            elif column == "volume":
                column_value = format_volume(entry)
            elif column == "symptoms":
                symptoms = format_symptoms(entry)
                if symptoms != "":
                    column_value = f"[{SYMPTOM_COLOR}]{symptoms}[/{SYMPTOM_COLOR}]"
            elif column == "comment":
                column_value = escape(entry["comment"] or "")
            row.append(column_value)
        entries_table.add_row(*row)

    console.print(entries_table)


def single_entry_view(entry: Entry, synthetic_id: int) -> None:
    """Display detailed view of a single entry."""
    header("entry")

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("id", str(synthetic_id))
    entry_table.add_row(
        "timestamp",
        datetime_to_display_local_datetime_str_optional(entry["timestamp"]) or "",
    )
    entry_table.add_row("form", format_stool_form(entry["stool_form"], True))
    entry_table.add_row("color", format_color(entry["color"]))
    entry_table.add_row("volume", format_volume(entry))
    entry_table.add_row("pain", "yes" if entry["has_pain"] else "no")
    entry_table.add_row("blood", "yes" if entry["has_blood"] else "no")
    entry_table.add_row("mucus", "yes" if entry["has_mucus"] else "no")
    entry_table.add_row("comment", escape(entry["comment"] or ""))
    entry_table.add_row("created", datetime_to_iso_str(entry["created"]))

    console = Console()
    console.print(entry_table)
