# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.markup import escape
from rich.padding import Padding

from bristol.color import ACCENT_COLOR
from bristol.view.state import get_show_header


def header(sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        sub_header: Optional name of the report being shown
    """
    if not get_show_header():
        return

    print(Padding(f"[{ACCENT_COLOR}]bristol[/{ACCENT_COLOR}]", (1, 0, 0, 1)))
    if sub_header is not None:
        print(Padding(f"[sandy_brown]{escape(sub_header)}[/sandy_brown]", (0, 1)))
