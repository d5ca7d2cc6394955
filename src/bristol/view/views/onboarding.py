# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.panel import Panel

from bristol.color import ACCENT_COLOR
from bristol.model.article import OnboardingPage
from bristol.view.views.header import header


def onboarding_view(pages: list[OnboardingPage]) -> None:
    """Show every onboarding page as a numbered card."""
    header("welcome")

    console = Console()
    for index, page in enumerate(pages, start=1):
        console.print(
            Panel(
                page["description"],
                title=f"[bold]{page['title']}[/bold]",
                subtitle=f"{index}/{len(pages)}",
                border_style=ACCENT_COLOR,
                padding=(0, 2),
            )
        )
