# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bristol.color import ACCENT_COLOR
from bristol.model.article import Article
from bristol.view.views.header import header


def articles_view(report_name: str, articles: list[tuple[int, Article]]) -> None:
    """List articles with the number `article show` takes."""
    header(report_name)

    console = Console()
    if len(articles) == 0:
        console.print(" No articles")
        return

    articles_table = Table(box=box.SIMPLE)
    articles_table.add_column("id")
    articles_table.add_column("title")
    articles_table.add_column("category")
    for index, article in articles:
        articles_table.add_row(str(index), article["title"], article["category"])

    console.print(articles_table)


def single_article_view(article: Article) -> None:
    header("article")

    console = Console()
    console.print(
        Panel(
            article["content"],
            title=f"[bold]{article['title']}[/bold]",
            subtitle=article["category"],
            border_style=ACCENT_COLOR,
            padding=(1, 2),
        )
    )


def categories_view(categories: list[str]) -> None:
    header("categories")

    console = Console()
    for category in categories:
        console.print(f" {category}")
