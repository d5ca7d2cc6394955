# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from bristol.service.article import filter_articles, get_articles, get_categories
from bristol.terminal.completion import complete_category
from bristol.terminal.custom_typer import AliasedTyperGroup
from bristol.view.views import article as article_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_articles(
    category: Annotated[
        Optional[str],
        typer.Option(
            "--category",
            "-c",
            autocompletion=complete_category,
            help="Only articles in this category",
        ),
    ] = None,
) -> None:
    """List articles on digestive health."""
    if category is not None and category.lower() not in (
        c.lower() for c in get_categories()
    ):
        raise typer.BadParameter(
            f"Unknown category: '{category}'. Valid options: {', '.join(get_categories())}",
            param_hint="'--category'",
        )

    # Numbers stay those of the full list so `article show` accepts them
    selected = filter_articles(category)
    numbered = [
        (index, article)
        for index, article in enumerate(get_articles(), start=1)
        if article in selected
    ]
    article_report.articles_view(
        f"articles: {category}" if category is not None else "articles", numbered
    )


@app.command("show, s", no_args_is_help=True)
def show(
    number: Annotated[int, typer.Argument(help="Article number from `article list`")],
) -> None:
    """Read one article."""
    articles = get_articles()
    if not (1 <= number <= len(articles)):
        typer.echo(f"Article {number} not found, valid numbers are 1-{len(articles)}")
        raise typer.Exit(1)

    article_report.single_article_view(articles[number - 1])


@app.command("categories, cat")
def categories() -> None:
    """List article categories."""
    article_report.categories_view(get_categories())
