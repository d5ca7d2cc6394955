# SPDX-License-Identifier: MIT

from functools import cache
from importlib.resources import files
from typing import Optional, cast

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from bristol.model.article import Article


@cache
def _load_articles() -> tuple[Article, ...]:
    raw = files("bristol").joinpath("data/articles.yaml").read_text(encoding="utf-8")
    return tuple(cast(list[Article], load(raw, Loader=Loader)))


def get_articles() -> list[Article]:
    return [cast(Article, dict(article)) for article in _load_articles()]


def get_categories() -> list[str]:
    """Distinct article categories, sorted alphabetically."""
    return sorted({article["category"] for article in _load_articles()})


def filter_articles(category: Optional[str] = None) -> list[Article]:
    """Articles in the given category, or every article when category is None."""
    articles = get_articles()
    if category is None:
        return articles
    return [
        article
        for article in articles
        if article["category"].lower() == category.lower()
    ]
