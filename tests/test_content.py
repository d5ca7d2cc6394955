"""Packaged articles, onboarding pages and the profile summary."""

from bristol.service.article import filter_articles, get_articles, get_categories
from bristol.service.onboarding import (
    complete_onboarding,
    get_onboarding_pages,
    needs_onboarding,
)
from bristol.service.profile import get_profile_summary
from conftest import at, build_entry


class TestArticles:
    def test_every_article_is_complete(self):
        articles = get_articles()
        assert len(articles) > 0
        for article in articles:
            assert article["title"]
            assert article["content"]
            assert article["category"]

    def test_categories_are_sorted_and_unique(self):
        categories = get_categories()
        assert categories == sorted(set(categories))
        assert {"Nutrition", "Fruits"} <= set(categories)

    def test_filter(self):
        assert filter_articles(None) == get_articles()
        nutrition = filter_articles("nutrition")
        assert len(nutrition) > 0
        assert all(article["category"] == "Nutrition" for article in nutrition)
        assert filter_articles("Astronomy") == []

    def test_callers_cannot_change_the_packaged_list(self):
        get_articles()[0]["title"] = "changed"
        assert get_articles()[0]["title"] != "changed"


class TestOnboarding:
    def test_pages(self):
        pages = get_onboarding_pages()
        assert pages[0]["title"] == "Welcome to Bristol"
        assert all(page["description"] for page in pages)

    def test_shown_until_completed(self, configuration_repository):
        assert needs_onboarding(configuration_repository)
        complete_onboarding(configuration_repository)
        assert not needs_onboarding(configuration_repository)


class TestProfile:
    def test_days_tracking_from_first_entry(self):
        entries = [build_entry(at(10, 18)), build_entry(at(3, 9)), build_entry(None)]
        summary = get_profile_summary(entries, at(13, 10))
        assert summary["total_entries"] == 3
        assert summary["first_entry"] == at(3, 9)
        assert summary["days_tracking"] == 10

    def test_no_timestamps(self):
        summary = get_profile_summary([build_entry(None)], at(13))
        assert summary == {
            "total_entries": 1,
            "first_entry": None,
            "days_tracking": None,
        }
