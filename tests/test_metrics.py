"""Statistics over diary entries: windows, distributions and special days."""

import pytest

from bristol.service.metrics import (
    TOO_FREQUENT_THRESHOLD,
    average_hour_of_day,
    color_distribution,
    day_bucket,
    distinct_day_count,
    filter_by_window,
    frequency_per_day,
    get_statistics,
    irregularity_streaks,
    last_entry_of_day,
    type_distribution,
)
from conftest import at, build_entry


# ============================================================================
# Day bucketing
# ============================================================================


class TestDayBucket:
    def test_groups_by_local_calendar_day(self):
        entries = [
            build_entry(at(5, 0, 30)),
            build_entry(at(5, 23, 59)),
            build_entry(at(6, 0, 0)),
        ]
        assert len(day_bucket(entries, at(5).date())) == 2
        assert len(day_bucket(entries, at(6).date())) == 1

    def test_datetime_argument_uses_its_local_day(self):
        entries = [build_entry(at(5, 8))]
        # 23:00 UTC on the 4th is already the 5th in Tokyo
        utc_evening = at(5, 8).in_tz("UTC")
        assert day_bucket(entries, utc_evening) == entries

    def test_entries_without_timestamp_never_match(self):
        assert day_bucket([build_entry(None)], at(1).date()) == []


class TestLastEntryOfDay:
    def test_latest_timestamp_wins(self):
        morning = build_entry(at(5, 9), stool_form=2)
        evening = build_entry(at(5, 21), stool_form=5)
        assert last_entry_of_day([evening, morning], at(5).date()) == evening
        assert last_entry_of_day([morning, evening], at(5).date()) == evening

    def test_tie_keeps_first_in_input_order(self):
        first = build_entry(at(5, 9), comment="first")
        second = build_entry(at(5, 9), comment="second")
        assert last_entry_of_day([first, second], at(5).date())["comment"] == "first"

    def test_empty_day(self):
        assert last_entry_of_day([build_entry(at(5))], at(6).date()) is None


# ============================================================================
# Windows
# ============================================================================


class TestFilterByWindow:
    def test_week_keeps_last_seven_days(self):
        now = at(20)
        entries = [build_entry(at(14)), build_entry(at(13, 11)), build_entry(at(19))]
        assert len(filter_by_window(entries, "week", now)) == 2

    def test_month_clamps_to_shorter_month(self):
        now = at(31, 12)
        inside = build_entry(at(29, 12, month=2))
        outside = build_entry(at(29, 11, month=2))
        assert filter_by_window([inside, outside], "month", now) == [inside]

    def test_all_drops_only_untimestamped(self):
        entries = [build_entry(at(1, year=2001)), build_entry(None)]
        assert len(filter_by_window(entries, "all", at(1))) == 1

    def test_unknown_window(self):
        with pytest.raises(ValueError):
            filter_by_window([], "year", at(1))  # type: ignore[arg-type]


# ============================================================================
# Frequency
# ============================================================================


class TestFrequency:
    def test_empty_is_zero(self):
        assert frequency_per_day([]) == 0.0
        assert distinct_day_count([]) == 0

    def test_entries_per_distinct_day(self):
        entries = [build_entry(at(1, 8)), build_entry(at(1, 20)), build_entry(at(3))]
        assert distinct_day_count(entries) == 2
        assert frequency_per_day(entries) == pytest.approx(1.5)

    def test_never_negative_and_positive_when_non_empty(self):
        assert frequency_per_day([build_entry(at(1))]) > 0

    def test_untimestamped_entries_count_over_one_day(self):
        entries = [build_entry(None), build_entry(None)]
        assert distinct_day_count(entries) == 1
        assert frequency_per_day(entries) == 2.0


# ============================================================================
# Distributions
# ============================================================================


class TestTypeDistribution:
    def test_counts_forms_ascending(self):
        entries = [
            build_entry(at(1), stool_form=6),
            build_entry(at(2), stool_form=2),
            build_entry(at(3), stool_form=6),
        ]
        distribution = type_distribution(entries)
        assert distribution == {2: 1, 6: 2}
        assert list(distribution) == [2, 6]

    def test_unspecified_forms_are_skipped(self):
        entries = [build_entry(at(1), stool_form=0), build_entry(at(2), stool_form=4)]
        distribution = type_distribution(entries)
        assert all(1 <= form <= 7 for form in distribution)
        assert sum(distribution.values()) == 1


class TestColorDistribution:
    def test_synonyms_collapse_into_one_bucket(self):
        entries = [
            build_entry(at(1), color="Brown"),
            build_entry(at(2), color="коричневый"),
            build_entry(at(3), color=" brown "),
        ]
        assert color_distribution(entries) == {"Brown": 3}

    def test_sorted_by_count_then_name(self):
        entries = [
            build_entry(at(1), color="Red"),
            build_entry(at(2), color="Green"),
            build_entry(at(3), color="Brown"),
            build_entry(at(4), color="Red"),
            build_entry(at(5), color="Brown"),
        ]
        assert list(color_distribution(entries).items()) == [
            ("Brown", 2),
            ("Red", 2),
            ("Green", 1),
        ]

    def test_missing_color_is_not_counted(self):
        assert color_distribution([build_entry(at(1), color=None)]) == {}


class TestAverageHour:
    def test_linear_mean(self):
        entries = [build_entry(at(1, 23)), build_entry(at(2, 1))]
        assert average_hour_of_day(entries) == 12

    def test_uses_local_hour(self):
        assert average_hour_of_day([build_entry(at(1, 8).in_tz("UTC"))]) == 8

    def test_empty(self):
        assert average_hour_of_day([]) == 0.0


# ============================================================================
# Special days
# ============================================================================


class TestIrregularityStreaks:
    def test_four_empty_days_count_three(self):
        entries = [build_entry(at(1)), build_entry(at(6))]
        assert irregularity_streaks(entries)["days_without_entry"] == 3

    def test_three_empty_days_count_two(self):
        entries = [build_entry(at(1)), build_entry(at(5)), build_entry(at(6))]
        assert irregularity_streaks(entries)["days_without_entry"] == 2

    def test_single_missed_day_is_not_counted(self):
        entries = [build_entry(at(1)), build_entry(at(3))]
        assert irregularity_streaks(entries)["days_without_entry"] == 0

    def test_too_frequent_days(self):
        entries = [build_entry(at(2, hour)) for hour in range(TOO_FREQUENT_THRESHOLD)]
        entries.append(build_entry(at(3)))
        assert irregularity_streaks(entries)["too_frequent_days"] == 1
        assert irregularity_streaks(entries[1:])["too_frequent_days"] == 0

    def test_empty(self):
        assert irregularity_streaks([]) == {
            "days_without_entry": 0,
            "too_frequent_days": 0,
        }


def test_get_statistics_applies_window():
    now = at(20)
    entries = [
        build_entry(at(19, 7), stool_form=3, color="Yellow"),
        build_entry(at(18, 9), stool_form=3, color="Brown"),
        build_entry(at(1, 9), stool_form=7, color="Red"),
    ]

    statistics = get_statistics(entries, "week", now)

    assert statistics["window"] == "week"
    assert statistics["entry_count"] == 2
    assert statistics["frequency_per_day"] == 1.0
    assert statistics["type_distribution"] == {3: 2}
    assert statistics["color_distribution"] == {"Brown": 1, "Yellow": 1}
    assert statistics["average_hour_of_day"] == 8
    assert get_statistics(entries, "all", now)["entry_count"] == 3


def test_deleted_entry_leaves_every_metric(entry_repository):
    kept_id = entry_repository.save_new_entry(build_entry(at(5, 9), stool_form=2))
    removed_id = entry_repository.save_new_entry(
        build_entry(at(6, 21), stool_form=6, color="Red")
    )
    entry_repository.delete_entry(removed_id)

    entries = entry_repository.get_all_entries()
    statistics = get_statistics(entries, "all", at(20))

    assert [entry["id"] for entry in entries] == [kept_id]
    assert statistics["entry_count"] == 1
    assert statistics["type_distribution"] == {2: 1}
    assert "Red" not in statistics["color_distribution"]
    assert day_bucket(entries, at(6).date()) == []
