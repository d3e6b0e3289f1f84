from datetime import datetime, timedelta

import pytest

from weightwise.analytics import (
    WeeklyProgress,
    entries_this_week,
    filter_by_period,
    latest_change,
    progress_stats,
    sort_for_chart,
    sort_for_display,
    weekly_aggregates,
)
from weightwise.utils.enums import Period
from tests.factories import Entry


@pytest.fixture
def spread_entries(now):
    ages = [1, 5, 10, 29, 31, 60, 89, 91, 200, 364, 366]
    return [Entry(weight=200 - i, date=now - timedelta(days=age)) for i, age in enumerate(ages)]


class TestFilterByPeriod:
    def test_window_sizes(self, spread_entries, now):
        assert len(filter_by_period(spread_entries, Period.week, now)) == 2
        assert len(filter_by_period(spread_entries, Period.month, now)) == 4
        assert len(filter_by_period(spread_entries, Period.quarter, now)) == 7
        assert len(filter_by_period(spread_entries, Period.year, now)) == 10

    def test_windows_are_nested(self, spread_entries, now):
        previous = []
        for period in [Period.week, Period.month, Period.quarter, Period.year]:
            current = filter_by_period(spread_entries, period, now)
            assert all(e in current for e in previous)
            previous = current

    def test_accepts_string_period(self, spread_entries, now):
        assert filter_by_period(spread_entries, "week", now) == filter_by_period(
            spread_entries, Period.week, now
        )

    def test_cutoff_is_inclusive(self, now):
        edge = Entry(weight=180, date=now - timedelta(days=7))
        assert filter_by_period([edge], Period.week, now) == [edge]

    def test_preserves_input_order(self, now):
        entries = [
            Entry(weight=190, date=now - timedelta(days=2)),
            Entry(weight=191, date=now - timedelta(days=5)),
            Entry(weight=192, date=now - timedelta(days=1)),
        ]
        assert filter_by_period(entries, Period.week, now) == entries

    def test_unknown_period_fails_loudly(self, spread_entries, now):
        with pytest.raises(ValueError):
            filter_by_period(spread_entries, "fortnight", now)


class TestWeeklyAggregates:
    def test_groups_by_sunday(self):
        entries = [
            Entry(weight=198, date=datetime(2026, 10, 21, 7, 0)),   # Wed
            Entry(weight=205, date=datetime(2026, 10, 4, 9, 0)),    # Sun
            Entry(weight=200, date=datetime(2026, 10, 18, 6, 30)),  # Sun
            Entry(weight=202, date=datetime(2026, 10, 12, 20, 0)),  # Mon
        ]

        result = weekly_aggregates(entries)

        assert [w.week.isoformat() for w in result] == ["2026-10-04", "2026-10-11", "2026-10-18"]
        assert [w.average_weight for w in result] == [205, 202, 199]
        assert [w.entries for w in result] == [1, 1, 2]

    def test_weeks_without_entries_are_absent(self):
        entries = [
            Entry(weight=205, date=datetime(2026, 10, 5)),
            Entry(weight=200, date=datetime(2026, 10, 20)),
        ]
        assert len(weekly_aggregates(entries)) == 2

    def test_every_entry_lands_in_exactly_one_bucket(self, spread_entries):
        result = weekly_aggregates(spread_entries)
        assert sum(w.entries for w in result) == len(spread_entries)
        weeks = [w.week for w in result]
        assert weeks == sorted(set(weeks))

    def test_empty_log(self):
        assert weekly_aggregates([]) == []

    def test_returns_weekly_progress_records(self):
        result = weekly_aggregates([Entry(weight=180, date=datetime(2026, 10, 19))])
        assert result == [WeeklyProgress(week=datetime(2026, 10, 18).date(), average_weight=180, entries=1)]


class TestProgressStats:
    def test_ten_day_loss(self, now):
        d0 = now - timedelta(days=20)
        entries = [
            Entry(weight=200, date=d0),
            Entry(weight=195, date=d0 + timedelta(days=10)),
        ]

        stats = progress_stats(entries, Period.month, now)

        assert stats.total_change == -5
        assert stats.time_span_days == 10
        assert stats.avg_change_per_day == pytest.approx(-0.5)
        assert stats.count == 2

    def test_insufficient_data_is_none(self, now):
        assert progress_stats([], Period.month, now) is None
        assert progress_stats([Entry(weight=200, date=now)], Period.month, now) is None

    def test_only_window_entries_count(self, now):
        entries = [
            Entry(weight=210, date=now - timedelta(days=45)),
            Entry(weight=200, date=now - timedelta(days=3)),
        ]
        assert progress_stats(entries, Period.month, now) is None
        assert progress_stats(entries, Period.quarter, now) is not None

    def test_count_matches_filtered_length(self, spread_entries, now):
        filtered = filter_by_period(spread_entries, Period.quarter, now)
        stats = progress_stats(spread_entries, Period.quarter, now)
        assert stats.count == len(filtered)

    def test_sorts_before_comparing(self, now):
        entries = [
            Entry(weight=190, date=now - timedelta(days=1)),
            Entry(weight=200, date=now - timedelta(days=5)),
            Entry(weight=195, date=now - timedelta(days=3)),
        ]
        stats = progress_stats(entries, Period.week, now)
        assert stats.total_change == -10
        assert stats.time_span_days == 4

    def test_partial_days_round_up(self, now):
        start = now - timedelta(days=20)
        entries = [
            Entry(weight=180, date=start),
            Entry(weight=181, date=start + timedelta(days=10, hours=1)),
        ]
        assert progress_stats(entries, Period.month, now).time_span_days == 11

    def test_gain_is_positive(self, now):
        entries = [
            Entry(weight=150, date=now - timedelta(days=6)),
            Entry(weight=153, date=now - timedelta(days=3)),
        ]
        stats = progress_stats(entries, Period.week, now)
        assert stats.total_change == 3
        assert stats.avg_change_per_day == pytest.approx(1.0)

    def test_same_instant_has_no_daily_rate(self, now):
        entries = [Entry(weight=180, date=now), Entry(weight=181, date=now)]
        stats = progress_stats(entries)
        assert stats.time_span_days == 0
        assert stats.avg_change_per_day is None

    def test_does_not_mutate_input(self, now):
        entries = [
            Entry(weight=190, date=now - timedelta(days=1)),
            Entry(weight=200, date=now - timedelta(days=5)),
        ]
        snapshot = list(entries)
        progress_stats(entries, Period.week, now)
        assert entries == snapshot


class TestDashboardHelpers:
    def test_latest_change_loss_is_positive(self, now):
        entries = [
            Entry(weight=200, date=now - timedelta(days=2)),
            Entry(weight=198.5, date=now - timedelta(days=1)),
        ]
        change = latest_change(entries)
        assert change.change == pytest.approx(1.5)
        assert change.is_positive is True

    def test_latest_change_gain(self, now):
        entries = [
            Entry(weight=201, date=now - timedelta(days=1)),
            Entry(weight=200, date=now - timedelta(days=2)),
        ]
        change = latest_change(entries)
        assert change.change == pytest.approx(1.0)
        assert change.is_positive is False

    def test_latest_change_needs_two_entries(self, now):
        assert latest_change([Entry(weight=200, date=now)]) is None

    def test_entries_this_week_start_at_sunday_midnight(self):
        wednesday = datetime(2026, 10, 21, 10, 0)
        entries = [
            Entry(weight=200, date=datetime(2026, 10, 18, 0, 30)),   # Sunday
            Entry(weight=201, date=datetime(2026, 10, 17, 23, 0)),   # Saturday before
            Entry(weight=199, date=datetime(2026, 10, 20, 8, 0)),
        ]
        assert [e.weight for e in entries_this_week(entries, wednesday)] == [200, 199]

    def test_sort_orders(self, now):
        a = Entry(weight=1, date=now - timedelta(days=3))
        b = Entry(weight=2, date=now - timedelta(days=1))
        c = Entry(weight=3, date=now - timedelta(days=2))
        assert sort_for_chart([a, b, c]) == [a, c, b]
        assert sort_for_display([a, b, c]) == [b, c, a]
