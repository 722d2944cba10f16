"""Tests for the time-balance report."""

from datetime import date, datetime, time, timedelta

import pytest

from shepherd.core.activities import Category, SubType, Task
from shepherd.core.balance import BalanceReport, aggregate_balance, format_hours


@pytest.fixture
def today():
    return date(2025, 1, 15)


@pytest.fixture
def make_task(today):
    """Factory for tasks with a given duration in minutes."""
    counter = iter(range(1000))

    def _make(category: Category, minutes: int, start: time = time(9, 0)) -> Task:
        start_dt = datetime.combine(today, start)
        return Task(
            id=str(next(counter)),
            title=f"{category.value} task",
            category=category,
            sub_type=SubType.GENERIC,
            start_time=start_dt,
            end_time=start_dt + timedelta(minutes=minutes),
        )
    return _make


class TestAggregateBalance:
    def test_scenario_half_ministry(self, make_task):
        tasks = [
            make_task(Category.MINISTRY, 120),
            make_task(Category.FAMILY, 60),
            make_task(Category.PERSONAL_GROWTH, 60),
        ]
        report = aggregate_balance(tasks)
        assert report.grand_total == 240
        assert report.percentage(Category.MINISTRY) == 50.0
        assert report.percentage(Category.FAMILY) == 25.0

    def test_totals_sum_to_grand_total(self, make_task):
        tasks = [
            make_task(Category.MINISTRY, 45),
            make_task(Category.MINISTRY, 30),
            make_task(Category.FAMILY, 90),
            make_task(Category.PERSONAL_GROWTH, 17),
            make_task(Category.FAMILY, -30),
        ]
        report = aggregate_balance(tasks)
        assert sum(report.total(c) for c in Category) == report.grand_total
        assert report.grand_total == 182

    def test_percentages_sum_to_100(self, make_task):
        tasks = [
            make_task(Category.MINISTRY, 70),
            make_task(Category.FAMILY, 20),
            make_task(Category.PERSONAL_GROWTH, 13),
        ]
        report = aggregate_balance(tasks)
        assert sum(report.percentage(c) for c in Category) == pytest.approx(100)

    def test_non_positive_durations_excluded(self, make_task):
        tasks = [
            make_task(Category.MINISTRY, 0),
            make_task(Category.FAMILY, -60),
            make_task(Category.PERSONAL_GROWTH, 30),
        ]
        report = aggregate_balance(tasks)
        assert report.total(Category.MINISTRY) == 0
        assert report.total(Category.FAMILY) == 0
        assert report.grand_total == 30
        assert report.percentage(Category.PERSONAL_GROWTH) == 100.0

    def test_empty_collection(self):
        report = aggregate_balance([])
        assert report.grand_total == 0
        for category in Category:
            assert report.total(category) == 0
            assert report.percentage(category) == 0

    def test_all_excluded_means_zero_percentages(self, make_task):
        report = aggregate_balance([make_task(Category.MINISTRY, -10)])
        assert report.grand_total == 0
        assert report.percentage(Category.MINISTRY) == 0

    def test_same_input_same_output(self, make_task):
        tasks = [make_task(Category.MINISTRY, 50), make_task(Category.FAMILY, 25)]
        assert aggregate_balance(tasks) == aggregate_balance(list(tasks))


class TestBalanceReport:
    def test_to_dict(self, make_task):
        report = aggregate_balance([make_task(Category.FAMILY, 60), make_task(Category.MINISTRY, 120)])
        data = report.to_dict()
        assert data["grand_total"] == 180
        by_category = {c["category"]: c for c in data["categories"]}
        assert by_category["MINISTRY"]["percentage"] == 66.7
        assert by_category["FAMILY"]["label"] == "Family"
        assert by_category["PERSONAL_GROWTH"]["minutes"] == 0

    def test_default_has_every_category(self):
        report = BalanceReport()
        assert set(report.totals) == set(Category)


class TestFormatHours:
    @pytest.mark.parametrize(
        "minutes,expected",
        [(0, "0h 0m"), (45, "0h 45m"), (60, "1h 0m"), (135, "2h 15m"), (90.5, "1h 30m")],
    )
    def test_format(self, minutes, expected):
        assert format_hours(minutes) == expected
