"""Tests for the planner session workflow."""

from dataclasses import replace
from datetime import date, time
from unittest.mock import patch

import pytest

from shepherd.adapters.memory_store import InMemoryTaskRepository
from shepherd.config import Config
from shepherd.core.activities import Category, SubType
from shepherd.core.profile import UserProfile
from shepherd.core.validation import TaskDraft
from shepherd.workflows import (
    IncompleteDraftError,
    PlannerSession,
    SubmissionBlockedError,
    sample_tasks,
)


@pytest.fixture
def monday():
    return date(2025, 1, 13)


@pytest.fixture
def session():
    return PlannerSession(InMemoryTaskRepository(), UserProfile(name="Pastor Alex", rest_day=1))


@pytest.fixture
def sermon_prep(monday):
    return TaskDraft(
        title="Sermon prep",
        category=Category.MINISTRY,
        sub_type=SubType.SERMON_PREP,
        date=monday,
        start=time(9, 0),
        end=time(11, 0),
        bible_reference="Romans 8:1-17",
    )


@pytest.fixture
def short_devotional(monday):
    return TaskDraft(
        title="Quick devotional",
        category=Category.PERSONAL_GROWTH,
        sub_type=SubType.DEVOTIONAL,
        date=monday,
        start=time(6, 0),
        end=time(6, 10),
    )


class TestCreateTask:
    def test_rest_day_warning_still_creates(self, session, sermon_prep):
        task, result = session.create_task(sermon_prep)
        assert result.rest_day_warning is not None
        assert session.tasks() == [task]
        assert task.bible_reference == "Romans 8:1-17"

    def test_short_devotional_is_rejected(self, session, short_devotional):
        with pytest.raises(SubmissionBlockedError) as exc_info:
            session.create_task(short_devotional)
        assert "minimum 15 minutes" in str(exc_info.value)
        assert exc_info.value.result.blocked
        assert session.tasks() == []

    def test_fixed_devotional_is_accepted(self, session, short_devotional):
        task, result = session.create_task(replace(short_devotional, end=time(6, 30)))
        assert result.messages == []
        assert task.duration_minutes() == 30

    def test_empty_title_rejected(self, session, sermon_prep):
        with pytest.raises(IncompleteDraftError):
            session.create_task(replace(sermon_prep, title="   "))
        assert session.tasks() == []

    def test_ids_are_unique(self, session, sermon_prep):
        first, _ = session.create_task(sermon_prep)
        second, _ = session.create_task(sermon_prep)
        assert first.id != second.id

    def test_uses_generated_id(self, session, sermon_prep):
        with patch("shepherd.workflows.new_task_id", return_value="fixed-id"):
            task, _ = session.create_task(sermon_prep)
        assert task.id == "fixed-id"


class TestBalanceMemo:
    def test_cached_until_store_changes(self, session, sermon_prep):
        first = session.balance()
        assert session.balance() is first

        session.create_task(sermon_prep)
        second = session.balance()
        assert second is not first
        assert second.total(Category.MINISTRY) == 120

    def test_rejected_task_keeps_cache(self, session, short_devotional):
        first = session.balance()
        with pytest.raises(SubmissionBlockedError):
            session.create_task(short_devotional)
        assert session.balance() is first

    def test_aggregates_only_once_per_version(self, session):
        with patch("shepherd.workflows.aggregate_balance", wraps=lambda tasks: object()) as mock_agg:
            session.balance()
            session.balance()
        assert mock_agg.call_count == 1


class TestWeek:
    def test_created_task_appears_on_its_day(self, session, sermon_prep, monday):
        task, _ = session.create_task(sermon_prep)
        days = session.week(monday)
        assert days[1].tasks == [task]
        assert days[1].is_rest_day


class TestProfile:
    def test_update_rest_day_moves_warning(self, session, sermon_prep):
        session.update_profile(rest_day=3)
        assert session.check(sermon_prep).rest_day_warning is None
        assert session.profile.name == "Pastor Alex"

    def test_update_name(self, session):
        profile = session.update_profile(name="Pastor Sam")
        assert profile.name == "Pastor Sam"
        assert profile.rest_day == 1

    def test_invalid_rest_day_keeps_profile(self, session):
        with pytest.raises(ValueError):
            session.update_profile(rest_day=9)
        assert session.profile.rest_day == 1


class TestFromConfig:
    def test_seeds_sample_tasks(self, monday):
        session = PlannerSession.from_config(Config(), today=monday)
        assert len(session.tasks()) == 3
        assert all(t.start_time.date() == monday for t in session.tasks())

    def test_without_sample_tasks(self):
        session = PlannerSession.from_config(Config(sample_tasks=False))
        assert session.tasks() == []

    def test_profile_from_config(self):
        session = PlannerSession.from_config(Config(user_name="Pastor Sam", rest_day=5))
        assert session.profile == UserProfile(name="Pastor Sam", rest_day=5)

    def test_sample_balance(self, monday):
        report = PlannerSession.from_config(Config(), today=monday).balance()
        assert report.grand_total == 300
        assert report.percentage(Category.MINISTRY) == 40.0


class TestSampleTasks:
    def test_sample_tasks_shape(self, monday):
        tasks = sample_tasks(monday)
        assert [t.category for t in tasks] == [
            Category.MINISTRY,
            Category.PERSONAL_GROWTH,
            Category.FAMILY,
        ]
        assert tasks[0].bible_reference == "Romans 8:1-17"
