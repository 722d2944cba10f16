"""Task creation rules - pure, re-run on every edit of the draft."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time

from .activities import Category, SubType, Task
from .profile import UserProfile

logger = logging.getLogger(__name__)

MIN_DEVOTIONAL_MINUTES = 15


@dataclass(frozen=True)
class TaskDraft:
    """A candidate task as held by the creation form."""

    title: str
    category: Category
    sub_type: SubType
    date: date
    start: time
    end: time
    is_recurring: bool = False
    notes: str = ""
    bible_reference: str = ""

    @property
    def start_time(self) -> datetime:
        return datetime.combine(self.date, self.start)

    @property
    def end_time(self) -> datetime:
        # Same date as start: an end before the start goes negative.
        return datetime.combine(self.date, self.end)

    def duration_minutes(self) -> float:
        return (self.end_time - self.start_time).total_seconds() / 60

    def to_task(self, task_id: str) -> Task:
        """Finalize into a committed Task."""
        return Task(
            id=task_id,
            title=self.title.strip(),
            category=self.category,
            sub_type=self.sub_type,
            start_time=self.start_time,
            end_time=self.end_time,
            is_recurring=self.is_recurring,
            notes=self.notes or None,
            bible_reference=self.bible_reference if self.sub_type == SubType.SERMON_PREP else None,
        )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a draft."""

    rest_day_warning: str | None = None
    duration_error: str | None = None

    @property
    def blocked(self) -> bool:
        """Submission must be rejected while a duration error is active."""
        return self.duration_error is not None

    @property
    def messages(self) -> list[str]:
        return [m for m in (self.rest_day_warning, self.duration_error) if m]


def check_rest_day(draft: TaskDraft, profile: UserProfile) -> str | None:
    """Advisory warning for ministry work on the rest day."""
    if draft.category == Category.MINISTRY and profile.is_rest_day(draft.date):
        return (
            f"{profile.rest_day_name} is your rest day. "
            "Scheduling ministry activities may violate your rest."
        )
    return None


def check_devotional_duration(draft: TaskDraft) -> str | None:
    """Blocking error for devotionals shorter than the minimum."""
    if draft.category != Category.PERSONAL_GROWTH or draft.sub_type != SubType.DEVOTIONAL:
        return None
    if draft.duration_minutes() < MIN_DEVOTIONAL_MINUTES:
        return f"Devotional time must be a minimum {MIN_DEVOTIONAL_MINUTES} minutes."
    return None


def validate(draft: TaskDraft, profile: UserProfile) -> ValidationResult:
    """
    Evaluate a draft against the profile.

    Pure function - no I/O. Both rules run independently and may fire together.
    """
    result = ValidationResult(
        rest_day_warning=check_rest_day(draft, profile),
        duration_error=check_devotional_duration(draft),
    )
    if result.messages:
        logger.debug(f"Validation of {draft.title!r}: {result.messages}")
    return result
