"""Session workflow layer between the CLI and the functional core.

A PlannerSession owns the task store and profile for one run of the program
and applies the creation rules before anything is stored.
"""

import logging
import uuid
from datetime import date, datetime, time

from .adapters.memory_store import InMemoryTaskRepository
from .config import Config
from .core.activities import Category, SubType, Task
from .core.balance import BalanceReport, aggregate_balance
from .core.calendar import DayBucket, project_week
from .core.profile import UserProfile
from .core.validation import TaskDraft, ValidationResult, validate
from .ports.task_repo import TaskRepository

logger = logging.getLogger(__name__)


class IncompleteDraftError(Exception):
    """Raised when a draft is missing required fields."""

    pass


class SubmissionBlockedError(Exception):
    """Raised when a draft fails a blocking creation rule."""

    def __init__(self, result: ValidationResult):
        super().__init__(result.duration_error)
        self.result = result


def new_task_id() -> str:
    return uuid.uuid4().hex


def sample_tasks(today: date | None = None) -> list[Task]:
    """The activities a fresh planner starts with, all scheduled today."""
    today = today or date.today()

    def at(hour: int) -> datetime:
        return datetime.combine(today, time(hour, 0))

    return [
        Task(
            id="1",
            title="Sermon prep: Romans",
            category=Category.MINISTRY,
            sub_type=SubType.SERMON_PREP,
            start_time=at(9),
            end_time=at(11),
            is_recurring=True,
            notes="Focus on life in the Spirit.",
            bible_reference="Romans 8:1-17",
        ),
        Task(
            id="2",
            title="Morning devotional",
            category=Category.PERSONAL_GROWTH,
            sub_type=SubType.DEVOTIONAL,
            start_time=at(6),
            end_time=at(7),
            is_recurring=True,
        ),
        Task(
            id="3",
            title="Family dinner",
            category=Category.FAMILY,
            sub_type=SubType.LEISURE,
            start_time=at(19),
            end_time=at(21),
        ),
    ]


class PlannerSession:
    """
    In-memory planner state for a single user.

    The repository is injected; the profile is replaced, never mutated.
    """

    def __init__(self, repository: TaskRepository, profile: UserProfile):
        self.repository = repository
        self.profile = profile
        self._balance: BalanceReport | None = None
        self._balance_version: int | None = None

    @classmethod
    def from_config(cls, config: Config, today: date | None = None) -> "PlannerSession":
        """Start a session from configuration, optionally seeded with sample tasks."""
        tasks = sample_tasks(today) if config.sample_tasks else []
        return cls(InMemoryTaskRepository(tasks), config.profile())

    def check(self, draft: TaskDraft) -> ValidationResult:
        """Validate a draft against the current profile."""
        return validate(draft, self.profile)

    def create_task(self, draft: TaskDraft) -> tuple[Task, ValidationResult]:
        """
        Finalize a draft and store it.

        Returns the stored task and the (non-blocking) validation result.
        Raises IncompleteDraftError or SubmissionBlockedError without storing
        anything.
        """
        if not draft.title.strip():
            raise IncompleteDraftError("Title is required.")

        result = self.check(draft)
        if result.blocked:
            logger.info(f"Rejected {draft.title!r}: {result.duration_error}")
            raise SubmissionBlockedError(result)
        if result.rest_day_warning:
            logger.warning(f"Rest-day conflict for {draft.title!r} on {draft.date}")

        task = draft.to_task(new_task_id())
        self.repository.append(task)
        logger.info(f"Created task {task.id}: {task.title}")
        return task, result

    def tasks(self) -> list[Task]:
        return self.repository.list_all()

    def week(self, reference: date | None = None) -> list[DayBucket]:
        """Project stored tasks onto the week containing reference."""
        return project_week(self.tasks(), reference or date.today(), self.profile)

    def balance(self) -> BalanceReport:
        """Category balance, recomputed only when the store has changed."""
        version = self.repository.version
        if self._balance is None or self._balance_version != version:
            logger.debug(f"Recomputing balance at store version {version}")
            self._balance = aggregate_balance(self.tasks())
            self._balance_version = version
        return self._balance

    def update_profile(self, name: str | None = None, rest_day: int | None = None) -> UserProfile:
        """Replace the profile with new settings. Raises ValueError for a bad rest day."""
        self.profile = UserProfile(
            name=self.profile.name if name is None else name,
            rest_day=self.profile.rest_day if rest_day is None else rest_day,
        )
        logger.info(f"Profile updated: {self.profile.name}, rest day {self.profile.rest_day_name}")
        return self.profile
