"""Pure calendar projection - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, timedelta

from .activities import Task
from .profile import DAYS_OF_WEEK, UserProfile, weekday_index


@dataclass
class DayBucket:
    """One column of the week view."""

    date: date
    index: int
    tasks: list[Task] = field(default_factory=list)
    is_rest_day: bool = False

    @property
    def day_name(self) -> str:
        return DAYS_OF_WEEK[self.index]

    @property
    def is_free(self) -> bool:
        return not self.tasks


def week_start(reference: date) -> date:
    """The Sunday that opens the week containing reference."""
    return reference - timedelta(days=weekday_index(reference))


def week_dates(reference: date) -> list[date]:
    """The 7 consecutive dates of the week containing reference, Sunday first."""
    start = week_start(reference)
    return [start + timedelta(days=i) for i in range(7)]


def sort_tasks_by_start(tasks: list[Task]) -> list[Task]:
    """Sort tasks by start time."""
    return sorted(tasks, key=lambda t: t.start_time)


def tasks_on(tasks: list[Task], d: date) -> list[Task]:
    """
    Tasks whose start falls on a date, sorted by start.

    Recurring tasks are not expanded - they only appear on their stored date.
    """
    return sort_tasks_by_start([t for t in tasks if t.start_time.date() == d])


def project_week(
    tasks: list[Task],
    reference: date,
    profile: UserProfile | None = None,
) -> list[DayBucket]:
    """
    Partition tasks into the 7 days of the week containing reference.

    Pure function - no I/O. Tasks outside the week are dropped.
    """
    by_date: dict[date, list[Task]] = {d: [] for d in week_dates(reference)}
    for task in tasks:
        bucket = by_date.get(task.start_time.date())
        if bucket is not None:
            bucket.append(task)

    return [
        DayBucket(
            date=d,
            index=i,
            tasks=sort_tasks_by_start(day_tasks),
            is_rest_day=profile is not None and i == profile.rest_day,
        )
        for i, (d, day_tasks) in enumerate(by_date.items())
    ]
