"""Functional core - pure business logic with no I/O."""

from .activities import (
    Category,
    SubType,
    Task,
    category_label,
    category_color,
    category_of,
    default_sub_type,
    sub_type_label,
)
from .profile import DAYS_OF_WEEK, UserProfile, weekday_index
from .validation import TaskDraft, ValidationResult, validate
from .calendar import DayBucket, project_week, week_dates
from .balance import BalanceReport, aggregate_balance, format_hours

__all__ = [
    # Activities
    "Category",
    "SubType",
    "Task",
    "category_label",
    "category_color",
    "category_of",
    "default_sub_type",
    "sub_type_label",
    # Profile
    "DAYS_OF_WEEK",
    "UserProfile",
    "weekday_index",
    # Validation
    "TaskDraft",
    "ValidationResult",
    "validate",
    # Calendar
    "DayBucket",
    "project_week",
    "week_dates",
    # Balance
    "BalanceReport",
    "aggregate_balance",
    "format_hours",
]
