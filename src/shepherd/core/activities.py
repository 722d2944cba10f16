"""Pure activity domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Category(Enum):
    """Top-level life-balance bucket."""

    MINISTRY = "MINISTRY"
    FAMILY = "FAMILY"
    PERSONAL_GROWTH = "PERSONAL_GROWTH"


class SubType(Enum):
    """Finer-grained activity kind, nested under one category."""

    # Ministry
    SERMON_PREP = "SERMON_PREP"
    MEETING = "MEETING"
    SERVICE = "SERVICE"
    VISITATION = "VISITATION"

    # Personal growth
    DEVOTIONAL = "DEVOTIONAL"
    INTERCESSION = "INTERCESSION"
    STUDY = "STUDY"
    EXERCISE = "EXERCISE"

    # Family
    DATE_NIGHT = "DATE_NIGHT"
    LEISURE = "LEISURE"
    CHORE = "CHORE"

    GENERIC = "GENERIC"


@dataclass(frozen=True)
class Task:
    """A committed activity on the calendar."""

    id: str
    title: str
    category: Category
    sub_type: SubType
    start_time: datetime
    end_time: datetime
    is_recurring: bool = False
    notes: str | None = None
    bible_reference: str | None = None

    def duration_minutes(self) -> float:
        """Duration in minutes. Negative when end precedes start."""
        return (self.end_time - self.start_time).total_seconds() / 60

    def format_time(self) -> str:
        return f"{self.start_time.strftime('%H:%M')}-{self.end_time.strftime('%H:%M')}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category.value,
            "sub_type": self.sub_type.value,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "is_recurring": self.is_recurring,
            "notes": self.notes,
            "bible_reference": self.bible_reference,
        }


def category_label(category: Category) -> str:
    """Human-readable category name."""
    match category:
        case Category.MINISTRY:
            return "Ministry"
        case Category.FAMILY:
            return "Family"
        case Category.PERSONAL_GROWTH:
            return "Personal Growth"


def category_color(category: Category) -> str:
    """Terminal color used to render a category."""
    match category:
        case Category.MINISTRY:
            return "yellow"
        case Category.FAMILY:
            return "blue"
        case Category.PERSONAL_GROWTH:
            return "green"


def sub_type_label(sub_type: SubType) -> str:
    """Human-readable activity kind."""
    match sub_type:
        case SubType.SERMON_PREP:
            return "Sermon Preparation"
        case SubType.MEETING:
            return "Meeting"
        case SubType.SERVICE:
            return "Service"
        case SubType.VISITATION:
            return "Visitation"
        case SubType.DEVOTIONAL:
            return "Devotional"
        case SubType.INTERCESSION:
            return "Intercession"
        case SubType.STUDY:
            return "Study"
        case SubType.EXERCISE:
            return "Exercise"
        case SubType.DATE_NIGHT:
            return "Time with Spouse/Children"
        case SubType.LEISURE:
            return "Leisure"
        case SubType.CHORE:
            return "Household Chore"
        case SubType.GENERIC:
            return "General"


def category_of(sub_type: SubType) -> Category | None:
    """The category an activity kind belongs to. GENERIC belongs to none."""
    match sub_type:
        case SubType.SERMON_PREP | SubType.MEETING | SubType.SERVICE | SubType.VISITATION:
            return Category.MINISTRY
        case SubType.DEVOTIONAL | SubType.INTERCESSION | SubType.STUDY | SubType.EXERCISE:
            return Category.PERSONAL_GROWTH
        case SubType.DATE_NIGHT | SubType.LEISURE | SubType.CHORE:
            return Category.FAMILY
        case SubType.GENERIC:
            return None


def default_sub_type(category: Category) -> SubType:
    """Sub type preselected when the creation form switches category."""
    match category:
        case Category.MINISTRY:
            return SubType.SERMON_PREP
        case Category.FAMILY:
            return SubType.DATE_NIGHT
        case Category.PERSONAL_GROWTH:
            return SubType.DEVOTIONAL


def sub_types_for(category: Category) -> list[SubType]:
    """Activity kinds offered for a category, GENERIC last."""
    return [s for s in SubType if category_of(s) == category] + [SubType.GENERIC]


def parse_category(value: str) -> Category:
    """Parse a category from its enum name, case-insensitive."""
    try:
        return Category[value.strip().upper().replace("-", "_").replace(" ", "_")]
    except KeyError:
        raise ValueError(f"Unknown category: {value}") from None


def parse_sub_type(value: str) -> SubType:
    """Parse a sub type from its enum name, case-insensitive."""
    try:
        return SubType[value.strip().upper().replace("-", "_").replace(" ", "_")]
    except KeyError:
        raise ValueError(f"Unknown activity type: {value}") from None
