"""User profile and weekday indexing."""

from dataclasses import dataclass
from datetime import date

# Index 0 is Sunday, matching the week layout of the calendar.
DAYS_OF_WEEK = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]


def weekday_index(d: date) -> int:
    """Day-of-week index with Sunday = 0 ... Saturday = 6."""
    return (d.weekday() + 1) % 7


def parse_day(value: str | int) -> int:
    """
    Parse a weekday given as an index (0-6) or a name ("monday", "Mon").

    Raises ValueError for anything else.
    """
    if isinstance(value, int):
        index = value
    else:
        text = value.strip()
        if text.isdigit():
            index = int(text)
        else:
            matches = [i for i, name in enumerate(DAYS_OF_WEEK) if name.lower().startswith(text.lower())]
            if not text or len(matches) != 1:
                raise ValueError(f"Unknown weekday: {value}")
            index = matches[0]
    if not 0 <= index <= 6:
        raise ValueError(f"Weekday index must be between 0 and 6, got {index}")
    return index


@dataclass(frozen=True)
class UserProfile:
    """The single user's settings."""

    name: str
    rest_day: int = 1

    def __post_init__(self):
        if not 0 <= self.rest_day <= 6:
            raise ValueError(f"rest_day must be between 0 and 6, got {self.rest_day}")

    @property
    def rest_day_name(self) -> str:
        return DAYS_OF_WEEK[self.rest_day]

    def is_rest_day(self, d: date) -> bool:
        return weekday_index(d) == self.rest_day
