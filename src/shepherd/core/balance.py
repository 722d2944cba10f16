"""Pure time-balance aggregation - no I/O dependencies."""

import logging
from dataclasses import dataclass, field

from .activities import Category, Task, category_label

logger = logging.getLogger(__name__)


@dataclass
class BalanceReport:
    """Minutes spent per category across a task collection."""

    totals: dict[Category, float] = field(default_factory=lambda: {c: 0.0 for c in Category})
    grand_total: float = 0.0

    def total(self, category: Category) -> float:
        return self.totals.get(category, 0.0)

    def percentage(self, category: Category) -> float:
        """Share of the grand total, 0 when nothing was scheduled."""
        if self.grand_total == 0:
            return 0.0
        return 100 * self.total(category) / self.grand_total

    def to_dict(self) -> dict:
        return {
            "grand_total": self.grand_total,
            "categories": [
                {
                    "category": c.value,
                    "label": category_label(c),
                    "minutes": self.total(c),
                    "percentage": round(self.percentage(c), 1),
                }
                for c in Category
            ],
        }


def aggregate_balance(tasks: list[Task]) -> BalanceReport:
    """
    Sum task durations per category.

    Pure function - no I/O. Tasks with a non-positive duration are left out
    of every total.
    """
    report = BalanceReport()
    for task in tasks:
        duration = task.duration_minutes()
        if duration <= 0:
            logger.debug(f"Skipping {task.title!r}: non-positive duration ({duration} min)")
            continue
        report.totals[task.category] += duration
        report.grand_total += duration
    return report


def format_hours(minutes: float) -> str:
    """Render minutes as 'Xh Ym'."""
    h = int(minutes // 60)
    m = int(minutes % 60)
    return f"{h}h {m}m"
