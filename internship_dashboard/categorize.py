"""Task partitioning by category tag."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from internship_dashboard.schema import HOLIDAY, WEEKEND, WORK, TaskRecord


@dataclass(frozen=True)
class CategorySplit:
    """Work, Holiday and Weekend subsequences plus the leftover count."""

    work: list[TaskRecord]
    holiday: list[TaskRecord]
    weekend: list[TaskRecord]
    other: int
    total: int

    @property
    def days_off(self) -> int:
        return len(self.holiday) + len(self.weekend)


def filter_by_type(tasks: Sequence[TaskRecord], tag: str) -> list[TaskRecord]:
    """Return tasks whose type equals ``tag`` exactly, in input order."""

    return [task for task in tasks if task.type == tag]


def split_categories(tasks: Sequence[TaskRecord]) -> CategorySplit:
    """Partition tasks into the three named buckets."""

    work = filter_by_type(tasks, WORK)
    holiday = filter_by_type(tasks, HOLIDAY)
    weekend = filter_by_type(tasks, WEEKEND)
    total = len(tasks)
    return CategorySplit(
        work=work,
        holiday=holiday,
        weekend=weekend,
        other=total - len(work) - len(holiday) - len(weekend),
        total=total,
    )


def tally_by_type(tasks: Sequence[TaskRecord]) -> Counter:
    """Count tasks per tag in a single pass."""

    return Counter(task.type for task in tasks)
