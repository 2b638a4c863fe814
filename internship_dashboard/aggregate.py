"""Worked-time aggregation."""

from __future__ import annotations

from typing import Sequence

from internship_dashboard.duration import format_minutes, parse_duration_minutes
from internship_dashboard.schema import TaskRecord


def total_work_minutes(work_tasks: Sequence[TaskRecord]) -> int:
    """Sum parsed minutes over Work tasks; malformed durations add nothing."""

    return sum(parse_duration_minutes(task.duration) for task in work_tasks)


def total_hours(work_tasks: Sequence[TaskRecord]) -> str:
    return format_minutes(total_work_minutes(work_tasks))
