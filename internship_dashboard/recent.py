"""Recent activity feed."""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence, Union

from internship_dashboard.schema import RecentItem, TaskRecord

DEFAULT_RECENT_LIMIT = 5
DEFAULT_DATE_FORMAT = "%d/%m/%Y"
INVALID_DATE = "Invalid Date"


def _coerce_date(value: Union[date, datetime, str, None]) -> date | None:
    if isinstance(value, (date, datetime)):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1]
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_display_date(value, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a date for display, day first."""

    parsed = _coerce_date(value)
    if parsed is None:
        return INVALID_DATE
    return parsed.strftime(date_format)


def recent_activity(
    tasks: Sequence[TaskRecord],
    limit: int = DEFAULT_RECENT_LIMIT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> list[RecentItem]:
    """Return the last ``limit`` tasks, most recently appended first."""

    if limit <= 0:
        return []

    return [
        RecentItem(
            task_id=task.task_id,
            description=task.description,
            date_label=format_display_date(task.date, date_format),
            duration=task.duration,
        )
        for task in reversed(tasks[-limit:])
    ]
