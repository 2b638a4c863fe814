"""CSV adapter for task records."""

from __future__ import annotations

import csv
import logging
from datetime import date, datetime
from typing import Optional

from internship_dashboard.schema import TaskRecord

LOGGER = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("type", "date")


def _parse_date(raw: str) -> date:
    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1]
    return datetime.fromisoformat(text).date()


def _parse_row(row: dict, row_number: int) -> TaskRecord:
    task_id = row.get("_id") or row.get("task_id")
    missing = [field for field in _REQUIRED_FIELDS if not row.get(field)]
    if not task_id:
        missing.insert(0, "_id")
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        task_date = _parse_date(row["date"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: malformed date") from exc

    duration_raw = row.get("duration")
    return TaskRecord(
        task_id=task_id.strip(),
        type=row["type"].strip(),
        date=task_date,
        description=row.get("description") or "",
        duration=duration_raw if duration_raw else None,
    )


def parse(file_path: str, month: Optional[int] = None, year: Optional[int] = None) -> list[TaskRecord]:
    """Parse a CSV file into task records, optionally keeping one month."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        tasks: list[TaskRecord] = []
        for row_number, row in enumerate(reader, start=2):
            task = _parse_row(row, row_number)
            if month is not None and year is not None:
                if task.date.month != month or task.date.year != year:
                    continue
            tasks.append(task)

    LOGGER.info("Loaded %d tasks from %s", len(tasks), file_path)
    return tasks
