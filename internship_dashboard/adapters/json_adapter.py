"""JSON adapter for task and profile records."""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from internship_dashboard.schema import Profile, TaskRecord

LOGGER = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("type", "date")


def _parse_date(raw) -> date:
    text = str(raw).strip()
    if text.endswith("Z"):
        text = text[:-1]
    return datetime.fromisoformat(text).date()


def task_from_dict(item: dict, index: int) -> TaskRecord:
    """Convert one API-shaped task mapping into a ``TaskRecord``."""

    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    task_id = item.get("_id") or item.get("task_id")
    missing = [field for field in _REQUIRED_FIELDS if not item.get(field)]
    if not task_id:
        missing.insert(0, "_id")
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        task_date = _parse_date(item["date"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: malformed date") from exc

    duration_raw = item.get("duration")
    return TaskRecord(
        task_id=str(task_id).strip(),
        type=str(item["type"]).strip(),
        date=task_date,
        description=str(item.get("description") or ""),
        duration=str(duration_raw) if duration_raw not in (None, "") else None,
    )


def parse(file_path: str, month: Optional[int] = None, year: Optional[int] = None) -> list[TaskRecord]:
    """Parse a JSON list of tasks, optionally keeping one month."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    tasks = [task_from_dict(item, i) for i, item in enumerate(payload, start=1)]
    if month is not None and year is not None:
        tasks = [task for task in tasks if task.date.month == month and task.date.year == year]
    LOGGER.info("Loaded %d tasks from %s", len(tasks), file_path)
    return tasks


def parse_profile(file_path: str) -> Optional[Profile]:
    """Parse a profile object; a missing file or ``null`` means no profile."""

    path = Path(file_path)
    if not path.exists():
        LOGGER.info("No profile at %s", path)
        return None

    payload = json.loads(path.read_text(encoding="utf-8"))
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise ValueError("Profile payload must be an object")

    return {str(key): (None if value is None else str(value)) for key, value in payload.items()}
