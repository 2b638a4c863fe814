"""Core data schema for internship task records and dashboard output."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

WORK = "Work"
HOLIDAY = "Holiday"
WEEKEND = "Weekend"

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Profile records are flat camelCase mappings as delivered by the data source.
Profile = dict[str, Optional[str]]


@dataclass(frozen=True)
class TaskRecord:
    """One logged activity entry for a calendar date."""

    task_id: str
    type: str
    date: date
    description: str = ""
    duration: Optional[str] = None


@dataclass(frozen=True)
class SummaryStat:
    """A single dashboard statistic with its presentation tags."""

    title: str
    value: Union[int, str]
    subtitle: str
    icon: str
    color: str


@dataclass(frozen=True)
class RecentItem:
    task_id: str
    description: str
    date_label: str
    duration: Optional[str]


def month_label(month: int, year: int) -> str:
    """Return ``"<Month name> <year>"`` for a 1-indexed month."""

    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    return f"{MONTHS[month - 1]} {year}"
