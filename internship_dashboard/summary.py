"""Monthly summary statistics."""

from __future__ import annotations

from typing import Sequence

from internship_dashboard.categorize import CategorySplit
from internship_dashboard.duration import format_minutes
from internship_dashboard.schema import SummaryStat, TaskRecord, month_label


def build_summary_stats(
    tasks: Sequence[TaskRecord],
    categories: CategorySplit,
    total_minutes: int,
    month: int,
    year: int,
) -> list[SummaryStat]:
    """Build the four dashboard statistics in display order."""

    holidays = len(categories.holiday)
    weekends = len(categories.weekend)
    return [
        SummaryStat(
            title="Total Tasks",
            value=len(tasks),
            subtitle=month_label(month, year),
            icon="clipboard-list",
            color="primary",
        ),
        SummaryStat(
            title="Work Days",
            value=len(categories.work),
            subtitle="Active working days",
            icon="briefcase",
            color="chart-2",
        ),
        SummaryStat(
            title="Total Hours",
            value=format_minutes(total_minutes),
            subtitle="Work hours logged",
            icon="clock",
            color="chart-4",
        ),
        SummaryStat(
            title="Days Off",
            value=holidays + weekends,
            subtitle=f"{holidays} holidays, {weekends} weekends",
            icon="calendar-days",
            color="chart-5",
        ),
    ]
