"""Monthly dashboard composition."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from internship_dashboard.aggregate import total_work_minutes
from internship_dashboard.categorize import CategorySplit, split_categories
from internship_dashboard.config import DashboardConfig
from internship_dashboard.profile import profile_configured, profile_highlights, welcome_message
from internship_dashboard.recent import recent_activity
from internship_dashboard.schema import Profile, RecentItem, SummaryStat, month_label
from internship_dashboard.summary import build_summary_stats

LOGGER = logging.getLogger(__name__)

QUICK_ACTIONS = (
    ("Add Daily Task", "/tasks"),
    ("Generate Monthly Report", "/report"),
    ("Update Profile", "/profile"),
)


@dataclass(frozen=True)
class DashboardView:
    """Everything the presentation layer needs to render one month."""

    stats: list[SummaryStat]
    categories: CategorySplit
    total_minutes: int
    recent: list[RecentItem]
    recent_title: str
    welcome: str
    profile_configured: bool
    highlights: list[tuple[str, str]]
    loading: bool = False
    quick_actions: tuple[tuple[str, str], ...] = field(default=QUICK_ACTIONS)


def _as_task_list(tasks: Any) -> list:
    if tasks is None:
        return []
    if not isinstance(tasks, (list, tuple)):
        LOGGER.debug("Expected a task list, got %s; treating as empty", type(tasks).__name__)
        return []
    return list(tasks)


def build_dashboard(
    tasks,
    profile: Optional[Profile],
    month: int,
    year: int,
    *,
    tasks_loading: bool = False,
    profile_loading: bool = False,
    config: Optional[DashboardConfig] = None,
) -> DashboardView:
    """Compute the dashboard for one month from the fetched tasks and profile."""

    cfg = config or DashboardConfig()
    task_list = _as_task_list(tasks)

    categories = split_categories(task_list)
    minutes = total_work_minutes(categories.work)

    return DashboardView(
        stats=build_summary_stats(task_list, categories, minutes, month, year),
        categories=categories,
        total_minutes=minutes,
        recent=recent_activity(task_list, limit=cfg.recent_limit, date_format=cfg.date_format),
        recent_title=f"Recent Tasks - {month_label(month, year)}",
        welcome=welcome_message(profile),
        profile_configured=profile_configured(profile),
        highlights=profile_highlights(profile, limit=cfg.profile_fields),
        loading=tasks_loading or profile_loading,
    )


def to_payload(view: DashboardView) -> dict:
    """Flatten a dashboard view into JSON-serializable primitives."""

    return {
        "welcome": view.welcome,
        "loading": view.loading,
        "stats": [
            {
                "title": stat.title,
                "value": stat.value,
                "subtitle": stat.subtitle,
                "icon": stat.icon,
                "color": stat.color,
            }
            for stat in view.stats
        ],
        "categories": {
            "work": len(view.categories.work),
            "holiday": len(view.categories.holiday),
            "weekend": len(view.categories.weekend),
            "other": view.categories.other,
            "total": view.categories.total,
        },
        "profile_configured": view.profile_configured,
        "profile": [{"label": label, "value": value} for label, value in view.highlights],
        "recent_title": view.recent_title,
        "recent": [
            {
                "task_id": item.task_id,
                "description": item.description,
                "date": item.date_label,
                "duration": item.duration,
            }
            for item in view.recent
        ],
        "quick_actions": [{"label": label, "href": href} for label, href in view.quick_actions],
    }
