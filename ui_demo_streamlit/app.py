"""Streamlit dashboard page for internship-dashboard."""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path
from typing import Any, Optional

from internship_dashboard.adapters import csv_adapter, json_adapter
from internship_dashboard.config import load_config
from internship_dashboard.dashboard import DashboardView, build_dashboard
from internship_dashboard.schema import MONTHS

DEMO_TASKS = "examples/sample_tasks.csv"
DEMO_PROFILE = "examples/sample_profile.json"
DEMO_CONFIG = "examples/dashboard.toml"


def _parse_tasks_from_path(file_path: str, month: int, year: int) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path, month=month, year=year)
    if suffix == ".json":
        return json_adapter.parse(file_path, month=month, year=year)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _to_temp_file(uploaded_file) -> str:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        return handle.name


def run_dashboard(tasks: list, profile: Optional[dict], month: int, year: int) -> DashboardView:
    """Build the dashboard view for the selected month."""

    return build_dashboard(tasks, profile, month, year, config=load_config(DEMO_CONFIG))


def _render_stats(st: Any, view: DashboardView) -> None:
    st.subheader("This Month")
    columns = st.columns(len(view.stats))
    for column, stat in zip(columns, view.stats):
        column.metric(stat.title, stat.value)
        column.caption(stat.subtitle)


def _render_profile(st: Any, view: DashboardView) -> None:
    st.subheader("Profile Summary")
    if not view.profile_configured:
        st.info("No profile set up yet.")
        return
    st.table([{"Field": label, "Value": value} for label, value in view.highlights])


def _render_recent(st: Any, view: DashboardView) -> None:
    st.subheader(view.recent_title)
    if not view.recent:
        st.info("No tasks recorded this month.")
        return
    st.table(
        [
            {"Description": item.description, "Date": item.date_label, "Duration": item.duration or ""}
            for item in view.recent
        ]
    )


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Internship Dashboard", layout="wide")
    st.title("Dashboard")

    today = date.today()
    with st.sidebar:
        st.header("Data")
        uploaded_tasks = st.file_uploader("Upload tasks", type=["csv", "json"])
        uploaded_profile = st.file_uploader("Upload profile", type=["json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        month = st.selectbox(
            "Month", options=list(range(1, 13)), index=today.month - 1, format_func=lambda m: MONTHS[m - 1]
        )
        year = int(st.number_input("Year", min_value=2000, max_value=2100, value=today.year, step=1))

    try:
        if use_demo:
            tasks = _parse_tasks_from_path(DEMO_TASKS, month, year)
            profile = json_adapter.parse_profile(DEMO_PROFILE)
        else:
            tasks = _parse_tasks_from_path(_to_temp_file(uploaded_tasks), month, year) if uploaded_tasks else None
            profile = json_adapter.parse_profile(_to_temp_file(uploaded_profile)) if uploaded_profile else None

        view = run_dashboard(tasks, profile, month, year)
    except ValueError as exc:
        st.error(f"Input error: {exc}")
        return

    st.caption(view.welcome)
    _render_stats(st, view)

    left, right = st.columns(2)
    with left:
        st.subheader("Quick Actions")
        for label, href in view.quick_actions:
            st.markdown(f"- [{label}]({href})")
    with right:
        _render_profile(st, view)

    _render_recent(st, view)


if __name__ == "__main__":
    main()
