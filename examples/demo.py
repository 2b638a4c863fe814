"""Demo script for internship-dashboard."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from internship_dashboard.adapters.csv_adapter import parse
from internship_dashboard.adapters.json_adapter import parse_profile
from internship_dashboard.dashboard import build_dashboard


def main() -> None:
    tasks = parse("examples/sample_tasks.csv", month=3, year=2025)
    profile = parse_profile("examples/sample_profile.json")
    view = build_dashboard(tasks, profile, month=3, year=2025)
    print(view.welcome)
    for stat in view.stats:
        print(f"{stat.title}: {stat.value} ({stat.subtitle})")
    print(view.recent_title)
    for item in view.recent:
        print(f"  {item.date_label}  {item.description}  {item.duration or ''}")


if __name__ == "__main__":
    main()
