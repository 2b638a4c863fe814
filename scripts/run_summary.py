"""Print the monthly dashboard for a CSV/JSON task file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from internship_dashboard.adapters import csv_adapter, json_adapter
from internship_dashboard.config import load_config
from internship_dashboard.dashboard import build_dashboard, to_payload


def _load_tasks(path: Path, month: int, year: int):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path), month=month, year=year)
    if suffix == ".json":
        return json_adapter.parse(str(path), month=month, year=year)
    raise ValueError("Unsupported input format, expected .csv or .json")


def main() -> None:
    today = date.today()
    parser = argparse.ArgumentParser(description="Summarize a month of internship tasks")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON tasks file")
    parser.add_argument("--profile", help="Path to JSON profile file")
    parser.add_argument("--month", type=int, default=today.month, help="Month number, 1-12")
    parser.add_argument("--year", type=int, default=today.year)
    parser.add_argument("--config", help="Path to TOML settings file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        tasks = _load_tasks(Path(args.data), args.month, args.year)
        profile = json_adapter.parse_profile(args.profile) if args.profile else None
        view = build_dashboard(tasks, profile, args.month, args.year, config=config)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(to_payload(view), indent=2))


if __name__ == "__main__":
    main()
