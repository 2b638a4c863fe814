import json
from datetime import date

import pytest

from internship_dashboard.adapters.csv_adapter import parse as parse_csv
from internship_dashboard.adapters.json_adapter import parse as parse_json
from internship_dashboard.adapters.json_adapter import parse_profile, task_from_dict


def test_csv_parse_success(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text(
        "_id,type,date,description,duration\n"
        "a,Work,2025-03-03,Setup,8h 0m\n"
        "b,Holiday,2025-03-04,Holiday,\n",
        encoding="utf-8",
    )
    tasks = parse_csv(str(path))
    assert len(tasks) == 2
    assert tasks[0].date == date(2025, 3, 3)
    assert tasks[0].duration == "8h 0m"
    assert tasks[1].duration is None


def test_csv_keeps_malformed_duration_text(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("_id,type,date,duration\na,Work,2025-03-03,abc\n", encoding="utf-8")
    assert parse_csv(str(path))[0].duration == "abc"


def test_csv_month_filter(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text(
        "_id,type,date\na,Work,2025-03-03\nb,Work,2025-04-01\nc,Work,2024-03-05\n",
        encoding="utf-8",
    )
    tasks = parse_csv(str(path), month=3, year=2025)
    assert [task.task_id for task in tasks] == ["a"]


def test_csv_parse_invalid_row(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("_id,type,date\na,Work,bad\n", encoding="utf-8")
    with pytest.raises(ValueError):
        parse_csv(str(path))


def test_csv_missing_required_field(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("_id,type,date\n,Work,2025-03-03\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Row 2"):
        parse_csv(str(path))


def test_json_parse_success(tmp_path):
    path = tmp_path / "tasks.json"
    payload = [
        {"_id": "a", "type": "Work", "date": "2025-03-03T00:00:00.000Z", "duration": "1h 30m"},
        {"task_id": "b", "type": "Weekend", "date": "2025-03-08", "description": "Weekend"},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    tasks = parse_json(str(path))
    assert [task.task_id for task in tasks] == ["a", "b"]
    assert tasks[0].date == date(2025, 3, 3)


def test_json_parse_malformed(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps([{"_id": "a", "type": "Work", "date": "bad"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_parse_requires_list(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"error": "unavailable"}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_task_from_dict_rejects_non_object():
    with pytest.raises(ValueError, match="Item 3"):
        task_from_dict(["not", "a", "dict"], 3)


def test_parse_profile(tmp_path):
    assert parse_profile(str(tmp_path / "missing.json")) is None

    path = tmp_path / "profile.json"
    path.write_text("null", encoding="utf-8")
    assert parse_profile(str(path)) is None

    path.write_text(json.dumps({"studentName": "Sam", "year": 3}), encoding="utf-8")
    assert parse_profile(str(path)) == {"studentName": "Sam", "year": "3"}

    path.write_text(json.dumps(["Sam"]), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_profile(str(path))
