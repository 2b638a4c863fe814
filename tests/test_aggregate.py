from datetime import date

from internship_dashboard.aggregate import total_hours, total_work_minutes
from internship_dashboard.schema import TaskRecord


def work(task_id, duration):
    return TaskRecord(task_id, "Work", date(2025, 3, 1), "", duration)


def test_total_sums_valid_durations():
    tasks = [work("a", "8h 0m"), work("b", "1h 45m")]
    assert total_work_minutes(tasks) == 585
    assert total_hours(tasks) == "9h 45m"


def test_missing_and_malformed_durations_contribute_nothing():
    tasks = [work("a", None), work("b", "abc"), work("c", "0h 50m"), work("d", "0h 20m")]
    assert total_work_minutes(tasks) == 70
    assert total_hours(tasks) == "1h 10m"


def test_hours_and_minutes_recombine_to_total():
    tasks = [work(str(i), f"{i}h {i * 7}m") for i in range(1, 10)]
    hours, minutes = total_hours(tasks).split()
    h, m = int(hours[:-1]), int(minutes[:-1])
    assert 0 <= m < 60
    assert h * 60 + m == total_work_minutes(tasks)


def test_empty_total():
    assert total_hours([]) == "0h 0m"
