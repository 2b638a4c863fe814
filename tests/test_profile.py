from internship_dashboard.profile import (
    humanize_key,
    profile_configured,
    profile_highlights,
    welcome_message,
)


def test_profile_configured():
    assert profile_configured(None) is False
    assert profile_configured({}) is True


def test_welcome_message():
    assert welcome_message({"studentName": "Sam"}) == "Welcome back, Sam. Here's your internship overview."
    assert welcome_message({"studentName": "   "}) == "Welcome back. Here's your internship overview."
    assert welcome_message(None) == "Welcome back. Here's your internship overview."


def test_humanize_key():
    assert humanize_key("studentName") == "Student name"
    assert humanize_key("company") == "Company"


def test_highlights_skip_id_and_fill_blanks():
    profile = {
        "_id": "abc",
        "studentName": "Sam",
        "companyName": " ",
        "supervisorName": None,
        "internshipRole": "Analyst",
    }
    assert profile_highlights(profile) == [
        ("Student name", "Sam"),
        ("Company name", "Not specified"),
        ("Supervisor name", "Not specified"),
    ]


def test_highlights_absent_profile():
    assert profile_highlights(None) == []
