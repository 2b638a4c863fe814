"""Profile display helpers."""

from __future__ import annotations

import re
from typing import Optional

from internship_dashboard.schema import Profile

NOT_SPECIFIED = "Not specified"
_HIDDEN_KEYS = {"_id"}
_CAMEL_BOUNDARY = re.compile(r"([A-Z])")


def profile_configured(profile: Optional[Profile]) -> bool:
    return profile is not None


def humanize_key(key: str) -> str:
    """Turn a camelCase key into a label, e.g. ``studentName`` -> ``Student name``."""

    spaced = _CAMEL_BOUNDARY.sub(r" \1", key).strip()
    return spaced[:1].upper() + spaced[1:].lower()


def _display_value(value) -> str:
    text = "" if value is None else str(value).strip()
    return text or NOT_SPECIFIED


def welcome_message(profile: Optional[Profile]) -> str:
    name = (profile or {}).get("studentName")
    name = str(name).strip() if name is not None else ""
    greeting = f"Welcome back, {name}" if name else "Welcome back"
    return f"{greeting}. Here's your internship overview."


def profile_highlights(profile: Optional[Profile], limit: int = 3) -> list[tuple[str, str]]:
    """Return up to ``limit`` ``(label, value)`` pairs for the profile card."""

    if not profile or limit <= 0:
        return []

    visible = [(key, value) for key, value in profile.items() if key not in _HIDDEN_KEYS]
    return [(humanize_key(key), _display_value(value)) for key, value in visible[:limit]]
