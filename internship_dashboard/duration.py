"""Duration text parsing."""

from __future__ import annotations

import logging
import re
from typing import Optional

LOGGER = logging.getLogger(__name__)

_DURATION_PATTERN = re.compile(r"\s*(\d+)h\s*(\d+)m\s*")


def parse_duration_minutes(duration: Optional[str]) -> int:
    """Convert ``"<h>h <m>m"`` text into total minutes, or 0 when it does not match."""

    if not duration or not isinstance(duration, str):
        return 0

    match = _DURATION_PATTERN.fullmatch(duration)
    if match is None:
        LOGGER.debug("Ignoring malformed duration %r", duration)
        return 0

    hours, minutes = match.groups()
    return int(hours) * 60 + int(minutes)


def format_minutes(total_minutes: int) -> str:
    """Render a minute count as ``"<h>h <m>m"``."""

    total = max(0, int(total_minutes))
    return f"{total // 60}h {total % 60}m"
