"""Dashboard settings loaded from TOML."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

from internship_dashboard.recent import DEFAULT_DATE_FORMAT, DEFAULT_RECENT_LIMIT

LOGGER = logging.getLogger(__name__)


@dataclass
class DashboardConfig:
    recent_limit: int = DEFAULT_RECENT_LIMIT
    date_format: str = DEFAULT_DATE_FORMAT
    profile_fields: int = 3

    @classmethod
    def from_toml(cls, data: dict) -> "DashboardConfig":
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            LOGGER.debug("Ignoring unknown config keys %s", unknown)

        cfg = cls(**{key: value for key, value in data.items() if key in known})
        for name in ("recent_limit", "profile_fields"):
            value = getattr(cfg, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(cfg.date_format, str) or not cfg.date_format:
            raise ValueError("date_format must be a non-empty string")
        return cfg


def load_config(path: Optional[Union[str, Path]] = None) -> DashboardConfig:
    """Read settings from ``path``; defaults are used when the file is absent."""

    if path is None:
        return DashboardConfig()

    config_path = Path(path)
    if not config_path.exists():
        LOGGER.info("Config file %s not found, using defaults", config_path)
        return DashboardConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in {config_path}") from exc

    return DashboardConfig.from_toml(data.get("dashboard", data))
