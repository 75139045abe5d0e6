"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DUPLICATE_POLICIES = ("reject", "replace", "append")


@dataclass(frozen=True)
class Settings:
    heatmap_days: int = 30
    duplicate_policy: str = "reject"
    max_day_minutes: Optional[int] = 1440
    log_level: str = "INFO"


def _int_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got '{raw}'") from exc


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build settings from WORKLOG_* environment variables (and a .env file)."""

    load_dotenv(env_file)

    heatmap_days = _int_env("WORKLOG_HEATMAP_DAYS", 30)
    if heatmap_days < 1:
        raise ValueError("WORKLOG_HEATMAP_DAYS must be at least 1")

    policy = os.getenv("WORKLOG_DUPLICATE_POLICY", "reject").strip().lower()
    if policy not in DUPLICATE_POLICIES:
        raise ValueError(f"WORKLOG_DUPLICATE_POLICY must be one of {DUPLICATE_POLICIES}, got '{policy}'")

    max_day_minutes = _int_env("WORKLOG_MAX_DAY_MINUTES", 1440)
    if max_day_minutes < 0:
        raise ValueError("WORKLOG_MAX_DAY_MINUTES must not be negative")

    log_level = os.getenv("WORKLOG_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"WORKLOG_LOG_LEVEL is not a logging level: '{log_level}'")

    return Settings(
        heatmap_days=heatmap_days,
        duplicate_policy=policy,
        max_day_minutes=max_day_minutes or None,
        log_level=log_level,
    )


def configure_logging(level: str = "INFO") -> None:
    """Attach a basic stderr handler; used by scripts and the demo UI."""

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
