"""Creating new work logs from submitted form data."""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Any, Iterable, Optional

from worklog_engine.config import Settings
from worklog_engine.heatmap import utc_today
from worklog_engine.schema import MOODS, Task, WorkLog
from worklog_engine.store import InMemoryStore

logger = logging.getLogger("worklog_engine.entries")


def _parse_task(item: Any, index: int) -> Task:
    if isinstance(item, Task):
        description, minutes, completed = item.description, item.time_spent, item.completed
    else:
        description = item.get("description") or ""
        minutes = item.get("time_spent", item.get("timeSpent"))
        completed = bool(item.get("completed", False))

    description = str(description).strip()
    if len(description) < 2:
        raise ValueError(f"Task {index}: description is required")

    if isinstance(minutes, float) and not minutes.is_integer():
        raise ValueError(f"Task {index}: time spent must be a whole number of minutes")
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        try:
            minutes = int(minutes)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Task {index}: time spent must be a whole number of minutes") from exc
    if minutes < 1:
        raise ValueError(f"Task {index}: time spent must be at least 1 minute")

    return Task(id=f"task-{uuid.uuid4().hex}", description=description, time_spent=minutes, completed=completed)


def create_log(
    store: InMemoryStore,
    user_id: str,
    tasks: Iterable[Any],
    mood: str,
    blockers: Optional[str] = None,
    day: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> WorkLog:
    """Validate a submitted log and add it to the store.

    ``tasks`` may hold ``Task`` records or mappings with ``description``,
    ``time_spent`` (or ``timeSpent``) and ``completed`` keys.
    """

    settings = settings or Settings()

    parsed = [_parse_task(item, index) for index, item in enumerate(tasks, start=1)]
    if not parsed:
        raise ValueError("At least one task is required")

    if mood not in MOODS:
        raise ValueError(f"Invalid mood '{mood}'")

    total_minutes = sum(task.time_spent for task in parsed)
    if settings.max_day_minutes is not None and total_minutes > settings.max_day_minutes:
        raise ValueError(f"Logged {total_minutes} minutes, more than the {settings.max_day_minutes} allowed per day")

    log = WorkLog(
        id=f"log-{uuid.uuid4().hex}",
        user_id=user_id,
        date=(day or utc_today()).isoformat(),
        tasks=tuple(parsed),
        mood=mood,
        blockers=blockers.strip() if blockers and blockers.strip() else None,
    )
    store.add_log(log)
    logger.info("Created log %s for %s on %s with %d tasks", log.id, user_id, log.date, len(parsed))
    return log
