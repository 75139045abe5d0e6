"""JSON adapter for work log records."""

from __future__ import annotations

import json
from datetime import date

from worklog_engine.schema import MOODS, Task, WorkLog

_REQUIRED_FIELDS = ("id", "userId", "date", "mood")


def _parse_task(item: dict, index: int, position: int) -> Task:
    if not isinstance(item, dict) or not item.get("id"):
        raise ValueError(f"Item {index}: task {position} must be an object with an id")

    minutes = item.get("timeSpent", 0)
    if isinstance(minutes, float) and minutes.is_integer():
        minutes = int(minutes)
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise ValueError(f"Item {index}: task {position} has invalid timeSpent")

    completed = item.get("completed", False)
    if not isinstance(completed, bool):
        raise ValueError(f"Item {index}: task {position} has invalid completed flag")

    return Task(
        id=str(item["id"]).strip(),
        description=str(item.get("description") or "").strip(),
        time_spent=minutes,
        completed=completed,
    )


def _parse_item(item: dict, index: int) -> WorkLog:
    missing = [field for field in _REQUIRED_FIELDS if not item.get(field)]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    day = str(item["date"]).strip()
    try:
        parsed = date.fromisoformat(day)
    except ValueError as exc:
        raise ValueError(f"Item {index}: malformed date") from exc
    # only YYYY-MM-DD; lookups compare date strings
    if parsed.isoformat() != day:
        raise ValueError(f"Item {index}: date must be YYYY-MM-DD, got '{day}'")

    mood = str(item["mood"]).strip()
    if mood not in MOODS:
        raise ValueError(f"Item {index}: invalid mood '{mood}'")

    tasks_raw = item.get("tasks", [])
    if not isinstance(tasks_raw, list):
        raise ValueError(f"Item {index}: tasks must be a list")

    blockers = item.get("blockers")
    comments = item.get("managerComments")

    return WorkLog(
        id=str(item["id"]).strip(),
        user_id=str(item["userId"]).strip(),
        date=day,
        tasks=tuple(_parse_task(task, index, i) for i, task in enumerate(tasks_raw, start=1)),
        mood=mood,
        blockers=str(blockers) if blockers else None,
        reviewed=bool(item.get("reviewed", False)),
        manager_comments=str(comments) if comments else None,
    )


def parse(file_path: str) -> list[WorkLog]:
    """Parse a JSON file holding a list of log objects."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]


def to_dict(log: WorkLog) -> dict:
    return {
        "id": log.id,
        "userId": log.user_id,
        "date": log.date,
        "tasks": [
            {"id": t.id, "description": t.description, "timeSpent": t.time_spent, "completed": t.completed}
            for t in log.tasks
        ],
        "mood": log.mood,
        "blockers": log.blockers,
        "reviewed": log.reviewed,
        "managerComments": log.manager_comments,
    }


def dump(logs: list[WorkLog], file_path: str) -> None:
    """Write logs in the same shape ``parse`` reads."""

    with open(file_path, "w", encoding="utf-8") as handle:
        json.dump([to_dict(log) for log in logs], handle, indent=2, ensure_ascii=False)
