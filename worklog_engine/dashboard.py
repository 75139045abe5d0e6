"""Dashboard summaries built from queries and metrics."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Optional

from worklog_engine.heatmap import productivity_series
from worklog_engine.metrics import completion_stats, format_duration, round_half_up, time_spent
from worklog_engine.queries import (
    filter_logs,
    logs_for_user,
    member_name,
    pending_reviews,
    sort_by_recency,
    team_logs_for_manager,
    team_members_for_manager,
)
from worklog_engine.schema import User, WorkLog, mood_label
from worklog_engine.store import LogSource


@dataclass(frozen=True)
class DaySummary:
    completed: int
    total: int
    rate: int
    minutes: int
    duration: str
    mood: str
    blockers: Optional[str]


@dataclass(frozen=True)
class TeamOverview:
    members: int
    logs: int
    pending_reviews: int
    with_blockers: int
    minutes: int
    average_rate: int


def latest_log(logs: list[WorkLog]) -> Optional[WorkLog]:
    ordered = sort_by_recency(logs)
    return ordered[0] if ordered else None


def summarize_day(log: Optional[WorkLog]) -> DaySummary:
    """Headline cards for one day's log; ``None`` means nothing logged."""

    if log is None:
        return DaySummary(0, 0, 0, 0, format_duration(0), "Not logged", None)

    stats = completion_stats(log)
    minutes = time_spent(log)
    return DaySummary(
        completed=stats.completed,
        total=stats.total,
        rate=stats.rate,
        minutes=minutes,
        duration=format_duration(minutes),
        mood=mood_label(log.mood),
        blockers=log.blockers if log.has_blockers else None,
    )


def team_overview(store: LogSource, manager_id: str) -> TeamOverview:
    members = team_members_for_manager(store, manager_id)
    logs = team_logs_for_manager(store, manager_id)

    rate_sum = sum(completion_stats(log).rate for log in logs)
    return TeamOverview(
        members=len(members),
        logs=len(logs),
        pending_reviews=len(filter_logs(logs, "unreviewed")),
        with_blockers=len(filter_logs(logs, "with-blockers")),
        minutes=sum(time_spent(log) for log in logs),
        average_rate=round_half_up(rate_sum, len(logs)) if logs else 0,
    )


def _log_row(log: WorkLog, owner: Optional[str] = None) -> dict[str, Any]:
    stats = completion_stats(log)
    row = {
        "id": log.id,
        "date": log.date,
        "tasks": stats.total,
        "completed": stats.completed,
        "rate": stats.rate,
        "time": format_duration(time_spent(log)),
        "mood": log.mood,
        "blockers": log.has_blockers,
        "reviewed": log.reviewed,
    }
    if owner is not None:
        row["owner"] = owner
    return row


def build_report(
    store: LogSource,
    user: User,
    window_days: int = 30,
    today: Optional[date] = None,
    recent: int = 3,
) -> dict[str, Any]:
    """Return a JSON-friendly dashboard payload for ``user``."""

    logs = sort_by_recency(logs_for_user(store, user.id))
    report: dict[str, Any] = {
        "user": {"id": user.id, "name": user.name, "role": user.role},
        "latest": asdict(summarize_day(logs[0] if logs else None)),
        "recent_logs": [_log_row(log) for log in logs[:recent]],
        "productivity": [asdict(point) for point in productivity_series(store, user.id, window_days, today)],
    }

    if user.is_manager:
        members = team_members_for_manager(store, user.id)
        report["team"] = asdict(team_overview(store, user.id))
        report["pending_reviews"] = [
            _log_row(log, owner=member_name(members, log.user_id)) for log in pending_reviews(store, user.id)
        ]
    return report
