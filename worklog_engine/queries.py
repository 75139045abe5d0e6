"""Read-only views over the log store.

Every function here is total: an unknown user or manager id gives an empty
list, never an error. Results keep storage order unless a function says it
sorts.
"""

from __future__ import annotations

from typing import Iterable

from worklog_engine.metrics import completion_stats
from worklog_engine.schema import TeamMember, WorkLog
from worklog_engine.store import LogSource

LOG_VIEWS = ("all", "with-blockers", "completed", "reviewed", "unreviewed")


def logs_for_user(store: LogSource, user_id: str) -> list[WorkLog]:
    """Return every log owned by ``user_id``."""

    return [log for log in store.list_logs() if log.user_id == user_id]


def team_members_for_manager(store: LogSource, manager_id: str) -> list[TeamMember]:
    """Return the direct reports of ``manager_id``."""

    return [member for member in store.list_team_members() if member.manager_id == manager_id]


def team_logs_for_manager(store: LogSource, manager_id: str) -> list[WorkLog]:
    """Return the logs of all direct reports of ``manager_id``."""

    member_ids = {member.id for member in team_members_for_manager(store, manager_id)}
    return [log for log in store.list_logs() if log.user_id in member_ids]


def sort_by_recency(logs: Iterable[WorkLog]) -> list[WorkLog]:
    """Most recent date first; logs sharing a date keep their relative order."""

    return sorted(logs, key=lambda log: log.date, reverse=True)


def filter_logs(logs: Iterable[WorkLog], view: str = "all") -> list[WorkLog]:
    """Apply one of the list-page tabs in ``LOG_VIEWS``."""

    if view == "all":
        return list(logs)
    if view == "with-blockers":
        return [log for log in logs if log.has_blockers]
    if view == "completed":
        result = []
        for log in logs:
            stats = completion_stats(log)
            if stats.total and stats.completed == stats.total:
                result.append(log)
        return result
    if view == "reviewed":
        return [log for log in logs if log.reviewed]
    if view == "unreviewed":
        return [log for log in logs if not log.reviewed]
    raise ValueError(f"Unknown log view '{view}', expected one of {LOG_VIEWS}")


def member_name(members: Iterable[TeamMember], user_id: str) -> str:
    for member in members:
        if member.id == user_id:
            return member.name
    return "Unknown"


def search_logs(logs: Iterable[WorkLog], query: str, members: Iterable[TeamMember] = ()) -> list[WorkLog]:
    """Case-insensitive match on owner name, task text, blockers or mood."""

    needle = query.strip().lower()
    if not needle:
        return list(logs)

    names = {member.id: member.name.lower() for member in members}
    result = []
    for log in logs:
        if (
            needle in names.get(log.user_id, "")
            or any(needle in task.description.lower() for task in log.tasks)
            or (log.blockers and needle in log.blockers.lower())
            or needle in log.mood.lower()
        ):
            result.append(log)
    return result


def pending_reviews(store: LogSource, manager_id: str) -> list[WorkLog]:
    """Unreviewed team logs, most recent first."""

    return sort_by_recency(filter_logs(team_logs_for_manager(store, manager_id), "unreviewed"))
