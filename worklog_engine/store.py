"""In-memory data store for logs and team members."""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from worklog_engine.config import DUPLICATE_POLICIES
from worklog_engine.errors import DuplicateLogError, LogNotFoundError
from worklog_engine.schema import TeamMember, WorkLog

logger = logging.getLogger("worklog_engine.store")


class LogSource(Protocol):
    """Read side consumed by the query and aggregation functions."""

    def list_logs(self) -> list[WorkLog]: ...

    def list_team_members(self) -> list[TeamMember]: ...


class InMemoryStore:
    """List-backed store; updates replace whole records by id."""

    def __init__(
        self,
        logs: Iterable[WorkLog] = (),
        team_members: Iterable[TeamMember] = (),
        duplicate_policy: str = "reject",
    ) -> None:
        if duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(f"Unknown duplicate policy '{duplicate_policy}'")
        self.duplicate_policy = duplicate_policy
        self._logs: list[WorkLog] = list(logs)
        self._members: list[TeamMember] = list(team_members)

    def list_logs(self) -> list[WorkLog]:
        return list(self._logs)

    def list_team_members(self) -> list[TeamMember]:
        return list(self._members)

    def _index_of(self, log_id: str) -> int:
        for index, log in enumerate(self._logs):
            if log.id == log_id:
                return index
        raise LogNotFoundError(log_id)

    def get_log(self, log_id: str) -> WorkLog:
        return self._logs[self._index_of(log_id)]

    def add_log(self, log: WorkLog) -> WorkLog:
        """Store a new log, applying the same-day duplicate policy."""

        if any(existing.id == log.id for existing in self._logs):
            raise DuplicateLogError(f"Log id already exists: {log.id}")

        same_day = [
            index
            for index, existing in enumerate(self._logs)
            if existing.user_id == log.user_id and existing.date == log.date
        ]
        if same_day and self.duplicate_policy == "reject":
            logger.warning("Rejected second log for %s on %s", log.user_id, log.date)
            raise DuplicateLogError(f"{log.user_id} already has a log for {log.date}")
        if same_day and self.duplicate_policy == "replace":
            self._logs[same_day[0]] = log
            logger.info("Replaced log for %s on %s with %s", log.user_id, log.date, log.id)
            return log

        self._logs.append(log)
        return log

    def replace_log(self, log: WorkLog) -> WorkLog:
        """Swap the stored record with the same id for ``log``."""

        index = self._index_of(log.id)
        self._logs[index] = log
        return log

    def add_team_member(self, member: TeamMember) -> TeamMember:
        self._members.append(member)
        return member
