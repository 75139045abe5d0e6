"""Manager review of team logs."""

from __future__ import annotations

import logging
from dataclasses import replace

from worklog_engine.errors import UnauthorizedError
from worklog_engine.queries import team_members_for_manager
from worklog_engine.schema import User, WorkLog
from worklog_engine.store import InMemoryStore

logger = logging.getLogger("worklog_engine.review")


def submit_review(store: InMemoryStore, log_id: str, reviewer: User, feedback: str) -> WorkLog:
    """Mark a report's log reviewed and attach feedback.

    Reviewing an already reviewed log replaces its comments; a log never
    goes back to unreviewed.
    """

    log = store.get_log(log_id)

    if not reviewer.is_manager:
        logger.warning("Non-manager %s tried to review %s", reviewer.id, log_id)
        raise UnauthorizedError("Only managers can review logs")

    report_ids = {member.id for member in team_members_for_manager(store, reviewer.id)}
    if log.user_id not in report_ids:
        logger.warning("Manager %s tried to review %s owned by %s", reviewer.id, log_id, log.user_id)
        raise UnauthorizedError(f"{log.user_id} does not report to {reviewer.id}")

    text = (feedback or "").strip()
    if not text:
        raise ValueError("Feedback is required")

    reviewed = store.replace_log(replace(log, reviewed=True, manager_comments=text))
    logger.info("Manager %s reviewed %s", reviewer.id, log_id)
    return reviewed
