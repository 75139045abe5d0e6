"""Seed data the demo and tests start from."""

from __future__ import annotations

from worklog_engine.schema import Task, TeamMember, WorkLog
from worklog_engine.store import InMemoryStore

SEED_LOGS = (
    WorkLog(
        id="log-1",
        user_id="dev-123",
        date="2025-04-19",
        tasks=(
            Task("task-1", "Implemented login flow", 120, True),
            Task("task-2", "Fixed navigation bug", 45, True),
            Task("task-3", "Started work on profile page", 90, False),
        ),
        mood="productive",
        blockers="Need design assets for profile page",
    ),
    WorkLog(
        id="log-2",
        user_id="dev-123",
        date="2025-04-18",
        tasks=(
            Task("task-4", "Code review for PR #123", 60, True),
            Task("task-5", "Team meeting", 45, True),
            Task("task-6", "Documentation update", 120, True),
        ),
        mood="neutral",
        reviewed=True,
        manager_comments="Good work on the documentation. Let's discuss the login flow implementation.",
    ),
    WorkLog(
        id="log-3",
        user_id="dev-456",
        date="2025-04-19",
        tasks=(
            Task("task-7", "API integration", 180, True),
            Task("task-8", "Unit testing", 120, False),
        ),
        mood="frustrated",
        blockers="API documentation is outdated",
    ),
)

SEED_TEAM = (
    TeamMember("dev-123", "John Developer", "john@example.com", "developer", "frontend", "mgr-456"),
    TeamMember("dev-456", "Alice Engineer", "alice@example.com", "developer", "backend", "mgr-456"),
    TeamMember("dev-789", "Bob Coder", "bob@example.com", "developer", "frontend", "mgr-456"),
)


def seed_store(duplicate_policy: str = "reject") -> InMemoryStore:
    """Return a fresh store loaded with the seed fixture."""

    return InMemoryStore(SEED_LOGS, SEED_TEAM, duplicate_policy=duplicate_policy)
