"""Print a dashboard report for one user as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from worklog_engine.adapters import csv_adapter, json_adapter
from worklog_engine.auth import MOCK_USERS
from worklog_engine.config import configure_logging, load_settings
from worklog_engine.dashboard import build_report
from worklog_engine.errors import WorkLogError
from worklog_engine.fixtures import seed_store
from worklog_engine.schema import User
from worklog_engine.store import InMemoryStore

logger = logging.getLogger("worklog_engine.report")


def _load_store(logs_path: str | None, roster_path: str | None, duplicate_policy: str) -> InMemoryStore:
    if logs_path is None and roster_path is None:
        return seed_store(duplicate_policy)
    logs = json_adapter.parse(logs_path) if logs_path else []
    members = csv_adapter.parse(roster_path) if roster_path else []
    return InMemoryStore(logs, members, duplicate_policy=duplicate_policy)


def _resolve_user(store: InMemoryStore, user_id: str) -> User:
    for user in MOCK_USERS.values():
        if user.id == user_id:
            return user
    for member in store.list_team_members():
        if member.id == user_id:
            return User(member.id, member.name, member.email, member.role, member.team)
    raise WorkLogError(f"Unknown user '{user_id}'")


def main() -> int:
    parser = argparse.ArgumentParser(description="Print a work log dashboard report")
    parser.add_argument("--user-id", required=True, help="User or manager id, e.g. dev-123 or mgr-456")
    parser.add_argument("--logs", help="Path to a JSON file of logs (defaults to the seed fixture)")
    parser.add_argument("--roster", help="Path to a team roster CSV")
    parser.add_argument("--days", type=int, help="Heatmap window in days")
    parser.add_argument("--today", type=date.fromisoformat, help="Reference date, YYYY-MM-DD")
    args = parser.parse_args()

    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        store = _load_store(args.logs, args.roster, settings.duplicate_policy)
        user = _resolve_user(store, args.user_id)
        window_days = settings.heatmap_days if args.days is None else args.days
        report = build_report(store, user, window_days=window_days, today=args.today)
    except (WorkLogError, ValueError) as exc:
        logger.error("Could not build report: %s", exc)
        return 1

    print(json.dumps(report, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
