"""Demo script for worklog-engine."""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from worklog_engine.adapters import csv_adapter, json_adapter
from worklog_engine.auth import MockAuthProvider, require_manager
from worklog_engine.config import configure_logging
from worklog_engine.dashboard import team_overview
from worklog_engine.heatmap import productivity_grid, productivity_series
from worklog_engine.review import submit_review
from worklog_engine.store import InMemoryStore


def main() -> None:
    configure_logging()
    store = InMemoryStore(json_adapter.parse("examples/sample_logs.json"), csv_adapter.parse("examples/sample_team.csv"))

    auth = MockAuthProvider()
    auth.login("manager@example.com", "demo")
    manager = require_manager(auth)

    print("Team before review:", team_overview(store, manager.id))
    submit_review(store, "log-1", manager, "Nice progress, ping design for the assets.")
    print("Team after review:", team_overview(store, manager.id))

    series = productivity_series(store, "dev-123", today=date(2025, 4, 19))
    print("Heatmap (dev-123):")
    print(productivity_grid(series))


if __name__ == "__main__":
    main()
