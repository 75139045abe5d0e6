from datetime import date, timedelta

import numpy as np
import pytest

from worklog_engine.fixtures import seed_store
from worklog_engine.heatmap import past_days, productivity_grid, productivity_series
from worklog_engine.schema import Task, WorkLog
from worklog_engine.store import InMemoryStore

TODAY = date(2025, 4, 19)


def test_past_days_counts_back_from_today():
    days = past_days(3, today=date(2025, 3, 1))
    assert days == ["2025-03-01", "2025-02-28", "2025-02-27"]


def test_past_days_rejects_empty_window():
    with pytest.raises(ValueError):
        past_days(0, today=TODAY)


def test_series_has_one_point_per_day_most_recent_first():
    series = productivity_series(seed_store(), "dev-123", 30, today=TODAY)
    assert len(series) == 30
    dates = [date.fromisoformat(point.date) for point in series]
    assert dates[0] == TODAY
    assert all(a - b == timedelta(days=1) for a, b in zip(dates, dates[1:]))


def test_series_values_for_seed_user():
    series = productivity_series(seed_store(), "dev-123", 30, today=TODAY)
    assert series[0].value == 7
    assert series[1].value == 10
    assert all(point.value == 0 for point in series[2:])


def test_series_for_unknown_user_is_all_zero():
    series = productivity_series(seed_store(), "ghost", 30, today=TODAY)
    assert len(series) == 30
    assert {point.value for point in series} == {0}


def test_series_uses_first_log_when_date_repeats():
    store = InMemoryStore(
        [
            WorkLog("a", "u", "2025-04-19", [Task("t1", "done", 10, True)]),
            WorkLog("b", "u", "2025-04-19", [Task("t2", "open", 10, False)]),
        ],
        duplicate_policy="append",
    )
    assert productivity_series(store, "u", 1, today=TODAY)[0].value == 10


def test_series_is_recomputed_each_call():
    store = seed_store()
    before = productivity_series(store, "dev-456", 5, today=TODAY)
    assert before == productivity_series(store, "dev-456", 5, today=TODAY)
    assert before[0].value == 5

    log = store.get_log("log-3")
    store.replace_log(WorkLog(log.id, log.user_id, log.date, [Task("t", "all done", 5, True)], log.mood))
    assert productivity_series(store, "dev-456", 5, today=TODAY)[0].value == 10


def test_productivity_grid_default_shape():
    series = productivity_series(seed_store(), "dev-123", 30, today=TODAY)
    grid = productivity_grid(series)
    assert grid.shape == (4, 7)
    assert grid[0, 0] == pytest.approx(0.7)
    assert grid[0, 1] == pytest.approx(1.0)
    assert np.count_nonzero(grid) == 2


def test_productivity_grid_pads_missing_cells():
    series = productivity_series(seed_store(), "dev-123", 2, today=TODAY)
    grid = productivity_grid(series, columns=3, rows=1)
    assert grid.tolist() == [[pytest.approx(0.7), pytest.approx(1.0), 0.0]]
