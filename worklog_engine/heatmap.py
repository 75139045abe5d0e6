"""Daily productivity series for the dashboard heatmap."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional

import numpy as np

from worklog_engine.metrics import productivity_value
from worklog_engine.queries import logs_for_user
from worklog_engine.schema import ProductivityPoint
from worklog_engine.store import LogSource


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def past_days(window_days: int = 30, today: Optional[date] = None) -> list[str]:
    """ISO dates from ``today`` backwards, one per calendar day."""

    if window_days < 1:
        raise ValueError(f"window_days must be at least 1, got {window_days}")

    start = today or utc_today()
    return [(start - timedelta(days=offset)).isoformat() for offset in range(window_days)]


def productivity_series(
    store: LogSource,
    user_id: str,
    window_days: int = 30,
    today: Optional[date] = None,
) -> list[ProductivityPoint]:
    """One point per day over the window, most recent first.

    A day without a log scores 0. If a user has more than one log on a date,
    the first one in storage order is used.
    """

    by_date = {}
    for log in logs_for_user(store, user_id):
        by_date.setdefault(log.date, log)

    series = []
    for day in past_days(window_days, today):
        log = by_date.get(day)
        series.append(ProductivityPoint(date=day, value=productivity_value(log) if log else 0))
    return series


def productivity_grid(series: list[ProductivityPoint], columns: int = 7, rows: Optional[int] = None) -> np.ndarray:
    """Lay out series intensities (value / 10) row-major in a rows x columns matrix.

    By default only whole rows are kept, so a 30-day series gives a 4 x 7
    grid of the 28 most recent days. Cells past the end of the series are 0.
    """

    if columns < 1:
        raise ValueError("columns must be at least 1")
    if rows is None:
        rows = len(series) // columns

    cells = np.zeros(rows * columns, dtype=float)
    values = np.asarray([point.value for point in series[: rows * columns]], dtype=float) / 10.0
    cells[: len(values)] = values
    return cells.reshape(rows, columns)
