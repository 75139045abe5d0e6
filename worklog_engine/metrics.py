"""Per-log completion and time metrics."""

from __future__ import annotations

from dataclasses import dataclass

from worklog_engine.schema import WorkLog


@dataclass(frozen=True)
class CompletionStats:
    completed: int
    total: int
    rate: int


def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest int, halves going up.

    Works on non-negative integers only, so no float rounding is involved.
    """

    return (2 * numerator + denominator) // (2 * denominator)


def completion_stats(log: WorkLog) -> CompletionStats:
    """Count completed tasks and the 0-100 completion rate."""

    total = len(log.tasks)
    completed = sum(1 for task in log.tasks if task.completed)
    rate = round_half_up(100 * completed, total) if total else 0
    return CompletionStats(completed=completed, total=total, rate=rate)


def time_spent(log: WorkLog) -> int:
    """Total minutes across all tasks of the log."""

    return sum(task.time_spent for task in log.tasks)


def productivity_value(log: WorkLog) -> int:
    """Heatmap value 0-10 from the share of completed tasks."""

    stats = completion_stats(log)
    if not stats.total:
        return 0
    return round_half_up(10 * stats.completed, stats.total)


def format_duration(minutes: int) -> str:
    """Render minutes as ``45m``, ``1h 30m`` or ``2h``."""

    if minutes < 60:
        return f"{minutes}m"

    hours, mins = divmod(minutes, 60)
    if mins:
        return f"{hours}h {mins}m"
    return f"{hours}h"
