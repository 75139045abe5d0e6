from worklog_engine.fixtures import SEED_LOGS
from worklog_engine.metrics import (
    completion_stats,
    format_duration,
    productivity_value,
    round_half_up,
    time_spent,
)
from worklog_engine.schema import Task, WorkLog


def make_log(*flags, minutes=30):
    tasks = [Task(f"t{i}", f"task {i}", minutes, done) for i, done in enumerate(flags)]
    return WorkLog("log-x", "dev-1", "2025-04-19", tasks, "neutral")


def test_completion_stats_seed_logs():
    first, second, _ = SEED_LOGS
    stats = completion_stats(first)
    assert (stats.completed, stats.total, stats.rate) == (2, 3, 67)
    stats = completion_stats(second)
    assert (stats.completed, stats.total, stats.rate) == (3, 3, 100)


def test_completion_stats_empty_log_has_zero_rate():
    stats = completion_stats(make_log())
    assert (stats.completed, stats.total, stats.rate) == (0, 0, 0)


def test_completed_never_exceeds_total():
    for flags in [(True,), (False, False), (True, False, True, True), ()]:
        stats = completion_stats(make_log(*flags))
        assert stats.completed <= stats.total
        assert 0 <= stats.rate <= 100


def test_round_half_up():
    assert round_half_up(1, 2) == 1
    assert round_half_up(5, 2) == 3
    assert round_half_up(200, 3) == 67
    assert round_half_up(100, 3) == 33
    assert round_half_up(0, 7) == 0


def test_productivity_value_rounds_halves_up():
    assert productivity_value(make_log(True, False)) == 5
    assert productivity_value(make_log(True, True, True, False)) == 8
    assert productivity_value(make_log(True, False, False, False)) == 3
    assert productivity_value(make_log()) == 0


def test_time_spent_sums_tasks():
    assert time_spent(SEED_LOGS[0]) == 255
    assert time_spent(make_log(True, False, minutes=45)) == 90
    assert time_spent(make_log()) == 0


def test_format_duration():
    assert format_duration(0) == "0m"
    assert format_duration(45) == "45m"
    assert format_duration(59) == "59m"
    assert format_duration(60) == "1h"
    assert format_duration(90) == "1h 30m"
    assert format_duration(120) == "2h"
    assert format_duration(255) == "4h 15m"
