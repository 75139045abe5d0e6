import json
from datetime import date

import pytest

from worklog_engine.adapters.csv_adapter import parse as parse_csv
from worklog_engine.adapters.json_adapter import dump as dump_json
from worklog_engine.adapters.json_adapter import parse as parse_json
from worklog_engine.fixtures import SEED_LOGS
from worklog_engine.heatmap import productivity_series
from worklog_engine.store import InMemoryStore


def test_csv_parse_success(tmp_path):
    path = tmp_path / "team.csv"
    path.write_text(
        "id,name,email,role,team,manager_id\n"
        "mgr-1,Jane Manager,jane@example.com,manager,,\n"
        "dev-1,John Developer,john@example.com,developer,frontend,mgr-1\n",
        encoding="utf-8",
    )
    members = parse_csv(str(path))
    assert len(members) == 2
    assert members[0].manager_id is None
    assert members[0].team is None
    assert members[1].manager_id == "mgr-1"


def test_csv_parse_invalid_role(tmp_path):
    path = tmp_path / "team.csv"
    path.write_text("id,name,email,role\ndev-1,John,john@example.com,intern\n", encoding="utf-8")
    with pytest.raises(ValueError):
        parse_csv(str(path))


def test_csv_parse_missing_field(tmp_path):
    path = tmp_path / "team.csv"
    path.write_text("id,name,email,role\ndev-1,,john@example.com,developer\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Row 2"):
        parse_csv(str(path))


def test_csv_parse_empty_file(tmp_path):
    path = tmp_path / "team.csv"
    path.write_text("", encoding="utf-8")
    assert parse_csv(str(path)) == []


def test_json_parse_success(tmp_path):
    path = tmp_path / "logs.json"
    payload = [
        {
            "id": "log-1",
            "userId": "dev-1",
            "date": "2025-04-19",
            "tasks": [{"id": "t1", "description": "Login flow", "timeSpent": 120, "completed": True}],
            "mood": "productive",
            "blockers": None,
            "reviewed": False,
            "managerComments": None,
        },
        {"id": "log-2", "userId": "dev-1", "date": "2025-04-18", "mood": "neutral"},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    logs = parse_json(str(path))
    assert len(logs) == 2
    assert logs[0].tasks[0].time_spent == 120
    assert logs[0].blockers is None
    assert logs[1].tasks == ()


@pytest.mark.parametrize(
    "item",
    [
        {"id": "a", "userId": "u", "date": "19/04/2025", "mood": "neutral"},
        {"id": "a", "userId": "u", "date": "2025-04-19", "mood": "sleepy"},
        {"id": "a", "date": "2025-04-19", "mood": "neutral"},
        {"id": "a", "userId": "u", "date": "2025-04-19", "mood": "neutral", "tasks": {"id": "t"}},
        {"id": "a", "userId": "u", "date": "2025-04-19", "mood": "neutral", "tasks": [{"id": "t", "timeSpent": "x"}]},
        {"id": "a", "userId": "u", "date": "20250419", "mood": "neutral"},
        {"id": "a", "userId": "u", "date": "2025-W16-6", "mood": "neutral"},
        {"id": "a", "userId": "u", "date": "2025-04-19", "mood": "neutral", "tasks": [{"id": "t", "timeSpent": 5.9}]},
        {"id": "a", "userId": "u", "date": "2025-04-19", "mood": "neutral", "tasks": [{"id": "t", "completed": "false"}]},
    ],
)
def test_json_parse_malformed(tmp_path, item):
    path = tmp_path / "logs.json"
    path.write_text(json.dumps([item]), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_payload_must_be_list(tmp_path):
    path = tmp_path / "logs.json"
    path.write_text(json.dumps({"logs": []}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_dump_is_readable_by_parse(tmp_path):
    path = tmp_path / "seed.json"
    dump_json(list(SEED_LOGS), str(path))
    assert parse_json(str(path)) == list(SEED_LOGS)


def test_json_parse_whole_float_minutes_and_missing_flag(tmp_path):
    path = tmp_path / "logs.json"
    item = {"id": "a", "userId": "u", "date": "2025-04-19", "mood": "neutral", "tasks": [{"id": "t", "timeSpent": 30.0}]}
    path.write_text(json.dumps([item]), encoding="utf-8")
    task = parse_json(str(path))[0].tasks[0]
    assert task.time_spent == 30
    assert task.completed is False


def test_json_dates_match_heatmap_days(tmp_path):
    path = tmp_path / "logs.json"
    item = {
        "id": "a",
        "userId": "u",
        "date": "2025-04-19",
        "mood": "neutral",
        "tasks": [{"id": "t", "timeSpent": 10, "completed": True}],
    }
    path.write_text(json.dumps([item]), encoding="utf-8")
    store = InMemoryStore(parse_json(str(path)))
    assert productivity_series(store, "u", 1, today=date(2025, 4, 19))[0].value == 10


def test_csv_parse_skips_blank_rows(tmp_path):
    path = tmp_path / "team.csv"
    path.write_text(
        "id,name,email,role,team,manager_id\n"
        "dev-1,John Developer,john@example.com,developer,frontend,mgr-1\n"
        ",,,,,\n"
        " , ,,,,\n",
        encoding="utf-8",
    )
    assert [member.id for member in parse_csv(str(path))] == ["dev-1"]
