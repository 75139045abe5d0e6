"""CSV adapter for the team roster."""

from __future__ import annotations

import csv

from worklog_engine.schema import ROLES, TeamMember

_REQUIRED_FIELDS = ("id", "name", "email", "role")


def _parse_row(row: dict, row_number: int) -> TeamMember:
    missing = [field for field in _REQUIRED_FIELDS if not (row.get(field) or "").strip()]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    role = row["role"].strip()
    if role not in ROLES:
        raise ValueError(f"Row {row_number}: invalid role '{role}'")

    team_raw = row.get("team")
    manager_raw = row.get("manager_id")

    return TeamMember(
        id=row["id"].strip(),
        name=row["name"].strip(),
        email=row["email"].strip(),
        role=role,
        team=team_raw.strip() if team_raw and team_raw.strip() else None,
        manager_id=manager_raw.strip() if manager_raw and manager_raw.strip() else None,
    )


def parse(file_path: str) -> list[TeamMember]:
    """Parse a roster CSV into team members."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))

    # spreadsheet exports often end with rows of empty cells
    return [
        _parse_row(row, row_number)
        for row_number, row in enumerate(rows, start=2)
        if any(isinstance(value, str) and value.strip() for value in row.values())
    ]
