"""Streamlit demo UI for worklog-engine."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from worklog_engine.auth import MOCK_USERS, MockAuthProvider
from worklog_engine.config import load_settings
from worklog_engine.dashboard import build_report
from worklog_engine.errors import WorkLogError
from worklog_engine.fixtures import seed_store
from worklog_engine.heatmap import productivity_grid
from worklog_engine.queries import (
    LOG_VIEWS,
    filter_logs,
    logs_for_user,
    member_name,
    search_logs,
    sort_by_recency,
    team_logs_for_manager,
    team_members_for_manager,
)
from worklog_engine.review import submit_review
from worklog_engine.schema import ProductivityPoint, User
from worklog_engine.store import InMemoryStore


def build_dashboard(
    store: InMemoryStore,
    user: User,
    today: Optional[date] = None,
    view: str = "all",
    search: str = "",
    window_days: int = 30,
) -> dict[str, Any]:
    """Collect everything the dashboard renders into one payload."""

    report = build_report(store, user, window_days=window_days, today=today)
    series = [ProductivityPoint(**point) for point in report["productivity"]]
    report["heatmap"] = productivity_grid(series).tolist()

    if user.is_manager:
        members = team_members_for_manager(store, user.id)
        logs = search_logs(filter_logs(team_logs_for_manager(store, user.id), view), search, members)
        report["members"] = [{"id": m.id, "name": m.name, "team": m.team} for m in members]
        report["team_logs"] = [
            {"id": log.id, "owner": member_name(members, log.user_id), "date": log.date, "reviewed": log.reviewed}
            for log in sort_by_recency(logs)
        ]
    else:
        logs = filter_logs(logs_for_user(store, user.id), view)
        report["my_logs"] = [{"id": log.id, "date": log.date, "reviewed": log.reviewed} for log in sort_by_recency(logs)]
    return report


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Work Log Demo", layout="wide")
    st.title("Work Log — Streamlit Demo")

    settings = load_settings()
    if "store" not in st.session_state:
        st.session_state["store"] = seed_store(settings.duplicate_policy)
    store = st.session_state["store"]

    with st.sidebar:
        st.header("Controls")
        email = st.selectbox("Sign in as", options=list(MOCK_USERS))
        today = st.date_input("Today", value=date(2025, 4, 19))
        view = st.selectbox("Log view", options=list(LOG_VIEWS), index=0)
        search = st.text_input("Search", value="")

    auth = MockAuthProvider()
    try:
        user = auth.login(email, "demo")
        result = build_dashboard(store, user, today=today, view=view, search=search, window_days=settings.heatmap_days)
    except (WorkLogError, ValueError) as exc:
        st.error(f"Input error: {exc}")
        return

    st.subheader("A) Latest Day")
    latest = result["latest"]
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Tasks", f"{latest['completed']}/{latest['total']}")
    c2.metric("Completion", f"{latest['rate']}%")
    c3.metric("Time", latest["duration"])
    c4.metric("Mood", latest["mood"])
    if latest["blockers"]:
        st.warning(f"Blocker: {latest['blockers']}")

    st.subheader("B) Productivity Heatmap")
    st.dataframe(result["heatmap"])

    st.subheader("C) Recent Logs")
    st.table(result["recent_logs"] or [{"info": "No logs yet"}])

    if user.is_manager:
        st.subheader("D) Team")
        st.table([result["team"]])
        st.table(result["team_logs"] or [{"info": "No logs match"}])

        pending = [row["id"] for row in result["pending_reviews"]]
        if pending:
            st.subheader("E) Review")
            log_id = st.selectbox("Log", options=pending)
            feedback = st.text_area("Feedback")
            if st.button("Submit review", type="primary"):
                try:
                    submit_review(store, log_id, user, feedback)
                    st.success("Review submitted")
                except (WorkLogError, ValueError) as exc:
                    st.error(str(exc))


if __name__ == "__main__":
    main()
