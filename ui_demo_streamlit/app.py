"""Streamlit demo UI for deadline-engine: the notification screen."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from deadline_engine.adapters import csv_adapter, json_adapter
from deadline_engine.config import configure_logging, load_config
from deadline_engine.feed import build_feed
from deadline_engine.messages import LOCALES
from deadline_engine.onboarding import AppStage, OnboardingFlow
from deadline_engine.reminders import ReminderOffsetSelector, options

DEMO_SNAPSHOT = "examples/sample_snapshot.json"


def _parse_snapshot_from_path(file_path: str):
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file):
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return _parse_snapshot_from_path(temp_path)


def _render_onboarding(st, flow: OnboardingFlow) -> bool:
    """Render the pre-main stages; returns True once the main screen is reached."""

    if flow.stage is AppStage.SPLASH:
        st.title("Loading…")
        if st.button("Continue"):
            flow.finish_loading()
            st.rerun()
        return False

    if flow.stage is AppStage.LOGIN:
        st.title("Log in")
        uploaded = st.file_uploader("Task snapshot", type=["csv", "json"])
        use_demo = st.checkbox("Use demo snapshot", value=True)
        if st.button("Log in", type="primary"):
            try:
                if use_demo:
                    snapshot = _parse_snapshot_from_path(DEMO_SNAPSHOT)
                elif uploaded is not None:
                    snapshot = _parse_uploaded(uploaded)
                else:
                    st.error("Please upload a CSV/JSON snapshot or enable the demo snapshot.")
                    return False
            except ValueError as exc:
                st.error(f"Input error: {exc}")
                return False
            flow.login_succeeded(snapshot.assignments, snapshot.lecture_groups)
            st.rerun()
        return False

    if flow.stage is AppStage.MANUAL:
        st.title("How it works")
        st.write("Upcoming lectures and assignments are listed soonest first.")
        st.write("Pick how early you want to be reminded from the sidebar.")
        if st.button("Got it"):
            flow.complete_manual()
            st.rerun()
        return False

    return True


def main() -> None:
    import streamlit as st

    config = load_config()
    configure_logging(config.log_level)

    st.set_page_config(page_title="Deadline Notifications", layout="centered")

    flow: OnboardingFlow = st.session_state.setdefault("flow", OnboardingFlow())
    selector: ReminderOffsetSelector = st.session_state.setdefault(
        "selector", ReminderOffsetSelector(config.default_offset)
    )

    if not _render_onboarding(st, flow):
        return

    with st.sidebar:
        st.header("Reminder")
        locale = st.selectbox("Language", options=list(LOCALES), index=list(LOCALES).index(config.locale))
        choices = options(locale)
        labels = [label for _, label in choices]
        current_index = [offset for offset, _ in choices].index(selector.current())
        picked = st.radio("Remind me", options=labels, index=current_index)
        selector.select(picked)
        if st.button("Log out"):
            flow.logout()
            st.rerun()

    feed = build_feed(
        flow.lecture_groups,
        flow.assignments,
        offset=selector.current(),
        locale=locale,
    )

    st.title("Notifications")
    if feed.empty_message:
        st.info(feed.empty_message)
    for entry in feed.entries:
        with st.container(border=True):
            st.markdown(f"**{entry.title}**")
            st.write(entry.details)
            if entry.reminder_due:
                st.caption(f"Reminder window open ({selector.current().value})")

    with st.expander("Summary"):
        st.code(json.dumps(feed.summary, indent=2), language="json")


if __name__ == "__main__":
    main()
