# app/state.py
"""Per-session binding of the dashboard store."""

from __future__ import annotations

import streamlit as st

from core.store import DashboardState

STATE_KEY = "dashboard_state"


def get_dashboard_state() -> DashboardState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DashboardState.seeded()
    return st.session_state[STATE_KEY]
