# wizard/session.py — binds the pure state machine to st.session_state
from __future__ import annotations

import streamlit as st

from .constants import WKEY
from .render.picker import clear_pickers
from .state import Event, Reset, WizardState, transition


def init_state() -> None:
    if WKEY not in st.session_state:
        st.session_state[WKEY] = WizardState()


def get_state() -> WizardState:
    init_state()
    return st.session_state[WKEY]


def dispatch(event: Event) -> None:
    """Widget callback: advance the wizard. Streamlit reruns the script afterwards."""
    st.session_state[WKEY] = transition(get_state(), event)
    if isinstance(event, Reset):
        clear_pickers()
