# wizard/main.py — voting planner: 3 question steps + results page
from __future__ import annotations

import logging

import streamlit as st

from utils.metadata_loader import PROVINCES_PATH, get_catalog

from .constants import CENTER_COLUMNS, DEFAULT_LOG_LEVEL
from .render import layout
from .session import get_state, init_state
from .state import Step
from .steps import results, step_feb1, step_feb8, step_voting_province

logger = logging.getLogger(__name__)

_PAGES = {
    Step.VOTING_PROVINCE: step_voting_province.render,
    Step.FEB8_LOCATION: step_feb8.render,
    Step.FEB1_LOCATION: step_feb1.render,
    Step.RESULTS: results.render,
}


# ─────────────────────────────
# Settings (st.secrets, optional)
# ─────────────────────────────
def get_setting(name: str, default: str) -> str:
    try:
        value = st.secrets.get(name, default)
    except Exception:
        return default
    return str(value).strip() or default

def get_log_level() -> str:
    return get_setting("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

def get_catalog_path() -> str:
    return get_setting("PROVINCE_CATALOG_PATH", PROVINCES_PATH)


# ─────────────────────────────
# Entry point
# ─────────────────────────────
def run_wizard():
    init_state()
    left, center, right = layout.centered_page(CENTER_COLUMNS)
    with center:
        layout.header()

        try:
            catalog = get_catalog(get_catalog_path())
        except (FileNotFoundError, RuntimeError, ValueError) as e:
            logger.error("Province catalog unavailable: %s", e)
            st.error(f"ไม่สามารถโหลดรายชื่อจังหวัดได้ ({type(e).__name__}: {e})")
            st.stop()

        state = get_state()
        layout.progress_dots(state)
        with st.container(border=True):
            _PAGES[state.step](state, catalog)
        layout.footer()

if __name__ == "__main__":
    run_wizard()
