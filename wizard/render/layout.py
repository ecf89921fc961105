# wizard/render/layout.py
"""
Layout helpers for the wizard:
- CSS injection and centered page container
- Header, progress dots, back button, footer
"""

from __future__ import annotations
from typing import List

import streamlit as st

from ..constants import (
    AUTHOR_URL,
    BACK_LABEL,
    BASE_CSS,
    CENTER_COLUMNS,
    OR_LABEL,
    PAGE_TITLE,
    SUBTITLE,
)
from ..session import dispatch
from ..state import Back, WizardState, progress_steps

# ---------------------------------------------------------------------------
# CSS / Centering
# ---------------------------------------------------------------------------
def inject_base_css() -> None:
    st.markdown(BASE_CSS, unsafe_allow_html=True)

def centered_page(columns: List[int] | None = None, *, with_css: bool = True):
    """
    Returns a (left, center, right) 3-column layout.
    Use the 'center' column as the primary content area to keep widths consistent.
    """
    if with_css:
        inject_base_css()
    left, center, right = st.columns(columns or CENTER_COLUMNS)
    return left, center, right

# ---------------------------------------------------------------------------
# Header elements
# ---------------------------------------------------------------------------
def header() -> None:
    st.markdown(f"<div class='vote-header'>🗳️ {PAGE_TITLE}</div>", unsafe_allow_html=True)
    st.markdown(f"<div class='vote-subtitle'>{SUBTITLE}</div>", unsafe_allow_html=True)

def progress_dots(state: WizardState) -> None:
    dots = progress_steps(state)
    if not dots:
        return
    html = "".join(
        f"<div class='vote-dot{' active' if d.active else (' past' if d.past else '')}'></div>"
        for d in dots
    )
    st.markdown(f"<div class='vote-dots'>{html}</div>", unsafe_allow_html=True)

def question(text: str, hint: str | None = None) -> None:
    st.markdown(f"<div class='vote-question'>{text}</div>", unsafe_allow_html=True)
    if hint:
        st.markdown(f"<div class='vote-hint'>{hint}</div>", unsafe_allow_html=True)

def or_divider() -> None:
    st.markdown(f"<div class='vote-or'>{OR_LABEL}</div>", unsafe_allow_html=True)

def back_button(step_key: str) -> None:
    st.button(BACK_LABEL, key=f"back_{step_key}", icon=":material/arrow_back:",
              on_click=dispatch, args=(Back(),))

def footer() -> None:
    st.markdown(
        f"<div class='vote-footer'>Made with ❤️ by <a href='{AUTHOR_URL}' target='_blank' "
        "rel='noopener noreferrer'>@PanJ</a></div>",
        unsafe_allow_html=True,
    )
