# wizard/render/picker.py
"""
Searchable single-select province list.

PickerState holds the query and open/closed flag and is pure, so it can be
tested without a running app. province_picker() binds it to Streamlit widgets
and reports each selection to the caller exactly once through `on_select`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Sequence, Tuple

import streamlit as st

from utils.metadata_loader import Province
from utils.province_search import filter_provinces

from ..constants import PICKER_CLOSE, PICKER_NOT_FOUND, PICKER_PLACEHOLDER, PICKER_SHOW_ALL

logger = logging.getLogger(__name__)

K_PREFIX = "picker__"
LIST_HEIGHT = 288


@dataclass(frozen=True)
class PickerState:
    query: str = ""
    is_open: bool = False

    def type_query(self, text: str) -> "PickerState":
        return PickerState(query=text or "", is_open=True)

    def open(self) -> "PickerState":
        return replace(self, is_open=True)

    def close(self) -> "PickerState":
        """Dismiss the list without choosing (click outside)."""
        return replace(self, is_open=False)

    def select(self, province: str) -> Tuple["PickerState", str]:
        """Choosing clears the query and closes the list."""
        return PickerState(), province

    def visible(self, provinces: Sequence[Province]) -> List[Province]:
        if not self.is_open:
            return []
        return filter_provinces(provinces, self.query)


def _keys(key: str) -> Tuple[str, str]:
    return f"{K_PREFIX}{key}__state", f"{K_PREFIX}{key}__query"


def clear_pickers() -> None:
    """Drop every picker's query/open flag (used on wizard reset)."""
    for k in list(st.session_state.keys()):
        if str(k).startswith(K_PREFIX):
            st.session_state.pop(k, None)


def province_picker(
    key: str,
    provinces: Sequence[Province],
    on_select: Callable[[str], None],
    selected: Optional[str] = None,
    placeholder: str = PICKER_PLACEHOLDER,
) -> None:
    skey, qkey = _keys(key)
    st.session_state.setdefault(skey, PickerState())
    st.session_state.setdefault(qkey, "")

    def _on_query():
        st.session_state[skey] = st.session_state[skey].type_query(st.session_state[qkey])

    def _on_open():
        st.session_state[skey] = st.session_state[skey].open()

    def _on_close():
        st.session_state[skey] = st.session_state[skey].close()

    def _on_choose(name: str):
        new_state, chosen = st.session_state[skey].select(name)
        st.session_state[skey] = new_state
        st.session_state[qkey] = ""
        logger.debug("Picker %s selected %s", key, chosen)
        on_select(chosen)

    st.text_input(
        placeholder,
        key=qkey,
        placeholder=placeholder,
        label_visibility="collapsed",
        on_change=_on_query,
    )

    pstate: PickerState = st.session_state[skey]
    if not pstate.is_open:
        st.button(PICKER_SHOW_ALL, key=f"{K_PREFIX}{key}__open", icon=":material/search:", on_click=_on_open)
        return

    hits = pstate.visible(provinces)
    with st.container(height=LIST_HEIGHT):
        if not hits:
            st.markdown(f"<div class='vote-hint' style='text-align:center;'>{PICKER_NOT_FOUND}</div>", unsafe_allow_html=True)
        for p in hits:
            st.button(
                p.name,
                key=f"{K_PREFIX}{key}__opt__{p.name}",
                type=("primary" if p.name == selected else "secondary"),
                use_container_width=True,
                on_click=_on_choose,
                args=(p.name,),
            )
    st.button(PICKER_CLOSE, key=f"{K_PREFIX}{key}__close", icon=":material/close:", on_click=_on_close)
