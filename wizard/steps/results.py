# wizard/steps/results.py — resolve the answers and render the checklist

import streamlit as st

from utils.metadata_loader import ProvinceCatalog

from ..constants import (
    COUNTDOWN_TICK_SECONDS,
    COUNTDOWN_UNITS,
    ELECTION_REG_BUTTON,
    ELECTION_REG_TEXT,
    ELECTION_REG_TITLE,
    ELECTION_REGISTRATION_URL,
    IMPORTANT_DATES,
    IMPORTANT_DATES_TITLE,
    LOCATION_HIDDEN,
    REFERENDUM_REG_PENDING,
    REFERENDUM_REG_TEXT,
    REFERENDUM_REG_TITLE,
    REGISTRATION_DEADLINE,
    REGISTRATION_EXPIRED,
    RESET_LABEL,
    RESULTS_HINT,
    RESULTS_PROVINCE_LABEL,
    RESULTS_TITLE,
    TWO_BALLOTS_TEXT,
    TWO_BALLOTS_TITLE,
)
from ..countdown import time_remaining
from ..formatters import countdown_parts, format_thai_date, registration_label
from ..render import layout
from ..resolver import ActionRecord, resolve
from ..session import dispatch
from ..state import Reset, WizardState


# Reruns on its own once per second; stops when the results page is left.
@st.fragment(run_every=COUNTDOWN_TICK_SECONDS)
def _countdown() -> None:
    tr = time_remaining(REGISTRATION_DEADLINE)
    if tr.expired:
        st.markdown(f"<div class='vote-expired'>⏱️ {REGISTRATION_EXPIRED}</div>", unsafe_allow_html=True)
        return
    cells = "".join(f"<div><b>{v}</b> {u}</div>" for v, u in zip(countdown_parts(tr), COUNTDOWN_UNITS))
    st.markdown(f"<div class='vote-countdown'>{cells}</div>", unsafe_allow_html=True)


def _action_card(record: ActionRecord) -> None:
    location = record.location if record.location is not None else LOCATION_HIDDEN
    reg = registration_label(record)
    reg_html = f"<div class='vote-reg'>⚠️ {reg}</div>" if reg else ""
    st.markdown(
        f"<div class='vote-card'><h4>{record.title}</h4>"
        f"<div>📅 {format_thai_date(record.date)}</div>"
        f"<div>📍 {location}</div>{reg_html}</div>",
        unsafe_allow_html=True,
    )


def render(state: WizardState, catalog: ProvinceCatalog) -> None:
    res = resolve(state.answers, catalog)

    layout.back_button("results")
    st.markdown(f"### :material/checklist: {RESULTS_TITLE}")
    st.caption(RESULTS_HINT)

    st.markdown(
        f"<div class='vote-summary'><div class='vote-hint'>{RESULTS_PROVINCE_LABEL}</div>"
        f"<b>{state.answers.voting_province}</b></div>",
        unsafe_allow_html=True,
    )

    for record in res.actions:
        _action_card(record)

    if res.two_ballots_same_place:
        st.warning(f"**{TWO_BALLOTS_TITLE}** {TWO_BALLOTS_TEXT}", icon=":material/info:")

    advisory = res.early_vote_advisory
    if advisory:
        st.info(advisory, icon=":material/info:")

    if res.election_needs_registration:
        with st.container(border=True):
            st.markdown(f"#### :material/edit_note: {ELECTION_REG_TITLE}")
            st.write(ELECTION_REG_TEXT)
            _countdown()
            st.link_button(ELECTION_REG_BUTTON, ELECTION_REGISTRATION_URL, icon=":material/open_in_new:")

    if res.referendum_needs_registration:
        with st.container(border=True):
            st.markdown(f"#### :material/edit_note: {REFERENDUM_REG_TITLE}")
            st.write(REFERENDUM_REG_TEXT)
            _countdown()
            st.button(REFERENDUM_REG_PENDING, key="referendum_reg_pending", disabled=True,
                      icon=":material/hourglass_empty:")

    with st.container(border=True):
        st.markdown(f"#### :material/calendar_month: {IMPORTANT_DATES_TITLE}")
        for label, d in IMPORTANT_DATES:
            c1, c2 = st.columns([3, 1])
            c1.write(label)
            c2.markdown(f"**{format_thai_date(d, short=True)}**")

    st.button(RESET_LABEL, key="reset_wizard", icon=":material/refresh:", on_click=dispatch, args=(Reset(),))
