# wizard/steps/step_voting_province.py — Step 1: registered province
import streamlit as st

from utils.metadata_loader import ProvinceCatalog

from ..constants import ELIGIBILITY_CHECK_URL, ELIGIBILITY_LINK_TEXT, ELIGIBILITY_PROMPT, Q_VOTING_PROVINCE
from ..render import layout
from ..render.picker import province_picker
from ..session import dispatch
from ..state import SelectVotingProvince, WizardState, candidate_provinces


def render(state: WizardState, catalog: ProvinceCatalog) -> None:
    layout.question(Q_VOTING_PROVINCE)
    st.markdown(f"{ELIGIBILITY_PROMPT} [{ELIGIBILITY_LINK_TEXT}]({ELIGIBILITY_CHECK_URL})")
    province_picker(
        "voting_province",
        candidate_provinces(state, catalog),
        on_select=lambda name: dispatch(SelectVotingProvince(name)),
        selected=state.answers.voting_province,
    )
