# wizard/steps/step_feb1.py — Step 3: where will you be on 1 Feb (early voting)?
import streamlit as st

from utils.metadata_loader import ProvinceCatalog

from ..constants import (
    OTHER_PROVINCE_LABEL,
    PICKER_OTHER_PLACEHOLDER,
    Q_FEB1_HINT,
    Q_FEB1_LOCATION,
    SAME_AS_FEB8_HINT,
    SAME_AS_VOTING_HINT,
)
from ..render import layout
from ..render.picker import province_picker
from ..session import dispatch
from ..state import ChooseFeb1, Feb1Location, WizardState, candidate_provinces


def render(state: WizardState, catalog: ProvinceCatalog) -> None:
    a = state.answers
    layout.back_button("feb1")
    layout.question(Q_FEB1_LOCATION, hint=Q_FEB1_HINT)

    st.button(f"อยู่ที่{a.voting_province}", key="feb1_same_voting", icon=":material/location_on:",
              use_container_width=True, on_click=dispatch, args=(ChooseFeb1(Feb1Location.SAME_AS_VOTING),))
    st.caption(SAME_AS_VOTING_HINT)

    st.button(f"อยู่ที่{a.feb8_province}", key="feb1_same_feb8", icon=":material/location_on:",
              use_container_width=True, on_click=dispatch, args=(ChooseFeb1(Feb1Location.SAME_AS_FEB8),))
    st.caption(SAME_AS_FEB8_HINT)

    layout.or_divider()
    st.markdown(f"**:material/directions_car: {OTHER_PROVINCE_LABEL}**")
    province_picker(
        "feb1_province",
        candidate_provinces(state, catalog),
        on_select=lambda name: dispatch(ChooseFeb1(Feb1Location.OTHER, name)),
        selected=a.feb1_province,
        placeholder=PICKER_OTHER_PLACEHOLDER,
    )
