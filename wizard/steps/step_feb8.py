# wizard/steps/step_feb8.py — Step 2: where will you be on 8 Feb?
import streamlit as st

from utils.metadata_loader import ProvinceCatalog

from ..constants import OTHER_PROVINCE_LABEL, PICKER_OTHER_PLACEHOLDER, Q_FEB8_LOCATION, SAME_AS_VOTING_HINT
from ..render import layout
from ..render.picker import province_picker
from ..session import dispatch
from ..state import ChooseFeb8Other, ChooseFeb8Same, WizardState, candidate_provinces


def render(state: WizardState, catalog: ProvinceCatalog) -> None:
    a = state.answers
    layout.back_button("feb8")
    layout.question(Q_FEB8_LOCATION)

    st.button(f"อยู่ที่{a.voting_province}", key="feb8_same", icon=":material/location_on:",
              use_container_width=True, on_click=dispatch, args=(ChooseFeb8Same(),))
    st.caption(SAME_AS_VOTING_HINT)

    layout.or_divider()
    st.markdown(f"**:material/directions_car: {OTHER_PROVINCE_LABEL}**")
    province_picker(
        "feb8_province",
        candidate_provinces(state, catalog),
        on_select=lambda name: dispatch(ChooseFeb8Other(name)),
        selected=a.feb8_province,
        placeholder=PICKER_OTHER_PLACEHOLDER,
    )
