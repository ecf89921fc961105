import logging

import streamlit as st

from wizard.constants import PAGE_ICON, PAGE_TITLE

st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout="wide")

from wizard.main import get_log_level, run_wizard  # noqa: E402

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def main():
    run_wizard()


if __name__ == "__main__":
    main()
