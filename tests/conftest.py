"""
Pytest configuration and fixtures.
"""

import pytest

from utils.metadata_loader import PROVINCES_PATH, Province, ProvinceCatalog, build_catalog, load_provinces
from wizard.state import WizardState, transition


@pytest.fixture(scope="session")
def catalog():
    """The real province catalog shipped with the app."""
    return build_catalog(load_provinces(PROVINCES_PATH))


@pytest.fixture
def small_catalog():
    """Four provinces, one of them single-constituency."""
    return ProvinceCatalog([
        Province("เชียงใหม่", "Chiang Mai"),
        Province("เชียงราย", "Chiang Rai"),
        Province("ตราด", "Trat", single_constituency=True),
        Province("ภูเก็ต", "Phuket"),
    ])


@pytest.fixture
def run():
    """Apply a sequence of events to a fresh wizard."""
    def _run(*events, state=None):
        state = state or WizardState()
        for event in events:
            state = transition(state, event)
        return state
    return _run
