# wizard/state.py — wizard controller as an explicit state machine
"""
Pure state machine for the voting planner.

    VOTING_PROVINCE → FEB8_LOCATION → (FEB1_LOCATION →) RESULTS

`transition(state, event)` never touches Streamlit; the UI stores the returned
WizardState in st.session_state and dispatches events from widget callbacks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Union

from utils.metadata_loader import Province, ProvinceCatalog

logger = logging.getLogger(__name__)


class Step(str, Enum):
    VOTING_PROVINCE = "voting-province"
    FEB8_LOCATION = "feb8-location"
    FEB1_LOCATION = "feb1-location"
    RESULTS = "results"


class Feb8Location(str, Enum):
    SAME = "same"
    OTHER = "other"


class Feb1Location(str, Enum):
    SAME_AS_VOTING = "same-voting"
    SAME_AS_FEB8 = "same-feb8"
    OTHER = "other"


@dataclass(frozen=True)
class Answers:
    voting_province: Optional[str] = None
    feb8_location: Optional[Feb8Location] = None
    feb8_province: Optional[str] = None
    feb1_location: Optional[Feb1Location] = None
    feb1_province: Optional[str] = None

    def is_empty(self) -> bool:
        return self == Answers()


@dataclass(frozen=True)
class WizardState:
    step: Step = Step.VOTING_PROVINCE
    answers: Answers = field(default_factory=Answers)


# ─────────────────────────────
# Events
# ─────────────────────────────
@dataclass(frozen=True)
class SelectVotingProvince:
    province: str


@dataclass(frozen=True)
class ChooseFeb8Same:
    pass


@dataclass(frozen=True)
class ChooseFeb8Other:
    province: str


@dataclass(frozen=True)
class ChooseFeb1:
    location: Feb1Location
    province: Optional[str] = None


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Reset:
    pass


Event = Union[SelectVotingProvince, ChooseFeb8Same, ChooseFeb8Other, ChooseFeb1, Back, Reset]


def _ignored(state: WizardState, event: Event, reason: str) -> WizardState:
    logger.warning("Ignoring %s at step %s: %s", type(event).__name__, state.step.value, reason)
    return state


def _back(state: WizardState) -> WizardState:
    if state.step is Step.FEB8_LOCATION:
        return replace(state, step=Step.VOTING_PROVINCE)
    if state.step is Step.FEB1_LOCATION:
        return replace(state, step=Step.FEB8_LOCATION)
    if state.step is Step.RESULTS:
        prev = Step.FEB8_LOCATION if state.answers.feb8_location is Feb8Location.SAME else Step.FEB1_LOCATION
        return replace(state, step=prev)
    return state


def transition(state: WizardState, event: Event) -> WizardState:
    """Apply one user event; events that do not belong to the current step leave the state as is."""
    if isinstance(event, Reset):
        logger.debug("Wizard reset from step %s", state.step.value)
        return WizardState()

    if isinstance(event, Back):
        new = _back(state)
        logger.debug("Back: %s → %s", state.step.value, new.step.value)
        return new

    a = state.answers

    if isinstance(event, SelectVotingProvince):
        if state.step is not Step.VOTING_PROVINCE:
            return _ignored(state, event, "voting province is asked on the first step only")
        if not event.province:
            return _ignored(state, event, "no province given")
        new = WizardState(step=Step.FEB8_LOCATION, answers=replace(a, voting_province=event.province))

    elif isinstance(event, ChooseFeb8Same):
        if state.step is not Step.FEB8_LOCATION:
            return _ignored(state, event, "not on the 8 Feb step")
        new = WizardState(
            step=Step.RESULTS,
            answers=replace(
                a,
                feb8_location=Feb8Location.SAME,
                feb8_province=a.voting_province,
                feb1_location=None,
                feb1_province=None,
            ),
        )

    elif isinstance(event, ChooseFeb8Other):
        if state.step is not Step.FEB8_LOCATION:
            return _ignored(state, event, "not on the 8 Feb step")
        if not event.province:
            return _ignored(state, event, "no province given")
        new = WizardState(
            step=Step.FEB1_LOCATION,
            answers=replace(a, feb8_location=Feb8Location.OTHER, feb8_province=event.province),
        )

    elif isinstance(event, ChooseFeb1):
        if state.step is not Step.FEB1_LOCATION:
            return _ignored(state, event, "not on the 1 Feb step")
        if event.location is Feb1Location.SAME_AS_VOTING:
            feb1_province = a.voting_province
        elif event.location is Feb1Location.SAME_AS_FEB8:
            feb1_province = a.feb8_province
        else:
            if not event.province:
                return _ignored(state, event, "no province given")
            feb1_province = event.province
        new = WizardState(
            step=Step.RESULTS,
            answers=replace(a, feb1_location=event.location, feb1_province=feb1_province),
        )

    else:
        return _ignored(state, event, "unknown event")

    logger.debug("%s: %s → %s", type(event).__name__, state.step.value, new.step.value)
    return new


# ─────────────────────────────
# Derived views used by the pages
# ─────────────────────────────
@dataclass(frozen=True)
class ProgressDot:
    step: Step
    active: bool
    past: bool


_QUESTION_STEPS = (Step.VOTING_PROVINCE, Step.FEB8_LOCATION, Step.FEB1_LOCATION)


def progress_steps(state: WizardState) -> List[ProgressDot]:
    """Progress dots for the question steps; the 1 Feb dot shows only on the 'other province' path."""
    if state.step is Step.RESULTS:
        return []
    idx = _QUESTION_STEPS.index(state.step)
    dots = []
    for i, s in enumerate(_QUESTION_STEPS):
        if s is Step.FEB1_LOCATION and state.answers.feb8_location is not Feb8Location.OTHER:
            continue
        dots.append(ProgressDot(step=s, active=(s is state.step), past=(i < idx)))
    return dots


def candidate_provinces(state: WizardState, catalog: ProvinceCatalog) -> List[Province]:
    """Picker candidates for the current step, without provinces already chosen earlier in the flow."""
    a = state.answers
    if state.step is Step.FEB8_LOCATION:
        return catalog.excluding(a.voting_province)
    if state.step is Step.FEB1_LOCATION:
        return catalog.excluding(a.voting_province, a.feb8_province)
    return list(catalog)
