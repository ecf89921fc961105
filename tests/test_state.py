"""
Unit tests for the wizard state machine.
"""

import logging

import pytest

from wizard.state import (
    Answers,
    Back,
    ChooseFeb1,
    ChooseFeb8Other,
    ChooseFeb8Same,
    Feb1Location,
    Feb8Location,
    Reset,
    SelectVotingProvince,
    Step,
    WizardState,
    candidate_provinces,
    progress_steps,
    transition,
)


class TestForwardFlow:
    """Test the happy-path transitions."""

    def test_initial_state(self):
        """A new wizard asks for the registered province with no answers."""
        state = WizardState()
        assert state.step is Step.VOTING_PROVINCE
        assert state.answers.is_empty()

    def test_select_voting_province(self, run):
        """Choosing the registered province moves to the 8 Feb question."""
        state = run(SelectVotingProvince("เชียงใหม่"))
        assert state.step is Step.FEB8_LOCATION
        assert state.answers.voting_province == "เชียงใหม่"
        assert state.answers.feb8_location is None

    def test_feb8_same_goes_to_results(self, run):
        """Staying home on 8 Feb skips the 1 Feb question."""
        state = run(SelectVotingProvince("เชียงใหม่"), ChooseFeb8Same())
        assert state.step is Step.RESULTS
        assert state.answers.feb8_location is Feb8Location.SAME
        assert state.answers.feb8_province == "เชียงใหม่"
        assert state.answers.feb1_location is None
        assert state.answers.feb1_province is None

    def test_feb8_other_asks_feb1(self, run):
        """Being away on 8 Feb leads to the early-voting question."""
        state = run(SelectVotingProvince("เชียงใหม่"), ChooseFeb8Other("ภูเก็ต"))
        assert state.step is Step.FEB1_LOCATION
        assert state.answers.feb8_location is Feb8Location.OTHER
        assert state.answers.feb8_province == "ภูเก็ต"

    @pytest.mark.parametrize("event,expected", [
        (ChooseFeb1(Feb1Location.SAME_AS_VOTING), "เชียงใหม่"),
        (ChooseFeb1(Feb1Location.SAME_AS_FEB8), "ภูเก็ต"),
        (ChooseFeb1(Feb1Location.OTHER, "ตราด"), "ตราด"),
    ])
    def test_feb1_choices_resolve_province(self, run, event, expected):
        """Each 1 Feb choice resolves to the matching province."""
        state = run(SelectVotingProvince("เชียงใหม่"), ChooseFeb8Other("ภูเก็ต"), event)
        assert state.step is Step.RESULTS
        assert state.answers.feb1_location is event.location
        assert state.answers.feb1_province == expected

    def test_transition_does_not_mutate_input(self, run):
        """States are immutable; transition returns a new one."""
        start = WizardState()
        after = transition(start, SelectVotingProvince("เชียงใหม่"))
        assert start == WizardState()
        assert after is not start


class TestBack:
    """Test the Back event."""

    def test_back_on_first_step_is_noop(self):
        """There is nothing before the first question."""
        assert transition(WizardState(), Back()) == WizardState()

    def test_back_from_feb8_keeps_answer(self, run):
        """Going back re-asks the step without clearing the answer."""
        state = run(SelectVotingProvince("เชียงใหม่"), Back())
        assert state.step is Step.VOTING_PROVINCE
        assert state.answers.voting_province == "เชียงใหม่"

    def test_back_from_feb1(self, run):
        """1 Feb goes back to 8 Feb."""
        state = run(SelectVotingProvince("เชียงใหม่"), ChooseFeb8Other("ภูเก็ต"), Back())
        assert state.step is Step.FEB8_LOCATION
        assert state.answers.feb8_province == "ภูเก็ต"

    def test_back_from_results_same_path(self, run):
        """Results go back to 8 Feb when the voter stays home."""
        state = run(SelectVotingProvince("เชียงใหม่"), ChooseFeb8Same(), Back())
        assert state.step is Step.FEB8_LOCATION

    def test_back_from_results_other_path(self, run):
        """Results go back to 1 Feb when the voter is away on 8 Feb."""
        state = run(
            SelectVotingProvince("เชียงใหม่"),
            ChooseFeb8Other("ภูเก็ต"),
            ChooseFeb1(Feb1Location.SAME_AS_FEB8),
            Back(),
        )
        assert state.step is Step.FEB1_LOCATION
        assert state.answers.feb1_province == "ภูเก็ต"

    def test_switch_to_same_after_back_clears_feb1(self, run):
        """Re-answering 8 Feb with 'same' drops the stale 1 Feb answers."""
        state = run(
            SelectVotingProvince("เชียงใหม่"),
            ChooseFeb8Other("ภูเก็ต"),
            ChooseFeb1(Feb1Location.OTHER, "ตราด"),
            Back(),
            Back(),
            ChooseFeb8Same(),
        )
        assert state.step is Step.RESULTS
        assert state.answers == Answers(
            voting_province="เชียงใหม่",
            feb8_location=Feb8Location.SAME,
            feb8_province="เชียงใหม่",
        )


class TestReset:
    """Test the Reset event."""

    @pytest.mark.parametrize("events", [
        (),
        (SelectVotingProvince("เชียงใหม่"),),
        (SelectVotingProvince("เชียงใหม่"), ChooseFeb8Same()),
        (SelectVotingProvince("เชียงใหม่"), ChooseFeb8Other("ภูเก็ต"), ChooseFeb1(Feb1Location.SAME_AS_VOTING)),
        (SelectVotingProvince("เชียงใหม่"), ChooseFeb8Other("ภูเก็ต"), Back(), Back()),
    ])
    def test_reset_returns_to_start(self, run, events):
        """Reset always returns an empty wizard on the first step."""
        state = run(*events, Reset())
        assert state == WizardState()
        assert state.step is Step.VOTING_PROVINCE
        assert all(v is None for v in vars(state.answers).values())


class TestIgnoredEvents:
    """Events that do not belong to the current step leave the state alone."""

    def test_feb8_event_on_first_step(self, caplog):
        """Answering 8 Feb before the registered province is ignored."""
        with caplog.at_level(logging.WARNING, logger="wizard.state"):
            state = transition(WizardState(), ChooseFeb8Same())
        assert state == WizardState()
        assert "Ignoring ChooseFeb8Same" in caplog.text

    def test_feb1_other_without_province(self, run):
        """'Other' on 1 Feb needs a province."""
        before = run(SelectVotingProvince("เชียงใหม่"), ChooseFeb8Other("ภูเก็ต"))
        assert transition(before, ChooseFeb1(Feb1Location.OTHER)) == before

    def test_select_voting_province_twice(self, run):
        """The registered province cannot be changed from a later step."""
        before = run(SelectVotingProvince("เชียงใหม่"))
        assert transition(before, SelectVotingProvince("ภูเก็ต")) == before


class TestDerivedViews:
    """Progress dots and picker candidates."""

    def test_progress_first_step(self):
        """The 1 Feb dot is hidden until the voter says they are away."""
        dots = progress_steps(WizardState())
        assert [d.step for d in dots] == [Step.VOTING_PROVINCE, Step.FEB8_LOCATION]
        assert dots[0].active and not dots[0].past
        assert not dots[1].active

    def test_progress_feb1_step(self, run):
        """All three dots show on the away path with earlier ones marked past."""
        dots = progress_steps(run(SelectVotingProvince("เชียงใหม่"), ChooseFeb8Other("ภูเก็ต")))
        assert [d.step for d in dots] == [Step.VOTING_PROVINCE, Step.FEB8_LOCATION, Step.FEB1_LOCATION]
        assert [d.past for d in dots] == [True, True, False]
        assert dots[2].active

    def test_no_progress_on_results(self, run):
        assert progress_steps(run(SelectVotingProvince("เชียงใหม่"), ChooseFeb8Same())) == []

    def test_candidates_exclude_chosen_provinces(self, run, small_catalog):
        """Later pickers do not offer provinces already chosen."""
        s1 = WizardState()
        s2 = run(SelectVotingProvince("เชียงใหม่"))
        s3 = run(SelectVotingProvince("เชียงใหม่"), ChooseFeb8Other("ภูเก็ต"))
        assert [p.name for p in candidate_provinces(s1, small_catalog)] == small_catalog.names()
        assert [p.name for p in candidate_provinces(s2, small_catalog)] == ["เชียงราย", "ตราด", "ภูเก็ต"]
        assert [p.name for p in candidate_provinces(s3, small_catalog)] == ["เชียงราย", "ตราด"]
