"""Tests for the accepting states validator."""

from dfalang.schema.models import RawAutomaton
from dfalang.validators.accepting_states import check_accepting_states


class TestAcceptingStates:
    def test_valid_accepting_states(self, two_state_raw):
        assert check_accepting_states(two_state_raw).is_valid

    def test_no_accepting_states(self):
        raw = RawAutomaton(states=["q1"], starting_state="q1")
        assert check_accepting_states(raw).is_valid

    def test_reports_every_invalid_state(self):
        raw = RawAutomaton(
            states=["q1", "q2"],
            starting_state="q1",
            accepting_states=["q3", "q2", "q4"],
        )

        result = check_accepting_states(raw)

        assert len(result.errors) == 2
        assert {e.state for e in result.errors} == {"q3", "q4"}
        assert "Accepting State q3 is not a valid state." in result.report
        assert "Accepting State q4 is not a valid state." in result.report
