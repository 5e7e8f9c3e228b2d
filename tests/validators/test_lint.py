"""Tests for warning-level declaration checks."""

from dfalang.schema.parser import parse_raw
from dfalang.validators.lint import (
    check_duplicates,
    check_empty_identifiers,
    check_redeclared_transitions,
)
from dfalang.validators.runner import build_automaton


class TestEmptyIdentifiers:
    def test_no_empty_identifiers(self, two_state_automaton):
        assert not check_empty_identifiers(two_state_automaton).issues

    def test_empty_state_and_symbol(self):
        automaton = build_automaton(
            parse_raw(
                "states = [, q1] alphabet = [] starting_state = q1 "
                "accepting_states = [q1] transitions = , = q1;"
            )
        )

        result = check_empty_identifiers(automaton)

        assert result.is_valid
        assert [w.code for w in result.warnings] == [
            "EMPTY_IDENTIFIER",
            "EMPTY_IDENTIFIER",
        ]


class TestDuplicates:
    def test_no_duplicates(self, two_state_automaton):
        assert not check_duplicates(two_state_automaton).issues

    def test_duplicate_state_and_symbol(self):
        automaton = build_automaton(
            parse_raw(
                "states = [q1, q1] alphabet = [a, b, a] starting_state = q1 "
                "accepting_states = [q1] transitions ="
            )
        )

        result = check_duplicates(automaton)

        codes = {w.code: w for w in result.warnings}
        assert codes["DUPLICATE_STATE"].state == "q1"
        assert codes["DUPLICATE_STATE"].details["count"] == 2
        assert codes["DUPLICATE_SYMBOL"].symbol == "a"


class TestRedeclaredTransitions:
    def test_reports_kept_destination(self):
        raw = parse_raw(
            "states = [q1, q2] alphabet = [a] starting_state = q1 "
            "accepting_states = [q2] transitions = q1,a = q2; q1,a = q1; q1,a = q2;"
        )
        automaton = build_automaton(raw)

        result = check_redeclared_transitions(automaton, raw)

        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.code == "REDECLARED_TRANSITION"
        assert warning.state == "q1"
        assert warning.symbol == "a"
        assert "q1,a -> q2" in warning.message
