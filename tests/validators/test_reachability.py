"""Tests for the reachability validator."""

from dfalang.graph.builder import build_graph
from dfalang.validators.reachability import check_unreachable_states
from dfalang.validators.runner import parse_automaton


class TestUnreachableStates:
    def test_all_reachable(self, two_state_automaton, two_state_graph):
        result = check_unreachable_states(two_state_automaton, two_state_graph)

        assert not result.has_warnings

    def test_unreachable_state_is_warning(self):
        automaton = parse_automaton(
            "states = [q1, q2, secret] alphabet = [a] starting_state = q1 "
            "accepting_states = [q2] transitions = q1,a = q2; secret,a = q1;"
        )
        graph = build_graph(automaton)

        result = check_unreachable_states(automaton, graph)

        assert result.is_valid
        assert len(result.warnings) == 1
        assert result.warnings[0].code == "UNREACHABLE_STATE"
        assert result.warnings[0].state == "secret"

    def test_no_transitions(self):
        automaton = parse_automaton(
            "states = [q1, q2] alphabet = [a] starting_state = q1 "
            "accepting_states = [q1] transitions ="
        )
        graph = build_graph(automaton)

        result = check_unreachable_states(automaton, graph)

        assert [w.state for w in result.warnings] == ["q2"]

    def test_duplicate_state_reported_once(self):
        automaton = parse_automaton(
            "states = [q1, q2, q2] alphabet = [a] starting_state = q1 "
            "accepting_states = [q1] transitions ="
        )
        graph = build_graph(automaton)

        result = check_unreachable_states(automaton, graph)

        assert len(result.warnings) == 1
