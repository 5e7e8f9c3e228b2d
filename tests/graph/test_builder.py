"""Tests for graph builder."""

from dfalang.graph.builder import build_graph
from dfalang.validators.runner import parse_automaton


class TestBuildGraph:
    def test_example_document(self, two_state_graph):
        assert two_state_graph.nodes == ("q1", "q2")
        assert dict(two_state_graph.edges) == {
            ("q1", "q2"): ("a",),
            ("q1", "q1"): ("b",),
            ("q2", "q1"): ("a",),
            ("q2", "q2"): ("b",),
        }

    def test_parallel_transitions_share_an_edge(self):
        automaton = parse_automaton(
            "states = [q1, q2] alphabet = [a, b, c] starting_state = q1 "
            "accepting_states = [q2] "
            "transitions = q1,b = q2; q1,a = q2; q2,c = q2; q1,c = q2;"
        )

        graph = build_graph(automaton)

        assert graph.symbols_between("q1", "q2") == ("b", "a", "c")
        assert graph.symbols_between("q2", "q2") == ("c",)
        assert len(graph.edges) == 2

    def test_nodes_copied_verbatim(self):
        automaton = parse_automaton(
            "states = [z, a, z] alphabet = [x] starting_state = a "
            "accepting_states = [z] transitions ="
        )

        graph = build_graph(automaton)

        assert graph.nodes == ("z", "a", "z")
        assert not graph.edges

    def test_does_not_modify_automaton(self, two_state_automaton):
        before = two_state_automaton.model_copy(deep=True)

        build_graph(two_state_automaton)

        assert two_state_automaton == before

    def test_node_attributes(self, two_state_graph):
        nodes = two_state_graph.graph.nodes

        assert nodes["q1"]["initial"] is True
        assert nodes["q1"]["accepting"] is False
        assert nodes["q2"]["accepting"] is True
