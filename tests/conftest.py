"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from dfalang.graph.builder import build_graph
from dfalang.schema.parser import parse_raw
from dfalang.validators.runner import build_automaton


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def two_state_text() -> str:
    """Return a small valid DFA document."""
    return """
states = [q1, q2]
alphabet = [a, b]
starting_state = q1
accepting_states = [q2]
transitions =
    q1,a = q2;
    q1,b = q1;
    q2,a = q1;
    q2,b = q2;
"""


@pytest.fixture
def two_state_raw(two_state_text):
    """Return the raw fields of the two-state document."""
    return parse_raw(two_state_text)


@pytest.fixture
def two_state_automaton(two_state_raw):
    """Return the validated two-state automaton."""
    return build_automaton(two_state_raw)


@pytest.fixture
def two_state_graph(two_state_automaton):
    """Return the graph built from the two-state automaton."""
    return build_graph(two_state_automaton)
