"""Text output for automata, graphs and validation results."""

from .formatter import format_graph, format_validation_result
from .serializer import dump_automaton, write_automaton

__all__ = [
    "format_graph",
    "format_validation_result",
    "dump_automaton",
    "write_automaton",
]
