"""dfalang: a description language for deterministic finite automata."""

from .graph import AutomatonGraph, build_graph
from .output import dump_automaton, write_automaton
from .schema import (
    Automaton,
    AutomatonValidationError,
    DfaLoadError,
    DfaSyntaxError,
    Transition,
    parse_raw,
)
from .validators import (
    ValidationResult,
    build_automaton,
    load_automaton,
    parse_automaton,
    validate_dfa_file,
    validate_dfa_text,
)

__version__ = "0.1.0"

__all__ = [
    "Automaton",
    "AutomatonGraph",
    "AutomatonValidationError",
    "DfaLoadError",
    "DfaSyntaxError",
    "Transition",
    "ValidationResult",
    "build_automaton",
    "build_graph",
    "dump_automaton",
    "load_automaton",
    "parse_automaton",
    "parse_raw",
    "validate_dfa_file",
    "validate_dfa_text",
    "write_automaton",
]
