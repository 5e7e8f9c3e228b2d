"""Validators for DFA documents."""

from .base import Severity, ValidationIssue, ValidationResult
from .starting_state import check_starting_state
from .accepting_states import check_accepting_states
from .reference_integrity import check_transitions
from .lint import check_duplicates, check_empty_identifiers, check_redeclared_transitions
from .reachability import check_unreachable_states
from .runner import (
    build_automaton,
    load_automaton,
    parse_automaton,
    run_validators,
    validate_dfa_file,
    validate_dfa_text,
    validate_raw,
)

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_starting_state",
    "check_accepting_states",
    "check_transitions",
    "check_duplicates",
    "check_empty_identifiers",
    "check_redeclared_transitions",
    "check_unreachable_states",
    "build_automaton",
    "load_automaton",
    "parse_automaton",
    "run_validators",
    "validate_dfa_file",
    "validate_dfa_text",
    "validate_raw",
]
