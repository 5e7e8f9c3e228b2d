"""Validation runner that turns parsed fields into an Automaton."""

import logging
from pathlib import Path

from ..graph.builder import build_graph
from ..graph.model_graph import AutomatonGraph
from ..schema.errors import AutomatonValidationError
from ..schema.loader import load_text
from ..schema.models import Automaton, RawAutomaton
from ..schema.parser import parse_raw
from .accepting_states import check_accepting_states
from .base import ValidationResult
from .lint import check_duplicates, check_empty_identifiers, check_redeclared_transitions
from .reachability import check_unreachable_states
from .reference_integrity import check_transitions
from .starting_state import check_starting_state

logger = logging.getLogger(__name__)


def validate_raw(raw: RawAutomaton) -> ValidationResult:
    """Run the integrity checks on parsed fields.

    The checks run in a fixed order and stop at the first one that reports
    errors:

    1. The starting state is declared.
    2. Every accepting state is declared.
    3. Every transition uses declared states and symbols.

    Args:
        raw: The parsed document fields.

    Returns:
        ValidationResult holding the errors of the first failing check.
    """
    result = ValidationResult()

    for check in (check_starting_state, check_accepting_states, check_transitions):
        result.merge(check(raw))
        if result.has_errors:
            logger.debug(
                "%s failed with %d error(s)", check.__name__, len(result.errors)
            )
            break

    return result


def build_automaton(raw: RawAutomaton) -> Automaton:
    """Validate parsed fields and promote them to an Automaton.

    Args:
        raw: The parsed document fields.

    Returns:
        The validated automaton.

    Raises:
        AutomatonValidationError: If any integrity check fails.
    """
    result = validate_raw(raw)
    if result.has_errors:
        raise AutomatonValidationError(
            f"Automaton validation failed with {len(result.errors)} error(s)",
            result.errors,
        )
    return Automaton.from_raw(raw)


def parse_automaton(text: str) -> Automaton:
    """Parse and validate a DFA document.

    Raises:
        DfaSyntaxError: If the document does not follow the grammar.
        AutomatonValidationError: If any integrity check fails.
    """
    return build_automaton(parse_raw(text))


def load_automaton(path: str | Path) -> Automaton:
    """Load, parse and validate a DFA document file.

    Raises:
        DfaLoadError: If the file cannot be read.
        DfaSyntaxError: If the document does not follow the grammar.
        AutomatonValidationError: If any integrity check fails.
    """
    return parse_automaton(load_text(path))


def run_validators(
    automaton: Automaton,
    graph: AutomatonGraph,
    raw: RawAutomaton | None = None,
) -> ValidationResult:
    """Run all warning-level checks on a validated automaton.

    Args:
        automaton: The validated automaton.
        graph: The graph built from the automaton.
        raw: The parsed fields, needed to report redeclared transitions.

    Returns:
        Combined ValidationResult; it never contains errors.
    """
    result = ValidationResult()

    result.merge(check_empty_identifiers(automaton))
    result.merge(check_duplicates(automaton))
    if raw is not None:
        result.merge(check_redeclared_transitions(automaton, raw))
    result.merge(check_unreachable_states(automaton, graph))

    return result


def validate_dfa_text(text: str) -> ValidationResult:
    """Parse a DFA document and run every check on it.

    Args:
        text: The complete document.

    Returns:
        ValidationResult with either the integrity errors or the warnings.

    Raises:
        DfaSyntaxError: If the document does not follow the grammar.
    """
    raw = parse_raw(text)
    result = validate_raw(raw)
    if result.has_errors:
        return result

    automaton = Automaton.from_raw(raw)
    result.merge(run_validators(automaton, build_graph(automaton), raw))
    logger.info(
        "Validated automaton with %d state(s): %d warning(s)",
        len(automaton.states),
        len(result.warnings),
    )
    return result


def validate_dfa_file(path: str | Path) -> ValidationResult:
    """Load and validate a DFA document file.

    Raises:
        DfaLoadError: If the file cannot be read.
        DfaSyntaxError: If the document does not follow the grammar.
    """
    return validate_dfa_text(load_text(path))
