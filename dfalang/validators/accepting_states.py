"""Accepting states validator."""

from ..schema.models import RawAutomaton
from .base import ValidationResult


def check_accepting_states(raw: RawAutomaton) -> ValidationResult:
    """Check that every accepting state is one of the declared states.

    Every offending entry is reported, not only the first one.

    Args:
        raw: The parsed document fields.

    Returns:
        ValidationResult with one error per undeclared accepting state.
    """
    result = ValidationResult()
    declared = set(raw.states)

    for state in raw.accepting_states:
        if state not in declared:
            result.add_error(
                code="INVALID_ACCEPTING_STATE",
                message=f"Accepting State {state} is not a valid state.",
                state=state,
            )

    return result
