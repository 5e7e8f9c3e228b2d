"""Starting state validator."""

from ..schema.models import RawAutomaton
from .base import ValidationResult


def check_starting_state(raw: RawAutomaton) -> ValidationResult:
    """Check that the starting state is one of the declared states.

    Args:
        raw: The parsed document fields.

    Returns:
        ValidationResult with at most one error.
    """
    result = ValidationResult()

    if raw.starting_state not in raw.states:
        result.add_error(
            code="INVALID_STARTING_STATE",
            message=f"{raw.starting_state} is not a valid State.",
            state=raw.starting_state,
        )

    return result
