"""Transition reference integrity validator."""

from ..schema.models import RawAutomaton
from .base import ValidationResult


def check_transitions(raw: RawAutomaton) -> ValidationResult:
    """Check that all transitions reference declared states and symbols.

    For every transition this checks:
    - The source is a declared state
    - The symbol is part of the alphabet
    - The destination is a declared state

    A transition with several bad parts produces a single error naming
    each of them.

    Args:
        raw: The parsed document fields.

    Returns:
        ValidationResult with one error per offending transition.
    """
    result = ValidationResult()
    states = set(raw.states)
    alphabet = set(raw.alphabet)

    for (source, symbol), destination in raw.transitions.items():
        invalid = []
        parts = []
        if source not in states:
            invalid.append("source")
            parts.append(f"source state {source}")
        if symbol not in alphabet:
            invalid.append("symbol")
            parts.append(f"symbol {symbol}")
        if destination not in states:
            invalid.append("destination")
            parts.append(f"destination state {destination}")

        if invalid:
            result.add_error(
                code="INVALID_TRANSITION",
                message=(
                    f"Invalid {', '.join(parts)} in transition "
                    f"{source},{symbol} -> {destination}"
                ),
                state=source,
                symbol=symbol,
                invalid=invalid,
                destination=destination,
            )

    return result
