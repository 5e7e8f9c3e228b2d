"""Warnings about legal but suspicious declarations."""

from collections import Counter

from ..schema.models import Automaton, RawAutomaton
from .base import ValidationResult


def check_empty_identifiers(automaton: Automaton) -> ValidationResult:
    """Check for empty state or symbol names.

    The grammar accepts an empty word wherever an identifier is expected,
    e.g. ``states = []`` declares a single state named ``''``.
    """
    result = ValidationResult()

    if "" in automaton.states:
        result.add_warning(
            code="EMPTY_IDENTIFIER",
            message="A state with an empty name is declared",
            state="",
        )
    if "" in automaton.alphabet:
        result.add_warning(
            code="EMPTY_IDENTIFIER",
            message="A symbol with an empty name is declared",
            symbol="",
        )

    return result


def check_duplicates(automaton: Automaton) -> ValidationResult:
    """Check for states or symbols declared more than once."""
    result = ValidationResult()

    for state, count in Counter(automaton.states).items():
        if count > 1:
            result.add_warning(
                code="DUPLICATE_STATE",
                message=f"State '{state}' is declared {count} times",
                state=state,
                count=count,
            )

    for symbol, count in Counter(automaton.alphabet).items():
        if count > 1:
            result.add_warning(
                code="DUPLICATE_SYMBOL",
                message=f"Symbol '{symbol}' is declared {count} times",
                symbol=symbol,
                count=count,
            )

    return result


def check_redeclared_transitions(
    automaton: Automaton, raw: RawAutomaton
) -> ValidationResult:
    """Check for (source, symbol) pairs declared on more than one line.

    Only the last declaration is kept in the automaton.
    """
    result = ValidationResult()

    for source, symbol in dict.fromkeys(raw.redeclared):
        result.add_warning(
            code="REDECLARED_TRANSITION",
            message=(
                f"Transition {source},{symbol} is declared more than once; "
                f"keeping {source},{symbol} -> {automaton.destination(source, symbol)}"
            ),
            state=source,
            symbol=symbol,
        )

    return result
