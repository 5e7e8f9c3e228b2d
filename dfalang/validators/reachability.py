"""State reachability validator."""

from ..graph.model_graph import AutomatonGraph
from ..schema.models import Automaton
from .base import ValidationResult


def check_unreachable_states(
    automaton: Automaton, graph: AutomatonGraph
) -> ValidationResult:
    """Check for states that cannot be reached from the starting state.

    An unreachable state usually points at a missing transition. It does not
    make the automaton invalid, so only a warning is reported.

    Args:
        automaton: The validated automaton.
        graph: The graph built from the automaton.

    Returns:
        ValidationResult with warnings for unreachable states.
    """
    result = ValidationResult()
    reachable = graph.reachable_from(automaton.starting_state)

    reported = set()
    for state in automaton.states:
        if state in reachable or state in reported:
            continue
        reported.add(state)
        result.add_warning(
            code="UNREACHABLE_STATE",
            message=(
                f"State '{state}' cannot be reached from starting state "
                f"'{automaton.starting_state}'"
            ),
            state=state,
        )

    return result
