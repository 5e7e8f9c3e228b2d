"""Builder for converting an Automaton to an AutomatonGraph."""

import logging

from ..schema.models import Automaton
from .model_graph import AutomatonGraph

logger = logging.getLogger(__name__)


def build_graph(automaton: Automaton) -> AutomatonGraph:
    """Build an AutomatonGraph from an Automaton.

    Args:
        automaton: A validated automaton. It is not modified.

    Returns:
        An AutomatonGraph whose nodes are the automaton's states and whose
        edges group the symbols of parallel transitions.
    """
    edges: dict[tuple[str, str], list[str]] = {}

    for transition in automaton.transitions:
        edges.setdefault((transition.source, transition.destination), []).append(
            transition.symbol
        )

    logger.debug(
        "Built graph with %d node(s) and %d edge(s)",
        len(automaton.states),
        len(edges),
    )
    return AutomatonGraph(
        automaton.states,
        edges,
        starting_state=automaton.starting_state,
        accepting_states=automaton.accepting_states,
    )
