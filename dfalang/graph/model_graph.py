"""AutomatonGraph wrapper around networkx."""

from types import MappingProxyType
from typing import Any, Iterable, Mapping

import networkx as nx


class AutomatonGraph:
    """A read-only node/edge view of an automaton's transitions.

    Parallel transitions between the same pair of states form a single edge
    labelled with every symbol that triggers it, in declaration order. The
    graph keeps no reference to the automaton it was built from.
    """

    def __init__(
        self,
        nodes: Iterable[str],
        edges: Mapping[tuple[str, str], Iterable[str]],
        starting_state: str | None = None,
        accepting_states: Iterable[str] = (),
    ):
        """Initialize the graph.

        Args:
            nodes: State names, duplicates and order preserved.
            edges: Symbols keyed by (source, destination).
            starting_state: The state marked as initial.
            accepting_states: The states marked as accepting.
        """
        self._nodes = tuple(nodes)
        self._edges = MappingProxyType(
            {pair: tuple(symbols) for pair, symbols in edges.items()}
        )
        accepting = set(accepting_states)

        graph = nx.DiGraph()
        for name in self._nodes:
            graph.add_node(
                name,
                initial=name == starting_state,
                accepting=name in accepting,
            )
        for (source, destination), symbols in self._edges.items():
            graph.add_edge(source, destination, symbols=symbols)
        self._graph = nx.freeze(graph)

    @property
    def nodes(self) -> tuple[str, ...]:
        """Get the state names in declaration order."""
        return self._nodes

    @property
    def edges(self) -> Mapping[tuple[str, str], tuple[str, ...]]:
        """Get the symbols labelling each (source, destination) edge."""
        return self._edges

    @property
    def graph(self) -> nx.DiGraph:
        """Get the underlying frozen networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def symbols_between(self, source: str, destination: str) -> tuple[str, ...]:
        """Get the symbols leading from source to destination."""
        return self._edges.get((source, destination), ())

    def successors(self, state: str) -> list[str]:
        """Get the states directly reachable from a state."""
        if not self._graph.has_node(state):
            return []
        return list(self._graph.successors(state))

    def reachable_from(self, state: str) -> set[str]:
        """Get all states reachable from a state, including itself.

        Args:
            state: The state to start from.

        Returns:
            Set of reachable state names, empty if the state is unknown.
        """
        if not self._graph.has_node(state):
            return set()
        return {state} | nx.descendants(self._graph, state)

    def to_dict(self) -> dict[str, Any]:
        """Get a JSON-friendly representation for rendering."""
        return {
            "nodes": [
                {"name": name, **self._graph.nodes[name]} for name in self._nodes
            ],
            "edges": [
                {"source": source, "destination": destination, "symbols": list(symbols)}
                for (source, destination), symbols in self._edges.items()
            ],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AutomatonGraph):
            return NotImplemented
        return self._nodes == other._nodes and dict(self._edges) == dict(other._edges)

    def __repr__(self) -> str:
        return f"AutomatonGraph(nodes={list(self._nodes)!r}, edges={dict(self._edges)!r})"
