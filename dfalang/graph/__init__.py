"""Graph layer for projecting automata onto networkx graphs."""

from .model_graph import AutomatonGraph
from .builder import build_graph

__all__ = [
    "AutomatonGraph",
    "build_graph",
]
