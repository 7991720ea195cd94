"""
common.py — Shared helpers for graph producers
===============================================
`GraphStepBuilder` holds the parts of a GraphStep that stay fixed for a
whole run (adjacency, layout, weights, directedness) so each producer only
spells out what changed:

    sb = GraphStepBuilder(g)
    yield sb.build(current="A", visited=order, line_number=3, message="…")
"""

from typing import Any, Dict, List, Optional, Tuple

from algorithms.step import GraphStep
from graph import Graph, GraphLike, as_graph


class GraphStepBuilder:
    """
    Attributes:
        graph      : The graph every Step draws.
        transposed : Draw the edge-reversed view (Kosaraju phase 2).
    """

    def __init__(self, graph: Graph, transposed: bool = False):
        self.graph      = graph
        self.transposed = transposed
        self._adjacency = graph.adjacency()
        self._positions = graph.positions()
        self._weights   = graph.weights()

    def build(self, **fields: Any) -> GraphStep:
        return GraphStep(
            adjacency=self._adjacency,
            positions=self._positions,
            weights=self._weights,
            directed=self.graph.directed,
            transposed=self.transposed,
            **fields,
        )

    def invalid(self, message: str, line_number: Optional[int] = 0) -> GraphStep:
        return self.build(message=message, line_number=line_number)


def resolve(graph: GraphLike, directed: bool) -> Graph:
    return as_graph(graph, directed=directed)


def reconstruct(parent: Dict[str, Optional[str]], target: str) -> List[str]:
    path = []
    cur: Optional[str] = target
    while cur is not None:
        path.append(cur)
        cur = parent.get(cur)
    path.reverse()
    return path


def path_edges(path: List[str]) -> List[Tuple[str, str]]:
    return [(path[i], path[i + 1]) for i in range(len(path) - 1)]


def check_endpoints(g: Graph, source: str, target: Optional[str]) -> str:
    """Return an explanation if source / target are unusable, else ""."""
    if g.node_count() == 0:
        return "The graph is empty."
    if source not in g.nodes:
        return f"Unknown source node '{source}'."
    if target is not None and target not in g.nodes:
        return f"Unknown target node '{target}'."
    return ""
