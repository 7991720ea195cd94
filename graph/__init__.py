"""
graph/
-----
Input data layer for the graph producers.  Public API:

    from graph import Graph, Node, Edge, as_graph
"""

from graph.node  import Node
from graph.edge  import Edge
from graph.graph import Graph, GraphLike, as_graph

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphLike",
    "as_graph",
]
