"""
graph.py — Graph Container & Importers
=======================================
The input value handed to every graph-family producer.

Responsibilities:
  1. CRUD on nodes & edges                  (add / get)
  2. Adjacency queries                      (neighbours, adjacency, weights)
  3. Derived graphs                         (transpose)
  4. Import from mappings / adjacency text  (dict | text → graph)
  5. Circle layout                          (node canvas positions)
  6. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes & edges stored in plain dicts keyed by id for O(1) lookup.
  - A separate adjacency dict  `_adj[node_id] → [(neighbour_id, edge_id)]`
    is maintained incrementally and keeps insertion order, so every
    producer walks neighbours in the order the user typed them.
  - Producers treat the Graph as read-only.
"""

import math
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from graph.node import Node
from graph.edge import Edge


GraphLike = Union["Graph", Mapping[str, Any], str]


class Graph:
    """
    Attributes:
        nodes    : {node_id: Node}
        edges    : {edge_id: Edge}
        directed : bool – graph-level directedness
        weighted : bool – whether weights are meaningful
        _adj     : {node_id: [(neighbour_id, edge_id), …]}
    """

    def __init__(self, directed: bool = False, weighted: bool = True):
        self.nodes:    Dict[str, Node] = {}
        self.edges:    Dict[str, Edge] = {}
        self.directed: bool            = directed
        self.weighted: bool            = weighted
        self._adj:     Dict[str, List[Tuple[str, str]]] = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, node_id: str, x: float = 0.0, y: float = 0.0, label: Optional[str] = None) -> Node:
        """Convenience: create + add in one call.  Existing nodes are returned as-is."""
        if node_id in self.nodes:
            return self.nodes[node_id]
        return self.add_node(Node(node_id, x=x, y=y, label=label))

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        self.create_node(edge.source)
        self.create_node(edge.target)
        if edge.id in self.edges:
            # parallel edge: keep the newest weight, adjacency already present
            self.edges[edge.id].weight = edge.weight
            return self.edges[edge.id]
        self.edges[edge.id] = edge
        self._adj[edge.source].append((edge.target, edge.id))
        if not edge.directed and edge.source != edge.target:
            self._adj[edge.target].append((edge.source, edge.id))
        return edge

    def create_edge(self, source: str, target: str, weight: float = 1.0) -> Edge:
        if not self.directed:
            existing = self.get_edge_between(source, target)
            if existing is not None:
                existing.weight = weight
                return existing
        return self.add_edge(Edge(source=source, target=target, weight=weight, directed=self.directed))

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge connecting a and b (direction-aware)."""
        for nbr, eid in self._adj.get(a, []):
            if nbr == b:
                return self.edges[eid]
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] for every reachable neighbour."""
        return [(nbr, self.edges[eid]) for nbr, eid in self._adj.get(node_id, [])]

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def adjacency(self) -> Dict[str, List[str]]:
        """{node: [neighbour, …]} — the shape every GraphStep carries."""
        return {nid: [nbr for nbr, _ in self._adj.get(nid, [])] for nid in self.nodes}

    def weights(self) -> Dict[str, float]:
        """{"u->v": weight} for every traversable direction."""
        if not self.weighted:
            return {}
        out: Dict[str, float] = {}
        for nid in self.nodes:
            for nbr, edge in self.neighbours(nid):
                out[f"{nid}->{nbr}"] = edge.weight
        return out

    def positions(self) -> Dict[str, Tuple[float, float]]:
        """{node: (x, y)} rounded for the renderer."""
        return {nid: (round(n.x, 1), round(n.y, 1)) for nid, n in self.nodes.items()}

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges.values())

    def transpose(self) -> "Graph":
        """Same nodes, every directed edge reversed.  Undirected graphs copy as-is."""
        g = Graph(directed=self.directed, weighted=self.weighted)
        for node in self.nodes.values():
            g.add_node(Node(node.id, x=node.x, y=node.y, label=node.label))
        for edge in self.edges.values():
            g.add_edge(edge.reversed() if self.directed else
                       Edge(edge.source, edge.target, weight=edge.weight, directed=False))
        return g

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "weighted": self.weighted,
            "nodes":    [n.to_dict() for n in self.nodes.values()],
            "edges":    [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls(directed=data.get("directed", False), weighted=data.get("weighted", True))
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    # ==================================================================
    # IMPORTERS
    # ==================================================================
    @classmethod
    def from_adjacency(
        cls,
        adjacency: Mapping[str, Any],
        directed: bool = True,
        weighted: Optional[bool] = None,
    ) -> "Graph":
        """
        Build from a mapping.  Each neighbour is either a bare id or an
        (id, weight) pair:

            {"A": ["B", ("C", 4)], "B": ["C"], "C": []}
        """
        pairs: List[Tuple[str, str, float]] = []
        has_weights = False
        for src, targets in adjacency.items():
            for item in targets or []:
                if isinstance(item, (list, tuple)):
                    tgt, w = str(item[0]), float(item[1])
                    has_weights = True
                else:
                    tgt, w = str(item), 1.0
                pairs.append((str(src), tgt, w))

        g = cls(directed=directed, weighted=has_weights if weighted is None else weighted)
        for src in adjacency:
            g.create_node(str(src))
        for src, tgt, w in pairs:
            g.create_node(tgt)
            g.create_edge(src, tgt, weight=w)
        g.layout_circle()
        return g

    @classmethod
    def from_adjacency_list(
        cls,
        text: str,
        directed: bool = True,
        weighted: Optional[bool] = None,
    ) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            A: B C D            → A connects to B, C, D  (weight 1)
            A: B(3) C(7)        → A→B weight 3, A→C weight 7
            0 → 1,2,3           → alternate arrow syntax
            0 -> 1(5), 2(3)     → comma-separated with weights
        """
        adjacency: Dict[str, List[Tuple[str, float]]] = {}

        for line in text.strip().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                parts = line.split(":", 1)
            elif "→" in line:
                parts = line.split("→", 1)
            elif "->" in line:
                parts = line.split("->", 1)
            else:
                adjacency.setdefault(line, [])
                continue

            src = parts[0].strip()
            adjacency.setdefault(src, [])

            for token in parts[1].replace(",", " ").split():
                # optional weight: "B(3)" or "B"
                if "(" in token and token.endswith(")"):
                    tgt, w_str = token[:-1].split("(", 1)
                    try:
                        w = float(w_str)
                    except ValueError:
                        w = 1.0
                else:
                    tgt, w = token, 1.0
                adjacency.setdefault(tgt, [])
                adjacency[src].append((tgt, w))

        if weighted is None:
            weighted = any(w != 1.0 for targets in adjacency.values() for _, w in targets)
        return cls.from_adjacency(adjacency, directed=directed, weighted=weighted)

    # ==================================================================
    # LAYOUT
    # ==================================================================
    def layout_circle(self, canvas_w: float = 800, canvas_h: float = 500) -> None:
        n = len(self.nodes)
        if n == 0:
            return
        cx, cy = canvas_w / 2, canvas_h / 2
        radius = min(canvas_w, canvas_h) * 0.35
        for i, node in enumerate(self.nodes.values()):
            angle = 2 * math.pi * i / n
            node.x = cx + radius * math.cos(angle)
            node.y = cy + radius * math.sin(angle)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, nodes={self.node_count()}, edges={self.edge_count()})"


# ---------------------------------------------------------------------------
# Coercion helper used by every graph producer
# ---------------------------------------------------------------------------
def as_graph(value: GraphLike, directed: bool = True) -> Graph:
    """Accept a Graph, an adjacency mapping, a to_dict() payload, or adjacency text."""
    if isinstance(value, Graph):
        return value
    if isinstance(value, str):
        return Graph.from_adjacency_list(value, directed=directed)
    if isinstance(value, Mapping):
        if "nodes" in value and "edges" in value:
            return Graph.from_dict(dict(value))
        return Graph.from_adjacency(value, directed=directed)
    raise TypeError(f"Cannot build a Graph from {type(value).__name__}")
