"""
edge.py — Graph Edge
====================
Connects two nodes and carries an optional weight.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
  - The id is derived from the endpoints ("A->B") so two runs on the
    same input produce identical GraphSteps.
  - Weight defaults to 1 for unweighted graphs.
"""

from typing import Optional


class Edge:
    """
    Attributes:
        id       : "source->target".
        source   : ID of the tail node.
        target   : ID of the head node.
        weight   : Numeric cost (default 1).
        directed : If False, traversal works in both directions.
    """

    __slots__ = ("id", "source", "target", "weight", "directed")

    def __init__(
        self,
        source: str,
        target: str,
        weight: float = 1.0,
        directed: bool = False,
        edge_id: Optional[str] = None,
    ):
        self.id:       str   = edge_id or f"{source}->{target}"
        self.source:   str   = source
        self.target:   str   = target
        self.weight:   float = weight
        self.directed: bool  = directed

    def reversed(self) -> "Edge":
        return Edge(self.target, self.source, weight=self.weight, directed=self.directed)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":       self.id,
            "source":   self.source,
            "target":   self.target,
            "weight":   self.weight,
            "directed": self.directed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            weight=data.get("weight", 1.0),
            directed=data.get("directed", False),
            edge_id=data.get("id"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"Edge({self.source}{arrow}{self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
