"""
node.py — Graph Node
====================
Identity plus a canvas position.  Nodes carry NO algorithm state:
everything a producer learns about a node lives in the GraphStep it
yields, so the same Graph can be replayed by any number of producers.
"""

from typing import Optional


class Node:
    """
    Attributes:
        id    : Unique identifier (also the key used in every GraphStep).
        label : Human-readable name shown on the canvas.
        x, y  : Layout coordinates for the renderer.
    """

    __slots__ = ("id", "label", "x", "y")

    def __init__(
        self,
        node_id: str,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
    ):
        self.id:    str   = node_id
        self.label: str   = label or node_id
        self.x:     float = x
        self.y:     float = y

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            node_id=data["id"],
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            label=data.get("label"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
