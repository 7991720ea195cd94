"""
step.py — Algorithm Step Snapshots
===================================
Every producer is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything a renderer needs to
draw one frame of one algorithm family:

    • ArrayStep       – array contents + comparing / swapping / sorted indices
    • LinkedListStep  – node chain, next-links, pointer labels
    • GridStep        – DP tables and backtracking boards
    • GraphStep       – adjacency, visited order, queue / stack, components
    • StringStep      – text, pattern, pointers, LPS table, rolling hashes
    • BitStep         – rows of fixed-width binary values
    • ProbingStep     – open-addressing slots (empty / tombstone / key)
    • ChainingStep    – separate-chaining buckets

Design decisions:
  - Each family is a frozen dataclass.  `Step` is the closed Union of
    them, so a renderer can dispatch on `step.family` exhaustively.
  - Construction deep-copies every field (lists → tuples, sets → sorted
    tuples, dicts → FrozenDict).  Producers may pass their live,
    mutable working buffers straight in; the Step never aliases them.
  - `line_number` indexes the PSEUDOCODE list exported by the producer
    module, for code-highlight sync.
"""

from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, Iterator, Optional, Tuple, Union


Cell  = Tuple[int, int]
Point = Tuple[float, float]


class FrozenDict(Mapping):
    """Read-only, hashable mapping used for every dict-valued Step field."""

    __slots__ = ("_data", "_hash")

    def __init__(self, data: Optional[Mapping] = None):
        self._data: Dict[Any, Any] = dict(data or {})
        self._hash: Optional[int]  = None

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"FrozenDict({self._data!r})"


def freeze(value: Any) -> Any:
    """Deep, independent, immutable copy of a snapshot value."""
    if isinstance(value, (list, tuple, range, deque)):
        return tuple(freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return tuple(sorted(freeze(v) for v in value))
    if isinstance(value, Mapping):
        return FrozenDict({k: freeze(v) for k, v in value.items()})
    return value


def thaw(value: Any) -> Any:
    """JSON-friendly view: tuples back to lists, dict keys to strings."""
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    if isinstance(value, Mapping):
        return {str(k): thaw(v) for k, v in value.items()}
    if isinstance(value, BitRow):
        return value.to_dict()
    if isinstance(value, ListNode):
        return {"id": value.id, "value": value.value}
    return value


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class BaseStep:
    """
    Attributes:
        message     : Human-readable text shown under the animation.
        line_number : Index into the producer's PSEUDOCODE (None = no highlight).
    """

    family: ClassVar[str] = ""

    message:     str           = ""
    line_number: Optional[int] = None

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, freeze(getattr(self, f.name)))

    def to_dict(self) -> Dict[str, Any]:
        data = {"family": self.family}
        for f in fields(self):
            data[f.name] = thaw(getattr(self, f.name))
        return data


# ---------------------------------------------------------------------------
# Array family  (sorting, searching)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ArrayStep(BaseStep):
    """
    Attributes:
        array     : Full array contents at this instant.
        comparing : Indices being compared.
        swapping  : Indices being written / swapped.
        sorted    : Indices known to be in final position.
        labels    : {index: label} pointer badges, e.g. L / R / M.
        auxiliary : Side buffer (count array, output array, …).
    """

    family: ClassVar[str] = "array"

    array:     Tuple[int, ...]  = ()
    comparing: Tuple[int, ...]  = ()
    swapping:  Tuple[int, ...]  = ()
    sorted:    Tuple[int, ...]  = ()
    labels:    Dict[int, str]   = field(default_factory=dict)
    auxiliary: Tuple[int, ...]  = ()


# ---------------------------------------------------------------------------
# Linked-list family
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ListNode:
    id:    str
    value: int


@dataclass(frozen=True)
class LinkedListStep(BaseStep):
    """
    Attributes:
        nodes       : Every node currently allocated, in layout order.
        links       : {node_id: next_node_id or None}.
        head        : Id of the head node (None = empty list).
        highlighted : Node ids drawn with emphasis.
        pointers    : {node_id: label} e.g. "Curr", "Prev", "Head".
    """

    family: ClassVar[str] = "linked_list"

    nodes:       Tuple[ListNode, ...]     = ()
    links:       Dict[str, Optional[str]] = field(default_factory=dict)
    head:        Optional[str]            = None
    highlighted: Tuple[str, ...]          = ()
    pointers:    Dict[str, str]           = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Grid family  (DP tables, backtracking boards)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GridStep(BaseStep):
    """
    Attributes:
        grid        : 2-D table; None cells mean "not computed" / ∞.
        active_cell : (row, col) being written right now.
        compared    : Cells read to compute the active cell.
        highlighted : Cells to emphasise (result, path, …).
        row_header  : Optional labels for rows (e.g. characters of s1).
        col_header  : Optional labels for columns.
        solution    : Row → column placement (N-Queens), -1 = empty row.
        is_valid    : Verdict on the active placement, if any.
        operation   : Operation tag (MATCH / INSERT / DELETE / REPLACE, …).
    """

    family: ClassVar[str] = "grid"

    grid:        Tuple[Tuple[Optional[int], ...], ...] = ()
    active_cell: Optional[Cell]                        = None
    compared:    Tuple[Cell, ...]                      = ()
    highlighted: Tuple[Cell, ...]                      = ()
    row_header:  Tuple[str, ...]                       = ()
    col_header:  Tuple[str, ...]                       = ()
    solution:    Tuple[int, ...]                       = ()
    is_valid:    Optional[bool]                        = None
    operation:   Optional[str]                         = None


# ---------------------------------------------------------------------------
# Graph family
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GraphStep(BaseStep):
    """
    Attributes:
        adjacency         : {node: (neighbour, …)} of the graph being drawn.
        positions         : {node: (x, y)} canvas coordinates from the graph layout.
        weights           : {"u->v": weight} for weighted graphs.
        directed          : Draw arrows?
        transposed        : True while the edge-reversed graph is shown.
        current           : Node being processed right now.
        visited           : Nodes visited so far, in visit order.
        highlighted_nodes : Nodes to emphasise this frame.
        highlighted_edges : (u, v) pairs to emphasise this frame.
        queue             : Queue contents (BFS, Kahn, Dijkstra PQ order).
        stack             : Stack / recursion-stack contents (DFS, Kosaraju).
        distances         : {node: distance or None for ∞}.
        in_degree         : {node: in-degree} (topological sort).
        order             : Output order (topological order, finish order).
        components        : Discovered components (SCCs).
        current_component : Component being built right now.
        path              : Reconstructed path, when a target was given.
        tree_edges        : Edges accepted into a spanning tree (Prim, Kruskal).
        total_weight      : Running total (tree weight) where one applies.
        negative_cycle    : True once Bellman-Ford finds a reachable negative cycle.
    """

    family: ClassVar[str] = "graph"

    adjacency:         Dict[str, Tuple[str, ...]]  = field(default_factory=dict)
    positions:         Dict[str, Point]            = field(default_factory=dict)
    weights:           Dict[str, float]            = field(default_factory=dict)
    directed:          bool                        = False
    transposed:        bool                        = False
    current:           Optional[str]               = None
    visited:           Tuple[str, ...]             = ()
    highlighted_nodes: Tuple[str, ...]             = ()
    highlighted_edges: Tuple[Tuple[str, str], ...] = ()
    queue:             Tuple[str, ...]             = ()
    stack:             Tuple[str, ...]             = ()
    distances:         Dict[str, Optional[float]]  = field(default_factory=dict)
    in_degree:         Dict[str, int]              = field(default_factory=dict)
    order:             Tuple[str, ...]             = ()
    components:        Tuple[Tuple[str, ...], ...] = ()
    current_component: Tuple[str, ...]             = ()
    path:              Tuple[str, ...]             = ()
    tree_edges:        Tuple[Tuple[str, str], ...] = ()
    total_weight:      Optional[float]             = None
    negative_cycle:    bool                        = False


# ---------------------------------------------------------------------------
# String family
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StringStep(BaseStep):
    """
    Attributes:
        text          : Haystack.
        pattern       : Needle.
        text_index    : Pointer into text (i).
        pattern_index : Pointer into pattern (j / len while building LPS).
        window_start  : Alignment of the pattern under the text.
        comparing     : True while characters are being compared.
        lps           : KMP longest-proper-prefix-suffix table.
        lps_index     : LPS cell being filled.
        hash_text     : Rabin-Karp rolling hash of the current window.
        hash_pattern  : Rabin-Karp hash of the pattern.
        matches       : Start indices of every match found so far.
    """

    family: ClassVar[str] = "string"

    text:          str              = ""
    pattern:       str              = ""
    text_index:    Optional[int]    = None
    pattern_index: Optional[int]    = None
    window_start:  Optional[int]    = None
    comparing:     bool             = False
    lps:           Tuple[int, ...]  = ()
    lps_index:     Optional[int]    = None
    hash_text:     Optional[int]    = None
    hash_pattern:  Optional[int]    = None
    matches:       Tuple[int, ...]  = ()


# ---------------------------------------------------------------------------
# Bit family
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class BitRow:
    key:       str
    label:     str
    value:     int
    width:     int             = 8
    highlight: Tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "highlight", freeze(self.highlight))

    @property
    def bits(self) -> str:
        return format(self.value & ((1 << self.width) - 1), f"0{self.width}b")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":       self.key,
            "label":     self.label,
            "value":     self.value,
            "bits":      self.bits,
            "highlight": list(self.highlight),
        }


@dataclass(frozen=True)
class BitStep(BaseStep):
    family: ClassVar[str] = "bit"

    rows:   Tuple[BitRow, ...] = ()
    result: Optional[int]      = None


# ---------------------------------------------------------------------------
# Hashing families
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ProbingStep(BaseStep):
    """
    Attributes:
        slots        : Table contents; EMPTY (-1) and TOMBSTONE (-2) are markers.
        hash_index   : Home slot key % size.
        probe_index  : Slot being probed right now.
        active_index : Slot written / matched this frame.
        attempts     : Probes made so far.
    """

    family: ClassVar[str] = "probing"

    slots:        Tuple[int, ...] = ()
    hash_index:   Optional[int]   = None
    probe_index:  Optional[int]   = None
    active_index: Optional[int]   = None
    attempts:     int             = 0


@dataclass(frozen=True)
class ChainingStep(BaseStep):
    family: ClassVar[str] = "chaining"

    buckets:       Tuple[Tuple[int, ...], ...] = ()
    active_bucket: Optional[int]               = None
    active_node:   Optional[Cell]              = None


# ---------------------------------------------------------------------------
# The closed union
# ---------------------------------------------------------------------------
Step = Union[
    ArrayStep,
    LinkedListStep,
    GridStep,
    GraphStep,
    StringStep,
    BitStep,
    ProbingStep,
    ChainingStep,
]

STEP_FAMILIES: Dict[str, type] = {
    cls.family: cls
    for cls in (ArrayStep, LinkedListStep, GridStep, GraphStep,
                StringStep, BitStep, ProbingStep, ChainingStep)
}
