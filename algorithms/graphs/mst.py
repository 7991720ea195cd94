"""
mst.py — Minimum Spanning Tree (Prim & Kruskal)
================================================
Both producers work on UNDIRECTED weighted graphs and report the tree
built so far in `tree_edges` with its running `total_weight`.

Prim   grows one tree from a start node, always taking the lightest edge
       that leaves it (min-heap of candidate edges, shown in `queue`).
Kruskal scans every edge lightest-first and keeps the ones that join two
       different components of a union-find.

A disconnected graph ends with a spanning FOREST and a message that says
so.  Directed graphs are refused with a single explanatory Step.
"""

import heapq
from itertools import count
from typing import Dict, Iterator, List, Optional, Tuple

from algorithms.step import GraphStep
from algorithms.graphs.common import GraphStepBuilder, resolve
from graph import Graph, GraphLike


PRIM_PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",                            # 0
    "    in_tree ← {start}; pq ← edges(start)",           # 1
    "    while pq and |in_tree| < |V|:",                  # 2
    "        (w, u, v) ← pq.pop_min()",                   # 3
    "        if v in in_tree: continue",                  # 4
    "        add (u, v) to tree; in_tree.add(v)",         # 5
    "        for (x, w') in adj(v) if x ∉ in_tree:",      # 6
    "            pq.push((w', v, x))",                    # 7
    "    return tree",                                    # 8
]

KRUSKAL_PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                                # 0
    "    edges ← sort(E) by weight",                      # 1
    "    uf ← DisjointSet(V)",                            # 2
    "    for (u, v, w) in edges:",                        # 3
    "        if uf.find(u) != uf.find(v):",               # 4
    "            uf.union(u, v); add (u, v) to tree",     # 5
    "        else: skip (would close a cycle)",           # 6
    "    return tree",                                    # 7
]

Edge3 = Tuple[str, str, float]


# ---------------------------------------------------------------------------
# Union-Find (disjoint set with path compression + union by size)
# ---------------------------------------------------------------------------
class UnionFind:
    def __init__(self, items: List[str]):
        self.parent: Dict[str, str] = {x: x for x in items}
        self.size:   Dict[str, int] = {x: 1 for x in items}

    def find(self, x: str) -> str:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: str, b: str) -> bool:
        """Merge the sets of a and b.  False if they were already one set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        return True

    def groups(self) -> List[List[str]]:
        out: Dict[str, List[str]] = {}
        for x in self.parent:
            out.setdefault(self.find(x), []).append(x)
        return list(out.values())


def _label(edge: Edge3) -> str:
    u, v, w = edge
    return f"{u}-{v} ({w:g})"


def _check(g: Graph, sb: GraphStepBuilder) -> Optional[GraphStep]:
    if g.node_count() == 0:
        return sb.invalid("The graph is empty.")
    if g.directed:
        return sb.invalid("A minimum spanning tree needs an undirected graph.")
    return None


# ---------------------------------------------------------------------------
# Prim
# ---------------------------------------------------------------------------
def prim(graph: GraphLike, source: Optional[str] = None) -> Iterator[GraphStep]:
    g  = resolve(graph, False)
    sb = GraphStepBuilder(g)

    invalid = _check(g, sb)
    if invalid is not None:
        yield invalid
        return
    start = g.node_ids()[0] if source is None else source
    if start not in g.nodes:
        yield sb.invalid(f"Unknown source node '{start}'.")
        return

    tie = count()
    in_tree: List[str]                       = [start]
    tree:    List[Tuple[str, str]]           = []
    pq:      List[Tuple[float, int, Edge3]]  = []
    total = 0.0

    def push_edges(node: str) -> None:
        for nbr, edge in g.neighbours(node):
            if nbr not in in_tree:
                heapq.heappush(pq, (edge.weight, next(tie), (node, nbr, edge.weight)))

    def snap(**fields) -> GraphStep:
        return sb.build(
            visited=in_tree, tree_edges=tree, total_weight=total,
            queue=[_label(e) for _, _, e in sorted(pq)],
            **fields,
        )

    push_edges(start)
    yield snap(
        current=start, line_number=1,
        message=f"Start the tree at '{start}' and push its edges into the priority queue.",
    )

    while pq and len(in_tree) < g.node_count():
        w, _, (u, v, _w) = heapq.heappop(pq)
        if v in in_tree:
            yield snap(
                current=u, highlighted_edges=[(u, v)], line_number=4,
                message=f"Pop {u}-{v} ({w:g}): '{v}' is already in the tree. Skip.",
            )
            continue

        in_tree.append(v)
        tree.append((u, v))
        total += w
        yield snap(
            current=v, highlighted_nodes=[v], highlighted_edges=[(u, v)], line_number=5,
            message=f"Take the lightest crossing edge {u}-{v} ({w:g}). Tree weight = {total:g}.",
        )

        push_edges(v)
        yield snap(
            current=v, line_number=7,
            message=f"Push the edges of '{v}' that lead outside the tree.",
        )

    if len(in_tree) < g.node_count():
        message = (
            f"The graph is disconnected: the tree from '{start}' spans "
            f"{len(in_tree)} of {g.node_count()} nodes, weight {total:g}."
        )
    else:
        message = f"Prim's MST complete: {len(tree)} edge(s), total weight {total:g}."
    yield snap(highlighted_edges=tree, line_number=8, message=message)


# ---------------------------------------------------------------------------
# Kruskal
# ---------------------------------------------------------------------------
def kruskal(graph: GraphLike) -> Iterator[GraphStep]:
    g  = resolve(graph, False)
    sb = GraphStepBuilder(g)

    invalid = _check(g, sb)
    if invalid is not None:
        yield invalid
        return

    edges: List[Edge3] = sorted(
        ((e.source, e.target, e.weight) for e in g.edges.values()),
        key=lambda e: e[2],
    )
    uf   = UnionFind(g.node_ids())
    tree: List[Tuple[str, str]] = []
    total = 0.0
    goal  = g.node_count() - 1

    def snap(**fields) -> GraphStep:
        return sb.build(
            tree_edges=tree, total_weight=total,
            components=sorted(sorted(c) for c in uf.groups()),
            **fields,
        )

    yield snap(
        queue=[_label(e) for e in edges], line_number=1,
        message=f"Sort all {len(edges)} edge(s) by weight. Every node starts in its own set.",
    )

    for pos, (u, v, w) in enumerate(edges):
        if len(tree) == goal:
            break
        remaining = [_label(e) for e in edges[pos + 1:]]
        yield snap(
            queue=remaining, highlighted_edges=[(u, v)], line_number=4,
            message=f"Consider {u}-{v} ({w:g}): are '{u}' and '{v}' in different sets?",
        )
        if uf.union(u, v):
            tree.append((u, v))
            total += w
            yield snap(
                queue=remaining, highlighted_edges=[(u, v)], highlighted_nodes=[u, v], line_number=5,
                message=f"Yes: join them and add {u}-{v}. Tree weight = {total:g}.",
            )
        else:
            yield snap(
                queue=remaining, highlighted_edges=[(u, v)], line_number=6,
                message=f"No: {u}-{v} would close a cycle. Discard.",
            )

    if len(tree) < goal:
        message = (
            f"The graph is disconnected: spanning forest of {len(tree)} edge(s), "
            f"total weight {total:g}."
        )
    else:
        message = f"Kruskal's MST complete: {len(tree)} edge(s), total weight {total:g}."
    yield snap(highlighted_edges=tree, line_number=7, message=message)
