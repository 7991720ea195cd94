"""
floyd_warshall.py — Floyd–Warshall (All-Pairs Shortest Paths)
===============================================================
The matrix algorithm: every Step is a GridStep holding the full N×N
distance matrix (None = ∞), rows and columns headed by node id in graph
order.

    for k in nodes:          ← "intermediate" node
        for i in nodes:
            for j in nodes:
                if dist[i][k] + dist[k][j] < dist[i][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]

Yields a GridStep for:
  1. Initialisation (adjacency → matrix)
  2. Start of each k-round (row k and column k highlighted)
  3. Each (i, j) cell that actually improves
  4. End of each k-round
  5. Terminal: negative cycle (a negative diagonal cell), the chosen
     source → target path, or the finished matrix

Only cells that improve get their own Step.  The diagonal is relaxed
too, so a negative cycle shows up as dist[v][v] < 0.
"""

from typing import Iterator, List, Optional

from algorithms.step import GridStep
from algorithms.graphs.common import resolve
from graph import GraphLike


PSEUDOCODE: List[str] = [
    "def FloydWarshall(graph):",                   # 0
    "    dist ← adjacency matrix",                 # 1
    "    next ← initialise next-hop matrix",       # 2
    "    for k in 0 … n-1:",                       # 3
    "        for i in 0 … n-1:",                   # 4
    "            for j in 0 … n-1:",               # 5
    "                if dist[i][k]+dist[k][j]",    # 6
    "                      < dist[i][j]:",         # 7
    "                    dist[i][j] = …",          # 8
    "                    next[i][j] = next[i][k]", # 9
    "    return dist, next",                       # 10
]


def floyd_warshall(
    graph: GraphLike,
    source: Optional[str] = None,
    target: Optional[str] = None,
    directed: bool = True,
) -> Iterator[GridStep]:
    """
    source / target are only used at the END to pick the path to report.
    The algorithm itself computes every pair.
    """
    g     = resolve(graph, directed)
    nodes = g.node_ids()
    n     = len(nodes)
    idx   = {nid: i for i, nid in enumerate(nodes)}

    if n == 0:
        yield GridStep(message="The graph is empty.", line_number=0)
        return
    for label, nid in (("source", source), ("target", target)):
        if nid is not None and nid not in idx:
            yield GridStep(message=f"Unknown {label} node '{nid}'.", line_number=0)
            return

    INF = float("inf")
    dist: List[List[float]]         = [[INF] * n for _ in range(n)]
    nxt:  List[List[Optional[int]]] = [[None] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
        nxt[i][i]  = i
    for u in nodes:
        for v, edge in g.neighbours(u):
            i, j = idx[u], idx[v]
            if edge.weight < dist[i][j]:
                dist[i][j] = edge.weight
                nxt[i][j]  = j

    def snap(**fields) -> GridStep:
        return GridStep(
            grid=[[None if d == INF else d for d in row] for row in dist],
            row_header=nodes, col_header=nodes,
            **fields,
        )

    yield snap(
        line_number=1,
        message=f"Initialise the {n}×{n} matrix: diagonal = 0, direct edges = weight, the rest = ∞.",
    )

    for k in range(n):
        through = nodes[k]
        cross = [(k, c) for c in range(n)] + [(r, k) for r in range(n) if r != k]
        yield snap(
            highlighted=cross, operation=f"k = {through}", line_number=3,
            message=f"k = {through}: allow paths that pass through '{through}'.",
        )

        updates = 0
        for i in range(n):
            if dist[i][k] == INF:
                continue
            for j in range(n):
                if dist[k][j] == INF:
                    continue
                new_dist = dist[i][k] + dist[k][j]
                if new_dist < dist[i][j]:
                    old = "∞" if dist[i][j] == INF else dist[i][j]
                    dist[i][j] = new_dist
                    nxt[i][j]  = nxt[i][k]
                    updates += 1
                    yield snap(
                        active_cell=(i, j), compared=[(i, k), (k, j)], operation="UPDATE", line_number=8,
                        message=(
                            f"dist[{nodes[i]}][{nodes[j]}] via {through}: "
                            f"{dist[i][k]} + {dist[k][j]} = {new_dist} < {old}."
                        ),
                    )

        yield snap(
            highlighted=cross, operation=f"k = {through}", line_number=3,
            message=f"Round k = {through} complete: {updates} update(s).",
        )

    negative = [i for i in range(n) if dist[i][i] < 0]
    if negative:
        yield snap(
            highlighted=[(i, i) for i in negative], is_valid=False, line_number=10,
            message=(
                "Negative cycle: dist[v][v] < 0 for "
                + ", ".join(f"'{nodes[i]}'" for i in negative)
                + ". Shortest paths through these nodes are undefined."
            ),
        )
        return

    if source is None or target is None:
        yield snap(line_number=10, is_valid=True, message="All-pairs shortest paths computed.")
        return

    si, ti = idx[source], idx[target]
    if dist[si][ti] == INF:
        yield snap(
            active_cell=(si, ti), line_number=10,
            message=f"All pairs computed. '{target}' is NOT reachable from '{source}'.",
        )
        return

    path = _reconstruct_path(nxt, si, ti)
    yield snap(
        active_cell=(si, ti), highlighted=[(path[h], path[h + 1]) for h in range(len(path) - 1)],
        is_valid=True, line_number=10,
        message=(
            f"All pairs computed. Shortest {source}→{target}: "
            f"{' → '.join(nodes[p] for p in path)}, cost = {dist[si][ti]}."
        ),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _reconstruct_path(nxt: List[List[Optional[int]]], si: int, ti: int) -> List[int]:
    path = [si]
    cur  = si
    while cur != ti and len(path) <= len(nxt):
        cur = nxt[cur][ti]
        path.append(cur)
    return path
