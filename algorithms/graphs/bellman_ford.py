"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
Single-source shortest paths that tolerates NEGATIVE edge weights.

Structure:
  • Up to V-1 rounds of relaxing every edge; a round with no update ends
    the loop early.
  • One more "detector" pass.  Any edge that still relaxes proves a
    negative cycle reachable from the source; walking V parent links
    back from the last vertex it updates lands inside that cycle.

Yields a GraphStep for:
  1. Initialisation
  2. Start of each round
  3. Every edge examined from a reachable node (update or no change)
  4. End of each round
  5. The detector pass
  6. Terminal: negative cycle (negative_cycle=True, cycle highlighted),
     path to the target, or the final distance table

Undirected edges count in both directions, so a single negative
undirected edge is itself a negative cycle.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from algorithms.step import GraphStep
from algorithms.graphs.common import (
    GraphStepBuilder, check_endpoints, path_edges, reconstruct, resolve,
)
from graph import GraphLike


PSEUDOCODE: List[str] = [
    "def BellmanFord(graph, source):",             # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[source] ← 0",                        # 2
    "    parent ← {}",                             # 3
    "    for i in 1 … |V|-1:",                     # 4
    "        for each edge (u, v, w):",            # 5
    "            if dist[u] + w < dist[v]:",       # 6
    "                dist[v] ← dist[u] + w",       # 7
    "                parent[v] = u",               # 8
    "    // negative-cycle check:",                # 9
    "    for each edge (u, v, w):",                # 10
    "        if dist[u] + w < dist[v]:",           # 11
    "            return NEGATIVE CYCLE",           # 12
    "    return dist, parent",                     # 13
]


def bellman_ford(
    graph: GraphLike,
    source: str,
    target: Optional[str] = None,
    directed: bool = True,
) -> Iterator[GraphStep]:
    g  = resolve(graph, directed)
    sb = GraphStepBuilder(g)

    problem = check_endpoints(g, source, target)
    if problem:
        yield sb.invalid(problem)
        return

    INF = float("inf")
    V   = g.node_count()
    dist:   Dict[str, float]         = {nid: INF for nid in g.nodes}
    parent: Dict[str, Optional[str]] = {source: None}
    dist[source] = 0

    edges: List[Tuple[str, str, float]] = [
        (u, v, edge.weight) for u in g.nodes for v, edge in g.neighbours(u)
    ]

    def snap(**fields) -> GraphStep:
        return sb.build(
            distances={n: (None if d == INF else d) for n, d in dist.items()},
            **fields,
        )

    yield snap(
        current=source, line_number=2,
        message=(
            f"Initialise: dist['{source}'] = 0, all others = ∞. "
            f"Up to {V - 1} round(s) over {len(edges)} directed edge(s)."
        ),
    )

    for round_no in range(1, V):
        yield snap(line_number=4, message=f"Round {round_no} of {V - 1}: scan every edge.")

        relaxed = False
        for u, v, w in edges:
            if dist[u] == INF:
                continue
            new_dist = dist[u] + w
            if new_dist < dist[v]:
                old = "∞" if dist[v] == INF else dist[v]
                dist[v]   = new_dist
                parent[v] = u
                relaxed   = True
                yield snap(
                    current=u, highlighted_nodes=[v], highlighted_edges=[(u, v)], line_number=7,
                    message=f"Relax {u}→{v} (w={w}): {dist[u]} + {w} = {new_dist} < {old}. Update.",
                )
            else:
                yield snap(
                    current=u, highlighted_edges=[(u, v)], line_number=6,
                    message=f"Edge {u}→{v} (w={w}): {dist[u]} + {w} = {new_dist} ≥ {dist[v]}. No change.",
                )

        if not relaxed:
            yield snap(
                line_number=4,
                message=f"Round {round_no}: nothing changed, the distances have converged.",
            )
            break
        yield snap(line_number=4, message=f"Round {round_no} complete.")

    yield snap(line_number=10, message="Detector pass: one more scan over every edge.")

    last: Optional[Tuple[str, str, float]] = None
    for u, v, w in edges:
        if dist[u] != INF and dist[u] + w < dist[v]:
            dist[v]   = dist[u] + w
            parent[v] = u
            last      = (u, v, w)

    if last is not None:
        u, v, w = last
        cycle = _find_cycle(parent, v, V)
        loop  = cycle + cycle[:1]
        yield snap(
            current=v, highlighted_nodes=cycle, highlighted_edges=path_edges(loop),
            negative_cycle=True, line_number=12,
            message=(
                f"Edge {u}→{v} (w={w}) still relaxes after {V - 1} round(s): "
                f"negative cycle {' → '.join(loop)}. Shortest paths are undefined."
            ),
        )
        return

    if target is None:
        yield snap(line_number=13, message="No negative cycle. All reachable distances are final.")
    elif dist[target] == INF:
        yield snap(line_number=13, message=f"No negative cycle, but '{target}' is NOT reachable from '{source}'.")
    else:
        path = reconstruct(parent, target)
        yield snap(
            current=target, path=path, highlighted_nodes=path, highlighted_edges=path_edges(path),
            line_number=13,
            message=f"No negative cycle. Shortest path to '{target}': {' → '.join(path)}, cost = {dist[target]}.",
        )


def _find_cycle(parent: Dict[str, Optional[str]], start: str, hops: int) -> List[str]:
    """Walk parent links far enough to land inside the cycle, then collect it."""
    node = start
    for _ in range(hops):
        if parent.get(node) is None:
            return [start]
        node = parent[node]
    cycle = [node]
    cur = parent[node]
    while cur != node and cur is not None and len(cycle) <= hops:
        cycle.append(cur)
        cur = parent[cur]
    cycle.reverse()
    return cycle
