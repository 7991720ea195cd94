"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
=================================================
Generator-based Dijkstra using a min-heap (heapq).

Yields a GraphStep at:
  1. Initialise distances / push source
  2. Pop minimum-distance node   →  current (distance now final)
  3. Stale heap entries          →  skipped
  4. Each relaxation attempt     →  highlighted edge, distance update
  5. Target popped               →  path found, reconstruct
  6. Heap empty                  →  final distance table

`distances` maps unreachable nodes to None (∞); `queue` lists the heap
entries in pop order.

Negative edge weights are refused up front with a single explanatory
Step: the greedy "pop = final" guarantee does not hold for them.
"""

import heapq
from typing import Dict, Iterator, List, Optional, Tuple

from algorithms.step import GraphStep
from algorithms.graphs.common import (
    GraphStepBuilder, check_endpoints, path_edges, reconstruct, resolve,
)
from graph import GraphLike


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, target):",        # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[source] ← 0",                        # 2
    "    pq ← [(0, source)]",                      # 3
    "    while pq is not empty:",                  # 4
    "        (d, node) ← pq.pop_min()",            # 5
    "        if d > dist[node]: continue",         # 6
    "        if node == target: return path",      # 7
    "        for (neighbour, w) in adj(node):",    # 8
    "            new_dist ← dist[node] + w",       # 9
    "            if new_dist < dist[neighbour]:",  # 10
    "                dist[neighbour] ← new_dist",  # 11
    "                pq.push((new_dist, nbr))",    # 12
    "    return dist",                             # 13
]


def dijkstra(
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
    if g.has_negative_edges():
        yield sb.invalid("Dijkstra requires non-negative edge weights; this graph has a negative edge.")
        return

    INF = float("inf")
    dist:    Dict[str, float]         = {nid: INF for nid in g.nodes}
    parent:  Dict[str, Optional[str]] = {source: None}
    done:    List[str]                = []
    dist[source] = 0
    pq: List[Tuple[float, str]] = [(0, source)]

    def snap(**fields) -> GraphStep:
        return sb.build(
            visited=done,
            distances={n: (None if d == INF else d) for n, d in dist.items()},
            queue=[n for _, n in sorted(pq)],
            **fields,
        )

    yield snap(
        current=source, line_number=2,
        message=f"Initialise: every distance is ∞ except source '{source}' = 0. Push it into the priority queue.",
    )

    while pq:
        d, node = heapq.heappop(pq)

        if d > dist[node]:
            yield snap(
                current=node, line_number=6,
                message=f"Pop ({d}, '{node}'): stale entry, the best known distance is {dist[node]}. Skip.",
            )
            continue

        done.append(node)
        yield snap(
            current=node, line_number=5,
            message=f"Pop '{node}' with distance {d}. This distance is now final.",
        )

        if node == target:
            path = reconstruct(parent, target)
            yield snap(
                current=node, path=path, highlighted_nodes=path,
                highlighted_edges=path_edges(path), line_number=7,
                message=f"Target '{target}' popped. Shortest distance = {dist[target]}. Path: {' → '.join(path)}.",
            )
            return

        for nbr, edge in g.neighbours(node):
            if nbr in done:
                yield snap(
                    current=node, highlighted_edges=[(node, nbr)], line_number=8,
                    message=f"Edge {node}→{nbr} (w={edge.weight}): '{nbr}' is already final, skip.",
                )
                continue

            new_dist = dist[node] + edge.weight
            if new_dist < dist[nbr]:
                old = "∞" if dist[nbr] == INF else dist[nbr]
                dist[nbr]   = new_dist
                parent[nbr] = node
                heapq.heappush(pq, (new_dist, nbr))
                yield snap(
                    current=node, highlighted_nodes=[nbr], highlighted_edges=[(node, nbr)], line_number=11,
                    message=f"Relax {node}→{nbr}: {dist[node]} + {edge.weight} = {new_dist} < {old}. Update.",
                )
            else:
                yield snap(
                    current=node, highlighted_edges=[(node, nbr)], line_number=10,
                    message=f"Edge {node}→{nbr}: {dist[node]} + {edge.weight} = {new_dist} ≥ {dist[nbr]}. No improvement.",
                )

    if target is not None:
        message = f"Priority queue empty. Target '{target}' is NOT reachable from '{source}'."
    else:
        message = "All reachable distances are final."
    yield snap(line_number=13, message=message)
