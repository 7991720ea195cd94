"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a GraphStep at every meaningful event:
  1. Dequeue a node            →  current
  2. Examine each neighbour    →  highlighted_edges
  3. Enqueue unseen neighbour  →  queue grows
  4. Final step                →  hop-count path (when a target is given)
                                  or the full visit order

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the generator so the UI can highlight them live.
"""

from collections import deque
from typing import Dict, Iterator, List, Optional

from algorithms.step import GraphStep
from algorithms.graphs.common import (
    GraphStepBuilder, check_endpoints, path_edges, reconstruct, resolve,
)
from graph import GraphLike


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line; index = line_number
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, source, target):",          # 0
    "    queue ← [source]",                     # 1
    "    visited ← {source}",                   # 2
    "    parent ← {}",                          # 3
    "    while queue is not empty:",            # 4
    "        node ← queue.dequeue()",           # 5
    "        if node == target: return path",   # 6
    "        for neighbour in adj(node):",      # 7
    "            if neighbour not visited:",    # 8
    "                visited.add(neighbour)",   # 9
    "                parent[neighbour] = node", # 10
    "                queue.enqueue(neighbour)", # 11
    "    return NOT FOUND",                     # 12
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(
    graph: GraphLike,
    source: str,
    target: Optional[str] = None,
    directed: bool = True,
) -> Iterator[GraphStep]:
    """
    Yields GraphStep snapshots for every event during BFS execution.

    Args:
        graph    : Graph, adjacency mapping or adjacency-list text.
        source   : Starting node id.
        target   : Optional goal node id; without one BFS visits everything reachable.
        directed : Directedness used when `graph` is not already a Graph.
    """
    g  = resolve(graph, directed)
    sb = GraphStepBuilder(g)

    problem = check_endpoints(g, source, target)
    if problem:
        yield sb.invalid(problem)
        return

    queue   = deque([source])
    visited: List[str]                = [source]
    parent:  Dict[str, Optional[str]] = {source: None}

    yield sb.build(
        current=source, visited=visited, queue=queue, line_number=1,
        message=f"Initialise: '{source}' is queued and marked visited. BFS explores layer by layer.",
    )

    while queue:
        node = queue.popleft()
        yield sb.build(
            current=node, visited=visited, queue=queue, line_number=5,
            message=f"Dequeue '{node}'. BFS always expands the earliest discovered node (FIFO).",
        )

        if node == target:
            path = reconstruct(parent, target)
            yield sb.build(
                current=node, visited=visited, queue=queue, path=path,
                highlighted_nodes=path, highlighted_edges=path_edges(path), line_number=6,
                message=f"Target '{target}' reached in {len(path) - 1} hop(s): {' → '.join(path)}.",
            )
            return

        for nbr, _edge in g.neighbours(node):
            if nbr in parent:
                yield sb.build(
                    current=node, visited=visited, queue=queue,
                    highlighted_edges=[(node, nbr)], line_number=8,
                    message=f"Edge {node}→{nbr}: '{nbr}' already visited, skip.",
                )
                continue

            visited.append(nbr)
            parent[nbr] = node
            queue.append(nbr)
            yield sb.build(
                current=node, visited=visited, queue=queue,
                highlighted_nodes=[nbr], highlighted_edges=[(node, nbr)], line_number=11,
                message=f"Edge {node}→{nbr}: '{nbr}' is new. Mark it visited and enqueue it.",
            )

    if target is not None:
        message = f"Queue is empty. Target '{target}' is NOT reachable from '{source}'."
    else:
        message = f"BFS complete. Visit order: {', '.join(visited)}."
    yield sb.build(visited=visited, line_number=12, message=message)
