"""
dfs.py — Depth-First Search
============================
Recursive DFS.  The recursion is flattened with `yield from`, so Steps
come out in true depth-first order, and every return from a node emits
an explicit backtrack Step.

`stack` on each Step is the live recursion stack (source at the bottom),
so the renderer can draw the call-stack panel.
"""

from typing import Iterator, List, Optional, Set

from algorithms.step import GraphStep
from algorithms.graphs.common import GraphStepBuilder, check_endpoints, path_edges, resolve
from graph import Graph, GraphLike


PSEUDOCODE: List[str] = [
    "def DFS(node):",                               # 0
    "    visited.add(node)",                        # 1
    "    if node == target: return True",           # 2
    "    for neighbour in adj(node):",              # 3
    "        if neighbour not visited:",            # 4
    "            if DFS(neighbour): return True",   # 5
    "    return False  # backtrack",                # 6
]


def dfs(
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

    order: List[str] = []
    stack: List[str] = []

    found = yield from _visit(g, sb, source, target, order, set(), stack)

    if found:
        # stack was left intact on the way out: it is the path
        path = list(stack)
        yield sb.build(
            visited=order, stack=stack, path=path,
            highlighted_nodes=path, highlighted_edges=path_edges(path), line_number=2,
            message=f"Target '{target}' found. DFS path: {' → '.join(path)}.",
        )
    elif target is not None:
        yield sb.build(
            visited=order, line_number=6,
            message=f"Every reachable node explored. '{target}' is NOT reachable from '{source}'.",
        )
    else:
        yield sb.build(
            visited=order, line_number=6,
            message=f"DFS complete. Visit order: {', '.join(order)}.",
        )


def _visit(
    g: Graph,
    sb: GraphStepBuilder,
    node: str,
    target: Optional[str],
    order: List[str],
    seen: Set[str],
    stack: List[str],
) -> Iterator[GraphStep]:
    seen.add(node)
    order.append(node)
    stack.append(node)
    yield sb.build(
        current=node, visited=order, stack=stack, line_number=1,
        message=f"Visit '{node}' (depth {len(stack) - 1}).",
    )

    if node == target:
        return True

    for nbr, _edge in g.neighbours(node):
        if nbr in seen:
            yield sb.build(
                current=node, visited=order, stack=stack,
                highlighted_edges=[(node, nbr)], line_number=4,
                message=f"Edge {node}→{nbr}: '{nbr}' already visited, skip.",
            )
            continue

        yield sb.build(
            current=node, visited=order, stack=stack,
            highlighted_nodes=[nbr], highlighted_edges=[(node, nbr)], line_number=5,
            message=f"Edge {node}→{nbr}: '{nbr}' is unvisited. Go deeper.",
        )
        if (yield from _visit(g, sb, nbr, target, order, seen, stack)):
            return True

    stack.pop()
    yield sb.build(
        current=stack[-1] if stack else None, visited=order, stack=stack,
        highlighted_nodes=[node], line_number=6,
        message=f"All neighbours of '{node}' done. Backtrack"
                + (f" to '{stack[-1]}'." if stack else "."),
    )
    return False
