"""
kosaraju.py — Strongly Connected Components (Kosaraju)
=======================================================
Two passes:
  1. DFS on the original graph, pushing each node on `stack` when it
     finishes (`order` keeps the finish order).
  2. DFS on the transposed graph, taking nodes off the finish stack; each
     tree found is one SCC.

Phase-2 Steps carry the transposed adjacency with `transposed=True`.
The final Step switches back to the original graph and lists every
component.
"""

from typing import Iterator, List, Set

from algorithms.step import GraphStep
from algorithms.graphs.common import GraphStepBuilder, resolve
from graph import Graph, GraphLike


PSEUDOCODE: List[str] = [
    "def kosaraju(graph):",                              # 0
    "    for v in V: if v not visited: dfs1(v)",         # 1
    "    dfs1(v): visit v; recurse; stack.push(v)",      # 2
    "    G_T ← transpose(graph)",                        # 3
    "    while stack is not empty:",                     # 4
    "        v ← stack.pop()",                           # 5
    "        if v not assigned: dfs2(v, new component)", # 6
    "    dfs2(v): add v to component; recurse on G_T",   # 7
    "    return components",                             # 8
]


def kosaraju(graph: GraphLike) -> Iterator[GraphStep]:
    g  = resolve(graph, True)
    sb = GraphStepBuilder(g)

    if g.node_count() == 0:
        yield sb.invalid("The graph is empty.")
        return

    # --- phase 1: finish order on G ---
    seen:   Set[str]  = set()
    finish: List[str] = []
    yield sb.build(line_number=1, message="Phase 1: DFS on the original graph to record finish order.")

    for nid in g.nodes:
        if nid not in seen:
            yield from _finish_dfs(g, sb, nid, seen, finish)

    # --- phase 2: components on G^T ---
    gt  = g.transpose()
    sbt = GraphStepBuilder(gt, transposed=True)
    stack = list(finish)
    components: List[List[str]] = []
    assigned:   Set[str]        = set()

    yield sbt.build(
        stack=stack, order=finish, line_number=3,
        message="Phase 2: reverse every edge and process nodes by decreasing finish time.",
    )

    while stack:
        nid = stack.pop()
        if nid in assigned:
            yield sbt.build(
                current=nid, stack=stack, order=finish, components=components, line_number=5,
                message=f"Pop '{nid}': already in a component, skip.",
            )
            continue

        component: List[str] = []
        yield sbt.build(
            current=nid, stack=stack, order=finish, components=components, line_number=6,
            message=f"Pop '{nid}': start component #{len(components) + 1}.",
        )
        yield from _collect(gt, sbt, nid, assigned, component, stack, finish, components)
        components.append(component)
        yield sbt.build(
            stack=stack, order=finish, components=components, highlighted_nodes=component, line_number=6,
            message=f"Component #{len(components)}: {{{', '.join(component)}}}.",
        )

    yield sb.build(
        order=finish, components=components, line_number=8,
        message=f"Found {len(components)} strongly connected component(s).",
    )


def _finish_dfs(
    g: Graph,
    sb: GraphStepBuilder,
    node: str,
    seen: Set[str],
    finish: List[str],
) -> Iterator[GraphStep]:
    seen.add(node)
    yield sb.build(
        current=node, visited=sorted(seen), stack=finish, order=finish, line_number=2,
        message=f"Visit '{node}'.",
    )
    for nbr, _ in g.neighbours(node):
        if nbr not in seen:
            yield sb.build(
                current=node, visited=sorted(seen), stack=finish, order=finish,
                highlighted_edges=[(node, nbr)], line_number=2,
                message=f"Edge {node}→{nbr}: descend into '{nbr}'.",
            )
            yield from _finish_dfs(g, sb, nbr, seen, finish)
    finish.append(node)
    yield sb.build(
        current=node, visited=sorted(seen), stack=finish, order=finish,
        highlighted_nodes=[node], line_number=2,
        message=f"'{node}' finished: push it on the stack.",
    )


def _collect(
    gt: Graph,
    sbt: GraphStepBuilder,
    node: str,
    assigned: Set[str],
    component: List[str],
    stack: List[str],
    finish: List[str],
    components: List[List[str]],
) -> Iterator[GraphStep]:
    assigned.add(node)
    component.append(node)
    yield sbt.build(
        current=node, stack=stack, order=finish, components=components,
        current_component=component, line_number=7,
        message=f"Add '{node}' to the current component.",
    )
    for nbr, _ in gt.neighbours(node):
        if nbr not in assigned:
            yield sbt.build(
                current=node, stack=stack, order=finish, components=components,
                current_component=component, highlighted_edges=[(node, nbr)], line_number=7,
                message=f"Reversed edge {node}→{nbr}: '{nbr}' joins the component.",
            )
            yield from _collect(gt, sbt, nbr, assigned, component, stack, finish, components)
