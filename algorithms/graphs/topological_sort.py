"""
topological_sort.py — Topological Sort (Kahn's algorithm)
==========================================================
Repeatedly removes a node with in-degree 0.  If nodes remain once the
queue drains, the graph has a cycle and the run ends with an explanatory
Step naming the nodes stuck on it.
"""

from collections import deque
from typing import Dict, Iterator, List

from algorithms.step import GraphStep
from algorithms.graphs.common import GraphStepBuilder, resolve
from graph import GraphLike


PSEUDOCODE: List[str] = [
    "def topo_sort(graph):",                             # 0
    "    in_deg ← in-degree of every node",              # 1
    "    queue ← [v with in_deg[v] == 0]",               # 2
    "    while queue is not empty:",                     # 3
    "        node ← queue.dequeue(); order.append(node)",# 4
    "        for neighbour in adj(node):",               # 5
    "            in_deg[neighbour] -= 1",                # 6
    "            if in_deg[neighbour] == 0:",            # 7
    "                queue.enqueue(neighbour)",          # 8
    "    if len(order) < |V|: cycle!",                   # 9
    "    return order",                                  # 10
]


def topological_sort(graph: GraphLike) -> Iterator[GraphStep]:
    g  = resolve(graph, True)
    sb = GraphStepBuilder(g)

    if g.node_count() == 0:
        yield sb.invalid("The graph is empty.")
        return
    if not g.directed:
        yield sb.invalid("Topological order is only defined for directed graphs.")
        return

    in_deg: Dict[str, int] = {nid: 0 for nid in g.nodes}
    for nid in g.nodes:
        for nbr, _ in g.neighbours(nid):
            in_deg[nbr] += 1

    yield sb.build(in_degree=in_deg, line_number=1, message="Count the incoming edges of every node.")

    queue = deque(nid for nid in g.nodes if in_deg[nid] == 0)
    order: List[str] = []
    yield sb.build(
        in_degree=in_deg, queue=queue, highlighted_nodes=queue, line_number=2,
        message=f"Nodes with in-degree 0: {', '.join(queue) or 'none'}.",
    )

    while queue:
        node = queue.popleft()
        order.append(node)
        yield sb.build(
            current=node, visited=order, order=order, in_degree=in_deg, queue=queue, line_number=4,
            message=f"Take '{node}' and append it to the order.",
        )

        for nbr, _ in g.neighbours(node):
            in_deg[nbr] -= 1
            if in_deg[nbr] == 0:
                queue.append(nbr)
                yield sb.build(
                    current=node, visited=order, order=order, in_degree=in_deg, queue=queue,
                    highlighted_nodes=[nbr], highlighted_edges=[(node, nbr)], line_number=8,
                    message=f"Remove edge {node}→{nbr}: in-degree of '{nbr}' drops to 0, enqueue it.",
                )
            else:
                yield sb.build(
                    current=node, visited=order, order=order, in_degree=in_deg, queue=queue,
                    highlighted_edges=[(node, nbr)], line_number=6,
                    message=f"Remove edge {node}→{nbr}: in-degree of '{nbr}' is now {in_deg[nbr]}.",
                )

    if len(order) < g.node_count():
        stuck = [nid for nid in g.nodes if nid not in order]
        yield sb.build(
            visited=order, order=order, in_degree=in_deg, highlighted_nodes=stuck, line_number=9,
            message=f"Cycle detected: {', '.join(stuck)} never reach in-degree 0. No topological order exists.",
        )
        return

    yield sb.build(
        visited=order, order=order, in_degree=in_deg, line_number=10,
        message=f"Topological order: {' → '.join(order)}.",
    )
