import pytest

from algorithms.graphs.bellman_ford import bellman_ford
from algorithms.graphs.bfs import bfs
from algorithms.graphs.dfs import dfs
from algorithms.graphs.dijkstra import dijkstra
from algorithms.graphs.floyd_warshall import floyd_warshall
from algorithms.graphs.kosaraju import kosaraju
from algorithms.graphs.mst import UnionFind, kruskal, prim
from algorithms.graphs.topological_sort import topological_sort
from engine import materialize
from graph import Graph, as_graph


DAG = {"A": ["B", "C"], "B": ["D"], "C": ["D", "E"], "D": ["F"], "E": ["F"], "F": []}
WEIGHTED = {"A": [("B", 4), ("C", 2)], "B": [("D", 5)], "C": [("B", 1), ("D", 8)], "D": []}
NEGATIVE = {"A": [("B", 4), ("C", 2)], "B": [("D", -3)], "C": [("B", 1), ("D", 6)], "D": []}
CYCLE = {"A": [("B", 1)], "B": [("C", -2)], "C": [("B", 1), ("D", 1)], "D": []}
UNDIRECTED = {"A": [("B", 1), ("C", 4)], "B": [("C", 2), ("D", 5)], "C": [("D", 1), ("E", 3)], "D": [("E", 6)], "E": []}


def ref_shortest(adjacency, source):
    """Plain Bellman-Ford distances over a directed adjacency mapping."""
    nodes = set(adjacency) | {v for targets in adjacency.values() for v, _ in targets}
    dist = {n: float("inf") for n in nodes}
    dist[source] = 0
    for _ in range(len(nodes) - 1):
        for u, targets in adjacency.items():
            for v, w in targets:
                dist[v] = min(dist[v], dist[u] + w)
    return {n: (None if d == float("inf") else d) for n, d in dist.items()}


def ref_mst_weight(adjacency):
    edges = sorted((w, u, v) for u, targets in adjacency.items() for v, w in targets)
    parent = {}

    def root(x):
        while parent.get(x, x) != x:
            x = parent[x]
        return x

    total = 0
    for w, u, v in edges:
        ru, rv = root(u), root(v)
        if ru != rv:
            parent[ru] = rv
            total += w
    return total


# ---------------------------------------------------------------------------
# Graph model
# ---------------------------------------------------------------------------
class TestGraphModel:
    def test_from_adjacency_adds_neighbour_only_nodes(self):
        g = Graph.from_adjacency({"A": ["B"]})
        assert g.node_ids() == ["A", "B"]
        assert g.adjacency() == {"A": ["B"], "B": []}

    def test_weights_are_detected(self):
        g = as_graph(WEIGHTED)
        assert g.weighted
        assert g.weights()["A->B"] == 4

    def test_text_adjacency(self):
        g = as_graph("A: B(3) C\nB: C")
        assert g.edge_count() == 3
        assert g.weights()["A->B"] == 3

    def test_to_dict_round_trip_keeps_structure(self):
        g = as_graph(WEIGHTED)
        again = as_graph(g.to_dict())
        assert again.adjacency() == g.adjacency()
        assert again.weights() == g.weights()
        assert again.positions() == g.positions()

    def test_nodes_are_laid_out_on_a_circle(self):
        positions = as_graph(DAG).positions()
        assert set(positions) == set(DAG)
        assert len(set(positions.values())) == len(DAG)
        assert positions["A"] == (575.0, 250.0)

    def test_every_graph_step_carries_the_layout(self):
        g = as_graph(DAG)
        for step in materialize(bfs(g, "A")):
            assert step.positions == g.positions()

    def test_transposed_view_keeps_positions(self):
        g = as_graph(DAG)
        assert g.transpose().positions() == g.positions()

    def test_rejects_unknown_types(self):
        with pytest.raises(TypeError):
            as_graph(42)


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------
class TestBFS:
    def test_shortest_hop_path(self):
        last = materialize(bfs(DAG, "A", "F")).last
        assert last.path == ("A", "B", "D", "F")
        assert last.highlighted_edges == (("A", "B"), ("B", "D"), ("D", "F"))

    def test_full_traversal_order(self):
        last = materialize(bfs(DAG, "A")).last
        assert last.visited == ("A", "B", "C", "D", "E", "F")

    def test_unreachable_target(self):
        last = materialize(bfs(DAG, "F", "A")).last
        assert "NOT reachable" in last.message

    def test_unknown_source(self):
        seq = materialize(bfs(DAG, "Z"))
        assert len(seq) == 1
        assert seq.last.message == "Unknown source node 'Z'."

    def test_queue_snapshots_are_independent(self):
        seq = materialize(bfs(DAG, "A"))
        assert seq.first.queue == ("A",)


class TestDFS:
    def test_visit_order(self):
        last = materialize(dfs(DAG, "A")).last
        assert last.visited == ("A", "B", "D", "F", "C", "E")

    def test_backtrack_steps(self):
        seq = materialize(dfs(DAG, "A"))
        assert any("Backtrack" in s.message for s in seq)

    def test_path_is_recursion_stack(self):
        last = materialize(dfs(DAG, "A", "E")).last
        assert last.path == ("A", "C", "E")


class TestDijkstra:
    def test_distances(self):
        last = materialize(dijkstra(WEIGHTED, "A")).last
        assert last.distances == {"A": 0, "B": 3, "C": 2, "D": 8}

    def test_path_to_target(self):
        last = materialize(dijkstra(WEIGHTED, "A", "D")).last
        assert last.path == ("A", "C", "B", "D")
        assert "Shortest distance = 8" in last.message

    def test_unreachable_distance_is_none(self):
        last = materialize(dijkstra({"A": [("B", 1)], "C": []}, "A")).last
        assert last.distances["C"] is None

    def test_rejects_negative_weights(self):
        seq = materialize(dijkstra({"A": [("B", -1)], "B": []}, "A"))
        assert len(seq) == 1
        assert "non-negative" in seq.last.message


# ---------------------------------------------------------------------------
# Topological sort & SCC
# ---------------------------------------------------------------------------
class TestTopologicalSort:
    def test_order_respects_edges(self):
        last = materialize(topological_sort(DAG)).last
        order = last.order
        assert sorted(order) == sorted(DAG)
        for u, targets in DAG.items():
            for v in targets:
                assert order.index(u) < order.index(v)
        assert last.message.startswith("Topological order:")

    def test_cycle_detected(self):
        last = materialize(topological_sort({"A": ["B"], "B": ["C"], "C": ["A"], "D": ["A"]})).last
        assert last.message.startswith("Cycle detected")
        assert set(last.highlighted_nodes) == {"A", "B", "C"}

    def test_undirected_graph_rejected(self):
        g = Graph.from_adjacency({"A": ["B"]}, directed=False)
        seq = materialize(topological_sort(g))
        assert len(seq) == 1


class TestKosaraju:
    def test_components(self):
        graph = {"A": ["B"], "B": ["C"], "C": ["A", "D"], "D": ["E"], "E": ["F"], "F": ["D"], "G": []}
        last = materialize(kosaraju(graph)).last
        found = {frozenset(c) for c in last.components}
        assert found == {frozenset("ABC"), frozenset("DEF"), frozenset("G")}
        assert last.message == "Found 3 strongly connected component(s)."
        assert not last.transposed

    def test_second_phase_shows_transposed_graph(self):
        seq = materialize(kosaraju({"A": ["B"], "B": []}))
        transposed = [s for s in seq if s.transposed]
        assert transposed
        assert transposed[0].adjacency == {"A": (), "B": ("A",)}


# ---------------------------------------------------------------------------
# Shortest paths with negative weights
# ---------------------------------------------------------------------------
class TestBellmanFord:
    @pytest.mark.parametrize("graph", [WEIGHTED, NEGATIVE])
    def test_distances_match_reference(self, graph):
        last = materialize(bellman_ford(graph, "A")).last
        assert last.distances == ref_shortest(graph, "A")
        assert not last.negative_cycle

    def test_negative_edge_path(self):
        last = materialize(bellman_ford(NEGATIVE, "A", "D")).last
        assert last.path == ("A", "C", "B", "D")
        assert last.message.endswith("cost = 0.0.")

    def test_negative_cycle_is_terminal(self):
        seq = materialize(bellman_ford(CYCLE, "A", "D"))
        flagged = [s for s in seq if s.negative_cycle]
        assert flagged == [seq.last]
        assert set(seq.last.highlighted_nodes) == {"B", "C"}
        assert "negative cycle C → B → C" in seq.last.message

    def test_negative_undirected_edge_is_a_cycle(self):
        g = Graph.from_adjacency({"A": [("B", -1)]}, directed=False)
        assert materialize(bellman_ford(g, "A")).last.negative_cycle

    def test_converges_early(self):
        seq = materialize(bellman_ford({"A": [("B", 1)], "B": [("C", 1)], "C": []}, "A"))
        assert any("converged" in s.message for s in seq)

    def test_unknown_source(self):
        assert len(materialize(bellman_ford(WEIGHTED, "Z"))) == 1


class TestFloydWarshall:
    def test_matrix(self):
        last = materialize(floyd_warshall(WEIGHTED)).last
        assert last.family == "grid"
        assert last.row_header == ("A", "B", "C", "D")
        assert last.grid == (
            (0, 3, 2, 8),
            (None, 0, None, 5),
            (None, 1, 0, 6),
            (None, None, None, 0),
        )

    @pytest.mark.parametrize("graph", [WEIGHTED, NEGATIVE])
    def test_rows_match_single_source_reference(self, graph):
        last = materialize(floyd_warshall(graph)).last
        for i, node in enumerate(last.row_header):
            expected = ref_shortest(graph, node)
            assert dict(zip(last.col_header, last.grid[i])) == expected

    def test_path_between_chosen_pair(self):
        last = materialize(floyd_warshall(WEIGHTED, "A", "D")).last
        assert "A → C → B → D" in last.message
        assert last.active_cell == (0, 3)
        assert last.highlighted == ((0, 2), (2, 1), (1, 3))

    def test_negative_cycle_on_the_diagonal(self):
        last = materialize(floyd_warshall(CYCLE)).last
        assert last.is_valid is False
        assert {last.row_header[i] for i, _ in last.highlighted} == {"B", "C"}

    def test_unknown_target(self):
        assert len(materialize(floyd_warshall(WEIGHTED, "A", "Z"))) == 1


# ---------------------------------------------------------------------------
# Minimum spanning trees
# ---------------------------------------------------------------------------
class TestUnionFind:
    def test_union_and_find(self):
        uf = UnionFind(["a", "b", "c", "d"])
        assert uf.union("a", "b")
        assert uf.union("c", "d")
        assert not uf.union("b", "a")
        assert uf.find("a") == uf.find("b") != uf.find("c")
        assert sorted(sorted(g) for g in uf.groups()) == [["a", "b"], ["c", "d"]]


class TestMST:
    @pytest.mark.parametrize("producer", [prim, kruskal])
    def test_total_weight_matches_reference(self, producer):
        last = materialize(producer(UNDIRECTED)).last
        assert last.total_weight == ref_mst_weight(UNDIRECTED)
        assert len(last.tree_edges) == 4
        assert "complete" in last.message

    def test_kruskal_takes_lightest_edges_first(self):
        last = materialize(kruskal(UNDIRECTED)).last
        assert last.tree_edges == (("A", "B"), ("C", "D"), ("B", "C"), ("C", "E"))

    def test_prim_grows_from_the_source(self):
        seq = materialize(prim(UNDIRECTED, "A"))
        assert seq.first.visited == ("A",)
        assert seq.last.tree_edges == (("A", "B"), ("B", "C"), ("C", "D"), ("C", "E"))

    @pytest.mark.parametrize("producer", [prim, kruskal])
    def test_disconnected_graph_gives_a_forest(self, producer):
        last = materialize(producer({"A": [("B", 1)], "C": [("D", 2)]})).last
        assert "disconnected" in last.message

    @pytest.mark.parametrize("producer", [prim, kruskal])
    def test_directed_graph_rejected(self, producer):
        g = Graph.from_adjacency({"A": [("B", 1)]}, directed=True)
        seq = materialize(producer(g))
        assert len(seq) == 1
        assert "undirected" in seq.last.message
