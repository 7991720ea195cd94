"""
algorithms/graphs/
------------------
Producers whose input is a graph.  Every one accepts a graph.Graph, an
adjacency mapping or adjacency-list text (see graph.as_graph).  All yield
GraphSteps except Floyd–Warshall, which draws its distance matrix as a
GridStep.
"""
