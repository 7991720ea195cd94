"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every producer the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble_sort": AlgoInfo(key, label, family, fn, pseudocode, defaults, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and the web layer both
consume it, so adding an algorithm is: write the generator, add one
entry here.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all producer modules
# ---------------------------------------------------------------------------
from algorithms.sorting.bubble_sort       import bubble_sort,      PSEUDOCODE as _bubble_pc
from algorithms.sorting.selection_sort    import selection_sort,   PSEUDOCODE as _selection_pc
from algorithms.sorting.insertion_sort    import insertion_sort,   PSEUDOCODE as _insertion_pc
from algorithms.sorting.merge_sort        import merge_sort,       PSEUDOCODE as _merge_pc
from algorithms.sorting.quick_sort        import quick_sort,       PSEUDOCODE as _quick_pc
from algorithms.sorting.heap_sort         import heap_sort,        PSEUDOCODE as _heap_pc
from algorithms.sorting.counting_sort     import counting_sort,    PSEUDOCODE as _counting_pc
from algorithms.searching.linear_search   import linear_search,    PSEUDOCODE as _linear_pc
from algorithms.searching.binary_search   import binary_search,    PSEUDOCODE as _binary_pc
from algorithms.backtracking.n_queens     import n_queens,         PSEUDOCODE as _queens_pc
from algorithms.backtracking.rat_maze     import rat_maze,         PSEUDOCODE as _maze_pc
from algorithms.backtracking.sudoku       import sudoku,           PSEUDOCODE as _sudoku_pc
from algorithms.dp.fibonacci              import fibonacci,        PSEUDOCODE as _fib_pc
from algorithms.dp.lcs                    import lcs,              PSEUDOCODE as _lcs_pc
from algorithms.dp.knapsack               import knapsack,         PSEUDOCODE as _knap_pc
from algorithms.dp.edit_distance          import edit_distance,    PSEUDOCODE as _edit_pc
from algorithms.dp.coin_change            import coin_change,      PSEUDOCODE as _coin_pc
from algorithms.dp.lis                    import lis,              PSEUDOCODE as _lis_pc
from algorithms.graphs.bfs                import bfs,              PSEUDOCODE as _bfs_pc
from algorithms.graphs.dfs                import dfs,              PSEUDOCODE as _dfs_pc
from algorithms.graphs.dijkstra           import dijkstra,         PSEUDOCODE as _dij_pc
from algorithms.graphs.topological_sort   import topological_sort, PSEUDOCODE as _topo_pc
from algorithms.graphs.kosaraju           import kosaraju,         PSEUDOCODE as _scc_pc
from algorithms.graphs.bellman_ford       import bellman_ford,     PSEUDOCODE as _bf_pc
from algorithms.graphs.floyd_warshall     import floyd_warshall,   PSEUDOCODE as _fw_pc
from algorithms.graphs.mst                import (
    prim, kruskal, PRIM_PSEUDOCODE as _prim_pc, KRUSKAL_PSEUDOCODE as _kruskal_pc,
)
from algorithms.strings.kmp               import kmp,              PSEUDOCODE as _kmp_pc
from algorithms.strings.rabin_karp        import rabin_karp,       PSEUDOCODE as _rk_pc
from algorithms.bits.operators            import (
    bitwise, count_set_bits, power_of_two, PSEUDOCODE as _bit_pc,
)
from algorithms.hashing.open_addressing   import open_addressing,  PSEUDOCODE as _probe_pc, EMPTY
from algorithms.hashing.chaining          import chaining,         PSEUDOCODE as _chain_pc
from algorithms.linked_list.singly        import linked_list,      PSEUDOCODE as _ll_pc


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each producer
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bubble_sort"
    label:            str                    # human label, e.g. "Bubble Sort"
    family:           str                    # Step family the producer yields
    fn:               Callable               # the generator function
    pseudocode:       List[str]              # lines for the side-panel
    defaults:         Dict[str, Any] = field(default_factory=dict)   # demo parameters
    tags:             List[str]      = field(default_factory=list)   # e.g. ["sorting", "stable"]
    complexity_time:  str            = ""    # e.g. "O(n²)"
    complexity_space: str            = ""    # e.g. "O(1)"
    description:      str            = ""    # one-liner for the UI card

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":              self.key,
            "label":            self.label,
            "family":           self.family,
            "pseudocode":       list(self.pseudocode),
            "defaults":         self.defaults,
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


_DEMO_ARRAY  = [5, 3, 8, 1, 9, 2, 7]
_DEMO_GRAPH  = {"A": ["B", "C"], "B": ["D"], "C": ["D", "E"], "D": ["F"], "E": ["F"], "F": []}
_DEMO_WGRAPH = {"A": [("B", 4), ("C", 2)], "B": [("D", 5)], "C": [("B", 1), ("D", 8)], "D": []}
_DEMO_SCC    = {"A": ["B"], "B": ["C"], "C": ["A", "D"], "D": ["E"], "E": ["F"], "F": ["D"]}
_DEMO_NEG    = {"A": [("B", 4), ("C", 2)], "B": [("D", -3)], "C": [("B", 1), ("D", 6)], "D": []}
_DEMO_MST    = {"A": [("B", 1), ("C", 4)], "B": [("C", 2), ("D", 5)], "C": [("D", 1), ("E", 3)], "D": [("E", 6)], "E": []}
_DEMO_MAZE   = [
    [0, 1, 0, 0],
    [0, 0, 0, 1],
    [1, 0, 1, 0],
    [0, 0, 0, 0],
]
_DEMO_SUDOKU = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    # --- sorting ---
    "bubble_sort": AlgoInfo(
        key="bubble_sort", label="Bubble Sort", family="array", fn=bubble_sort, pseudocode=_bubble_pc,
        defaults={"array": _DEMO_ARRAY}, tags=["sorting", "stable", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs. Stops early when a pass makes no swap.",
    ),
    "selection_sort": AlgoInfo(
        key="selection_sort", label="Selection Sort", family="array", fn=selection_sort, pseudocode=_selection_pc,
        defaults={"array": _DEMO_ARRAY}, tags=["sorting", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Selects the minimum of the unsorted suffix and swaps it into place.",
    ),
    "insertion_sort": AlgoInfo(
        key="insertion_sort", label="Insertion Sort", family="array", fn=insertion_sort, pseudocode=_insertion_pc,
        defaults={"array": _DEMO_ARRAY}, tags=["sorting", "stable", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Grows a sorted prefix by shifting each new key left into position.",
    ),
    "merge_sort": AlgoInfo(
        key="merge_sort", label="Merge Sort", family="array", fn=merge_sort, pseudocode=_merge_pc,
        defaults={"array": _DEMO_ARRAY}, tags=["sorting", "stable", "divide-and-conquer", "recursive"],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits in half, sorts each half recursively, merges the results.",
    ),
    "quick_sort": AlgoInfo(
        key="quick_sort", label="Quick Sort", family="array", fn=quick_sort, pseudocode=_quick_pc,
        defaults={"array": _DEMO_ARRAY}, tags=["sorting", "in-place", "divide-and-conquer", "recursive"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then recurse on both sides.",
    ),
    "heap_sort": AlgoInfo(
        key="heap_sort", label="Heap Sort", family="array", fn=heap_sort, pseudocode=_heap_pc,
        defaults={"array": _DEMO_ARRAY}, tags=["sorting", "in-place", "recursive"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then repeatedly moves the root behind the heap.",
    ),
    "counting_sort": AlgoInfo(
        key="counting_sort", label="Counting Sort", family="array", fn=counting_sort, pseudocode=_counting_pc,
        defaults={"array": [4, 2, 2, 8, 3, 3, 1]}, tags=["sorting", "stable", "non-comparison"],
        complexity_time="O(n + k)", complexity_space="O(n + k)",
        description="Counts occurrences of each value, then places them by prefix sums.",
    ),

    # --- searching ---
    "linear_search": AlgoInfo(
        key="linear_search", label="Linear Search", family="array", fn=linear_search, pseudocode=_linear_pc,
        defaults={"array": _DEMO_ARRAY, "target": 9}, tags=["searching"],
        complexity_time="O(n)", complexity_space="O(1)",
        description="Checks every element left to right.",
    ),
    "binary_search": AlgoInfo(
        key="binary_search", label="Binary Search", family="array", fn=binary_search, pseudocode=_binary_pc,
        defaults={"array": [1, 3, 5, 7, 9, 11, 13], "target": 11}, tags=["searching", "sorted-input"],
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Halves the search range each step. Needs sorted input.",
    ),

    # --- backtracking ---
    "n_queens": AlgoInfo(
        key="n_queens", label="N-Queens", family="grid", fn=n_queens, pseudocode=_queens_pc,
        defaults={"n": 4}, tags=["backtracking", "recursive"],
        complexity_time="O(N!)", complexity_space="O(N)",
        description="Places one queen per row, backtracking out of attacked squares.",
    ),
    "rat_maze": AlgoInfo(
        key="rat_maze", label="Rat in a Maze", family="grid", fn=rat_maze, pseudocode=_maze_pc,
        defaults={"maze": _DEMO_MAZE}, tags=["backtracking", "recursive"],
        complexity_time="O(rows · cols)", complexity_space="O(rows · cols)",
        description="Depth-first walk from top-left to bottom-right, marking dead ends.",
    ),
    "sudoku": AlgoInfo(
        key="sudoku", label="Sudoku Solver", family="grid", fn=sudoku, pseudocode=_sudoku_pc,
        defaults={"board": _DEMO_SUDOKU}, tags=["backtracking", "recursive"],
        complexity_time="O(9^empty)", complexity_space="O(81)",
        description="Tries 1..9 in each empty cell, undoing placements that lead nowhere.",
    ),

    # --- dynamic programming ---
    "fibonacci": AlgoInfo(
        key="fibonacci", label="Fibonacci (tabulation)", family="grid", fn=fibonacci, pseudocode=_fib_pc,
        defaults={"n": 10}, tags=["dp"],
        complexity_time="O(n)", complexity_space="O(n)",
        description="Fills dp[i] = dp[i-1] + dp[i-2] bottom-up.",
    ),
    "lcs": AlgoInfo(
        key="lcs", label="Longest Common Subsequence", family="grid", fn=lcs, pseudocode=_lcs_pc,
        defaults={"s1": "ABCBDAB", "s2": "BDCABA"}, tags=["dp", "strings"],
        complexity_time="O(m · n)", complexity_space="O(m · n)",
        description="Classic 2-D table with a traceback to recover one LCS.",
    ),
    "knapsack": AlgoInfo(
        key="knapsack", label="0/1 Knapsack", family="grid", fn=knapsack, pseudocode=_knap_pc,
        defaults={"weights": [1, 3, 4, 5], "values": [1, 4, 5, 7], "capacity": 7}, tags=["dp"],
        complexity_time="O(n · W)", complexity_space="O(n · W)",
        description="Best value per (items, capacity) cell, then walk back to the chosen items.",
    ),
    "edit_distance": AlgoInfo(
        key="edit_distance", label="Edit Distance", family="grid", fn=edit_distance, pseudocode=_edit_pc,
        defaults={"s1": "kitten", "s2": "sitting"}, tags=["dp", "strings"],
        complexity_time="O(m · n)", complexity_space="O(m · n)",
        description="Levenshtein distance with insert, delete and replace.",
    ),
    "coin_change": AlgoInfo(
        key="coin_change", label="Coin Change (min coins)", family="grid", fn=coin_change, pseudocode=_coin_pc,
        defaults={"coins": [1, 2, 5], "amount": 11}, tags=["dp"],
        complexity_time="O(len(coins) · amount)", complexity_space="O(amount)",
        description="Fewest coins summing to the amount; ∞ marks unreachable amounts.",
    ),
    "lis": AlgoInfo(
        key="lis", label="Longest Increasing Subsequence", family="grid", fn=lis, pseudocode=_lis_pc,
        defaults={"array": [10, 9, 2, 5, 3, 7, 101, 18]}, tags=["dp"],
        complexity_time="O(n²)", complexity_space="O(n)",
        description="dp[i] is the longest increasing run ending at i; prev links recover it.",
    ),

    # --- graphs ---
    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", family="graph", fn=bfs, pseudocode=_bfs_pc,
        defaults={"graph": _DEMO_GRAPH, "source": "A", "target": "F"}, tags=["graph", "traversal", "shortest-path"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer. Finds the shortest path by hop count.",
    ),
    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", family="graph", fn=dfs, pseudocode=_dfs_pc,
        defaults={"graph": _DEMO_GRAPH, "source": "A"}, tags=["graph", "traversal", "recursive"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee shortest paths.",
    ),
    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", family="graph", fn=dijkstra, pseudocode=_dij_pc,
        defaults={"graph": _DEMO_WGRAPH, "source": "A", "target": "D"}, tags=["graph", "weighted", "shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily finalises the closest node. Optimal for non-negative weights.",
    ),
    "topological_sort": AlgoInfo(
        key="topological_sort", label="Topological Sort (Kahn)", family="graph", fn=topological_sort,
        pseudocode=_topo_pc, defaults={"graph": _DEMO_GRAPH}, tags=["graph", "dag"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Peels off in-degree-0 nodes. Leftover nodes reveal a cycle.",
    ),
    "kosaraju": AlgoInfo(
        key="kosaraju", label="Strongly Connected Components (Kosaraju)", family="graph", fn=kosaraju,
        pseudocode=_scc_pc, defaults={"graph": _DEMO_SCC}, tags=["graph", "components", "recursive"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Finish order on G, then DFS on the transposed graph.",
    ),
    "bellman_ford": AlgoInfo(
        key="bellman_ford", label="Bellman–Ford", family="graph", fn=bellman_ford, pseudocode=_bf_pc,
        defaults={"graph": _DEMO_NEG, "source": "A", "target": "D"},
        tags=["graph", "weighted", "shortest-path", "negative-weights"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Relaxes every edge V-1 times; one extra pass exposes negative cycles.",
    ),
    "floyd_warshall": AlgoInfo(
        key="floyd_warshall", label="Floyd–Warshall", family="grid", fn=floyd_warshall, pseudocode=_fw_pc,
        defaults={"graph": _DEMO_WGRAPH, "source": "A", "target": "D"},
        tags=["graph", "weighted", "shortest-path", "all-pairs", "dp"],
        complexity_time="O(V³)", complexity_space="O(V²)",
        description="All-pairs distances by allowing one more intermediate node per round.",
    ),
    "prim": AlgoInfo(
        key="prim", label="Minimum Spanning Tree (Prim)", family="graph", fn=prim, pseudocode=_prim_pc,
        defaults={"graph": _DEMO_MST, "source": "A"}, tags=["graph", "weighted", "mst", "greedy"],
        complexity_time="O(E log V)", complexity_space="O(V + E)",
        description="Grows one tree by always taking the lightest edge that leaves it.",
    ),
    "kruskal": AlgoInfo(
        key="kruskal", label="Minimum Spanning Tree (Kruskal)", family="graph", fn=kruskal,
        pseudocode=_kruskal_pc, defaults={"graph": _DEMO_MST}, tags=["graph", "weighted", "mst", "greedy", "union-find"],
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Lightest edges first, skipping any that would close a cycle (union-find).",
    ),

    # --- strings ---
    "kmp": AlgoInfo(
        key="kmp", label="Knuth–Morris–Pratt", family="string", fn=kmp, pseudocode=_kmp_pc,
        defaults={"text": "ABABDABACDABABCABAB", "pattern": "ABABCABAB"}, tags=["strings", "pattern-matching"],
        complexity_time="O(n + m)", complexity_space="O(m)",
        description="Uses the LPS table to never re-read a text character.",
    ),
    "rabin_karp": AlgoInfo(
        key="rabin_karp", label="Rabin–Karp", family="string", fn=rabin_karp, pseudocode=_rk_pc,
        defaults={"text": "GEEKS FOR GEEKS", "pattern": "GEEK"}, tags=["strings", "pattern-matching", "hashing"],
        complexity_time="O(n + m) avg", complexity_space="O(1)",
        description="Rolling hash over a sliding window; verifies on hash hits.",
    ),

    # --- bits ---
    "bitwise": AlgoInfo(
        key="bitwise", label="Bitwise Operators", family="bit", fn=bitwise, pseudocode=_bit_pc,
        defaults={"operation": "AND", "a": 12, "b": 10}, tags=["bits"],
        complexity_time="O(width)", complexity_space="O(1)",
        description="AND, OR, XOR, NOT and shifts over 8-bit values.",
    ),
    "count_set_bits": AlgoInfo(
        key="count_set_bits", label="Count Set Bits (Kernighan)", family="bit", fn=count_set_bits,
        pseudocode=_bit_pc, defaults={"value": 29}, tags=["bits"],
        complexity_time="O(set bits)", complexity_space="O(1)",
        description="n & (n - 1) clears the lowest set bit each round.",
    ),
    "power_of_two": AlgoInfo(
        key="power_of_two", label="Power of Two Check", family="bit", fn=power_of_two,
        pseudocode=_bit_pc, defaults={"value": 16}, tags=["bits"],
        complexity_time="O(1)", complexity_space="O(1)",
        description="A power of two has exactly one set bit.",
    ),

    # --- hashing ---
    "open_addressing": AlgoInfo(
        key="open_addressing", label="Hashing: Open Addressing", family="probing", fn=open_addressing,
        pseudocode=_probe_pc,
        defaults={"operation": "insert", "key": 23, "table": [EMPTY, 11, EMPTY, 3, 13, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY]},
        tags=["hashing", "linear-probing"],
        complexity_time="O(1) avg, O(n) worst", complexity_space="O(n)",
        description="Linear probing with tombstones for deletion.",
    ),
    "chaining": AlgoInfo(
        key="chaining", label="Hashing: Separate Chaining", family="chaining", fn=chaining,
        pseudocode=_chain_pc,
        defaults={"operation": "insert", "key": 15, "buckets": [[7], [8], [], [], [], [], []]},
        tags=["hashing"],
        complexity_time="O(1) avg, O(n) worst", complexity_space="O(n)",
        description="Each bucket keeps a chain of colliding keys.",
    ),

    # --- linked list ---
    "linked_list": AlgoInfo(
        key="linked_list", label="Singly Linked List", family="linked_list", fn=linked_list,
        pseudocode=_ll_pc, defaults={"operation": "reverse", "values": [1, 2, 3, 4]},
        tags=["linked-list"],
        complexity_time="O(n)", complexity_space="O(1)",
        description="Insert, search, delete and in-place reversal with pointer badges.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


def algorithms_by_family(family: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.family == family]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "algorithms_by_family",
]
