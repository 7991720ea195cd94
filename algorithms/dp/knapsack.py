"""
knapsack.py — 0/1 Knapsack
===========================
dp[i][w] = best value using the first i items with capacity w.
After the table is full the chosen items are recovered by walking back
up the rows.
"""

from typing import Iterator, List, Optional, Sequence

from algorithms.step import GridStep


PSEUDOCODE: List[str] = [
    "def knapsack(wt, val, W):",                                         # 0
    "    dp ← (n + 1) × (W + 1) table of 0",                             # 1
    "    for i in 1..n:",                                                # 2
    "        for w in 0..W:",                                            # 3
    "            if wt[i-1] > w: dp[i][w] ← dp[i-1][w]",                 # 4
    "            else: dp[i][w] ← max(dp[i-1][w],",                      # 5
    "                                 val[i-1] + dp[i-1][w - wt[i-1]])", # 6
    "    trace back the chosen items",                                   # 7
]


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> Iterator[GridStep]:
    wt, val = list(weights or []), list(values or [])

    problem = _validate(wt, val, capacity)
    if problem:
        yield GridStep(message=problem, line_number=0)
        return

    n = len(wt)
    rows = ["-"] + [f"#{i + 1} (w={wt[i]}, v={val[i]})" for i in range(n)]
    cols = [str(w) for w in range(capacity + 1)]
    dp: List[List[Optional[int]]] = [[0] * (capacity + 1)] + [[None] * (capacity + 1) for _ in range(n)]

    yield GridStep(
        grid=dp, row_header=rows, col_header=cols, line_number=1,
        message=f"{n} item(s), capacity {capacity}. Row 0 (no items) is all 0.",
    )

    for i in range(1, n + 1):
        w_i, v_i = wt[i - 1], val[i - 1]
        for w in range(capacity + 1):
            if w_i > w:
                dp[i][w] = dp[i - 1][w]
                yield GridStep(
                    grid=dp, row_header=rows, col_header=cols,
                    active_cell=(i, w), compared=[(i - 1, w)], operation="SKIP", line_number=4,
                    message=f"Item {i} (w={w_i}) does not fit in {w}: copy {dp[i][w]} from above.",
                )
                continue

            skip = dp[i - 1][w]
            take = v_i + dp[i - 1][w - w_i]
            dp[i][w] = max(skip, take)
            yield GridStep(
                grid=dp, row_header=rows, col_header=cols,
                active_cell=(i, w), compared=[(i - 1, w), (i - 1, w - w_i)],
                operation="TAKE" if take > skip else "SKIP", line_number=5,
                message=f"Capacity {w}: skip = {skip}, take = {v_i} + {dp[i - 1][w - w_i]} = {take}. Keep {dp[i][w]}.",
            )

    # --- traceback ---
    chosen: List[int] = []
    path = []
    w = capacity
    for i in range(n, 0, -1):
        path.append((i, w))
        if dp[i][w] != dp[i - 1][w]:
            chosen.append(i)
            w -= wt[i - 1]
    chosen.reverse()

    yield GridStep(
        grid=dp, row_header=rows, col_header=cols, highlighted=list(reversed(path)), line_number=7,
        message=f"Best value = {dp[n][capacity]} using item(s) {chosen}." if chosen
        else "No item fits: the best value is 0.",
    )


def _validate(wt: List[int], val: List[int], capacity) -> str:
    if not wt:
        return "Provide at least one item."
    if len(wt) != len(val):
        return f"Weights and values must have the same length ({len(wt)} vs {len(val)})."
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
        return f"Capacity must be a non-negative integer (got {capacity!r})."
    if any(isinstance(x, bool) or not isinstance(x, int) or x < 0 for x in wt + val):
        return "Weights and values must be non-negative integers."
    return ""
