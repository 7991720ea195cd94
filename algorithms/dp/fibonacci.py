"""
fibonacci.py — Fibonacci (bottom-up tabulation)
================================================
The table is drawn as a single-row grid: dp[i] = dp[i-1] + dp[i-2].
"""

from typing import Iterator, List, Optional

from algorithms.step import GridStep


PSEUDOCODE: List[str] = [
    "def fib(n):",                               # 0
    "    dp ← [0] * (n + 1)",                    # 1
    "    dp[0], dp[1] ← 0, 1",                   # 2
    "    for i in range(2, n + 1):",             # 3
    "        dp[i] ← dp[i - 1] + dp[i - 2]",     # 4
    "    return dp[n]",                          # 5
]


def fibonacci(n: int) -> Iterator[GridStep]:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        yield GridStep(message=f"n must be a non-negative integer (got {n!r}).", line_number=0)
        return

    dp: List[Optional[int]] = [None] * (n + 1)
    header = [str(i) for i in range(n + 1)]

    dp[0] = 0
    if n >= 1:
        dp[1] = 1
    yield GridStep(
        grid=[dp], col_header=header, row_header=["dp"],
        highlighted=[(0, i) for i in range(min(n, 1) + 1)], line_number=2,
        message="Base cases: dp[0] = 0" + (", dp[1] = 1." if n >= 1 else "."),
    )

    for i in range(2, n + 1):
        dp[i] = dp[i - 1] + dp[i - 2]
        yield GridStep(
            grid=[dp], col_header=header, row_header=["dp"],
            active_cell=(0, i), compared=[(0, i - 1), (0, i - 2)], line_number=4,
            message=f"dp[{i}] = dp[{i - 1}] + dp[{i - 2}] = {dp[i - 1]} + {dp[i - 2]} = {dp[i]}.",
        )

    yield GridStep(
        grid=[dp], col_header=header, row_header=["dp"],
        highlighted=[(0, n)], line_number=5,
        message=f"fib({n}) = {dp[n]}.",
    )
