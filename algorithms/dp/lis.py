"""
lis.py — Longest Increasing Subsequence (O(n²) DP)
===================================================
Drawn as a two-row grid: row 0 holds the input values, row 1 holds
dp[i], the length of the longest strictly increasing subsequence ending
at index i.  The final Step highlights the recovered subsequence in
row 0 and its end cell in row 1.
"""

from typing import Iterator, List, Optional, Sequence

from algorithms.step import GridStep


PSEUDOCODE: List[str] = [
    "def lis(nums):",                                        # 0
    "    dp ← [1] * n; prev ← [None] * n",                   # 1
    "    for i in 1..n-1:",                                  # 2
    "        for j in 0..i-1:",                              # 3
    "            if nums[j] < nums[i]:",                     # 4
    "                if dp[j] + 1 > dp[i]:",                 # 5
    "                    dp[i] ← dp[j] + 1; prev[i] ← j",    # 6
    "    end ← argmax(dp); follow prev from end",            # 7
]

ROWS = ["value", "dp"]


def lis(array: Sequence[int]) -> Iterator[GridStep]:
    nums = list(array)
    n    = len(nums)
    if n == 0:
        yield GridStep(message="The array is empty: the LIS has length 0.", line_number=0)
        return

    dp:   List[int]           = [1] * n
    prev: List[Optional[int]] = [None] * n
    cols = [str(i) for i in range(n)]

    def snap(**fields) -> GridStep:
        return GridStep(grid=[nums, dp], row_header=ROWS, col_header=cols, **fields)

    yield snap(line_number=1, message="Every element alone is an increasing subsequence: dp[i] = 1.")

    for i in range(1, n):
        for j in range(i):
            if nums[j] < nums[i] and dp[j] + 1 > dp[i]:
                dp[i]   = dp[j] + 1
                prev[i] = j
                yield snap(
                    active_cell=(1, i), compared=[(0, j), (0, i), (1, j)], operation="EXTEND",
                    line_number=6,
                    message=f"{nums[j]} < {nums[i]}: extend the run ending at {j}. dp[{i}] = {dp[i]}.",
                )
            else:
                reason = (
                    f"{nums[j]} ≥ {nums[i]}: cannot extend"
                    if nums[j] >= nums[i]
                    else f"dp[{j}] + 1 = {dp[j] + 1} is not longer than dp[{i}] = {dp[i]}"
                )
                yield snap(
                    active_cell=(1, i), compared=[(0, j), (0, i)], line_number=4,
                    message=f"Compare index {j} with {i}: {reason}.",
                )

    end = max(range(n), key=lambda k: dp[k])
    chain: List[int] = []
    cur: Optional[int] = end
    while cur is not None:
        chain.append(cur)
        cur = prev[cur]
    chain.reverse()

    yield snap(
        active_cell=(1, end), highlighted=[(0, k) for k in chain], line_number=7,
        message=f"LIS length = {dp[end]}: {', '.join(str(nums[k]) for k in chain)}.",
    )
