"""
lcs.py — Longest Common Subsequence
====================================
Fills the (m+1)×(n+1) table row by row, then traces back from the
bottom-right corner to recover one LCS.  Cells on the traceback path are
returned in `highlighted` on the final Step.
"""

from typing import Iterator, List, Optional

from algorithms.step import GridStep


PSEUDOCODE: List[str] = [
    "def lcs(a, b):",                                            # 0
    "    dp ← (m + 1) × (n + 1) table of 0",                     # 1
    "    for i in 1..m:",                                        # 2
    "        for j in 1..n:",                                    # 3
    "            if a[i-1] == b[j-1]:",                          # 4
    "                dp[i][j] ← dp[i-1][j-1] + 1",               # 5
    "            else:",                                         # 6
    "                dp[i][j] ← max(dp[i-1][j], dp[i][j-1])",    # 7
    "    trace back from dp[m][n]",                              # 8
]


def lcs(s1: str, s2: str) -> Iterator[GridStep]:
    s1, s2 = str(s1 or ""), str(s2 or "")
    m, n = len(s1), len(s2)
    rows = ["-"] + list(s1)
    cols = ["-"] + list(s2)

    dp: List[List[Optional[int]]] = [[None] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = 0
    for j in range(n + 1):
        dp[0][j] = 0

    yield GridStep(
        grid=dp, row_header=rows, col_header=cols, line_number=1,
        message=f"Compare \"{s1}\" with \"{s2}\". Row 0 and column 0 are 0.",
    )

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if s1[i - 1] == s2[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
                yield GridStep(
                    grid=dp, row_header=rows, col_header=cols,
                    active_cell=(i, j), compared=[(i - 1, j - 1)], operation="MATCH", line_number=5,
                    message=f"'{s1[i - 1]}' == '{s2[j - 1]}': dp[{i}][{j}] = {dp[i][j]}.",
                )
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
                yield GridStep(
                    grid=dp, row_header=rows, col_header=cols,
                    active_cell=(i, j), compared=[(i - 1, j), (i, j - 1)], operation="MAX", line_number=7,
                    message=f"'{s1[i - 1]}' != '{s2[j - 1]}': take max(up, left) = {dp[i][j]}.",
                )

    # --- traceback ---
    path = []
    chars = []
    i, j = m, n
    while i > 0 and j > 0:
        path.append((i, j))
        if s1[i - 1] == s2[j - 1]:
            chars.append(s1[i - 1])
            i, j = i - 1, j - 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    result = "".join(reversed(chars))

    yield GridStep(
        grid=dp, row_header=rows, col_header=cols, highlighted=list(reversed(path)), line_number=8,
        message=f"LCS length = {dp[m][n]}: \"{result}\"." if result else "The strings share no common subsequence.",
    )
