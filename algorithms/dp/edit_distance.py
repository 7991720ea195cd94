"""
edit_distance.py — Levenshtein Edit Distance
=============================================
Minimum inserts, deletes and replacements turning s1 into s2.  Every
Step tags the winning operation so the renderer can colour the arrow;
the final Step highlights the edit script's path through the table.
"""

from typing import Iterator, List, Optional

from algorithms.step import GridStep


PSEUDOCODE: List[str] = [
    "def edit_distance(a, b):",                                  # 0
    "    dp[i][0] ← i; dp[0][j] ← j",                            # 1
    "    for i in 1..m:",                                        # 2
    "        for j in 1..n:",                                    # 3
    "            if a[i-1] == b[j-1]:",                          # 4
    "                dp[i][j] ← dp[i-1][j-1]",                   # 5
    "            else:",                                         # 6
    "                dp[i][j] ← 1 + min(dp[i-1][j],    # delete",  # 7
    "                                   dp[i][j-1],    # insert",  # 8
    "                                   dp[i-1][j-1])  # replace", # 9
    "    return dp[m][n]",                                       # 10
]


def edit_distance(s1: str, s2: str) -> Iterator[GridStep]:
    s1, s2 = str(s1 or ""), str(s2 or "")
    m, n = len(s1), len(s2)
    rows = ["-"] + list(s1)
    cols = ["-"] + list(s2)

    dp: List[List[Optional[int]]] = [[None] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    yield GridStep(
        grid=dp, row_header=rows, col_header=cols, line_number=1,
        message=f"Turn \"{s1}\" into \"{s2}\". Base cases: i deletions / j insertions.",
    )

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if s1[i - 1] == s2[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
                yield GridStep(
                    grid=dp, row_header=rows, col_header=cols,
                    active_cell=(i, j), compared=[(i - 1, j - 1)], operation="MATCH", line_number=5,
                    message=f"'{s1[i - 1]}' == '{s2[j - 1]}': no cost, dp[{i}][{j}] = {dp[i][j]}.",
                )
                continue

            delete, insert, replace = dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1]
            best = min(delete, insert, replace)
            dp[i][j] = best + 1
            if best == replace:
                op, line = "REPLACE", 9
            elif best == delete:
                op, line = "DELETE", 7
            else:
                op, line = "INSERT", 8
            yield GridStep(
                grid=dp, row_header=rows, col_header=cols,
                active_cell=(i, j), compared=[(i - 1, j), (i, j - 1), (i - 1, j - 1)],
                operation=op, line_number=line,
                message=f"'{s1[i - 1]}' != '{s2[j - 1]}': 1 + min({delete}, {insert}, {replace}) = {dp[i][j]} ({op}).",
            )

    # --- traceback ---
    path = [(m, n)]
    i, j = m, n
    while i > 0 or j > 0:
        if i > 0 and j > 0 and s1[i - 1] == s2[j - 1]:
            i, j = i - 1, j - 1
        elif i > 0 and j > 0 and dp[i][j] == dp[i - 1][j - 1] + 1:
            i, j = i - 1, j - 1
        elif i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            i -= 1
        else:
            j -= 1
        path.append((i, j))

    yield GridStep(
        grid=dp, row_header=rows, col_header=cols, highlighted=list(reversed(path)), line_number=10,
        message=f"Edit distance = {dp[m][n]}.",
    )
