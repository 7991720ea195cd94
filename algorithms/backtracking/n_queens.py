"""
n_queens.py — N-Queens
=======================
Places N non-attacking queens row by row and stops at the first full
placement.

Shared scratch buffer:
  `cols[row]` holds the column of the queen in each row (-1 = empty).
  It is mutated in place while recursing and explicitly reset to -1 on
  backtrack; every GridStep deep-copies it, so earlier Steps never change.

Yields a GridStep at:
  1. Start (empty board)
  2. Every tentative placement          →  active_cell
  3. Safety verdict                     →  is_valid True / False
  4. Backtrack out of a row             →  explicit undo Step
  5. "Found a valid solution!" or the no-solution verdict
"""

from typing import Iterator, List

from algorithms.step import GridStep


PSEUDOCODE: List[str] = [
    "def solve(row):",                               # 0
    "    if row == N: return True",                  # 1
    "    for col in range(N):",                      # 2
    "        if is_safe(row, col):",                 # 3
    "            place queen at (row, col)",         # 4
    "            if solve(row + 1): return True",    # 5
    "            remove queen  # backtrack",         # 6
    "    return False",                              # 7
]


def n_queens(n: int) -> Iterator[GridStep]:
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        yield GridStep(message=f"N must be a positive integer (got {n!r}).", line_number=0)
        return

    cols = [-1] * n
    yield GridStep(
        grid=_board(cols, n), solution=cols, line_number=0,
        message=f"Start {n}-Queens on an empty {n}×{n} board.",
    )

    solved = yield from _solve(cols, n, 0)
    if not solved:
        yield GridStep(
            grid=_board(cols, n), solution=cols, line_number=7,
            message=f"No valid placement exists for N = {n}.",
        )


# ---------------------------------------------------------------------------
# Recursion
# ---------------------------------------------------------------------------
def _solve(cols: List[int], n: int, row: int) -> Iterator[GridStep]:
    if row == n:
        yield GridStep(
            grid=_board(cols, n), solution=cols, is_valid=True, line_number=1,
            highlighted=[(r, c) for r, c in enumerate(cols)],
            message="Found a valid solution!",
        )
        return True

    for col in range(n):
        cols[row] = col
        yield GridStep(
            grid=_board(cols, n), solution=cols, active_cell=(row, col), line_number=2,
            message=f"Trying queen at row {row}, col {col}.",
        )

        attackers = _attackers(cols, row, col)
        if attackers:
            yield GridStep(
                grid=_board(cols, n), solution=cols, active_cell=(row, col),
                compared=attackers, is_valid=False, line_number=3,
                message=f"Unsafe: attacked by the queen at {attackers[0]}.",
            )
            cols[row] = -1
            continue

        yield GridStep(
            grid=_board(cols, n), solution=cols, active_cell=(row, col), is_valid=True, line_number=4,
            message=f"Safe! Place the queen and recurse into row {row + 1}.",
        )
        if (yield from _solve(cols, n, row + 1)):
            return True

        cols[row] = -1
        yield GridStep(
            grid=_board(cols, n), solution=cols, active_cell=(row, col), line_number=6,
            message=f"Backtrack: remove the queen at ({row}, {col}).",
        )

    return False


def _attackers(cols: List[int], row: int, col: int) -> List[tuple]:
    hits = []
    for r in range(row):
        c = cols[r]
        if c == col or abs(c - col) == abs(r - row):
            hits.append((r, c))
    return hits


def _board(cols: List[int], n: int) -> List[List[int]]:
    return [[1 if cols[r] == c else 0 for c in range(n)] for r in range(n)]
