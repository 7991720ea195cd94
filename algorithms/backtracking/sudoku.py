"""
sudoku.py — Sudoku Solver
==========================
Classic 9×9 backtracking: fill the first empty cell with each candidate
1..9 in turn, recurse, and undo on failure.

Before solving, the board is checked for shape (9 rows of 9 ints in
0..9) and for givens that already conflict.  Because a hard puzzle can
take hundreds of thousands of tries, the run stops with an explanatory
Step once `max_steps` Steps have been emitted.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from algorithms.step import GridStep


SIZE = 9
BOX  = 3

DEFAULT_MAX_STEPS = 50_000

PSEUDOCODE: List[str] = [
    "def solve(board):",                             # 0
    "    find the first empty cell (r, c)",          # 1
    "    if none: return True",                      # 2
    "    for num in 1..9:",                          # 3
    "        if is_safe(board, r, c, num):",         # 4
    "            board[r][c] ← num",                 # 5
    "            if solve(board): return True",      # 6
    "            board[r][c] ← 0  # backtrack",      # 7
    "    return False",                              # 8
]


class _Budget:
    def __init__(self, limit: int):
        self.limit = limit
        self.spent = 0

    def charge(self) -> bool:
        """Count one Step; True once the budget is used up."""
        self.spent += 1
        return self.spent >= self.limit


def sudoku(board: Sequence[Sequence[int]], max_steps: int = DEFAULT_MAX_STEPS) -> Iterator[GridStep]:
    grid = [list(row) for row in board or []]

    problem = _validate(grid)
    if problem:
        yield GridStep(grid=grid, message=problem, line_number=0)
        return

    conflict = _first_conflict(grid)
    if conflict:
        (a, b), num = conflict
        yield GridStep(
            grid=grid, highlighted=[a, b], is_valid=False, line_number=4,
            message=f"The givens conflict: {num} appears at {a} and at {b}. The puzzle has no solution.",
        )
        return

    givens = [(r, c) for r in range(SIZE) for c in range(SIZE) if grid[r][c]]
    yield GridStep(
        grid=grid, highlighted=givens, line_number=0,
        message=f"Start the Sudoku solver with {len(givens)} given(s).",
    )

    budget = _Budget(max(1, int(max_steps)))
    result = yield from _solve(grid, budget)

    if result is None:
        yield GridStep(
            grid=grid, line_number=0,
            message=f"Stopped after {budget.spent} steps: the step budget of {budget.limit} was used up.",
        )
    elif result:
        yield GridStep(
            grid=grid, highlighted=givens, is_valid=True, line_number=2,
            message="Sudoku solved!",
        )
    else:
        yield GridStep(
            grid=grid, highlighted=givens, is_valid=False, line_number=8,
            message="No solution exists for this puzzle.",
        )


# ---------------------------------------------------------------------------
# Recursion: returns True (solved), False (dead end) or None (out of budget)
# ---------------------------------------------------------------------------
def _solve(grid: List[List[int]], budget: _Budget) -> Iterator[GridStep]:
    cell = _first_empty(grid)
    if cell is None:
        return True
    r, c = cell

    for num in range(1, SIZE + 1):
        yield GridStep(
            grid=grid, active_cell=(r, c), operation=f"TRY {num}", line_number=3,
            message=f"Trying {num} at ({r}, {c}).",
        )
        if budget.charge():
            return None

        if not _is_safe(grid, r, c, num):
            yield GridStep(
                grid=grid, active_cell=(r, c), is_valid=False, operation=f"TRY {num}", line_number=4,
                message=f"{num} conflicts with its row, column or box.",
            )
            if budget.charge():
                return None
            continue

        grid[r][c] = num
        yield GridStep(
            grid=grid, active_cell=(r, c), is_valid=True, operation=f"PLACE {num}", line_number=5,
            message=f"Place {num} at ({r}, {c}) and recurse.",
        )
        if budget.charge():
            return None

        result = yield from _solve(grid, budget)
        if result is None or result:
            return result

        grid[r][c] = 0
        yield GridStep(
            grid=grid, active_cell=(r, c), operation="BACKTRACK", line_number=7,
            message=f"Backtrack: reset ({r}, {c}).",
        )
        if budget.charge():
            return None

    return False


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _first_empty(grid: List[List[int]]) -> Optional[Tuple[int, int]]:
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                return r, c
    return None


def _is_safe(grid: List[List[int]], row: int, col: int, num: int) -> bool:
    if num in grid[row]:
        return False
    if any(grid[r][col] == num for r in range(SIZE)):
        return False
    br, bc = row - row % BOX, col - col % BOX
    return all(grid[r][c] != num for r in range(br, br + BOX) for c in range(bc, bc + BOX))


def _units():
    for r in range(SIZE):
        yield [(r, c) for c in range(SIZE)]
    for c in range(SIZE):
        yield [(r, c) for r in range(SIZE)]
    for br in range(0, SIZE, BOX):
        for bc in range(0, SIZE, BOX):
            yield [(r, c) for r in range(br, br + BOX) for c in range(bc, bc + BOX)]


def _first_conflict(grid: List[List[int]]):
    for unit in _units():
        seen = {}
        for r, c in unit:
            num = grid[r][c]
            if not num:
                continue
            if num in seen:
                return (seen[num], (r, c)), num
            seen[num] = (r, c)
    return None


def _validate(grid: List[List[int]]) -> str:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        return "A Sudoku board must be 9 rows of 9 cells."
    for row in grid:
        for cell in row:
            if isinstance(cell, bool) or not isinstance(cell, int) or not 0 <= cell <= SIZE:
                return "Sudoku cells must be integers 0..9 (0 = empty)."
    return ""
