"""
rat_maze.py — Rat in a Maze
============================
Depth-first search for one path from (0, 0) to (rows-1, cols-1) on a
rectangular 0/1 maze, moving down, right, up, left (in that order).

Cell codes in every GridStep:
    OPEN 0 · WALL 1 · PATH 2 · DEAD_END 3
"""

from typing import Iterator, List, Sequence, Tuple

from algorithms.step import GridStep


OPEN, WALL, PATH, DEAD_END = 0, 1, 2, 3

DIRECTIONS: List[Tuple[int, int, str]] = [
    (1, 0, "down"),
    (0, 1, "right"),
    (-1, 0, "up"),
    (0, -1, "left"),
]

PSEUDOCODE: List[str] = [
    "def solve(r, c):",                                      # 0
    "    if out of bounds or wall or seen: return False",    # 1
    "    mark (r, c) as PATH",                               # 2
    "    if (r, c) == goal: return True",                    # 3
    "    for (dr, dc) in [down, right, up, left]:",          # 4
    "        if solve(r + dr, c + dc): return True",         # 5
    "    mark (r, c) as DEAD_END  # backtrack",              # 6
    "    return False",                                      # 7
]


def rat_maze(maze: Sequence[Sequence[int]]) -> Iterator[GridStep]:
    grid = [list(row) for row in maze or []]

    problem = _validate(grid)
    if problem:
        yield GridStep(grid=grid, message=problem, line_number=0)
        return

    rows, cols = len(grid), len(grid[0])
    goal = (rows - 1, cols - 1)

    if grid[0][0] == WALL or grid[goal[0]][goal[1]] == WALL:
        yield GridStep(
            grid=grid, active_cell=(0, 0), line_number=1,
            message="Blocked: the start or the goal cell is a wall, no path can exist.",
        )
        return

    yield GridStep(
        grid=grid, active_cell=(0, 0), line_number=0,
        message=f"Start at (0, 0). Goal is {goal}.",
    )

    found = yield from _solve(grid, 0, 0, goal)
    if found:
        path = [(r, c) for r in range(rows) for c in range(cols) if grid[r][c] == PATH]
        yield GridStep(
            grid=grid, highlighted=path, is_valid=True, line_number=3,
            message=f"Path found with {len(path)} cell(s).",
        )
    else:
        yield GridStep(
            grid=grid, active_cell=(0, 0), is_valid=False, line_number=7,
            message="No path found: every reachable cell is a dead end.",
        )


def _solve(grid: List[List[int]], r: int, c: int, goal: Tuple[int, int]) -> Iterator[GridStep]:
    if not (0 <= r < len(grid) and 0 <= c < len(grid[0])) or grid[r][c] != OPEN:
        return False

    grid[r][c] = PATH
    yield GridStep(grid=grid, active_cell=(r, c), line_number=2, message=f"Visit ({r}, {c}): mark it as part of the path.")

    if (r, c) == goal:
        yield GridStep(grid=grid, active_cell=(r, c), is_valid=True, line_number=3, message="Goal reached!")
        return True

    for dr, dc, name in DIRECTIONS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < len(grid) and 0 <= nc < len(grid[0]) and grid[nr][nc] == OPEN:
            yield GridStep(
                grid=grid, active_cell=(r, c), compared=[(nr, nc)], line_number=4,
                message=f"From ({r}, {c}) try moving {name} to ({nr}, {nc}).",
            )
            if (yield from _solve(grid, nr, nc, goal)):
                return True

    grid[r][c] = DEAD_END
    yield GridStep(
        grid=grid, active_cell=(r, c), is_valid=False, line_number=6,
        message=f"Dead end at ({r}, {c}). Backtrack.",
    )
    return False


def _validate(grid: List[List[int]]) -> str:
    if not grid or not grid[0]:
        return "The maze is empty."
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        return "The maze must be rectangular: every row needs the same length."
    if any(cell not in (OPEN, WALL) for row in grid for cell in row):
        return "Maze cells must be 0 (open) or 1 (wall)."
    return ""
