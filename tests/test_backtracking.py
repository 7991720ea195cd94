import pytest

from algorithms.backtracking.n_queens import n_queens
from algorithms.backtracking.rat_maze import DEAD_END, PATH, rat_maze
from algorithms.backtracking.sudoku import sudoku
from engine import materialize


SOLVED_SUDOKU = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def with_blanks(board, cells):
    grid = [list(row) for row in board]
    for r, c in cells:
        grid[r][c] = 0
    return grid


# ---------------------------------------------------------------------------
# N-Queens
# ---------------------------------------------------------------------------
class TestNQueens:
    @pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
    def test_finds_non_attacking_placement(self, n):
        last = materialize(n_queens(n)).last
        assert last.message == "Found a valid solution!"
        cols = last.solution
        assert sorted(cols) == list(range(n))
        for r1 in range(n):
            for r2 in range(r1 + 1, n):
                assert abs(cols[r1] - cols[r2]) != r2 - r1

    def test_board_matches_solution(self):
        last = materialize(n_queens(4)).last
        for r, c in enumerate(last.solution):
            assert last.grid[r][c] == 1
        assert sum(map(sum, last.grid)) == 4

    @pytest.mark.parametrize("n", [2, 3])
    def test_no_solution(self, n):
        seq = materialize(n_queens(n))
        assert seq.last.message == f"No valid placement exists for N = {n}."
        assert not any(s.message == "Found a valid solution!" for s in seq)

    def test_backtracking_steps_are_emitted(self):
        seq = materialize(n_queens(4))
        assert any(s.message.startswith("Backtrack") for s in seq)

    @pytest.mark.parametrize("n", [0, -2, True, "4"])
    def test_rejects_bad_n(self, n):
        seq = materialize(n_queens(n))
        assert len(seq) == 1
        assert "positive integer" in seq.last.message

    def test_earlier_steps_do_not_change(self):
        seq = materialize(n_queens(4))
        assert seq.first.solution == (-1, -1, -1, -1)


# ---------------------------------------------------------------------------
# Rat in a maze
# ---------------------------------------------------------------------------
class TestRatMaze:
    def test_path_found(self):
        maze = [
            [0, 1, 0, 0],
            [0, 0, 0, 1],
            [1, 0, 1, 0],
            [0, 0, 0, 0],
        ]
        last = materialize(rat_maze(maze)).last
        assert last.message == "Path found with 7 cell(s)."
        assert last.highlighted == ((0, 0), (1, 0), (1, 1), (2, 1), (3, 1), (3, 2), (3, 3))
        assert maze[0][0] == 0

    def test_no_path(self):
        last = materialize(rat_maze([[0, 1], [1, 0]])).last
        assert last.message.startswith("No path found")
        assert last.grid[0][0] == DEAD_END

    def test_dead_ends_are_marked_while_backtracking(self):
        maze = [
            [0, 0, 0],
            [0, 1, 0],
            [0, 1, 0],
        ]
        seq = materialize(rat_maze(maze))
        last = seq.last
        assert last.message == "Path found with 5 cell(s)."
        assert last.grid[1][0] == DEAD_END
        assert last.grid[2][0] == DEAD_END
        assert last.grid[2][2] == PATH
        assert any(s.message == "Dead end at (2, 0). Backtrack." for s in seq)

    def test_blocked_goal(self):
        seq = materialize(rat_maze([[0, 0], [0, 1]]))
        assert len(seq) == 1
        assert seq.last.message.startswith("Blocked")

    @pytest.mark.parametrize("maze", [[], [[0, 0], [0]], [[0, 2], [0, 0]]])
    def test_invalid_mazes(self, maze):
        assert len(materialize(rat_maze(maze))) == 1


# ---------------------------------------------------------------------------
# Sudoku
# ---------------------------------------------------------------------------
class TestSudoku:
    def test_solves_nearly_complete_board(self):
        board = with_blanks(SOLVED_SUDOKU, [(0, 2), (4, 4), (8, 8), (6, 0)])
        last = materialize(sudoku(board)).last
        assert last.message == "Sudoku solved!"
        assert [list(row) for row in last.grid] == SOLVED_SUDOKU

    def test_unsolvable_board(self):
        board = [[0] * 9 for _ in range(9)]
        board[0] = [0, 2, 3, 4, 5, 6, 7, 8, 9]
        board[1][0] = 1
        last = materialize(sudoku(board)).last
        assert last.message == "No solution exists for this puzzle."

    def test_conflicting_givens(self):
        board = [[0] * 9 for _ in range(9)]
        board[0][0] = board[0][5] = 7
        seq = materialize(sudoku(board))
        assert len(seq) == 1
        assert "conflict" in seq.last.message

    def test_wrong_shape(self):
        seq = materialize(sudoku([[0] * 9] * 8))
        assert seq.last.message == "A Sudoku board must be 9 rows of 9 cells."

    def test_step_budget(self):
        seq = materialize(sudoku([[0] * 9 for _ in range(9)], max_steps=10))
        assert seq.last.message.startswith("Stopped after 10 steps")
        assert len(seq) == 12     # start + 10 counted steps + verdict

    def test_backtrack_restores_cell(self):
        board = with_blanks(SOLVED_SUDOKU, [(0, 0), (0, 1), (1, 0), (1, 1)])
        seq = materialize(sudoku(board))
        assert seq.last.message == "Sudoku solved!"
        for step in seq:
            if step.operation == "BACKTRACK":
                r, c = step.active_cell
                assert step.grid[r][c] == 0
