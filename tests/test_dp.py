import pytest

from algorithms.dp.coin_change import coin_change
from algorithms.dp.edit_distance import edit_distance
from algorithms.dp.fibonacci import fibonacci
from algorithms.dp.knapsack import knapsack
from algorithms.dp.lcs import lcs
from algorithms.dp.lis import lis
from engine import materialize


# ---------------------------------------------------------------------------
# Plain reference implementations
# ---------------------------------------------------------------------------
def ref_lcs(a, b):
    dp = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            dp[i][j] = dp[i - 1][j - 1] + 1 if a[i - 1] == b[j - 1] else max(dp[i - 1][j], dp[i][j - 1])
    return dp[-1][-1]


def ref_edit(a, b):
    prev = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        cur = [i] + [0] * len(b)
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            cur[j] = min(prev[j] + 1, cur[j - 1] + 1, prev[j - 1] + cost)
        prev = cur
    return prev[-1]


def ref_knapsack(wt, val, cap):
    best = [0] * (cap + 1)
    for w_i, v_i in zip(wt, val):
        for w in range(cap, w_i - 1, -1):
            best[w] = max(best[w], best[w - w_i] + v_i)
    return best[cap]


def ref_lis(nums):
    best = [1] * len(nums)
    for i in range(len(nums)):
        for j in range(i):
            if nums[j] < nums[i]:
                best[i] = max(best[i], best[j] + 1)
    return max(best, default=0)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------
class TestFibonacci:
    @pytest.mark.parametrize("n,expected", [(0, 0), (1, 1), (2, 1), (10, 55), (20, 6765)])
    def test_values(self, n, expected):
        last = materialize(fibonacci(n)).last
        assert last.grid[0][n] == expected
        assert last.message == f"fib({n}) = {expected}."

    def test_single_row_table(self):
        last = materialize(fibonacci(5)).last
        assert len(last.grid) == 1
        assert last.grid[0] == (0, 1, 1, 2, 3, 5)

    def test_negative(self):
        assert len(materialize(fibonacci(-1))) == 1


class TestLCS:
    @pytest.mark.parametrize("a,b", [("ABCBDAB", "BDCABA"), ("AGGTAB", "GXTXAYB"), ("abc", "def"), ("", "x")])
    def test_length_matches_reference(self, a, b):
        last = materialize(lcs(a, b)).last
        assert last.grid[len(a)][len(b)] == ref_lcs(a, b)

    def test_traceback_message(self):
        last = materialize(lcs("AGGTAB", "GXTXAYB")).last
        assert last.message == 'LCS length = 4: "GTAB".'
        assert last.highlighted


class TestKnapsack:
    def test_reference_run(self):
        last = materialize(knapsack([1, 3, 4, 5], [1, 4, 5, 7], 7)).last
        assert last.grid[4][7] == 9
        assert last.message == "Best value = 9 using item(s) [2, 3]."

    @pytest.mark.parametrize("wt,val,cap", [([2, 3, 4], [3, 4, 5], 5), ([5], [10], 4), ([1, 1, 1], [1, 2, 3], 2)])
    def test_matches_reference(self, wt, val, cap):
        last = materialize(knapsack(wt, val, cap)).last
        assert last.grid[len(wt)][cap] == ref_knapsack(wt, val, cap)

    def test_mismatched_lists(self):
        seq = materialize(knapsack([1, 2], [3], 5))
        assert len(seq) == 1
        assert "same length" in seq.last.message


class TestEditDistance:
    @pytest.mark.parametrize("a,b", [("kitten", "sitting"), ("flaw", "lawn"), ("", "abc"), ("same", "same")])
    def test_matches_reference(self, a, b):
        last = materialize(edit_distance(a, b)).last
        assert last.message == f"Edit distance = {ref_edit(a, b)}."

    def test_operations_are_tagged(self):
        ops = {s.operation for s in materialize(edit_distance("kitten", "sitting"))}
        assert {"MATCH", "REPLACE"} <= ops


class TestCoinChange:
    def test_reference_run(self):
        last = materialize(coin_change([1, 2, 5], 11)).last
        assert last.message == "Minimum coins for 11 = 3."
        assert last.grid[0][11] == 3

    def test_unreachable(self):
        last = materialize(coin_change([2], 3)).last
        assert "cannot be made" in last.message
        assert last.grid[0][3] is None

    @pytest.mark.parametrize("coins", [[], [0, 1], [-5]])
    def test_invalid_coins(self, coins):
        assert len(materialize(coin_change(coins, 4))) == 1


class TestLIS:
    @pytest.mark.parametrize("nums", [
        [10, 9, 2, 5, 3, 7, 101, 18],
        [0, 1, 0, 3, 2, 3],
        [7, 7, 7, 7],
        [5, 4, 3, 2, 1],
        [-2, -1, -3, 4],
        [1],
    ])
    def test_length_matches_reference(self, nums):
        last = materialize(lis(nums)).last
        assert last.grid[1][last.active_cell[1]] == ref_lis(nums)

    def test_highlighted_cells_form_an_increasing_run(self):
        nums = [10, 9, 2, 5, 3, 7, 101, 18]
        last = materialize(lis(nums)).last
        picked = [nums[col] for row, col in last.highlighted]
        assert all(row == 0 for row, _ in last.highlighted)
        assert len(picked) == ref_lis(nums)
        assert all(a < b for a, b in zip(picked, picked[1:]))
        assert last.message == "LIS length = 4: 2, 5, 7, 101."

    def test_grid_shows_values_and_dp(self):
        first = materialize(lis([3, 1, 2])).first
        assert first.grid == ((3, 1, 2), (1, 1, 1))
        assert first.row_header == ("value", "dp")

    def test_empty_input(self):
        seq = materialize(lis([]))
        assert len(seq) == 1
