"""
coin_change.py — Coin Change (minimum coins)
=============================================
Unbounded coin change, coin-major order.  The dp row uses None for ∞
(amount not reachable yet).
"""

from typing import Iterator, List, Optional, Sequence

from algorithms.step import GridStep


PSEUDOCODE: List[str] = [
    "def coin_change(coins, amount):",                       # 0
    "    dp ← [∞] * (amount + 1); dp[0] ← 0",                # 1
    "    for coin in coins:",                                # 2
    "        for a in range(coin, amount + 1):",             # 3
    "            if dp[a - coin] + 1 < dp[a]:",              # 4
    "                dp[a] ← dp[a - coin] + 1",              # 5
    "    return dp[amount] if dp[amount] < ∞ else -1",       # 6
]


def coin_change(coins: Sequence[int], amount: int) -> Iterator[GridStep]:
    coins = list(coins or [])

    if not coins:
        yield GridStep(message="Provide at least one coin denomination.", line_number=0)
        return
    if any(isinstance(c, bool) or not isinstance(c, int) or c <= 0 for c in coins):
        yield GridStep(message="Coin values must be positive integers.", line_number=0)
        return
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        yield GridStep(message=f"Amount must be a non-negative integer (got {amount!r}).", line_number=0)
        return

    dp: List[Optional[int]] = [None] * (amount + 1)
    dp[0] = 0
    header = [str(a) for a in range(amount + 1)]

    yield GridStep(
        grid=[dp], row_header=["dp"], col_header=header, highlighted=[(0, 0)], line_number=1,
        message="dp[0] = 0; every other amount starts unreachable (∞).",
    )

    for coin in coins:
        yield GridStep(
            grid=[dp], row_header=["dp"], col_header=header, operation=f"COIN {coin}", line_number=2,
            message=f"Process coin {coin}.",
        )
        for a in range(coin, amount + 1):
            prev = dp[a - coin]
            if prev is not None and (dp[a] is None or prev + 1 < dp[a]):
                dp[a] = prev + 1
                yield GridStep(
                    grid=[dp], row_header=["dp"], col_header=header,
                    active_cell=(0, a), compared=[(0, a - coin)], operation=f"COIN {coin}", line_number=5,
                    message=f"dp[{a}] = dp[{a - coin}] + 1 = {dp[a]}.",
                )
            else:
                current = "∞" if dp[a] is None else dp[a]
                reason = f"dp[{a - coin}] is ∞" if prev is None else f"{prev} + 1 is not below {current}"
                yield GridStep(
                    grid=[dp], row_header=["dp"], col_header=header,
                    active_cell=(0, a), compared=[(0, a - coin)], operation=f"COIN {coin}", line_number=4,
                    message=f"Amount {a}: {reason}, keep {current}.",
                )

    if dp[amount] is None:
        message = f"Amount {amount} cannot be made with coins {coins}."
    else:
        message = f"Minimum coins for {amount} = {dp[amount]}."
    yield GridStep(
        grid=[dp], row_header=["dp"], col_header=header, highlighted=[(0, amount)], line_number=6,
        message=message,
    )
