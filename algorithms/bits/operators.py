"""
operators.py — Bit Manipulation
================================
Three producers over fixed-width unsigned values (default 8 bits):

    bitwise(operation, a, b)   AND / OR / XOR bit by bit, NOT, LSHIFT, RSHIFT
    count_set_bits(value)      Brian Kernighan's n & (n - 1) loop
    power_of_two(value)        n > 0 and n & (n - 1) == 0

BitRow.highlight holds bit positions counted from the least significant
bit (position 0 = rightmost).  Results are masked to the width.
"""

from typing import Iterator, List, Optional

from algorithms.step import BitRow, BitStep


DEFAULT_WIDTH = 8

OPERATIONS = ("AND", "OR", "XOR", "NOT", "LSHIFT", "RSHIFT")

_SYMBOL = {"AND": "&", "OR": "|", "XOR": "^", "LSHIFT": "<<", "RSHIFT": ">>"}

PSEUDOCODE: List[str] = [
    "def bitwise(a, b, op):",                        # 0
    "    for bit in 0..width-1:",                    # 1
    "        res[bit] ← a[bit] op b[bit]",           # 2
    "    return res",                                # 3
    "def count_set_bits(n):",                        # 4
    "    count ← 0",                                 # 5
    "    while n > 0:",                              # 6
    "        n ← n & (n - 1)  # clear lowest 1",     # 7
    "        count += 1",                            # 8
    "    return count",                              # 9
    "def is_power_of_two(n):",                       # 10
    "    return n > 0 and n & (n - 1) == 0",         # 11
]


def _check(value, width: int, name: str) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        return f"{name} must be an integer (got {value!r})."
    if not 0 <= value < (1 << width):
        return f"{name} = {value} does not fit in {width} unsigned bits (0..{(1 << width) - 1})."
    return ""


def _check_width(width) -> str:
    if isinstance(width, bool) or not isinstance(width, int) or not 1 <= width <= 64:
        return f"Width must be an integer between 1 and 64 (got {width!r})."
    return ""


# ---------------------------------------------------------------------------
# AND / OR / XOR / NOT / shifts
# ---------------------------------------------------------------------------
def bitwise(operation: str, a: int, b: Optional[int] = 0, width: int = DEFAULT_WIDTH) -> Iterator[BitStep]:
    op = str(operation).upper()
    problem = _check_width(width)
    if not problem and op not in OPERATIONS:
        problem = f"Unknown operation {operation!r}; choose one of {', '.join(OPERATIONS)}."
    if not problem:
        problem = _check(a, width, "A")
    if not problem and op in ("AND", "OR", "XOR"):
        problem = _check(b, width, "B")
    if not problem and op in ("LSHIFT", "RSHIFT"):
        if isinstance(b, bool) or not isinstance(b, int) or not 0 <= b <= width:
            problem = f"Shift amount must be an integer in 0..{width} (got {b!r})."
    if problem:
        yield BitStep(message=problem, line_number=0)
        return

    mask = (1 << width) - 1

    if op == "NOT":
        yield from _not(a, width, mask)
        return
    if op in ("LSHIFT", "RSHIFT"):
        yield from _shift(op, a, b, width, mask)
        return

    yield BitStep(
        rows=[BitRow("a", "A", a, width), BitRow("b", "B", b, width)], line_number=0,
        message=f"{op}: {a} {_SYMBOL[op]} {b}, one bit at a time.",
    )

    result = 0
    for i in range(width):
        bit_a, bit_b = (a >> i) & 1, (b >> i) & 1
        if op == "AND":
            bit = bit_a & bit_b
        elif op == "OR":
            bit = bit_a | bit_b
        else:
            bit = bit_a ^ bit_b
        result |= bit << i
        yield BitStep(
            rows=[
                BitRow("a", "A", a, width, (i,)),
                BitRow("b", "B", b, width, (i,)),
                BitRow("res", "Result", result, width, (i,)),
            ],
            result=result, line_number=2,
            message=f"Bit {i}: {bit_a} {_SYMBOL[op]} {bit_b} = {bit}.",
        )

    yield BitStep(
        rows=[BitRow("a", "A", a, width), BitRow("b", "B", b, width), BitRow("res", "Result", result, width)],
        result=result, line_number=3,
        message=f"Final result: {a} {_SYMBOL[op]} {b} = {result}.",
    )


def _not(a: int, width: int, mask: int) -> Iterator[BitStep]:
    yield BitStep(rows=[BitRow("a", "Input", a, width)], line_number=0, message=f"NOT {a}: invert every bit.")
    partial = 0
    for i in range(width):
        partial |= (~a >> i & 1) << i
        yield BitStep(
            rows=[BitRow("a", "Input", a, width, (i,)), BitRow("res", "Result", partial, width, (i,))],
            result=partial, line_number=2,
            message=f"Invert bit {i}: {(a >> i) & 1} → {(~a >> i) & 1}.",
        )
    result = ~a & mask
    yield BitStep(
        rows=[BitRow("a", "Input", a, width), BitRow("res", "Result", result, width)],
        result=result, line_number=3,
        message=f"Result: NOT {a} = {result} ({width}-bit).",
    )


def _shift(op: str, a: int, amount: int, width: int, mask: int) -> Iterator[BitStep]:
    left = op == "LSHIFT"
    yield BitStep(
        rows=[BitRow("a", "Input", a, width)], line_number=0,
        message=f"{'Left' if left else 'Right'} shift {a} by {amount}.",
    )
    value = a
    for k in range(1, amount + 1):
        value = ((value << 1) & mask) if left else (value >> 1)
        yield BitStep(
            rows=[BitRow("a", "Input", a, width), BitRow("res", "Result", value, width)],
            result=value, line_number=2,
            message=f"Shift {k}/{amount}: {value}"
                    + (" (bits past the top are dropped)." if left else " (the lowest bit falls off)."),
        )
    yield BitStep(
        rows=[BitRow("a", "Input", a, width), BitRow("res", "Result", value, width)],
        result=value, line_number=3,
        message=f"Result: {a} {_SYMBOL[op]} {amount} = {value}.",
    )


# ---------------------------------------------------------------------------
# Kernighan's set-bit count
# ---------------------------------------------------------------------------
def count_set_bits(value: int, width: int = DEFAULT_WIDTH) -> Iterator[BitStep]:
    problem = _check_width(width) or _check(value, width, "N")
    if problem:
        yield BitStep(message=problem, line_number=4)
        return

    n, count = value, 0
    yield BitStep(
        rows=[BitRow("n", "N", n, width)], result=count, line_number=5,
        message=f"Count the 1-bits in {value}.",
    )
    while n > 0:
        nxt = n & (n - 1)
        lowest = (n & -n).bit_length() - 1
        yield BitStep(
            rows=[
                BitRow("n", "N", n, width, (lowest,)),
                BitRow("n-1", "N - 1", n - 1, width),
                BitRow("res", "N & (N - 1)", nxt, width, (lowest,)),
            ],
            result=count + 1, line_number=7,
            message=f"n & (n - 1) clears the lowest set bit (bit {lowest}): {n} → {nxt}.",
        )
        n = nxt
        count += 1

    yield BitStep(
        rows=[BitRow("n", "N", value, width)], result=count, line_number=9,
        message=f"{value} has {count} set bit(s).",
    )


# ---------------------------------------------------------------------------
# Power-of-two test
# ---------------------------------------------------------------------------
def power_of_two(value: int, width: int = DEFAULT_WIDTH) -> Iterator[BitStep]:
    problem = _check_width(width) or _check(value, width, "N")
    if problem:
        yield BitStep(message=problem, line_number=10)
        return

    if value == 0:
        yield BitStep(
            rows=[BitRow("n", "N", 0, width)], result=0, line_number=11,
            message="0 is not a power of two.",
        )
        return

    masked = value & (value - 1)
    yield BitStep(
        rows=[BitRow("n", "N", value, width), BitRow("n-1", "N - 1", value - 1, width)],
        line_number=11,
        message="A power of two has exactly one 1-bit, so n & (n - 1) must be 0.",
    )
    verdict = masked == 0
    yield BitStep(
        rows=[
            BitRow("n", "N", value, width),
            BitRow("n-1", "N - 1", value - 1, width),
            BitRow("res", "N & (N - 1)", masked, width),
        ],
        result=int(verdict), line_number=11,
        message=f"{value} & {value - 1} = {masked}: {value} is {'' if verdict else 'NOT '}a power of two.",
    )
