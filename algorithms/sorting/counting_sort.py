"""
counting_sort.py — Counting Sort
=================================
Stable counting sort.  Values are offset by the minimum so negative
integers work; `auxiliary` shows the count array while counting and the
output array while placing.

The count array has one slot per value in min..max, so a range wider
than `max_range` is refused with a single explanatory Step.
"""

from typing import Iterator, List, Optional, Sequence

from algorithms.step import ArrayStep


MAX_COUNT_RANGE = 1000

PSEUDOCODE: List[str] = [
    "def counting_sort(arr):",                       # 0
    "    lo, hi ← min(arr), max(arr)",               # 1
    "    count ← [0] * (hi - lo + 1)",               # 2
    "    for x in arr: count[x - lo] += 1",          # 3
    "    for v in range(1, len(count)):",            # 4
    "        count[v] += count[v - 1]",              # 5
    "    for x in reversed(arr):",                   # 6
    "        count[x - lo] -= 1",                    # 7
    "        out[count[x - lo]] ← x",                # 8
    "    return out",                                # 9
]


def counting_sort(array: Sequence[int], max_range: int = MAX_COUNT_RANGE) -> Iterator[ArrayStep]:
    arr = list(array)
    n   = len(arr)

    if n == 0:
        yield ArrayStep(message="The array is empty: nothing to sort.", line_number=9)
        return

    lo, hi = min(arr), max(arr)
    if hi - lo + 1 > max_range:
        yield ArrayStep(
            array=arr, line_number=1,
            message=f"Values span {lo}..{hi}: a count array of {hi - lo + 1} slots exceeds the limit of {max_range}.",
        )
        return

    count  = [0] * (hi - lo + 1)
    yield ArrayStep(
        array=arr, auxiliary=count, line_number=2,
        message=f"Range is {lo}..{hi}: create a count array of size {len(count)}.",
    )

    for i, x in enumerate(arr):
        count[x - lo] += 1
        yield ArrayStep(
            array=arr, comparing=(i,), auxiliary=count, line_number=3,
            message=f"Count {x}: seen {count[x - lo]} time(s).",
        )

    for v in range(1, len(count)):
        count[v] += count[v - 1]
    yield ArrayStep(
        array=arr, auxiliary=count, line_number=5,
        message="Prefix sums: count[v] is now the end position of value v.",
    )

    out: List[Optional[int]] = [None] * n
    for i in range(n - 1, -1, -1):
        x = arr[i]
        count[x - lo] -= 1
        pos = count[x - lo]
        out[pos] = x
        yield ArrayStep(
            array=arr, comparing=(i,), auxiliary=out, labels={i: f"→{pos}"}, line_number=8,
            message=f"Place {x} from index {i} at output position {pos}.",
        )

    yield ArrayStep(array=out, sorted=range(n), line_number=9, message="Counting sort complete.")
