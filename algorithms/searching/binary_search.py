"""
binary_search.py — Binary Search
=================================
Iterative binary search over a sorted array.  L / M / R pointers are
shown as `labels`.

Unsorted input is refused with a single explanatory Step: halving only
works when the order invariant holds.
"""

from typing import Dict, Iterator, List, Optional, Sequence

from algorithms.step import ArrayStep


PSEUDOCODE: List[str] = [
    "def binary_search(arr, target):",           # 0
    "    lo, hi ← 0, n - 1",                     # 1
    "    while lo <= hi:",                       # 2
    "        mid ← (lo + hi) // 2",              # 3
    "        if arr[mid] == target: return mid", # 4
    "        if arr[mid] < target:",             # 5
    "            lo ← mid + 1",                  # 6
    "        else:",                             # 7
    "            hi ← mid - 1",                  # 8
    "    return -1",                             # 9
]


def binary_search(array: Sequence[int], target: int) -> Iterator[ArrayStep]:
    arr = list(array)
    n   = len(arr)

    if n == 0:
        yield ArrayStep(message=f"The array is empty: {target} cannot be found.", line_number=9)
        return
    if any(arr[k] > arr[k + 1] for k in range(n - 1)):
        yield ArrayStep(
            array=arr, line_number=0,
            message="Binary search needs a sorted array. Sort the input first.",
        )
        return

    lo, hi = 0, n - 1
    yield ArrayStep(array=arr, labels=_pointers(lo, hi), line_number=1,
                    message=f"Search for {target} in [{lo}..{hi}].")

    while lo <= hi:
        mid = (lo + hi) // 2
        yield ArrayStep(
            array=arr, comparing=(mid,), labels=_pointers(lo, hi, mid), line_number=3,
            message=f"mid = ({lo} + {hi}) // 2 = {mid}; arr[mid] = {arr[mid]}.",
        )

        if arr[mid] == target:
            yield ArrayStep(
                array=arr, sorted=(mid,), labels={mid: "Found!"}, line_number=4,
                message=f"Found {target} at index {mid}.",
            )
            return

        if arr[mid] < target:
            lo = mid + 1
            yield ArrayStep(
                array=arr, labels=_pointers(lo, hi), line_number=6,
                message=f"{arr[mid]} < {target}: discard the left half, lo = {lo}.",
            )
        else:
            hi = mid - 1
            yield ArrayStep(
                array=arr, labels=_pointers(lo, hi), line_number=8,
                message=f"{arr[mid]} > {target}: discard the right half, hi = {hi}.",
            )

    yield ArrayStep(array=arr, line_number=9, message=f"lo > hi: {target} is not in the array.")


def _pointers(lo: int, hi: int, mid: Optional[int] = None) -> Dict[int, str]:
    labels: Dict[int, str] = {}
    if hi >= 0:
        labels[hi] = "R"
    labels[lo] = "L" if lo != hi else "L/R"
    if mid is not None:
        labels[mid] = "M"
    return labels
