"""
merge_sort.py — Merge Sort
===========================
Top-down recursive merge sort.  Recursion is flattened with `yield from`
so the Steps come out in depth-first order: split, left half, right
half, merge.

The merge buffer being consumed is mirrored in `auxiliary`.
"""

from typing import Iterator, List, Sequence

from algorithms.step import ArrayStep


PSEUDOCODE: List[str] = [
    "def merge_sort(arr, lo, hi):",                  # 0
    "    if lo >= hi: return",                       # 1
    "    mid ← (lo + hi) // 2",                      # 2
    "    merge_sort(arr, lo, mid)",                  # 3
    "    merge_sort(arr, mid + 1, hi)",              # 4
    "    merge(arr, lo, mid, hi):",                  # 5
    "        while i <= mid and j <= hi:",           # 6
    "            if L[i] <= R[j]: arr[k] ← L[i]",    # 7
    "            else: arr[k] ← R[j]",               # 8
    "        copy the leftovers",                    # 9
    "    return arr",                                # 10
]


def merge_sort(array: Sequence[int]) -> Iterator[ArrayStep]:
    arr = list(array)
    n   = len(arr)

    if n == 0:
        yield ArrayStep(message="The array is empty: nothing to sort.", line_number=10)
        return

    yield ArrayStep(array=arr, message=f"Start merge sort on {n} element(s).", line_number=0)
    yield from _sort(arr, 0, n - 1)
    yield ArrayStep(array=arr, sorted=range(n), line_number=10, message="Merge sort complete.")


# ---------------------------------------------------------------------------
# Recursion
# ---------------------------------------------------------------------------
def _sort(arr: List[int], lo: int, hi: int) -> Iterator[ArrayStep]:
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    yield ArrayStep(
        array=arr, comparing=range(lo, hi + 1), labels={lo: "lo", mid: "mid", hi: "hi"}, line_number=2,
        message=f"Split [{lo}..{hi}] into [{lo}..{mid}] and [{mid + 1}..{hi}].",
    )
    yield from _sort(arr, lo, mid)
    yield from _sort(arr, mid + 1, hi)
    yield from _merge(arr, lo, mid, hi)


def _merge(arr: List[int], lo: int, mid: int, hi: int) -> Iterator[ArrayStep]:
    left  = arr[lo:mid + 1]
    right = arr[mid + 1:hi + 1]
    i = j = 0
    k = lo

    yield ArrayStep(
        array=arr, auxiliary=left + right, labels={lo: "lo", hi: "hi"}, line_number=5,
        message=f"Merge {left} and {right}.",
    )

    while i < len(left) and j < len(right):
        yield ArrayStep(
            array=arr, comparing=(lo + i, mid + 1 + j), auxiliary=left + right, line_number=6,
            message=f"Compare L[{i}]={left[i]} with R[{j}]={right[j]}.",
        )
        if left[i] <= right[j]:
            arr[k] = left[i]
            i += 1
            line = 7
        else:
            arr[k] = right[j]
            j += 1
            line = 8
        yield ArrayStep(
            array=arr, swapping=(k,), auxiliary=left + right, line_number=line,
            message=f"Write {arr[k]} to index {k}.",
        )
        k += 1

    while i < len(left):
        arr[k] = left[i]
        yield ArrayStep(
            array=arr, swapping=(k,), auxiliary=left + right, line_number=9,
            message=f"Copy leftover {left[i]} from the left half to index {k}.",
        )
        i += 1
        k += 1

    while j < len(right):
        arr[k] = right[j]
        yield ArrayStep(
            array=arr, swapping=(k,), auxiliary=left + right, line_number=9,
            message=f"Copy leftover {right[j]} from the right half to index {k}.",
        )
        j += 1
        k += 1
