"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Recursive quick sort with the last element as pivot.  The partition
generator returns the pivot's final index through `yield from`:

    p = yield from _partition(arr, lo, hi, done)

Indices enter `sorted` as soon as a pivot lands or a range shrinks to a
single element.
"""

from typing import Iterator, List, Sequence

from algorithms.step import ArrayStep


PSEUDOCODE: List[str] = [
    "def quick_sort(arr, lo, hi):",                  # 0
    "    if lo < hi:",                               # 1
    "        p ← partition(arr, lo, hi)",            # 2
    "        quick_sort(arr, lo, p - 1)",            # 3
    "        quick_sort(arr, p + 1, hi)",            # 4
    "def partition(arr, lo, hi):",                   # 5
    "    pivot ← arr[hi]; i ← lo - 1",               # 6
    "    for j in range(lo, hi):",                   # 7
    "        if arr[j] < pivot:",                    # 8
    "            i ← i + 1; swap(arr[i], arr[j])",   # 9
    "    swap(arr[i + 1], arr[hi])",                 # 10
    "    return i + 1",                              # 11
]


def quick_sort(array: Sequence[int]) -> Iterator[ArrayStep]:
    arr = list(array)
    n   = len(arr)
    done: List[int] = []

    if n == 0:
        yield ArrayStep(message="The array is empty: nothing to sort.", line_number=0)
        return

    yield ArrayStep(array=arr, message=f"Start quick sort on {n} element(s).", line_number=0)
    yield from _sort(arr, 0, n - 1, done)
    yield ArrayStep(array=arr, sorted=range(n), line_number=0, message="Quick sort complete.")


def _sort(arr: List[int], lo: int, hi: int, done: List[int]) -> Iterator[ArrayStep]:
    if lo > hi:
        return
    if lo == hi:
        done.append(lo)
        yield ArrayStep(
            array=arr, sorted=done, line_number=1,
            message=f"Range [{lo}..{hi}] has one element: {arr[lo]} is in place.",
        )
        return
    p = yield from _partition(arr, lo, hi, done)
    yield from _sort(arr, lo, p - 1, done)
    yield from _sort(arr, p + 1, hi, done)


def _partition(arr: List[int], lo: int, hi: int, done: List[int]) -> Iterator[ArrayStep]:
    pivot = arr[hi]
    i = lo - 1
    yield ArrayStep(
        array=arr, sorted=done, labels={hi: "pivot"}, line_number=6,
        message=f"Partition [{lo}..{hi}] around pivot {pivot}.",
    )

    for j in range(lo, hi):
        yield ArrayStep(
            array=arr, comparing=(j, hi), sorted=done, labels={hi: "pivot", j: "j"}, line_number=8,
            message=f"Is arr[{j}]={arr[j]} < pivot {pivot}?",
        )
        if arr[j] < pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
            yield ArrayStep(
                array=arr, swapping=(i, j), sorted=done, labels={hi: "pivot", i: "i"}, line_number=9,
                message=f"Yes: move it to the low side (swap indices {i} and {j}).",
            )

    arr[i + 1], arr[hi] = arr[hi], arr[i + 1]
    done.append(i + 1)
    yield ArrayStep(
        array=arr, swapping=(i + 1, hi), sorted=done, line_number=10,
        message=f"Place pivot {pivot} at index {i + 1}: its final position.",
    )
    return i + 1
