"""
selection_sort.py — Selection Sort
===================================
Each pass scans the unsorted suffix for its minimum and swaps it into
place.  The running minimum is tagged "min" in `labels`.
"""

from typing import Iterator, List, Sequence

from algorithms.step import ArrayStep


PSEUDOCODE: List[str] = [
    "def selection_sort(arr):",                  # 0
    "    for i in range(n - 1):",                # 1
    "        min_idx ← i",                       # 2
    "        for j in range(i + 1, n):",         # 3
    "            if arr[j] < arr[min_idx]:",     # 4
    "                min_idx ← j",               # 5
    "        swap(arr[i], arr[min_idx])",        # 6
    "    return arr",                            # 7
]


def selection_sort(array: Sequence[int]) -> Iterator[ArrayStep]:
    arr = list(array)
    n   = len(arr)
    done: List[int] = []

    if n == 0:
        yield ArrayStep(message="The array is empty: nothing to sort.", line_number=7)
        return

    yield ArrayStep(array=arr, message=f"Start selection sort on {n} element(s).", line_number=0)

    for i in range(n - 1):
        min_idx = i
        yield ArrayStep(
            array=arr, sorted=done, labels={i: "min"}, line_number=2,
            message=f"Pass {i + 1}: assume arr[{i}]={arr[i]} is the minimum.",
        )

        for j in range(i + 1, n):
            yield ArrayStep(
                array=arr, comparing=(j, min_idx), sorted=done, labels={min_idx: "min"}, line_number=4,
                message=f"Compare arr[{j}]={arr[j]} with current minimum {arr[min_idx]}.",
            )
            if arr[j] < arr[min_idx]:
                min_idx = j
                yield ArrayStep(
                    array=arr, sorted=done, labels={min_idx: "min"}, line_number=5,
                    message=f"New minimum {arr[min_idx]} at index {min_idx}.",
                )

        if min_idx != i:
            yield ArrayStep(
                array=arr, swapping=(i, min_idx), sorted=done, line_number=6,
                message=f"Swap arr[{i}]={arr[i]} with the minimum arr[{min_idx}]={arr[min_idx]}.",
            )
            arr[i], arr[min_idx] = arr[min_idx], arr[i]

        done.append(i)
        yield ArrayStep(
            array=arr, sorted=done, line_number=1,
            message=f"{arr[i]} is now fixed at index {i}.",
        )

    yield ArrayStep(array=arr, sorted=range(n), line_number=7, message="Selection sort complete.")
