"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix one element at a time, shifting larger values
right until the held key fits.
"""

from typing import Iterator, List, Sequence

from algorithms.step import ArrayStep


PSEUDOCODE: List[str] = [
    "def insertion_sort(arr):",                      # 0
    "    for i in range(1, n):",                     # 1
    "        key ← arr[i]",                          # 2
    "        j ← i - 1",                             # 3
    "        while j >= 0 and arr[j] > key:",        # 4
    "            arr[j + 1] ← arr[j]",               # 5
    "            j ← j - 1",                         # 6
    "        arr[j + 1] ← key",                      # 7
    "    return arr",                                # 8
]


def insertion_sort(array: Sequence[int]) -> Iterator[ArrayStep]:
    arr = list(array)
    n   = len(arr)

    if n == 0:
        yield ArrayStep(message="The array is empty: nothing to sort.", line_number=8)
        return

    yield ArrayStep(
        array=arr, sorted=(0,), line_number=0,
        message=f"Start insertion sort. The prefix [{arr[0]}] is trivially sorted.",
    )

    for i in range(1, n):
        key = arr[i]
        j   = i - 1
        yield ArrayStep(
            array=arr, comparing=(i,), sorted=range(i), labels={i: "key"}, line_number=2,
            message=f"Pick key = {key} from index {i}.",
        )

        while j >= 0:
            yield ArrayStep(
                array=arr, comparing=(j, j + 1), sorted=range(i), labels={j + 1: "key"}, line_number=4,
                message=f"Compare arr[{j}]={arr[j]} with key {key}.",
            )
            if arr[j] <= key:
                break
            arr[j + 1] = arr[j]
            yield ArrayStep(
                array=arr, swapping=(j, j + 1), sorted=range(i), line_number=5,
                message=f"{arr[j]} > {key}: shift it right to index {j + 1}.",
            )
            j -= 1

        arr[j + 1] = key
        yield ArrayStep(
            array=arr, swapping=(j + 1,), sorted=range(i + 1), line_number=7,
            message=f"Insert key {key} at index {j + 1}.",
        )

    yield ArrayStep(array=arr, sorted=range(n), line_number=8, message="Insertion sort complete.")
