"""
bubble_sort.py — Bubble Sort
=============================
Generator-based bubble sort with the early-exit optimisation.

Yields an ArrayStep at:
  1. Every adjacent comparison           →  comparing = (j, j+1)
  2. Before and after every swap         →  swapping  = (j, j+1)
  3. End of each pass                    →  index n-i-1 joins `sorted`
  4. Early exit (no swaps in a pass)     →  every remaining index sorted
  5. Final step                          →  sorted covers every index
"""

from typing import Iterator, List, Sequence

from algorithms.step import ArrayStep


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line; index = line_number
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",                     # 0
    "    for i in range(n):",                    # 1
    "        swapped ← False",                   # 2
    "        for j in range(n - i - 1):",        # 3
    "            if arr[j] > arr[j + 1]:",       # 4
    "                swap(arr[j], arr[j + 1])",  # 5
    "                swapped ← True",            # 6
    "        if not swapped: break",             # 7
    "    return arr",                            # 8
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bubble_sort(array: Sequence[int]) -> Iterator[ArrayStep]:
    arr = list(array)
    n   = len(arr)
    done: List[int] = []

    if n == 0:
        yield ArrayStep(message="The array is empty: nothing to sort.", line_number=8)
        return

    yield ArrayStep(array=arr, message=f"Start bubble sort on {n} element(s).", line_number=0)

    for i in range(n):
        swapped = False

        for j in range(n - i - 1):
            yield ArrayStep(
                array=arr, comparing=(j, j + 1), sorted=done, line_number=4,
                message=f"Compare arr[{j}]={arr[j]} with arr[{j + 1}]={arr[j + 1]}.",
            )
            if arr[j] > arr[j + 1]:
                yield ArrayStep(
                    array=arr, swapping=(j, j + 1), sorted=done, line_number=5,
                    message=f"{arr[j]} > {arr[j + 1]}: swap them.",
                )
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
                yield ArrayStep(
                    array=arr, swapping=(j, j + 1), sorted=done, line_number=6,
                    message=f"Swapped. arr[{j}]={arr[j]}, arr[{j + 1}]={arr[j + 1]}.",
                )

        done.append(n - i - 1)
        yield ArrayStep(
            array=arr, sorted=done, line_number=1,
            message=f"Pass {i + 1} complete: {arr[n - i - 1]} is in its final position.",
        )

        if not swapped:
            done.extend(range(n - i - 1))
            yield ArrayStep(
                array=arr, sorted=done, line_number=7,
                message="No swaps in this pass: the array is already sorted.",
            )
            break

    yield ArrayStep(
        array=arr, sorted=range(n), line_number=8,
        message="Bubble sort complete.",
    )
