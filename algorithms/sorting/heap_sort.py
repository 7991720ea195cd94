"""
heap_sort.py — Heap Sort
=========================
Builds a max-heap in place, then repeatedly swaps the root to the end
of the shrinking heap.  `_heapify` recurses down the tree and is driven
with `yield from`.
"""

from typing import Iterator, List, Sequence

from algorithms.step import ArrayStep


PSEUDOCODE: List[str] = [
    "def heap_sort(arr):",                               # 0
    "    for i in range(n // 2 - 1, -1, -1):",           # 1
    "        heapify(arr, n, i)",                        # 2
    "    for end in range(n - 1, 0, -1):",               # 3
    "        swap(arr[0], arr[end])",                    # 4
    "        heapify(arr, end, 0)",                      # 5
    "def heapify(arr, size, i):",                        # 6
    "    largest ← max(i, left(i), right(i))",           # 7
    "    if largest != i:",                              # 8
    "        swap(arr[i], arr[largest])",                # 9
    "        heapify(arr, size, largest)",               # 10
]


def heap_sort(array: Sequence[int]) -> Iterator[ArrayStep]:
    arr = list(array)
    n   = len(arr)
    done: List[int] = []

    if n == 0:
        yield ArrayStep(message="The array is empty: nothing to sort.", line_number=0)
        return

    yield ArrayStep(array=arr, message=f"Start heap sort on {n} element(s).", line_number=0)

    # --- build max-heap ---
    for i in range(n // 2 - 1, -1, -1):
        yield ArrayStep(
            array=arr, labels={i: "i"}, line_number=2,
            message=f"Heapify the subtree rooted at index {i}.",
        )
        yield from _heapify(arr, n, i, done)

    yield ArrayStep(array=arr, labels={0: "max"}, line_number=3, message=f"Max-heap built. Root = {arr[0]}.")

    # --- extract ---
    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        done.append(end)
        yield ArrayStep(
            array=arr, swapping=(0, end), sorted=done, line_number=4,
            message=f"Move the maximum {arr[end]} to index {end}.",
        )
        yield from _heapify(arr, end, 0, done)

    yield ArrayStep(array=arr, sorted=range(n), line_number=0, message="Heap sort complete.")


def _heapify(arr: List[int], size: int, i: int, done: List[int]) -> Iterator[ArrayStep]:
    largest = i
    left, right = 2 * i + 1, 2 * i + 2
    children = [c for c in (left, right) if c < size]
    if not children:
        return

    yield ArrayStep(
        array=arr, comparing=[i] + children, sorted=done, labels={i: "parent"}, line_number=7,
        message=f"Compare parent arr[{i}]={arr[i]} with its children.",
    )
    for c in children:
        if arr[c] > arr[largest]:
            largest = c

    if largest == i:
        yield ArrayStep(
            array=arr, sorted=done, line_number=8,
            message=f"arr[{i}]={arr[i]} is larger than its children: heap property holds.",
        )
        return

    arr[i], arr[largest] = arr[largest], arr[i]
    yield ArrayStep(
        array=arr, swapping=(i, largest), sorted=done, line_number=9,
        message=f"Swap arr[{i}] with the larger child arr[{largest}].",
    )
    yield from _heapify(arr, size, largest, done)
