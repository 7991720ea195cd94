"""
linear_search.py — Linear Search
=================================
Scans left to right; one Step per comparison.
"""

from typing import Iterator, List, Sequence

from algorithms.step import ArrayStep


PSEUDOCODE: List[str] = [
    "def linear_search(arr, target):",           # 0
    "    for i in range(n):",                    # 1
    "        if arr[i] == target:",              # 2
    "            return i",                      # 3
    "    return -1",                             # 4
]


def linear_search(array: Sequence[int], target: int) -> Iterator[ArrayStep]:
    arr = list(array)

    if not arr:
        yield ArrayStep(message=f"The array is empty: {target} cannot be found.", line_number=4)
        return

    yield ArrayStep(array=arr, message=f"Search for {target} from left to right.", line_number=0)

    for i, value in enumerate(arr):
        yield ArrayStep(
            array=arr, comparing=(i,), labels={i: "i"}, line_number=2,
            message=f"Is arr[{i}]={value} equal to {target}?",
        )
        if value == target:
            yield ArrayStep(
                array=arr, sorted=(i,), labels={i: "Found!"}, line_number=3,
                message=f"Found {target} at index {i}.",
            )
            return

    yield ArrayStep(array=arr, line_number=4, message=f"{target} is not in the array.")
