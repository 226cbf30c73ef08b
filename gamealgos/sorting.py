"""Classic quadratic sorts and linear/binary search over integer lists."""

from __future__ import annotations

import time
from typing import Callable, Sequence


def bubble_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` using bubble sort."""
    result = list(values)
    n = len(result)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def selection_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` using selection sort."""
    result = list(values)
    n = len(result)
    for i in range(n - 1):
        min_index = min(range(i, n), key=result.__getitem__)
        result[i], result[min_index] = result[min_index], result[i]
    return result


def insertion_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` using insertion sort."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def linear_search(values: Sequence[int], target: int) -> int:
    """Return the first index of ``target`` in ``values``, or -1."""
    return next((i for i, value in enumerate(values) if value == target), -1)


def binary_search(values: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``values``, or -1."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def _format(values: Sequence[int]) -> str:
    return "".join(f"{value} " for value in values)


def _timed(func: Callable, *args):
    start = time.perf_counter_ns()
    result = func(*args)
    return result, time.perf_counter_ns() - start


_SEARCH_DATA = [
    96, 28, 28, 69, 36, 56, 94, 63, 61, 63, 11, 90, 14, 82, 87, 11, 81, 83, 12, 42,
    2, 29, 71, 53, 15, 9, 75, 64, 83, 32, 77, 57, 9, 86, 4, 23, 75, 44, 5, 25,
    30, 75, 5, 21, 45, 12, 53, 71, 27, 97, 16, 39, 11, 54, 12, 48, 6, 86, 66, 71,
    56, 72, 70, 9, 91, 12, 4, 92, 39, 59, 53, 60, 50, 36, 5, 54, 20, 58, 40, 83,
    34, 94, 75, 23, 32, 14, 51, 96, 22, 86, 93, 30, 9, 29, 29, 72, 36, 88, 51, 63,
]


def main(argv: list[str] | None = None) -> int:
    """Demonstrate and time the sorts and searches."""
    original = [5, 4, 8, 2, 3, 1]
    print(f"Original vector: {_format(original)}")

    sorted_values: list[int] = []
    for label, sorter in (
        ("BubbleSort", bubble_sort),
        ("SelectionSort", selection_sort),
        ("InsertionSort", insertion_sort),
    ):
        sorted_values, elapsed = _timed(sorter, original)
        print(f"{label} ({elapsed} ): {_format(sorted_values)}")

    print(f"LinearSeach, found on idx: {linear_search(original, 3)}")
    print(f"BinarySearch, found on idx: {binary_search(sorted_values, 3)}")
    print(
        "BinarySearch (on unsorted list), found on idx: "
        f"{binary_search(original, 3)}"
    )

    data = insertion_sort(_SEARCH_DATA)
    print(f"Data size: {len(data)}")
    idx, elapsed = _timed(linear_search, data, 88)
    print(f"LinearSearch ({elapsed}), found on idx: {idx}")
    idx, elapsed = _timed(binary_search, data, 88)
    print(f"BinarySearch ({elapsed}), found on idx: {idx}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())