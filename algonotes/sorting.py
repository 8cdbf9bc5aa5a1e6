"""Classic sorting algorithms returning new sorted lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

DEFAULT_COUNTING_LIMIT = 100


def bubble_sort(items: Iterable[Any]) -> list:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def counting_sort(items: Iterable[int], limit: int = DEFAULT_COUNTING_LIMIT) -> list[int]:
    """Sort integers in the range 0..limit by counting occurrences."""
    values = list(items)
    for value in values:
        if not 0 <= value <= limit:
            raise ValueError(f"value {value} outside the range 0..{limit}")
    counts = [0] * (limit + 1)
    for value in values:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def insertion_sort(items: Iterable[Any]) -> list:
    """Sort by growing a sorted prefix one element at a time."""
    result: list = []
    for value in items:
        position = len(result)
        result.append(value)
        while position > 0 and result[position - 1] > value:
            result[position] = result[position - 1]
            position -= 1
        result[position] = value
    return result


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list:
    """Sort by splitting in halves and merging the sorted halves."""
    values = list(items)
    if len(values) < 2:
        return values
    mid = len(values) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values: list, low: int, high: int) -> int:
    pivot = values[(low + high) // 2]
    i, j = low, high
    while True:
        while values[i] < pivot:
            i += 1
        while pivot < values[j]:
            j -= 1
        if i >= j:
            return j
        values[i], values[j] = values[j], values[i]
        i += 1
        j -= 1


def _quick_sort(values: list, low: int, high: int) -> None:
    if low < high:
        split = _partition(values, low, high)
        _quick_sort(values, low, split)
        _quick_sort(values, split + 1, high)


def quick_sort(items: Iterable[Any]) -> list:
    """Sort with Hoare partitioning around the middle element."""
    values = list(items)
    _quick_sort(values, 0, len(values) - 1)
    return values


def radix_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    values = list(items)
    if not values:
        return values
    if any(value < 0 for value in values):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(values)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in values:
            buckets[(value // exp) % 10].append(value)
        values = [value for bucket in buckets for value in bucket]
        exp *= 10
    return values


def selection_sort(items: Iterable[Any]) -> list:
    """Sort by repeatedly moving the smallest remaining element forward."""
    values = list(items)
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Sort strings in character-code order."""
    return bubble_sort(strings)