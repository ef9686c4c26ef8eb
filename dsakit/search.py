"""Binary searches over sorted and rotated sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def binary_search(items: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in ascending ``items``.

    When the target is absent, the index where the search converged is
    returned instead (0 for an empty sequence).
    """
    low, high = 0, len(items) - 1
    while low < high:
        mid = high - (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def search_descending(items: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in descending ``items``, or -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def lower_bound(items: Sequence[int], target: int) -> int:
    """Return the first index whose value is not less than ``target``."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def upper_bound(items: Sequence[int], target: int) -> int:
    """Return the last index whose value is not greater than ``target``.

    This is -1 when every value exceeds the target.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return high


def count_occurrences(items: Sequence[int], target: int) -> int:
    """Count how many times ``target`` appears in ascending ``items``."""
    return bisect_right(items, target) - bisect_left(items, target)


def rotation_count(items: Sequence[int]) -> int:
    """Return the index of the minimum of a rotated ascending sequence.

    That index equals the number of times the sorted sequence was rotated.
    """
    low, high = 0, len(items) - 1
    while low < high:
        if items[low] <= items[high]:
            return low
        mid = low + (high - low) // 2
        if items[mid] > items[high]:
            low = mid + 1
        else:
            high = mid
    return low


def search_rotated(items: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated ascending sequence, or -1."""
    if not items:
        return -1
    pivot = rotation_count(items)
    if items[pivot] == target:
        return pivot
    if target > items[-1]:
        if pivot == 0:
            return -1
        # The range stops one short of the largest value; bisect can still
        # land on that value's index, which the final check accepts.
        answer = bisect_left(items, target, 0, pivot - 1)
    else:
        answer = bisect_left(items, target, pivot, len(items))
    if answer < len(items) and items[answer] == target:
        return answer
    return -1