"""Linear and binary search over sequences."""

from collections.abc import Sequence

__all__ = ["binary_search", "linear_search"]


def binary_search(items: Sequence, target) -> int:
    """Return an index of ``target`` in ascending ``items``, or -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] < target:
            low = mid + 1
        elif items[mid] == target:
            return mid
        else:
            high = mid - 1
    return -1


def linear_search(items: Sequence, target) -> int:
    """Return the index of the first ``target`` in ``items``, or -1 if absent."""
    return next((i for i, item in enumerate(items) if item == target), -1)