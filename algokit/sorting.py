"""Classic comparison and distribution sorts.

Every function takes any iterable and returns a new ascending list. The
input is never modified.
"""

from collections.abc import Iterable

__all__ = [
    "COUNTING_SORT_LIMIT",
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
    "hoare_quick_sort",
    "heap_sort",
    "counting_sort",
    "radix_sort",
]

COUNTING_SORT_LIMIT = 1_000_000


def bubble_sort(items: Iterable) -> list:
    """Sort by repeatedly swapping adjacent out-of-order neighbours."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable) -> list:
    """Sort by sinking each element left until it meets a smaller one."""
    result = list(items)
    for i in range(1, len(result)):
        j = i
        while j > 0 and result[j] < result[j - 1]:
            result[j], result[j - 1] = result[j - 1], result[j]
            j -= 1
    return result


def selection_sort(items: Iterable) -> list:
    """Sort by moving the smallest remaining element to the front."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable) -> list:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def _lomuto_partition(values: list, low: int, high: int) -> int:
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1


def quick_sort(items: Iterable) -> list:
    """Quicksort with the last element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _lomuto_partition(result, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return result


def _hole_partition(values: list, left: int, right: int) -> int:
    pivot = values[left]
    while left < right:
        while values[right] >= pivot and left < right:
            right -= 1
        if left != right:
            values[left] = values[right]
            left += 1
        while values[left] <= pivot and left < right:
            left += 1
        if left != right:
            values[right] = values[left]
            right -= 1
    values[left] = pivot
    return left


def hoare_quick_sort(items: Iterable) -> list:
    """Quicksort that moves the first element of each range into its hole."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot = _hole_partition(result, left, right)
        if left < pivot:
            pending.append((left, pivot - 1))
        if right > pivot:
            pending.append((pivot + 1, right))
    return result


def _sift_down(heap: list, i: int, size: int) -> None:
    while 2 * i + 1 < size:
        child = 2 * i + 1
        if child + 1 < size and heap[child + 1] > heap[child]:
            child += 1
        if heap[i] > heap[child]:
            return
        heap[i], heap[child] = heap[child], heap[i]
        i = child


def heap_sort(items: Iterable) -> list:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    heap = list(items)
    size = len(heap)
    for i in range(size // 2 - 1, -1, -1):
        _sift_down(heap, i, size)
    while size > 1:
        size -= 1
        heap[0], heap[size] = heap[size], heap[0]
        _sift_down(heap, 0, size)
    return heap


def counting_sort(items: Iterable[int]) -> list[int]:
    """Sort integers in ``0..COUNTING_SORT_LIMIT`` by counting occurrences."""
    values = list(items)
    if not values:
        return []
    for value in values:
        if not 0 <= value <= COUNTING_SORT_LIMIT:
            raise ValueError(f"{value} is outside 0..{COUNTING_SORT_LIMIT}")
    occurrences = [0] * (max(values) + 1)
    for value in values:
        occurrences[value] += 1
    return [value for value, count in enumerate(occurrences) for _ in range(count)]


def _digit_pass(values: list[int], exponent: int) -> list[int]:
    buckets: list[list[int]] = [[] for _ in range(10)]
    for value in values:
        buckets[(value // exponent) % 10].append(value)
    return [value for bucket in buckets for value in bucket]


def radix_sort(items: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers."""
    values = list(items)
    if not values:
        return []
    if any(value < 0 for value in values):
        raise ValueError("radix_sort needs non-negative integers")
    largest = max(values)
    exponent = 1
    while largest // exponent > 0:
        values = _digit_pass(values, exponent)
        exponent *= 10
    return values