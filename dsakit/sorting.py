"""Heap sort and quick sort over lists."""

from collections.abc import Iterable, MutableSequence
from itertools import islice


def heapify(items: MutableSequence, size: int, root: int) -> None:
    """Sift ``items[root]`` down so the subtree rooted there, within ``size``, is a max-heap."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items: Iterable) -> list:
    """Return the items in ascending order, sorted with a max-heap."""
    result = list(items)
    size = len(result)
    for root in range(size // 2 - 1, -1, -1):
        heapify(result, size, root)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        heapify(result, end, 0)
    return result


def _partition(items: MutableSequence, lo: int, hi: int) -> int:
    """Partition ``items[lo:hi]`` around its first element and return the pivot's index."""
    pivot = items[lo]
    final = lo + sum(1 for value in islice(items, lo, hi) if value < pivot)
    items[lo], items[final] = items[final], items[lo]
    i, j = lo, hi - 1
    while i < j:
        if items[i] < pivot:
            i += 1
        elif items[j] >= pivot:
            j -= 1
        else:
            items[i], items[j] = items[j], items[i]
    return final


def partition(items: MutableSequence) -> int:
    """Partition ``items`` in place around its first element.

    Smaller values end up before the returned index, the rest after it.
    """
    if not items:
        raise ValueError("cannot partition an empty sequence")
    return _partition(items, 0, len(items))


def quick_sort(items: Iterable) -> list:
    """Return the items in ascending order, sorted with quick sort."""
    result = list(items)
    pending = [(0, len(result))]
    while pending:
        lo, hi = pending.pop()
        if hi - lo < 2:
            continue
        pivot = _partition(result, lo, hi)
        pending.append((lo, pivot))
        pending.append((pivot + 1, hi))
    return result