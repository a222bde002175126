from typing import Any

from src.dary_heap.dary_heap import DHeap
from src.dary_heap.config import ROOT_INDEX


def nsmallest(heap: DHeap, k: int) -> list[Any]:
    """
    Function to get the k smallest elements of a heap without modifying it.

    The implicit tree is walked best-first: a second heap holds the
    frontier of candidate positions, keyed by the element stored there, and
    every position taken from it exposes its children as new candidates.
    Only ``O(k * d)`` positions are ever visited.

    Parameters
    ----------
    heap : DHeap
        A DHeap object
    k : int
        The number of smallest elements to retrieve.

    Returns
    -------
    list[Any]
        Up to ``k`` elements in non-decreasing order. Equal elements come
        out in the order of their positions in ``heap``.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    frontier = DHeap(branching_factor=heap.branching_factor)
    frontier.insert((heap.get(ROOT_INDEX), ROOT_INDEX))

    result = []
    while len(result) < k and not frontier.is_empty():
        value, index = frontier.delete_min()
        result.append(value)
        first = heap.first_child_index(index)
        for child in range(first, heap.last_child_index(index) + 1):
            frontier.insert((heap.get(child), child))
    return result
