from typing import Any, Iterable

from src.dary_heap.config import DEFAULT_BRANCHING_FACTOR
from src.dary_heap.dary_heap import DHeap


def heapsort(
    items: Iterable[Any],
    branching_factor: int = DEFAULT_BRANCHING_FACTOR
) -> list[Any]:
    """
    Return a new list with ``items`` in non-decreasing order.

    The items are bulk-loaded into a ``DHeap`` and drained with
    ``delete_min``.

    Parameters
    ----------
    items : Iterable[Any]
        Mutually comparable items.
    branching_factor : int
        Branching factor of the intermediate heap, by default 2.

    Returns
    -------
    list[Any]
        The sorted items.
    """
    heap = DHeap(items, branching_factor=branching_factor)
    return [heap.delete_min() for _ in range(len(heap))]
