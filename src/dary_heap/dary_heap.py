import logging
from numbers import Integral
from typing import Generic, Iterable, Optional, TypeVar

import numpy as np

from src.dary_heap.config import (
    BULK_SLACK_DENOMINATOR,
    BULK_SLACK_NUMERATOR,
    DEFAULT_BRANCHING_FACTOR,
    MIN_BRANCHING_FACTOR,
    ROOT_INDEX,
)
from src.dary_heap.exceptions import (
    ConfigurationError,
    InvalidIndexError,
    UnderflowError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DHeap(Generic[T]):
    """
    Min-priority queue backed by a d-ary heap.

    Elements live in a 1-indexed object array (slot 0 is never used) and are
    ordered by their own ``<`` operator. Every node is less than or equal to
    each of its up to ``branching_factor`` children.

    Parameters
    ----------
    items : Iterable[T], optional
        Initial elements. When given, the heap is built bottom-up in linear
        time instead of by repeated insertion.
    branching_factor : int
        Maximum number of children per node, by default 2. Pass it by
        keyword when no items are given: ``DHeap(branching_factor=3)``.

    Raises
    ------
    ConfigurationError
        If ``branching_factor`` is not an integer of at least 2.
    TypeError
        If ``items`` is an integer rather than an iterable.

    Notes
    -----
    The heap is not safe for concurrent mutation. Callers that share one
    across threads must guard it with their own lock.
    """

    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        branching_factor: int = DEFAULT_BRANCHING_FACTOR
    ) -> None:
        if isinstance(items, Integral):
            raise TypeError(
                f"items must be an iterable, got {items!r}; pass the "
                f"branching factor as DHeap(branching_factor={items!r})"
            )
        if (
            isinstance(branching_factor, bool)
            or not isinstance(branching_factor, Integral)
            or branching_factor < MIN_BRANCHING_FACTOR
        ):
            raise ConfigurationError(
                f"branching_factor must be an integer >= "
                f"{MIN_BRANCHING_FACTOR}, got {branching_factor!r}"
            )
        self._d = int(branching_factor)
        self._size = 0

        if items is None:
            self._array = np.empty(self._d + 2, dtype=object)
            return

        items = list(items)
        n = len(items)
        capacity = (n + 2) * BULK_SLACK_NUMERATOR // BULK_SLACK_DENOMINATOR
        self._array = np.empty(capacity, dtype=object)
        # Item-wise copy keeps tuples and lists as single elements.
        for i, item in enumerate(items, ROOT_INDEX):
            self._array[i] = item
        self._size = n
        self._build_heap()

    @property
    def branching_factor(self) -> int:
        return self._d

    @property
    def capacity(self) -> int:
        """Length of the backing array, unused slot 0 included."""
        return len(self._array)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        live = [self._array[i] for i in range(ROOT_INDEX, self._size + 1)]
        return f"DHeap(d={self._d}, size={self._size}, {live!r})"

    def size(self) -> int:
        """Number of elements currently in the heap."""
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def make_empty(self) -> None:
        """
        Logically empty the heap.

        The backing array keeps its current length; stale references are
        dropped so they can be garbage collected.
        """
        logger.debug("Emptying heap of %d elements", self._size)
        self._array[ROOT_INDEX:self._size + 1] = None
        self._size = 0

    def get(self, index: int) -> Optional[T]:
        """
        Raw positional read.

        Parameters
        ----------
        index : int
            A 1-based position in the implicit tree.

        Returns
        -------
        Optional[T]
            The element stored at ``index``, or None when ``index`` lies
            outside ``[1, size]``.
        """
        if index < ROOT_INDEX or index > self._size:
            return None
        return self._array[index]

    def insert(self, item: T) -> None:
        """
        Add an item to the heap, keeping heap order. Duplicates are allowed.

        Parameters
        ----------
        item : T
            The item to insert. It must be comparable with the elements
            already in the heap.
        """
        self._ensure_capacity()
        self._size += 1
        self._array[self._size] = item
        self._percolate_up(self._size)

    def find_min(self) -> T:
        """
        Return the smallest element without removing it.

        Raises
        ------
        UnderflowError
            If the heap is empty.
        """
        if self.is_empty():
            raise UnderflowError("find_min() on an empty heap")
        return self._array[ROOT_INDEX]

    def delete_min(self) -> T:
        """
        Remove and return the smallest element.

        Raises
        ------
        UnderflowError
            If the heap is empty. The heap is left untouched.
        """
        if self.is_empty():
            raise UnderflowError("delete_min() on an empty heap")

        removed = self._array[ROOT_INDEX]
        self._array[ROOT_INDEX] = self._array[self._size]
        self._array[self._size] = None
        self._size -= 1
        if self._size > 1:
            self._percolate_down(ROOT_INDEX)
        return removed

    def parent_index(self, index: int) -> int:
        """
        Position of the parent of ``index``.

        Raises
        ------
        InvalidIndexError
            If ``index`` is the root or lies before it.
        """
        if index < 2:
            raise InvalidIndexError(
                f"index {index} has no parent (root is {ROOT_INDEX})"
            )
        return (index - 2) // self._d + 1

    def first_child_index(self, index: int) -> int:
        """
        Position of the leftmost child of ``index``.

        The result may lie beyond ``size`` when ``index`` is a leaf.

        Raises
        ------
        InvalidIndexError
            If ``index`` is smaller than the root index.
        """
        if index < ROOT_INDEX:
            raise InvalidIndexError(f"index {index} has no children")
        return index * self._d - self._d + 2

    def last_child_index(self, index: int) -> int:
        """
        Position of the rightmost occupied child of ``index``, clipped to
        ``size``. Smaller than ``first_child_index(index)`` for leaves.
        """
        last = self.first_child_index(index) + self._d - 1
        return min(last, self._size)

    def first_leaf_index(self) -> int:
        """Position of the first node without children."""
        if self._size < 2:
            return ROOT_INDEX
        return self.parent_index(self._size) + 1

    def _ensure_capacity(self) -> None:
        old = self._array
        if self._size < len(old) - 1:
            return
        self._array = np.empty(2 * len(old) + 1, dtype=object)
        self._array[:len(old)] = old
        logger.debug(
            "Grew heap storage from %d to %d slots", len(old), len(self._array)
        )

    def _swap(self, first: int, second: int) -> None:
        array = self._array
        array[first], array[second] = array[second], array[first]

    def _percolate_up(self, index: int) -> None:
        array = self._array
        while index > ROOT_INDEX:
            parent = self.parent_index(index)
            # Unreachable while the density invariant holds.
            if parent > self._size:
                return
            if not array[index] < array[parent]:
                return
            self._swap(index, parent)
            index = parent

    def _percolate_down(self, index: int) -> None:
        array = self._array
        while True:
            first = self.first_child_index(index)
            last = self.last_child_index(index)
            smallest = index
            smallest_value = array[index]

            # Leftmost child wins ties.
            for child in range(first, last + 1):
                value = array[child]
                if value < smallest_value:
                    smallest = child
                    smallest_value = value

            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def _build_heap(self) -> None:
        """Establish heap order over the whole array in linear time."""
        logger.debug(
            "Building heap of %d elements with branching factor %d",
            self._size, self._d
        )
        if self._size < 2:
            return
        for index in range(self.parent_index(self._size), 0, -1):
            self._percolate_down(index)

    def _validate(self) -> bool:
        """Check heap order over the live range ``[1, size]``."""
        array = self._array
        if self._size > len(array) - 1:
            return False
        for index in range(ROOT_INDEX, self._size + 1):
            first = self.first_child_index(index)
            if first > self._size:
                break
            for child in range(first, self.last_child_index(index) + 1):
                if array[child] < array[index]:
                    return False
        return True
