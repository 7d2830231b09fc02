"""
Binary heap with stable handles for O(log n) removal of arbitrary entries.

``heapq`` only gives access to the top of the heap, so removing an element that
left a sliding window means either a linear scan or lazy deletion with an ID map.
This heap keeps a handle -> position table in sync on every swap instead, so
``remove(handle)`` is a swap with the last slot followed by a single sift.
"""

from enum import Enum
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class HeapOrder(str, Enum):
    """Which end of the ordering sits at the top of the heap."""

    MIN = "min"
    MAX = "max"


class EmptyHeapError(LookupError):
    """Raised when peeking or popping an empty heap."""


class InvalidHandleError(KeyError):
    """Raised when a handle does not refer to a live entry of this heap."""


def _identity(item: Any) -> Any:
    return item


class IndexedHeap(Generic[T]):
    """
    Array-based binary heap whose entries are addressable by handle.

    - Node i has children at 2*i+1 and 2*i+2
    - ``_handles[i]`` is the handle of the item stored at ``_items[i]``
    - ``_positions[handle]`` is the current index of that item

    Complexity:
    - push / pop / remove: O(log n)
    - peek / len: O(1)

    Usage:
        heap = IndexedHeap(HeapOrder.MAX)
        h = heap.push(3)
        heap.push(7)
        heap.peek()      # 7
        heap.remove(h)   # 3
    """

    def __init__(self, order: HeapOrder = HeapOrder.MIN, key: Callable[[T], Any] | None = None):
        """
        Create an empty heap.

        Args:
            order: HeapOrder.MIN keeps the smallest key on top, HeapOrder.MAX the largest
            key: Extracts the comparison key from an item (identity by default)
        """
        self._order = HeapOrder(order)
        self._key = key or _identity
        self._items: list[T] = []
        self._handles: list[int] = []
        self._positions: dict[int, int] = {}
        self._next_handle = 0

    @property
    def order(self) -> HeapOrder:
        return self._order

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, handle: object) -> bool:
        return handle in self._positions

    def push(self, item: T) -> int:
        """Insert an item and return its handle."""
        handle = self._next_handle
        self._next_handle += 1

        self._items.append(item)
        self._handles.append(handle)
        self._positions[handle] = len(self._items) - 1
        self._sift_up(len(self._items) - 1)
        return handle

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise EmptyHeapError("heap is empty")
        return self._items[0]

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise EmptyHeapError("heap is empty")
        return self._remove_at(0)

    def remove(self, handle: int) -> T:
        """
        Remove the item referred to by ``handle``, wherever it sits in the heap.

        Raises:
            InvalidHandleError: If the handle was never issued by this heap or
                its item has already been removed
        """
        pos = self._positions.get(handle)
        if pos is None:
            raise InvalidHandleError(handle)
        return self._remove_at(pos)

    def _remove_at(self, pos: int) -> T:
        last = len(self._items) - 1
        if pos != last:
            self._swap(pos, last)

        item = self._items.pop()
        handle = self._handles.pop()
        del self._positions[handle]

        # The element moved into ``pos`` may violate order in either direction
        if pos < len(self._items):
            if not self._sift_up(pos):
                self._sift_down(pos)
        return item

    def _higher(self, i: int, j: int) -> bool:
        """True if the item at i belongs strictly above the item at j."""
        a = self._key(self._items[i])
        b = self._key(self._items[j])
        if self._order is HeapOrder.MAX:
            return a > b
        return a < b

    def _swap(self, i: int, j: int) -> None:
        items, handles = self._items, self._handles
        items[i], items[j] = items[j], items[i]
        handles[i], handles[j] = handles[j], handles[i]
        self._positions[handles[i]] = i
        self._positions[handles[j]] = j

    def _sift_up(self, pos: int) -> bool:
        """Move the item at pos towards the root. Returns True if it moved."""
        moved = False
        while pos > 0:
            parent = (pos - 1) >> 1
            if not self._higher(pos, parent):
                break
            self._swap(pos, parent)
            pos = parent
            moved = True
        return moved

    def _sift_down(self, pos: int) -> None:
        n = len(self._items)
        while True:
            left = 2 * pos + 1
            if left >= n:
                break
            right = left + 1
            child = right if right < n and self._higher(right, left) else left
            if not self._higher(child, pos):
                break
            self._swap(pos, child)
            pos = child
