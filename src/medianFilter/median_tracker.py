"""
Running median over a count-based sliding window, O(log n) per update.

The window is split into two halves:
- lower: max heap holding the smaller half, its top is the largest small value
- upper: min heap holding the larger half, its top is the smallest large value

A FIFO of admitted elements decides which element leaves next. Each element
remembers the heap it lives in and its handle there, so eviction is a
handle-based removal regardless of where the element ranks.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from typing import Deque

from medianFilter.indexed_heap import EmptyHeapError
from medianFilter.indexed_heap import HeapOrder
from medianFilter.indexed_heap import IndexedHeap
from medianFilter.indexed_heap import InvalidHandleError


class Partition(str, Enum):
    LOWER = "lower"
    UPPER = "upper"


@dataclass(slots=True)
class MedianElement:
    """One value currently inside the window."""

    value: float
    partition: Partition
    handle: int = -1


class MedianTrackerError(RuntimeError):
    """Internal heap bookkeeping went out of sync with the eviction queue."""


class MedianTracker:
    """
    Tracks the median of the last ``window_limit`` observed values.

    Usage:
        tracker = MedianTracker(window_limit=3)
        tracker.observe(5)   # 5
        tracker.observe(1)   # 3.0
        tracker.observe(9)   # 5
        tracker.observe(2)   # 2 (5 was evicted)
    """

    def __init__(self, window_limit: int):
        if isinstance(window_limit, bool) or not isinstance(window_limit, int) or window_limit <= 0:
            raise ValueError("window_limit must be a positive integer")
        self._window_limit = window_limit
        value_key = attrgetter("value")
        self._lower: IndexedHeap[MedianElement] = IndexedHeap(HeapOrder.MAX, key=value_key)
        self._upper: IndexedHeap[MedianElement] = IndexedHeap(HeapOrder.MIN, key=value_key)
        self._eviction_queue: Deque[MedianElement] = deque()
        self._median: float | None = None

    @property
    def window_limit(self) -> int:
        return self._window_limit

    @property
    def median(self) -> float:
        if self._median is None:
            raise LookupError("window is empty")
        return self._median

    def __len__(self) -> int:
        return len(self._eviction_queue)

    def partition_sizes(self) -> tuple[int, int]:
        """Return (len(lower), len(upper))."""
        return len(self._lower), len(self._upper)

    def observe(self, value: float) -> float:
        """
        Admit ``value`` and return the median of the updated window.

        If the window is full, the oldest element is evicted first.
        """
        try:
            if len(self._eviction_queue) >= self._window_limit:
                self._evict_oldest()
            self._admit(value)
            return self._rebalance()
        except (EmptyHeapError, InvalidHandleError) as exc:
            raise MedianTrackerError("median heaps out of sync with the window") from exc

    def evict(self) -> float:
        """
        Drop the oldest element without admitting a new one.

        Returns the median of the remaining window.

        Raises:
            LookupError: If the window is empty, or would become empty
        """
        if len(self._eviction_queue) <= 1:
            raise LookupError("cannot shrink window below one element")
        try:
            self._evict_oldest()
            return self._rebalance()
        except (EmptyHeapError, InvalidHandleError) as exc:
            raise MedianTrackerError("median heaps out of sync with the window") from exc

    def _heap(self, partition: Partition) -> IndexedHeap[MedianElement]:
        return self._lower if partition is Partition.LOWER else self._upper

    def _push(self, element: MedianElement, partition: Partition) -> None:
        element.partition = partition
        element.handle = self._heap(partition).push(element)

    def _evict_oldest(self) -> None:
        element = self._eviction_queue.popleft()
        self._heap(element.partition).remove(element.handle)

    def _admit(self, value: float) -> None:
        element = MedianElement(value, Partition.LOWER)

        if not self._eviction_queue:
            self._push(element, Partition.LOWER)
        elif not self._upper and len(self._lower) == 1:
            # Second value of a fresh window: lower's max must not exceed upper's min
            self._push(element, Partition.UPPER)
            if self._upper.peek().value < self._lower.peek().value:
                self._swap_tops()
        elif value >= self._median:
            self._push(element, Partition.UPPER)
        else:
            self._push(element, Partition.LOWER)

        self._eviction_queue.append(element)

    def _swap_tops(self) -> None:
        low = self._lower.pop()
        high = self._upper.pop()
        self._push(high, Partition.LOWER)
        self._push(low, Partition.UPPER)

    def _transfer_top(self, source: Partition, target: Partition) -> None:
        element = self._heap(source).pop()
        self._push(element, target)

    def _rebalance(self) -> float:
        """Move at most one element between halves, then recompute the median."""
        diff = len(self._lower) - len(self._upper)
        # One eviction plus one admission leaves |diff| <= 3, so one transfer suffices
        if diff >= 2:
            self._transfer_top(Partition.LOWER, Partition.UPPER)
        elif diff <= -2:
            self._transfer_top(Partition.UPPER, Partition.LOWER)

        n_lower, n_upper = len(self._lower), len(self._upper)
        if n_lower == n_upper:
            median = (self._lower.peek().value + self._upper.peek().value) / 2
        elif n_lower > n_upper:
            median = self._lower.peek().value
        else:
            median = self._upper.peek().value

        self._median = median
        return median
