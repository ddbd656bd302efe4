"""Priority queues of Fast Marching cells ordered by their total value."""

from __future__ import annotations

import heapq
import itertools
from typing import Optional

from .cells import FMCell


def fm_compare(c1: FMCell, c2: FMCell) -> bool:
    """True when ``c1`` should sit below ``c2`` in a minimum heap."""
    return c1.total_value > c2.total_value


class FMDaryHeap:
    """Mutable binary minimum heap of cells keyed by their grid index.

    Cells already in the heap can be moved when their value changes, through
    :meth:`increase` (value lowered) or :meth:`update` (any change).
    """

    def __init__(self, max_size: Optional[int] = None) -> None:
        self._heap: list[FMCell] = []
        self._positions: dict[int, int] = {}
        self._max_size = max_size

    def set_max_size(self, n: int) -> None:
        """Limit the cell indices the heap accepts to ``range(n)``."""
        self._max_size = n

    def push(self, cell: FMCell) -> None:
        """Insert a cell into the heap."""
        idx = cell.index
        if self._max_size is not None and not 0 <= idx < self._max_size:
            raise IndexError(f"cell index {idx} outside heap capacity {self._max_size}")
        if idx in self._positions:
            raise ValueError(f"cell {idx} is already in the heap")
        self._heap.append(cell)
        self._sift_up(len(self._heap) - 1)

    def pop_min_idx(self) -> int:
        """Remove the cell with the lowest total value and return its index."""
        if not self._heap:
            raise IndexError("pop from an empty heap")
        top = self._heap[0]
        last = self._heap.pop()
        del self._positions[top.index]
        if self._heap:
            self._heap[0] = last
            self._positions[last.index] = 0
            self._sift_down(0)
        return top.index

    def update(self, cell: FMCell) -> None:
        """Restore the heap order after the cell's value changed either way."""
        pos = self._sift_up(self._position(cell))
        self._sift_down(pos)

    def increase(self, cell: FMCell) -> None:
        """Restore the heap order after the cell's value was lowered."""
        self._sift_up(self._position(cell))

    def clear(self) -> None:
        """Empty the heap and drop the capacity limit."""
        self._heap.clear()
        self._positions.clear()
        self._max_size = None

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, cell: FMCell) -> bool:
        return cell.index in self._positions

    def _position(self, cell: FMCell) -> int:
        try:
            return self._positions[cell.index]
        except KeyError:
            raise KeyError(f"cell {cell.index} is not in the heap") from None

    def _sift_up(self, pos: int) -> int:
        heap = self._heap
        cell = heap[pos]
        while pos > 0:
            parent = (pos - 1) // 2
            if not fm_compare(heap[parent], cell):
                break
            heap[pos] = heap[parent]
            self._positions[heap[pos].index] = pos
            pos = parent
        heap[pos] = cell
        self._positions[cell.index] = pos
        return pos

    def _sift_down(self, pos: int) -> int:
        heap = self._heap
        size = len(heap)
        cell = heap[pos]
        while True:
            child = 2 * pos + 1
            if child >= size:
                break
            right = child + 1
            if right < size and fm_compare(heap[child], heap[right]):
                child = right
            if not fm_compare(cell, heap[child]):
                break
            heap[pos] = heap[child]
            self._positions[heap[pos].index] = pos
            pos = child
        heap[pos] = cell
        self._positions[cell.index] = pos
        return pos


class FMPriorityQueue:
    """Plain priority queue of cells.

    Keys cannot be changed in place, so :meth:`increase` pushes the cell
    again; this turns the Fast Marching Method into its simplified variant.
    """

    def __init__(self, max_size: Optional[int] = None) -> None:
        self._heap: list[tuple[float, int, FMCell]] = []
        self._counter = itertools.count()
        self._max_size = max_size

    def set_max_size(self, n: int) -> None:
        """Record the expected number of cells; the queue grows as needed."""
        self._max_size = n

    def push(self, cell: FMCell) -> None:
        """Insert a cell with its current total value."""
        heapq.heappush(self._heap, (cell.total_value, next(self._counter), cell))

    def increase(self, cell: FMCell) -> None:
        """Insert the cell again with its new, lower value."""
        self.push(cell)

    def pop_min_idx(self) -> int:
        """Remove the entry with the lowest value and return its cell index."""
        if not self._heap:
            raise IndexError("pop from an empty queue")
        return heapq.heappop(self._heap)[2].index

    def clear(self) -> None:
        """Remove every entry."""
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)