"""Binary-heap frontier for A* and Dijkstra with deterministic tie-breaking."""

import heapq
import itertools
from dataclasses import dataclass
from typing import List, Optional

from .types import Coord


@dataclass
class PriorityItem:
    """
    Item in the priority queue.

    Comparison order:
    1. priority (lower is better)
    2. sequence (earlier insertion wins, so equal priorities pop first-in first-out)
    """
    priority: float
    sequence: int
    coord: Coord

    def __lt__(self, other: 'PriorityItem') -> bool:
        """Define comparison for heap ordering."""
        if self.priority != other.priority:
            return self.priority < other.priority
        return self.sequence < other.sequence


class PriorityQueue:
    """
    Min-heap of coordinates keyed by cost.

    Entries are never updated in place: a better cost for the same coordinate
    is pushed as a new entry and the search skips stale ones when they pop
    (lazy deletion).
    """

    def __init__(self):
        self._heap: List[PriorityItem] = []
        self._counter = itertools.count()

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def put(self, coord: Coord, priority: float) -> None:
        """Add an entry for a coordinate."""
        entry = PriorityItem(priority, next(self._counter), coord)
        heapq.heappush(self._heap, entry)

    def get(self) -> Optional[PriorityItem]:
        """
        Remove and return the entry with the lowest priority.
        Returns None if queue is empty.
        """
        if not self._heap:
            return None
        return heapq.heappop(self._heap)

    def peek(self) -> Optional[PriorityItem]:
        """Look at the next entry without removing it."""
        return self._heap[0] if self._heap else None

    def clear(self):
        """Remove all items from the queue."""
        self._heap.clear()

    def coords(self) -> List[Coord]:
        """
        Coordinates currently queued, duplicates included, in heap order.
        Useful for visualization.
        """
        return [entry.coord for entry in self._heap]
