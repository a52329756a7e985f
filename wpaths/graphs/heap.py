"""
Binary min-heap keyed by tentative distance.

Dijkstra pushes a vertex again every time its distance improves instead of
decreasing a key in place. Outdated entries stay in the heap and are dropped
when they surface (lazy deletion), which keeps push and pop at O(log k).
"""

import heapq
from typing import List, Optional, Sequence, Tuple


class DistanceHeap:
    """
    Min-heap of ``(distance, vertex)`` entries.

    Ties on distance are broken by the smaller vertex id so that the pop
    order, and therefore every reconstructed path, is deterministic.

    Example:
        >>> heap = DistanceHeap()
        >>> heap.push(3, 7)
        >>> heap.push(2, 4)
        >>> heap.pop()
        (2, 4)
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: List[Tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, vertex: int, distance: int) -> None:
        heapq.heappush(self._entries, (distance, vertex))

    def pop(self) -> Tuple[int, int]:
        """
        Remove and return the minimum entry as ``(vertex, distance)``.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._entries:
            raise IndexError("pop from empty DistanceHeap")
        distance, vertex = heapq.heappop(self._entries)
        return vertex, distance

    def pop_current(self, dist: Sequence[int]) -> Optional[Tuple[int, int]]:
        """
        Pop the minimum entry that is not stale.

        An entry is stale when its distance exceeds ``dist[vertex]``, the best
        distance currently known for that vertex. Stale entries are discarded.

        Returns:
            ``(vertex, distance)`` or None once the heap is exhausted.
        """
        while self._entries:
            distance, vertex = heapq.heappop(self._entries)
            if distance > dist[vertex]:
                continue
            return vertex, distance
        return None
