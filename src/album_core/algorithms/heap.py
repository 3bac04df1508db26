from __future__ import annotations

import heapq
import itertools
from typing import Any, List, Optional, Tuple


class MinHeap:
    """Binary min-heap of items keyed by a numeric rank.

    The same item may be pushed several times with different ranks; stale
    entries are left for the consumer to skip.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, Any]] = []
        self._counter = itertools.count()

    def push(self, item: Any, rank: float) -> None:
        heapq.heappush(self._heap, (rank, next(self._counter), item))

    def pop_min(self) -> Optional[Any]:
        if not self._heap:
            return None
        _, _, item = heapq.heappop(self._heap)
        return item

    def pop_min_with_rank(self) -> Optional[Tuple[Any, float]]:
        if not self._heap:
            return None
        rank, _, item = heapq.heappop(self._heap)
        return item, rank

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
