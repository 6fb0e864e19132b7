import heapq
import itertools
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from topn.utils import exists

T = TypeVar('T')


class TopN(Generic[T]):
    """
    Keeps the `capacity` largest items pushed into it, discarding smaller
    items as soon as capacity is exceeded.

    Internally a min-heap, so the smallest retained item is at heap[0]:
    peeking at it is O(1), evicting it is O(log capacity).

    Ordering is the natural ordering of the items, or `key(item)` when a key
    is given. With a key the items themselves are never compared.

    Extraction comes in two flavours:
      - `pop()` returns the smallest retained item; repeated pops drain the
        selector in ascending order.
      - `drain()` empties the selector and returns its items in heap order,
        which is NOT sorted. Sort the result, use `drain_sorted()`, or pop
        repeatedly when the order matters.

    Pushes and pops may be interleaved, but then the selector holds the top
    items among those still resident, not the top items of the whole stream.
    """

    def __init__(
        self,
        capacity: int,
        key: Optional[Callable[[T], Any]] = None,
        data: Optional[Iterable[T]] = None,
    ):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise ValueError(f"Capacity must be a non-negative integer, got {capacity!r}")

        self._capacity: int = capacity
        self.key: Optional[Callable[[T], Any]] = key
        self._heap: list = []  # min-heap of items, or of (key, seq, item) when keyed
        self._counter: Iterator[int] = itertools.count()

        if exists(data):
            self.push_many(data)

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, item: T) -> Optional[T]:
        """
        Insert `item`, then evict the smallest item if capacity is exceeded.
        Returns the evicted item (possibly `item` itself), or None.
        """
        entry = self._wrap(item)

        if len(self._heap) < self._capacity:
            heapq.heappush(self._heap, entry)
            return None

        # push followed by pop of the minimum, in one sift
        return self._unwrap(heapq.heappushpop(self._heap, entry))

    def push_many(self, items: Iterable[T]) -> list[T]:
        evicted: list[T] = []
        for item in items:
            if len(self._heap) >= self._capacity:
                evicted.append(self.push(item))
            else:
                self.push(item)
        return evicted

    def pop(self) -> Optional[T]:
        """
        Pop and return the smallest retained item, or None if empty.
        """
        if not self._heap:
            return None
        return self._unwrap(heapq.heappop(self._heap))

    def peek(self) -> Optional[T]:
        """
        Peek at the smallest retained item (the one that would be popped
        next), or None if empty.
        """
        if not self._heap:
            return None
        return self._unwrap(self._heap[0])

    def is_empty(self) -> bool:
        return len(self._heap) == 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def items(self) -> list[T]:
        """
        Return the retained items in arbitrary (heap) order, without removing them.
        """
        return [self._unwrap(entry) for entry in self._heap]

    def drain(self) -> list[T]:
        """
        Remove and return all retained items in arbitrary (heap) order.
        The result is not sorted.
        """
        heap, self._heap = self._heap, []
        return [self._unwrap(entry) for entry in heap]

    def drain_sorted(self, reverse: bool = False) -> list[T]:
        """
        Remove and return all retained items, smallest first.
        reverse=True gives largest first.
        """
        drained: list[T] = []
        while self._heap:
            drained.append(self._unwrap(heapq.heappop(self._heap)))
        if reverse:
            drained.reverse()
        return drained

    def clear(self) -> None:
        self._heap.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self._heap)})"

    def _wrap(self, item: T):
        if self.key is None:
            return item
        # seq breaks key ties so items are never compared
        return self.key(item), next(self._counter), item

    def _unwrap(self, entry) -> T:
        if self.key is None:
            return entry
        return entry[2]
