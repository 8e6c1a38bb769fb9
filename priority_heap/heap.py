from __future__ import annotations
import operator
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

# Placeholder for index 0 and for slots vacated by extraction.
_VACANT: Any = object()


def min_priority(a: Any, b: Any) -> bool:
    """Min-heap ordering: smaller elements come first."""
    return operator.lt(a, b)


def max_priority(a: Any, b: Any) -> bool:
    """Max-heap ordering: larger elements come first."""
    return operator.gt(a, b)


class Heap(Generic[T]):
    """A binary heap ordered by a pluggable priority predicate.

    Implementation notes
    --------------------
    • ``priority(a, b)`` returns True when *a* must sit above *b*.
    • Storage is 1-indexed: slot 0 is a placeholder so that
      parent = i // 2, left = 2i, right = 2i + 1.
    • Live elements occupy ``_items[1:_count + 1]``; slots past ``_count``
      are vacant and never read.
    • Extraction follows the iterator protocol: the heap drains itself,
      once, in priority order. ``next_item()`` is the non-raising form.
    """

    __slots__ = ("_items", "_count", "_priority")

    def __init__(self, priority: Callable[[T, T], bool], it: Optional[Iterable[T]] = None) -> None:
        if not callable(priority):
            raise TypeError("priority must be callable")
        self._priority: Callable[[T, T], bool] = priority
        self._items: List[Any] = [_VACANT]
        self._count: int = 0
        if it:
            for item in it:
                self.add(item)

    @staticmethod
    def new_min(it: Optional[Iterable[T]] = None) -> "Heap[T]":
        """Build a plain ``Heap`` that yields its smallest element first.

        Always returns the base class, also when called on a subclass.
        """
        return Heap(min_priority, it)

    @staticmethod
    def new_max(it: Optional[Iterable[T]] = None) -> "Heap[T]":
        """Build a plain ``Heap`` that yields its largest element first."""
        return Heap(max_priority, it)

    # -----------------------------
    # Index helpers
    # -----------------------------
    @staticmethod
    def _parent_idx(idx: int) -> int:
        return idx // 2

    @staticmethod
    def _left_child_idx(idx: int) -> int:
        return idx * 2

    @staticmethod
    def _right_child_idx(idx: int) -> int:
        return idx * 2 + 1

    def _children_present(self, idx: int) -> bool:
        return self._left_child_idx(idx) <= self._count

    def _preferred_child_idx(self, idx: int) -> int:
        """Return whichever live child of *idx* the predicate puts first."""
        left = self._left_child_idx(idx)
        right = self._right_child_idx(idx)
        if right > self._count:
            return left
        if self._priority(self._items[left], self._items[right]):
            return left
        return right

    # -----------------------------
    # Rebalancing
    # -----------------------------
    def _bubble_up(self, idx: int) -> None:
        items = self._items
        while idx > 1:
            parent = self._parent_idx(idx)
            if self._priority(items[parent], items[idx]):
                break
            items[parent], items[idx] = items[idx], items[parent]
            idx = parent

    def _bubble_down(self, idx: int) -> None:
        items = self._items
        while self._children_present(idx):
            child = self._preferred_child_idx(idx)
            if self._priority(items[idx], items[child]):
                break
            items[idx], items[child] = items[child], items[idx]
            idx = child

    # -----------------------------
    # Public API
    # -----------------------------
    def add(self, value: T) -> None:
        """Insert *value* and restore the heap ordering (O(log n))."""
        self._count += 1
        if self._count >= len(self._items):
            self._items.append(value)
        else:
            self._items[self._count] = value  # reuse a vacated slot
        self._bubble_up(self._count)

    def next_item(self) -> Optional[T]:
        """Remove and return the top element, or None once drained (O(log n))."""
        if self._count == 0:
            return None
        items = self._items
        top = items[1]
        items[1] = items[self._count]
        items[self._count] = _VACANT
        self._count -= 1
        if self._count == 0:
            return top
        self._bubble_down(1)
        return top

    def peek(self) -> Optional[T]:
        """Return the top element without removing it (O(1))."""
        return self._items[1] if self._count else None

    def len(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self.len() == 0

    def to_list(self) -> List[T]:
        """Live elements in internal heap order (not sorted)."""
        return self._items[1:self._count + 1]

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._count == 0:
            raise StopIteration
        return self.next_item()  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


class MinHeap(Heap[T]):
    """Heap that yields elements in ascending order."""

    __slots__ = ()

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        super().__init__(min_priority, it)


class MaxHeap(Heap[T]):
    """Heap that yields elements in descending order."""

    __slots__ = ()

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        super().__init__(max_priority, it)
