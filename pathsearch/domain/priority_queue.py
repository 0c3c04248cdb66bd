"""Array-backed binary min-heap used by the A* search."""

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class HeapPriorityQueue(Generic[T]):
    """
    Min-heap over any element type supporting ``<``.

    Elements live in a 1-indexed list (slot 0 unused) so that the parent of
    slot ``i`` is ``i // 2`` and its children are ``2i`` and ``2i + 1``.
    The backing list doubles in capacity when full and never shrinks.

    There is no decrease-key and no removal by value: callers that improve
    the cost of a queued element add it again and skip the stale copy when
    it is removed.
    """

    def __init__(self):
        self._elements: List[Optional[T]] = [None] * 2
        self._size = 0

    # Index helpers

    @staticmethod
    def _parent(index: int) -> int:
        return index // 2

    @staticmethod
    def _left_child(index: int) -> int:
        return index * 2

    @staticmethod
    def _right_child(index: int) -> int:
        return index * 2 + 1

    def _has_parent(self, index: int) -> bool:
        return index > 1

    def _has_left_child(self, index: int) -> bool:
        return self._left_child(index) <= self._size

    def _has_right_child(self, index: int) -> bool:
        return self._right_child(index) <= self._size

    def _swap(self, i: int, j: int):
        self._elements[i], self._elements[j] = self._elements[j], self._elements[i]

    def _check_resize(self, index: int):
        if index >= len(self._elements):
            self._elements.extend([None] * len(self._elements))

    # Public API

    @property
    def capacity(self) -> int:
        """Number of slots in the backing list, including the unused slot 0."""
        return len(self._elements)

    def size(self) -> int:
        """Get the number of elements in the queue."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return self._size == 0

    def clear(self):
        """Remove all elements, keeping the current capacity."""
        for i in range(1, self._size + 1):
            self._elements[i] = None
        self._size = 0

    def peek(self) -> Optional[T]:
        """Return the minimum element without removing it, or None if empty."""
        return self._elements[1] if self._size > 0 else None

    def add(self, value: T):
        """Append the value and sift it up until its parent is not larger."""
        i = self._size + 1
        self._check_resize(i)
        self._elements[i] = value
        self._size += 1

        while self._has_parent(i):
            i_parent = self._parent(i)
            if not value < self._elements[i_parent]:
                break
            self._swap(i, i_parent)
            i = i_parent

    def remove(self) -> Optional[T]:
        """
        Remove and return the minimum element, or None if empty.

        The last leaf moves to the root and sinks toward the smaller of its
        children for as long as that child is not larger than itself.
        """
        if self.is_empty():
            return None

        elem = self._elements[1]
        self._elements[1] = self._elements[self._size]
        self._elements[self._size] = None
        self._size -= 1

        i = 1
        while self._has_left_child(i):
            i_child = self._left_child(i)
            right = self._right_child(i)
            if self._has_right_child(i) and self._elements[right] < self._elements[i_child]:
                i_child = right

            if self._elements[i] < self._elements[i_child]:
                break

            self._swap(i, i_child)
            i = i_child

        return elem
