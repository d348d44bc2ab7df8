"""Implementation of deque using a forward-linked chain of nodes
"""
from typing import Generic, Iterable, Iterator, Optional

from ..errors import EmptyContainerError, UnsupportedOperationError, ensure_item
from ..prelude import T


class _Node(Generic[T]):
    __slots__ = ("item", "next", "prev")

    def __init__(
        self,
        item: T,
        next: "Optional[_Node[T]]" = None,
        prev: "Optional[_Node[T]]" = None,
    ) -> None:
        self.item = item
        self.next = next
        # Back reference; only read to re-seat Deque._prev_last after remove_last
        self.prev = prev


class Deque(Generic[T]):
    """Double-ended queue.
    add_first, add_last, remove_first, remove_last, peek_first, peek_last,
    size and is_empty all take constant time in the worst case.
    Iteration goes from the first item to the last item.
    """

    def __init__(self, init_list: Optional[Iterable[T]] = None) -> None:
        self._first: Optional[_Node[T]] = None
        self._last: Optional[_Node[T]] = None
        self._prev_last: Optional[_Node[T]] = None
        self._n = 0
        if init_list is not None:
            for item in init_list:
                self.add_last(item)
        assert self._check()

    def is_empty(self) -> bool:
        return self._n == 0

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def add_first(self, item: T) -> None:
        ensure_item(item, "Deque::add_first")
        old_first = self._first
        self._first = _Node(item, next=old_first)
        if self._n == 0:
            self._last = self._first
        else:
            old_first.prev = self._first
            if self._n == 1:
                self._prev_last = self._first
        self._n += 1
        assert self._check()

    def add_last(self, item: T) -> None:
        ensure_item(item, "Deque::add_last")
        old_last = self._last
        self._last = _Node(item, prev=old_last)
        if self._n == 0:
            self._first = self._last
        else:
            old_last.next = self._last
            self._prev_last = old_last
        self._n += 1
        assert self._check()

    def remove_first(self) -> T:
        if self._n == 0:
            raise EmptyContainerError("[Deque::remove_first] Empty")
        node = self._first
        self._first = node.next
        if self._first is None:
            self._last = None
        else:
            self._first.prev = None
        if self._n <= 2:
            self._prev_last = None
        self._n -= 1
        item = node.item
        node.item, node.next = None, None
        assert self._check()
        return item

    def remove_last(self) -> T:
        if self._n == 0:
            raise EmptyContainerError("[Deque::remove_last] Empty")
        node = self._last
        if self._n == 1:
            self._first = None
            self._last = None
        else:
            self._last = self._prev_last
            self._last.next = None
            # None when only the first node is left
            self._prev_last = self._last.prev
        self._n -= 1
        item = node.item
        node.item, node.prev = None, None
        assert self._check()
        return item

    def peek_first(self) -> T:
        if self._n == 0:
            raise EmptyContainerError("[Deque::peek_first] Empty")
        return self._first.item

    def peek_last(self) -> T:
        if self._n == 0:
            raise EmptyContainerError("[Deque::peek_last] Empty")
        return self._last.item

    def clear(self) -> None:
        self._first = None
        self._last = None
        self._prev_last = None
        self._n = 0
        assert self._check()

    def iterator(self) -> "DequeIterator[T]":
        return DequeIterator(self._first)

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __repr__(self) -> str:
        return "Deque({})".format(str(list(self)))

    def _check(self) -> bool:
        """Check that the end references match the shape `_n` dictates"""
        if self._n < 0:
            return False
        if self._n == 0:
            return (
                self._first is None and self._last is None and self._prev_last is None
            )
        if self._first is None or self._last is None:
            return False
        if self._first.prev is not None or self._last.next is not None:
            return False
        if self._n == 1:
            return self._first is self._last and self._prev_last is None
        if self._first.next is None or self._prev_last is None:
            return False
        return self._prev_last.next is self._last and self._last.prev is self._prev_last


class DequeIterator(Iterator[T]):
    """Single pass iterator from the first node to the last.
    Mutating the deque while iterating is not supported.
    """

    def __init__(self, first: Optional[_Node[T]]) -> None:
        self._current = first

    def has_next(self) -> bool:
        return self._current is not None

    def __next__(self) -> T:
        if self._current is None:
            raise StopIteration
        item = self._current.item
        self._current = self._current.next
        return item

    def __iter__(self) -> "DequeIterator[T]":
        return self

    def remove(self) -> None:
        raise UnsupportedOperationError("[DequeIterator::remove] Unsupported")
