"""Randomized queue backed by a resizing array
"""
from typing import Generic, Iterable, Iterator, List, Optional

import numpy as np

from ..errors import EmptyContainerError, UnsupportedOperationError, ensure_item
from ..prelude import T
from ..utils.log import logger
from ..utils.sample import global_rng, sample_indices, shuffle_, uniform_index
from .resize import MIN_CAPACITY, grown_capacity, is_valid_capacity, shrunk_capacity


class RandomizedQueue(Generic[T]):
    """A queue whose removal order is uniformly random.

    Items live densely in slots [0, n) of a list buffer. dequeue picks a
    random slot, moves the last item into it and clears the last slot, so
    the order of the remaining items is unspecified after any dequeue.
    The buffer doubles when it is full and halves when it is one-quarter full.
    enqueue and dequeue take constant amortized time. sample, size and
    is_empty take constant time in the worst case.
    """

    def __init__(
        self,
        init_list: Optional[Iterable[T]] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._buf: List[Optional[T]] = [None] * MIN_CAPACITY
        self._n = 0
        self._rng = rng
        if init_list is not None:
            for item in init_list:
                self.enqueue(item)

    @property
    def rng(self) -> np.random.Generator:
        return global_rng() if self._rng is None else self._rng

    @property
    def capacity(self) -> int:
        return len(self._buf)

    def is_empty(self) -> bool:
        return self._n == 0

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def _resize(self, capacity: int) -> None:
        assert capacity >= self._n and is_valid_capacity(capacity)
        logger.debug("RandomizedQueue resize: %d -> %d", len(self._buf), capacity)
        buf: List[Optional[T]] = [None] * capacity
        buf[: self._n] = self._buf[: self._n]
        self._buf = buf

    def enqueue(self, item: T) -> None:
        ensure_item(item, "RandomizedQueue::enqueue")
        new_capacity = grown_capacity(self._n, len(self._buf))
        if new_capacity is not None:
            self._resize(new_capacity)
        self._buf[self._n] = item
        self._n += 1

    def dequeue(self) -> T:
        if self._n == 0:
            raise EmptyContainerError("[RandomizedQueue::dequeue] Empty")
        idx = uniform_index(self._n, self.rng)
        last = self._n - 1
        item = self._buf[idx]
        self._buf[idx] = self._buf[last]
        self._buf[last] = None
        self._n = last
        new_capacity = shrunk_capacity(self._n, len(self._buf))
        if new_capacity is not None:
            self._resize(new_capacity)
        return item

    def sample(self) -> T:
        """Returns a random item without removing it"""
        if self._n == 0:
            raise EmptyContainerError("[RandomizedQueue::sample] Empty")
        return self._buf[uniform_index(self._n, self.rng)]

    def sample_k(self, k: int) -> List[T]:
        """Returns k items chosen without replacement, without removing them"""
        if self._n == 0:
            raise EmptyContainerError("[RandomizedQueue::sample_k] Empty")
        if k > self._n:
            raise ValueError("[RandomizedQueue::sample_k] n < k")
        return [self._buf[i] for i in sample_indices(self._n, k, self.rng)]

    def iterator(self) -> "RandomizedQueueIterator[T]":
        return RandomizedQueueIterator(self._buf[: self._n], self.rng)

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __repr__(self) -> str:
        return "RandomizedQueue({})".format(str(self._buf[: self._n]))


class RandomizedQueueIterator(Iterator[T]):
    """Iterates over a shuffled copy of the items taken at construction.
    Later changes to the queue do not affect it.
    """

    def __init__(self, snapshot: List[T], rng: np.random.Generator) -> None:
        self._items = shuffle_(snapshot, rng)
        self._i = 0

    def has_next(self) -> bool:
        return self._i < len(self._items)

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        item = self._items[self._i]
        self._i += 1
        return item

    def __iter__(self) -> "RandomizedQueueIterator[T]":
        return self

    def remove(self) -> None:
        raise UnsupportedOperationError("[RandomizedQueueIterator::remove] Unsupported")
