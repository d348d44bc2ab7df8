"""Resize policy of the array backing RandomizedQueue.
Doubling when full and halving when a quarter full keeps both enqueue and
dequeue amortized O(1), and the buffer never gets smaller than MIN_CAPACITY.
"""
from typing import Optional

MIN_CAPACITY = 2


def grown_capacity(count: int, capacity: int) -> Optional[int]:
    """New capacity before inserting into a buffer holding `count` items,
    or None if no resize is needed.
    """
    if count == capacity:
        return 2 * capacity
    return None


def shrunk_capacity(count: int, capacity: int) -> Optional[int]:
    """New capacity after a removal left `count` items, or None"""
    if 0 < count and count == capacity // 4 and capacity > MIN_CAPACITY:
        return capacity // 2
    return None


def is_valid_capacity(capacity: int) -> bool:
    return capacity >= MIN_CAPACITY and capacity & (capacity - 1) == 0
