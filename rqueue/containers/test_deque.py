from collections import deque
import random

import pytest

from ..errors import EmptyContainerError, InvalidArgumentError, UnsupportedOperationError
from .linked_deque import Deque


def test_deque_add_first() -> None:
    deq = Deque()
    for i in range(10):
        deq.add_first(i)
    assert list(deq) == list(reversed(range(10)))
    assert deq.size() == 10


def test_deque_add_last() -> None:
    deq = Deque()
    for i in range(10):
        deq.add_last(i)
    assert list(deq) == list(range(10))
    assert len(deq) == 10


def test_deque_order_law() -> None:
    deq = Deque()
    deq.add_first("a")
    deq.add_first("b")
    assert deq.remove_last() == "a"
    deq = Deque()
    deq.add_last("a")
    deq.add_last("b")
    assert deq.remove_first() == "a"


def test_deque_remove_last_many() -> None:
    deq = Deque(init_list=range(5))
    assert [deq.remove_last() for _ in range(5)] == [4, 3, 2, 1, 0]
    assert deq.is_empty()


def test_deque_remove_last_after_add_first() -> None:
    deq = Deque()
    for i in range(4):
        deq.add_first(i)
    assert deq.remove_last() == 0
    assert deq.remove_last() == 1
    deq.add_last(9)
    assert list(deq) == [3, 2, 9]
    assert deq.peek_last() == 9


@pytest.mark.parametrize("n", [1, 2, 3, 7])
def test_deque_round_trip(n: int) -> None:
    deq = Deque()
    for i in range(n):
        if i % 2 == 0:
            deq.add_first(i)
        else:
            deq.add_last(i)
    removed = []
    while not deq.is_empty():
        if len(removed) % 2 == 0:
            removed.append(deq.remove_last())
        else:
            removed.append(deq.remove_first())
    assert sorted(removed) == list(range(n))
    assert deq.size() == 0


def test_deque_stress() -> None:
    mydeq = Deque()
    deq = deque()
    rand = random.Random(0)
    N = 10000
    for i in range(N):
        cond = rand.randint(1, 4)
        num = rand.randint(10, 1000000000)
        if cond == 1:
            deq.append(num)
            mydeq.add_last(num)
        elif cond == 2:
            deq.appendleft(num)
            mydeq.add_first(num)
        elif not deq:
            with pytest.raises(EmptyContainerError):
                mydeq.remove_last()
        elif cond == 3:
            assert deq.pop() == mydeq.remove_last()
        else:
            assert deq.popleft() == mydeq.remove_first()
        assert len(deq) == mydeq.size()
        assert mydeq.is_empty() == (mydeq.size() == 0)
    assert list(deq) == list(mydeq)


def test_deque_empty() -> None:
    deq = Deque()
    assert deq.is_empty()
    for method in (deq.remove_first, deq.remove_last, deq.peek_first, deq.peek_last):
        with pytest.raises(EmptyContainerError):
            method()
    assert list(deq) == []


def test_deque_none() -> None:
    deq = Deque(init_list=[1])
    with pytest.raises(InvalidArgumentError):
        deq.add_first(None)
    with pytest.raises(InvalidArgumentError):
        deq.add_last(None)
    assert list(deq) == [1]


def test_deque_falsy_items() -> None:
    deq = Deque(init_list=[0, "", False])
    assert deq.remove_first() == 0
    assert deq.remove_last() is False
    assert deq.remove_last() == ""


def test_deque_iterator() -> None:
    deq = Deque(init_list="abc")
    it = deq.iterator()
    assert it.has_next()
    assert next(it) == "a"
    with pytest.raises(UnsupportedOperationError):
        it.remove()
    assert list(it) == ["b", "c"]
    assert not it.has_next()
    with pytest.raises(StopIteration):
        next(it)
    # a new iterator starts over
    assert list(deq) == ["a", "b", "c"]


def test_deque_clear() -> None:
    deq = Deque(init_list=range(3))
    deq.clear()
    assert deq.is_empty()
    deq.add_last(1)
    assert deq.peek_first() == deq.peek_last() == 1


def test_deque_repr() -> None:
    assert repr(Deque(init_list=[1, 2])) == "Deque([1, 2])"


def test_deque_removed_nodes_released() -> None:
    deq = Deque(init_list=range(4))
    first, last = deq._first, deq._last
    assert deq.remove_first() == 0
    assert first.item is None and first.next is None
    assert deq.remove_last() == 3
    assert last.item is None and last.prev is None
    assert deq._last.next is None
    assert list(deq) == [1, 2]
