import pytest

from .resize import MIN_CAPACITY, grown_capacity, is_valid_capacity, shrunk_capacity


@pytest.mark.parametrize(
    "count, capacity, expected",
    [(2, 2, 4), (1, 2, None), (8, 8, 16), (7, 8, None), (0, 2, None)],
)
def test_grown_capacity(count: int, capacity: int, expected) -> None:
    assert grown_capacity(count, capacity) == expected


@pytest.mark.parametrize(
    "count, capacity, expected",
    [
        (1, 4, 2),
        (2, 8, 4),
        (3, 8, None),
        (0, 4, None),
        (0, 2, None),
        (1, 2, None),
        (4, 16, 8),
    ],
)
def test_shrunk_capacity(count: int, capacity: int, expected) -> None:
    assert shrunk_capacity(count, capacity) == expected


def test_valid_capacity() -> None:
    assert MIN_CAPACITY == 2
    assert all(is_valid_capacity(2 ** i) for i in range(1, 20))
    assert not is_valid_capacity(1)
    assert not is_valid_capacity(6)
