from typing import List, Sequence, TypeVar

T = TypeVar("T")


class Array(Sequence[T]):
    """Stands for numpy.ndarray in annotations"""

    @property
    def shape(self) -> tuple:
        ...

    def tolist(self) -> List[T]:
        ...
