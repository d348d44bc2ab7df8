from typing import Iterable, Optional

import numpy as np

from .containers import Deque, RandomizedQueue
from .prelude import T

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    def __init__(self) -> None:
        # None means the generator is seeded from OS entropy
        self.seed: Optional[int] = None
        self.log_level = "WARNING"
        self.__rng: Optional[np.random.Generator] = None

    def rng(self) -> np.random.Generator:
        """Generator shared by every container this config makes"""
        if self.__rng is None:
            self.__rng = np.random.default_rng(self.seed)
        return self.__rng

    def reseed(self, seed: Optional[int]) -> None:
        self.seed = seed
        self.__rng = None

    def deque(self, init_list: Optional[Iterable[T]] = None) -> Deque[T]:
        return Deque(init_list)

    def randomized_queue(
        self, init_list: Optional[Iterable[T]] = None
    ) -> RandomizedQueue[T]:
        return RandomizedQueue(init_list, rng=self.rng())


    def __repr__(self) -> str:
        return "Config(seed={}, log_level={})".format(self.seed, self.log_level)
