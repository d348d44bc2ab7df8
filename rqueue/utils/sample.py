from typing import List, Optional

import numpy as np

from ..prelude import Array, T

_GLOBAL_RNG = np.random.default_rng()


def global_rng() -> np.random.Generator:
    """Process-wide generator used by containers that are not given their own"""
    return _GLOBAL_RNG


def set_seed(seed: Optional[int]) -> None:
    global _GLOBAL_RNG
    _GLOBAL_RNG = np.random.default_rng(seed)


def _or_global(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return _GLOBAL_RNG if rng is None else rng


def uniform_index(n: int, rng: Optional[np.random.Generator] = None) -> int:
    """Sample one number from [0, n)"""
    if n <= 0:
        raise ValueError("[uniform_index] n must be positive, but got {}".format(n))
    return int(_or_global(rng).integers(0, n))


def shuffle_(items: List[T], rng: Optional[np.random.Generator] = None) -> List[T]:
    """Shuffle in place. Every permutation is equally likely.
    """
    _or_global(rng).shuffle(items)
    return items


def sample_indices(
    n: int, k: int, rng: Optional[np.random.Generator] = None
) -> Array[int]:
    """Sample k distinct numbers from [0, n)
       Based on
    https://github.com/chainer/chainerrl/blob/master/chainerrl/misc/random.py
    """
    if k > n:
        raise ValueError("[sample_indices] n < k")
    rng = _or_global(rng)
    if 3 * k >= n:
        return rng.choice(n, k, replace=False)
    else:
        selected = np.repeat(False, n)
        rands = rng.integers(0, n, size=k * 2)
        j = k
        for i in range(k):
            x = rands[i]
            while selected[x]:
                if j == 2 * k:
                    rands[k:] = rng.integers(0, n, size=k)
                    j = k
                x = rands[i] = rands[j]
                j += 1
            selected[x] = True
        return rands[:k]
