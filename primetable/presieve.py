"""
Small-prime pre-sieve.

Responsibility: the ordinary odd-only Sieve of Eratosthenes over [1, isqrt(N)].
Produces the seed list that the segmented driver uses for the rest of the range.

Index mapping (shared with the table): odd n = 2k + 1 <-> index k.
For the prime p = 2k + 1, p^2 = 4k^2 + 4k + 1 = 2 * (2k(k + 1)) + 1,
so the first index to cross out is t = 2k(k + 1), and stepping the index
by p steps the number by 2p (odd multiples only).
"""

from math import isqrt
from typing import Tuple

import numpy as np

from .bitvector import BitVector


def small_index_bound(N: int) -> int:
    """
    Return SK = (isqrt(N) - 1) // 2, the last index of the pre-sieve range.

    (2 * SK + 1)^2 <= N < (2 * SK + 3)^2. Negative when N < 1.
    """
    return (isqrt(N) - 1) // 2


def small_prime_sieve(store: BitVector, N: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sieve the odd primes up to isqrt(N) in place.

    Parameters
    ----------
    store : BitVector
        Odd-indexed flags, all candidates still set. Modified in place
        for indices 1..SK.
    N : int
        Upper bound of the full table.

    Returns
    -------
    tuple of np.ndarray
        (primes, cursors), parallel int64 arrays. cursors[i] is the next
        index > SK that primes[i] still has to cross out.
    """
    SK = small_index_bound(N)
    primes = []
    cursors = []

    for k in range(1, SK + 1):
        if not store.test(k):
            continue
        p = 2 * k + 1
        t = 2 * k * (k + 1)
        if t <= SK:
            crossed = np.arange(t, SK + 1, p, dtype=np.int64)
            store.reset_many(crossed)
            t += len(crossed) * p
        primes.append(p)
        cursors.append(t)

    return np.array(primes, dtype=np.int64), np.array(cursors, dtype=np.int64)
