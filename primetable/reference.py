"""
Reference primality, independent of the segmented sieve.

Responsibility: ground truth for verification. Plain whole-range sieve on a
bool array and trial division. No bit packing, no segments.
"""

from math import isqrt

import numpy as np


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Unpacked primality flags for every integer 0..N.

    One bool per integer, even ones included, crossed out with whole-array
    slices. Slow on memory but shares nothing with PrimeTable, which is the
    point.

    Parameters
    ----------
    N : int
        Inclusive bound, N >= 0.

    Returns
    -------
    np.ndarray
        Length N+1; entry n is True exactly when n is prime.
    """
    is_prime = np.ones(N + 1, dtype=bool)
    is_prime[:2] = False
    for d in range(2, isqrt(N) + 1):
        if is_prime[d]:
            is_prime[d * d::d] = False
    return is_prime


def is_prime_trial(n: int) -> bool:
    """Trial division."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    for d in range(3, isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True
