"""
Bounds on the n-th prime.

Independent of any table. For n >= 6,

    n ln n + n ln ln n - n < p_n < n ln n + n ln ln n

(see the prime-counting function article on Wikipedia). The bounds are
used to size a table that must hold the first n primes.
"""

import numbers
from typing import Tuple

import numpy as np


def nth_prime_bounds(n: int) -> Tuple[int, int]:
    """
    Return inclusive (lower, upper) bounds of the n-th prime (1-based).

    Parameters
    ----------
    n : int
        Index of the prime, n >= 1.

    Returns
    -------
    tuple
        (2, 11) for n < 6, otherwise
        (floor(n t) - n - 1, floor(n t) + 1) with t = ln n + ln ln n
        evaluated in extended precision.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValueError(f"n must be an integer, got {n!r}")
    n = int(n)
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if n < 6:
        return 2, 11

    ln_n = np.log(np.longdouble(n))
    t = ln_n + np.log(ln_n)
    m = int(np.floor(n * t))
    return m - n - 1, m + 1
