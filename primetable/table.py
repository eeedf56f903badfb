"""
Prime number table generated by the segmented Sieve of Eratosthenes.

All primes <= N are found at construction and kept in a bit vector of odd
numbers (odd n = 2k + 1 <-> index k; index 0, the number 1, is cleared).
Primality tests are O(1) lookups; enumeration walks the table with a
PrimeIterator.

Construction:
1. Pre-sieve the odd primes up to isqrt(N) with the ordinary method,
   recording for each one the next index it has to cross out.
2. Sieve the remaining indices in windows that fit in cache, carrying the
   per-prime cursors from window to window.

The table is read-only after construction, so it can be shared between
threads and iterators freely.
"""

import numbers
from math import isqrt
from typing import Iterator

import numpy as np

from .bitvector import BitVector
from .bounds import nth_prime_bounds
from .presieve import small_index_bound, small_prime_sieve
from .segmented_sieve import DEFAULT_WINDOW, segmented_sieve


def _check_integer(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return int(value)


class PrimeTable:
    """
    Table of the primes <= N.

    Parameters
    ----------
    N : int
        Inclusive upper bound, N >= 0. N < 2 gives a table with no primes.
    window : int
        Segment size of the sieve, in odd-number indices.
    verbose : bool
        Print progress of the sieve.
    """

    def __init__(self, N: int, window: int = DEFAULT_WINDOW, verbose: bool = False):
        N = _check_integer("N", N)
        if N < 0:
            raise ValueError(f"N must be non-negative, got {N}")
        window = _check_integer("window", window)
        if window < 1:
            raise ValueError(f"window must be a positive integer, got {window}")

        self._limit = N
        self._table = BitVector((N + 2) // 2, True)
        self._table.reset(0)

        K = (N - 1) // 2
        SK = small_index_bound(N)
        primes, cursors = small_prime_sieve(self._table, N)
        if verbose:
            print(f"    Found {len(primes)} odd primes up to {isqrt(N)}")

        segments = segmented_sieve(self._table, primes, cursors, SK + 1, K, window)
        if verbose:
            print(f"    Sieved {segments} segments of {window:,} odd numbers "
                  f"({self._table.nbytes:,} bytes)")

    @classmethod
    def for_count(cls, n: int, **kwargs) -> "PrimeTable":
        """
        Build a table large enough to hold the first n primes.

        The bound is the upper value of nth_prime_bounds(n).
        """
        _, upper = nth_prime_bounds(n)
        return cls(upper, **kwargs)

    def limit(self) -> int:
        """Return the inclusive upper bound N."""
        return self._limit

    @property
    def nbytes(self) -> int:
        """Memory held by the packed prime flags."""
        return self._table.nbytes

    def test_odd(self, n: int) -> bool:
        """
        Test whether the odd integer n is prime.

        n must be odd and 1 <= n <= limit(). Constant time.
        """
        n = _check_integer("n", n)
        if n < 1 or n > self._limit or n % 2 == 0:
            raise ValueError(f"test_odd expects an odd n in [1, {self._limit}], got {n}")
        return self._table.test(n // 2)

    def test(self, n: int) -> bool:
        """
        Test whether n is prime.

        n must satisfy 1 <= n <= limit(). Constant time.
        """
        n = _check_integer("n", n)
        if n < 1 or n > self._limit:
            raise ValueError(f"test expects n in [1, {self._limit}], got {n}")
        if n == 1:
            return False
        elif n == 2:
            return True
        elif n % 2 == 0:
            return False
        else:
            return self.test_odd(n)

    def begin(self) -> "PrimeIterator":
        """Iterator at the smallest prime in the table."""
        return PrimeIterator(self, 2 if self._limit >= 2 else 0)

    def end(self) -> "PrimeIterator":
        """Iterator past the largest prime in the table."""
        return PrimeIterator(self, 0)

    def lower_bound(self, n: int) -> "PrimeIterator":
        """
        Iterator at the smallest prime >= n, or end() if there is none.

        Linear scan from begin(): the cost grows with the number of primes
        below n.
        """
        n = _check_integer("n", n)
        it = self.begin()
        while not it.is_exhausted() and it.value < n:
            it.advance()
        return it

    def __iter__(self) -> Iterator[int]:
        it = self.begin()
        while not it.is_exhausted():
            yield it.value
            it.advance()

    def __contains__(self, n) -> bool:
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            return False
        if n < 1 or n > self._limit:
            return False
        return self.test(n)

    def __repr__(self) -> str:
        return f"PrimeTable(N={self._limit})"


class PrimeIterator:
    """
    Forward cursor over the primes of a PrimeTable, smallest to largest.

    Holds the current prime, or 0 once exhausted. The table must outlive
    the iterator.

    Equality is NOT value equality: two iterators compare equal if and only
    if both are exhausted. Two live iterators are always unequal, even at the
    same prime of the same table. It exists for the "advance until equal to
    end()" loop; prefer is_exhausted().
    """

    __hash__ = None

    def __init__(self, table: PrimeTable, current: int):
        self._table = table
        self._current = current

    def is_exhausted(self) -> bool:
        return self._current == 0

    @property
    def value(self) -> int:
        """The current prime."""
        if self._current == 0:
            raise ValueError("cannot dereference an exhausted prime iterator")
        return self._current

    def advance(self) -> "PrimeIterator":
        """Move to the next prime, or become exhausted. Returns self."""
        if self._current == 0:
            raise ValueError("cannot advance an exhausted prime iterator")

        limit = self._table.limit()
        if self._current == 2:
            p = 3
        else:
            p = self._current + 2
            while p <= limit:
                if self._table.test_odd(p):
                    break
                p += 2

        self._current = p if p <= limit else 0
        return self

    def __eq__(self, other):
        if not isinstance(other, PrimeIterator):
            return NotImplemented
        return self._current == 0 and other._current == 0

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self) -> str:
        if self._current == 0:
            return "PrimeIterator(end)"
        return f"PrimeIterator({self._current})"


def primes_upto(N: int, window: int = DEFAULT_WINDOW) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).
    window : int
        Segment size of the sieve.

    Returns
    -------
    np.ndarray
        Ascending int64 array of primes.
    """
    return np.fromiter(PrimeTable(N, window=window), dtype=np.int64)
