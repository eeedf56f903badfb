"""
Segmented sieve driver.

Sieves the index range [start, stop] of an odd-indexed store in consecutive
windows, using the seed list from the pre-sieve. Each prime's cursor is
carried from one window to the next, so windows must be processed in
ascending order.

The window is counted in indices (odd numbers), not integers. The default,
256000 indices, is 32 KB of bits per window.
"""

import numpy as np

from .bitvector import BitVector

DEFAULT_WINDOW = 32 * 1000 * 16 // 2


def segmented_sieve(store: BitVector, primes: np.ndarray, cursors: np.ndarray,
                    start: int, stop: int, window: int = DEFAULT_WINDOW) -> int:
    """
    Cross out multiples of the seed primes over indices [start, stop].

    Parameters
    ----------
    store : BitVector
        Odd-indexed flags. Modified in place.
    primes : np.ndarray
        Seed primes (int64).
    cursors : np.ndarray
        Next index to cross out for each prime (int64), all >= start.
        Updated in place; on return every cursor is > stop.
    start, stop : int
        Inclusive index range. Nothing happens when start > stop.
    window : int
        Number of indices per segment.

    Returns
    -------
    int
        Number of segments processed.
    """
    if window < 1:
        raise ValueError(f"window must be a positive integer, got {window}")
    if len(primes) != len(cursors):
        raise ValueError(f"seed list mismatch: {len(primes)} primes, {len(cursors)} cursors")

    segments = 0
    for segment_start in range(start, stop + 1, window):
        segment_end = min(segment_start + window, stop + 1)
        for i in range(len(primes)):
            t = int(cursors[i])
            if t >= segment_end:
                continue
            p = int(primes[i])
            crossed = np.arange(t, segment_end, p, dtype=np.int64)
            store.reset_many(crossed)
            cursors[i] = t + len(crossed) * p
        segments += 1

    return segments
