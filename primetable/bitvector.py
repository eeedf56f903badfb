"""
Fixed-size packed bit vector.

Responsibility: storage only. One bit per flag, packed 64 to a numpy
uint64 word. Bit k lives in word k >> 6 at position k & 63.

The size is fixed at construction; there is no append or resize.
Only clearing is supported after construction, which is all a sieve needs.
"""

import numpy as np

WORD_BITS = 64

# _MASKS[j] has only bit j set.
_MASKS = np.left_shift(np.uint64(1), np.arange(WORD_BITS, dtype=np.uint64))


class BitVector:
    """
    Packed array of boolean flags with O(1) test and reset.

    Parameters
    ----------
    size : int
        Number of flags. Fixed for the lifetime of the vector.
    value : bool
        Initial value of every flag (default True).
    """

    def __init__(self, size: int, value: bool = True):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._size = size
        n_words = (size + WORD_BITS - 1) // WORD_BITS
        fill = np.iinfo(np.uint64).max if value else 0
        self._words = np.full(n_words, fill, dtype=np.uint64)

    def __len__(self) -> int:
        return self._size

    @property
    def size(self) -> int:
        return self._size

    @property
    def nbytes(self) -> int:
        """Memory held by the packed words."""
        return self._words.nbytes

    def _check(self, k: int):
        if k < 0 or k >= self._size:
            raise IndexError(f"bit index {k} out of range [0, {self._size})")

    def test(self, k: int) -> bool:
        """Return flag k."""
        self._check(k)
        return bool(self._words[k >> 6] & _MASKS[k & 63])

    def reset(self, k: int):
        """Clear flag k."""
        self._check(k)
        self._words[k >> 6] &= ~_MASKS[k & 63]

    def reset_many(self, indices: np.ndarray):
        """
        Clear every flag listed in `indices`.

        Repeated indices and indices sharing a word are fine: the update
        is unbuffered (np.bitwise_and.at).
        """
        indices = np.asarray(indices, dtype=np.int64)
        if indices.size == 0:
            return
        lo = int(indices.min())
        hi = int(indices.max())
        if lo < 0 or hi >= self._size:
            bad = lo if lo < 0 else hi
            raise IndexError(f"bit index {bad} out of range [0, {self._size})")
        np.bitwise_and.at(self._words, indices >> 6, ~_MASKS[indices & 63])

    def to_bools(self) -> np.ndarray:
        """Unpack into a bool array of length `size` (copy)."""
        as_bytes = self._words.astype('<u8').view(np.uint8)
        bits = np.unpackbits(as_bytes, bitorder='little')
        return bits[:self._size].astype(bool)

    def __repr__(self) -> str:
        return f"BitVector(size={self._size})"
