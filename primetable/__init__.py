"""
Prime number table built with a segmented Sieve of Eratosthenes.
"""

from .bitvector import BitVector
from .bounds import nth_prime_bounds
from .config import load_config
from .segmented_sieve import DEFAULT_WINDOW
from .table import PrimeIterator, PrimeTable, primes_upto

__all__ = [
    'BitVector',
    'DEFAULT_WINDOW',
    'PrimeIterator',
    'PrimeTable',
    'load_config',
    'nth_prime_bounds',
    'primes_upto',
]
