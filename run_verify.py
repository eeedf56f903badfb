#!/usr/bin/env python3
"""
Verify and benchmark the segmented prime table.

1. Correctness sweep against the reference sieve.
2. nth_prime_bounds against enumerated primes.
3. Construction timings, written to <output_dir>/benchmark.csv.

Usage:
    python run_verify.py
    python run_verify.py --config config/custom.yaml --skip-benchmark
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np
import pandas as pd

from primetable import PrimeTable, load_config, nth_prime_bounds
from primetable.reference import prime_flags_upto


def verify_table(N: int, window: int, verbose: bool = True) -> bool:
    """Compare PrimeTable(N) with the reference sieve for every n in [1, N]."""
    t0 = time.time()
    table = PrimeTable(N, window=window)
    t_table = time.time() - t0

    flags = prime_flags_upto(N)
    errors = 0
    for n in range(1, N + 1):
        if table.test(n) != flags[n]:
            errors += 1
            if errors <= 10:
                print(f"  MISMATCH at n={n}: table={table.test(n)}, reference={flags[n]}")

    enumerated = np.fromiter(table, dtype=np.int64)
    expected = np.nonzero(flags)[0]
    enum_ok = np.array_equal(enumerated, expected)
    if not enum_ok:
        print(f"  ENUMERATION MISMATCH for N={N:,}: {len(enumerated):,} vs {len(expected):,} primes")

    if verbose:
        status = "✓" if errors == 0 and enum_ok else "✗"
        print(f"  {status} N={N:,}: {len(expected):,} primes, built in {t_table:.3f}s")

    return errors == 0 and enum_ok


def verify_bounds(sample, window: int, verbose: bool = True) -> bool:
    """Check that nth_prime_bounds(n) brackets the n-th prime."""
    table = PrimeTable.for_count(max(sample), window=window)
    primes = np.fromiter(table, dtype=np.int64)

    ok = True
    for n in sample:
        lower, upper = nth_prime_bounds(n)
        p_n = int(primes[n - 1])
        inside = lower <= p_n <= upper
        ok = ok and inside
        if verbose:
            status = "✓" if inside else "✗"
            print(f"  {status} n={n:,}: {lower:,} <= p_n={p_n:,} <= {upper:,}")
    return ok


def benchmark(limits, window: int) -> pd.DataFrame:
    """Time table construction for each bound."""
    rows = []
    for N in limits:
        t0 = time.time()
        table = PrimeTable(N, window=window)
        t_build = time.time() - t0

        t0 = time.time()
        count = sum(1 for _ in table)
        t_iter = time.time() - t0

        rows.append({
            'N': N,
            'window': window,
            'primes': count,
            'build_s': t_build,
            'iterate_s': t_iter,
            'store_bytes': table.nbytes,
        })
        print(f"  N={N:,}: build {t_build:.2f}s, iterate {t_iter:.2f}s")
    return pd.DataFrame(rows)


def main():
    parser = argparse.ArgumentParser(description='Verify and benchmark the prime table')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--skip-benchmark', action='store_true',
                        help='Only run the correctness checks')
    args = parser.parse_args()

    config = load_config(args.config)
    window = config['window']

    print("=" * 60)
    print("Segmented Prime Table - Verification")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  window = {window:,}")
    print(f"  verify_limits = {config['verify_limits']}")
    print(f"  bounds_sample = {config['bounds_sample']}")
    print()

    print("-" * 60)
    print("1. Correctness sweep")
    print("-" * 60)
    sweep_ok = all([verify_table(N, window) for N in config['verify_limits']])
    print()

    print("-" * 60)
    print("2. n-th prime bounds")
    print("-" * 60)
    bounds_ok = verify_bounds(config['bounds_sample'], window)
    print()

    if not args.skip_benchmark:
        print("-" * 60)
        print("3. Benchmark")
        print("-" * 60)
        df = benchmark(config['benchmark_limits'], window)

        output_dir = Path(config['output_dir'])
        output_dir.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_dir / 'benchmark.csv', index=False)
        print()
        print(df.to_string(index=False))
        print(f"\nSaved to: {(output_dir / 'benchmark.csv').absolute()}")
        print()

    print("=" * 60)
    if sweep_ok and bounds_ok:
        print("✓ All verifications passed!")
    else:
        print("✗ Some verifications failed!")
        sys.exit(1)


if __name__ == '__main__':
    main()
