"""
Tests for the verification script's building blocks.
"""

import pandas as pd
import pytest

from primetable import PrimeTable
from run_verify import benchmark, verify_bounds, verify_table


class TestVerifyTable:

    @pytest.mark.parametrize("N", [0, 1, 2, 30, 1000])
    def test_passes(self, N):
        assert verify_table(N, window=7, verbose=False)

    def test_prints_summary(self, capsys):
        verify_table(30, window=7)
        out = capsys.readouterr().out
        assert "✓ N=30: 10 primes" in out


class TestVerifyBounds:

    def test_sample(self):
        assert verify_bounds([1, 5, 6, 100], window=1000, verbose=False)


class TestBenchmark:

    def test_table(self):
        df = benchmark([100, 1000], window=64)
        assert isinstance(df, pd.DataFrame)
        assert df['N'].tolist() == [100, 1000]
        assert df['primes'].tolist() == [25, 168]
        assert (df['store_bytes'] == [8, 64]).all()
        assert df['store_bytes'].tolist() == [PrimeTable(N).nbytes for N in (100, 1000)]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
