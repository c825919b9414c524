"""
Tests for lazy prime iteration.

Iterators share the engine's cache but keep their own positions.
"""

from itertools import islice, takewhile

import numpy as np
import pytest

from prime_tools.primes import PrimeCache, primes_upto
from prime_tools.sequence import PrimeIterator
from prime_tools.tools import PrimeTools


FIRST_TEN = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


class TestIterPrimes:
    """Ordering and laziness."""

    def test_first_ten(self):
        assert list(islice(PrimeTools().iter_primes(), 10)) == FIRST_TEN

    def test_take_while_matches_sieve(self):
        primes = list(takewhile(lambda p: p <= 1000, PrimeTools().iter_primes()))
        assert np.array_equal(np.array(primes), primes_upto(1000))

    def test_grows_cache_lazily(self):
        pt = PrimeTools()
        it = pt.iter_primes()
        assert len(pt) == 2
        list(islice(it, 5))
        assert len(pt) == 5

    def test_never_stops(self):
        it = PrimeTools().iter_primes()
        for _ in range(2000):
            next(it)
        assert it.position == 2000

    def test_iter_returns_self(self):
        it = PrimeIterator(PrimeCache())
        assert iter(it) is it

    def test_start_offset(self):
        it = PrimeIterator(PrimeCache(), start=4)
        assert next(it) == 11

    def test_reset(self):
        it = PrimeTools().iter_primes()
        list(islice(it, 7))
        it.reset()
        assert list(islice(it, 3)) == [2, 3, 5]

    def test_numpy_dtype(self):
        it = PrimeTools(np.int64).iter_primes()
        values = list(islice(it, 10))
        assert values == FIRST_TEN
        assert all(type(p) is np.int64 for p in values)


class TestSharedCache:
    """Several iterators over one cache."""

    def test_independent_positions(self):
        pt = PrimeTools()
        a = pt.iter_primes()
        b = pt.iter_primes()
        list(islice(a, 5))
        list(islice(b, 2))
        assert a.position == 5
        assert b.position == 2
        assert next(b) == 5
        assert next(a) == 13

    def test_interleaved_reads_agree(self):
        """Both iterators advanced to position 5 yield the prime at index 5."""
        pt = PrimeTools()
        a = pt.iter_primes()
        b = pt.iter_primes()
        for _ in range(5):
            next(a)
            next(b)
        x = next(a)
        y = next(b)
        assert x == y == pt.get_prime(5) == 13

    def test_sees_growth_from_queries(self):
        pt = PrimeTools()
        it = pt.iter_primes()
        pt.is_prime(10007)  # grows the cache to 101
        size = len(pt)
        assert list(islice(it, 26)) == list(primes_upto(101))
        assert len(pt) == size


class TestPrimesUpto:
    """Bounded prime lists from the engine."""

    @pytest.mark.parametrize("limit", [0, 1, 2, 3, 10, 97, 100, 1000])
    def test_matches_sieve(self, limit):
        assert PrimeTools().primes_upto(limit) == list(primes_upto(limit))

    @pytest.mark.parametrize("dtype", [int, np.int64, np.uint64])
    @pytest.mark.parametrize("limit", [-1, 0, 1])
    def test_below_two_is_empty(self, dtype, limit):
        """Negative limits never reach the unsigned conversion."""
        pt = PrimeTools(dtype)
        assert pt.primes_upto(limit) == []
        assert len(pt) == 2

    def test_non_integer_limit_rejected(self):
        with pytest.raises(ValueError):
            PrimeTools().primes_upto(10.5)

    def test_agrees_with_iterator(self):
        pt = PrimeTools()
        primes = pt.primes_upto(500)
        assert list(islice(pt.iter_primes(), len(primes))) == primes


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
