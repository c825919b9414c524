"""
Prime generation utilities.

Responsibility: prime generation only. No factorization, no divisor logic.

PrimeCache grows a table of primes one prime at a time by trial division
against the primes it already knows. It works for any integer type that
supports ordering, +, % and an integer square root (Python int, numpy
integer scalars, ...). The numpy sieve below is an independent oracle used
to cross-check the cache.
"""

import bisect
from math import isqrt

import numpy as np


class InvalidInput(ValueError):
    """Raised for values outside an operation's domain."""


class PrimeCache:
    """
    Ordered, growing table of primes of a single integer type.

    Invariant: if the largest cached prime is M, every prime <= M is cached.
    The table only ever grows.

    Parameters
    ----------
    dtype : type
        Integer type of the cached values. Defaults to Python int.

    Note
    ----
    Fixed-width types (e.g. np.int32) are not guarded against overflow.
    The caller must pick a type wide enough for the inputs and their
    square roots.
    """

    def __init__(self, dtype=int):
        self.dtype = dtype
        self.zero = dtype(0)
        self.one = dtype(1)
        self.two = self.one + self.one
        self.primes = [self.two, self.two + self.one]

    def __len__(self) -> int:
        return len(self.primes)

    def __contains__(self, value) -> bool:
        i = bisect.bisect_left(self.primes, value)
        return i < len(self.primes) and self.primes[i] == value

    def __repr__(self) -> str:
        return f"PrimeCache(dtype={self.dtype.__name__}, size={len(self)}, last={self.last})"

    @property
    def last(self):
        """Largest known prime."""
        return self.primes[-1]

    def isqrt(self, n):
        """Integer square root of n, as the cache's dtype."""
        return self.dtype(isqrt(n))

    def add_prime(self):
        """
        Append the next prime after the current largest one.

        Candidates start at last + 2 (every prime past 2 is odd) and are
        tested against all cached primes in ascending order.

        Returns
        -------
        dtype
            The prime just appended.
        """
        candidate = self.last + self.two
        while True:
            if all(candidate % p != self.zero for p in self.primes):
                self.primes.append(candidate)
                return candidate
            candidate += self.two

    def ensure_count(self, n: int):
        """
        Grow until index n is valid and return the prime at that index.

        Parameters
        ----------
        n : int
            0-based index into the ascending prime sequence.

        Returns
        -------
        dtype
            The n-th prime (0 -> 2, 1 -> 3, ...).
        """
        if n < 0:
            raise InvalidInput(f"prime index must be >= 0, got {n}")
        while len(self.primes) <= n:
            self.add_prime()
        return self.primes[n]

    get_prime = ensure_count

    def ensure_bound(self, limit):
        """Grow until the largest cached prime is >= limit."""
        while self.last < limit:
            self.add_prime()

    def as_array(self) -> np.ndarray:
        """
        Return the cached primes as a numpy array.

        numpy dtypes are kept as is. Python ints become int64 when they fit,
        object otherwise.
        """
        if self.dtype is int:
            if self.last <= np.iinfo(np.int64).max:
                return np.array(self.primes, dtype=np.int64)
            return np.array(self.primes, dtype=object)
        return np.array(self.primes, dtype=self.dtype)


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """Return array of all primes <= N, from the sieve."""
    return np.nonzero(prime_flags_upto(N))[0]
