"""
Prime tools engine.

Responsibility: one object owning one prime cache and answering every
query against it. Not thread-safe: an instance must be used from one
thread at a time (or behind a lock).
"""

import bisect
from typing import Dict, List

from .primes import PrimeCache
from .sequence import PrimeIterator
from . import factorization


class PrimeTools:
    """
    Number-theory queries backed by a lazily grown prime cache.

    Every instance starts with the two seed primes and grows its own cache
    monotonically as queries need more primes. Inputs are converted to the
    engine's dtype, so results come back in that type.

    Parameters
    ----------
    dtype : type
        Integer type to compute with (int, np.int64, ...).

    Examples
    --------
    >>> pt = PrimeTools()
    >>> pt.factorize(360)
    {2: 3, 3: 2, 5: 1}
    >>> pt.divisor_sum(360)
    1170
    """

    def __init__(self, dtype=int):
        self.dtype = dtype
        self.cache = PrimeCache(dtype)

    def __len__(self) -> int:
        return len(self.cache)

    def __repr__(self) -> str:
        return f"PrimeTools({self.cache!r})"

    def _coerce(self, n, minimum=None):
        factorization.require_integer(n, minimum)
        return self.dtype(n)

    def get_prime(self, index: int):
        """Return the index-th prime (0-based), growing the cache if needed."""
        return self.cache.get_prime(index)

    def is_prime(self, n) -> bool:
        factorization.require_integer(n)
        if n < 2:
            return False
        return factorization.is_prime(self.dtype(n), self.cache)

    def factorize(self, n) -> Dict:
        return factorization.factorize(self._coerce(n, 1), self.cache)

    def divisors(self, n) -> List:
        return factorization.divisors(self._coerce(n, 1), self.cache)

    def divisor_sum(self, n):
        return factorization.divisor_sum(self._coerce(n, 1), self.cache)

    def divisor_count(self, n) -> int:
        return factorization.divisor_count(self._coerce(n, 1), self.cache)

    def omega(self, n) -> int:
        return factorization.omega(self._coerce(n, 1), self.cache)

    def Omega(self, n) -> int:
        return factorization.Omega(self._coerce(n, 1), self.cache)

    def iter_primes(self) -> PrimeIterator:
        """Return a fresh iterator over all primes, starting at 2."""
        return PrimeIterator(self.cache)

    def primes_upto(self, limit) -> List:
        """
        Return all primes <= limit, ascending.

        Parameters
        ----------
        limit : int
            Upper bound (inclusive).

        Returns
        -------
        list
            Primes of the engine's dtype.
        """
        factorization.require_integer(limit)
        if limit < 2:
            return []
        limit = self.dtype(limit)
        self.cache.ensure_bound(limit)
        return self.cache.primes[:bisect.bisect_right(self.cache.primes, limit)]
