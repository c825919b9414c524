"""
Lazy prime sequences.

Responsibility: ordered iteration over a PrimeCache. Iterating is not
read-only: asking for a prime past the end of the cache grows it.
"""

from .primes import PrimeCache


class PrimeIterator:
    """
    Infinite iterator over the primes of a cache, smallest first.

    The iterator does not own the cache; several iterators can walk the
    same cache, each with its own position. It never stops on its own, so
    bound it with itertools.islice / takewhile.

    Parameters
    ----------
    cache : PrimeCache
        Prime table to read from (and grow).
    start : int
        Index of the first prime to yield.
    """

    def __init__(self, cache: PrimeCache, start: int = 0):
        self.cache = cache
        self.position = start

    def __iter__(self):
        return self

    def __next__(self):
        p = self.cache.ensure_count(self.position)
        self.position += 1
        return p

    def reset(self):
        """Rewind to the first prime."""
        self.position = 0
