"""
Factorization utilities.

Responsibility: primality, prime factorization and the divisor functions
derived from it. Every function reads primes from a PrimeCache and grows it
as far as the query needs; none of them knows how primes are generated.
"""

import numbers
from itertools import takewhile
from typing import Dict, List

from .primes import InvalidInput, PrimeCache

__all__ = [
    "InvalidInput",
    "require_integer",
    "is_prime",
    "factorize",
    "divisors",
    "divisor_sum",
    "divisor_count",
    "omega",
    "Omega",
]


def require_integer(n, minimum=None):
    """
    Check that n is an integer, optionally >= minimum.

    Raises
    ------
    InvalidInput
        If n is not integral or is below minimum.
    """
    if not isinstance(n, numbers.Integral):
        raise InvalidInput(f"expected an integer, got {type(n).__name__} {n!r}")
    if minimum is not None and n < minimum:
        raise InvalidInput(f"n must be >= {minimum}, got {n}")
    return n


def is_prime(n, cache: PrimeCache) -> bool:
    """
    Test n for primality.

    If n is not above the largest cached prime, this is a lookup. Otherwise
    the cache is grown to isqrt(n) and n is trial-divided by the primes up
    to that bound.

    Parameters
    ----------
    n : int
        Value to test. Anything below 2 is not prime.
    cache : PrimeCache
        Prime table to read from (and grow).

    Returns
    -------
    bool
        True iff n is prime.
    """
    require_integer(n)
    if n < 2:
        return False
    if cache.last >= n:
        return n in cache

    sqrt_n = cache.isqrt(n)
    cache.ensure_bound(sqrt_n)
    return all(n % p != cache.zero
               for p in takewhile(lambda p: p <= sqrt_n, cache.primes))


def factorize(n, cache: PrimeCache) -> Dict:
    """
    Compute the prime factorization of n.

    Primes are tried in ascending order. Each one that divides the remainder
    is divided out completely, which shrinks the square-root bound. Once the
    current prime exceeds isqrt(remainder), the remainder is 1 or a prime.

    Parameters
    ----------
    n : int
        Integer to factor, n >= 1.
    cache : PrimeCache
        Prime table to read from (and grow).

    Returns
    -------
    dict
        {prime: exponent}, ordered by ascending prime. Empty for n = 1.

    Raises
    ------
    InvalidInput
        If n is not an integer >= 1.
    """
    require_integer(n, minimum=1)

    m = n
    sqrt_m = cache.isqrt(m)
    cache.ensure_bound(sqrt_m)

    factors = {}
    k = 0
    while True:
        # get_prime grows the cache when isqrt(n) is the last prime and
        # does not divide n
        p = cache.get_prime(k)
        if m % p == cache.zero:
            exp = 0
            while m % p == cache.zero:
                m //= p
                exp += 1
            factors[p] = exp
            sqrt_m = cache.isqrt(m)

        if p > sqrt_m:
            if m != cache.one:
                factors[m] = 1
            break
        k += 1

    return factors


def divisors(n, cache: PrimeCache) -> List:
    """
    Return every positive divisor of n, ascending.

    The divisors are enumerated with an odometer over the exponent vector of
    the factorization: the smallest prime's exponent turns fastest and
    carries into the next prime when it passes its maximum.

    Parameters
    ----------
    n : int
        Integer >= 1.
    cache : PrimeCache
        Prime table to read from (and grow).

    Returns
    -------
    list
        Unique divisors in ascending order, 1 and n included.
    """
    factors = list(factorize(n, cache).items())

    exps = [0] * len(factors)
    result = set()
    current = cache.one

    while True:
        result.add(current)
        for i, (p, e) in enumerate(factors):
            if exps[i] < e:
                current *= p
                exps[i] += 1
                break
            current //= p ** e
            exps[i] = 0

        if current == cache.one:
            break

    return sorted(result)


def divisor_sum(n, cache: PrimeCache):
    """
    Sum of the positive divisors of n, sigma(n).

    Uses the closed form prod((p^(e+1) - 1) / (p - 1)); every division is
    exact.
    """
    total = cache.one
    for p, e in factorize(n, cache).items():
        total *= (p ** (e + 1) - cache.one) // (p - cache.one)
    return total


def divisor_count(n, cache: PrimeCache) -> int:
    """Number of positive divisors of n, tau(n) = prod(e + 1)."""
    count = 1
    for e in factorize(n, cache).values():
        count *= e + 1
    return count


def omega(n, cache: PrimeCache) -> int:
    """
    Count distinct prime factors of n (little omega).

    Parameters
    ----------
    n : int
        Integer >= 1.
    cache : PrimeCache
        Prime table to read from (and grow).

    Returns
    -------
    int
        Number of distinct prime factors, 0 for n = 1.
    """
    return len(factorize(n, cache))


def Omega(n, cache: PrimeCache) -> int:
    """Count prime factors of n with multiplicity (big Omega)."""
    return sum(factorize(n, cache).values())
