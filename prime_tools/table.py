"""
Divisor-function tables.

Responsibility: tabular reports over a range of integers. Builds on the
PrimeTools engine; knows nothing about how primes are produced.
"""

import pandas as pd
from typing import Dict

from .factorization import require_integer
from .tools import PrimeTools

COLUMNS = ['n', 'is_prime', 'omega', 'Omega', 'tau', 'sigma', 'kind', 'factorization']


def format_factorization(factors: Dict) -> str:
    """
    Render a factorization as e.g. '2^3 * 3^2 * 5'.

    An empty factorization (n = 1) renders as '1'.
    """
    if not factors:
        return '1'
    return ' * '.join(f"{p}^{e}" if e > 1 else f"{p}" for p, e in factors.items())


def classify(n, sigma) -> str:
    """
    Classify n by its aliquot sum sigma(n) - n.

    Returns
    -------
    str
        'deficient', 'perfect' or 'abundant'.
    """
    aliquot = sigma - n
    if aliquot < n:
        return 'deficient'
    if aliquot == n:
        return 'perfect'
    return 'abundant'


def divisor_table(start: int, stop: int, tools: PrimeTools = None) -> pd.DataFrame:
    """
    Tabulate divisor functions for every n in [start, stop).

    Parameters
    ----------
    start : int
        First value, >= 1.
    stop : int
        End of the range (exclusive).
    tools : PrimeTools, optional
        Engine to use. A fresh int engine if None.

    Returns
    -------
    pd.DataFrame
        One row per n with columns COLUMNS.
    """
    require_integer(start, minimum=1)
    require_integer(stop)
    if tools is None:
        tools = PrimeTools()

    rows = []
    for n in range(start, stop):
        factors = tools.factorize(n)
        sigma = tools.divisor_sum(n)

        rows.append({
            'n': n,
            'is_prime': tools.is_prime(n),
            'omega': tools.omega(n),
            'Omega': tools.Omega(n),
            'tau': tools.divisor_count(n),
            'sigma': int(sigma),
            'kind': classify(n, int(sigma)),
            'factorization': format_factorization(factors),
        })

    return pd.DataFrame(rows, columns=COLUMNS)
