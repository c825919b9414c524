#!/usr/bin/env python3
"""
Divisor-function table.

Tabulates primality, omega, Omega, tau and sigma for a range of integers
and writes the table to CSV.

Usage:
    python run_table.py
    python run_table.py --config config/custom.yaml
    python run_table.py --start 1 --stop 100000 --verify
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np

from prime_tools.config import load_config, resolve_dtype, validate_config
from prime_tools.primes import prime_flags_upto
from prime_tools.table import divisor_table
from prime_tools.tools import PrimeTools


def verify_primality(df, stop: int) -> int:
    """Compare the table's is_prime column with the sieve. Returns mismatch count."""
    flags = prime_flags_upto(stop)
    expected = flags[df['n'].to_numpy()]
    mismatches = np.nonzero(expected != df['is_prime'].to_numpy())[0]
    for i in mismatches[:10]:
        n = df['n'].iloc[i]
        print(f"  MISMATCH n={n}: table={df['is_prime'].iloc[i]} sieve={flags[n]}")
    return len(mismatches)


def main():
    parser = argparse.ArgumentParser(description='Tabulate divisor functions')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--start', type=int, default=None,
                        help='First n (overrides config)')
    parser.add_argument('--stop', type=int, default=None,
                        help='End of range, exclusive (overrides config)')
    parser.add_argument('--verify', action='store_true',
                        help='Cross-check primality against the numpy sieve')
    args = parser.parse_args()

    config = load_config(args.config)
    if args.start is not None:
        config['start'] = args.start
    if args.stop is not None:
        config['stop'] = args.stop
    if args.verify:
        config['verify'] = True
    config = validate_config(config)

    print("=" * 60)
    print("Divisor-Function Table")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  range = [{config['start']:,}, {config['stop']:,})")
    print(f"  dtype = {config['dtype']}")
    print(f"  verify = {config['verify']}")
    print()

    output_dir = Path(config['output_dir'])
    output_dir.mkdir(parents=True, exist_ok=True)

    tools = PrimeTools(resolve_dtype(config['dtype']))

    print("-" * 60)
    print("1. Tabulating")
    print("-" * 60)
    start = time.time()
    df = divisor_table(config['start'], config['stop'], tools)
    print(f"   {len(df):,} rows, {len(tools):,} primes cached")
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    failed = 0
    if config['verify']:
        print("-" * 60)
        print("2. Verifying against sieve")
        print("-" * 60)
        start = time.time()
        failed = verify_primality(df, config['stop'])
        print(f"   {failed} mismatches")
        print(f"   Completed in {time.time() - start:.1f}s")
        print()

    path = output_dir / 'divisor_table.csv'
    df.to_csv(path, index=False)

    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"\nPrimes: {int(df['is_prime'].sum()):,}")
    perfect = df.loc[df['kind'] == 'perfect', 'n'].tolist()
    print(f"Perfect numbers: {perfect}")
    top = df.loc[df['tau'].idxmax()]
    print(f"Largest tau: tau({top['n']}) = {top['tau']}")
    print(f"\nOutput saved to: {path.absolute()}")

    if failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
