# primebelow/sieves/eratosthenes.py
# Plain Sieve of Eratosthenes on a numpy bool array. Used to enumerate small
# primes and as the brute-force reference the Miller-Rabin oracle is checked
# against.
from math import isqrt

import numpy as np


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1 (empty when N < 0).
    """
    if N < 0:
        return np.zeros(0, dtype=bool)
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p * p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """Return array of all primes <= N."""
    return np.nonzero(prime_flags_upto(N))[0]
