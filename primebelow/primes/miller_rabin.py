# primebelow/primes/miller_rabin.py
# Deterministic Miller-Rabin for every n in [0, 2**64).
from typing import Optional, Tuple

U64_MAX = (1 << 64) - 1

# First twelve primes. Strong probable prime to all of them and
# n < 318665857834031151167461 (psi_12, Sorenson & Webster 2015) means n is
# prime, which covers all 64-bit inputs.
# Do not trim or reorder-and-truncate this tuple.
WITNESSES: Tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

_SMALL_PRIMES = (3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
                 53, 59, 61, 67, 71, 73, 79, 83, 89, 97)


def check_u64(n: int) -> None:
    if not 0 <= n <= U64_MAX:
        raise ValueError(f"{n} is outside the unsigned 64-bit range")


def _trial_division(n: int) -> Optional[bool]:
    # None means "undecided", n has no factor below 100
    for p in _SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False
    return None


def decompose(n: int) -> Tuple[int, int]:
    """Write n - 1 as d * 2**r with d odd and return (r, d)."""
    if n < 3 or n % 2 == 0:
        raise ValueError(f"decompose expects an odd n >= 3, got {n}")
    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1
    return r, d


def _passes(a: int, n: int, r: int, d: int) -> bool:
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(r - 1):
        x = pow(x, 2, n)
        if x == n - 1:
            return True
    return False


def is_strong_probable_prime(n: int, a: int) -> bool:
    """One Miller-Rabin round: is odd n a strong probable prime to base a?

    Composites that pass are strong pseudoprimes to base a (2047 is the
    smallest one for a = 2). A base divisible by n says nothing about n and
    counts as a pass. ``is_prime`` only trusts the full WITNESSES set.
    """
    r, d = decompose(n)
    a %= n
    if a == 0:
        return True
    return _passes(a, n, r, d)


def is_prime(n: int) -> bool:
    check_u64(n)
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    small = _trial_division(n)
    if small is not None:
        return small
    r, d = decompose(n)
    for a in WITNESSES:
        if a >= n:
            continue
        if not _passes(a, n, r, d):
            return False
    return True
