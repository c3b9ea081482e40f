# primebelow/primes/search.py
from typing import Callable

from .miller_rabin import check_u64, is_prime


class NoPrimeBelowBound(ValueError):
    """Raised when the bound is <= 2, the smallest prime being 2."""

    def __init__(self, bound: int):
        self.bound = bound
        super().__init__(f"There is no prime less than {bound}")


def largest_prime_below(n: int, is_prime_fn: Callable[[int], bool] = is_prime) -> int:
    """Return the largest prime strictly less than n.

    Scans n - 1, n - 2, ... downward and returns the first candidate
    ``is_prime_fn`` accepts. Even candidates above 2 are skipped without
    asking the oracle.
    """
    check_u64(n)
    if n <= 2:
        raise NoPrimeBelowBound(n)
    if n == 3:
        return 2
    cand = n - 1 if n % 2 == 0 else n - 2
    while cand >= 3:
        if is_prime_fn(cand):
            return cand
        cand -= 2
    return 2
