# primebelow/primes/backends.py
from abc import ABC, abstractmethod
from typing import List

from sympy import isprime, primerange

from .miller_rabin import is_prime
from .search import largest_prime_below
from ..sieves.eratosthenes import primes_upto


class PrimeBackend(ABC):
    name = "abstract"

    @abstractmethod
    def primes_up_to(self, N: int) -> List[int]:
        ...

    @abstractmethod
    def is_prime(self, n: int) -> bool:
        ...

    def largest_prime_below(self, n: int) -> int:
        return largest_prime_below(n, is_prime_fn=self.is_prime)


class MillerRabinBackend(PrimeBackend):
    name = "miller-rabin"

    def primes_up_to(self, N: int) -> List[int]:
        return [int(p) for p in primes_upto(N)]

    def is_prime(self, n: int) -> bool:
        return is_prime(int(n))


class SympyBackend(PrimeBackend):
    # Reference oracle for cross-checking; not restricted to 64 bits.
    name = "sympy"

    def primes_up_to(self, N: int) -> List[int]:
        return list(primerange(2, N + 1))

    def is_prime(self, n: int) -> bool:
        return bool(isprime(int(n)))


_BACKENDS = {
    "miller-rabin": MillerRabinBackend,
    "mr": MillerRabinBackend,
    "default": MillerRabinBackend,
    "sympy": SympyBackend,
}

BACKEND_NAMES = tuple(_BACKENDS)


def get_backend(name: str | None) -> PrimeBackend:
    key = (name or "miller-rabin").lower()
    try:
        return _BACKENDS[key]()
    except KeyError:
        raise ValueError(f"Unknown backend: {name}") from None
