from __future__ import annotations

import pytest

from primebelow.primes.backends import (
    MillerRabinBackend,
    PrimeBackend,
    SympyBackend,
    get_backend,
)
from primebelow.primes.search import NoPrimeBelowBound

PRIMES_TO_30 = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.parametrize("backend", [MillerRabinBackend(), SympyBackend()])
def test_primes_up_to_is_inclusive(backend: PrimeBackend) -> None:
    # N itself is included when prime.
    assert backend.primes_up_to(29) == PRIMES_TO_30
    assert backend.primes_up_to(30) == PRIMES_TO_30
    assert backend.primes_up_to(1) == []
    assert all(type(p) is int for p in backend.primes_up_to(100))


def test_backends_agree() -> None:
    # The sympy backend is the reference for the deterministic one.
    mr, ref = MillerRabinBackend(), SympyBackend()
    assert mr.primes_up_to(20_000) == ref.primes_up_to(20_000)
    for n in list(range(3000)) + [2**61 - 1, 2**64 - 59, 2**64 - 1, 3_215_031_751]:
        assert mr.is_prime(n) == ref.is_prime(n), n


@pytest.mark.parametrize("backend", [MillerRabinBackend(), SympyBackend()])
def test_backend_search(backend: PrimeBackend) -> None:
    # Searching through a backend uses that backend's oracle.
    assert backend.largest_prime_below(100) == 97
    assert backend.largest_prime_below(2**64 - 1) == 2**64 - 59
    with pytest.raises(NoPrimeBelowBound):
        backend.largest_prime_below(2)


def test_get_backend_names_and_aliases() -> None:
    # Lookup is case-insensitive; None means the default backend.
    assert isinstance(get_backend(None), MillerRabinBackend)
    assert isinstance(get_backend("miller-rabin"), MillerRabinBackend)
    assert isinstance(get_backend("MR"), MillerRabinBackend)
    assert isinstance(get_backend("default"), MillerRabinBackend)
    assert isinstance(get_backend("sympy"), SympyBackend)


def test_get_backend_rejects_unknown() -> None:
    # Unknown names surface as ValueError for the CLI to report.
    with pytest.raises(ValueError, match="Unknown backend: srt"):
        get_backend("srt")
