# primebelow/primes/cli.py
# Usage: largest-prime 100 [--backend miller-rabin|sympy] [--verify]
#    or: python -m primebelow.primes.cli 100

import argparse
import os
import sys

from primebelow.primes.backends import BACKEND_NAMES, get_backend
from primebelow.primes.miller_rabin import U64_MAX
from primebelow.primes.search import NoPrimeBelowBound

__version__ = "0.1.0"

EXIT_OK = 0
EXIT_NO_PRIME = 1
EXIT_USAGE = 2
EXIT_MISMATCH = 3


def _u64(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{text}' is not a valid unsigned integer") from None
    if not 0 <= n <= U64_MAX:
        raise argparse.ArgumentTypeError(f"'{text}' is outside the unsigned 64-bit range")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="largest-prime",
        description="Finds the largest prime below the given integer (unsigned 64 bit)",
    )
    parser.add_argument("number", type=_u64, help="Number to search below")
    parser.add_argument(
        "--backend",
        type=str.lower,
        default=os.environ.get("PRIMEBELOW_BACKEND", "miller-rabin"),
        choices=BACKEND_NAMES,
        help="Primality backend (default: $PRIMEBELOW_BACKEND or miller-rabin)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check the answer against sympy.prevprime",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        backend = get_backend(args.backend)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        p = backend.largest_prime_below(args.number)
    except NoPrimeBelowBound as e:
        print(e, file=sys.stderr)
        return EXIT_NO_PRIME

    print(p)

    if args.verify:
        from sympy import prevprime
        expected = int(prevprime(args.number))
        print(f"Expected (sympy.prevprime): {expected}", file=sys.stderr)
        if expected != p:
            print(f"Mismatch: {args.backend} returned {p}", file=sys.stderr)
            return EXIT_MISMATCH

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
