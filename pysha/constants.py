# constants.py
# Padding families and the helpers used to derive the FIPS 180-4 constants.
# The literal tables live in the compression modules; `nprimes`, `root_fraction`
# and `compute_constants` exist only to cross-check them.

from __future__ import annotations

import decimal
import math
import typing as t

from dataclasses import dataclass


@dataclass(frozen=True)
class AlgorithmFamily:
    """Padding regime shared by a group of algorithms.

    See definition in NIST FIPS 180-4, Section 5.1."""

    block_size: int
    length_size: int

    @property
    def threshold(self) -> int:
        """Largest occupied size that still leaves room for the length field."""
        return self.block_size - self.length_size


# SHA-1, SHA-224, SHA-256
FAMILY_512 = AlgorithmFamily(block_size=64, length_size=8)

# SHA-384, SHA-512, SHA-512/224, SHA-512/256
FAMILY_1024 = AlgorithmFamily(block_size=128, length_size=16)

# Conservative input guard, in bytes
MAX_INPUT_LENGTH: int = 1 << 61

MASK32: int = 0xFFFFFFFF


def nprimes(n: int) -> list[int]:
    """Returns the first n prime numbers"""
    primes: list = []

    def is_prime(number: int) -> bool:
        if number < 2:
            return False
        if number == 2:
            return True
        if number % 2 == 0:
            return False

        for i in range(3, int(math.isqrt(number)) + 1, 2):
            if number % i == 0:
                return False
        return True

    candidate = 2
    while len(primes) < n:
        if is_prime(candidate):
            primes.append(candidate)
        candidate += 1

    return primes


def root_fraction(number: int, root: int, bits: int = 32) -> int:
    """Return `⌊frac(number^(1/root))·2ᵇⁱᵗˢ⌋`.

    Initial hash values use square roots (Section 5.3), round constants
    use cube roots (Section 4.2)."""
    with decimal.localcontext() as ctx:
        ctx.prec = 60
        value = decimal.Decimal(number) ** (decimal.Decimal(1) / decimal.Decimal(root))
        fraction = value - math.floor(value)
        return int(fraction * (2**bits))


def compute_constants(root: int, count: int, bits: int = 32) -> t.Tuple[int, ...]:
    return tuple(root_fraction(p, root, bits) for p in nprimes(count))


__all__: list = [
    "AlgorithmFamily",
    "FAMILY_512",
    "FAMILY_1024",
    "MAX_INPUT_LENGTH",
    "MASK32",
    "nprimes",
    "root_fraction",
    "compute_constants",
]
