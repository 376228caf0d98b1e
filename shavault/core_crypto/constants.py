"""
SHA-256 Constants

Provides the initial hash value H(0) and the 64 round constants K
(FIPS 180-4, Sections 4.2.2 and 5.3.3).

Both tables are derived from the first 64 primes:
- H(0)[i]: first 32 bits of the fractional part of sqrt(prime i), i < 8
- K[i]:    first 32 bits of the fractional part of cbrt(prime i), i < 64

The derivation uses exact integer roots, so the generated tables are
bit-identical to the published ones. They are computed lazily, once per
process, and shared read-only afterwards.
"""

import logging
import math
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple


logger = logging.getLogger(__name__)

MASK_32 = 0xFFFFFFFF

PRIME_COUNT = 64
H0_WORDS = 8


# Initial hash values: first 32 bits of fractional parts of square roots of first 8 primes
H_INITIAL: Tuple[int, ...] = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

# Round constants: first 32 bits of fractional parts of cube roots of first 64 primes
K: Tuple[int, ...] = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)


@dataclass(frozen=True)
class RoundConstants:
    """
    The constant tables consumed by the compression function.

    Attributes:
        h0: Initial hash state, 8 words
        k: Round constants, 64 words
    """
    h0: Tuple[int, ...]
    k: Tuple[int, ...]


def first_primes(count: int) -> List[int]:
    """
    Return the first `count` primes using a sieve of Eratosthenes.

    The sieve bound is doubled until enough primes are found.

    Args:
        count: Number of primes wanted

    Returns:
        Ascending list of primes, starting at 2
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    if count == 0:
        return []

    limit = 16
    while True:
        is_composite = bytearray(limit + 1)
        primes = []
        for candidate in range(2, limit + 1):
            if is_composite[candidate]:
                continue
            primes.append(candidate)
            if len(primes) == count:
                return primes
            for multiple in range(candidate * candidate, limit + 1, candidate):
                is_composite[multiple] = 1
        limit *= 2


def _integer_cube_root(n: int) -> int:
    """Floor of the cube root of a non-negative integer (Newton's method)."""
    if n < 2:
        return n
    # Start above the root; the iteration then decreases monotonically
    x = 1 << ((n.bit_length() + 2) // 3)
    while True:
        y = (2 * x + n // (x * x)) // 3
        if y >= x:
            return x
        x = y


def _fractional_sqrt_bits(p: int) -> int:
    """First 32 bits of the fractional part of sqrt(p)."""
    return math.isqrt(p << 64) & MASK_32


def _fractional_cbrt_bits(p: int) -> int:
    """First 32 bits of the fractional part of cbrt(p)."""
    return _integer_cube_root(p << 96) & MASK_32


def generate_constants() -> RoundConstants:
    """
    Derive H(0) and K from the first 64 primes.

    Pure and deterministic: every call returns equal tables.
    """
    primes = first_primes(PRIME_COUNT)
    h0 = tuple(_fractional_sqrt_bits(p) for p in primes[:H0_WORDS])
    k = tuple(_fractional_cbrt_bits(p) for p in primes)
    return RoundConstants(h0=h0, k=k)


_constants: Optional[RoundConstants] = None
_constants_lock = threading.Lock()


def get_constants() -> RoundConstants:
    """
    Return the process-wide constant tables, computing them on first use.

    The first computation runs under a lock so only one thread derives the
    tables; the frozen result is published with a single assignment, and
    later reads take no lock.
    """
    global _constants
    constants = _constants
    if constants is not None:
        return constants

    with _constants_lock:
        if _constants is None:
            _constants = generate_constants()
            logger.debug("SHA-256 constants initialized (%d round constants)",
                         len(_constants.k))
        return _constants


def reset_constants() -> None:
    """Drop the memoized tables so the next access recomputes them."""
    global _constants
    with _constants_lock:
        _constants = None
