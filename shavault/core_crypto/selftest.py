"""
SHA-256 Self-Test

Checks the from-scratch implementation against:
- NIST test vectors (FIPS 180-4 examples and common reference strings)
- The published constant tables
- An independent SHA-256 from the `cryptography` package

Also provides bit_difference() to measure the avalanche effect between
two digests.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes

from .constants import H_INITIAL, K, generate_constants, get_constants
from .padding import MessageInput, to_byte_sequence
from .sha256 import sha256_hex


logger = logging.getLogger(__name__)


# (message, expected hex digest)
KNOWN_VECTORS: Tuple[Tuple[bytes, str], ...] = (
    (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    (b"hello", "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"),
    (b"The quick brown fox jumps over the lazy dog",
     "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"),
)


@dataclass
class SelfTestReport:
    """Outcome of run_self_test()."""
    checked: int = 0
    failures: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures


def verify_constants() -> bool:
    """True if freshly derived and memoized tables match the published ones."""
    generated = generate_constants()
    memoized = get_constants()
    return (generated.h0 == H_INITIAL and generated.k == K
            and memoized.h0 == H_INITIAL and memoized.k == K)


def reference_digest(data: bytes) -> str:
    """SHA-256 hex digest computed by the `cryptography` package."""
    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(data)
    return digest.finalize().hex()


def cross_check(data: MessageInput) -> bool:
    """True if our digest of `data` equals the reference implementation's."""
    message = to_byte_sequence(data)
    return sha256_hex(message) == reference_digest(message)


def bit_difference(hex_a: str, hex_b: str) -> int:
    """
    Count the bits that differ between two hex digests.

    Args:
        hex_a: First digest
        hex_b: Second digest, same length as the first

    Returns:
        Number of differing bits (0-256 for SHA-256 digests)
    """
    if len(hex_a) != len(hex_b):
        raise ValueError("digests must have the same length")
    return bin(int(hex_a, 16) ^ int(hex_b, 16)).count('1')


def run_self_test() -> SelfTestReport:
    """Run every check and collect the failures."""
    report = SelfTestReport()

    report.checked += 1
    if not verify_constants():
        report.failures.append("constant tables differ from FIPS 180-4")

    for message, expected in KNOWN_VECTORS:
        report.checked += 1
        result = sha256_hex(message)
        if result != expected:
            report.failures.append(
                f"vector {message[:20]!r}: expected {expected}, got {result}")

        report.checked += 1
        if not cross_check(message):
            report.failures.append(
                f"vector {message[:20]!r}: disagrees with reference digest")

    logger.debug("Self-test ran %d checks, %d failure(s)",
                 report.checked, len(report.failures))
    return report
