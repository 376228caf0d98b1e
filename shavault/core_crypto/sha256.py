"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-4.
This implementation avoids using hashlib and builds the algorithm from scratch.

Components:
- Constants: H(0) and K derived from the first 64 primes (constants.py)
- Padding: Validates input and pads it to a multiple of 512 bits (padding.py)
- Compression: Message schedule and 64 rounds per block (compression.py)
- Output: 256-bit digest, raw or hex encoded (digest.py)

Input is limited to single-byte characters (code points 0-255).
"""

import logging
from typing import List

from ..config import WORDS_PER_BLOCK
from .compression import compress_blocks
from .constants import get_constants
from .digest import encode_digest, state_to_bytes
from .padding import InvalidInputError, MessageInput, iter_blocks, preprocess


logger = logging.getLogger(__name__)


def _final_state(data: MessageInput) -> List[int]:
    try:
        words = preprocess(data)
    except InvalidInputError as exc:
        logger.info("Rejected message: %s", exc)
        raise

    constants = get_constants()
    logger.debug("Hashing %d block(s)", len(words) // WORDS_PER_BLOCK)
    return compress_blocks(constants.h0, iter_blocks(words), constants.k)


def sha256(data: MessageInput) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes, or text / integers limited to the range 0-255

    Returns:
        256-bit (32-byte) digest as bytes

    Raises:
        InvalidInputError: If any character is outside 0-255

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return state_to_bytes(_final_state(data))


def sha256_hex(data: MessageInput) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.

    Args:
        data: Input bytes, or text / integers limited to the range 0-255

    Returns:
        64-character lowercase hexadecimal string
    """
    return encode_digest(_final_state(data))


def hash_message(message: MessageInput) -> str:
    """
    Hash a message for display.

    This is the entry point used by front ends: it takes the submitted text
    as-is and returns the hex digest, or raises InvalidInputError when the
    text contains characters wider than one byte.

    Example:
        >>> hash_message("abc")
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """
    return sha256_hex(message)
