"""
SHA-256 Compression Function

Implements the per-block hash computation of FIPS 180-4, Section 6.2.2:
- Message Schedule: Expands 16 words to 64 words
- Compression: 64 rounds over eight working variables a..h
- Chaining: Each block starts from the previous block's hash state

Blocks are processed strictly in order; the result of one block is the
input state of the next (Merkle-Damgard construction).
"""

from typing import Iterable, List, Sequence

from ..config import HASH_CONFIG, STATE_WORDS, WORDS_PER_BLOCK


# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF

ROUNDS = HASH_CONFIG['rounds']


def right_rotate(value: int, amount: int) -> int:
    """Right rotate a 32-bit integer by the specified amount."""
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return ((x & y) ^ (~x & z)) & MASK_32


def maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


def small_sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return right_rotate(x, 7) ^ right_rotate(x, 18) ^ (x >> 3)


def small_sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return right_rotate(x, 17) ^ right_rotate(x, 19) ^ (x >> 10)


def big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return right_rotate(x, 2) ^ right_rotate(x, 13) ^ right_rotate(x, 22)


def big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return right_rotate(x, 6) ^ right_rotate(x, 11) ^ right_rotate(x, 25)


def create_message_schedule(block: Sequence[int]) -> List[int]:
    """
    Expand 16 words into 64 words for the message schedule.

    For t from 16 to 63:
        W[t] = σ1(W[t-2]) + W[t-7] + σ0(W[t-15]) + W[t-16]
    """
    if len(block) != WORDS_PER_BLOCK:
        raise ValueError(
            f"block must hold {WORDS_PER_BLOCK} words, got {len(block)}")

    w = list(block)
    for t in range(WORDS_PER_BLOCK, ROUNDS):
        w.append((small_sigma1(w[t - 2]) + w[t - 7]
                  + small_sigma0(w[t - 15]) + w[t - 16]) & MASK_32)
    return w


def compress_block(state: Sequence[int], block: Sequence[int],
                   k: Sequence[int]) -> List[int]:
    """
    Perform 64 rounds of compression on one block.

    Args:
        state: Current hash state (8 32-bit words)
        block: Message block (16 32-bit words)
        k: Round constants (64 32-bit words)

    Returns:
        Updated hash state; the input state is left untouched
    """
    if len(state) != STATE_WORDS:
        raise ValueError(
            f"hash state must hold {STATE_WORDS} words, got {len(state)}")

    w = create_message_schedule(block)

    # Initialize working variables
    a, b, c, d, e, f, g, h = state

    for t in range(ROUNDS):
        temp1 = (h + big_sigma1(e) + ch(e, f, g) + k[t] + w[t]) & MASK_32
        temp2 = (big_sigma0(a) + maj(a, b, c)) & MASK_32

        h = g
        g = f
        f = e
        e = (d + temp1) & MASK_32
        d = c
        c = b
        b = a
        a = (temp1 + temp2) & MASK_32

    # Add compressed chunk to current hash value
    return [
        (word + working) & MASK_32
        for word, working in zip(state, (a, b, c, d, e, f, g, h))
    ]


def compress_blocks(state: Sequence[int], blocks: Iterable[Sequence[int]],
                    k: Sequence[int]) -> List[int]:
    """
    Chain the compression function over all blocks in order.

    Args:
        state: Initial hash state, normally a copy of H(0)
        blocks: Message blocks in message order
        k: Round constants

    Returns:
        Final hash state
    """
    current = list(state)
    for block in blocks:
        current = compress_block(current, block, k)
    return current
