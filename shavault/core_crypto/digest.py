"""Rendering of the final SHA-256 hash state."""

from typing import Sequence

from ..config import STATE_WORDS


def _check_state(state: Sequence[int]) -> None:
    if len(state) != STATE_WORDS:
        raise ValueError(
            f"hash state must hold {STATE_WORDS} words, got {len(state)}")


def state_to_bytes(state: Sequence[int]) -> bytes:
    """Serialize the hash state as 32 bytes, each word big-endian."""
    _check_state(state)
    return b''.join(word.to_bytes(4, byteorder='big') for word in state)


def encode_digest(state: Sequence[int]) -> str:
    """
    Render the hash state as a 64-character lowercase hex digest.

    Each byte becomes two hex digits with its leading zero kept.
    """
    return state_to_bytes(state).hex()
