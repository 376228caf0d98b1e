# Core Cryptography Module
"""
From-scratch SHA-256 (FIPS 180-4):
- Constant tables (H0, K) - constants.py
- Message validation and padding - padding.py
- Message schedule and compression - compression.py
- Digest encoding - digest.py
- Public hash functions - sha256.py
- Self-test against NIST vectors - selftest.py
"""

from .constants import (
    H_INITIAL,
    K,
    RoundConstants,
    generate_constants,
    get_constants,
    reset_constants,
)

from .padding import (
    InvalidInputError,
    pad_message,
    preprocess,
    iter_blocks,
    to_byte_sequence,
)

from .compression import (
    compress_block,
    compress_blocks,
    create_message_schedule,
)

from .digest import encode_digest, state_to_bytes

from .sha256 import sha256, sha256_hex, hash_message

__all__ = [
    # Constants
    'H_INITIAL',
    'K',
    'RoundConstants',
    'generate_constants',
    'get_constants',
    'reset_constants',
    # Preprocessing
    'InvalidInputError',
    'pad_message',
    'preprocess',
    'iter_blocks',
    'to_byte_sequence',
    # Compression
    'compress_block',
    'compress_blocks',
    'create_message_schedule',
    # Digest
    'encode_digest',
    'state_to_bytes',
    # Hashing
    'sha256',
    'sha256_hex',
    'hash_message',
]
