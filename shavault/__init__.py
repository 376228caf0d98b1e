"""
ShaVault - SHA-256 computed from scratch.

Example:
    >>> from shavault import hash_message
    >>> hash_message("abc")
    'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
"""

from .core_crypto import InvalidInputError, hash_message, sha256, sha256_hex

__version__ = "1.0.0"

__all__ = [
    'InvalidInputError',
    'hash_message',
    'sha256',
    'sha256_hex',
]
