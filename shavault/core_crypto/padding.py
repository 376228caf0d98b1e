"""
SHA-256 Message Preprocessing

Validates the input and turns it into padded, big-endian 32-bit words
grouped in 512-bit blocks (FIPS 180-4, Sections 5.1.1 and 5.2.1).

Only single-byte characters are accepted: every element of the input must
be in the range 0-255. Anything wider is rejected with InvalidInputError
rather than re-encoded.
"""

from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..config import HASH_CONFIG, WORDS_PER_BLOCK


MASK_32 = 0xFFFFFFFF

BLOCK_BYTES = HASH_CONFIG['block_bytes']
WORD_BYTES = HASH_CONFIG['word_bytes']
LENGTH_FIELD_BYTES = HASH_CONFIG['length_field_bytes']
MAX_MESSAGE_BYTES = HASH_CONFIG['max_message_bytes']

# Padded length before the length field, modulo the block size
_LENGTH_FIELD_OFFSET = BLOCK_BYTES - LENGTH_FIELD_BYTES

MessageInput = Union[bytes, bytearray, memoryview, str, Iterable[int]]


class InvalidInputError(ValueError):
    """
    Raised when a message cannot be hashed.

    Either an element lies outside the single-byte range 0-255, or the
    message is too long for the 64-bit length field.

    Attributes:
        position: Index of the offending element, if any
        value: Code point of the offending element, if any
    """

    def __init__(self, message: str, position: Optional[int] = None,
                 value: Optional[int] = None):
        super().__init__(message)
        self.position = position
        self.value = value


def _out_of_range(position: int, value: int) -> InvalidInputError:
    return InvalidInputError(
        f"out-of-range character at position {position}: "
        f"code point {value} exceeds 255",
        position=position,
        value=value,
    )


def to_byte_sequence(data: MessageInput) -> bytes:
    """
    Validate input and return it as bytes.

    Accepts bytes-like objects, text made only of code points 0-255, or an
    iterable of integers in 0-255.

    Raises:
        InvalidInputError: If any element is outside 0-255, or the message
            exceeds the maximum length
        TypeError: If the input or one of its elements has an unsupported type
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        message = bytes(data)
    elif isinstance(data, str):
        try:
            message = data.encode('latin-1')
        except UnicodeEncodeError as exc:
            raise _out_of_range(exc.start, ord(data[exc.start])) from None
    else:
        try:
            elements = iter(data)
        except TypeError:
            raise TypeError(
                f"cannot hash object of type {type(data).__name__}"
            ) from None

        buffer = bytearray()
        for position, value in enumerate(elements):
            if not isinstance(value, int):
                raise TypeError(
                    f"element at position {position} is "
                    f"{type(value).__name__}, expected int"
                )
            if value < 0 or value > 255:
                raise _out_of_range(position, value)
            buffer.append(value)
        message = bytes(buffer)

    if len(message) > MAX_MESSAGE_BYTES:
        raise InvalidInputError(
            f"message too long: {len(message)} bytes exceeds "
            f"{MAX_MESSAGE_BYTES}"
        )
    return message


def _pad_to_length_field(data: bytes) -> bytes:
    """Append 0x80 and zero bytes until length ≡ 56 (mod 64)."""
    padded = bytearray(data)
    padded.append(0x80)
    padded.extend(b'\x00' * ((_LENGTH_FIELD_OFFSET - len(padded)) % BLOCK_BYTES))
    return bytes(padded)


def pad_message(data: bytes) -> bytes:
    """
    Pad the message according to SHA-256 specification.

    Padding rules:
    1. Append bit '1' to message (0x80 byte)
    2. Append zeros until message length ≡ 448 (mod 512)
    3. Append original message length as 64-bit big-endian integer

    Args:
        data: The original message bytes

    Returns:
        Padded message as bytes (length is multiple of 64 bytes / 512 bits)
    """
    bit_length = len(data) * 8
    return _pad_to_length_field(data) + bit_length.to_bytes(
        LENGTH_FIELD_BYTES, byteorder='big')


def bytes_to_words(data: bytes) -> List[int]:
    """Convert bytes (length a multiple of 4) into big-endian 32-bit words."""
    if len(data) % WORD_BYTES:
        raise ValueError(
            f"data length {len(data)} is not a multiple of {WORD_BYTES}")
    return [
        int.from_bytes(data[i:i + WORD_BYTES], byteorder='big')
        for i in range(0, len(data), WORD_BYTES)
    ]


def preprocess(data: MessageInput) -> List[int]:
    """
    Validate, pad and pack a message into 32-bit words.

    The last two words hold the message bit length as a 64-bit big-endian
    integer (high word first). The length is computed with exact integer
    arithmetic.

    Args:
        data: Message to hash

    Returns:
        Words whose count is a multiple of 16 (one block per 16 words)

    Raises:
        InvalidInputError: If any element is outside 0-255
    """
    message = to_byte_sequence(data)
    bit_length = len(message) * 8

    words = bytes_to_words(_pad_to_length_field(message))
    words.append((bit_length >> 32) & MASK_32)
    words.append(bit_length & MASK_32)
    return words


def iter_blocks(words: List[int]) -> Iterator[Tuple[int, ...]]:
    """Yield consecutive 16-word blocks in message order."""
    if len(words) % WORDS_PER_BLOCK:
        raise ValueError(
            f"word count {len(words)} is not a multiple of {WORDS_PER_BLOCK}")
    for i in range(0, len(words), WORDS_PER_BLOCK):
        yield tuple(words[i:i + WORDS_PER_BLOCK])
