"""
ShaVault Configuration

Central place for the tunables of the hash engine and its command line
front end. Values are plain module-level constants; the only runtime
override is the log level, read from the environment.
"""

import os


# SHA-256 geometry (FIPS 180-4, Section 1 and 5.1.1)
# - block_bytes: size of one message block (512 bits)
# - word_bytes: size of one word (32 bits)
# - rounds: compression rounds per block
# - length_field_bytes: size of the trailing length field
# - max_message_bytes: largest message whose bit length fits the length field
HASH_CONFIG = {
    'block_bytes': 64,
    'word_bytes': 4,
    'rounds': 64,
    'length_field_bytes': 8,
    'max_message_bytes': 2 ** 61 - 1,
}

WORDS_PER_BLOCK = HASH_CONFIG['block_bytes'] // HASH_CONFIG['word_bytes']
STATE_WORDS = 8


LOGGING_CONFIG = {
    'level': 'WARNING',
    'format': '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
    'datefmt': '%H:%M:%S',
}

# Environment variable that overrides LOGGING_CONFIG['level']
ENV_LOG_LEVEL = 'SHAVAULT_LOG_LEVEL'


# Shown to users when the input holds characters outside the single-byte range
INVALID_INPUT_MESSAGE = "NON ASCII INPUT. TRY AGAIN WITH PROPER INPUT."


def get_log_level() -> str:
    """Return the configured log level name, honouring the environment."""
    level = os.environ.get(ENV_LOG_LEVEL, LOGGING_CONFIG['level'])
    return level.strip().upper() or LOGGING_CONFIG['level']
