"""
Configuration for the SecurePass password generator.
"""

from dataclasses import dataclass


# Password length bounds. The upper bound guards against abuse, it is not a
# cryptographic limit.
DEFAULT_LENGTH = 12
MIN_LENGTH = 1
MAX_LENGTH = 1000

# Smallest effective charset accepted after exclusions.
MIN_CHARSET_SIZE = 10

# Total draws allowed per password, as a multiple of its length.
RETRY_FACTOR = 10


@dataclass(frozen=True)
class GenerationOptions:
    # Number of characters in the generated password.
    length: int = DEFAULT_LENGTH

    # Append the symbol alphabet to letters and digits.
    include_symbols: bool = True

    # Drop visually ambiguous characters (O, 0, I, l, 1, |).
    readable_only: bool = False


# Default options instance you can import elsewhere
DEFAULT_OPTIONS = GenerationOptions()
