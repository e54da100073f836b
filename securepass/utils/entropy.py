"""
Display-only password statistics for the command-line front end.
"""

import math
from typing import Dict, NamedTuple

from .password_generator import SYMBOLS

EXCELLENT_BITS = 128
GOOD_BITS = 64


class StrengthRating(NamedTuple):
    label: str
    description: str
    color: str


def estimate_entropy(length: int, charset_size: int) -> float:
    """
    Estimate password entropy in bits as length * log2(charset_size).

    Args:
        length: Password length
        charset_size: Number of characters the password was drawn from

    Returns:
        Estimated entropy, 0.0 for an empty charset
    """
    if charset_size <= 0:
        return 0.0
    return length * math.log2(charset_size)


def character_classes(password: str) -> Dict[str, bool]:
    """Report which character classes appear in a password."""
    return {
        "symbols": any(c in SYMBOLS for c in password),
        "numbers": any(c.isdigit() for c in password),
        "uppercase": any(c.isupper() for c in password),
        "lowercase": any(c.islower() for c in password),
    }


def rate_strength(entropy_bits: float) -> StrengthRating:
    if entropy_bits >= EXCELLENT_BITS:
        return StrengthRating("Excellent", f"{EXCELLENT_BITS}+ bits", "green")
    if entropy_bits >= GOOD_BITS:
        return StrengthRating("Good", f"{GOOD_BITS}+ bits", "yellow")
    return StrengthRating("Weak", f"< {GOOD_BITS} bits", "red")
