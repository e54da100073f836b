"""
Cryptographically secure random source used by the password generator.
"""

import os
import secrets
from typing import Protocol


class RandomSource(Protocol):
    """Anything that can supply uniformly distributed unsigned 32-bit integers."""

    def is_available(self) -> bool:
        ...

    def next_uint32(self) -> int:
        ...


class SystemRandomSource:
    """Draw unsigned 32-bit integers from the operating system CSPRNG."""

    BITS = 32

    def is_available(self) -> bool:
        """
        Check that the OS random source is present without drawing from it.

        Returns:
            True if os.urandom exists on this platform
        """
        return callable(getattr(os, "urandom", None))

    def next_uint32(self) -> int:
        """Return one uniformly distributed integer in [0, 2**32)."""
        return secrets.randbits(self.BITS)


def get_random_source() -> SystemRandomSource:
    """Get the default secure random source."""
    return SystemRandomSource()
