"""
Secure password generation utilities.
"""

import string
from dataclasses import dataclass
from typing import Any, Optional

from ..config import MIN_CHARSET_SIZE, RETRY_FACTOR, GenerationOptions
from ..exceptions import (
    EmptyCharsetError,
    EnvironmentUnavailableError,
    GenerationExhaustedError,
    InsufficientEntropyError,
    InternalInvariantViolationError,
    RandomSourceFailureError,
    SecurePassException,
)
from .random_source import RandomSource, get_random_source
from .validation import validate_options

# Character sets, in the order they are concatenated
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+{}[]<>?,."

# Visually confusing characters removed in readable mode
AMBIGUOUS_CHARS = "O0Il1|"

RANDOM_RANGE = 2 ** 32


def build_charset(include_symbols: bool = True, readable_only: bool = False) -> str:
    """
    Build the ordered character set for the given options.

    Args:
        include_symbols: Append the symbol alphabet
        readable_only: Remove visually ambiguous characters

    Returns:
        Charset string
    """
    charset = LOWERCASE + UPPERCASE + DIGITS

    if include_symbols:
        charset += SYMBOLS

    if readable_only:
        charset = "".join(c for c in charset if c not in AMBIGUOUS_CHARS)

    return charset


class PasswordGenerator:
    """Generate secure passwords from a validated set of options."""

    def __init__(self,
                 options: Any = None,
                 random_source: Optional[RandomSource] = None,
                 unbiased: bool = False):
        """
        Validate options and prepare the character set.

        Args:
            options: GenerationOptions, a mapping of option values, or None for defaults
            random_source: Secure random source (defaults to the OS CSPRNG)
            unbiased: Use rejection sampling instead of plain modulo reduction

        Raises:
            SecurePassException: options are invalid, randomness is unavailable
                or the resulting charset is unusable
        """
        self.options: GenerationOptions = validate_options(options)
        self.random_source = random_source if random_source is not None else get_random_source()
        self.unbiased = unbiased

        if not self.random_source.is_available():
            raise EnvironmentUnavailableError(
                "Cryptographically secure random number generator is not available. "
                "This function requires a secure environment."
            )

        self.charset = build_charset(self.options.include_symbols, self.options.readable_only)

        if not self.charset:
            raise EmptyCharsetError(
                "No characters available for password generation after applying filters"
            )

        if len(set(self.charset)) < MIN_CHARSET_SIZE:
            raise InsufficientEntropyError(
                "Character set is too small for secure password generation"
            )

    @property
    def charset_size(self) -> int:
        return len(self.charset)

    def generate(self) -> str:
        """
        Generate a secure password.

        Returns:
            Generated password string

        Raises:
            GenerationExhaustedError: the draw budget ran out
            InternalInvariantViolationError: the result failed its self-check
        """
        length = self.options.length
        size = self.charset_size
        # Draws at or above this value would bias the modulo reduction
        limit = RANDOM_RANGE - (RANDOM_RANGE % size)

        max_attempts = length * RETRY_FACTOR
        attempts = 0
        last_error: Optional[RandomSourceFailureError] = None
        chars = []

        while len(chars) < length:
            if attempts >= max_attempts:
                raise GenerationExhaustedError(
                    "Failed to generate password after maximum attempts. "
                    "This may indicate a system issue."
                ) from last_error
            attempts += 1

            try:
                value = self.random_source.next_uint32()
            except Exception as e:
                last_error = RandomSourceFailureError(
                    f"Failed to generate secure random number: {e}"
                )
                last_error.__cause__ = e
                continue

            if self.unbiased and value >= limit:
                continue

            chars.append(self.charset[value % size])

        password = "".join(chars)
        self._check_password(password)
        return password

    def _check_password(self, password: str) -> None:
        """Verify the invariants every generated password must satisfy."""
        if len(password) != self.options.length:
            raise InternalInvariantViolationError(
                f"Generated password length ({len(password)}) does not match "
                f"requested length ({self.options.length})"
            )

        if any(c not in self.charset for c in password):
            raise InternalInvariantViolationError(
                "Generated password contains invalid characters"
            )

        if self.options.readable_only and any(c in AMBIGUOUS_CHARS for c in password):
            raise InternalInvariantViolationError(
                "Generated password contains confusing characters despite readable mode being enabled"
            )

    def get_charset_info(self) -> str:
        """
        Get human-readable description of character set.

        Returns:
            Description of enabled character types
        """
        parts = ["lowercase", "uppercase", "digits"]

        if self.options.include_symbols:
            parts.append("symbols")

        info = ", ".join(parts)

        if self.options.readable_only:
            info += " (excluding ambiguous chars)"

        return info


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation call: a password or the error that prevented it."""

    password: Optional[str] = None
    error: Optional[SecurePassException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the password, or raise the stored error."""
        if self.error is not None:
            raise self.error
        assert self.password is not None
        return self.password


def generate_password(options: Any = None,
                      *,
                      random_source: Optional[RandomSource] = None,
                      unbiased: bool = False) -> str:
    """
    Convenience function to generate a password.

    Args:
        options: GenerationOptions, a mapping such as {"length": 16, "symbols": False},
            or None for defaults (12 characters with symbols)
        random_source: Secure random source (defaults to the OS CSPRNG)
        unbiased: Use rejection sampling for exactly uniform selection

    Returns:
        Generated password string
    """
    generator = PasswordGenerator(options, random_source=random_source, unbiased=unbiased)
    return generator.generate()


def try_generate_password(options: Any = None,
                          *,
                          random_source: Optional[RandomSource] = None,
                          unbiased: bool = False) -> GenerationResult:
    """Like generate_password, but report failures in the returned result."""
    try:
        password = generate_password(options, random_source=random_source, unbiased=unbiased)
    except SecurePassException as e:
        return GenerationResult(error=e)
    return GenerationResult(password=password)
