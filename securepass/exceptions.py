"""
Custom exceptions for SecurePass.
"""


class SecurePassException(Exception):
    """Base exception for SecurePass."""

    kind = "SecurePassError"


class InvalidArgumentError(SecurePassException):
    """Generation options have the wrong type."""

    kind = "InvalidArgument"


class OutOfRangeError(SecurePassException):
    """Password length outside the accepted range."""

    kind = "OutOfRange"


class EnvironmentUnavailableError(SecurePassException):
    """No cryptographically secure random source in this runtime."""

    kind = "EnvironmentUnavailable"


class EmptyCharsetError(SecurePassException):
    """Character set is empty after applying filters."""

    kind = "EmptyCharset"


class InsufficientEntropyError(SecurePassException):
    """Character set is too small for a secure password."""

    kind = "InsufficientEntropy"


class RandomSourceFailureError(SecurePassException):
    """The secure random source raised while drawing a value."""

    kind = "RandomSourceFailure"


class GenerationExhaustedError(RandomSourceFailureError):
    """Draw budget used up before the password was complete."""

    kind = "GenerationExhausted"


class InternalInvariantViolationError(SecurePassException):
    """Generated password failed its own consistency check."""

    kind = "InternalInvariantViolation"


class ClipboardError(SecurePassException):
    """Clipboard operation failed."""

    kind = "ClipboardError"
