"""
Input validation for password generation options.
"""

from collections.abc import Mapping
from typing import Any, Dict

from ..config import GenerationOptions, MAX_LENGTH, MIN_LENGTH
from ..exceptions import InvalidArgumentError, OutOfRangeError

# Mapping keys accepted for each option field; the short names match the
# option names of the command-line tool.
OPTION_ALIASES = {
    "length": "length",
    "include_symbols": "include_symbols",
    "symbols": "include_symbols",
    "readable_only": "readable_only",
    "readable": "readable_only",
}


def _options_from_mapping(options: Mapping) -> GenerationOptions:
    """Build GenerationOptions from a plain mapping of option values; unknown keys are ignored."""
    fields: Dict[str, Any] = {}

    for key, value in options.items():
        field = OPTION_ALIASES.get(key) if isinstance(key, str) else None
        if field is None:
            continue
        if field in fields:
            raise InvalidArgumentError(f"Option '{field}' given more than once")
        fields[field] = value

    return GenerationOptions(**fields)


def is_integer(value: Any) -> bool:
    """Check for a real integer; booleans do not count."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_options(options: Any = None) -> GenerationOptions:
    """
    Validate generation options and return them as GenerationOptions.

    Checks run in a fixed order and the first failure wins.

    Args:
        options: None, a GenerationOptions instance or a mapping of option values

    Returns:
        Validated options

    Raises:
        InvalidArgumentError: options or a field has the wrong type
        OutOfRangeError: length is outside MIN_LENGTH..MAX_LENGTH
    """
    if options is None:
        options = GenerationOptions()
    elif isinstance(options, Mapping):
        options = _options_from_mapping(options)
    elif not isinstance(options, GenerationOptions):
        raise InvalidArgumentError("Options must be a GenerationOptions or a mapping")

    if not is_integer(options.length):
        raise InvalidArgumentError("Length must be an integer")

    if options.length < MIN_LENGTH:
        raise OutOfRangeError(f"Password length must be at least {MIN_LENGTH} character")

    if options.length > MAX_LENGTH:
        raise OutOfRangeError(
            f"Password length cannot exceed {MAX_LENGTH} characters for security reasons"
        )

    if not isinstance(options.include_symbols, bool):
        raise InvalidArgumentError("Symbols option must be a boolean")

    if not isinstance(options.readable_only, bool):
        raise InvalidArgumentError("Readable option must be a boolean")

    return options
