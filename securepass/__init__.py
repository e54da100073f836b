"""
SecurePass - cryptographically secure password generator.
"""

from .config import GenerationOptions, DEFAULT_OPTIONS
from .utils.password_generator import (
    GenerationResult,
    PasswordGenerator,
    build_charset,
    generate_password,
    try_generate_password,
)

__version__ = "1.0.0"

__all__ = [
    "GenerationOptions",
    "DEFAULT_OPTIONS",
    "GenerationResult",
    "PasswordGenerator",
    "build_charset",
    "generate_password",
    "try_generate_password",
]
