"""
Contract Validation Module

Модуль для валидации JSON представлений Palindrome и PalindromeRange.
"""

from .validators import (
    PALINDROME_RANGE_SCHEMA,
    PALINDROME_SCHEMA,
    SCHEMA_DIR,
    get_validator,
    load_schema,
    validate_palindrome,
    validate_palindrome_range,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "PALINDROME_SCHEMA",
    "PALINDROME_RANGE_SCHEMA",
    # Functions
    "load_schema",
    "get_validator",
    "validate_palindrome",
    "validate_palindrome_range",
]
