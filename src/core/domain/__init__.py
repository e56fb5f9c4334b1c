"""
Domain models and value objects.

Contains the immutable Palindrome value and the PalindromeRange description.
"""

from src.core.domain.palindrome import Palindrome
from src.core.domain.palindrome_range import PalindromeRange, RangeMode

__all__ = [
    # Palindrome model
    "Palindrome",
    # PalindromeRange model
    "PalindromeRange",
    "RangeMode",
]
