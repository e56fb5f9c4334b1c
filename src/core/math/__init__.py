"""
Core math modules для palindromeda

Цифровая алгебра палиндромов u64: предикат, ближайшие палиндромы,
порядковые номера и подсчёт без перебора.
"""

# DigitCodec
from src.core.math.digits import (
    BASE,
    MAX_DIGITS,
    DigitContractViolation,
    digits_of,
    first_half_of,
    length_of,
    mirror_order,
    reconstruct,
    value_of,
)

# PalindromeTest
from src.core.math.palindromic import (
    U64_MAX,
    is_palindrome,
    is_palindromic,
    validate_u64,
)

# NearestPalindrome
from src.core.math.nearest import (
    PALINDROME_MAX,
    PALINDROME_MIN,
    ceiling_palindrome,
    closest_palindrome,
    floor_palindrome,
    next_palindrome,
    previous_palindrome,
)

# OrdinalMap & RangeCounter
from src.core.math.ordinal import (
    MAX_ORDINAL,
    PALINDROMES_IN_N_DIGITS,
    count_below,
    nth_palindrome,
    ordinal_of,
)

__all__ = [
    # DigitCodec — Constants
    "BASE",
    "MAX_DIGITS",
    # DigitCodec — Exceptions
    "DigitContractViolation",
    # DigitCodec — Functions
    "digits_of",
    "first_half_of",
    "length_of",
    "mirror_order",
    "reconstruct",
    "value_of",
    # PalindromeTest
    "U64_MAX",
    "is_palindrome",
    "is_palindromic",
    "validate_u64",
    # NearestPalindrome — Constants
    "PALINDROME_MAX",
    "PALINDROME_MIN",
    # NearestPalindrome — Functions
    "ceiling_palindrome",
    "closest_palindrome",
    "floor_palindrome",
    "next_palindrome",
    "previous_palindrome",
    # OrdinalMap & RangeCounter — Constants
    "MAX_ORDINAL",
    "PALINDROMES_IN_N_DIGITS",
    # OrdinalMap & RangeCounter — Functions
    "count_below",
    "nth_palindrome",
    "ordinal_of",
]
