"""Iteration — ленивые последовательности палиндромов.

Итератор строится поверх NearestPalindrome (шаг next()) и
RangeCounter/OrdinalMap (длина за O(1) и граница окна first_n).
"""

from .palindrome_iter import PalindromeIter

__all__ = [
    "PalindromeIter",
]
