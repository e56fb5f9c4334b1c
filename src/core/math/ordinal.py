"""
OrdinalMap & RangeCounter — Порядковый номер палиндрома и подсчёт без перебора

Биекция между палиндромом и его 0-based рангом среди всех палиндромов
по возрастанию, а также O(1)-подсчёт палиндромов в [0, to).

ТАБЛИЦА PALINDROMES_IN_N_DIGITS:
    PALINDROMES_IN_N_DIGITS[n] = количество палиндромов длины <= n цифр
    [0, 10, 19, 109, 199, 1099, 1999, 10999, 19999, ...]

    Палиндромов ровно из n цифр (n >= 2): 9 * 10**(ceil(n/2) - 1)
    Однозначных: 10 (включая 0)

ФОРМУЛЫ:
    nth(n), n >= 10:
        L      = длина, для которой TABLE[L-1] <= n < TABLE[L]
        offset = n - TABLE[L-1]
        half   = 10**(ceil(L/2) - 1) + offset
        nth(n) = reconstruct(L, digits_of(half))

    count_below(to), to >= 10:
        L, H   = length_of(to), ceil(L/2)
        front  = первые H цифр to
        count  = TABLE[L-1] + front - 10**(H-1)
                 + 1, если отражённый front < to

    to_n(p) = count_below(p)  (ранг = количество палиндромов строго меньше p)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. nth(to_n(p)) == p и to_n(nth(n)) == n для 0 <= n <= MAX_ORDINAL
2. nth(n) для n > MAX_ORDINAL → None (не исключение)
3. count_below(U64_MAX) == MAX_ORDINAL + 1 (MAX учтён, так как MAX < U64_MAX)
"""

from typing import Final, Optional

from src.core.math.digits import MAX_DIGITS, digits_of, mirror_order, reconstruct, value_of
from src.core.math.nearest import PALINDROME_MAX
from src.core.math.palindromic import _is_palindrome_unchecked, validate_u64

# =============================================================================
# ТАБЛИЦА ПАЛИНДРОМОВ ПО ДЛИНЕ
# =============================================================================


def _palindromes_with_exactly(n_digits: int) -> int:
    if n_digits == 0:
        return 0
    if n_digits == 1:
        return 10
    return 9 * 10 ** ((n_digits + 1) // 2 - 1)


def _build_palindrome_count_table(max_digits: int) -> tuple[int, ...]:
    table = [0]
    for n_digits in range(1, max_digits + 1):
        table.append(table[-1] + _palindromes_with_exactly(n_digits))
    return tuple(table)


# TABLE[n] = количество палиндромов длины <= n (n = 0..20)
PALINDROMES_IN_N_DIGITS: Final[tuple[int, ...]] = _build_palindrome_count_table(MAX_DIGITS)

# Ранг PALINDROME_MAX: наибольший допустимый порядковый номер
MAX_ORDINAL: Final[int] = 11844674405


# =============================================================================
# RANGE COUNTER
# =============================================================================


def count_below(to: int) -> int:
    """
    Количество палиндромов в полуинтервале [0, to) без перебора.

    Args:
        to: Исключающая верхняя граница (u64)

    Returns:
        Количество палиндромов строго меньше to

    Raises:
        ValueError: Если to вне диапазона u64

    Examples:
        >>> count_below(0)
        0
        >>> count_below(10)
        10
        >>> count_below(90109)
        1000
    """
    validate_u64(to, "to")

    # Однозначные палиндромы совпадают со своим рангом
    if to < 10:
        return to

    digits = digits_of(to)
    length = len(digits)
    half_length = (length + 1) // 2
    front = value_of(digits[:half_length])

    count = PALINDROMES_IN_N_DIGITS[length - 1] + front - 10 ** (half_length - 1)

    # Палиндром, порождённый самим front, тоже меньше to
    if mirror_order(digits) < 0:
        count += 1

    return count


# =============================================================================
# ORDINAL MAP
# =============================================================================


def ordinal_of(palindrome: int) -> int:
    """
    Порядковый номер (0-based) палиндрома среди всех палиндромов.

    Args:
        palindrome: Значение палиндрома

    Returns:
        Ранг палиндрома (0 <= ранг <= MAX_ORDINAL)

    Raises:
        ValueError: Если значение не палиндром или вне диапазона
    """
    validate_u64(palindrome, "palindrome")
    if palindrome > PALINDROME_MAX or not _is_palindrome_unchecked(palindrome):
        raise ValueError(f"palindrome must be a palindromic u64, got {palindrome}")

    return count_below(palindrome)


def nth_palindrome(n: int) -> Optional[int]:
    """
    n-й палиндром (0-based) в порядке возрастания.

    Args:
        n: Порядковый номер (0 <= n)

    Returns:
        Значение палиндрома или None, если n > MAX_ORDINAL

    Raises:
        ValueError: Если n отрицательный или не int

    Examples:
        >>> nth_palindrome(9)
        9
        >>> nth_palindrome(10)
        11
        >>> nth_palindrome(1000)
        90109
        >>> nth_palindrome(11844674406) is None
        True
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    if n > MAX_ORDINAL:
        return None

    if n < 10:
        return n

    # Длина L: TABLE[L-1] <= n < TABLE[L]
    length = 1
    while PALINDROMES_IN_N_DIGITS[length] <= n:
        length += 1

    offset = n - PALINDROMES_IN_N_DIGITS[length - 1]
    half_length = (length + 1) // 2
    half = 10 ** (half_length - 1) + offset

    return reconstruct(length, digits_of(half))
