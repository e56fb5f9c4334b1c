"""
NearestPalindrome — Ближайшие палиндромы (floor / ceiling / closest / next / previous)

Модуль вычисляет ближайшие палиндромы для произвольного u64 через
зеркалирование первой половины цифр и распространение borrow/carry.

АЛГОРИТМ floor(x) ("le"):
1. x уже палиндром → x
2. Кандидат = first half, отражённая на вторую половину
3. Если кандидат <= x (первое несовпадение от центра: цифра first half меньше)
   → кандидат и есть ответ
4. Иначе first half уменьшается на 1 от центральной цифры к старшей:
   0 → 9 (borrow), первая ненулевая цифра уменьшается, стоп
5. Если borrow обнулил старшую цифру → длина уменьшается на 1
   (100 → 99, 1000 → 999); при нечётной новой длине старшая цифра
   остаётся как 9, иначе отбрасывается

АЛГОРИТМ ceiling(x) ("ge"): симметрично, с увеличением и carry 9 → 0;
carry через старшую цифру добавляет ведущую 1 и увеличивает длину на 1.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. floor(x) <= x <= ceiling(x) для x <= PALINDROME_MAX
2. Для палиндромного x: floor(x) == ceiling(x) == x
3. ceiling(x) для x >= PALINDROME_MAX насыщается до PALINDROME_MAX
4. next(MAX) == MAX, previous(0) == 0 (насыщение, не ошибка)
5. closest: при равных расстояниях выигрывает ceiling (больший палиндром)
"""

from typing import Final

from src.core.math.digits import digits_of, first_half_of, mirror_order, reconstruct
from src.core.math.palindromic import _is_palindrome_unchecked, validate_u64

# =============================================================================
# ГРАНИЦЫ
# =============================================================================

# Наименьший палиндром
PALINDROME_MIN: Final[int] = 0

# Наибольший палиндром, представимый в u64 (2**64 - 1 = 18446744073709551615)
PALINDROME_MAX: Final[int] = 18446744066044764481


# =============================================================================
# BORROW / CARRY
# =============================================================================


def _decrement_half(half: list[int]) -> None:
    """Уменьшение first half на 1 с borrow от центральной цифры (in-place)."""
    for idx in range(len(half) - 1, -1, -1):
        if half[idx] == 0:
            half[idx] = 9
            continue
        half[idx] -= 1
        return


def _increment_half(half: list[int]) -> bool:
    """
    Увеличение first half на 1 с carry от центральной цифры (in-place).

    Returns:
        True если carry вышел за старшую цифру (все цифры были 9)
    """
    for idx in range(len(half) - 1, -1, -1):
        if half[idx] == 9:
            half[idx] = 0
            continue
        half[idx] += 1
        return False
    return True


# =============================================================================
# FLOOR / CEILING
# =============================================================================


def floor_palindrome(x: int) -> int:
    """
    Наибольший палиндром <= x.

    Args:
        x: Значение в диапазоне u64

    Returns:
        Палиндром <= x

    Raises:
        ValueError: Если x вне диапазона u64

    Examples:
        >>> floor_palindrome(10)
        9
        >>> floor_palindrome(100)
        99
        >>> floor_palindrome(998001)
        997799
    """
    validate_u64(x, "x")

    if _is_palindrome_unchecked(x):
        return x

    digits = digits_of(x)
    length = len(digits)
    half = first_half_of(digits)

    if mirror_order(digits) < 0:
        # Отражённая first half уже меньше x
        return reconstruct(length, half)

    _decrement_half(half)

    if half[0] == 0:
        # Borrow прошёл через старшую цифру: 10..0 → 9..9 (длина - 1)
        length -= 1
        if length % 2 == 1:
            half[0] = 9
        else:
            half = half[1:]

    return reconstruct(length, half)


def ceiling_palindrome(x: int) -> int:
    """
    Наименьший палиндром >= x, с насыщением до PALINDROME_MAX.

    Для x >= PALINDROME_MAX возвращается PALINDROME_MAX: палиндромов
    больше MAX в диапазоне u64 нет.

    Args:
        x: Значение в диапазоне u64

    Returns:
        Палиндром >= x (или PALINDROME_MAX при насыщении)

    Raises:
        ValueError: Если x вне диапазона u64

    Examples:
        >>> ceiling_palindrome(10)
        11
        >>> ceiling_palindrome(998001)
        998899
        >>> ceiling_palindrome(2**64 - 1)
        18446744066044764481
    """
    validate_u64(x, "x")

    if x >= PALINDROME_MAX:
        return PALINDROME_MAX

    if _is_palindrome_unchecked(x):
        return x

    digits = digits_of(x)
    length = len(digits)
    half = first_half_of(digits)

    if mirror_order(digits) > 0:
        # Отражённая first half уже больше x
        return reconstruct(length, half)

    if _increment_half(half):
        # Carry прошёл через старшую цифру: 9..9 → 10..01 (длина + 1)
        length += 1
        half = [1] + half
        half = half[: (length + 1) // 2]

    return reconstruct(length, half)


# =============================================================================
# CLOSEST / NEXT / PREVIOUS
# =============================================================================


def closest_palindrome(x: int) -> int:
    """
    Ближайший к x палиндром; при равенстве расстояний — больший (ceiling).

    Examples:
        >>> closest_palindrome(10)
        11
        >>> closest_palindrome(14)
        11
        >>> closest_palindrome(17)
        22
    """
    lower = floor_palindrome(x)
    upper = ceiling_palindrome(x)

    if abs(x - lower) < abs(upper - x):
        return lower
    return upper


def next_palindrome(x: int) -> int:
    """
    Следующий палиндром строго больше x (increment).

    Насыщение: для x >= PALINDROME_MAX возвращается PALINDROME_MAX.

    Examples:
        >>> next_palindrome(22)
        33
        >>> next_palindrome(999999)
        1000001
    """
    validate_u64(x, "x")

    if x >= PALINDROME_MAX:
        return PALINDROME_MAX
    return ceiling_palindrome(x + 1)


def previous_palindrome(x: int) -> int:
    """
    Предыдущий палиндром строго меньше x (decrement).

    Насыщение: previous_palindrome(0) == 0.

    Examples:
        >>> previous_palindrome(22)
        11
        >>> previous_palindrome(202)
        191
    """
    validate_u64(x, "x")

    if x == 0:
        return 0
    return floor_palindrome(x - 1)
