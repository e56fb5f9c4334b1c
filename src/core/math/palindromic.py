"""
PalindromeTest — Предикат палиндромности для u64

Алгоритм (half-reversal):
    Цифры снимаются с младшего конца в right_half, пока x > right_half.
    Палиндром ⇔ x == right_half (чётная длина)
              или x == right_half // 10 (нечётная длина, центральная цифра отброшена)

Быстрый отказ: любое положительное кратное 10 не палиндром
(последняя цифра 0 не может совпасть с ненулевой старшей цифрой).

Сложность: O(число цифр), O(1) дополнительной памяти.
Используется как hot path всеми остальными модулями, поэтому без логирования.
"""

from typing import Final

# Верхняя граница представимого диапазона u64
U64_MAX: Final[int] = 2**64 - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_u64(value: int, name: str) -> None:
    """
    Валидация, что значение является беззнаковым 64-битным целым.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int (bool не допускается), отрицательно
            или больше U64_MAX
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > U64_MAX:
        raise ValueError(f"{name} must be <= {U64_MAX} (u64), got {value}")


# =============================================================================
# ПРЕДИКАТ
# =============================================================================


def is_palindrome(x: int) -> bool:
    """
    Проверка, читается ли десятичная запись x одинаково в обе стороны.

    Args:
        x: Значение в диапазоне u64

    Returns:
        True если x палиндром (0 — палиндром)

    Raises:
        ValueError: Если x вне диапазона u64

    Examples:
        >>> is_palindrome(0)
        True
        >>> is_palindrome(12321)
        True
        >>> is_palindrome(10)
        False
    """
    validate_u64(x, "x")
    return _is_palindrome_unchecked(x)


def _is_palindrome_unchecked(x: int) -> bool:
    if x % 10 == 0 and x != 0:
        return False

    right_half = 0
    while x > right_half:
        right_half = right_half * 10 + x % 10
        x //= 10

    return x == right_half or x == right_half // 10


is_palindromic = is_palindrome
