"""
DigitCodec — Десятичные цифры u64 и сборка палиндрома из первой половины

Модуль отвечает за:
- Разложение числа на десятичные цифры (старшая цифра первой)
- Обратную сборку числа из последовательности цифр
- Выделение первой половины (first half, центральная цифра включена)
- Реконструкцию палиндрома заданной длины из его первой половины

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits_of(0) == [0] (единственный случай ведущего нуля)
2. len(first_half) == ceil(length / 2), иначе DigitContractViolation
3. Последовательности цифр короткоживущие: создаются и выбрасываются
   в рамках одного вызова

ФОРМУЛЫ:
    H = ceil(L / 2) = (L + 1) // 2
    out[i] = half[i]                  для i < H
    out[i] = half[L - 1 - i]          для H <= i < L
"""

from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (только десятичная, другие основания не поддерживаются)
BASE: Final[int] = 10

# Максимальное количество цифр u64 (2**64 - 1 = 18446744073709551615)
MAX_DIGITS: Final[int] = 20


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DigitContractViolation(Exception):
    """
    Нарушение контракта DigitCodec на стороне вызывающего кода.

    Возникает если:
    1. reconstruct() вызван с длиной, несовместимой с размером first half
    2. Последовательность содержит "цифру" вне диапазона 0–9
    3. Последовательность цифр пустая

    Это ошибка программиста, а не данных: внутри библиотеки
    исключение никогда не перехватывается.
    """
    pass


# =============================================================================
# РАЗЛОЖЕНИЕ И СБОРКА
# =============================================================================


def digits_of(x: int) -> list[int]:
    """
    Разложение числа на десятичные цифры, старшая цифра первой.

    Args:
        x: Неотрицательное целое

    Returns:
        Список цифр без ведущих нулей (кроме x == 0 → [0])

    Examples:
        >>> digits_of(0)
        [0]
        >>> digits_of(998001)
        [9, 9, 8, 0, 0, 1]
    """
    if x == 0:
        return [0]

    digits = []
    while x > 0:
        x, digit = divmod(x, BASE)
        digits.append(digit)

    digits.reverse()
    return digits


def length_of(x: int) -> int:
    """
    Количество десятичных цифр (length_of(0) == 1).

    Examples:
        >>> length_of(0)
        1
        >>> length_of(18446744066044764481)
        20
    """
    return len(digits_of(x))


def value_of(digits: Sequence[int]) -> int:
    """
    Сборка числа из последовательности цифр (старшая цифра первой).

    Ведущие нули допускаются и просто не влияют на результат.

    Raises:
        DigitContractViolation: Если последовательность пустая
            или содержит элемент вне 0–9
    """
    if len(digits) == 0:
        raise DigitContractViolation("digit sequence must be non-empty")

    value = 0
    for digit in digits:
        _check_digit(digit)
        value = value * BASE + digit
    return value


def first_half_of(digits: Sequence[int]) -> list[int]:
    """
    Первая половина последовательности: ceil(L/2) старших цифр,
    центральная цифра включается при нечётной длине.

    Examples:
        >>> first_half_of([3, 4, 5, 4, 3])
        [3, 4, 5]
        >>> first_half_of([3, 4, 5, 5, 4, 3])
        [3, 4, 5]
    """
    return list(digits[: (len(digits) + 1) // 2])


def mirror_order(digits: Sequence[int]) -> int:
    """
    Сравнение зеркального кандидата (first half, отражённая на вторую
    половину) с самим числом.

    Пары цифр сравниваются от центра наружу: цифра первой половины
    digits[H-1-k] против цифры второй половины digits[L-H+k].
    Решает первое несовпадение.

    Args:
        digits: Цифры числа, старшая первой

    Returns:
        -1 если кандидат меньше числа
         0 если кандидат равен числу (число уже палиндром)
        +1 если кандидат больше числа

    Examples:
        >>> mirror_order([1, 4, 5, 1])  # 1441 < 1451
        -1
        >>> mirror_order([9, 9, 8, 0, 0, 1])  # 998899 > 998001
        1
    """
    length = len(digits)
    half_length = (length + 1) // 2

    for k in range(half_length):
        front = digits[half_length - 1 - k]
        back = digits[length - half_length + k]
        if front < back:
            return -1
        if front > back:
            return 1

    return 0


def reconstruct(length: int, first_half: Sequence[int]) -> int:
    """
    Реконструкция палиндрома длины `length` из его первой половины.

    Старшие len(first_half) цифр берутся как есть, оставшиеся
    length - len(first_half) позиций зеркалируют first half
    (без повторения центральной цифры при нечётной длине).

    Args:
        length: Требуемая длина палиндрома в цифрах
        first_half: Первая половина (центральная цифра включена)

    Returns:
        Значение палиндрома

    Raises:
        DigitContractViolation: Если ceil(length / 2) != len(first_half)

    Examples:
        >>> reconstruct(5, [3, 4, 5])
        34543
        >>> reconstruct(6, [3, 4, 5])
        345543
        >>> reconstruct(7, [1, 7, 1, 0])
        1710171
    """
    half_length = len(first_half)
    if length < 1 or (length + 1) // 2 != half_length:
        raise DigitContractViolation(
            f"length ({length}) isn't compatible with the size of first_half "
            f"({half_length}). Valid length values: "
            f"{max(half_length * 2 - 1, 1)} & {half_length * 2}"
        )

    value = value_of(first_half)

    # Вторая половина: first_half[mirror_length - 1], ..., first_half[0]
    mirror_length = length - half_length
    for idx in range(mirror_length - 1, -1, -1):
        value = value * BASE + first_half[idx]

    return value


def _check_digit(digit: int) -> None:
    if not isinstance(digit, int) or isinstance(digit, bool) or not 0 <= digit < BASE:
        raise DigitContractViolation(f"digit must be an int in 0..9, got {digit!r}")
