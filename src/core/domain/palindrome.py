"""
Palindrome — Модель палиндромного u64

Immutable Pydantic модель: значение u64, десятичная запись которого
читается одинаково в обе стороны. Соответствует схеме
src/core/contracts/schema/palindrome.json.

Создание:
- Palindrome(value=x) — с валидацией (ValidationError для непалиндрома)
- Palindrome.le / ge / closest / nth / from_half — вычисляемые конструкторы

"Изменение" (next/previous) всегда создаёт новый экземпляр.
Арифметика не перегружается: используйте int(p).
"""

from typing import ClassVar, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from src.core.math.digits import reconstruct
from src.core.math.nearest import (
    PALINDROME_MAX,
    PALINDROME_MIN,
    ceiling_palindrome,
    closest_palindrome,
    floor_palindrome,
    next_palindrome,
    previous_palindrome,
)
from src.core.math.ordinal import count_below, nth_palindrome
from src.core.math.palindromic import is_palindrome


def _wrap(value: int) -> "Palindrome":
    # Значение уже получено алгоритмами nearest/ordinal и заведомо палиндромно
    return Palindrome.model_construct(value=value)


# =============================================================================
# PALINDROME MODEL
# =============================================================================


class Palindrome(BaseModel):
    """
    Палиндромное беззнаковое 64-битное целое.

    Инвариант: 0 <= value <= PALINDROME_MAX и value — палиндром.

    Сравнения (==, <, <=, >, >=) работают как с Palindrome,
    так и с обычным int. Хэш совпадает с hash(value).
    """

    MIN: ClassVar[int] = PALINDROME_MIN
    MAX: ClassVar[int] = PALINDROME_MAX

    value: int = Field(
        ...,
        ge=PALINDROME_MIN,
        le=PALINDROME_MAX,
        strict=True,
        description="Значение палиндрома (u64)",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("value")
    @classmethod
    def validate_palindromic(cls, v: int) -> int:
        """Проверка, что значение читается одинаково в обе стороны"""
        if not is_palindrome(v):
            raise ValueError(f"value {v} is not a palindrome")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def le(cls, x: int) -> "Palindrome":
        """
        Наибольший палиндром <= x.

        Examples:
            >>> Palindrome.le(10).value
            9
        """
        return _wrap(floor_palindrome(x))

    @classmethod
    def ge(cls, x: int) -> "Palindrome":
        """
        Наименьший палиндром >= x (насыщение до MAX для x >= MAX).

        Examples:
            >>> Palindrome.ge(10).value
            11
        """
        return _wrap(ceiling_palindrome(x))

    floor = le
    ceiling = ge

    @classmethod
    def closest(cls, x: int) -> "Palindrome":
        """Ближайший палиндром; при равенстве расстояний — больший."""
        return _wrap(closest_palindrome(x))

    @classmethod
    def nth(cls, n: int) -> Optional["Palindrome"]:
        """
        n-й палиндром (0-based).

        Returns:
            Palindrome или None, если n > MAX_ORDINAL
        """
        value = nth_palindrome(n)
        if value is None:
            return None
        return _wrap(value)

    @classmethod
    def from_half(cls, length: int, first_half: Sequence[int]) -> "Palindrome":
        """
        Палиндром длины length из первой половины цифр.

        Raises:
            DigitContractViolation: Если ceil(length / 2) != len(first_half)
            ValidationError: Если результат превышает MAX
        """
        return cls(value=reconstruct(length, first_half))

    # -------------------------------------------------------------------------
    # Навигация
    # -------------------------------------------------------------------------

    def next(self) -> "Palindrome":
        """Следующий палиндром (MAX остаётся MAX)."""
        return _wrap(next_palindrome(self.value))

    def previous(self) -> "Palindrome":
        """Предыдущий палиндром (0 остаётся 0)."""
        return _wrap(previous_palindrome(self.value))

    increment = next
    decrement = previous

    def to_n(self) -> int:
        """
        Порядковый номер палиндрома (0-based).

        Равен количеству палиндромов строго меньше self.
        """
        return count_below(self.value)

    def is_palindrome(self) -> bool:
        return is_palindrome(self.value)

    is_palindromic = is_palindrome

    # -------------------------------------------------------------------------
    # Конверсия и сравнение
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __hash__(self) -> int:
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        other_value = _comparable(other)
        if other_value is None:
            return NotImplemented
        return self.value == other_value

    def __lt__(self, other: object) -> bool:
        other_value = _comparable(other)
        if other_value is None:
            return NotImplemented
        return self.value < other_value

    def __le__(self, other: object) -> bool:
        other_value = _comparable(other)
        if other_value is None:
            return NotImplemented
        return self.value <= other_value

    def __gt__(self, other: object) -> bool:
        other_value = _comparable(other)
        if other_value is None:
            return NotImplemented
        return self.value > other_value

    def __ge__(self, other: object) -> bool:
        other_value = _comparable(other)
        if other_value is None:
            return NotImplemented
        return self.value >= other_value


def _comparable(other: object) -> Optional[int]:
    if isinstance(other, Palindrome):
        return other.value
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return None
