"""
PalindromeRange — Описание конечной последовательности палиндромов

Immutable Pydantic модель с двумя взаимоисключающими режимами:
- VALUES: полуинтервал значений [start, end); end не обязан быть палиндромом
- COUNT: окно из count палиндромов, начиная с палиндрома start

Соответствует схеме src/core/contracts/schema/palindrome_range.json.
Инверсия (start > end) допустима и означает пустую последовательность.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.math.nearest import PALINDROME_MAX
from src.core.math.ordinal import MAX_ORDINAL, count_below, nth_palindrome
from src.core.math.palindromic import U64_MAX, is_palindrome


# =============================================================================
# ENUMS
# =============================================================================


class RangeMode(str, Enum):
    """Режим построения последовательности"""

    VALUES = "values"
    COUNT = "count"


# =============================================================================
# PALINDROME RANGE MODEL
# =============================================================================


class PalindromeRange(BaseModel):
    """
    Описание последовательности палиндромов.

    VALUES: start, end заданы; count отсутствует
    COUNT:  start (палиндром), count заданы; end отсутствует
    """

    mode: RangeMode = Field(..., description="Режим (values/count)")
    start: int = Field(..., ge=0, le=U64_MAX, strict=True, description="Начало (включительно)")
    end: Optional[int] = Field(
        None,
        ge=0,
        le=U64_MAX,
        strict=True,
        validate_default=True,
        description="Исключающая верхняя граница (только VALUES)",
    )
    count: Optional[int] = Field(
        None,
        ge=0,
        strict=True,
        validate_default=True,
        description="Количество палиндромов (только COUNT)",
    )

    model_config = {"frozen": True}

    @field_validator("start")
    @classmethod
    def validate_start_for_mode(cls, v: int, info) -> int:
        """В режиме COUNT начало должно быть палиндромом"""
        if info.data.get("mode") == RangeMode.COUNT:
            if v > PALINDROME_MAX or not is_palindrome(v):
                raise ValueError(f"COUNT: start {v} must be a palindrome")
        return v

    @field_validator("end")
    @classmethod
    def validate_end_for_mode(cls, v: Optional[int], info) -> Optional[int]:
        """end обязателен в режиме VALUES и запрещён в режиме COUNT"""
        mode = info.data.get("mode")
        if mode == RangeMode.VALUES and v is None:
            raise ValueError("VALUES: end is required")
        if mode == RangeMode.COUNT and v is not None:
            raise ValueError("COUNT: end must not be set")
        return v

    @field_validator("count")
    @classmethod
    def validate_count_for_mode(cls, v: Optional[int], info) -> Optional[int]:
        """count обязателен в режиме COUNT и запрещён в режиме VALUES"""
        mode = info.data.get("mode")
        if mode == RangeMode.COUNT and v is None:
            raise ValueError("COUNT: count is required")
        if mode == RangeMode.VALUES and v is not None:
            raise ValueError("VALUES: count must not be set")
        return v

    @classmethod
    def values(cls, start: int, end: int) -> "PalindromeRange":
        """Полуинтервал значений [start, end)."""
        return cls(mode=RangeMode.VALUES, start=start, end=end)

    @classmethod
    def window(cls, count: int, start: int = 0) -> "PalindromeRange":
        """Окно из count палиндромов, начиная с палиндрома start."""
        return cls(mode=RangeMode.COUNT, start=start, count=count)

    def upper_bound(self) -> int:
        """
        Исключающая верхняя граница значений.

        Для COUNT: nth(to_n(start) + count); за пределами MAX_ORDINAL
        граница деградирует до PALINDROME_MAX (последовательность короче count).
        """
        if self.mode == RangeMode.VALUES:
            return self.end

        bound = nth_palindrome(count_below(self.start) + self.count)
        if bound is None:
            return PALINDROME_MAX
        return bound

    def is_truncated(self) -> bool:
        """True если окно COUNT не помещается до MAX_ORDINAL."""
        if self.mode == RangeMode.VALUES:
            return False
        return count_below(self.start) + self.count > MAX_ORDINAL

    def __len__(self) -> int:
        """Количество палиндромов в последовательности, O(1)."""
        return max(0, count_below(self.upper_bound()) - count_below(self.start))
