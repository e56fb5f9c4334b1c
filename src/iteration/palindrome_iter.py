"""PalindromeIter — ленивая конечная последовательность палиндромов.

Шаг итерации: выдать текущий палиндром, перейти к next().
Остановка: текущее значение >= исключающей границы, либо после выдачи
PALINDROME_MAX (next(MAX) == MAX, дальше двигаться некуда).

Построение:
- from_range(start, end)     — границы-палиндромы, [start, end)
- from_values(start, end)    — сырые u64 границы, end не обязан быть палиндромом
- first_n(count)             — первые count палиндромов, начиная с 0
- first_n_from(count, start) — count палиндромов, начиная с палиндрома start

len() — O(1): count_below(end) - count_below(current), без перебора.

Усечение first_n_from: если to_n(start) + count > MAX_ORDINAL, граница
деградирует до PALINDROME_MAX и итератор выдаёт меньше count элементов
(ровно MAX_ORDINAL - to_n(start)). Это ожидаемое поведение, не ошибка:
фиксируется warning-событием palindrome_iter_truncated.
"""

from typing import Iterator

import structlog

from src.core.domain.palindrome import Palindrome
from src.core.domain.palindrome_range import PalindromeRange
from src.core.math.nearest import PALINDROME_MAX, ceiling_palindrome, next_palindrome
from src.core.math.ordinal import MAX_ORDINAL, count_below
from src.core.math.palindromic import validate_u64

logger = structlog.get_logger("palindromeda.iteration")


class PalindromeIter:
    """Однопроходный итератор по палиндромам в порядке возрастания.

    Экземпляр forward-only; для повторного прохода создаётся новый
    итератор (например, PalindromeIter.from_spec(it.to_range())).
    """

    def __init__(self, spec: PalindromeRange):
        self._spec = spec
        self._end = spec.upper_bound()
        self._current = ceiling_palindrome(spec.start)
        # Для start > MAX ceiling насыщается до MAX < start: последовательность пуста
        self._exhausted = self._current >= self._end or self._current < spec.start

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_spec(cls, spec: PalindromeRange) -> "PalindromeIter":
        """Итератор по готовому описанию PalindromeRange."""
        if spec.is_truncated():
            requested = spec.count
            available = MAX_ORDINAL - count_below(spec.start)
            logger.warning(
                "palindrome_iter_truncated",
                start=spec.start,
                requested=requested,
                available=available,
                shortfall=requested - available,
            )

        return cls(spec)

    @classmethod
    def from_range(cls, start: Palindrome, end: Palindrome) -> "PalindromeIter":
        """Палиндромы в [start, end)."""
        return cls.from_spec(PalindromeRange.values(int(start), int(end)))

    @classmethod
    def from_values(cls, start: int, end: int) -> "PalindromeIter":
        """Палиндромы в [start, end) для произвольных u64 границ."""
        validate_u64(start, "start")
        validate_u64(end, "end")
        return cls.from_spec(PalindromeRange.values(start, end))

    @classmethod
    def first_n(cls, count: int) -> "PalindromeIter":
        """Первые count палиндромов (0, 1, ..., 9, 11, ...)."""
        return cls.first_n_from(count, Palindrome.model_construct(value=0))

    @classmethod
    def first_n_from(cls, count: int, start: Palindrome) -> "PalindromeIter":
        """
        count палиндромов, начиная с start (включительно).

        Raises:
            ValueError: Если count отрицательный
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return cls.from_spec(PalindromeRange.window(count, int(start)))

    # -------------------------------------------------------------------------
    # Протокол итерации
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[Palindrome]:
        return self

    def __next__(self) -> Palindrome:
        if self._exhausted:
            raise StopIteration

        current = self._current
        if current >= PALINDROME_MAX:
            self._exhausted = True
        else:
            self._current = next_palindrome(current)
            self._exhausted = self._current >= self._end

        return Palindrome.model_construct(value=current)

    def __len__(self) -> int:
        if self._exhausted:
            return 0
        return max(0, count_below(self._end) - count_below(self._current))

    def to_range(self) -> PalindromeRange:
        """Описание, из которого построен итератор."""
        return self._spec

    def __repr__(self) -> str:
        return (
            f"PalindromeIter(mode={self._spec.mode.value}, "
            f"current={self._current}, end={self._end}, remaining={len(self)})"
        )
