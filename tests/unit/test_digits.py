"""
Тесты для DigitCodec — десятичные цифры и реконструкция палиндрома

Проверяет:
1. Разложение на цифры и обратную сборку
2. Выделение первой половины
3. Сравнение зеркального кандидата с числом (от центра наружу)
4. reconstruct() для чётной/нечётной длины и вырожденных половин
5. DigitContractViolation при несовместимой длине
"""

import pytest

from src.core.math.digits import (
    MAX_DIGITS,
    DigitContractViolation,
    digits_of,
    first_half_of,
    length_of,
    mirror_order,
    reconstruct,
    value_of,
)
from src.core.math.palindromic import U64_MAX

# =============================================================================
# ТЕСТЫ РАЗЛОЖЕНИЯ
# =============================================================================


class TestDigitsOf:
    """Тесты для digits_of / length_of"""

    def test_zero_is_single_digit(self) -> None:
        """0 → [0], длина 1"""
        assert digits_of(0) == [0]
        assert length_of(0) == 1

    def test_most_significant_first(self) -> None:
        """Старшая цифра первой"""
        assert digits_of(7) == [7]
        assert digits_of(120) == [1, 2, 0]
        assert digits_of(998001) == [9, 9, 8, 0, 0, 1]

    def test_no_leading_zeros(self) -> None:
        """Ведущих нулей нет"""
        for x in (1, 10, 100, 1000, 10**19):
            assert digits_of(x)[0] != 0

    def test_u64_max_has_max_digits(self) -> None:
        """2**64 - 1 имеет 20 цифр"""
        assert length_of(U64_MAX) == MAX_DIGITS
        assert digits_of(U64_MAX) == [int(c) for c in str(U64_MAX)]

    def test_length_matches_str(self) -> None:
        """Длина совпадает с длиной десятичной строки"""
        for x in range(0, 5000, 7):
            assert length_of(x) == len(str(x))


class TestValueOf:
    """Тесты для value_of"""

    def test_roundtrip_examples(self) -> None:
        """Сборка из цифр возвращает исходное число"""
        for x in (0, 5, 10, 4321, 18446744066044764481):
            assert value_of(digits_of(x)) == x

    def test_leading_zeros_ignored(self) -> None:
        """Ведущие нули не влияют на значение"""
        assert value_of([0, 0, 1, 2]) == 12

    def test_empty_sequence_raises(self) -> None:
        """Пустая последовательность — нарушение контракта"""
        with pytest.raises(DigitContractViolation, match="non-empty"):
            value_of([])

    def test_invalid_digit_raises(self) -> None:
        """Элемент вне 0–9 — нарушение контракта"""
        with pytest.raises(DigitContractViolation, match="0..9"):
            value_of([1, 10])
        with pytest.raises(DigitContractViolation, match="0..9"):
            value_of([-1])


class TestFirstHalfOf:
    """Тесты для first_half_of"""

    def test_odd_length_includes_center(self) -> None:
        """Нечётная длина: центральная цифра входит в первую половину"""
        assert first_half_of([3, 4, 5, 4, 3]) == [3, 4, 5]
        assert first_half_of([7]) == [7]

    def test_even_length(self) -> None:
        """Чётная длина: ровно половина"""
        assert first_half_of([3, 4, 5, 5, 4, 3]) == [3, 4, 5]
        assert first_half_of([1, 0]) == [1]


# =============================================================================
# ТЕСТЫ ЗЕРКАЛЬНОГО СРАВНЕНИЯ
# =============================================================================


class TestMirrorOrder:
    """Тесты для mirror_order"""

    def test_palindrome_is_equal(self) -> None:
        """Палиндром равен своему зеркальному кандидату"""
        assert mirror_order([1, 2, 1]) == 0
        assert mirror_order([0]) == 0
        assert mirror_order([4, 4]) == 0

    def test_candidate_below(self) -> None:
        """1441 < 1451"""
        assert mirror_order([1, 4, 5, 1]) == -1
        assert mirror_order([1, 9]) == -1

    def test_candidate_above(self) -> None:
        """998899 > 998001"""
        assert mirror_order([9, 9, 8, 0, 0, 1]) == 1
        assert mirror_order([1, 0]) == 1

    def test_first_mismatch_from_center_decides(self) -> None:
        """Решает первое несовпадение от центра, а не от краёв"""
        # 1290: центр 2 < 9 → кандидат 1221 < 1290, хотя 1 > 0 на краях
        assert mirror_order([1, 2, 9, 0]) == -1
        # 2901: центр 9 > 0 → кандидат 2992 > 2901
        assert mirror_order([2, 9, 0, 1]) == 1

    def test_matches_brute_force(self) -> None:
        """Совпадает с прямым сравнением отражённого кандидата"""
        for x in range(10, 3000):
            digits = digits_of(x)
            half = first_half_of(digits)
            candidate = reconstruct(len(digits), half)
            expected = (candidate > x) - (candidate < x)
            assert mirror_order(digits) == expected, x


# =============================================================================
# ТЕСТЫ РЕКОНСТРУКЦИИ
# =============================================================================


class TestReconstruct:
    """Тесты для reconstruct"""

    @pytest.mark.parametrize(
        "length, half, expected",
        [
            (5, [3, 4, 5], 34543),
            (6, [3, 4, 5], 345543),
            (1, [0], 0),
            (2, [0], 0),
            (7, [1, 7, 1, 0], 1710171),
            (8, [1, 7, 1, 0], 17100171),
            (1, [9], 9),
            (2, [9], 99),
        ],
    )
    def test_construction(self, length, half, expected) -> None:
        """Известные значения реконструкции"""
        assert reconstruct(length, half) == expected

    def test_max_palindrome(self) -> None:
        """Реконструкция наибольшего палиндрома u64"""
        half = [1, 8, 4, 4, 6, 7, 4, 4, 0, 6]
        assert reconstruct(20, half) == 18446744066044764481

    def test_too_short_length_raises(self) -> None:
        """Длина меньше 2 * len(half) - 1 — нарушение контракта"""
        with pytest.raises(DigitContractViolation, match="isn't compatible"):
            reconstruct(4, [3, 4, 5])

    def test_too_big_length_raises(self) -> None:
        """Длина больше 2 * len(half) — нарушение контракта"""
        with pytest.raises(DigitContractViolation, match="isn't compatible"):
            reconstruct(7, [3, 4, 5])

    def test_zero_length_raises(self) -> None:
        """Нулевая длина — нарушение контракта"""
        with pytest.raises(DigitContractViolation):
            reconstruct(0, [])

    def test_result_is_palindrome(self) -> None:
        """Результат всегда читается одинаково в обе стороны"""
        for half_value in range(1, 500):
            half = digits_of(half_value)
            for length in (2 * len(half) - 1, 2 * len(half)):
                text = str(reconstruct(length, half))
                assert text == text[::-1]
                assert len(text) == length
