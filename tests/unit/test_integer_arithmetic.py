"""
Тесты для модуля Integer Arithmetic

Проверяет:
1. НОД (Евклид), включая граничные случаи с нулём и очень длинные числа
2. Разложение float на floor и дробную часть
3. Округление half up
4. Проверку float на конечность
"""

import math

import pytest

from src.core.math.integer_arithmetic import (
    FLOAT_TO_RATIONAL_PRECISION,
    calc_gcd,
    is_valid_float,
    round_half_up,
    split_float,
)

# =============================================================================
# НОД
# =============================================================================


class TestCalcGcd:
    """Тесты для calc_gcd"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (12, 18, 6),
            (18, 12, 6),
            (7, 13, 1),
            (100, 10, 10),
            (1, 1, 1),
            (750000000, 1000000000, 250000000),
        ],
    )
    def test_known_values(self, a: int, b: int, expected: int) -> None:
        """Известные значения НОД"""
        assert calc_gcd(a, b) == expected

    def test_zero_second_argument_returns_first(self) -> None:
        """gcd(a, 0) == a"""
        assert calc_gcd(7, 0) == 7
        assert calc_gcd(0, 0) == 0

    def test_zero_first_argument_returns_second(self) -> None:
        """gcd(0, b) == b (за один шаг)"""
        assert calc_gcd(0, 5) == 5
        assert calc_gcd(0, FLOAT_TO_RATIONAL_PRECISION) == FLOAT_TO_RATIONAL_PRECISION

    def test_matches_math_gcd(self) -> None:
        """Совпадение с math.gcd на неотрицательных числах"""
        for a in range(0, 60, 7):
            for b in range(0, 60, 5):
                assert calc_gcd(a, b) == math.gcd(a, b)

    def test_large_values(self) -> None:
        """Большие значения не ограничены 32 битами"""
        a = 2**70 * 3
        b = 2**65 * 5
        assert calc_gcd(a, b) == 2**65

    def test_consecutive_fibonacci_numbers_are_coprime(self) -> None:
        """Соседние числа Фибоначчи: худший случай Евклида, ~3000 шагов"""
        a, b = 0, 1
        for _ in range(3000):
            a, b = b, a + b
        assert calc_gcd(b, a) == 1
        assert calc_gcd(a * 6, b * 6) == 6


# =============================================================================
# FLOAT
# =============================================================================


class TestSplitFloat:
    """Тесты для split_float"""

    def test_positive_value(self) -> None:
        assert split_float(2.75) == (2, 0.75)

    def test_negative_value_floors_toward_minus_infinity(self) -> None:
        """Целая часть — floor, дробная часть неотрицательная"""
        integral, fractional = split_float(-0.25)
        assert integral == -1
        assert fractional == 0.75

    def test_integer_value(self) -> None:
        assert split_float(3.0) == (3, 0.0)
        assert split_float(-3.0) == (-3, 0.0)

    def test_zero(self) -> None:
        assert split_float(0.0) == (0, 0.0)

    def test_integral_is_int(self) -> None:
        integral, _ = split_float(5.5)
        assert isinstance(integral, int)


class TestRoundHalfUp:
    """Тесты для round_half_up"""

    def test_half_rounds_away_from_zero(self) -> None:
        """0.5 округляется от нуля (в отличие от builtin round)"""
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(-2.5) == -3

    def test_regular_rounding(self) -> None:
        assert round_half_up(2.4) == 2
        assert round_half_up(2.6) == 3
        assert round_half_up(333333333.33) == 333333333

    def test_returns_int(self) -> None:
        assert isinstance(round_half_up(1.2), int)


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_nan_and_inf(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))
