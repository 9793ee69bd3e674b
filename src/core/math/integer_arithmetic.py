"""
Integer Arithmetic — примитивы для точной рациональной арифметики

Модуль содержит целочисленные примитивы, на которых строится Rational:
- НОД по алгоритму Евклида (итеративно)
- Разложение float на целую (floor) и дробную части
- Округление "half up" для масштабированной дробной части
- Проверка float на конечность

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. calc_gcd(a, 0) == a
2. split_float: integral + fractional == value, 0 <= fractional < 1
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Масштаб для перевода дробной части float в десятичную дробь.
# 9 знаков после запятой: 0.1 -> 100000000 / 1000000000 -> 1/10
FLOAT_TO_RATIONAL_PRECISION: Final[int] = 1_000_000_000


# =============================================================================
# НОД
# =============================================================================


def calc_gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Args:
        a: Первое число (ожидается >= 0)
        b: Второе число (ожидается >= 0)

    Returns:
        НОД(a, b); для b == 0 возвращается a

    Examples:
        >>> calc_gcd(12, 18)
        6
        >>> calc_gcd(7, 0)
        7
        >>> calc_gcd(0, 5)
        5
    """
    while b:
        a, b = b, a % b
    return a


# =============================================================================
# FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def split_float(value: float) -> tuple[int, float]:
    """
    Разложение float на целую часть (к минус бесконечности) и остаток.

    Args:
        value: Конечное значение

    Returns:
        (integral, fractional), где integral = floor(value),
        fractional = value - integral, 0 <= fractional < 1

    Examples:
        >>> split_float(2.75)
        (2, 0.75)
        >>> split_float(-0.25)
        (-1, 0.75)
    """
    integral = math.floor(value)
    return integral, value - integral


def round_half_up(value: float) -> int:
    """
    Округление до ближайшего целого, половины округляются от нуля.

    Builtin round() использует banker's rounding (2.5 -> 2), здесь 2.5 -> 3.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -3
        >>> round_half_up(333333333.33)
        333333333
    """
    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)
