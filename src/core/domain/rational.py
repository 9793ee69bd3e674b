"""
Rational — точная рациональная дробь

Immutable Pydantic модель пары (numerator, denominator) в несократимом виде.
Все изменения значения создают новый экземпляр.

Ответственности:
- Конструирование и нормализация (сокращение на НОД, знак в числителе)
- Разбор текста: "W&N/D", "N/D", "N"
- Конверсия float <-> Rational
- Форматирование: простая ("11/4") или смешанная ("2&3/4") форма
- Арифметика: *, /, +, -, %

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0, знак хранится только в numerator
2. gcd(|numerator|, denominator) == 1; ноль всегда хранится как (0, 1)
3. Нулевой знаменатель никогда не конструируется: вместо него бросается ошибка

Арифметика выполняется в int Python без ограничения разрядности, поэтому
переполнения 32-битных целых не воспроизводятся.
"""

import math
from typing import Any

from pydantic import BaseModel, Field, StrictInt, model_validator

from src.core.contracts.fraction_grammar import FractionForm, tokenize_fraction
from src.core.errors import DivisionByZero, InvalidValue
from src.core.math.integer_arithmetic import (
    FLOAT_TO_RATIONAL_PRECISION,
    calc_gcd,
    is_valid_float,
    round_half_up,
    split_float,
)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def reduce_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Нормализация пары (numerator, denominator).

    Правила:
    - numerator == 0 -> (0, 1) при любом знаменателе
    - denominator <= 0 -> InvalidValue
    - иначе сокращение на gcd(|numerator|, denominator)

    Raises:
        InvalidValue: Если знаменатель <= 0 при ненулевом числителе

    Examples:
        >>> reduce_fraction(6, 8)
        (3, 4)
        >>> reduce_fraction(0, 5)
        (0, 1)
    """
    if numerator == 0:
        return 0, 1

    if denominator <= 0:
        raise InvalidValue(f"invalid denominator value '{denominator}'")

    gcd = calc_gcd(abs(numerator), denominator)
    if gcd > 1:
        numerator //= gcd
        denominator //= gcd

    return numerator, denominator


# =============================================================================
# RATIONAL MODEL
# =============================================================================


class Rational(BaseModel):
    """
    Точная рациональная дробь в несократимом виде.

    Rational() == Rational(0, 1) — канонический ноль.
    """

    numerator: StrictInt = Field(0, description="Числитель (несёт знак дроби)")
    denominator: StrictInt = Field(1, gt=0, description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        super().__init__(numerator=numerator, denominator=denominator)

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        """
        Нормализация до проверки полей.

        Нецелые значения пропускаются без изменений: их отклоняет
        проверка StrictInt (ValidationError).
        """
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator", 0)
        denominator = data.get("denominator", 1)
        if not (_is_int(numerator) and _is_int(denominator)):
            return data

        numerator, denominator = reduce_fraction(numerator, denominator)
        return {**data, "numerator": numerator, "denominator": denominator}

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """
        Разбор дроби из текста.

        Формы (в порядке приоритета):
            "2&3/4" -> 11/4  (смешанная; знак берётся из целой части)
            "23/4"  -> 23/4  (простая, может быть неправильной)
            "23"    -> 23/1

        Args:
            text: Текстовое представление дроби без пробелов

        Returns:
            Нормализованный Rational

        Raises:
            ParseError: Пустая строка или неизвестный формат
            InvalidValue: Отрицательный числитель смешанной дроби
                или знаменатель <= 0
        """
        tokens = tokenize_fraction(text)

        if tokens.form is FractionForm.MIXED:
            whole, numerator, denominator = tokens.parts
            if numerator < 0:
                raise InvalidValue(f"invalid numerator '{text}'")
            if denominator <= 0:
                raise InvalidValue(f"invalid denominator '{text}'")

            # Знак целой части применяется ко всей величине: -1&1/2 = -3/2
            sign = -1 if whole < 0 else 1
            return cls((numerator + abs(whole) * denominator) * sign, denominator)

        if tokens.form is FractionForm.SIMPLE:
            numerator, denominator = tokens.parts
            if denominator <= 0:
                raise InvalidValue(f"invalid denominator '{text}'")
            return cls(numerator, denominator)

        return cls(tokens.parts[0], 1)

    @classmethod
    def from_float(cls, value: float) -> "Rational":
        """
        Конверсия float -> Rational.

        Дробная часть (value - floor(value)) масштабируется на
        FLOAT_TO_RATIONAL_PRECISION и округляется, т.е. результат — десятичная
        дробь с точностью 9 знаков, а не точное двоичное значение float.

        Args:
            value: Конечное значение

        Returns:
            Нормализованный Rational

        Raises:
            InvalidValue: value равен NaN или Inf

        Examples:
            >>> Rational.from_float(2.75).format(as_mixed=False)
            '11/4'
            >>> Rational.from_float(-0.25).format()
            '-1/4'
        """
        if not is_valid_float(value):
            raise InvalidValue(f"invalid floating-point value '{value}'")

        integral, fractional = split_float(value)

        if fractional:
            frac_scaled = round_half_up(fractional * FLOAT_TO_RATIONAL_PRECISION)
            gcd = calc_gcd(frac_scaled, FLOAT_TO_RATIONAL_PRECISION)
            denominator = FLOAT_TO_RATIONAL_PRECISION // gcd
            return cls(integral * denominator + frac_scaled // gcd, denominator)

        if integral:
            return cls(integral, 1)

        return cls()

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_mixed(self) -> bool:
        """|numerator| > denominator: величина >= 1 (для нецелых — есть целая часть)"""
        return abs(self.numerator) > self.denominator

    def to_float(self) -> float:
        """
        Конверсия Rational -> float.

        Raises:
            InvalidValue: Частное вне диапазона float (например, 10**400)
        """
        try:
            return self.numerator / self.denominator
        except OverflowError:
            raise InvalidValue(
                f"value '{self.format(as_mixed=False)}' out of floating-point range"
            ) from None

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def format(self, as_mixed: bool = True) -> str:
        """
        Текстовое представление дроби.

        Args:
            as_mixed: Печатать неправильные дроби в смешанной форме (default: True)

        Returns:
            "0", "<n>" для целых, "<whole>&<rem>/<d>" для смешанной формы,
            иначе "<n>/<d>"

        Examples:
            >>> Rational(11, 4).format()
            '2&3/4'
            >>> Rational(-11, 4).format()
            '-2&3/4'
            >>> Rational(-11, 4).format(as_mixed=False)
            '-11/4'

        Raises:
            InvalidValue: Числитель или знаменатель длиннее лимита
                sys.get_int_max_str_digits() для конверсии int -> str
        """
        try:
            return self._format(as_mixed)
        except ValueError:
            raise InvalidValue(
                "value exceeds the integer string conversion limit"
            ) from None

    def _format(self, as_mixed: bool) -> str:
        if self.numerator == 0:
            return "0"

        if self.denominator == 0:
            return "undefined"

        if self.denominator == 1:
            return str(self.numerator)

        if as_mixed and self.is_mixed():
            # Целая часть сохраняет знак (деление с усечением к нулю),
            # остаток всегда неотрицательный
            remainder = abs(self.numerator) % self.denominator
            whole = abs(self.numerator) // self.denominator
            if self.numerator < 0:
                whole = -whole
            return f"{whole}&{remainder}/{self.denominator}"

        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.format()

    def __float__(self) -> float:
        return self.to_float()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Rational":
        return Rational(-self.numerator, self.denominator)

    def __mul__(self, other: object) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented

        return Rational(
            self.numerator * rhs.numerator,
            self.denominator * rhs.denominator,
        )

    def __truediv__(self, other: object) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented

        if rhs.is_zero():
            raise DivisionByZero("division by zero")

        if self.is_zero():
            return Rational()

        # Знак делителя переносится в числитель, знаменатель остаётся > 0
        rhs_sign = -1 if rhs.numerator < 0 else 1
        return Rational(
            self.numerator * rhs.denominator * rhs_sign,
            self.denominator * abs(rhs.numerator),
        )

    def __add__(self, other: object) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented

        if self.is_zero():
            return rhs
        if rhs.is_zero():
            return self

        return Rational(
            self.numerator * rhs.denominator + rhs.numerator * self.denominator,
            self.denominator * rhs.denominator,
        )

    def __sub__(self, other: object) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented

        if self.is_zero():
            return -rhs
        if rhs.is_zero():
            return self

        return Rational(
            self.numerator * rhs.denominator - rhs.numerator * self.denominator,
            self.denominator * rhs.denominator,
        )

    def __mod__(self, other: object) -> "Rational":
        """
        Остаток от деления на положительное целое.

        a mod b = a - b * floor(a / b), где floor берётся от float-частного.
        Для очень больших числителей/знаменателей float-частное теряет
        точность; результат в этом случае приближённый.

        Raises:
            InvalidValue: Делитель не является положительным целым
        """
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented

        if rhs.numerator <= 0 or rhs.denominator != 1:
            raise InvalidValue(f"invalid modulo divisor '{rhs.format()}'")

        quotient = math.floor((self / rhs).to_float())
        return self - rhs * Rational.from_float(float(quotient))

    def __rmul__(self, other: object) -> "Rational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __rtruediv__(self, other: object) -> "Rational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __radd__(self, other: object) -> "Rational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __rsub__(self, other: object) -> "Rational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __rmod__(self, other: object) -> "Rational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs % self


def _coerce(value: object) -> Rational | None:
    """Rational остаётся как есть, int повышается до Rational(int)"""
    if isinstance(value, Rational):
        return value
    if _is_int(value):
        return Rational(value)
    return None


def parse_fraction(text: str) -> Rational:
    """Разбор дроби из текста (см. Rational.parse)"""
    return Rational.parse(text)
