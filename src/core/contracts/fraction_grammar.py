"""
Fraction Grammar — распознавание текстовых форм дроби

Грамматика: <int><char><int><char><int>, целые вида [+-]?digits (ASCII).
Формы проверяются в порядке приоритета:

1. MIXED   "W&N/D"  — например "2&3/4", "-1&1/2"
2. SIMPLE  "N/D"    — например "3/4", "-11/4" (может быть неправильной)
3. INTEGER "N"      — например "23", "-5"

Всё остальное (пробелы, лишние токены, другие разделители) — ParseError.
Модуль только распознаёт форму и извлекает целые части; проверка значений
(знаменатель > 0 и т.д.) выполняется в Rational.parse.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.errors import ParseError

# =============================================================================
# КОНСТАНТЫ ГРАММАТИКИ
# =============================================================================

MIXED_SEPARATOR: Final[str] = "&"
FRACTION_SEPARATOR: Final[str] = "/"

# Разделитель — любой одиночный символ, кроме цифр и пробелов; знак "+"/"-"
# после разделителя относится к следующему целому.
_FRACTION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<first>[+-]?\d+)"
    r"(?:(?P<op1>[^\d\s])(?P<second>[+-]?\d+)"
    r"(?:(?P<op2>[^\d\s])(?P<third>[+-]?\d+))?)?",
    re.ASCII,
)


# =============================================================================
# TYPES
# =============================================================================


class FractionForm(str, Enum):
    """Распознанная текстовая форма дроби"""

    MIXED = "mixed"
    SIMPLE = "simple"
    INTEGER = "integer"


@dataclass(frozen=True)
class FractionTokens:
    """
    Результат распознавания.

    parts:
        MIXED   -> (whole, numerator, denominator)
        SIMPLE  -> (numerator, denominator)
        INTEGER -> (value,)
    """

    form: FractionForm
    parts: tuple[int, ...]


# =============================================================================
# TOKENIZER
# =============================================================================


def tokenize_fraction(text: str) -> FractionTokens:
    """
    Распознавание текстовой формы дроби.

    Args:
        text: Строка вида "W&N/D", "N/D" или "N"

    Returns:
        FractionTokens с формой и целыми частями

    Raises:
        ParseError: Пустая строка или строка вне грамматики

    Examples:
        >>> tokenize_fraction("2&3/4")
        FractionTokens(form=<FractionForm.MIXED: 'mixed'>, parts=(2, 3, 4))
        >>> tokenize_fraction("-7")
        FractionTokens(form=<FractionForm.INTEGER: 'integer'>, parts=(-7,))
    """
    if not text:
        raise ParseError("empty fraction string")

    match = _FRACTION_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(f"invalid fraction '{text}'")

    op1, op2 = match.group("op1"), match.group("op2")

    if op2 is not None:
        if op1 == MIXED_SEPARATOR and op2 == FRACTION_SEPARATOR:
            return FractionTokens(
                form=FractionForm.MIXED,
                parts=_to_ints(text, match.group("first", "second", "third")),
            )
    elif op1 is not None:
        if op1 == FRACTION_SEPARATOR:
            return FractionTokens(
                form=FractionForm.SIMPLE,
                parts=_to_ints(text, match.group("first", "second")),
            )
    else:
        return FractionTokens(
            form=FractionForm.INTEGER,
            parts=_to_ints(text, (match.group("first"),)),
        )

    raise ParseError(f"invalid fraction '{text}'")


def _to_ints(text: str, groups: tuple[str, ...]) -> tuple[int, ...]:
    """
    Конверсия цифровых групп в int.

    int() отклоняет строки длиннее sys.get_int_max_str_digits() (4300 цифр
    по умолчанию); такая дробь не разбирается.
    """
    try:
        return tuple(int(group) for group in groups)
    except ValueError:
        raise ParseError(f"invalid fraction '{text}'") from None
