"""Calculator operations — разбор команды "<left> <op> <right>" и диспетчеризация.

Команда — три токена, разделённых пробелами:
    "1/2 + 3/4"     -> 1&1/4
    "28/11 % 2"     -> 6/11
    "2&3/4 * -1/2"  -> -1&3/8

Порядок ошибок: сначала левый операнд, затем правый, затем оператор.
"""

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final

from src.core.domain.rational import Rational
from src.core.errors import ParseError


class OperatorSymbol(str, Enum):
    """Поддерживаемые бинарные операторы."""
    MULTIPLY = "*"
    DIVIDE = "/"
    ADD = "+"
    SUBTRACT = "-"
    MODULO = "%"


OPERATIONS: Final[dict[OperatorSymbol, Callable[[Rational, Rational], Rational]]] = {
    OperatorSymbol.MULTIPLY: operator.mul,
    OperatorSymbol.DIVIDE: operator.truediv,
    OperatorSymbol.ADD: operator.add,
    OperatorSymbol.SUBTRACT: operator.sub,
    OperatorSymbol.MODULO: operator.mod,
}

COMMAND_TOKENS: Final[int] = 3


@dataclass(frozen=True)
class CalculatorCommand:
    """Разобранная команда калькулятора."""

    left: Rational
    operator: OperatorSymbol
    right: Rational

    def __str__(self) -> str:
        left = self.left.format(as_mixed=False)
        right = self.right.format(as_mixed=False)
        return f"{left} {self.operator.value} {right}"


def parse_operator(token: str) -> OperatorSymbol:
    """Символ оператора -> OperatorSymbol.

    Raises:
        ParseError: неизвестный оператор
    """
    try:
        return OperatorSymbol(token)
    except ValueError:
        raise ParseError(f"invalid operator '{token}'") from None


def parse_command(line: str) -> CalculatorCommand:
    """Разбор строки команды.

    Args:
        line: строка вида "<left> <op> <right>"

    Returns:
        CalculatorCommand

    Raises:
        ParseError: лишние токены, пустой/неверный операнд, неизвестный оператор
        InvalidValue: операнд с недопустимым значением (например, "1/0")
    """
    tokens = line.split()
    if len(tokens) > COMMAND_TOKENS:
        rest = " ".join(tokens[COMMAND_TOKENS:])
        raise ParseError(f"unexpected trailing input '{rest}'")

    # Недостающие токены разбираются как пустые строки
    left_token, op_token, right_token = tokens + [""] * (COMMAND_TOKENS - len(tokens))

    left = Rational.parse(left_token)
    right = Rational.parse(right_token)
    op = parse_operator(op_token)

    return CalculatorCommand(left=left, operator=op, right=right)


def evaluate_command(command: CalculatorCommand) -> Rational:
    """Выполнение команды.

    Raises:
        DivisionByZero: деление на ноль
        InvalidValue: недопустимый делитель модуля
    """
    return OPERATIONS[command.operator](command.left, command.right)
