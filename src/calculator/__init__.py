"""Calculator — интерактивный калькулятор дробей поверх src.core.

- Разбор команды "<left> <op> <right>" и диспетчеризация операторов
- Цикл чтения строк с печатью "= <результат>" или "!!! <ошибка> !!!"
- CLI entry point (fraction-calc)
"""

from .operations import (
    OPERATIONS,
    CalculatorCommand,
    OperatorSymbol,
    evaluate_command,
    parse_command,
    parse_operator,
)
from .session import (
    CalculatorConfig,
    CalculatorSession,
    LineResult,
)

__all__ = [
    "OPERATIONS",
    "CalculatorCommand",
    "OperatorSymbol",
    "evaluate_command",
    "parse_command",
    "parse_operator",
    "CalculatorConfig",
    "CalculatorSession",
    "LineResult",
]
