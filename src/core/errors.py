"""
Ошибки рациональной арифметики

Типизированная иерархия исключений ядра. Ни одна операция не возвращает
частично построенное значение: при любой ошибке бросается исключение.

Иерархия:
    FractionError
    ├── ParseError      — текст не соответствует ни одной грамматике
    ├── InvalidValue    — синтаксически корректное, но недопустимое значение
    └── DivisionByZero  — деление на нулевой делитель

InvalidValue намеренно не наследует ValueError: pydantic оборачивает
ValueError из валидаторов в ValidationError, а InvalidValue должен дойти
до вызывающего кода как есть.
"""


class FractionError(Exception):
    """Базовая ошибка всех операций над Rational."""


class ParseError(FractionError):
    """
    Текст не распознан как дробь.

    Примеры: пустая строка, неверные разделители, лишние символы.
    """


class InvalidValue(FractionError):
    """
    Значение дроби недопустимо.

    Примеры: знаменатель <= 0, отрицательный числитель в смешанной форме,
    делитель модуля не является положительным целым, NaN/Inf.
    """


class DivisionByZero(FractionError, ZeroDivisionError):
    """Деление на ноль."""
