"""Calculator session — интерактивный цикл "? <команда>" -> "= <результат>".

Каждая строка обрабатывается независимо: ошибка одной команды печатается
как "!!! <сообщение> !!!" и не прерывает цикл. Цикл завершается по EOF или
по строке, в точности равной exit-команде.
"""

import logging
from dataclasses import dataclass
from typing import Final, TextIO

from src.calculator.operations import evaluate_command, parse_command
from src.core.errors import FractionError

logger = logging.getLogger(__name__)

DEFAULT_PROMPT: Final[str] = "? "
DEFAULT_EXIT_COMMAND: Final[str] = "exit"
RESULT_PREFIX: Final[str] = "= "
ERROR_TEMPLATE: Final[str] = "!!! {message} !!!"


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация сессии калькулятора.

    - prompt: приглашение перед каждой строкой ввода
    - exit_command: строка, завершающая сессию
    - as_mixed: печатать неправильные дроби в смешанной форме ("1&1/4")
    """
    prompt: str = DEFAULT_PROMPT
    exit_command: str = DEFAULT_EXIT_COMMAND
    as_mixed: bool = True


@dataclass(frozen=True)
class LineResult:
    """Результат обработки одной строки."""

    output: str
    ok: bool


class CalculatorSession:
    """Сессия калькулятора дробей.

    Не хранит состояния между строками: каждая команда вычисляется
    независимо от предыдущих.
    """

    def __init__(self, config: CalculatorConfig | None = None):
        self.config = config or CalculatorConfig()

    def process_line(self, line: str) -> LineResult:
        """Разбор и вычисление одной команды.

        Перехватываются только ошибки ядра (FractionError).
        """
        try:
            command = parse_command(line)
            result = evaluate_command(command)
            text = result.format(as_mixed=self.config.as_mixed)
        except FractionError as exc:
            logger.debug("Rejected %r: %s: %s", line, type(exc).__name__, exc)
            return LineResult(output=ERROR_TEMPLATE.format(message=exc), ok=False)

        logger.debug("Evaluated %r = %s", line, text)
        return LineResult(output=RESULT_PREFIX + text, ok=True)

    def evaluate_line(self, line: str) -> str:
        """Строка ответа: "= <результат>" или "!!! <ошибка> !!!"."""
        return self.process_line(line).output

    def run(self, input_stream: TextIO, output_stream: TextIO) -> int:
        """Интерактивный цикл.

        Args:
            input_stream: источник строк команд
            output_stream: вывод приглашений и ответов

        Returns:
            Количество обработанных команд (без exit)
        """
        logger.info("Calculator session started")
        processed = 0

        while True:
            output_stream.write(self.config.prompt)
            output_stream.flush()

            raw = input_stream.readline()
            if not raw:
                # EOF
                output_stream.write("\n")
                break

            line = raw.rstrip("\r\n")
            if line == self.config.exit_command:
                break

            output_stream.write(self.evaluate_line(line) + "\n\n")
            processed += 1

        logger.info("Calculator session finished after %d command(s)", processed)
        return processed
