"""Command-line entry point: fraction-calc."""

import argparse
import logging
import sys
from typing import Final

from src.calculator.session import (
    DEFAULT_EXIT_COMMAND,
    DEFAULT_PROMPT,
    CalculatorConfig,
    CalculatorSession,
)

LOG_LEVELS: Final[list[str]] = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fraction-calc",
        description=(
            "Exact fraction calculator. Enter '<left> <op> <right>', e.g. '1/2 + 3/4' "
            "or '2&3/4 % 2'. Operators: * / + - %."
        ),
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        metavar="EXPR",
        help="Evaluate EXPR and exit (repeatable). Without it an interactive session starts.",
    )
    parser.add_argument(
        "--simple",
        action="store_true",
        help="Print improper fractions in simple form (11/4) instead of mixed form (2&3/4).",
    )
    parser.add_argument(
        "--prompt",
        default=DEFAULT_PROMPT,
        help=f"Interactive prompt (default: {DEFAULT_PROMPT!r}).",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level for stderr diagnostics (default: WARNING).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    session = CalculatorSession(
        CalculatorConfig(
            prompt=args.prompt,
            exit_command=DEFAULT_EXIT_COMMAND,
            as_mixed=not args.simple,
        )
    )

    if args.command:
        status = 0
        for expression in args.command:
            result = session.process_line(expression)
            print(result.output)
            if not result.ok:
                status = 1
        return status

    session.run(sys.stdin, sys.stdout)
    return 0
