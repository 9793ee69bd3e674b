"""
Domain models and value objects.

Contains the Rational value type and the typed errors raised by its operations.
"""

from src.core.errors import (
    DivisionByZero,
    FractionError,
    InvalidValue,
    ParseError,
)
from src.core.domain.rational import Rational, parse_fraction, reduce_fraction

__all__ = [
    # Errors
    "FractionError",
    "ParseError",
    "InvalidValue",
    "DivisionByZero",
    # Rational
    "Rational",
    "parse_fraction",
    "reduce_fraction",
]
