"""
Текстовые контракты дроби

Грамматика текстовых форм Rational: смешанная, простая, целая.
"""

from .fraction_grammar import (
    FRACTION_SEPARATOR,
    MIXED_SEPARATOR,
    FractionForm,
    FractionTokens,
    tokenize_fraction,
)

__all__ = [
    # Constants
    "FRACTION_SEPARATOR",
    "MIXED_SEPARATOR",
    # Types
    "FractionForm",
    "FractionTokens",
    # Functions
    "tokenize_fraction",
]
