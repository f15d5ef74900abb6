"""
Core math modules

Точные примитивы для денежных величин: без float, без зависимости
от глобального decimal-контекста.
"""

from src.core.math.exact_decimal import (
    MAX_AMOUNT_DIGITS,
    InvalidAmount,
    fraction_digits,
    pow10,
    scale_up,
    to_decimal,
    validate_non_negative_int,
    validate_scale,
)

__all__ = [
    # Constants
    "MAX_AMOUNT_DIGITS",
    # Exceptions
    "InvalidAmount",
    # Parsing
    "to_decimal",
    # Scaling
    "fraction_digits",
    "pow10",
    "scale_up",
    # Validation
    "validate_non_negative_int",
    "validate_scale",
]
