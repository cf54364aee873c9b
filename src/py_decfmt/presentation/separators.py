"""Decimal-point substitution applied after formatting.

Formatting always emits '.'; locales that write a comma (or anything else)
swap it here. Digits are never touched, so rounding stays locale independent.
"""
from __future__ import annotations

from py_decfmt.domain.errors import ValidationError
from py_decfmt.domain.formatter import DECIMAL_POINT

__all__ = ["validate_decimal_point", "apply_decimal_point"]


def validate_decimal_point(decimal_point: str) -> str:
    """Return ``decimal_point`` if it is one character, not a digit and not '-'."""
    if not isinstance(decimal_point, str) or len(decimal_point) != 1:
        raise ValidationError(f"Decimal point must be a single character: {decimal_point!r}")
    if decimal_point.isdigit() or decimal_point == "-":
        raise ValidationError(f"Decimal point cannot be a digit or '-': {decimal_point!r}")
    return decimal_point


def apply_decimal_point(text: str, decimal_point: str = DECIMAL_POINT) -> str:
    """Replace the single '.' of a formatted amount with ``decimal_point``."""
    validate_decimal_point(decimal_point)
    if decimal_point == DECIMAL_POINT:
        return text
    return text.replace(DECIMAL_POINT, decimal_point, 1)
