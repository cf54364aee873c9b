"""Top-level package for py_decfmt.

Exact decimal display formatting: two decimals for magnitudes of one and
above, two significant digits below one, half-up rounding on exact digits.

Example:
    >>> from py_decfmt import DecimalValue, format_value
    >>> format_value(DecimalValue.from_literal("0.000032333"))
    '0.000032'
"""

from __future__ import annotations

__version__ = "1.0.0"

from .domain import (  # noqa: E402
    DecimalValue,
    DomainError,
    InvalidLiteral,
    ValidationError,
    format_value,
)

__all__ = [
    "__version__",
    "DecimalValue",
    "DomainError",
    "ValidationError",
    "InvalidLiteral",
    "format_value",
]
