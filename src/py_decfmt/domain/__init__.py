from .decimal_value import DecimalValue, Sign, coerce
from .errors import DomainError, InvalidLiteral, ValidationError
from .formatter import (
    DECIMAL_POINT,
    FIXED_FRACTION_DIGITS,
    Precision,
    PrecisionRegime,
    format_value,
    round_half_up,
    select_precision,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidLiteral",
    "Sign",
    "DecimalValue",
    "coerce",
    "DECIMAL_POINT",
    "FIXED_FRACTION_DIGITS",
    "PrecisionRegime",
    "Precision",
    "select_precision",
    "round_half_up",
    "format_value",
]
