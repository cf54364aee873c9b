from .separators import apply_decimal_point, validate_decimal_point

__all__ = ["apply_decimal_point", "validate_decimal_point"]
