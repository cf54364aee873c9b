"""Two-regime display formatting for exact decimal values.

Precision is picked once per call from the magnitude:
- zero: ``"0.00"``;
- ``|v| >= 1``: exactly two fractional digits;
- ``0 < |v| < 1``: two significant digits, i.e. ``k + 1`` fractional digits where
  ``k`` is the position of the first non-zero fractional digit.

Rounding is half-up on the magnitude and works on the digit tuple directly, so
values of any length format without converting to an integer. The decimal point is always ``'.'``; separator substitution belongs
to the presentation layer.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .decimal_value import DecimalValue

__all__ = [
    "DECIMAL_POINT",
    "FIXED_FRACTION_DIGITS",
    "PrecisionRegime",
    "Precision",
    "select_precision",
    "round_half_up",
    "format_value",
]

DECIMAL_POINT: Final[str] = "."
FIXED_FRACTION_DIGITS: Final[int] = 2
# Count of significant digits kept below one.
SIGNIFICANT_DIGITS: Final[int] = 2


class PrecisionRegime(str, Enum):
    ZERO = "zero"
    WHOLE = "whole"
    FRACTIONAL = "fractional"


@dataclass(frozen=True, slots=True)
class Precision:
    """Selected branch together with the number of fractional digits to render."""

    regime: PrecisionRegime
    fraction_digits: int


def select_precision(value: DecimalValue) -> Precision:
    """Choose the rounding precision for ``value``.

    A sub-1 value whose fraction holds no non-zero digit falls back to the zero
    output.
    """
    if value.is_zero:
        return Precision(PrecisionRegime.ZERO, FIXED_FRACTION_DIGITS)
    if not value.is_less_than_one():
        return Precision(PrecisionRegime.WHOLE, FIXED_FRACTION_DIGITS)
    k = value.first_significant_fraction_position()
    if k is None:
        return Precision(PrecisionRegime.ZERO, FIXED_FRACTION_DIGITS)
    return Precision(PrecisionRegime.FRACTIONAL, k + SIGNIFICANT_DIGITS - 1)


def round_half_up(value: DecimalValue, fraction_digits: int) -> tuple[int, ...]:
    """Round ``|value|`` half-up to ``fraction_digits`` places.

    Returns the digits of the rounded magnitude counted in ``10**-fraction_digits``
    units, most significant first, without leading zeros (zero is ``(0,)``).
    Only the guard digit (first dropped position) decides the direction; a
    carry ripples left through trailing nines and may add a leading ``1``
    (``9.995`` at two places gives ``(1, 0, 0, 0)``).

    Examples:
        >>> round_half_up(DecimalValue.from_literal("1.005"), 2)
        (1, 0, 1)
        >>> round_half_up(DecimalValue.from_literal("1.5"), 3)
        (1, 5, 0, 0)
    """
    if fraction_digits < 0:
        raise ValueError(f"fraction_digits must be >= 0, got {fraction_digits}")
    kept = list(value.integer_digits)
    kept.extend(value.fractional_digit_at(p) for p in range(1, fraction_digits + 1))
    if value.fractional_digit_at(fraction_digits + 1) >= 5:
        i = len(kept) - 1
        while i >= 0 and kept[i] == 9:
            kept[i] = 0
            i -= 1
        if i < 0:
            kept.insert(0, 1)
        else:
            kept[i] += 1
    first = next((i for i, d in enumerate(kept) if d), len(kept))
    return tuple(kept[first:]) or (0,)


def _render(units: tuple[int, ...], fraction_digits: int, negative: bool) -> str:
    text = "".join(str(d) for d in units).rjust(fraction_digits + 1, "0")
    sign = "-" if negative else ""
    return f"{sign}{text[:-fraction_digits]}{DECIMAL_POINT}{text[-fraction_digits:]}"


def format_value(value: DecimalValue) -> str:
    """Render ``value`` as ``integer '.' fraction`` under the two-regime policy.

    Negative values follow the magnitude rule with a leading ``-``; zero is
    never signed. When rounding a sub-1 value carries into a third significant
    digit (``0.0995 -> 0.100``) the trailing zero is dropped so the output keeps
    two significant digits and formats to itself again.
    """
    precision = select_precision(value)
    if precision.regime is PrecisionRegime.ZERO:
        return _render((0,), precision.fraction_digits, negative=False)

    fraction_digits = precision.fraction_digits
    units = round_half_up(value, fraction_digits)
    if (
        precision.regime is PrecisionRegime.FRACTIONAL
        and len(units) > SIGNIFICANT_DIGITS
        and fraction_digits > FIXED_FRACTION_DIGITS
    ):
        units = units[:-1]
        fraction_digits -= 1
    return _render(units, fraction_digits, value.is_negative)
