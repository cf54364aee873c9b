from __future__ import annotations

from dataclasses import dataclass

__all__ = ["FormattedAmountDTO"]


@dataclass(slots=True)
class FormattedAmountDTO:
    """Result of formatting one amount.

    literal: canonical text of the exact input value (trailing zeros kept).
    regime: precision branch taken ("zero", "whole" or "fractional").
    fraction_digits: digits after the separator in ``text``.
    text: display string, decimal point already substituted.
    """

    literal: str
    regime: str
    fraction_digits: int
    text: str
