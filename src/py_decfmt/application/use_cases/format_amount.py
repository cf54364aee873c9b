from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from py_decfmt.application.dto.models import FormattedAmountDTO
from py_decfmt.domain.decimal_value import coerce
from py_decfmt.domain.errors import InvalidLiteral
from py_decfmt.domain.formatter import DECIMAL_POINT, format_value, select_precision
from py_decfmt.infrastructure.config.settings import get_settings
from py_decfmt.infrastructure.logging.config import get_logger
from py_decfmt.presentation.separators import apply_decimal_point, validate_decimal_point

__all__ = ["FormatAmount", "FormatAmounts"]


@dataclass(slots=True)
class FormatAmount:
    """Format one amount for display.

    Steps:
    - Coerce the input (str/int/Decimal/DecimalValue) into an exact DecimalValue.
    - Format it with the two-regime policy (always '.' as decimal point).
    - Substitute the decimal point: explicit ``decimal_point`` or DECIMAL_POINT setting.

    InvalidLiteral is logged and re-raised; no fallback text is ever produced.
    """

    decimal_point: str | None = None

    def _separator(self) -> str:
        if self.decimal_point is not None:
            return validate_decimal_point(self.decimal_point)
        return get_settings().decimal_point

    def __call__(self, value: Any) -> FormattedAmountDTO:
        log = get_logger("py_decfmt.format")
        separator = self._separator()
        try:
            exact = coerce(value)
        except InvalidLiteral as exc:
            log.warning("invalid_literal", literal=repr(exc.literal), reason=exc.reason)
            raise
        precision = select_precision(exact)
        formatted = format_value(exact)
        fraction = formatted.rpartition(DECIMAL_POINT)[2]
        dto = FormattedAmountDTO(
            literal=str(exact),
            regime=precision.regime.value,
            fraction_digits=len(fraction),
            text=apply_decimal_point(formatted, separator),
        )
        log.debug(
            "amount_formatted",
            literal=dto.literal,
            regime=dto.regime,
            fraction_digits=dto.fraction_digits,
            text=dto.text,
        )
        return dto


@dataclass(slots=True)
class FormatAmounts:
    """Format several amounts in order; the first invalid one aborts the batch."""

    decimal_point: str | None = None

    def __call__(self, values: Iterable[Any]) -> list[FormattedAmountDTO]:
        single = FormatAmount(decimal_point=self.decimal_point)
        return [single(v) for v in values]
