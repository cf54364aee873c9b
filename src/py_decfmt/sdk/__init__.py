"""Public SDK facade.

Typical use::

    from py_decfmt.sdk import format_amount

    format_amount("1.005")                        # '1.01'
    format_amount("0.0000328103")                 # '0.000033'
    format_amount("14.00458", decimal_point=",")  # '14,00'

Internal errors are re-raised as the public exceptions from
``py_decfmt.sdk.errors`` (original exception chained as ``__cause__``).
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from py_decfmt.application.dto.models import FormattedAmountDTO
from py_decfmt.application.use_cases.format_amount import FormatAmount, FormatAmounts

from .errors import UnexpectedError, UserInputError, map_exception
from .json import to_dict, to_json

__all__ = [
    "format_amount",
    "format_amounts",
    "describe_amount",
    "FormattedAmountDTO",
    "UserInputError",
    "UnexpectedError",
    "map_exception",
    "to_dict",
    "to_json",
]


def describe_amount(value: Any, *, decimal_point: str | None = None) -> FormattedAmountDTO:
    """Format ``value`` and return the full result (regime, digit count, text)."""
    try:
        return FormatAmount(decimal_point=decimal_point)(value)
    except Exception as exc:
        raise map_exception(exc) from exc


def format_amount(value: Any, *, decimal_point: str | None = None) -> str:
    """Format one amount and return the display string."""
    return describe_amount(value, decimal_point=decimal_point).text


def format_amounts(values: Iterable[Any], *, decimal_point: str | None = None) -> list[str]:
    """Format amounts in order; raises on the first invalid one."""
    try:
        results = FormatAmounts(decimal_point=decimal_point)(values)
    except Exception as exc:
        raise map_exception(exc) from exc
    return [r.text for r in results]
