"""Exact decimal value object.

Public API:
- Sign: sign tag of a value (positive, negative, zero).
- DecimalValue: immutable (sign, digits, scale) triple built from a literal,
  a finite ``decimal.Decimal`` or an exact ``coefficient * 10**exponent`` pair.
- coerce: build a DecimalValue from any accepted input type.

Values never pass through a binary float. Digits are kept as produced by the
literal (trailing fractional zeros included); equality and hashing use the
normalized form, so ``"1.2300"`` and ``"1.23"`` are the same value.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from functools import reduce
from typing import Any

from .errors import InvalidLiteral, ValidationError

__all__ = ["Sign", "DecimalValue", "coerce"]

_LITERAL_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

# Digits per divmod step when splitting a Python int; keeps every str() conversion small.
_CHUNK_DIGITS = 18
_CHUNK = 10**_CHUNK_DIGITS


def _int_to_digit_text(n: int) -> str:
    """Decimal digits of a non-negative int, without the interpreter str() length limit."""
    if n < _CHUNK:
        return str(n)
    chunks: list[str] = []
    while n:
        n, chunk = divmod(n, _CHUNK)
        chunks.append(f"{chunk:0{_CHUNK_DIGITS}d}")
    return "".join(reversed(chunks)).lstrip("0")


class Sign(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"


@dataclass(frozen=True, slots=True, eq=False)
class DecimalValue:
    """Exact decimal number: ``(-1 if negative) * int(digits) * 10**-scale``.

    Notes:
    - `digits` holds the coefficient most-significant first with leading zeros
      stripped; zero is ``(0,)``.
    - `scale` counts digits after the decimal point and may exceed
      ``len(digits)``; the fraction is then left-padded with implicit zeros
      (``0.05`` is ``digits=(5,)``, ``scale=2``).
    - `sign` is ZERO exactly when the coefficient is zero.
    """

    sign: Sign
    digits: tuple[int, ...]
    scale: int = 0

    def __post_init__(self) -> None:
        if not self.digits:
            raise ValidationError("Decimal digits must not be empty")
        for d in self.digits:
            if not isinstance(d, int) or isinstance(d, bool) or not 0 <= d <= 9:
                raise ValidationError(f"Invalid decimal digit: {d!r}")
        if len(self.digits) > 1 and self.digits[0] == 0:
            raise ValidationError("Decimal digits must not carry leading zeros")
        if self.scale < 0:
            raise ValidationError("Scale must be non-negative")
        if (self.digits == (0,)) != (self.sign is Sign.ZERO):
            raise ValidationError(f"Sign {self.sign.value} does not match digits {self.digits}")

    # --- construction ---

    @classmethod
    def from_literal(cls, text: Any) -> DecimalValue:
        """Parse ``[-]digits['.' digits]`` (ASCII digits only, nothing else).

        Raises:
            InvalidLiteral: empty text, stray characters (whitespace included),
            several decimal points or a missing integer/fraction part.
        """
        if not isinstance(text, str):
            raise InvalidLiteral(text, "expected a string")
        if not text:
            raise InvalidLiteral(text, "empty literal")
        if text.count(".") > 1:
            raise InvalidLiteral(text, "more than one decimal point")
        if _LITERAL_RE.fullmatch(text) is None:
            raise InvalidLiteral(text, "expected [-]digits['.' digits]")
        negative = text.startswith("-")
        body = text[1:] if negative else text
        integer_part, _, fraction = body.partition(".")
        return cls._build(negative, integer_part + fraction, len(fraction))

    @classmethod
    def from_parts(cls, coefficient: int, exponent: int = 0) -> DecimalValue:
        """Build ``coefficient * 10**exponent`` from two exact integers."""
        for name, part in (("coefficient", coefficient), ("exponent", exponent)):
            if not isinstance(part, int) or isinstance(part, bool):
                raise InvalidLiteral(part, f"{name} must be an integer")
        digit_text = _int_to_digit_text(abs(coefficient))
        if exponent >= 0:
            return cls._build(coefficient < 0, digit_text + "0" * exponent, 0)
        return cls._build(coefficient < 0, digit_text, -exponent)

    @classmethod
    def from_decimal(cls, value: Decimal) -> DecimalValue:
        """Take the exact digits of a finite ``decimal.Decimal``."""
        if not isinstance(value, Decimal):
            raise InvalidLiteral(value, "expected a decimal.Decimal")
        if not value.is_finite():
            raise InvalidLiteral(value, "not a finite number")
        sign, digits, exponent = value.as_tuple()
        digit_text = "".join(str(d) for d in digits)
        exponent = int(exponent)
        if exponent >= 0:
            return cls._build(bool(sign), digit_text + "0" * exponent, 0)
        return cls._build(bool(sign), digit_text, -exponent)

    @classmethod
    def _build(cls, negative: bool, digit_text: str, scale: int) -> DecimalValue:
        significant = digit_text.lstrip("0") or "0"
        if significant == "0":
            sign = Sign.ZERO
        else:
            sign = Sign.NEGATIVE if negative else Sign.POSITIVE
        return cls(sign=sign, digits=tuple(int(ch) for ch in significant), scale=scale)

    # --- inspection ---

    @property
    def is_zero(self) -> bool:
        return self.sign is Sign.ZERO

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    @property
    def coefficient(self) -> int:
        """Magnitude as an integer count of ``10**-scale`` units."""
        return reduce(lambda acc, d: acc * 10 + d, self.digits, 0)

    @property
    def integer_digits(self) -> tuple[int, ...]:
        """Digits left of the decimal point; empty when the magnitude is below one."""
        count = len(self.digits) - self.scale
        return self.digits[:count] if count > 0 else ()

    def is_less_than_one(self) -> bool:
        """True iff ``|value| < 1``, decided from the integer-part digits only."""
        return self.integer_digits in ((), (0,))

    def fractional_digit_at(self, position: int) -> int:
        """Return the 1-indexed digit after the decimal point (implicit 0 past the scale)."""
        if position < 1:
            raise ValueError(f"Fractional position must be >= 1, got {position}")
        index = len(self.digits) - self.scale + position - 1
        if 0 <= index < len(self.digits):
            return self.digits[index]
        return 0

    def first_significant_fraction_position(self) -> int | None:
        """Position of the first non-zero fractional digit, or None when the fraction is all zeros."""
        for position in range(1, self.scale + 1):
            if self.fractional_digit_at(position) != 0:
                return position
        return None

    # --- conversions ---

    def normalized(self) -> DecimalValue:
        """Same value with trailing fractional zeros removed."""
        digits, scale = self.digits, self.scale
        trailing = 0
        while trailing < min(scale, len(digits) - 1) and digits[-1 - trailing] == 0:
            trailing += 1
        if trailing:
            digits, scale = digits[:-trailing], scale - trailing
        if digits == (0,):
            scale = 0
        return DecimalValue(sign=self.sign, digits=digits, scale=scale)

    def to_decimal(self) -> Decimal:
        """Exact ``decimal.Decimal`` built from the digit tuple (no context rounding)."""
        return Decimal((1 if self.is_negative else 0, self.digits, -self.scale))

    def __str__(self) -> str:
        text = "".join(str(d) for d in self.digits).rjust(self.scale + 1, "0")
        sign = "-" if self.is_negative else ""
        if self.scale == 0:
            return f"{sign}{text}"
        return f"{sign}{text[:-self.scale]}.{text[-self.scale:]}"

    def _key(self) -> tuple[Sign, tuple[int, ...], int]:
        n = self.normalized()
        return n.sign, n.digits, n.scale

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


def coerce(value: Any) -> DecimalValue:
    """Build a DecimalValue from a DecimalValue, str, int or finite Decimal.

    Binary floats are rejected: they cannot hold values like 1.005 exactly.
    """
    if isinstance(value, DecimalValue):
        return value
    if isinstance(value, bool):
        raise InvalidLiteral(value, "booleans are not numbers")
    if isinstance(value, float):
        raise InvalidLiteral(value, "binary floating-point values are not accepted; pass a string or Decimal")
    if isinstance(value, int):
        return DecimalValue.from_parts(value)
    if isinstance(value, Decimal):
        return DecimalValue.from_decimal(value)
    if isinstance(value, str):
        return DecimalValue.from_literal(value)
    raise InvalidLiteral(value, f"unsupported type {type(value).__name__}")
