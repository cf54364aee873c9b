"""Domain error hierarchy.

DomainError is the root for every failure raised by the domain layer.
ValidationError marks invalid input; InvalidLiteral is the specific failure of
turning text into an exact decimal value.
"""

from __future__ import annotations

from typing import Any

__all__ = ["DomainError", "ValidationError", "InvalidLiteral"]


class DomainError(Exception):
    """Base class for domain failures."""


class ValidationError(DomainError):
    """Raised when an input value does not satisfy domain rules."""


class InvalidLiteral(ValidationError):
    """Raised when text is not a well-formed decimal literal.

    The offending input is kept on ``literal`` so callers can report it.
    """

    def __init__(self, literal: Any, reason: str = "malformed decimal literal") -> None:
        self.literal = literal
        self.reason = reason
        super().__init__(f"Invalid decimal literal {literal!r}: {reason}")
