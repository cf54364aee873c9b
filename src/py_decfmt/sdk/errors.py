"""SDK public error classes and exception mapping.

Public exceptions:
- UserInputError: invalid user input (malformed literal, bad separator)
- UnexpectedError: any other error not classified above

map_exception(exc) keeps the original message and returns an instance of the
public exception type best matching the input.
"""
from __future__ import annotations

from py_decfmt.domain.errors import ValidationError

__all__ = [
    "UserInputError",
    "UnexpectedError",
    "map_exception",
]


class UserInputError(Exception):
    """Raised when user input is invalid or cannot be parsed.

    Keep messages concise; callers may present them directly to users.
    """


class UnexpectedError(Exception):
    """Raised when an unexpected error occurs inside the SDK."""


def map_exception(exc: Exception) -> Exception:
    """Map internal exceptions to public SDK exceptions.

    Rules:
    - ValidationError (InvalidLiteral included) -> UserInputError
    - ValueError -> UserInputError
    - any other (a bare DomainError included) -> UnexpectedError
    """
    msg = str(exc)
    if isinstance(exc, ValidationError):
        return UserInputError(msg)
    if isinstance(exc, ValueError):
        return UserInputError(msg)
    return UnexpectedError(msg)
