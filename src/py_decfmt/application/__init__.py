"""Application layer: use cases orchestrating domain formatting and presentation."""

from . import dto, use_cases  # noqa: F401

__all__ = ["dto", "use_cases"]
