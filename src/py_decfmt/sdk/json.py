"""JSON presenter for formatting results.

- to_dict(obj): convert DTOs and nested containers to JSON-safe forms.
  Decimal and DecimalValue become their exact string form; enums their value.
- to_json(data): json.dumps with ensure_ascii=False, compact separators, stable key order.
"""
from __future__ import annotations

import json as _json
from dataclasses import asdict, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from py_decfmt.domain.decimal_value import DecimalValue

__all__ = ["to_dict", "to_json"]


def _is_primitive(x: Any) -> bool:
    return isinstance(x, (str, int, bool)) or x is None


def to_dict(obj: Any) -> Any:
    """Convert input to a JSON-safe structure.

    - Decimal / DecimalValue -> str (exact digits, never float)
    - Enum -> value
    - dict/list/tuple -> recurse
    - dataclasses -> mapping via asdict
    """
    if isinstance(obj, Enum):
        return to_dict(obj.value)
    if _is_primitive(obj):
        return obj
    if isinstance(obj, (Decimal, DecimalValue)):
        return str(obj)
    if isinstance(obj, (list, tuple)):
        return [to_dict(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): to_dict(v) for k, v in obj.items()}
    if is_dataclass(obj) and not isinstance(obj, type):
        return {str(k): to_dict(v) for k, v in asdict(obj).items()}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(data: Any) -> str:
    """Dump input as deterministic JSON string using to_dict normalization."""
    return _json.dumps(to_dict(data), ensure_ascii=False, separators=(",", ":"), sort_keys=True)
