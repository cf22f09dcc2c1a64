"""JSON literal encoding for field names and comparison values."""

import json
import math
import re
from typing import Any, Optional

from .exceptions import EncodingError
from .settings import settings

__all__ = ("quote_field", "encode_value")

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")

# Integral floats below this magnitude render without a fraction or exponent
_MAX_PLAIN_FLOAT = 1e21


def _normalize_number(value: Any) -> Any:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
        return int(value)
    return value


def _normalize(value: Any) -> Any:
    # Only the value itself and the items of a top-level sequence are touched
    if isinstance(value, (list, tuple)):
        return [_normalize_number(item) for item in value]
    return _normalize_number(value)


def _dumps(value: Any, field: Optional[str] = None) -> str:
    try:
        encoded = json.dumps(
            _normalize(value),
            ensure_ascii=settings.QURI_ENSURE_ASCII,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as exc:
        details = {"value_type": type(value).__name__}
        if field is not None:
            details["field"] = field
        raise EncodingError(f"Value cannot be encoded as a JSON literal: {exc}", **details) from exc
    # Surrogates only occur inside string literals and cannot be UTF-8 encoded raw
    return _LONE_SURROGATE.sub(lambda match: f"\\u{ord(match.group()):04x}", encoded)


def quote_field(name: str) -> str:
    """Render a field name as a double-quoted JSON string literal."""
    if not isinstance(name, str):
        raise EncodingError("Field name must be a string", value_type=type(name).__name__)
    return _dumps(name)


def encode_value(value: Any, field: Optional[str] = None) -> str:
    """Encode a comparison value as a compact JSON literal.

    Lists and tuples render as their JSON array without the surrounding
    brackets, so ``[1, 2, 3]`` becomes ``1,2,3`` and ``[]`` becomes an empty
    string. Everything else renders as-is: ``"Greg%"``, ``21``, ``true``,
    ``null``. Whole-number floats render as integers (``1.0`` -> ``1``).

    Args:
        value: Scalar or sequence of scalars
        field: Field name, only used to enrich error details

    Raises:
        EncodingError: If the value is not JSON serializable (unsupported
            type, circular container, NaN or infinity)
    """
    encoded = _dumps(value, field)
    if isinstance(value, (list, tuple)):
        # Strip the outer [ ] from the array literal
        return encoded[1:-1]
    return encoded
