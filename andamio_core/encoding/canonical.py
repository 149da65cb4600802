from __future__ import annotations

"""
Canonical evidence form
=======================

Deterministic normalization + JSON rendering for commitment evidence
(Tiptap documents or any JSON-like tree). Two documents that differ only in
key order or in whitespace around string values must hash identically, and
the rendered text must match what the web client produces with
`JSON.stringify(normalizeForHashing(doc))`.

Normalization rules (recursive):
- None / UNDEFINED            -> None
- str                          -> stripped of leading/trailing whitespace
                                  (the JavaScript trim() set)
- bool / int / float           -> unchanged
- list / tuple                 -> element-wise, order preserved, as list
- mapping                      -> keys as str, sorted by code point;
                                  UNDEFINED values dropped, None kept
- anything else                -> returned unchanged

Rendering rules:
- compact separators, UTF-8 (no ASCII escaping); strings escaped by json
- floats follow Number#toString: shortest round-trip digits, plain notation
  for 1e-6 <= |x| < 1e21 (so 1.0 -> 1), otherwise `1e-7` / `1e+21` style;
  NaN and infinities render as null
- ints render exactly

Public helpers:
- UNDEFINED
- normalize_for_hashing(value) -> object
- canonical_json(value) -> str
- canonical_bytes(value) -> bytes
"""

import json
import math
from decimal import Decimal
from collections.abc import Mapping
from typing import Any, Dict, List, Union

from ..errors import SerializationError

# ---------------------------
# Absent-value sentinel
# ---------------------------


class _Undefined:
    """Marker for a field that is present as a key but carries no value."""

    __slots__ = ()
    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()

JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

# Number#toString writes up to 21 integer digits before switching to exponent form.
_JS_MAX_FIXED_DIGITS = 21

# String.prototype.trim(): WhiteSpace + LineTerminator. Differs from
# str.isspace() around U+FEFF, U+001C..U+001F and U+0085.
_TRIM_CHARS = (
    "\u0009\u000a\u000b\u000c\u000d\u0020\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


# ---------------------------
# Normalization
# ---------------------------


def normalize_for_hashing(value: Any) -> Any:
    """
    Return the canonical form of *value*. Total: never raises.
    """
    if value is None or value is UNDEFINED:
        return None

    if isinstance(value, str):
        return value.strip(_TRIM_CHARS)

    if isinstance(value, (bool, int, float)):
        return value

    if isinstance(value, (list, tuple)):
        return [normalize_for_hashing(v) for v in value]

    if isinstance(value, Mapping):
        items = [(str(k), v) for k, v in value.items()]
        items.sort(key=lambda kv: kv[0])
        out: Dict[str, Any] = {}
        for k, v in items:
            if v is UNDEFINED:
                continue
            out[k] = normalize_for_hashing(v)
        return out

    return value


# ---------------------------
# Rendering
# ---------------------------


def _js_number(value: float) -> str:
    """
    Format a float the way JavaScript's Number#toString does.

    Python's repr and JavaScript both pick the shortest digit string that
    round-trips; only the placement of the decimal point and the exponent
    notation differ.
    """
    if not math.isfinite(value):
        return "null"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exp = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    n = exp + k  # decimal point position relative to the first digit

    if k <= n <= _JS_MAX_FIXED_DIGITS:
        out = digits + "0" * (n - k)
    elif 0 < n <= _JS_MAX_FIXED_DIGITS:
        out = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        out = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        out = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + out


def _render(value: Any) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, float):
        return _js_number(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, list):
        return "[" + ",".join(_render(v) for v in value) + "]"
    if isinstance(value, dict):
        return "{" + ",".join(
            f"{json.dumps(k, ensure_ascii=False)}:{_render(v)}" for k, v in value.items()
        ) + "}"
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def canonical_json(value: Any) -> str:
    """
    Normalize *value* and render it as compact JSON text.

    Key order is fixed by normalization, so the output is byte-identical for
    equal documents. Raises SerializationError for values JSON cannot hold.
    """
    normalized = normalize_for_hashing(value)
    try:
        return _render(normalized)
    except TypeError as e:
        raise SerializationError(
            f"evidence is not JSON-serializable: {e}",
            value_type=type(value).__name__,
        ) from e


def canonical_bytes(value: Any) -> bytes:
    """UTF-8 bytes of :func:`canonical_json`."""
    return canonical_json(value).encode("utf-8")


__all__ = [
    "UNDEFINED",
    "JsonValue",
    "normalize_for_hashing",
    "canonical_json",
    "canonical_bytes",
]
