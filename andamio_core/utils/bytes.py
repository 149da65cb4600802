from __future__ import annotations

import re
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def ensure_bytes(data: BytesLike) -> bytes:
    """
    Ensure input is immutable bytes.

    Accepts bytes / bytearray / memoryview. Text is rejected: callers decide
    whether a string means UTF-8 or hex before it reaches the encoder.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Unsupported type for ensure_bytes: {type(data)!r}")


def to_hex(b: BytesLike, prefix: bool = False) -> str:
    """
    Bytes -> hex string (lowercase). Unprefixed by default, which is how
    Cardano tooling prints hashes, policy IDs and asset names.
    """
    s = bytes(b).hex()
    return f"0x{s}" if prefix else s


def from_hex(s: str) -> bytes:
    """
    Hex string (optionally '0x' prefixed) -> bytes.

    Enforces even length and is case agnostic.
    """
    if not isinstance(s, str):
        raise TypeError("from_hex expects a string")
    if s.startswith(("0x", "0X")):
        s = s[2:]
    if len(s) % 2 != 0:
        raise ValueError("hex string must have even length")
    try:
        return bytes.fromhex(s)
    except ValueError as e:
        raise ValueError(f"invalid hex string: {e}") from e


def is_hex(s: object, *, length: Optional[int] = None) -> bool:
    """True if *s* is a str of hex digits (any case), optionally of exact *length*."""
    if not isinstance(s, str):
        return False
    if length is not None and len(s) != length:
        return False
    return _HEX_RE.fullmatch(s) is not None


__all__ = ["BytesLike", "ensure_bytes", "to_hex", "from_hex", "is_hex"]
