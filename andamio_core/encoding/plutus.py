from __future__ import annotations

"""
Plutus-compatible CBOR encoder
------------------------------

Byte-exact reproduction of the subset of CBOR that a Plutus validator emits
from `serialiseData . toBuiltinData`. Off-chain hashes are only useful if they
are computed over *exactly* the bytes the chain hashes, so every framing rule
below mirrors the on-chain encoder rather than RFC 8949's preferred form:

- Byte strings: definite length up to 64 bytes; longer payloads are split
  into 64-byte chunks inside an indefinite byte string (0x5f ... 0xff).
  This is what `stringToBuiltinByteString` produces for every text field.
- Integers: minimal-width major type 0/1 within 64 bits; beyond that, bignum
  tags 2/3 wrapping the chunked magnitude bytes.
- Lists: indefinite arrays (0x9f ... 0xff), except the empty list which is
  the definite zero-length array 0x80.
- Constructors: tag 121 (0xd8 0x79, alternative 0) over an indefinite array
  of fields.

Not supported: maps, text strings, floats, simple values and
constructor alternatives other than 0. None of these occur in the datums we
hash.

Public API:
- encode_byte_string(data) -> bytes
- encode_chunked_byte_string(data) -> bytes
- encode_string(text) -> bytes
- encode_integer(n) -> bytes
- encode_indefinite_array(items) -> bytes
- encode_definite_array(items) -> bytes
- encode_constructor(fields) -> bytes
- decode_for_inspection(data) -> object     (diagnostics only, via cbor2)
"""

from typing import Any, Iterable, List

import cbor2

from ..errors import EncodingTooLarge
from ..utils.bytes import BytesLike, ensure_bytes

# ------------------------
# Constants
# ------------------------

# Plutus chunks byte strings at 64 bytes.
PLUTUS_CHUNK_SIZE = 64

# Widest definite byte-string header we emit is 0x59 (two length bytes).
MAX_BYTE_STRING_LENGTH = 0xFFFF

_UINT64_MAX = 0xFFFFFFFFFFFFFFFF

_MT_UINT = 0
_MT_NINT = 1
_MT_BYTES = 2
_MT_ARRAY = 4
_MT_TAG = 6

_TAG_POS_BIGNUM = 2
_TAG_NEG_BIGNUM = 3

CONSTR_0_TAG = b"\xd8\x79"  # tag 121 = Constr 0
INDEFINITE_BYTES_START = b"\x5f"
INDEFINITE_ARRAY_START = b"\x9f"
BREAK = b"\xff"
EMPTY_ARRAY = b"\x80"

# ------------------------
# Low-level encode helpers
# ------------------------


def _ai_bytes(major: int, n: int) -> bytes:
    """Encode initial byte + additional-info for a non-negative integer length/value."""
    assert 0 <= major <= 7
    if n < 24:
        return bytes([(major << 5) | n])
    elif n <= 0xFF:
        return bytes([(major << 5) | 24, n])
    elif n <= 0xFFFF:
        return bytes([(major << 5) | 25]) + n.to_bytes(2, "big")
    elif n <= 0xFFFFFFFF:
        return bytes([(major << 5) | 26]) + n.to_bytes(4, "big")
    elif n <= _UINT64_MAX:
        return bytes([(major << 5) | 27]) + n.to_bytes(8, "big")
    else:
        # Callers route >64-bit values through bignum tags.
        raise OverflowError("Length/value too large for additional-info field")


def _magnitude_bytes(n: int) -> bytes:
    """Magnitude to minimal big-endian bytes without leading zeros."""
    assert n >= 0
    length = max(1, (n.bit_length() + 7) // 8)
    return n.to_bytes(length, "big")


# ------------------------
# Leaf encoders
# ------------------------


def encode_byte_string(data: BytesLike) -> bytes:
    """
    Encode *data* as a definite-length CBOR byte string (major type 2).

    Raises EncodingTooLarge above 65535 bytes; no caller hashes a single
    unchunked byte string that long.
    """
    b = ensure_bytes(data)
    n = len(b)
    if n > MAX_BYTE_STRING_LENGTH:
        raise EncodingTooLarge(n, MAX_BYTE_STRING_LENGTH)
    return _ai_bytes(_MT_BYTES, n) + b


def encode_chunked_byte_string(data: BytesLike) -> bytes:
    """
    Encode *data* the way Plutus serialises a BuiltinByteString.

    - <= 64 bytes: a regular definite byte string
    - >  64 bytes: 0x5f, one definite byte string per 64-byte slice, 0xff
    """
    b = ensure_bytes(data)
    if len(b) <= PLUTUS_CHUNK_SIZE:
        return encode_byte_string(b)

    out = bytearray(INDEFINITE_BYTES_START)
    for i in range(0, len(b), PLUTUS_CHUNK_SIZE):
        out += encode_byte_string(b[i : i + PLUTUS_CHUNK_SIZE])
    out += BREAK
    return bytes(out)


def encode_string(text: str) -> bytes:
    """UTF-8 encode *text* and frame it as a chunked byte string."""
    if not isinstance(text, str):
        raise TypeError(f"encode_string expects str, got {type(text).__name__}")
    return encode_chunked_byte_string(text.encode("utf-8"))


def encode_integer(n: int) -> bytes:
    """
    Encode a Plutus Integer.

    Within 64 bits this is the minimal-width CBOR integer; negative values
    carry -1 - n under major type 1. Larger magnitudes become bignums
    (tag 2 / tag 3) over the chunked big-endian magnitude.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"encode_integer expects int, got {type(n).__name__}")
    if n >= 0:
        if n <= _UINT64_MAX:
            return _ai_bytes(_MT_UINT, n)
        return _ai_bytes(_MT_TAG, _TAG_POS_BIGNUM) + encode_chunked_byte_string(
            _magnitude_bytes(n)
        )
    m = -1 - n
    if m <= _UINT64_MAX:
        return _ai_bytes(_MT_NINT, m)
    return _ai_bytes(_MT_TAG, _TAG_NEG_BIGNUM) + encode_chunked_byte_string(
        _magnitude_bytes(m)
    )


# ------------------------
# Composite encoders
# ------------------------


def _collect(items: Iterable[BytesLike]) -> List[bytes]:
    return [ensure_bytes(x) for x in items]


def encode_indefinite_array(items: Iterable[BytesLike]) -> bytes:
    """
    Wrap already-encoded *items* in an indefinite array.

    The empty list is the exception: Plutus writes it as the definite
    zero-length array 0x80, never as 0x9f 0xff.
    """
    parts = _collect(items)
    if not parts:
        return EMPTY_ARRAY
    return INDEFINITE_ARRAY_START + b"".join(parts) + BREAK


def encode_definite_array(items: Iterable[BytesLike]) -> bytes:
    """Definite-length array of already-encoded *items* (e.g. 0x82 for pairs)."""
    parts = _collect(items)
    return _ai_bytes(_MT_ARRAY, len(parts)) + b"".join(parts)


def encode_constructor(fields: Iterable[BytesLike]) -> bytes:
    """`Constr 0 fields`: tag 121 followed by the indefinite array of *fields*."""
    return CONSTR_0_TAG + encode_indefinite_array(fields)


# ------------------------
# Diagnostics
# ------------------------


def _as_lists(obj: Any) -> Any:
    # cbor2 >= 6 decodes arrays inside tags as tuples
    if isinstance(obj, (list, tuple)):
        return [_as_lists(x) for x in obj]
    if isinstance(obj, cbor2.CBORTag):
        return cbor2.CBORTag(obj.tag, _as_lists(obj.value))
    return obj


def decode_for_inspection(data: BytesLike) -> Any:
    """
    Decode Plutus-encoded bytes into Python values for side-by-side
    comparison with chain-observed datums. Constructors come back as
    `cbor2.CBORTag(121, [...])`, arrays as lists (whatever the cbor2
    version) and chunked byte strings are joined.

    This is a debugging aid only; no hash depends on it.
    """
    return _as_lists(cbor2.loads(ensure_bytes(data)))


__all__ = [
    "PLUTUS_CHUNK_SIZE",
    "MAX_BYTE_STRING_LENGTH",
    "CONSTR_0_TAG",
    "EMPTY_ARRAY",
    "encode_byte_string",
    "encode_chunked_byte_string",
    "encode_string",
    "encode_integer",
    "encode_indefinite_array",
    "encode_definite_array",
    "encode_constructor",
    "decode_for_inspection",
]
