"""
Shared verification helpers for every hash pipeline.

A hash is 64 hex characters (Blake2b-256). Inputs are compared
case-insensitively; everything we emit is lowercase. A badly formatted
expected hash is a normal negative outcome, never an exception.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from ..utils.bytes import is_hex
from ..utils.hash import HEX_DIGEST_LENGTH

MSG_MATCH = "Evidence matches on-chain commitment"
MSG_MISMATCH = "Evidence does not match on-chain commitment - content may have been modified"


def is_valid_hash_format(value: object) -> bool:
    """True for a str of exactly 64 hex characters, any case."""
    return is_hex(value, length=HEX_DIGEST_LENGTH)


def hashes_equal(computed: str, expected: object) -> bool:
    """Case-insensitive comparison; a non-str expected value never matches."""
    if not isinstance(expected, str):
        return False
    return computed.lower() == expected.lower()


def format_invalid_message(value: object) -> str:
    return (
        f"Invalid on-chain hash format: expected {HEX_DIGEST_LENGTH} hex characters, "
        f'got "{value}"'
    )


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of comparing content against an on-chain hash."""

    valid: bool
    computed_hash: str
    expected_hash: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "MSG_MATCH",
    "MSG_MISMATCH",
    "VerificationResult",
    "is_valid_hash_format",
    "hashes_equal",
    "format_invalid_message",
]
