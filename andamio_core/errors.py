"""
andamio_core.errors
-------------------

A small, consistent error system for the hashing toolkit.

Design goals
------------
- One root `AndamioError` with machine-friendly `code` and optional `data`.
- Concrete subclasses for the few failure modes the toolkit has (encoding,
  serialization, configuration).
- Safe JSON representation (`to_dict`) suitable for logs and CLI output.

Hash *format* problems and hash *mismatches* are deliberately absent: those
are ordinary `False` / `VerificationResult` outcomes, never exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping

__all__ = [
    "ErrorCode",
    "AndamioError",
    "EncodingTooLarge",
    "SerializationError",
    "ConfigError",
]


class ErrorCode(str, Enum):
    ENCODING_TOO_LARGE = "ANDAMIO/ENCODING_TOO_LARGE"
    SERIALIZATION = "ANDAMIO/SERIALIZATION"
    CONFIG = "ANDAMIO/CONFIG"


@dataclass(eq=False)
class AndamioError(Exception):
    """
    Root error for andamio_core.

    Attributes
    ----------
    code: str
        Machine-stable error code (see ErrorCode).
    message: str
        Human hint suitable for logs.
    data: dict
        Optional machine data (lengths, names). Must be JSON-serializable.
    retryable: bool
        Whether the operation may succeed on retry without changing inputs.
        Every operation here is a pure function, so this is False throughout.
    """

    code: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    retryable: bool = False

    def __post_init__(self) -> None:
        super().__init__(f"{self.code}: {self.message}")

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe shape suitable for logs/CLI output."""
        return {
            "code": str(self.code.value if isinstance(self.code, Enum) else self.code),
            "message": self.message,
            "data": _jsonmap(self.data),
            "retryable": self.retryable,
        }

    def __str__(self) -> str:  # pragma: no cover - human formatting
        return self.message


class EncodingTooLarge(AndamioError):
    """A byte string exceeds what a definite-length header can describe."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(
            code=ErrorCode.ENCODING_TOO_LARGE,
            message=f"byte string too long for CBOR encoding ({length} > {limit} bytes)",
            data={"length": length, "limit": limit},
            retryable=False,
        )

    @property
    def length(self) -> int:
        return int(self.data["length"])

    @property
    def limit(self) -> int:
        return int(self.data["limit"])


class SerializationError(AndamioError):
    def __init__(self, message="serialization failed", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.SERIALIZATION,
            message=message,
            data=_jsonmap(data),
            retryable=False,
        )


class ConfigError(AndamioError):
    def __init__(self, message="invalid configuration", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.CONFIG,
            message=message,
            data=_jsonmap(data),
            retryable=False,
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _jsonmap(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: _coerce_json(v) for k, v in data.items()}


def _coerce_json(v: Any) -> Any:
    # Keep JSON primitives; stringify the rest; hex-encode bytes.
    if v is None or isinstance(v, (bool, int, float, str, list, dict)):
        return v
    if isinstance(v, (bytes, bytearray)):
        return v.hex()
    return str(v)
