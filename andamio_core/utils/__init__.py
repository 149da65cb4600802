"""
Utility helpers for andamio_core.

Re-exports:
- bytes: hex helpers and bytes-like normalization
- hash: Blake2b-256 convenience wrappers
"""

from .bytes import ensure_bytes, from_hex, is_hex, to_hex
from .hash import blake2b_256, blake2b_256_hex

__all__ = [
    # bytes
    "to_hex",
    "from_hex",
    "is_hex",
    "ensure_bytes",
    # hash
    "blake2b_256",
    "blake2b_256_hex",
]
