from __future__ import annotations

import hashlib

from .bytes import BytesLike, ensure_bytes, to_hex

# Blake2b-256: the digest Plutus exposes as `blake2b_256`.
DIGEST_SIZE = 32
HEX_DIGEST_LENGTH = DIGEST_SIZE * 2


def blake2b_256(data: BytesLike) -> bytes:
    """Return the 32-byte Blake2b digest of *data*."""
    h = hashlib.blake2b(digest_size=DIGEST_SIZE)
    h.update(ensure_bytes(data))
    return h.digest()


def blake2b_256_hex(data: BytesLike) -> str:
    """Return the Blake2b-256 digest of *data* as 64 lowercase hex characters."""
    return to_hex(blake2b_256(data))


__all__ = ["DIGEST_SIZE", "HEX_DIGEST_LENGTH", "blake2b_256", "blake2b_256_hex"]
