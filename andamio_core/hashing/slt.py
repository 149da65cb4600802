"""
SLT hash: the module token name derived from a list of Student Learning Targets.

The on-chain validator computes

    sltsToBbs MintModuleV2{slts} =
        blake2b_256 $ serialiseData $ toBuiltinData $ map stringToBuiltinByteString slts

so the encoding is a Plutus list (indefinite array) whose items are each
SLT's UTF-8 bytes framed by the chunking byte-string encoder, whatever their
length.
"""

from __future__ import annotations

from typing import Iterable, List

from ..encoding.plutus import encode_indefinite_array, encode_string
from ..logging import get_logger
from ..utils.hash import blake2b_256_hex
from .verify import hashes_equal, is_valid_hash_format

log = get_logger(__name__)


def encode_slts(slts: Iterable[str]) -> bytes:
    """Plutus-serialised bytes of the SLT list (what the chain hashes)."""
    return encode_indefinite_array(encode_string(slt) for slt in slts)


def compute_slt_hash(slts: Iterable[str]) -> str:
    """
    Compute the module hash for *slts*, matching the on-chain encoding.
    Returns 64 lowercase hex characters.
    """
    items: List[str] = list(slts)
    digest = blake2b_256_hex(encode_slts(items))
    log.debug("slt hash computed", extra={"slt_count": len(items), "digest": digest})
    return digest


# Deprecated: kept for callers of the older name.
compute_slt_hash_definite = compute_slt_hash


def verify_slt_hash(slts: Iterable[str], expected_hash: str) -> bool:
    return hashes_equal(compute_slt_hash(slts), expected_hash)


def is_valid_slt_hash(value: object) -> bool:
    return is_valid_hash_format(value)


__all__ = [
    "encode_slts",
    "compute_slt_hash",
    "compute_slt_hash_definite",
    "verify_slt_hash",
    "is_valid_slt_hash",
]
