"""
Commitment hash: tamper-evidence for assignment evidence.

The hash is stored on-chain as `commitment_hash` in the course state datum
while the full evidence (a Tiptap JSON document) lives in the database.
Storing only the digest keeps the datum small and the evidence private, and
lets anyone check that the stored evidence still matches the commitment.

    hash = blake2b_256(utf8(canonical_json(evidence)))
"""

from __future__ import annotations

from typing import Any, Dict

from ..encoding.canonical import canonical_bytes, normalize_for_hashing
from ..logging import get_logger
from ..utils.hash import blake2b_256_hex
from .verify import (
    MSG_MATCH,
    MSG_MISMATCH,
    VerificationResult,
    format_invalid_message,
    hashes_equal,
    is_valid_hash_format,
)

log = get_logger(__name__)

# Simplified Tiptap shapes. Real documents nest arbitrarily and may carry
# extra keys; these aliases only document the common structure.
TiptapMark = Dict[str, Any]  # {"type": str, "attrs"?: {...}}
TiptapNode = Dict[str, Any]  # {"type": str, "content"?: [...], "text"?: str, "marks"?: [...]}
TiptapDoc = Dict[str, Any]  # {"type": "doc", "content"?: [TiptapNode, ...]}


def compute_commitment_hash(evidence: Any) -> str:
    """
    Normalize *evidence*, render it as canonical JSON and hash the UTF-8
    bytes with Blake2b-256. Returns 64 lowercase hex characters.
    """
    payload = canonical_bytes(evidence)
    digest = blake2b_256_hex(payload)
    log.debug("commitment hash computed", extra={"json_bytes": len(payload), "digest": digest})
    return digest


def verify_commitment_hash(evidence: Any, expected_hash: str) -> bool:
    return hashes_equal(compute_commitment_hash(evidence), expected_hash)


def is_valid_commitment_hash(value: object) -> bool:
    return is_valid_hash_format(value)


def verify_evidence_detailed(evidence: Any, on_chain_hash: str) -> VerificationResult:
    """
    Compare *evidence* with an on-chain hash and explain the outcome.

    A malformed on-chain hash is reported without hashing the evidence.
    """
    if not is_valid_commitment_hash(on_chain_hash):
        log.debug("on-chain hash has invalid format", extra={"expected_hash": str(on_chain_hash)})
        return VerificationResult(
            valid=False,
            computed_hash="",
            expected_hash=on_chain_hash,
            message=format_invalid_message(on_chain_hash),
        )

    computed = compute_commitment_hash(evidence)
    valid = hashes_equal(computed, on_chain_hash)
    return VerificationResult(
        valid=valid,
        computed_hash=computed,
        expected_hash=on_chain_hash.lower(),
        message=MSG_MATCH if valid else MSG_MISMATCH,
    )


# Deprecated names from when evidence hashes were called "assignment info" hashes.
compute_assignment_info_hash = compute_commitment_hash
verify_assignment_info_hash = verify_commitment_hash
is_valid_assignment_info_hash = is_valid_commitment_hash


__all__ = [
    "TiptapDoc",
    "TiptapNode",
    "TiptapMark",
    "normalize_for_hashing",
    "compute_commitment_hash",
    "verify_commitment_hash",
    "is_valid_commitment_hash",
    "verify_evidence_detailed",
    "compute_assignment_info_hash",
    "verify_assignment_info_hash",
    "is_valid_assignment_info_hash",
]
