"""
Content-addressed hashing for on-chain data verification.

All hashes are 64-character lowercase hex strings (Blake2b-256).
"""

from .commitment import (
    TiptapDoc,
    TiptapMark,
    TiptapNode,
    compute_assignment_info_hash,
    compute_commitment_hash,
    is_valid_assignment_info_hash,
    is_valid_commitment_hash,
    normalize_for_hashing,
    verify_assignment_info_hash,
    verify_commitment_hash,
    verify_evidence_detailed,
)
from .slt import (
    compute_slt_hash,
    compute_slt_hash_definite,
    encode_slts,
    is_valid_slt_hash,
    verify_slt_hash,
)
from .task import (
    NativeAsset,
    TaskData,
    compute_task_hash,
    debug_task_cbor,
    encode_task,
    is_valid_task_hash,
    verify_task_hash,
)
from .verify import VerificationResult, is_valid_hash_format

__all__ = [
    # SLT
    "compute_slt_hash",
    "compute_slt_hash_definite",
    "verify_slt_hash",
    "is_valid_slt_hash",
    "encode_slts",
    # Task
    "TaskData",
    "NativeAsset",
    "compute_task_hash",
    "verify_task_hash",
    "is_valid_task_hash",
    "debug_task_cbor",
    "encode_task",
    # Commitment
    "compute_commitment_hash",
    "verify_commitment_hash",
    "is_valid_commitment_hash",
    "verify_evidence_detailed",
    "normalize_for_hashing",
    "compute_assignment_info_hash",
    "verify_assignment_info_hash",
    "is_valid_assignment_info_hash",
    "TiptapDoc",
    "TiptapNode",
    "TiptapMark",
    # Shared
    "VerificationResult",
    "is_valid_hash_format",
]
