"""
Andamio core (Python)
Convenience exports for hashing and verifying on-chain Andamio data.
"""

from .version import __version__  # noqa: F401

# Config & errors
from .config import CoreConfig  # noqa: F401
from .errors import (  # noqa: F401
    AndamioError,
    ConfigError,
    EncodingTooLarge,
    SerializationError,
)

# Encoding
from .encoding.canonical import (  # noqa: F401
    UNDEFINED,
    canonical_json,
    normalize_for_hashing,
)

# Hash pipelines
from .hashing import (  # noqa: F401
    NativeAsset,
    TaskData,
    VerificationResult,
    compute_commitment_hash,
    compute_slt_hash,
    compute_task_hash,
    debug_task_cbor,
    is_valid_commitment_hash,
    is_valid_slt_hash,
    is_valid_task_hash,
    verify_commitment_hash,
    verify_evidence_detailed,
    verify_slt_hash,
    verify_task_hash,
)

__all__ = [
    "__version__",
    # Core
    "CoreConfig",
    "AndamioError", "ConfigError", "EncodingTooLarge", "SerializationError",
    # Encoding
    "UNDEFINED", "canonical_json", "normalize_for_hashing",
    # SLT
    "compute_slt_hash", "verify_slt_hash", "is_valid_slt_hash",
    # Task
    "TaskData", "NativeAsset",
    "compute_task_hash", "verify_task_hash", "is_valid_task_hash", "debug_task_cbor",
    # Commitment
    "compute_commitment_hash", "verify_commitment_hash", "is_valid_commitment_hash",
    "verify_evidence_detailed", "VerificationResult",
]
