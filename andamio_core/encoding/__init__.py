"""
Encoders feeding the hash pipelines.

- plutus: byte-exact Plutus `serialiseData` subset (SLT and task hashes)
- canonical: evidence normalization and canonical JSON (commitment hashes)
"""

from .canonical import UNDEFINED, canonical_bytes, canonical_json, normalize_for_hashing
from .plutus import (
    PLUTUS_CHUNK_SIZE,
    decode_for_inspection,
    encode_byte_string,
    encode_chunked_byte_string,
    encode_constructor,
    encode_definite_array,
    encode_indefinite_array,
    encode_integer,
    encode_string,
)

__all__ = [
    # canonical
    "UNDEFINED",
    "normalize_for_hashing",
    "canonical_json",
    "canonical_bytes",
    # plutus
    "PLUTUS_CHUNK_SIZE",
    "encode_byte_string",
    "encode_chunked_byte_string",
    "encode_string",
    "encode_integer",
    "encode_indefinite_array",
    "encode_definite_array",
    "encode_constructor",
    "decode_for_inspection",
]
