"""
Task hash: the content-addressed `task_hash` / task token name.

The validator serialises a task as `Constr 0` over four fields, in this
order regardless of how the caller's mapping is ordered:

    1. project content      BuiltinByteString (chunked UTF-8)
    2. expiration time      Integer (POSIX milliseconds)
    3. lovelace amount      Integer
    4. native assets        List [(asset class, quantity)]

The asset list is `0x80` when empty; otherwise an indefinite array of
definite 2-element arrays (`0x82`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, NamedTuple, Tuple, Union

from ..encoding.plutus import (
    encode_constructor,
    encode_definite_array,
    encode_indefinite_array,
    encode_integer,
    encode_string,
)
from ..logging import get_logger
from ..utils.bytes import to_hex
from ..utils.hash import blake2b_256_hex
from .verify import hashes_equal, is_valid_hash_format

log = get_logger(__name__)

# Advisory; longer content is logged but still hashed (and chunked) as given.
MAX_CONTENT_LENGTH = 140


class NativeAsset(NamedTuple):
    """One `[policyId.tokenName, quantity]` entry of a ListValue."""

    asset_class: str
    quantity: int


def _require_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


def _coerce_asset(entry: Any) -> NativeAsset:
    if isinstance(entry, Mapping):
        entry = (entry.get("asset_class", entry.get("assetClass")), entry.get("quantity"))
    try:
        asset_class, quantity = entry
    except (TypeError, ValueError) as e:
        raise TypeError(f"native asset must be an (asset_class, quantity) pair, got {entry!r}") from e
    if not isinstance(asset_class, str):
        raise TypeError(f"asset_class must be str, got {type(asset_class).__name__}")
    return NativeAsset(asset_class, _require_int("quantity", quantity))


@dataclass(frozen=True)
class TaskData:
    """
    Task fields as hashed on-chain. Declaration order is the encoding order.
    """

    content: str
    expiration: int
    lovelace_amount: int
    native_assets: Tuple[NativeAsset, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise TypeError(f"content must be str, got {type(self.content).__name__}")
        _require_int("expiration", self.expiration)
        _require_int("lovelace_amount", self.lovelace_amount)
        object.__setattr__(
            self, "native_assets", tuple(_coerce_asset(a) for a in self.native_assets)
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TaskData":
        """
        Accepts the transaction API's wire names (`project_content`,
        `expiration_time`, `lovelace_amount`, `native_assets`) or the
        camel-case names (`content`, `expiration`, `lovelaceAmount`,
        `nativeAssets`).
        """

        def pick(*names: str) -> Any:
            for n in names:
                if n in data:
                    return data[n]
            raise KeyError(f"task is missing {names[0]!r}")

        return cls(
            content=pick("project_content", "content"),
            expiration=pick("expiration_time", "expiration"),
            lovelace_amount=pick("lovelace_amount", "lovelaceAmount"),
            native_assets=tuple(
                data.get("native_assets", data.get("nativeAssets", ())) or ()
            ),
        )


TaskLike = Union[TaskData, Mapping[str, Any]]


def _as_task(task: TaskLike) -> TaskData:
    return task if isinstance(task, TaskData) else TaskData.from_dict(task)


def _encode_native_assets(assets: Iterable[NativeAsset]) -> bytes:
    # encode_indefinite_array yields 0x80 for an empty list.
    return encode_indefinite_array(
        encode_definite_array((encode_string(a.asset_class), encode_integer(a.quantity)))
        for a in assets
    )


def encode_task(task: TaskLike) -> bytes:
    """Plutus-serialised bytes of *task* (what the chain hashes)."""
    t = _as_task(task)
    return encode_constructor(
        (
            encode_string(t.content),
            encode_integer(t.expiration),
            encode_integer(t.lovelace_amount),
            _encode_native_assets(t.native_assets),
        )
    )


def compute_task_hash(task: TaskLike) -> str:
    """
    Compute the on-chain task hash, so clients can pre-compute or verify it.

    Example::

        compute_task_hash(TaskData("Open Task #1", 1769027280000, 15000000))
    """
    t = _as_task(task)
    if len(t.content) > MAX_CONTENT_LENGTH:
        log.warning(
            "task content longer than advisory limit",
            extra={"content_length": len(t.content), "limit": MAX_CONTENT_LENGTH},
        )
    digest = blake2b_256_hex(encode_task(t))
    log.debug(
        "task hash computed",
        extra={"asset_count": len(t.native_assets), "digest": digest},
    )
    return digest


def verify_task_hash(task: TaskLike, expected_hash: str) -> bool:
    return hashes_equal(compute_task_hash(task), expected_hash)


def is_valid_task_hash(value: object) -> bool:
    return is_valid_hash_format(value)


def debug_task_cbor(task: TaskLike) -> str:
    """
    Hex of the encoded task before hashing, for comparison against datum
    bytes observed on-chain. Not needed to compute or verify a hash.
    """
    return to_hex(encode_task(task))


__all__ = [
    "MAX_CONTENT_LENGTH",
    "NativeAsset",
    "TaskData",
    "encode_task",
    "compute_task_hash",
    "verify_task_hash",
    "is_valid_task_hash",
    "debug_task_cbor",
]
