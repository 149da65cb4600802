"""
Andamio protocol policy IDs by network, plus policy-ID / asset-name helpers.

Only the preprod access-token policy is fixed here; deployments supply the
rest through `ANDAMIO_POLICY_*` environment overrides (see
`andamio_core.config.CoreConfig.policies`).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from ..utils.bytes import from_hex, is_hex
from .cardano import ensure_network

POLICY_ID_HEX_LENGTH = 56
ASSET_NAME_MAX_HEX_LENGTH = 64


@dataclass(frozen=True)
class NetworkPolicies:
    """Policy IDs of the protocol tokens on one network ("" when not deployed)."""

    access_token: str = ""
    course_token: str = ""
    module_token: str = ""
    assignment_token: str = ""
    project_token: str = ""
    task_token: str = ""
    contributor_token: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


POLICY_ROLES: Tuple[str, ...] = tuple(f.name for f in fields(NetworkPolicies))

POLICY_IDS: Mapping[str, NetworkPolicies] = MappingProxyType(
    {
        "preprod": NetworkPolicies(
            access_token="4758613867a8a7aa500b5d57a0e877f01a8e63c1365469589b12063c",
        ),
        "preview": NetworkPolicies(),
        "mainnet": NetworkPolicies(),
    }
)


def get_access_token_policy_id(network: str) -> str:
    return POLICY_IDS[ensure_network(network)].access_token


def is_valid_policy_id(policy_id: object) -> bool:
    """A policy ID is 56 hex characters (28-byte script hash)."""
    return is_hex(policy_id, length=POLICY_ID_HEX_LENGTH)


def is_valid_asset_name(asset_name: object) -> bool:
    """Asset names are hex, even length, at most 64 characters (32 bytes); empty is allowed."""
    if not isinstance(asset_name, str):
        return False
    if len(asset_name) > ASSET_NAME_MAX_HEX_LENGTH or len(asset_name) % 2 != 0:
        return False
    return is_hex(asset_name)


def string_to_asset_name(text: str) -> str:
    """UTF-8 text -> lowercase hex asset name."""
    return text.encode("utf-8").hex()


def asset_name_to_string(hex_name: str) -> str:
    """Hex asset name -> text; invalid UTF-8 sequences become U+FFFD."""
    return from_hex(hex_name).decode("utf-8", errors="replace")


__all__ = [
    "POLICY_ID_HEX_LENGTH",
    "ASSET_NAME_MAX_HEX_LENGTH",
    "NetworkPolicies",
    "POLICY_ROLES",
    "POLICY_IDS",
    "get_access_token_policy_id",
    "is_valid_policy_id",
    "is_valid_asset_name",
    "string_to_asset_name",
    "asset_name_to_string",
]
