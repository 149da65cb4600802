"""
Cardano network constants: network names, explorer URLs, network magic and
address prefixes, plus explorer URL builders.

Every table is a read-only mapping keyed by network name.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping, Optional, Tuple

from ..errors import ConfigError

CardanoNetwork = Literal["mainnet", "preprod", "preview"]

NETWORKS: Tuple[str, ...] = ("mainnet", "preprod", "preview")

# Block explorer URLs by network
EXPLORER_URLS: Mapping[str, str] = MappingProxyType(
    {
        "mainnet": "https://cardanoscan.io",
        "preprod": "https://preprod.cardanoscan.io",
        "preview": "https://preview.cardanoscan.io",
    }
)

# CExplorer URLs by network (alternative explorer)
CEXPLORER_URLS: Mapping[str, str] = MappingProxyType(
    {
        "mainnet": "https://cexplorer.io",
        "preprod": "https://preprod.cexplorer.io",
        "preview": "https://preview.cexplorer.io",
    }
)

NETWORK_MAGIC: Mapping[str, int] = MappingProxyType(
    {
        "mainnet": 764824073,
        "preprod": 1,
        "preview": 2,
    }
)

# Bech32 address prefixes
ADDRESS_PREFIX: Mapping[str, str] = MappingProxyType(
    {
        "mainnet": "addr",
        "preprod": "addr_test",
        "preview": "addr_test",
    }
)


def ensure_network(network: str) -> str:
    """Return *network* lowercased, or raise ConfigError if it is not a known network."""
    name = str(network).strip().lower()
    if name not in NETWORKS:
        raise ConfigError(
            f"unknown Cardano network {network!r} (expected one of {', '.join(NETWORKS)})",
            network=network,
        )
    return name


def get_tx_explorer_url(network: str, tx_hash: str) -> str:
    return f"{EXPLORER_URLS[ensure_network(network)]}/transaction/{tx_hash}"


def get_address_explorer_url(network: str, address: str) -> str:
    return f"{EXPLORER_URLS[ensure_network(network)]}/address/{address}"


def get_asset_explorer_url(
    network: str, policy_id: str, asset_name: Optional[str] = None
) -> str:
    """Token page; the asset id is `policy.asset` when an asset name is given."""
    asset_id = f"{policy_id}.{asset_name}" if asset_name else policy_id
    return f"{EXPLORER_URLS[ensure_network(network)]}/token/{asset_id}"


def get_policy_explorer_url(network: str, policy_id: str) -> str:
    return f"{EXPLORER_URLS[ensure_network(network)]}/tokenPolicy/{policy_id}"


__all__ = [
    "CardanoNetwork",
    "NETWORKS",
    "EXPLORER_URLS",
    "CEXPLORER_URLS",
    "NETWORK_MAGIC",
    "ADDRESS_PREFIX",
    "ensure_network",
    "get_tx_explorer_url",
    "get_address_explorer_url",
    "get_asset_explorer_url",
    "get_policy_explorer_url",
]
