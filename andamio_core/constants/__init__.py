"""
Network configuration, policy IDs and other Cardano constants.
"""

from .cardano import (
    ADDRESS_PREFIX,
    CEXPLORER_URLS,
    EXPLORER_URLS,
    NETWORK_MAGIC,
    NETWORKS,
    CardanoNetwork,
    ensure_network,
    get_address_explorer_url,
    get_asset_explorer_url,
    get_policy_explorer_url,
    get_tx_explorer_url,
)
from .policies import (
    POLICY_IDS,
    POLICY_ROLES,
    NetworkPolicies,
    asset_name_to_string,
    get_access_token_policy_id,
    is_valid_asset_name,
    is_valid_policy_id,
    string_to_asset_name,
)

__all__ = [
    # cardano
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
    # policies
    "NetworkPolicies",
    "POLICY_ROLES",
    "POLICY_IDS",
    "get_access_token_policy_id",
    "is_valid_policy_id",
    "is_valid_asset_name",
    "string_to_asset_name",
    "asset_name_to_string",
]
