from __future__ import annotations

import pytest

from andamio_core.constants import (
    ADDRESS_PREFIX,
    EXPLORER_URLS,
    NETWORK_MAGIC,
    NETWORKS,
    POLICY_IDS,
    POLICY_ROLES,
    NetworkPolicies,
    asset_name_to_string,
    ensure_network,
    get_access_token_policy_id,
    get_address_explorer_url,
    get_asset_explorer_url,
    get_policy_explorer_url,
    get_tx_explorer_url,
    is_valid_asset_name,
    is_valid_policy_id,
    string_to_asset_name,
)
from andamio_core.errors import ConfigError

ACCESS_POLICY = "4758613867a8a7aa500b5d57a0e877f01a8e63c1365469589b12063c"


def test_tables_cover_every_network() -> None:
    for table in (EXPLORER_URLS, NETWORK_MAGIC, ADDRESS_PREFIX, POLICY_IDS):
        assert set(table) == set(NETWORKS)


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        EXPLORER_URLS["mainnet"] = "https://evil.example"  # type: ignore[index]


def test_network_magic_and_prefixes() -> None:
    assert NETWORK_MAGIC["mainnet"] == 764824073
    assert NETWORK_MAGIC["preprod"] == 1
    assert NETWORK_MAGIC["preview"] == 2
    assert ADDRESS_PREFIX["mainnet"] == "addr"
    assert ADDRESS_PREFIX["preview"] == "addr_test"


def test_ensure_network() -> None:
    assert ensure_network(" PrePROD ") == "preprod"
    with pytest.raises(ConfigError) as ei:
        ensure_network("testnet")
    assert ei.value.data["network"] == "testnet"


def test_explorer_urls() -> None:
    assert get_tx_explorer_url("mainnet", "ab12") == "https://cardanoscan.io/transaction/ab12"
    assert (
        get_address_explorer_url("preprod", "addr_test1xyz")
        == "https://preprod.cardanoscan.io/address/addr_test1xyz"
    )
    assert get_asset_explorer_url("preview", "pp") == "https://preview.cardanoscan.io/token/pp"
    assert (
        get_asset_explorer_url("preview", "pp", "6e")
        == "https://preview.cardanoscan.io/token/pp.6e"
    )
    assert get_policy_explorer_url("mainnet", "pp") == "https://cardanoscan.io/tokenPolicy/pp"


def test_policy_table() -> None:
    assert get_access_token_policy_id("preprod") == ACCESS_POLICY
    assert get_access_token_policy_id("mainnet") == ""
    assert POLICY_IDS["preprod"].course_token == ""
    assert POLICY_ROLES[0] == "access_token"
    assert set(NetworkPolicies().to_dict()) == set(POLICY_ROLES)
    assert len(POLICY_ROLES) == 7


@pytest.mark.parametrize(
    "value, ok",
    [(ACCESS_POLICY, True), (ACCESS_POLICY.upper(), True), (ACCESS_POLICY[:-1], False), (None, False)],
)
def test_is_valid_policy_id(value: object, ok: bool) -> None:
    assert is_valid_policy_id(value) is ok


@pytest.mark.parametrize(
    "value, ok",
    [("", True), ("61", True), ("6", False), ("zz", False), ("aa" * 32, True), ("aa" * 33, False), (1, False)],
)
def test_is_valid_asset_name(value: object, ok: bool) -> None:
    assert is_valid_asset_name(value) is ok


def test_asset_name_text_conversion() -> None:
    assert string_to_asset_name("alias") == "616c696173"
    assert asset_name_to_string("616c696173") == "alias"
    assert asset_name_to_string(string_to_asset_name("ünï")) == "ünï"
    assert asset_name_to_string("ff") == "�"
