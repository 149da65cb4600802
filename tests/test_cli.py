from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from andamio_core.cli import main as cli_main
from andamio_core.cli.main import app
from andamio_core.hashing import TaskData, compute_commitment_hash, compute_task_hash
from andamio_core.version import __version__

runner = CliRunner()

SLTS = [
    "I can set up a Typescript development environment.",
    "I can use Github CLI to create an issue.",
    "I can run the Andamio T3 App Template locally.",
]
SLT_HASH = "eff7d90a6ed2eaf32b523efb25d95f748166158bcce048717a4920478be052cf"


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"andamio {__version__}"


def test_env_reflects_flags_and_env(monkeypatch: Any) -> None:
    monkeypatch.setenv("ANDAMIO_LOG_LEVEL", "warning")
    result = runner.invoke(app, ["--network", "mainnet", "env"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["network"] == "mainnet"
    assert data["log_level"] == "WARNING"
    assert data["version"] == __version__


def test_slt_hash() -> None:
    result = runner.invoke(app, ["slt-hash", *SLTS])
    assert result.exit_code == 0
    assert result.stdout.strip() == SLT_HASH


def test_slt_hash_verify() -> None:
    ok = runner.invoke(app, ["slt-hash", *SLTS, "--verify", SLT_HASH.upper()])
    assert ok.exit_code == 0
    assert json.loads(ok.stdout)["valid"] is True

    bad = runner.invoke(app, ["slt-hash", *SLTS[:2], "--verify", SLT_HASH])
    assert bad.exit_code == 1
    assert json.loads(bad.stdout)["valid"] is False


def test_task_hash_and_cbor() -> None:
    args = ["task-hash", "--content", "Open Task #1", "--expiration", "1769027280000", "--lovelace", "15000000"]
    result = runner.invoke(app, args)
    assert result.exit_code == 0
    expected = compute_task_hash(TaskData("Open Task #1", 1769027280000, 15000000))
    assert result.stdout.strip() == expected

    cbor = runner.invoke(app, [*args, "--cbor"])
    assert cbor.exit_code == 0
    assert cbor.stdout.strip().startswith("d8799f")
    assert cbor.stdout.strip().endswith("80ff")

    verified = runner.invoke(app, [*args, "--verify", expected])
    assert verified.exit_code == 0


def test_task_hash_with_assets() -> None:
    asset = ("ab" * 28) + ".74"
    result = runner.invoke(
        app,
        ["task-hash", "--content", "t", "--expiration", "1", "--lovelace", "2", "--asset", f"{asset}=7"],
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == compute_task_hash(TaskData("t", 1, 2, ((asset, 7),)))


def test_task_hash_rejects_bad_asset() -> None:
    result = runner.invoke(
        app,
        ["task-hash", "--content", "t", "--expiration", "1", "--lovelace", "2", "--asset", "x=seven"],
    )
    assert result.exit_code == 2


def test_commitment_hash_from_file(tmp_path: Path, evidence_doc: dict) -> None:
    path = tmp_path / "evidence.json"
    path.write_text(json.dumps(evidence_doc), encoding="utf-8")
    result = runner.invoke(app, ["commitment-hash", str(path)])
    assert result.exit_code == 0
    assert result.stdout.strip() == compute_commitment_hash(evidence_doc)


def test_commitment_hash_from_stdin_verify(evidence_doc: dict) -> None:
    digest = compute_commitment_hash(evidence_doc)
    result = runner.invoke(app, ["commitment-hash", "-", "--verify", digest], input=json.dumps(evidence_doc))
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == {
        "valid": True,
        "computed_hash": digest,
        "expected_hash": digest,
        "message": "Evidence matches on-chain commitment",
    }


def test_commitment_hash_verify_invalid_format(evidence_doc: dict) -> None:
    result = runner.invoke(app, ["commitment-hash", "-", "--verify", "xyz"], input=json.dumps(evidence_doc))
    assert result.exit_code == 1
    assert json.loads(result.stdout)["computed_hash"] == ""


def test_commitment_hash_bad_json() -> None:
    result = runner.invoke(app, ["commitment-hash", "-"], input="{not json")
    assert result.exit_code == 2


@pytest.mark.parametrize(
    "argv, url",
    [
        (["explorer-url", "tx", "ab12"], "https://preprod.cardanoscan.io/transaction/ab12"),
        (["--network", "mainnet", "explorer-url", "policy", "pp"], "https://cardanoscan.io/tokenPolicy/pp"),
        (["explorer-url", "asset", "pp", "--asset-name", "6e"], "https://preprod.cardanoscan.io/token/pp.6e"),
        (["explorer-url", "address", "addr_test1"], "https://preprod.cardanoscan.io/address/addr_test1"),
    ],
)
def test_explorer_url(argv: list, url: str) -> None:
    result = runner.invoke(app, argv)
    assert result.exit_code == 0
    assert result.stdout.strip() == url


def test_policies_with_override(monkeypatch: Any) -> None:
    monkeypatch.setenv("ANDAMIO_POLICY_TASK_TOKEN", "ef" * 28)
    result = runner.invoke(app, ["policies"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["network"] == "preprod"
    assert data["task_token"] == "ef" * 28
    assert data["access_token"] == "4758613867a8a7aa500b5d57a0e877f01a8e63c1365469589b12063c"


def test_main_returns_exit_codes(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main(["slt-hash", *SLTS]) == 0
    assert capsys.readouterr().out.strip() == SLT_HASH
    assert cli_main(["slt-hash", "x", "--verify", SLT_HASH]) == 1


def test_main_reports_config_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main(["--network", "testnet", "env"]) == 1
    assert "error: unknown Cardano network" in capsys.readouterr().err
