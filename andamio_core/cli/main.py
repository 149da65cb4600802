"""
andamio_core.cli.main
=====================

`andamio`: compute and verify the content hashes Andamio validators put
on-chain, without a node or a database.

Examples
--------
    $ andamio slt-hash "I can mint an access token." "I can complete an assignment to earn a credential."
    $ andamio task-hash --content "Open Task #1" --expiration 1769027280000 --lovelace 15000000
    $ andamio commitment-hash evidence.json --verify <64-hex>
    $ cat evidence.json | andamio commitment-hash -
    $ andamio --network mainnet explorer-url tx <tx-hash>
    $ andamio policies

Configuration
-------------
- Network    : `--network` or env `ANDAMIO_NETWORK` (default: preprod)
- Log level  : `--log-level` or env `ANDAMIO_LOG_LEVEL` (default: INFO)
- Log format : `--log-format` or env `ANDAMIO_LOG_FORMAT` (json | text; default by TTY)
- Policy IDs : env `ANDAMIO_POLICY_<ROLE>`, e.g. `ANDAMIO_POLICY_COURSE_TOKEN`

Verification failures exit with status 1.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from .. import logging as log_config
from ..config import CoreConfig
from ..constants.cardano import (
    get_address_explorer_url,
    get_asset_explorer_url,
    get_policy_explorer_url,
    get_tx_explorer_url,
)
from ..errors import AndamioError
from ..hashing import (
    TaskData,
    compute_commitment_hash,
    compute_slt_hash,
    compute_task_hash,
    debug_task_cbor,
    verify_evidence_detailed,
)
from ..hashing.verify import hashes_equal
from ..version import __version__

# --- Typer app and global context --------------------------------------------

app = typer.Typer(
    name="andamio",
    help="Andamio hashing toolkit: compute and verify on-chain content hashes.",
    no_args_is_help=True,
    add_completion=False,
)

__all__ = ["app", "main", "run"]

log = log_config.get_logger(__name__)


@dataclass
class Ctx:
    config: CoreConfig


class ExplorerKind(str, Enum):
    tx = "tx"
    address = "address"
    asset = "asset"
    policy = "policy"


def _print_json(obj: Any) -> None:
    typer.echo(json.dumps(obj, indent=2, ensure_ascii=False))


def _config(ctx: typer.Context) -> CoreConfig:
    c: Ctx = ctx.obj
    return c.config


def _report(computed: str, expected: str) -> None:
    """Print a verification outcome; exit 1 on mismatch."""
    valid = hashes_equal(computed, expected)
    _print_json({"valid": valid, "computed_hash": computed, "expected_hash": expected.lower()})
    if not valid:
        raise typer.Exit(code=1)


@app.callback()
def _root(
    ctx: typer.Context,
    network: Optional[str] = typer.Option(
        None,
        "--network",
        help="Cardano network: mainnet, preprod or preview.",
        envvar="ANDAMIO_NETWORK",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Minimum log level (DEBUG, INFO, WARNING, ...).",
        envvar="ANDAMIO_LOG_LEVEL",
    ),
    log_format: Optional[str] = typer.Option(
        None,
        "--log-format",
        help="Log output format: json or text.",
        envvar="ANDAMIO_LOG_FORMAT",
    ),
) -> None:
    """
    Resolve the effective configuration for this process and set up logging.
    """
    cfg = CoreConfig.with_overrides(
        network=network,
        log_level=log_level.upper() if log_level else None,
        log_format=log_format,
    )
    log_config.configure(
        json=None if cfg.log_format is None else cfg.log_format == "json",
        level=cfg.log_level,
    )
    ctx.obj = Ctx(config=cfg)


# --- Commands -----------------------------------------------------------------


@app.command("version")
def version() -> None:
    """Print the toolkit version."""
    typer.echo(f"andamio {__version__}")


@app.command("env")
def env(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    _print_json({**_config(ctx).to_dict(), "version": __version__})


@app.command("slt-hash")
def slt_hash(
    slts: List[str] = typer.Argument(..., help="Student Learning Targets, in module order."),
    verify: Optional[str] = typer.Option(
        None, "--verify", help="Expected module hash (64 hex) to check against."
    ),
) -> None:
    """Compute (or verify) a module's SLT hash."""
    digest = compute_slt_hash(slts)
    if verify is None:
        typer.echo(digest)
        return
    _report(digest, verify)


def _parse_asset(raw: str) -> tuple[str, int]:
    asset_class, sep, qty = raw.rpartition("=")
    if not sep or not asset_class:
        raise typer.BadParameter(f"expected CLASS=QTY, got {raw!r}", param_hint="--asset")
    try:
        return asset_class, int(qty)
    except ValueError as e:
        raise typer.BadParameter(f"quantity must be an integer, got {qty!r}", param_hint="--asset") from e


@app.command("task-hash")
def task_hash(
    content: str = typer.Option(..., "--content", help="Task content (project_content)."),
    expiration: int = typer.Option(..., "--expiration", help="Expiration, POSIX milliseconds."),
    lovelace: int = typer.Option(..., "--lovelace", help="Reward in lovelace."),
    asset: Optional[List[str]] = typer.Option(
        None, "--asset", help="Native asset reward as policyId.tokenName=QTY (repeatable)."
    ),
    cbor: bool = typer.Option(
        False, "--cbor", help="Print the encoded task (hex) instead of its hash."
    ),
    verify: Optional[str] = typer.Option(
        None, "--verify", help="Expected task hash (64 hex) to check against."
    ),
) -> None:
    """Compute (or verify) a project task hash."""
    task = TaskData(
        content=content,
        expiration=expiration,
        lovelace_amount=lovelace,
        native_assets=tuple(_parse_asset(a) for a in asset or ()),
    )
    if cbor:
        typer.echo(debug_task_cbor(task))
        return
    digest = compute_task_hash(task)
    if verify is None:
        typer.echo(digest)
        return
    _report(digest, verify)


def _read_evidence(source: str) -> Any:
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise typer.BadParameter(f"cannot read {source}: {e.strerror}", param_hint="SOURCE") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"invalid JSON evidence: {e}", param_hint="SOURCE") from e


@app.command("commitment-hash")
def commitment_hash(
    source: str = typer.Argument(..., help="Path to a JSON evidence document, or '-' for stdin."),
    verify: Optional[str] = typer.Option(
        None, "--verify", help="On-chain commitment hash to check the evidence against."
    ),
) -> None:
    """Compute (or verify) the commitment hash of assignment evidence."""
    evidence = _read_evidence(source)
    if verify is None:
        typer.echo(compute_commitment_hash(evidence))
        return
    result = verify_evidence_detailed(evidence, verify)
    _print_json(result.to_dict())
    if not result.valid:
        log.debug("evidence verification failed", extra={"reason": result.message})
        raise typer.Exit(code=1)


@app.command("explorer-url")
def explorer_url(
    ctx: typer.Context,
    kind: ExplorerKind = typer.Argument(..., help="What VALUE is."),
    value: str = typer.Argument(..., help="Transaction hash, address or policy ID."),
    asset_name: Optional[str] = typer.Option(
        None, "--asset-name", help="Hex asset name (only with 'asset')."
    ),
) -> None:
    """Print a Cardanoscan URL on the configured network."""
    network = _config(ctx).network
    if kind is ExplorerKind.tx:
        url = get_tx_explorer_url(network, value)
    elif kind is ExplorerKind.address:
        url = get_address_explorer_url(network, value)
    elif kind is ExplorerKind.asset:
        url = get_asset_explorer_url(network, value, asset_name)
    else:
        url = get_policy_explorer_url(network, value)
    typer.echo(url)


@app.command("policies")
def policies(ctx: typer.Context) -> None:
    """Show the effective policy IDs for the configured network."""
    cfg = _config(ctx)
    out: Dict[str, Any] = {"network": cfg.network, **cfg.policies().to_dict()}
    _print_json(out)


# --- Entrypoints --------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run the CLI. Returns an integer exit code.
    """
    try:
        app(prog_name="andamio", args=argv)
    except SystemExit as e:
        if e.code is None or isinstance(e.code, int):
            return int(e.code or 0)
        return 1
    except AndamioError as e:
        log.debug("command failed", extra={"error": e.to_dict()})
        typer.echo(f"error: {e}", err=True)
        return 1
    return 0


def run(argv: Optional[list[str]] = None) -> int:
    """Alias for :func:`main`."""
    return main(argv)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
