"""
andamio_core.cli
================

Command-line interface for the Andamio hashing toolkit.

The Typer app is exposed via the `andamio` console script. Library imports of
`andamio_core` never pull in Typer; the CLI module is loaded on first access.

Quick usage
-----------
- From Python:
    >>> from andamio_core.cli import main
    >>> main(["slt-hash", "I can mint an access token."])

- From shell (installed as a console script):
    $ andamio --help
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, List, Optional

__all__: List[str] = [
    "main",
    "run",
    "app",  # Typer app (lazy)
]

_SUBMODULE = "andamio_core.cli.main"
_EXPOSE = ("app", "main", "run")


def _load() -> Any:
    return import_module(_SUBMODULE)


def __getattr__(name: str) -> Any:  # PEP 562 lazy attribute access
    if name in _EXPOSE:
        return getattr(_load(), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return its exit code."""
    return int(_load().main(argv))


def run(argv: Optional[list[str]] = None) -> int:
    """Alias for :func:`main`."""
    return main(argv)
