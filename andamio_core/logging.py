"""
andamio_core.logging
--------------------

Structured logging with:
- JSON or concise colored text formats
- Safe JSON serialization (bytes → hex, dataclasses → dicts)
- Simple, dependency-free setup (stdlib only)

Library code only ever calls `get_logger(__name__)`; nothing is emitted
until an application (or the `andamio` CLI) calls `configure()`.

Usage
-----
    from andamio_core import logging as alog

    alog.configure(json=False, level="DEBUG")  # once at process start
    log = alog.get_logger(__name__)
    log.debug("slt hash computed", extra={"slt_count": 3, "digest": "eff7..."})
"""

from __future__ import annotations

import datetime as _dt
import io
import json
import logging
import os
import sys
import traceback
import types
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = "andamio"

# LogRecord attributes that are not user-supplied extras.
_RESERVED = frozenset(
    (
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "asctime",
    )
)

_LEVEL_TO_INT = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

ANSI = types.SimpleNamespace(
    RESET="\x1b[0m",
    BOLD="\x1b[1m",
    FG=types.SimpleNamespace(
        RED="\x1b[31m",
        GREEN="\x1b[32m",
        YELLOW="\x1b[33m",
        MAGENTA="\x1b[35m",
        CYAN="\x1b[36m",
        GREY="\x1b[90m",
        WHITE="\x1b[37m",
    ),
)

_LEVEL_COLOR = {
    logging.DEBUG: ANSI.FG.GREY,
    logging.INFO: ANSI.FG.GREEN,
    logging.WARNING: ANSI.FG.YELLOW,
    logging.ERROR: ANSI.FG.RED,
    logging.CRITICAL: ANSI.BOLD + ANSI.FG.MAGENTA,
}


def _utcnow_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).isoformat(timespec="milliseconds")


def _supports_color(stream: io.TextIOBase) -> bool:
    try:
        return stream.isatty() and os.environ.get("NO_COLOR") is None
    except Exception:
        return False


def _coerce_value(v: Any) -> Any:
    # Keep basic JSON types as-is; coerce objects to readable forms.
    if v is None or isinstance(v, (bool, int, float, str, list, dict)):
        return v
    if isinstance(v, (bytes, bytearray)):
        return v.hex()
    if is_dataclass(v) and not isinstance(v, type):
        return asdict(v)
    return str(v)


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        k: _coerce_value(v)
        for k, v in record.__dict__.items()
        if not k.startswith("_") and k not in _RESERVED
    }


# ----------------------------
# JSON & Text formatters
# ----------------------------


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _utcnow_iso(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k, v in _extras(record).items():
            payload.setdefault(k, v)

        if record.exc_info:
            payload["err"] = "".join(
                traceback.format_exception(*record.exc_info)
            ).rstrip()

        return json.dumps(payload, default=str, separators=(",", ":"))


class TextFormatter(logging.Formatter):
    """
    Human-friendly one-liner:
      2026-01-05T12:34:56.789+00:00 | DEBUG | andamio.hashing.slt slt_count=3 | slt hash computed
    With colors when supported.
    """

    def __init__(self, stream: io.TextIOBase):
        super().__init__()
        self._color = _supports_color(stream)

    def format(self, record: logging.LogRecord) -> str:
        ts = _utcnow_iso()
        lvl = record.levelname
        name = record.name
        msg = record.getMessage()

        extras_parts = [f"{k}={v}" for k, v in _extras(record).items()]
        extras = (" " + " ".join(extras_parts)) if extras_parts else ""

        if self._color:
            c = _LEVEL_COLOR.get(record.levelno, ANSI.FG.WHITE)
            lvl_s = f"{c}{lvl:<5}{ANSI.RESET}"
            name_s = f"{ANSI.FG.CYAN}{name}{ANSI.RESET}"
            ts_s = f"{ANSI.FG.GREY}{ts}{ANSI.RESET}"
        else:
            lvl_s = f"{lvl:<5}"
            name_s = name
            ts_s = ts

        line = f"{ts_s} | {lvl_s} | {name_s}{extras} | {msg}"

        if record.exc_info:
            tb = "".join(traceback.format_exception(*record.exc_info)).rstrip()
            line += "\n" + tb
        return line


# ----------------------------
# Public setup API
# ----------------------------


def configure(
    *,
    json: Optional[bool] = None,
    level: str | int = "INFO",
    stream: Optional[io.TextIOBase] = None,
) -> None:
    """
    Configure the `andamio` logger tree.

    Parameters
    ----------
    json : bool | None
        If None, determined by env ANDAMIO_LOG_FORMAT=(json|text) and TTY detection.
    level : str | int
        Minimum log level.
    stream : TextIO | None
        Stream for the console handler (default: current sys.stderr).
    """
    stream = stream if stream is not None else sys.stderr
    chosen_json = _decide_json(json, stream)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(_coerce_level(level))
    for h in list(logger.handlers):
        logger.removeHandler(h)

    console = logging.StreamHandler(stream)
    console.setLevel(_coerce_level(level))
    if chosen_json:
        console.setFormatter(JSONFormatter())
    else:
        console.setFormatter(TextFormatter(stream))
    logger.addHandler(console)
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a standard logger under the `andamio` namespace. Module names from
    this package (`andamio_core.*`) are mapped onto `andamio.*`.
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith("andamio_core"):
        name = ROOT_LOGGER_NAME + name[len("andamio_core"):]
    elif not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


# ----------------------------
# Internals
# ----------------------------


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return _LEVEL_TO_INT.get(level.upper(), logging.INFO)


def _decide_json(json_flag: Optional[bool], stream: io.TextIOBase) -> bool:
    if json_flag is not None:
        return json_flag
    env = os.environ.get("ANDAMIO_LOG_FORMAT", "").strip().lower()
    if env in ("json", "text"):
        return env == "json"
    # Default: JSON in non-tty (pipelines), text when interactive TTY
    return not _supports_color(stream)


__all__ = [
    "ROOT_LOGGER_NAME",
    "JSONFormatter",
    "TextFormatter",
    "configure",
    "get_logger",
]
