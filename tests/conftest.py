"""
Shared pytest fixtures:
- Clean `andamio` logger tree between tests (the CLI installs handlers)
- Environment without ANDAMIO_* overrides
- Sample evidence document and task
"""
from __future__ import annotations

import logging
import os
import typing as t

import pytest

from andamio_core.hashing import TaskData


@pytest.fixture(autouse=True)
def _reset_andamio_logger() -> t.Iterator[None]:
    yield
    logger = logging.getLogger("andamio")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("ANDAMIO_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def evidence_doc() -> t.Dict[str, t.Any]:
    """A small Tiptap document as the web editor saves it."""
    return {
        "type": "doc",
        "content": [
            {
                "type": "paragraph",
                "content": [
                    {"type": "text", "text": "  My submission  "},
                    {
                        "type": "text",
                        "text": "repo link",
                        "marks": [{"type": "link", "attrs": {"href": "https://example.org/repo"}}],
                    },
                ],
            }
        ],
    }


@pytest.fixture
def open_task() -> TaskData:
    return TaskData(content="Open Task #1", expiration=1769027280000, lovelace_amount=15000000)
