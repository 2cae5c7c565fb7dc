"""Shared pytest fixtures for wirecoerce tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host WIRECOERCE_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("WIRECOERCE_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations and logging tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    wire = logging.getLogger("wirecoerce")
    wire_level = wire.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    wire.setLevel(wire_level)
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no wirecoerce.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def authorization_payload() -> dict[str, Any]:
    """A decoded authorization request with three of its six fields present."""
    return {
        "action": "view",
        "context": {"ip": "127.0.0.1"},
        "scopes": ["read", "write"],
    }


@pytest.fixture
def relation_tuples_payload() -> dict[str, Any]:
    """One page of the relation-tuple read API."""
    return {
        "relation_tuples": [
            {
                "namespace": "files",
                "object": "report.pdf",
                "relation": "view",
                "subject_id": "alice",
            },
            {
                "namespace": "files",
                "object": "report.pdf",
                "relation": "view",
                "subject_set": {"namespace": "groups", "object": "staff", "relation": "member"},
            },
        ],
        "next_page_token": "",
    }
