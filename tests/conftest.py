"""Shared pytest fixtures for binctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolate_process_state(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None]:
    """Keep logging handlers, BINCTL_* env vars and config discovery per-test.

    The CLI replaces root handlers, which outlive a single invocation unless
    restored here. Running from an empty temp directory keeps a stray
    binctl.toml from being discovered.
    """
    for name in [n for n in os.environ if n.startswith("BINCTL_")]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    bin_level = logging.getLogger("binctl").level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("binctl").setLevel(bin_level)
