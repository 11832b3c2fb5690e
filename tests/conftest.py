"""Shared pytest fixtures for strctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from strctl.domain.transform import TRANSFORMER_REGISTRY
from strctl.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_global_state() -> Generator[None]:
    """Restore the transformer registry and telemetry flag after each test."""
    saved = dict(TRANSFORMER_REGISTRY)
    yield
    TRANSFORMER_REGISTRY.clear()
    TRANSFORMER_REGISTRY.update(saved)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and strctl logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("strctl")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config discovery overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.delenv("STRCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
