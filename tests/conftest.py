"""
Shared test fixtures and configuration.
"""

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from schemabuild.adapters.mock import MockBuildHost, MockGenerationEngine


@pytest.fixture
def mock_host() -> MockBuildHost:
    """A build host that records calls and resolves an empty classpath."""
    return MockBuildHost()


@pytest.fixture
def mock_engine() -> MockGenerationEngine:
    """An engine that records calls and always succeeds."""
    return MockGenerationEngine()


@pytest.fixture
def write_build_file(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes schemabuild.yml into tmp_path."""

    def _write(content: str) -> Path:
        path = tmp_path / "schemabuild.yml"
        path.write_text(textwrap.dedent(content))
        return path

    return _write
