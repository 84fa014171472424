"""
Tests for logging configuration.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from schemabuild.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    ENV_LEVEL,
    resolve_level,
    setup_logging,
    setup_logging_from_env,
)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:
    def test_flag_precedence(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(ENV_LEVEL, "INFO")
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_fallback(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(ENV_LEVEL, "DEBUG")
        assert resolve_level() == "DEBUG"

    def test_default(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv(ENV_LEVEL, raising=False)
        assert resolve_level() == "WARNING"


class TestSetupLogging:
    def test_console_level(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_unknown_level_falls_back(self):
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.WARNING

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "schemabuild.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG

        logging.getLogger("schemabuild.test").debug("classpath widened")
        for handler in root.handlers:
            handler.flush()
        assert "classpath widened" in log_file.read_text()

    def test_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv(ENV_FILE, str(log_file))
        monkeypatch.setenv(ENV_FILE_LEVEL, "INFO")
        setup_logging_from_env("ERROR")
        assert len(logging.getLogger().handlers) == 2
        assert logging.getLogger().level == logging.INFO
