"""
Mock adapters — test doubles for the build host and the engine.

Used in mock mode (``generate --mock``) to run the whole invocation
without launching a generator, and by the test suite to count calls.
"""

from __future__ import annotations

from pathlib import Path

from schemabuild.adapters.base import (
    BuildHost,
    DependencyResolutionRequired,
    GenerationEngine,
)
from schemabuild.core.models.generation import GenerationConfig
from schemabuild.core.models.resolution import ResolutionContext


class MockBuildHost(BuildHost):
    """In-memory build host.

    Records every registered source root and every classpath request.
    Can be told that dependencies are not resolved yet.
    """

    def __init__(
        self,
        build_directory: Path = Path("build"),
        classpath: list[Path] | None = None,
    ):
        self._build_directory = build_directory
        self._classpath = list(classpath or [])
        self._resolution_error: str | None = None
        self.source_roots: list[Path] = []
        self.register_calls = 0
        self.classpath_calls = 0

    @property
    def name(self) -> str:
        return "mock"

    @property
    def build_directory(self) -> Path:
        return self._build_directory

    def fail_resolution(self, reason: str = "Dependencies have not been resolved") -> None:
        """Make compile_classpath_elements raise DependencyResolutionRequired."""
        self._resolution_error = reason

    def add_compile_source_root(self, path: Path) -> None:
        self.register_calls += 1
        if path not in self.source_roots:
            self.source_roots.append(path)

    def compile_classpath_elements(self) -> list[Path]:
        self.classpath_calls += 1
        if self._resolution_error is not None:
            raise DependencyResolutionRequired(self._resolution_error)
        return list(self._classpath)


class MockGenerationEngine(GenerationEngine):
    """Universal mock engine.

    By default every call succeeds and is logged. ``set_failure`` makes
    the next calls raise the given OSError.
    """

    def __init__(self, available: bool = True):
        self._available = available
        self._failure: OSError | None = None
        self._call_log: list[tuple[GenerationConfig, ResolutionContext]] = []

    @property
    def name(self) -> str:
        return "mock"

    @property
    def call_log(self) -> list[tuple[GenerationConfig, ResolutionContext]]:
        """Every (config, context) pair this engine has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def is_available(self) -> bool:
        return self._available

    def set_failure(self, error: OSError | None = None) -> None:
        """Configure generate() to raise ``error`` (default: a plain OSError)."""
        self._failure = error if error is not None else OSError("Mock failure")

    def generate(self, config: GenerationConfig, context: ResolutionContext) -> None:
        self._call_log.append((config, context))
        if self._failure is not None:
            raise self._failure

    def reset(self) -> None:
        """Clear call log and configured failure."""
        self._call_log.clear()
        self._failure = None
