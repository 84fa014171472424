"""
Adapter base — the contracts for the two external collaborators.

The invoker only talks to the outside world through these:

    BuildHost          the enclosing build (source roots, dependencies)
    GenerationEngine   the schema-to-code generator

Adapters raise only what their contract names. Anything else is a bug
and propagates.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from schemabuild.core.models.generation import GenerationConfig
from schemabuild.core.models.resolution import ResolutionContext


class DependencyResolutionRequired(Exception):
    """The build has not resolved the project's dependencies yet."""


class BuildHost(ABC):
    """The enclosing build, as seen from one generation invocation."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The host identifier (e.g., 'project', 'mock')."""

    @property
    @abstractmethod
    def build_directory(self) -> Path:
        """Root of the build output; the default output directory lives here."""

    @abstractmethod
    def add_compile_source_root(self, path: Path) -> None:
        """Register ``path`` as compile input. Idempotent."""

    @abstractmethod
    def compile_classpath_elements(self) -> list[Path]:
        """The project's own source trees followed by its dependencies.

        Raises:
            DependencyResolutionRequired: If dependencies are not resolved.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class GenerationEngine(ABC):
    """Abstract base class for generation engines.

    To create a new engine:
        1. Subclass GenerationEngine
        2. Implement name, is_available, generate
        3. Hand it to GenerationInvoker
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The engine identifier (e.g., 'command', 'mock')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the underlying generator can be launched.

        Should be fast and never raise.
        """

    @abstractmethod
    def generate(self, config: GenerationConfig, context: ResolutionContext) -> None:
        """Generate types for ``config.sources`` into ``config.output_directory``.

        Blocks until the generator finishes. ``context`` lists the extra
        locations generated code may reference types from.

        Raises:
            OSError: On any I/O failure, including a failed generator run.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
