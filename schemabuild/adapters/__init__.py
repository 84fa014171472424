"""Adapters — bindings for the build host and the generation engine.

Public re-exports for convenient access.
"""

from schemabuild.adapters.base import (
    BuildHost,
    DependencyResolutionRequired,
    GenerationEngine,
)
from schemabuild.adapters.mock import MockBuildHost, MockGenerationEngine

__all__ = [
    "BuildHost",
    "DependencyResolutionRequired",
    "GenerationEngine",
    "MockBuildHost",
    "MockGenerationEngine",
]
