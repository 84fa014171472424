"""
Error taxonomy — the failures an invocation can surface to the build.

    ExecutionFailure
    ├── ConfigurationError     invalid or missing configuration
    └── GenerationEngineError  I/O failure raised by the generation engine

Classpath problems are not part of this tree: build hosts raise
DependencyResolutionRequired, which the classpath service absorbs.
"""

from __future__ import annotations

from typing import Any


class ExecutionFailure(Exception):
    """Build-level failure: halts the build phase.

    When raised by GenerationInvoker, ``report`` holds the invocation
    report up to the failure.
    """

    report: Any = None


class ConfigurationError(ExecutionFailure):
    """Raised when generation configuration is invalid or missing."""


class GenerationEngineError(ExecutionFailure):
    """Raised when the generation engine fails with an I/O error.

    The original OSError is always chained as ``__cause__``.
    """
