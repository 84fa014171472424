"""
Command engine — run an external generator as a subprocess.

The generator receives the GenerationConfig as JSON on stdin and the
resolution context as ``PYTHONPATH``. A non-zero exit is reported as
an OSError, the engine contract's only failure type.
"""

from __future__ import annotations

import json
import logging
import os
import shlex
import shutil
import subprocess
import time
from pathlib import Path

from schemabuild.adapters.base import GenerationEngine
from schemabuild.core.models.generation import GenerationConfig
from schemabuild.core.models.resolution import ResolutionContext

logger = logging.getLogger(__name__)


class CommandGenerationEngine(GenerationEngine):
    """Launch a generator command and wait for it.

    Args:
        command: Command line of the generator (split with shlex).
        cwd: Working directory for the generator (default: inherit).
    """

    def __init__(self, command: str, cwd: Path | None = None):
        self._command = command
        self._cwd = cwd

    @property
    def name(self) -> str:
        return "command"

    @property
    def command(self) -> str:
        return self._command

    def _argv(self) -> list[str]:
        return shlex.split(self._command)

    def is_available(self) -> bool:
        try:
            argv = self._argv()
        except ValueError:
            return False
        return bool(argv) and shutil.which(argv[0]) is not None

    def generate(self, config: GenerationConfig, context: ResolutionContext) -> None:
        try:
            argv = self._argv()
        except ValueError as e:
            raise OSError(f"Cannot parse generator command {self._command!r}: {e}") from e
        if not argv:
            raise OSError("No generator command configured (engine.command)")

        env = dict(os.environ)
        pythonpath = context.pythonpath(inherited=env.get("PYTHONPATH"))
        if pythonpath:
            env["PYTHONPATH"] = pythonpath

        payload = json.dumps(config.to_payload())

        logger.debug("Executing: %s (cwd=%s)", self._command, self._cwd or ".")
        start = time.monotonic()

        # FileNotFoundError / PermissionError propagate: both are OSError
        result = subprocess.run(
            argv,
            input=payload,
            cwd=self._cwd,
            env=env,
            capture_output=True,
            text=True,
        )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        for line in result.stdout.splitlines():
            logger.debug("[%s] %s", argv[0], line)

        if result.returncode != 0:
            stderr = result.stderr.strip()
            raise OSError(stderr or f"Generator exited with code {result.returncode}")

        logger.info("Generator finished in %dms → %s", elapsed_ms, config.output_directory)
