"""
Generate use case — run one generation for the project.

Loads schemabuild.yml, binds parameters (with overrides), wires the
project build host and an engine, runs the invoker, and records the
outcome in .state/current.json.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from schemabuild.adapters.base import BuildHost, GenerationEngine
from schemabuild.adapters.build.project import ProjectBuildHost
from schemabuild.core.config.loader import (
    build_parameters,
    find_build_file,
    load_build_file,
    parse_overrides,
)
from schemabuild.core.engine.invoker import GenerationInvoker, InvocationReport
from schemabuild.core.errors import ConfigurationError, ExecutionFailure
from schemabuild.core.models.project import BuildProject
from schemabuild.core.models.state import BuildState, RunRecord
from schemabuild.core.persistence.state_file import default_state_path, load_state, save_state

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of the generate use case."""

    report: InvocationReport | None = None
    project: BuildProject | None = None
    project_root: Path | None = None
    operation_id: str = ""
    state_saved: bool = False
    error: str | None = None
    cause: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        result: dict = {"operation_id": self.operation_id}
        if self.error:
            result["error"] = self.error
            if self.cause:
                result["cause"] = self.cause
        if self.project is not None:
            result["project_name"] = self.project.name
            result["project_root"] = str(self.project_root)
        if self.report is not None:
            result["report"] = self.report.to_dict()
        result["state_saved"] = self.state_saved
        return result


def generate_operation_id() -> str:
    """Generate a unique operation ID."""
    now = datetime.now(UTC).strftime("%Y%m%d-%H%M%S")
    short = uuid.uuid4().hex[:6]
    return f"gen-{now}-{short}"


def _make_engine(command: str, cwd: Path | None, mock_mode: bool) -> GenerationEngine:
    if mock_mode:
        from schemabuild.adapters.mock import MockGenerationEngine

        return MockGenerationEngine()

    from schemabuild.adapters.shell.command import CommandGenerationEngine

    return CommandGenerationEngine(command, cwd=cwd)


def _record_run(
    state: BuildState,
    operation_id: str,
    started_at: str,
    report: InvocationReport | None,
    error: str | None,
) -> None:
    record = RunRecord(operation_id=operation_id, started_at=started_at, error=error)
    if report is not None:
        record.status = report.status
        record.duration_ms = report.duration_ms
        record.classpath_augmented = bool(report.augmentation and report.augmentation.augmented)
        if report.config is not None:
            record.sources = [str(s) for s in report.config.sources]
            record.output_directory = str(report.config.output_directory)
    else:
        record.status = "failed"
    state.last_run = record


def run_generate(
    config_path: Path | None = None,
    defines: list[str] | tuple[str, ...] = (),
    mock_mode: bool = False,
    engine: GenerationEngine | None = None,
    host: BuildHost | None = None,
    save: bool = True,
) -> GenerateResult:
    """Run code generation for the project.

    Args:
        config_path: Optional explicit path to schemabuild.yml.
        defines: ``name=value`` parameter overrides.
        mock_mode: If True, use the mock engine (nothing is generated).
        engine: Optional pre-built engine (overrides mock_mode).
        host: Optional pre-built build host (state is then not persisted).
        save: Whether to write .state/current.json.

    Returns:
        GenerateResult; ``error`` is set when the invocation failed.
    """
    result = GenerateResult(operation_id=generate_operation_id())
    started_at = datetime.now(UTC).isoformat()

    # ── Load build config ────────────────────────────────────────
    try:
        if config_path is None:
            config_path = find_build_file()
        build_file = load_build_file(config_path)
        parameters = build_parameters(build_file.generate, parse_overrides(defines))
    except ConfigurationError as e:
        result.error = str(e)
        return result

    project = build_file.project
    result.project = project
    result.project_root = project.root
    parameters = parameters.resolved_against(project.root)

    # ── Wire collaborators ───────────────────────────────────────
    state_path = default_state_path(project.root)
    state: BuildState | None = None
    if host is None:
        state = load_state(state_path)
        state.project_name = project.name
        host = ProjectBuildHost(project, state)

    if engine is None:
        engine_cwd = project.resolve(build_file.engine.cwd) if build_file.engine.cwd else project.root
        engine = _make_engine(build_file.engine.command, engine_cwd, mock_mode)

    # ── Invoke ───────────────────────────────────────────────────
    invoker = GenerationInvoker(host, engine)
    try:
        result.report = invoker.execute(parameters)
    except ExecutionFailure as e:
        result.error = str(e)
        result.report = e.report
        if e.__cause__ is not None:
            result.cause = str(e.__cause__)
            logger.debug("Generation failed", exc_info=e)

    # ── Persist state ────────────────────────────────────────────
    if state is not None and save:
        _record_run(state, result.operation_id, started_at, result.report, result.error)
        try:
            save_state(state, state_path)
            result.state_saved = True
        except OSError as e:
            logger.warning("Could not save build state: %s", e)

    return result
