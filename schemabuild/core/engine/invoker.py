"""
Generation invoker — one build-phase execution, start to finish.

Flow:
    validate style → skip? → validate config → register source root →
    augment classpath → generate → done

Every step runs at most once. Configuration problems and engine I/O
failures raise ExecutionFailure subclasses; a classpath problem only
degrades the run.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import StrEnum

from schemabuild.adapters.base import BuildHost, GenerationEngine
from schemabuild.core.config.validator import (
    build_generation_config,
    validate_annotation_style,
)
from schemabuild.core.errors import ExecutionFailure, GenerationEngineError
from schemabuild.core.models.generation import GenerationConfig, GenerationParameters
from schemabuild.core.models.resolution import ResolutionContext
from schemabuild.core.services.classpath import AugmentationResult, augment

logger = logging.getLogger(__name__)


class InvocationState(StrEnum):
    """States of one invocation, in the order they can be visited."""

    START = "start"
    STYLE_VALIDATED = "style_validated"
    SKIPPED = "skipped"
    CONFIG_VALIDATED = "config_validated"
    SOURCE_ROOT_REGISTERED = "source_root_registered"
    CLASSPATH_AUGMENTED = "classpath_augmented"
    GENERATED = "generated"
    DONE = "done"
    FAILED = "failed"


@dataclass
class InvocationReport:
    """What one invocation did."""

    states: list[InvocationState] = field(default_factory=lambda: [InvocationState.START])
    config: GenerationConfig | None = None
    context: ResolutionContext = field(default_factory=ResolutionContext)
    augmentation: AugmentationResult | None = None
    duration_ms: int = 0

    @property
    def state(self) -> InvocationState:
        return self.states[-1]

    @property
    def skipped(self) -> bool:
        return InvocationState.SKIPPED in self.states

    @property
    def status(self) -> str:
        if self.state == InvocationState.FAILED:
            return "failed"
        if self.skipped:
            return "skipped"
        return "ok"

    def advance(self, state: InvocationState) -> None:
        logger.debug("%s → %s", self.state, state)
        self.states.append(state)

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "states": [str(s) for s in self.states],
            "config": self.config.to_payload() if self.config else None,
            "classpath_augmented": bool(self.augmentation and self.augmentation.augmented),
            "classpath": list(self.context.all_paths),
            "duration_ms": self.duration_ms,
        }


def should_skip(flag: bool) -> bool:
    return bool(flag)


class GenerationInvoker:
    """Run one generation against a build host and an engine.

    Args:
        host: The enclosing build.
        engine: The generation engine.
    """

    def __init__(self, host: BuildHost, engine: GenerationEngine):
        self._host = host
        self._engine = engine

    def execute(
        self,
        parameters: GenerationParameters,
        context: ResolutionContext | None = None,
    ) -> InvocationReport:
        """Execute the invocation.

        Args:
            parameters: Raw bound parameters.
            context: Resolution context to start from (default: empty).

        Returns:
            InvocationReport with status ``ok`` or ``skipped``.

        Raises:
            ConfigurationError: Bad annotation style or no sources.
            GenerationEngineError: The engine raised an OSError.
        """
        report = InvocationReport(context=context or ResolutionContext())
        start = time.monotonic()
        try:
            self._run(parameters, report)
        except ExecutionFailure as e:
            report.advance(InvocationState.FAILED)
            e.report = report
            raise
        finally:
            report.duration_ms = int((time.monotonic() - start) * 1000)
        return report

    def _run(self, parameters: GenerationParameters, report: InvocationReport) -> None:
        # Style is checked before skip: a skipped build with a bad style still fails
        validate_annotation_style(parameters.annotation_style)
        report.advance(InvocationState.STYLE_VALIDATED)

        if should_skip(parameters.skip):
            logger.info("Generation skipped (skip=true)")
            report.advance(InvocationState.SKIPPED)
            report.advance(InvocationState.DONE)
            return

        config = build_generation_config(parameters, self._host.build_directory)
        report.config = config
        report.advance(InvocationState.CONFIG_VALIDATED)

        if parameters.add_compile_source_root:
            self._host.add_compile_source_root(config.output_directory)
            report.advance(InvocationState.SOURCE_ROOT_REGISTERED)

        result = augment(report.context, self._host)
        report.augmentation = result
        report.context = result.context
        if result.augmented:
            report.advance(InvocationState.CLASSPATH_AUGMENTED)

        logger.info(
            "Generating from %d source(s) with %s engine → %s",
            len(config.sources),
            self._engine.name,
            config.output_directory,
        )
        try:
            self._engine.generate(config, report.context)
        except OSError as e:
            report.advance(InvocationState.GENERATED)
            message = "Error generating classes from JSON Schema file(s)"
            if config.first_source is not None:
                message = f"{message} {config.first_source}"
            raise GenerationEngineError(message) from e

        report.advance(InvocationState.GENERATED)
        report.advance(InvocationState.DONE)
