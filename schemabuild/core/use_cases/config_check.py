"""
Config check use case — validate schemabuild.yml without generating.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from schemabuild.adapters.shell.command import CommandGenerationEngine
from schemabuild.core.config.loader import (
    build_parameters,
    find_build_file,
    load_build_file,
    parse_overrides,
)
from schemabuild.core.config.validator import (
    build_generation_config,
    validate_annotation_style,
)
from schemabuild.core.errors import ConfigurationError
from schemabuild.core.models.generation import GenerationConfig
from schemabuild.core.models.project import BuildProject


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    project: BuildProject | None = None
    config_path: Path | None = None
    config: GenerationConfig | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "project_name": self.project.name if self.project else None,
            "annotation_style": str(self.config.annotation_style) if self.config else None,
            "sources": [str(s) for s in self.config.sources] if self.config else [],
        }


def check_config(
    config_path: Path | None = None,
    defines: list[str] | tuple[str, ...] = (),
) -> ConfigCheckResult:
    """Validate build configuration and report issues.

    Args:
        config_path: Optional explicit path to schemabuild.yml.
        defines: ``name=value`` parameter overrides.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_build_file()
    if config_path is None:
        result.errors.append("No schemabuild.yml found.")
        return result
    result.config_path = config_path

    try:
        build_file = load_build_file(config_path)
        parameters = build_parameters(build_file.generate, parse_overrides(defines))
    except ConfigurationError as e:
        result.errors.append(str(e))
        return result

    project = build_file.project
    result.project = project
    parameters = parameters.resolved_against(project.root)

    try:
        validate_annotation_style(parameters.annotation_style)
    except ConfigurationError as e:
        result.errors.append(str(e))
        return result

    if parameters.skip:
        result.warnings.append("skip is enabled: generation will not run.")

    try:
        config = build_generation_config(parameters, project.build_path)
        result.config = config
    except ConfigurationError as e:
        result.errors.append(str(e))
        return result

    # Semantic checks
    for source in config.sources:
        if not source.exists():
            result.warnings.append(f"Source path does not exist: {source}")

    if parameters.source_directory is not None and parameters.source_paths:
        result.warnings.append("Both sourceDirectory and sourcePaths set: sourcePaths is ignored.")

    if not build_file.engine.command:
        result.warnings.append("No engine.command configured: only --mock runs will succeed.")
    elif not CommandGenerationEngine(build_file.engine.command).is_available():
        result.warnings.append(f"Generator command not found on PATH: {build_file.engine.command}")

    if project.virtualenv is not None and not project.resolve(project.virtualenv).is_dir():
        result.warnings.append(
            f"Virtualenv {project.virtualenv} does not exist: project dependencies "
            "will not be added to the classpath."
        )

    result.valid = len(result.errors) == 0
    return result
