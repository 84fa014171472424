"""
Configuration loader — reads schemabuild.yml into domain models.

It reads YAML, validates the project and engine sections against
pydantic schemas, and turns the ``generate:`` section (plus any
``-D name=value`` overrides) into GenerationParameters.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from schemabuild.core.errors import ConfigurationError
from schemabuild.core.models.generation import GenerationParameters
from schemabuild.core.models.project import BuildFile

logger = logging.getLogger(__name__)

# Default config filename
BUILD_CONFIG_FILE = "schemabuild.yml"

# Optional prefix on -D property names: -Dschemabuild.skip=true
PROPERTY_PREFIX = "schemabuild."


def find_build_file(start_dir: Path | None = None) -> Path | None:
    """Search for schemabuild.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to schemabuild.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / BUILD_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_build_file(path: Path | None = None) -> BuildFile:
    """Load and validate a build file.

    The project root defaults to the directory holding the file; a
    relative ``project.root`` is anchored there too.

    Args:
        path: Explicit path to schemabuild.yml. If None, searches upward.

    Raises:
        ConfigurationError: If the file is missing or invalid.
    """
    if path is None:
        path = find_build_file()

    if path is None:
        raise ConfigurationError(
            f"No {BUILD_CONFIG_FILE} found. Create one, or specify --config."
        )

    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")

    logger.debug("Loading build config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        build_file = BuildFile.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid build configuration: {e}") from e

    base = path.parent.resolve()
    project = build_file.project
    project.root = project.root if project.root.is_absolute() else (base / project.root).resolve()
    if not project.name:
        project.name = project.root.name

    logger.info("Loaded build '%s' from %s", project.name, path)
    return build_file


def parse_overrides(defines: list[str] | tuple[str, ...]) -> dict[str, str]:
    """Parse ``name=value`` property overrides.

    The ``schemabuild.`` prefix is optional. Names may be camelCase or
    snake_case.

    Raises:
        ConfigurationError: If an entry has no ``=`` or an empty name.
    """
    overrides: dict[str, str] = {}
    for define in defines:
        name, sep, value = define.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ConfigurationError(f"Invalid property override (expected name=value): {define}")
        if name.startswith(PROPERTY_PREFIX):
            name = name[len(PROPERTY_PREFIX):]
        overrides[name] = value
    return overrides


def build_parameters(
    raw: dict[str, Any],
    overrides: dict[str, str] | None = None,
) -> GenerationParameters:
    """Merge ``overrides`` over ``raw`` and bind GenerationParameters.

    Keys are normalized to snake_case first, so ``sourceDirectory`` in
    the file and ``source_directory`` on the command line are the same
    parameter and the override wins.

    Raises:
        ConfigurationError: On unknown parameters or uncoercible values.
    """
    merged: dict[str, Any] = {to_snake(k): v for k, v in raw.items()}
    for key, value in (overrides or {}).items():
        merged[to_snake(key)] = value

    try:
        return GenerationParameters.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid generation parameters: {e}") from e
