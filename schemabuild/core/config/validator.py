"""
Configuration validator — raw parameters in, GenerationConfig out.

Pure functions: no I/O, no logging side effects beyond debug output.
Each check raises ConfigurationError naming the offending value.
"""

from __future__ import annotations

import logging
from pathlib import Path

from schemabuild.core.errors import ConfigurationError
from schemabuild.core.models.generation import (
    AnnotationStyle,
    GenerationConfig,
    GenerationParameters,
)

logger = logging.getLogger(__name__)

# Appended to the build directory when no outputDirectory is given
DEFAULT_OUTPUT_SUBDIR = "generated"


def validate_annotation_style(raw: str | None) -> AnnotationStyle:
    """Match ``raw`` case-insensitively against the supported styles.

    Raises:
        ConfigurationError: If ``raw`` is not a known style.
    """
    if raw is None:
        raise ConfigurationError("Not a valid annotation style: None")
    try:
        return AnnotationStyle[raw.upper()]
    except KeyError:
        raise ConfigurationError(f"Not a valid annotation style: {raw}") from None


def validate_source_specification(
    source_directory: Path | None,
    source_paths: list[Path] | None,
) -> tuple[Path, ...]:
    """Pick the schema sources.

    ``source_directory`` wins when set, even if ``source_paths`` is also
    given. Otherwise ``source_paths`` is used as-is: order kept,
    duplicates kept.

    Raises:
        ConfigurationError: If neither is provided.
    """
    if source_directory is not None:
        return (source_directory,)
    if source_paths is None:
        raise ConfigurationError("One of sourceDirectory or sourcePaths must be provided")
    return tuple(source_paths)


def derive_word_delimiters(raw: str) -> tuple[str, ...]:
    """Split a delimiter string into its characters ("" gives ())."""
    return tuple(raw)


def build_generation_config(
    parameters: GenerationParameters,
    build_directory: Path,
) -> GenerationConfig:
    """Validate ``parameters`` and freeze them into a GenerationConfig.

    Args:
        parameters: Raw bound parameters.
        build_directory: Build output root; the default output directory
            is ``<build_directory>/generated``.

    Raises:
        ConfigurationError: On a bad annotation style or missing sources.
    """
    style = validate_annotation_style(parameters.annotation_style)
    sources = validate_source_specification(
        parameters.source_directory, parameters.source_paths
    )
    output_directory = parameters.output_directory or build_directory / DEFAULT_OUTPUT_SUBDIR

    config = GenerationConfig(
        output_directory=output_directory,
        sources=sources,
        target_package=parameters.target_package,
        generate_builders=parameters.generate_builders,
        use_primitives=parameters.use_primitives,
        property_word_delimiters=derive_word_delimiters(parameters.property_word_delimiters),
        use_long_integers=parameters.use_long_integers,
        include_hashcode_and_equals=parameters.include_hashcode_and_equals,
        include_to_string=parameters.include_to_string,
        annotation_style=style,
    )
    logger.debug(
        "Generation config: %d source(s) → %s (style=%s)",
        len(config.sources),
        config.output_directory,
        config.annotation_style,
    )
    return config
