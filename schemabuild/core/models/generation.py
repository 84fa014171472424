"""
Generation models — the raw parameter surface and the validated snapshot.

GenerationParameters is what the build binds: loosely typed, every field
optional or defaulted, camelCase or snake_case keys. GenerationConfig is
what the engine receives: typed, complete, frozen.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class AnnotationStyle(StrEnum):
    """Serialization annotations the engine embeds in generated types."""

    JACKSON = "jackson"      # alias of JACKSON2
    JACKSON1 = "jackson1"
    JACKSON2 = "jackson2"
    NONE = "none"

    @property
    def canonical(self) -> AnnotationStyle:
        """The concrete style, with the bare 'jackson' alias resolved."""
        if self is AnnotationStyle.JACKSON:
            return AnnotationStyle.JACKSON2
        return self


class GenerationParameters(BaseModel):
    """Raw generation parameters as bound from the build file.

    Values may arrive as strings (from ``-D`` overrides); pydantic coerces
    them to booleans and paths. Nothing here is validated against the
    generation contract yet, see ``build_generation_config``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    output_directory: Path | None = None
    source_directory: Path | None = None
    source_paths: list[Path] | None = None
    target_package: str = ""
    generate_builders: bool = False
    use_primitives: bool = False
    add_compile_source_root: bool = True
    skip: bool = False
    property_word_delimiters: str = ""
    use_long_integers: bool = False
    include_hashcode_and_equals: bool = True
    include_to_string: bool = True
    annotation_style: str = "jackson"

    @field_validator("source_paths", mode="before")
    @classmethod
    def _split_source_paths(cls, value: Any) -> Any:
        # "-D sourcePaths=a.json,b.json" arrives as one string
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("target_package", "property_word_delimiters", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("output_directory", "source_directory", mode="before")
    @classmethod
    def _empty_to_unset(cls, value: Any) -> Any:
        # "-D sourceDirectory=" clears the parameter instead of meaning "."
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    def resolved_against(self, base_dir: Path) -> GenerationParameters:
        """Return a copy with relative paths anchored at ``base_dir``."""

        def _anchor(path: Path | None) -> Path | None:
            if path is None or path.is_absolute():
                return path
            return base_dir / path

        update: dict[str, Any] = {
            "output_directory": _anchor(self.output_directory),
            "source_directory": _anchor(self.source_directory),
        }
        if self.source_paths is not None:
            update["source_paths"] = [_anchor(p) for p in self.source_paths]
        return self.model_copy(update=update)


class GenerationConfig(BaseModel):
    """Validated, immutable configuration handed to the generation engine."""

    model_config = ConfigDict(frozen=True)

    output_directory: Path
    sources: tuple[Path, ...]
    target_package: str = ""
    generate_builders: bool = False
    use_primitives: bool = False
    property_word_delimiters: tuple[str, ...] = ()
    use_long_integers: bool = False
    include_hashcode_and_equals: bool = True
    include_to_string: bool = True
    annotation_style: AnnotationStyle = AnnotationStyle.JACKSON

    @property
    def first_source(self) -> Path | None:
        return self.sources[0] if self.sources else None

    @field_serializer("annotation_style", when_used="json")
    def _serialize_style(self, style: AnnotationStyle) -> str:
        return style.canonical.value

    def to_payload(self) -> dict[str, Any]:
        """JSON-safe form, as written to an engine's stdin.

        The bare "jackson" style is sent as "jackson2".
        """
        return self.model_dump(mode="json")
