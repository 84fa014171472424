"""
Build file models — the project section and the generator command.

Loaded from schemabuild.yml. The ``generate:`` section stays a raw
mapping here; it is merged with ``-D`` overrides before it becomes
GenerationParameters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class BuildProject(BaseModel):
    """The enclosing build's view of the project being built."""

    name: str = ""
    root: Path = Path(".")
    build_directory: Path = Path("build")
    source_directories: list[Path] = Field(default_factory=lambda: [Path("src")])
    virtualenv: Path | None = None
    dependencies: list[Path] = Field(default_factory=list)

    def resolve(self, path: Path) -> Path:
        """Anchor a project-relative path at the project root."""
        return path if path.is_absolute() else self.root / path

    @property
    def build_path(self) -> Path:
        return self.resolve(self.build_directory)


class EngineSettings(BaseModel):
    """How to launch the external generation engine."""

    command: str = ""
    cwd: Path | None = None


class BuildFile(BaseModel):
    """Root of schemabuild.yml."""

    version: int = 1
    project: BuildProject = Field(default_factory=BuildProject)
    generate: dict[str, Any] = Field(default_factory=dict)
    engine: EngineSettings = Field(default_factory=EngineSettings)

    @field_validator("generate", mode="before")
    @classmethod
    def _empty_section(cls, value: Any) -> Any:
        # "generate:" with nothing under it loads as None
        return {} if value is None else value
