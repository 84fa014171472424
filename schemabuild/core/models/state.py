"""
BuildState — what the enclosing build remembers between invocations.

Serialized to .state/current.json. Holds the registered compile source
roots and a summary of the last generation run. Disposable: delete it
and the next run starts fresh.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class RunRecord(BaseModel):
    """Summary of the last generation run."""

    operation_id: str = ""
    started_at: str = ""
    status: str = ""  # ok, skipped, failed
    sources: list[str] = Field(default_factory=list)
    output_directory: str = ""
    classpath_augmented: bool = False
    duration_ms: int = 0
    error: str | None = None


class BuildState(BaseModel):
    """Root state model — serialized to .state/current.json."""

    schema_version: int = 1

    project_name: str = ""

    created_at: str = Field(default_factory=_now_iso)
    updated_at: str = Field(default_factory=_now_iso)

    compile_source_roots: list[str] = Field(default_factory=list)

    last_run: RunRecord = Field(default_factory=RunRecord)

    metadata: dict[str, Any] = Field(default_factory=dict)

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = _now_iso()

    def add_compile_source_root(self, path: str) -> bool:
        """Register a source root. Returns False if it was already there."""
        if path in self.compile_source_roots:
            return False
        self.compile_source_roots.append(path)
        return True
