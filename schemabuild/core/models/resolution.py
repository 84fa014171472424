"""
Resolution context — where generated code may look up project types.

A context is an immutable chain of search paths. Widening it returns a
new child context; the parent is never touched, and nothing here writes
to ``sys.path``. Engines receive the context explicitly and decide how
to apply it (a subprocess gets it as ``PYTHONPATH``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ResolutionContext:
    """An ordered set of search paths, layered over an optional parent."""

    paths: tuple[str, ...] = ()
    parent: ResolutionContext | None = None

    def extend(self, paths: list[Path] | list[str]) -> ResolutionContext:
        """Return a child context with ``paths`` searched before ours."""
        return ResolutionContext(paths=tuple(str(p) for p in paths), parent=self)

    @property
    def all_paths(self) -> tuple[str, ...]:
        """Own paths first, then the parent chain; first occurrence wins."""
        seen: dict[str, None] = {}
        ctx: ResolutionContext | None = self
        while ctx is not None:
            for path in ctx.paths:
                seen.setdefault(path, None)
            ctx = ctx.parent
        return tuple(seen)

    def pythonpath(self, inherited: str | None = None) -> str:
        """Render as a ``PYTHONPATH`` value, appending ``inherited`` if set."""
        parts = list(self.all_paths)
        if inherited:
            parts.extend(p for p in inherited.split(os.pathsep) if p and p not in parts)
        return os.pathsep.join(parts)
