"""
Project build host — the enclosing build backed by schemabuild.yml.

Source roots are recorded in BuildState (persisted by the caller).
Dependencies come from the project's virtualenv ``site-packages`` plus
any explicit ``dependencies`` paths; until those exist on disk the
dependencies count as unresolved.
"""

from __future__ import annotations

import logging
from pathlib import Path

from schemabuild.adapters.base import BuildHost, DependencyResolutionRequired
from schemabuild.core.models.project import BuildProject
from schemabuild.core.models.state import BuildState

logger = logging.getLogger(__name__)


def find_site_packages(virtualenv: Path) -> list[Path]:
    """Locate the ``site-packages`` directories of a virtualenv.

    Handles both the POSIX (lib/pythonX.Y/site-packages) and the
    Windows (Lib/site-packages) layouts.
    """
    found = sorted(p for p in virtualenv.glob("lib/python*/site-packages") if p.is_dir())
    windows = virtualenv / "Lib" / "site-packages"
    if windows.is_dir() and windows not in found:
        found.append(windows)
    return found


class ProjectBuildHost(BuildHost):
    """Build host for a project described by a BuildProject."""

    def __init__(self, project: BuildProject, state: BuildState | None = None):
        self._project = project
        self._state = state if state is not None else BuildState(project_name=project.name)

    @property
    def name(self) -> str:
        return "project"

    @property
    def project(self) -> BuildProject:
        return self._project

    @property
    def state(self) -> BuildState:
        return self._state

    @property
    def build_directory(self) -> Path:
        return self._project.build_path

    def add_compile_source_root(self, path: Path) -> None:
        if self._state.add_compile_source_root(str(path)):
            logger.info("Added compile source root: %s", path)
        else:
            logger.debug("Compile source root already registered: %s", path)

    def compile_classpath_elements(self) -> list[Path]:
        project = self._project
        elements = [project.resolve(d) for d in project.source_directories]

        if project.virtualenv is not None:
            venv = project.resolve(project.virtualenv)
            if not venv.is_dir():
                raise DependencyResolutionRequired(
                    f"Virtualenv {venv} does not exist; install the project dependencies first"
                )
            site_packages = find_site_packages(venv)
            if not site_packages:
                raise DependencyResolutionRequired(f"No site-packages found under {venv}")
            elements.extend(site_packages)

        for dep in project.dependencies:
            path = project.resolve(dep)
            if not path.exists():
                raise DependencyResolutionRequired(f"Dependency path not found: {path}")
            elements.append(path)

        return elements
