"""
Domain models — pydantic types for schemabuild.

All models are re-exported here for convenient access:

    from schemabuild.core.models import GenerationConfig, BuildProject, BuildState
"""

from schemabuild.core.models.generation import (
    AnnotationStyle,
    GenerationConfig,
    GenerationParameters,
)
from schemabuild.core.models.project import BuildFile, BuildProject, EngineSettings
from schemabuild.core.models.resolution import ResolutionContext
from schemabuild.core.models.state import BuildState, RunRecord

__all__ = [
    # generation.py
    "AnnotationStyle",
    # project.py
    "BuildFile",
    "BuildProject",
    # state.py
    "BuildState",
    "EngineSettings",
    "GenerationConfig",
    "GenerationParameters",
    # resolution.py
    "ResolutionContext",
    "RunRecord",
]
