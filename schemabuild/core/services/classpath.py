"""
Project classpath — widen the resolution context with project artifacts.

Generated types may reference types the project defines itself or gets
from its dependencies. This service asks the build host for those
locations and layers them over the current context.

Failure policy: unresolved dependencies are not fatal. The failure is
logged and the caller keeps the context it already had, since most
schemas reference no external types at all.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from schemabuild.adapters.base import BuildHost, DependencyResolutionRequired
from schemabuild.core.models.resolution import ResolutionContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AugmentationResult:
    """Outcome of a classpath augmentation attempt.

    ``context`` is always usable: the widened context on success, the
    unchanged prior context on failure.
    """

    context: ResolutionContext
    augmented: bool
    reason: str = ""

    @classmethod
    def success(cls, context: ResolutionContext) -> AugmentationResult:
        return cls(context=context, augmented=True)

    @classmethod
    def failure(cls, previous: ResolutionContext, reason: str) -> AugmentationResult:
        return cls(context=previous, augmented=False, reason=reason)


def augment(context: ResolutionContext, host: BuildHost) -> AugmentationResult:
    """Layer the host's compile classpath over ``context``.

    Never raises DependencyResolutionRequired; any other exception from
    the host propagates.
    """
    try:
        elements = host.compile_classpath_elements()
    except DependencyResolutionRequired as e:
        logger.info(
            "Skipping addition of project artifacts, "
            "there appears to be a dependency resolution problem: %s",
            e,
        )
        return AugmentationResult.failure(context, str(e))

    for element in elements:
        logger.debug("Adding project artifact to classpath: %s", element)

    return AugmentationResult.success(context.extend(elements))
