"""
PackageResolver — generic fallback for every object type.

Looks the type up in the static package map, opens the first package that
exists and picks the file called "model" from its "model" category.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from set_resolver.placement.models import PlacementObject

    from .context import ResolverContext

from .base import ModelResolver
from .models import ResolvedInstance, ResolveResult

__all__ = ["PackageResolver"]

logger = logging.getLogger(__name__)

_MODEL_CATEGORY = "model"
_MODEL_FILE = "model"


class PackageResolver(ModelResolver):
    """Unconditional fallback; claims every type."""

    priority: ClassVar[int] = -20

    def can_resolve(self, object_type: str) -> bool:
        return True

    def resolve(
        self,
        context: "ResolverContext",
        placement: "PlacementObject",
    ) -> ResolveResult:
        package = context.find_package_for_type(placement.type)
        if package is None:
            return ResolveResult.failed(f"Package not found for {placement.type}")

        category = package.category(_MODEL_CATEGORY)
        if category is None:
            logger.debug("%s: package has no model category", placement.type)
            return ResolveResult.empty()

        model_file = category.file(_MODEL_FILE)
        if model_file is None or not model_file.location:
            logger.debug("%s: model category has no 'model' file", placement.type)
            return ResolveResult.empty()

        return ResolveResult.with_instances(ResolvedInstance.create(
            context.model_path(model_file.location),
            placement.position,
            placement.rotation,
        ))
