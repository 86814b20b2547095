"""GizmoResolver — object types with no visual representation."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from set_resolver.placement.models import PlacementObject

    from .context import ResolverContext

from set_resolver.tables.packages_map import NON_VISUAL_TYPES

from .base import TypeSetResolver
from .models import ResolveResult

__all__ = ["GizmoResolver"]


class GizmoResolver(TypeSetResolver):
    """Always skips; outranks the generic resolvers so nothing else is tried."""

    supported_types = NON_VISUAL_TYPES
    priority: ClassVar[int] = 20

    def resolve(
        self,
        context: "ResolverContext",
        placement: "PlacementObject",
    ) -> ResolveResult:
        return ResolveResult.skipped()
