"""
VehicleResolver — rideable gadgets.

Vehicle packages live in scripts.arc rather than the object archive, so the
model path is built directly from the variant instead of via a package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from set_resolver.placement.models import PlacementObject

    from .context import ResolverContext

from set_resolver.exceptions import ParameterTypeError

from .base import TypeSetResolver
from .models import ResolvedInstance, ResolveResult

__all__ = ["VehicleResolver"]

# 1-based variant → gadget name
_VEHICLES = ("Jeep", "Bike", "Hover", "Glider")


class VehicleResolver(TypeSetResolver):

    supported_types = frozenset({"vehicle"})
    priority: ClassVar[int] = 10

    def resolve(
        self,
        context: "ResolverContext",
        placement: "PlacementObject",
    ) -> ResolveResult:
        try:
            variant = placement.variant(0)
        except ParameterTypeError as exc:
            return ResolveResult.failed(f"Invalid vehicle variant: {exc}")

        if not 1 <= variant <= len(_VEHICLES):
            return ResolveResult.failed(f"Unknown vehicle variant {variant}")

        vehicle = _VEHICLES[variant - 1]
        return ResolveResult.with_instances(ResolvedInstance.create(
            context.model_path(f"object/Common/vehicle/Gadget_{vehicle}.xno"),
            placement.position,
            placement.rotation,
        ))
