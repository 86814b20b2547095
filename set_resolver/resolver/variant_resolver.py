"""
Integer-variant resolvers — props whose first SET parameter selects one of
several models inside their package.

The variant is 1-based game data: variant N picks `candidates[N - 1]` from
the package's "model" category. Variant 0 (also the default when the
parameter is missing) and out-of-range values match nothing and fail.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from set_resolver.placement.models import PlacementObject

    from .context import ResolverContext

from set_resolver.exceptions import ParameterTypeError

from .base import TypeSetResolver
from .models import ResolvedInstance, ResolveResult

__all__ = [
    "VariantResolver",
    "GuillotineResolver",
    "ChaosEmeraldResolver",
    "AqaMagnetResolver",
    "ItemboxResolver",
]

_MODEL_CATEGORY = "model"


class VariantResolver(TypeSetResolver):
    """
    Base for package-backed variant props.
    Subclasses set `supported_types`, `candidates` and `label`.
    """

    priority: ClassVar[int] = 10
    candidates: ClassVar[tuple[str, ...]] = ()
    label: ClassVar[str] = "variant"

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
            return ResolveResult.failed(f"Could not find model category in {self.label} package")

        try:
            variant = placement.variant(0)
        except ParameterTypeError as exc:
            return ResolveResult.failed(f"Invalid {self.label} variant for {placement.type}: {exc}")

        location = context.get_variant_model(category, variant, *self.candidates)
        if location is None:
            return ResolveResult.failed(
                f"Could not find requested {self.label} model for variant {variant}"
            )

        return ResolveResult.with_instances(ResolvedInstance.create(
            context.model_path(location),
            placement.position,
            placement.rotation,
        ))


class GuillotineResolver(VariantResolver):
    supported_types = frozenset({"common_guillotine"})
    candidates = ("modelA", "modelB", "modelC")
    label = "guillotine"


class ChaosEmeraldResolver(VariantResolver):
    # white, sky, yellow, purple, green, blue, red
    supported_types = frozenset({"common_chaosemerald"})
    candidates = ("model_w", "model_s", "model_y", "model_p", "model_g", "model_b", "model_r")
    label = "chaos emerald"


class AqaMagnetResolver(VariantResolver):
    supported_types = frozenset({"aqa_magnet"})
    candidates = ("bofmodel", "bonmodel", "aofmodel", "rofmodel", "ronmodel")
    label = "magnet"


class ItemboxResolver(VariantResolver):
    supported_types = frozenset({"itemboxg", "itemboxa", "itembox_next"})
    candidates = (
        "model_ring5",
        "model_ring10",
        "model_ring20",
        "model_extend",
        "model_speedup",
        "model_gaugeup",
        "model_invincible",
        "model_barrier",
    )
    label = "itembox"
