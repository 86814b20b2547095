"""Factory function — builds the registry with the standard resolver set."""

from __future__ import annotations

from .composite_resolver import RevolvingNetResolver
from .enemy_resolver import EnemyResolver
from .gizmo_resolver import GizmoResolver
from .object_resolver import ObjectResolver
from .package_resolver import PackageResolver
from .registry import ResolverRegistry
from .variant_resolver import (
    AqaMagnetResolver,
    ChaosEmeraldResolver,
    GuillotineResolver,
    ItemboxResolver,
)
from .vehicle_resolver import VehicleResolver

__all__ = ["build_default_registry", "DEFAULT_RESOLVERS"]

# Registration order; the registry re-sorts by priority, keeping this order
# among equal priorities.
DEFAULT_RESOLVERS = (
    GizmoResolver,
    ObjectResolver,
    GuillotineResolver,
    RevolvingNetResolver,
    ItemboxResolver,
    ChaosEmeraldResolver,
    AqaMagnetResolver,
    VehicleResolver,
    EnemyResolver,
)


def build_default_registry() -> ResolverRegistry:
    """
    Return a new ResolverRegistry holding one instance of each standard
    resolver, with PackageResolver as the fallback.
    """
    return ResolverRegistry(
        resolvers=[resolver_cls() for resolver_cls in DEFAULT_RESOLVERS],
        fallback=PackageResolver(),
    )
