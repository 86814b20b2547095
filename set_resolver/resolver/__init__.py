"""
Model resolution strategies — turn SET placement objects into renderable
model instances.

Each resolver claims a set of object types and returns a ResolveResult; the
ResolverRegistry dispatches by priority and falls back to PackageResolver.
"""

from .base import ModelResolver, TypeSetResolver
from .composite_resolver import RevolvingNetResolver
from .context import ResolverContext
from .enemy_resolver import EnemyResolver
from .factory import DEFAULT_RESOLVERS, build_default_registry
from .gizmo_resolver import GizmoResolver
from .models import ResolvedInstance, ResolveResult, ResolveStatus
from .object_resolver import ObjectResolver
from .package_resolver import PackageResolver
from .registry import ResolverRegistry
from .variant_resolver import (
    AqaMagnetResolver,
    ChaosEmeraldResolver,
    GuillotineResolver,
    ItemboxResolver,
    VariantResolver,
)
from .vehicle_resolver import VehicleResolver

__all__ = [
    "ModelResolver",
    "TypeSetResolver",
    "ResolverContext",
    "ResolverRegistry",
    "build_default_registry",
    "DEFAULT_RESOLVERS",
    "ResolvedInstance",
    "ResolveResult",
    "ResolveStatus",
    "PackageResolver",
    "VariantResolver",
    "GuillotineResolver",
    "ChaosEmeraldResolver",
    "AqaMagnetResolver",
    "ItemboxResolver",
    "VehicleResolver",
    "EnemyResolver",
    "RevolvingNetResolver",
    "GizmoResolver",
    "ObjectResolver",
]
