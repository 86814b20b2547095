"""
set-resolver — resolves stage placement objects into renderable model
instances through a prioritized set of resolver strategies.

Usage::

    from set_resolver import ResolverContext, SceneLoader

    context = ResolverContext.create(container, tables)
    report = SceneLoader().load(context, objects)
"""

from set_resolver.config import ResolverConfig
from set_resolver.placement.models import Parameter, ParamType, PlacementObject
from set_resolver.resolver import (
    ResolvedInstance,
    ResolveResult,
    ResolverContext,
    ResolverRegistry,
    build_default_registry,
)
from set_resolver.scene import SceneLoader, SceneLoadReport
from set_resolver.transform import Quaternion, Vector3

__version__ = "0.1.0"

__all__ = [
    "ResolverConfig",
    "Parameter",
    "ParamType",
    "PlacementObject",
    "ResolvedInstance",
    "ResolveResult",
    "ResolverContext",
    "ResolverRegistry",
    "build_default_registry",
    "SceneLoader",
    "SceneLoadReport",
    "Quaternion",
    "Vector3",
]
