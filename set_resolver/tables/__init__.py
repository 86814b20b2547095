from .models import Actor, ObjectPhysicsParameter, PathObjParameter, ReferenceTables
from .packages_map import (
    NON_VISUAL_TYPES,
    PACKAGE_GROUPS,
    PackageGroup,
    all_object_types,
    package_entries_for,
    package_paths_for,
)

__all__ = [
    "Actor",
    "ObjectPhysicsParameter",
    "PathObjParameter",
    "ReferenceTables",
    "PackageGroup",
    "PACKAGE_GROUPS",
    "NON_VISUAL_TYPES",
    "package_entries_for",
    "package_paths_for",
    "all_object_types",
]
