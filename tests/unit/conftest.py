"""
Shared fixtures for the unit tests.

No real game archives required — packages and models are stored as JSON in
a MemoryObjectContainer at the paths the resolvers will look them up at.
"""

import pytest

from set_resolver.assets.container import MemoryObjectContainer
from set_resolver.config import ResolverConfig
from set_resolver.placement.models import Parameter, PlacementObject
from set_resolver.resolver.context import ResolverContext
from set_resolver.tables.models import (
    Actor,
    ObjectPhysicsParameter,
    PathObjParameter,
    ReferenceTables,
)
from set_resolver.tables.packages_map import package_paths_for
from set_resolver.transform import Quaternion, Vector3


@pytest.fixture
def container() -> MemoryObjectContainer:
    return MemoryObjectContainer()


@pytest.fixture
def add_package(container):
    """
    Store a package for an object type at its first mapped path.

    Usage: add_package("ring", {"model": {"model": "object/cmn/ring.xno"}})
    """
    def _add(object_type: str, categories: dict, group_index: int = 0) -> str:
        path = package_paths_for(object_type, ResolverConfig().package_root)[group_index]
        container.add_json(path, {
            "categories": [
                {
                    "name": cat_name,
                    "files": [{"name": n, "location": loc} for n, loc in files.items()],
                }
                for cat_name, files in categories.items()
            ]
        })
        return path
    return _add


@pytest.fixture
def add_model(container):
    """Store a decoded-model JSON export with the given named node translations."""
    def _add(path: str, nodes: dict) -> str:
        container.add_json(path, {
            "nodes": [{"name": n, "translation": list(t)} for n, t in nodes.items()]
        })
        return path
    return _add


@pytest.fixture
def tables() -> ReferenceTables:
    return ReferenceTables(
        physics_parameters=[
            ObjectPhysicsParameter("Rock01", "object/common/rock01.xno"),
            ObjectPhysicsParameter("Barrel", "object/common/barrel"),
        ],
        path_parameters=[
            PathObjParameter("Cart", "object/rct/cart.xno"),
        ],
        actors=[
            Actor("objectphysics", ("flag", "objectName", "scale")),
            Actor("objectphysics_item", ("objectName",)),
            Actor("common_path_obj", ("pathName", "objectName")),
            Actor("physicspath", ("speed", "loop")),
        ],
    )


@pytest.fixture
def context(container, tables) -> ResolverContext:
    return ResolverContext.create(container, tables)


@pytest.fixture
def place():
    """Build a PlacementObject from a type and raw parameter values."""
    def _place(object_type: str, *values, position=(0.0, 0.0, 0.0),
               rotation=(0.0, 0.0, 0.0, 1.0)) -> PlacementObject:
        return PlacementObject(
            type=object_type,
            parameters=tuple(Parameter.infer(v) for v in values),
            position=Vector3(*position),
            rotation=Quaternion(*rotation),
        )
    return _place
