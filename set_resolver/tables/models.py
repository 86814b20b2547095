"""
Reference tables consulted by resolvers.

ObjectPhysicsParameter  — physics object name → model path
PathObjParameter        — path object name → model path
Actor                   — SET object type → ordered parameter names
ReferenceTables         — read-only bundle of the three lists
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

__all__ = ["ObjectPhysicsParameter", "PathObjParameter", "Actor", "ReferenceTables"]


@dataclass(frozen=True)
class ObjectPhysicsParameter:
    name:  str
    model: str


@dataclass(frozen=True)
class PathObjParameter:
    name:  str
    model: str


@dataclass(frozen=True)
class Actor:
    """Actor definition: the parameter layout of one SET object type."""
    name:       str
    parameters: tuple[str, ...] = ()

    def parameter_index(self, name: str) -> int:
        """Position of parameter *name*, or -1 if the actor has none."""
        for index, param_name in enumerate(self.parameters):
            if param_name == name:
                return index
        return -1


class ReferenceTables:
    """
    Read-only views over the physics, path and actor tables.
    Lookups return the first entry with a matching name.
    """

    def __init__(
        self,
        physics_parameters: Iterable[ObjectPhysicsParameter] = (),
        path_parameters: Iterable[PathObjParameter] = (),
        actors: Iterable[Actor] = (),
    ) -> None:
        self._physics = tuple(physics_parameters)
        self._paths = tuple(path_parameters)
        self._actors = tuple(actors)

    @property
    def physics_parameters(self) -> tuple[ObjectPhysicsParameter, ...]:
        return self._physics

    @property
    def path_parameters(self) -> tuple[PathObjParameter, ...]:
        return self._paths

    @property
    def actors(self) -> tuple[Actor, ...]:
        return self._actors

    def find_physics(self, name: str) -> Optional[ObjectPhysicsParameter]:
        return next((p for p in self._physics if p.name == name), None)

    def find_path(self, name: str) -> Optional[PathObjParameter]:
        return next((p for p in self._paths if p.name == name), None)

    def find_actor(self, name: str) -> Optional[Actor]:
        return next((a for a in self._actors if a.name == name), None)

    def __repr__(self) -> str:
        return (
            f"ReferenceTables(physics={len(self._physics)}, "
            f"paths={len(self._paths)}, actors={len(self._actors)})"
        )

    # ── Serialisation ─────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "physics": [{"name": p.name, "model": p.model} for p in self._physics],
            "paths":   [{"name": p.name, "model": p.model} for p in self._paths],
            "actors":  [{"name": a.name, "parameters": list(a.parameters)} for a in self._actors],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ReferenceTables":
        return cls(
            physics_parameters=[
                ObjectPhysicsParameter(p["name"], p["model"]) for p in data.get("physics", [])
            ],
            path_parameters=[
                PathObjParameter(p["name"], p["model"]) for p in data.get("paths", [])
            ],
            actors=[
                Actor(a["name"], tuple(a.get("parameters", []))) for a in data.get("actors", [])
            ],
        )
