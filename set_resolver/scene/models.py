"""Data models for scene loading — instance batches and the load report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from set_resolver.placement.models import PlacementObject
from set_resolver.resolver.models import ResolvedInstance
from set_resolver.transform import Vector3, bounding_sphere

__all__ = ["BatchKey", "InstanceBatch", "ObjectFailure", "SceneLoadReport"]

BatchKey = tuple[Optional[str], str]   # (archive_hint, model_path)


@dataclass
class InstanceBatch:
    """All instances of one model — one instanced draw for the renderer."""
    archive_hint: Optional[str]
    model_path:   str
    instances:    list[ResolvedInstance] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.instances)


@dataclass(frozen=True)
class ObjectFailure:
    placement: PlacementObject
    message:   str


@dataclass
class SceneLoadReport:
    """
    Outcome of resolving every placement object of one scene.
    Failures are collected, never raised.
    """
    batches:  dict[BatchKey, InstanceBatch] = field(default_factory=dict)
    failures: list[ObjectFailure] = field(default_factory=list)
    skipped:  int = 0
    resolved: int = 0          # objects that produced at least one instance
    empty:    int = 0          # objects that resolved to nothing

    @property
    def total_instances(self) -> int:
        return sum(len(b) for b in self.batches.values())

    @property
    def failed_types(self) -> set[str]:
        return {f.placement.type for f in self.failures}

    def add_instance(self, instance: ResolvedInstance, model_path: str) -> None:
        key = (instance.archive_hint, model_path)
        batch = self.batches.get(key)
        if batch is None:
            batch = InstanceBatch(instance.archive_hint, model_path)
            self.batches[key] = batch
        batch.instances.append(instance)

    def bounds(self) -> Optional[tuple[Vector3, float]]:
        """Centre and radius enclosing every visible instance, for camera framing."""
        return bounding_sphere(
            inst.position
            for batch in self.batches.values()
            for inst in batch.instances
            if inst.visible
        )

    def __str__(self) -> str:
        return (
            f"SceneLoadReport({len(self.batches)} models, {self.total_instances} instances, "
            f"{self.skipped} skipped, {len(self.failures)} failed)"
        )
