"""Data models for decoded assets — object packages and model node data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from set_resolver.transform import ZERO, Vector3

__all__ = ["PackageFile", "PackageCategory", "Package", "ModelNode", "DecodedModel"]


@dataclass(frozen=True)
class PackageFile:
    name:     str
    location: str     # storage path relative to the model root, e.g. "object/cmn/ring.xno"

    def to_dict(self) -> dict:
        return {"name": self.name, "location": self.location}


@dataclass(frozen=True)
class PackageCategory:
    name:  str
    files: tuple[PackageFile, ...] = ()

    def file(self, name: str) -> Optional[PackageFile]:
        """First file entry called *name*, or None."""
        for f in self.files:
            if f.name == name:
                return f
        return None

    def to_dict(self) -> dict:
        return {"name": self.name, "files": [f.to_dict() for f in self.files]}


@dataclass(frozen=True)
class Package:
    """
    Decoded object package: named categories ("model", "motion", "effect", …)
    each listing named file entries.
    """
    categories: tuple[PackageCategory, ...] = ()
    name:       str = ""

    def category(self, name: str) -> Optional[PackageCategory]:
        for cat in self.categories:
            if cat.name == name:
                return cat
        return None

    # ── Serialisation ─────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        d: dict = {"categories": [c.to_dict() for c in self.categories]}
        if self.name:
            d["name"] = self.name
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "Package":
        return cls(
            categories=tuple(
                PackageCategory(
                    name=c["name"],
                    files=tuple(PackageFile(f["name"], f["location"]) for f in c.get("files", [])),
                )
                for c in data.get("categories", [])
            ),
            name=data.get("name", ""),
        )


@dataclass(frozen=True)
class ModelNode:
    translation: Vector3 = ZERO


@dataclass(frozen=True)
class DecodedModel:
    """
    The subset of a decoded model used for placement: the node list and the
    parallel node-name table. `node_names[i]` names `nodes[i]`.
    """
    nodes:      tuple[ModelNode, ...] = ()
    node_names: tuple[str, ...] = field(default=())

    def find_node_by_name(self, name: str) -> Optional[ModelNode]:
        for index, node_name in enumerate(self.node_names):
            if node_name == name:
                if index < len(self.nodes):
                    return self.nodes[index]
                return None
        return None

    # ── Serialisation ─────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "nodes": [
                {"name": name, "translation": list(node.translation)}
                for name, node in zip(self.node_names, self.nodes)
            ]
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DecodedModel":
        entries = data.get("nodes", [])
        return cls(
            nodes=tuple(
                ModelNode(Vector3.from_iterable(n.get("translation", ZERO))) for n in entries
            ),
            node_names=tuple(n.get("name", "") for n in entries),
        )
