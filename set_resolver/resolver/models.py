"""
Data models for the resolver module.

Key concepts
────────────
ResolvedInstance  — one renderable model placement (path + transform)
ResolveStatus     — SKIPPED / SUCCESS / FAILED
ResolveResult     — outcome of one resolver call or of a registry dispatch
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from set_resolver.transform import Quaternion, Vector3

__all__ = ["ResolvedInstance", "ResolveStatus", "ResolveResult"]


@dataclass(frozen=True)
class ResolvedInstance:
    """
    A concrete model to draw. `archive_hint` names the archive the model
    path resolves within when it is not the default object archive.
    """
    model_path:   str
    position:     Vector3
    rotation:     Quaternion
    archive_hint: Optional[str] = None
    visible:      bool = True

    @classmethod
    def create(
        cls,
        model_path: str,
        position: Vector3,
        rotation: Quaternion,
        archive_hint: Optional[str] = None,
    ) -> "ResolvedInstance":
        return cls(model_path=model_path, position=position, rotation=rotation,
                   archive_hint=archive_hint)

    def __str__(self) -> str:
        archive = f"{self.archive_hint}:" if self.archive_hint else ""
        return f"ResolvedInstance({archive}{self.model_path} @ {tuple(self.position)})"


class ResolveStatus(str, Enum):
    """
    SKIPPED
        The type is known and intentionally has nothing to render.
        Terminal.

    SUCCESS
        Zero or more instances. Terminal only when non-empty; an empty
        success means "nothing to contribute, try the next resolver".

    FAILED
        Resolution was attempted and failed; `message` says why. Terminal.
    """
    SKIPPED = "skipped"
    SUCCESS = "success"
    FAILED  = "failed"


@dataclass(frozen=True)
class ResolveResult:
    status:    ResolveStatus
    instances: tuple[ResolvedInstance, ...] = ()
    message:   str = ""

    # ── Factories ─────────────────────────────────────────────────────────

    @classmethod
    def skipped(cls) -> "ResolveResult":
        return _SKIPPED

    @classmethod
    def empty(cls) -> "ResolveResult":
        return _EMPTY

    @classmethod
    def with_instances(cls, *instances: ResolvedInstance) -> "ResolveResult":
        return cls(ResolveStatus.SUCCESS, tuple(instances))

    @classmethod
    def failed(cls, message: str) -> "ResolveResult":
        return cls(ResolveStatus.FAILED, (), message)

    # ── Predicates ────────────────────────────────────────────────────────

    @property
    def is_skipped(self) -> bool:
        return self.status is ResolveStatus.SKIPPED

    @property
    def is_failed(self) -> bool:
        return self.status is ResolveStatus.FAILED

    @property
    def is_success(self) -> bool:
        return self.status is ResolveStatus.SUCCESS

    @property
    def is_empty(self) -> bool:
        """Success with no instances (inconclusive)."""
        return self.is_success and not self.instances

    @property
    def is_terminal(self) -> bool:
        """True when registry dispatch must stop at this result."""
        return not self.is_empty

    def __str__(self) -> str:
        if self.is_failed:
            return f"ResolveResult(failed: {self.message})"
        if self.is_skipped:
            return "ResolveResult(skipped)"
        return f"ResolveResult({len(self.instances)} instance(s))"


_SKIPPED = ResolveResult(ResolveStatus.SKIPPED)
_EMPTY = ResolveResult(ResolveStatus.SUCCESS)
