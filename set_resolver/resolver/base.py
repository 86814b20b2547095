"""Abstract base classes for all model resolvers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from set_resolver.placement.models import PlacementObject

    from .context import ResolverContext

from .models import ResolveResult

__all__ = ["ModelResolver", "TypeSetResolver"]


class ModelResolver(ABC):
    """
    Turns one placement object into zero or more ResolvedInstances.

    The registry asks can_resolve() first and only calls resolve() for
    claimed types. Higher `priority` values are consulted first.
    """

    priority: ClassVar[int] = 0

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def can_resolve(self, object_type: str) -> bool:
        """Return True if this resolver handles *object_type*."""

    @abstractmethod
    def resolve(
        self,
        context: "ResolverContext",
        placement: "PlacementObject",
    ) -> ResolveResult:
        """
        Produce the result for *placement*.

        Implementations should:
          • return ResolveResult.failed(...) for absent packages / files
            rather than raising
          • return ResolveResult.empty() to defer to the next resolver
          • return ResolveResult.skipped() for intentionally invisible types
        """

    def __repr__(self) -> str:
        return f"{self.name}(priority={self.priority})"


class TypeSetResolver(ModelResolver):
    """
    Resolver that claims a fixed set of object types.
    Subclasses set `supported_types` and implement resolve().
    """

    supported_types: ClassVar[frozenset[str]] = frozenset()

    def can_resolve(self, object_type: str) -> bool:
        return object_type in self.supported_types
