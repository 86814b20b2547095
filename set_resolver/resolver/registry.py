"""
ResolverRegistry — prioritized dispatch over the registered resolvers.

Dispatch for one placement object:

  1. walk resolvers in priority order (highest first, registration order
     on ties), skipping those whose can_resolve() is False;
  2. stop at the first Skip, Failure or non-empty Success;
  3. an empty Success means "nothing to contribute", keep walking;
  4. if nothing stopped the walk, return the fallback's result as-is.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from set_resolver.placement.models import PlacementObject

    from .context import ResolverContext

from set_resolver.exceptions import RegistryError

from .base import ModelResolver
from .models import ResolveResult
from .package_resolver import PackageResolver

__all__ = ["ResolverRegistry"]

logger = logging.getLogger(__name__)


class ResolverRegistry:
    """
    Holds resolvers plus one fallback. Contains no per-load state and can be
    reused across scene loads.
    """

    def __init__(
        self,
        resolvers: Iterable[ModelResolver] = (),
        fallback: Optional[ModelResolver] = None,
    ) -> None:
        self._resolvers: list[ModelResolver] = []
        self._fallback = fallback if fallback is not None else PackageResolver()
        for resolver in resolvers:
            self.register(resolver)

    # ── Registration ──────────────────────────────────────────────────────

    def register(self, resolver: ModelResolver) -> None:
        """
        Add *resolver* and re-sort by priority, descending.

        list.sort is stable, so equal priorities keep registration order.

        Raises:
            RegistryError: *resolver* is not a ModelResolver.
        """
        if not isinstance(resolver, ModelResolver):
            raise RegistryError(f"Not a ModelResolver: {resolver!r}")
        self._resolvers.append(resolver)
        self._resolvers.sort(key=lambda r: r.priority, reverse=True)
        logger.debug("Registered %r", resolver)

    @property
    def resolvers(self) -> tuple[ModelResolver, ...]:
        """Registered resolvers in dispatch order (fallback excluded)."""
        return tuple(self._resolvers)

    @property
    def fallback(self) -> ModelResolver:
        return self._fallback

    def resolvers_for(self, object_type: str) -> list[ModelResolver]:
        """Resolvers that claim *object_type*, in dispatch order, fallback last."""
        claiming = [r for r in self._resolvers if r.can_resolve(object_type)]
        claiming.append(self._fallback)
        return claiming

    # ── Dispatch ──────────────────────────────────────────────────────────

    def resolve(
        self,
        context: "ResolverContext",
        placement: "PlacementObject",
    ) -> ResolveResult:
        for resolver in self._resolvers:
            if not resolver.can_resolve(placement.type):
                continue

            result = resolver.resolve(context, placement)
            if result.is_terminal:
                logger.debug("%s → %s by %s", placement.type, result, resolver.name)
                return result

            logger.debug("%s: %s had nothing, continuing", placement.type, resolver.name)

        result = self._fallback.resolve(context, placement)
        logger.debug("%s → %s by fallback %s", placement.type, result, self._fallback.name)
        return result

    def __len__(self) -> int:
        return len(self._resolvers)

    def __repr__(self) -> str:
        order = ", ".join(repr(r) for r in self._resolvers)
        return f"ResolverRegistry([{order}], fallback={self._fallback!r})"
