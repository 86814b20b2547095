"""
ObjectResolver — generic physics / path objects whose model is named by a
parameter.

The actor definition for the placement's type gives the position of the
"objectName" parameter. Its value is a key into the path-object table (for
common_path_obj) or the physics-object table (everything else), and the
table entry's model path is used as-is.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from set_resolver.placement.models import PlacementObject

    from .context import ResolverContext

from set_resolver.exceptions import ParameterTypeError

from .base import TypeSetResolver
from .models import ResolvedInstance, ResolveResult

__all__ = ["ObjectResolver"]

logger = logging.getLogger(__name__)

_OBJECT_NAME_PARAM = "objectName"
_PATH_OBJECT_TYPES = frozenset({"common_path_obj"})


class ObjectResolver(TypeSetResolver):

    supported_types = frozenset({
        "objectphysics",
        "objectphysics_item",
        "physicspath",
        "common_path_obj",
    })
    priority: ClassVar[int] = 20

    def resolve(
        self,
        context: "ResolverContext",
        placement: "PlacementObject",
    ) -> ResolveResult:
        actor = context.tables.find_actor(placement.type)
        if actor is None:
            logger.debug("No actor definition for %s", placement.type)
            return ResolveResult.empty()

        index = actor.parameter_index(_OBJECT_NAME_PARAM)
        if index == -1:
            return ResolveResult.empty()

        param = placement.parameter(index)
        if param is None:
            logger.debug("%s has no parameter at index %d", placement, index)
            return ResolveResult.empty()

        try:
            object_name = param.as_str()
        except ParameterTypeError as exc:
            return ResolveResult.failed(f"Invalid {_OBJECT_NAME_PARAM} for {placement.type}: {exc}")

        if placement.type in _PATH_OBJECT_TYPES:
            entry = context.tables.find_path(object_name)
            if entry is None:
                return ResolveResult.failed(f"Unable to find path parameter '{object_name}'")
        else:
            entry = context.tables.find_physics(object_name)
            if entry is None:
                return ResolveResult.failed(f"Unable to find physics parameter '{object_name}'")

        return ResolveResult.with_instances(ResolvedInstance.create(
            entry.model,
            placement.position,
            placement.rotation,
        ))
