"""
Composite resolvers — props drawn as several models positioned relative to
one another.

RevolvingNetResolver: the Wave Ocean revolving net is a "body" frame plus a
"net" that hangs from the body's `netpoint` node. The body model is decoded
(through the context cache) only to read that node's translation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from set_resolver.placement.models import PlacementObject

    from .context import ResolverContext

from set_resolver.exceptions import DecodeError
from set_resolver.transform import ZERO, Vector3, offset_position

from .base import TypeSetResolver
from .models import ResolvedInstance, ResolveResult

__all__ = ["RevolvingNetResolver"]

logger = logging.getLogger(__name__)

_MODEL_CATEGORY = "model"


class RevolvingNetResolver(TypeSetResolver):

    supported_types = frozenset({"wvo_revolvingnet"})
    priority: ClassVar[int] = 10

    anchor_file: ClassVar[str] = "body"
    attached_file: ClassVar[str] = "net"
    attachment_node: ClassVar[str] = "netpoint"

    def resolve(
        self,
        context: "ResolverContext",
        placement: "PlacementObject",
    ) -> ResolveResult:
        package = context.find_package_for_type(placement.type)
        if package is None:
            return ResolveResult.failed(f"Package not found for {placement.type}")

        category = package.category(_MODEL_CATEGORY)
        if category is None:
            return ResolveResult.failed("Could not find model category in revolving net package")

        anchor = category.file(self.anchor_file)
        if anchor is None:
            return ResolveResult.failed(f"Could not find '{self.anchor_file}' model in revolving net package")

        anchor_path = context.model_path(anchor.location)
        instances = [ResolvedInstance.create(anchor_path, placement.position, placement.rotation)]

        attached = category.file(self.attached_file)
        if attached is None:
            logger.warning("%s: no '%s' model, drawing '%s' only",
                           placement.type, self.attached_file, self.anchor_file)
            return ResolveResult.with_instances(*instances)

        offset = self._attachment_offset(context, anchor_path)
        instances.append(ResolvedInstance.create(
            context.model_path(attached.location),
            offset_position(placement.position, offset),
            placement.rotation,
        ))
        return ResolveResult.with_instances(*instances)

    def _attachment_offset(self, context: "ResolverContext", anchor_path: str) -> Vector3:
        """Translation of the attachment node; ZERO when it cannot be read."""
        try:
            offset = context.find_node_offset(anchor_path, self.attachment_node)
        except DecodeError as exc:
            logger.warning("Could not decode %s for attachment offset: %s", anchor_path, exc)
            return ZERO

        if offset is None:
            logger.warning("Node '%s' not found in %s, using zero offset",
                           self.attachment_node, anchor_path)
            return ZERO
        return offset
