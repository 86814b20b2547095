"""
SceneLoader — resolves every placement object of a scene and groups the
instances by model for instanced rendering.

Usage::

    context = ResolverContext.create(container, tables)
    report = SceneLoader().load(context, stage.objects)
    for batch in report.batches.values():
        renderer.add_instances(batch.archive_hint, batch.model_path, batch.instances)

A failed object never aborts the load: its failure is recorded in the
report and logged once per object type.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Iterable, Optional

from set_resolver.exceptions import DecodeError
from set_resolver.placement.models import PlacementObject
from set_resolver.resolver.context import ResolverContext
from set_resolver.resolver.factory import build_default_registry
from set_resolver.resolver.registry import ResolverRegistry

from .models import ObjectFailure, SceneLoadReport

__all__ = ["SceneLoader"]

logger = logging.getLogger(__name__)


class SceneLoader:

    def __init__(self, registry: Optional[ResolverRegistry] = None) -> None:
        self.registry = registry if registry is not None else build_default_registry()

    def load(
        self,
        context: ResolverContext,
        objects: Iterable[PlacementObject],
        clear_cache: bool = False,
    ) -> SceneLoadReport:
        """
        Resolve *objects* in order and return the grouped report.

        Args:
            context:     Per-load ResolverContext.
            objects:     Placement objects of the scene.
            clear_cache: Drop the context's decoded assets afterwards.
        """
        report = SceneLoadReport()
        extension = context.config.default_model_extension

        try:
            for placement in objects:
                try:
                    result = self.registry.resolve(context, placement)
                except DecodeError as exc:
                    report.failures.append(ObjectFailure(placement, str(exc)))
                    continue

                if result.is_skipped:
                    report.skipped += 1
                elif result.is_failed:
                    report.failures.append(ObjectFailure(placement, result.message))
                elif not result.instances:
                    report.empty += 1
                else:
                    report.resolved += 1
                    for instance in result.instances:
                        report.add_instance(instance, _with_extension(instance.model_path, extension))

            self._log_summary(report)
        finally:
            if clear_cache:
                context.clear_caches()
        return report

    @staticmethod
    def _log_summary(report: SceneLoadReport) -> None:
        first_message: dict[str, str] = {}
        for failure in report.failures:
            first_message.setdefault(failure.placement.type, failure.message)
        for object_type, message in sorted(first_message.items()):
            logger.warning("Model for objects of type %s not found: %s", object_type, message)

        if not report.batches and not report.failures:
            logger.warning("Scene has no placeable objects")

        logger.info(
            "Resolved %d model types with %d total instances (%d skipped, %d failed)",
            len(report.batches), report.total_instances, report.skipped, len(report.failures),
        )


def _with_extension(model_path: str, extension: str) -> str:
    if not extension or PurePosixPath(model_path).suffix:
        return model_path
    return model_path + extension
