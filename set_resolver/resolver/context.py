"""ResolverContext — per-scene-load state shared by every resolver."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from set_resolver.assets.cache import AssetCache
from set_resolver.assets.container import ObjectContainer, decode_json_model, decode_json_package
from set_resolver.assets.models import DecodedModel, Package, PackageCategory
from set_resolver.config import ResolverConfig
from set_resolver.tables.models import ReferenceTables
from set_resolver.tables.packages_map import package_paths_for
from set_resolver.transform import Vector3

__all__ = ["ResolverContext"]

logger = logging.getLogger(__name__)


class ResolverContext:
    """
    Bundles the asset cache, the reference tables and the path config for
    one scene load.

    The context owns its AssetCache; tables and container are borrowed.
    Create one per load (or call clear_caches() between loads) and never
    share one across threads.
    """

    def __init__(
        self,
        cache: AssetCache,
        tables: Optional[ReferenceTables] = None,
        config: Optional[ResolverConfig] = None,
    ) -> None:
        self.cache = cache
        self.tables = tables or ReferenceTables()
        self.config = config or ResolverConfig()

    @classmethod
    def create(
        cls,
        container: ObjectContainer,
        tables: Optional[ReferenceTables] = None,
        config: Optional[ResolverConfig] = None,
        package_decoder: Callable[[bytes], Package] = decode_json_package,
        model_decoder: Callable[[bytes], DecodedModel] = decode_json_model,
    ) -> "ResolverContext":
        """Build a context with a fresh AssetCache over *container*."""
        return cls(AssetCache(container, package_decoder, model_decoder), tables, config)

    # ── Asset lookups ─────────────────────────────────────────────────────

    def load_package(self, path: str) -> Optional[Package]:
        return self.cache.get_or_decode_package(path)

    def load_model(self, path: str) -> Optional[DecodedModel]:
        return self.cache.get_or_decode_model(path)

    def package_paths_for_type(self, object_type: str) -> list[str]:
        return package_paths_for(object_type, self.config.package_root)

    def find_package_for_type(self, object_type: str) -> Optional[Package]:
        """
        First package registered for *object_type* that exists in the
        container, searching the static map in group order.
        """
        for path in self.package_paths_for_type(object_type):
            package = self.load_package(path)
            if package is not None:
                return package
        logger.debug("No package found for type %s", object_type)
        return None

    def find_node_offset(self, model_path: str, node_name: str) -> Optional[Vector3]:
        """
        Local translation of node *node_name* in the model at *model_path*.

        Returns None when the model or the node is absent.

        Raises:
            DecodeError: the model exists but cannot be decoded.
        """
        model = self.load_model(model_path)
        if model is None:
            return None
        node = model.find_node_by_name(node_name)
        if node is None:
            return None
        return node.translation

    @staticmethod
    def get_variant_model(category: PackageCategory, variant: int, *names: str) -> Optional[str]:
        """
        Location of the file picked by a 1-based *variant* index into
        *names*; None for index 0, out-of-range indices, or a missing file.
        """
        if variant < 1 or variant > len(names):
            return None
        entry = category.file(names[variant - 1])
        if entry is None or not entry.location:
            return None
        return entry.location

    def model_path(self, location: str) -> str:
        return self.config.model_path(location)

    def clear_caches(self) -> None:
        self.cache.clear()
