"""
AssetCache — decode-once cache for object packages and models.

Usage::

    cache = AssetCache(container, decode_package, decode_model)

    pkg = cache.get_or_decode_package("/xenon/object/cmn/ring.pkg")
    if pkg is None:
        ...  # entry absent from the container

    cache.clear()   # between independent scene loads

Entries are keyed by container path. Absent entries are not cached, so a
later call retries the container lookup. The cache is single-writer and
owned by one ResolverContext.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from set_resolver.exceptions import DecodeError

from .container import ObjectContainer
from .models import DecodedModel, Package

__all__ = ["AssetCache", "CacheStats", "PACKAGE", "MODEL"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

PACKAGE = "package"
MODEL   = "model"


@dataclass
class CacheStats:
    hits:    int = 0
    misses:  int = 0
    decodes: int = 0

    def __str__(self) -> str:
        return f"hits={self.hits} misses={self.misses} decodes={self.decodes}"


class AssetCache:

    def __init__(
        self,
        container: ObjectContainer,
        package_decoder: Callable[[bytes], Package],
        model_decoder: Callable[[bytes], DecodedModel],
    ) -> None:
        self._container = container
        self._package_decoder = package_decoder
        self._model_decoder = model_decoder
        self._entries: dict[str, dict[str, object]] = {PACKAGE: {}, MODEL: {}}
        self.stats = CacheStats()

    # ── Public API ────────────────────────────────────────────────────────

    def get_or_decode_package(self, path: str) -> Optional[Package]:
        return self.get_or_insert_with(
            PACKAGE, path, lambda: self._decode(path, self._package_decoder)
        )

    def get_or_decode_model(self, path: str) -> Optional[DecodedModel]:
        return self.get_or_insert_with(
            MODEL, path, lambda: self._decode(path, self._model_decoder)
        )

    def get_or_insert_with(
        self,
        kind: str,
        key: str,
        compute_fn: Callable[[], Optional[T]],
    ) -> Optional[T]:
        """
        Return the cached value for (*kind*, *key*), computing and storing it
        on a miss. A None result is returned but not stored.
        """
        store = self._entries.setdefault(kind, {})
        if key in store:
            self.stats.hits += 1
            logger.debug("Cache hit: %s %s", kind, key)
            return store[key]  # type: ignore[return-value]

        self.stats.misses += 1
        value = compute_fn()
        if value is not None:
            store[key] = value
        return value

    def clear(self) -> None:
        """Drop every cached package and model."""
        count = len(self)
        for store in self._entries.values():
            store.clear()
        logger.debug("Cleared %d cached assets (%s)", count, self.stats)

    def __len__(self) -> int:
        return sum(len(store) for store in self._entries.values())

    def __contains__(self, path: object) -> bool:
        return any(path in store for store in self._entries.values())

    # ── Internal helpers ──────────────────────────────────────────────────

    def _decode(self, path: str, decoder: Callable[[bytes], T]) -> Optional[T]:
        """
        Fetch, decompress and decode one container entry.

        Raises:
            DecodeError: the entry exists but cannot be decoded.
        """
        raw = self._container.get_raw_bytes(path)
        if raw is None:
            logger.debug("Container entry not found: %s", path)
            return None

        self.stats.decodes += 1
        try:
            return decoder(self._container.decompress(raw))
        except DecodeError as exc:
            if exc.path == path:
                raise
            raise DecodeError(path, exc.reason) from exc
        except Exception as exc:  # noqa: BLE001
            raise DecodeError(path, f"{type(exc).__name__}: {exc}") from exc
