"""
Object container interface and the JSON export format.

The real archive (object.arc) is read by an external container decoder; the
resolver only needs raw entry bytes plus the container's decompression step.
MemoryObjectContainer holds entries in memory and backs the unit tests and
the `resolve` CLI command, which reads a JSON asset export::

    {
      "packages": {"/xenon/object/cmn/ring.pkg": {"categories": [...]}},
      "models":   {"/win32/object/wvo/revolvingnet/body.xno": {"nodes": [...]}}
    }
"""

from __future__ import annotations

import json
import logging
import zlib
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from set_resolver.exceptions import AssetError, DecodeError

from .models import DecodedModel, Package

__all__ = [
    "ObjectContainer",
    "MemoryObjectContainer",
    "decode_json_package",
    "decode_json_model",
    "load_json_export",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class ObjectContainer(Protocol):
    def get_raw_bytes(self, path: str) -> Optional[bytes]:
        """Raw (possibly compressed) entry bytes, or None if absent."""
        ...

    def decompress(self, data: bytes) -> bytes:
        ...


class MemoryObjectContainer:
    """
    Dict-backed ObjectContainer.

    With `compressed=True` entries are stored zlib-compressed, as they are
    inside the retail archives, and decompress() inflates them.
    """

    def __init__(self, entries: Optional[dict[str, bytes]] = None,
                 compressed: bool = False) -> None:
        self._compressed = compressed
        self._entries: dict[str, bytes] = {}
        for path, data in (entries or {}).items():
            self.add(path, data)

    def add(self, path: str, data: bytes) -> None:
        """Store *data* (uncompressed) under *path*."""
        self._entries[path] = zlib.compress(data) if self._compressed else data

    def add_json(self, path: str, payload: dict) -> None:
        self.add(path, json.dumps(payload).encode("utf-8"))

    def get_raw_bytes(self, path: str) -> Optional[bytes]:
        return self._entries.get(path)

    def decompress(self, data: bytes) -> bytes:
        if not self._compressed:
            return data
        return zlib.decompress(data)

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# ── JSON decoders ─────────────────────────────────────────────────────────────

def _load_json(data: bytes, kind: str) -> dict:
    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(kind, str(exc)) from exc
    if not isinstance(payload, dict):
        raise DecodeError(kind, "expected a JSON object")
    return payload


def decode_json_package(data: bytes) -> Package:
    payload = _load_json(data, "package")
    try:
        return Package.from_dict(payload)
    except (KeyError, TypeError) as exc:
        raise DecodeError("package", f"missing field {exc}") from exc


def decode_json_model(data: bytes) -> DecodedModel:
    payload = _load_json(data, "model")
    try:
        return DecodedModel.from_dict(payload)
    except (TypeError, ValueError) as exc:
        raise DecodeError("model", str(exc)) from exc


def load_json_export(path: str | Path) -> MemoryObjectContainer:
    """
    Read a JSON asset export into a MemoryObjectContainer.

    Raises:
        AssetError: file unreadable or not in the export format.
    """
    export_path = Path(path).expanduser()
    try:
        payload = json.loads(export_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise AssetError(f"Cannot read asset export {export_path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise AssetError(f"Asset export {export_path} must contain a JSON object")

    container = MemoryObjectContainer()
    for section in ("packages", "models"):
        entries = payload.get(section, {})
        if not isinstance(entries, dict):
            raise AssetError(f"Asset export {export_path}: '{section}' must be a JSON object")
        for entry_path, entry in entries.items():
            container.add_json(entry_path, entry)
    logger.info("Loaded %d asset entries from %s", len(container), export_path)
    return container
