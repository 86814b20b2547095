"""
Asset access for placement resolution — container interface, decoded asset
models and the decode-once AssetCache.
"""

from .cache import AssetCache, CacheStats
from .container import (
    MemoryObjectContainer,
    ObjectContainer,
    decode_json_model,
    decode_json_package,
    load_json_export,
)
from .models import DecodedModel, ModelNode, Package, PackageCategory, PackageFile

__all__ = [
    "AssetCache",
    "CacheStats",
    "ObjectContainer",
    "MemoryObjectContainer",
    "decode_json_package",
    "decode_json_model",
    "load_json_export",
    "Package",
    "PackageCategory",
    "PackageFile",
    "DecodedModel",
    "ModelNode",
]
