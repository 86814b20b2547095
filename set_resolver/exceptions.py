"""
Project-wide custom exception hierarchy.
All modules raise subclasses of SetResolverError — never bare Exception.

Ordinary absence (a missing package, category, file or table entry) is not
an exception: resolvers report it through ResolveResult instead.
"""

__all__ = [
    "SetResolverError",
    "ConfigError",
    "AssetError",
    "DecodeError",
    "ParameterTypeError",
    "RegistryError",
]


class SetResolverError(Exception):
    """Root exception for all set-resolver errors."""


# ── Configuration ─────────────────────────────────────────────────────────────

class ConfigError(SetResolverError):
    """Raised when a configuration file or mapping cannot be applied."""


# ── Assets ────────────────────────────────────────────────────────────────────

class AssetError(SetResolverError):
    """Base class for asset container / decoding errors."""


class DecodeError(AssetError):
    """Raised when package or model bytes are malformed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to decode {path}: {reason}")
        self.path = path
        self.reason = reason


# ── Placement ─────────────────────────────────────────────────────────────────

class ParameterTypeError(SetResolverError):
    """Raised when a placement parameter holds a different variant than requested."""


# ── Registry ──────────────────────────────────────────────────────────────────

class RegistryError(SetResolverError):
    """Raised when a resolver cannot be registered."""
