"""
ResolverConfig — storage roots and archive names used to build asset paths.

The defaults match the retail Xbox 360 / PC layout of the game data::

    /xenon/object/<group>/<stem>.pkg     object packages
    /win32/<location>                    models referenced from packages

A JSON file may override any field::

    {"model_root": "/ps3", "enemy_archive": "ps3/archives/enemy"}
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from set_resolver.exceptions import ConfigError

__all__ = ["ResolverConfig"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolverConfig:
    package_root:            str = "/xenon/object"
    model_root:              str = "/win32"
    enemy_archive:           str = "xenon/archives/enemy"
    boss_archive:            str = "win32/archives/enemy_data"
    default_model_extension: str = ".xno"

    # ── Path helpers ──────────────────────────────────────────────────────

    def package_path(self, folder: str, stem: str) -> str:
        return f"{self.package_root}/{folder}/{stem}.pkg"

    def model_path(self, location: str) -> str:
        """Prefix a package file location with the model root."""
        return f"{self.model_root}/{location.lstrip('/')}"

    # ── Serialisation ─────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ResolverConfig":
        """
        Build a config from a plain mapping.

        Raises:
            ConfigError: unknown key or non-string value.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        for key, value in data.items():
            if not isinstance(value, str):
                raise ConfigError(f"Config value for '{key}' must be a string")
        return cls(**data)

    @classmethod
    def from_file(cls, path: str | Path) -> "ResolverConfig":
        """Load from a JSON file; a missing file yields the defaults."""
        config_path = Path(path).expanduser()
        if not config_path.exists():
            logger.debug("Config %s not found, using defaults", config_path)
            return cls()
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Cannot read config {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config {config_path} must contain a JSON object")
        return cls.from_dict(data)
