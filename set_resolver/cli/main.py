"""
CLI entry point for set-resolver.

Usage
─────
  # List the static object type → package map
  set-resolver types
  set-resolver types --group wvo

  # Show the resolver dispatch order
  set-resolver resolvers

  # Resolve a scene against a JSON asset export
  set-resolver resolve \\
      --assets ./export/assets.json \\
      --scene  ./export/stage.json \\
      --tables ./export/tables.json

Subcommands are implemented as standalone functions (cmd_types,
cmd_resolvers, cmd_resolve) so they can be unit-tested without invoking
argparse.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from set_resolver.assets.container import load_json_export
from set_resolver.config import ResolverConfig
from set_resolver.exceptions import SetResolverError
from set_resolver.placement.models import PlacementObject
from set_resolver.resolver.context import ResolverContext
from set_resolver.resolver.factory import build_default_registry
from set_resolver.scene.loader import SceneLoader
from set_resolver.scene.models import SceneLoadReport
from set_resolver.tables.models import ReferenceTables
from set_resolver.tables.packages_map import PACKAGE_GROUPS, all_object_types

__all__ = ["build_parser", "cmd_types", "cmd_resolvers", "cmd_resolve", "main"]

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: types | resolvers | resolve
    """
    parser = argparse.ArgumentParser(
        prog="set-resolver",
        description="Resolve stage placement objects into renderable model instances",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--config",
        default=None,
        metavar="PATH",
        help="JSON file overriding storage roots and archive names",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── types ─────────────────────────────────────────────────────────────
    typ = sub.add_parser("types", help="List object types and their package paths")
    typ.add_argument(
        "--group",
        default=None,
        choices=[g.folder for g in PACKAGE_GROUPS],
        help="Only list one stage group",
    )

    # ── resolvers ─────────────────────────────────────────────────────────
    sub.add_parser("resolvers", help="Show resolver dispatch order")

    # ── resolve ───────────────────────────────────────────────────────────
    res = sub.add_parser("resolve", help="Resolve a scene against a JSON asset export")
    res.add_argument(
        "--assets",
        required=True,
        metavar="PATH",
        help="JSON asset export (decoded packages and models)",
    )
    res.add_argument(
        "--scene",
        required=True,
        metavar="PATH",
        help="JSON scene: {\"objects\": [...]} or a bare list of objects",
    )
    res.add_argument(
        "--tables",
        default=None,
        metavar="PATH",
        help="JSON reference tables (physics, paths, actors)",
    )

    return parser


# ── Helpers ───────────────────────────────────────────────────────────────────


def _read_json(path: str, what: str):
    try:
        return json.loads(Path(path).expanduser().read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SetResolverError(f"Cannot read {what} {path}: {exc}") from exc


def _load_scene(path: str) -> list[PlacementObject]:
    payload = _read_json(path, "scene")
    entries = payload.get("objects", []) if isinstance(payload, dict) else payload
    if not isinstance(entries, list):
        raise SetResolverError(f"Scene {path} must hold a list of objects")
    try:
        return [PlacementObject.from_dict(entry) for entry in entries]
    except (KeyError, TypeError, ValueError) as exc:
        raise SetResolverError(f"Malformed placement object in {path}: {exc}") from exc


def _load_tables(path: Optional[str]) -> ReferenceTables:
    if path is None:
        return ReferenceTables()
    payload = _read_json(path, "tables")
    try:
        return ReferenceTables.from_dict(payload)
    except (KeyError, TypeError, AttributeError) as exc:
        raise SetResolverError(f"Malformed reference tables in {path}: {exc}") from exc


# ── Command implementations ───────────────────────────────────────────────────


def cmd_types(config: ResolverConfig, group: Optional[str] = None) -> None:
    """Print every object type with the package path it maps to."""
    rows = [row for row in all_object_types() if group is None or row[1] == group]
    for object_type, folder, stem in rows:
        print(f"{object_type:<28} {config.package_path(folder, stem)}")
    print(f"{len(rows)} object types.")


def cmd_resolvers() -> None:
    """Print the default registry in dispatch order."""
    registry = build_default_registry()
    for position, resolver in enumerate(registry.resolvers, start=1):
        types = ", ".join(sorted(getattr(resolver, "supported_types", ())))
        print(f"{position:>2}. [{resolver.priority:>4}] {resolver.name:<22} {types}")
    fallback = registry.fallback
    print(f" *. [{fallback.priority:>4}] {fallback.name:<22} (fallback, all types)")


def cmd_resolve(
    assets_path: str,
    scene_path: str,
    tables_path: Optional[str],
    config: ResolverConfig,
) -> SceneLoadReport:
    """
    Resolve a scene and print the grouped instances and failures.

    Raises:
        SetResolverError: unreadable or malformed input files.
    """
    container = load_json_export(assets_path)
    objects = _load_scene(scene_path)
    tables = _load_tables(tables_path)
    logger.info("Resolving %d placement objects", len(objects))

    context = ResolverContext.create(container, tables, config)
    report = SceneLoader().load(context, objects, clear_cache=True)

    for batch in sorted(report.batches.values(), key=lambda b: b.model_path):
        archive = f"  [{batch.archive_hint}]" if batch.archive_hint else ""
        print(f"{len(batch):>5} × {batch.model_path}{archive}")
    for failure in report.failures:
        print(f"FAILED {failure.placement.type}: {failure.message}")

    print(
        f"{report.total_instances} instances of {len(report.batches)} models, "
        f"{report.skipped} skipped, {len(report.failures)} failed."
    )
    return report


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    try:
        config = ResolverConfig.from_file(ns.config) if ns.config else ResolverConfig()

        if ns.subcommand == "types":
            cmd_types(config, group=ns.group)
            return 0

        if ns.subcommand == "resolvers":
            cmd_resolvers()
            return 0

        if ns.subcommand == "resolve":
            cmd_resolve(
                assets_path=ns.assets,
                scene_path=ns.scene,
                tables_path=ns.tables,
                config=config,
            )
            return 0
    except SetResolverError as exc:
        logger.debug("%s failed", ns.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
