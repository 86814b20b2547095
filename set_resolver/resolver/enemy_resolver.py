"""
EnemyResolver — enemies and bosses placed by logical name.

The first SET parameter holds the enemy name (e.g. "eGunner",
"cTaker(Fly)"). Several enemies share another enemy's model folder, and a
few bosses use a differently-cased file name, so the path is built from two
alias tables::

    <model_root>/enemy/<folder alias>/en_<file alias>.xno

Bosses live in their own archive; everything else comes from the common
enemy archive.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from set_resolver.placement.models import PlacementObject

    from .context import ResolverContext

from set_resolver.exceptions import ParameterTypeError

from .base import TypeSetResolver
from .models import ResolvedInstance, ResolveResult

__all__ = ["EnemyResolver", "FOLDER_ALIASES", "FILE_ALIASES", "BOSS_NAMES"]

_FLYING_SUFFIX = "(Fly)"

BOSS_NAMES = frozenset({
    "firstiblis",
    "secondiblis",
    "thirdiblis",
    "eCerberus",
    "eGenesis",
    "eWyvern",
    "solaris01",
    "solaris02",
})

FOLDER_ALIASES = MappingProxyType({
    "firstiblis":  "iblis01",
    "secondiblis": "iblis02",
    "thirdiblis":  "iblis03",
    "solaris01":   "Solaris01",
    "solaris02":   "Solaris01",
    "cStalker":    "cBiter",
    "cGazer":      "cCrawler",
    "cTitan":      "cGolem",
    "cTricker":    "cTaker",
    "eArmor":      "eBomber",
    "eSweeper":    "eBomber",
    "eWalker":     "eCannon",
    "eBluster":    "eFlyer",
    "eKeeper":     "eGuardian",
    "eBuster":     "eGunner",
    "eStinger":    "eGunner",
    "eLancer":     "eGunner",
    "echaser":     "eLiner",
    "eCommander":  "eRounder",
    "eHunter":     "eSearcher",
})

FILE_ALIASES = MappingProxyType({
    "firstiblis":  "iblis01",
    "secondiblis": "Iblis02",
    "thirdiblis":  "iblis03",
    "solaris01":   "Solaris01",
    "solaris02":   "Solaris02",
    "cGolem":      "cglm",
})


class EnemyResolver(TypeSetResolver):

    supported_types = frozenset({"enemy", "enemyextra"})
    priority: ClassVar[int] = 10

    def resolve(
        self,
        context: "ResolverContext",
        placement: "PlacementObject",
    ) -> ResolveResult:
        param = placement.parameter(0)
        if param is None:
            return ResolveResult.failed(f"Failed to find enemy {placement.type}: no name parameter")
        try:
            raw_name = param.as_str()
        except ParameterTypeError as exc:
            return ResolveResult.failed(f"Failed to find enemy {placement.type}: {exc}")

        name = raw_name.replace(_FLYING_SUFFIX, "")
        folder = FOLDER_ALIASES.get(name, name)
        file_stem = FILE_ALIASES.get(name, name)
        archive = context.config.boss_archive if name in BOSS_NAMES else context.config.enemy_archive

        return ResolveResult.with_instances(ResolvedInstance.create(
            context.model_path(f"enemy/{folder}/en_{file_stem}.xno"),
            placement.position,
            placement.rotation,
            archive_hint=archive,
        ))
