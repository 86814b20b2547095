"""
Static object type → package map.

Each stage group keeps its object packages under
``<package_root>/<folder>/<stem>.pkg``. Groups are searched in declaration
order; a type may appear in more than one group, in which case the first
package that exists in the container wins.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, NamedTuple

__all__ = [
    "PackageGroup",
    "PACKAGE_GROUPS",
    "NON_VISUAL_TYPES",
    "package_entries_for",
    "package_paths_for",
    "all_object_types",
]


class PackageGroup(NamedTuple):
    folder:   str
    packages: Mapping[str, str]   # object type → package file stem


def _group(folder: str, packages: dict[str, str]) -> PackageGroup:
    return PackageGroup(folder, MappingProxyType(dict(packages)))


PACKAGE_GROUPS: tuple[PackageGroup, ...] = (
    _group("cmn", {
        "common_cage":         "cage",
        "common_chaosemerald": "chaosemerald",
        "dashpanel":           "dashpanel",
        "common_dashring":     "dashring",
        "goalring":            "goalring",
        "common_guillotine":   "guillotine",
        "common_hint":         "hint",
        "itemboxa":            "itembox",
        "itemboxg":            "itembox",
        "itembox_next":        "itembox",
        "common_jumpboard":    "jumpboard",
        "jumppanel":           "jumppanel",
        "common_key":          "key",
        "common_laser":        "laser",
        "common_lensflare":    "lensflare",
        "pole":                "pole",
        "common_rainbowring":  "rainbowring",
        "ring":                "ring",
        "savepoint":           "savepoint",
        "spring":              "spring",
        "spring_twn":          "spring",
        "common_switch":       "switch",
        "common_thorn":        "thorn",
        "updownreel":          "updownreel",
        "widespring":          "widespring",
    }),
    _group("aqa", {
        "aqa_door":       "aqa_door",
        "aqa_glass_blue": "aqa_glass_blue",
        "aqa_glass_red":  "aqa_glass_red",
        "aqa_lamp":       "aqa_lamp",
        "aqa_launcher":   "aqa_launcher",
        "aqa_magnet":     "aqa_magnet",
    }),
    _group("csc", {
        "ironspring": "ironspring",
    }),
    _group("dtd", {
        "dtd_billiard":     "billiard",
        "dtd_door":         "dtddoor",
        "dtd_movingfloor":  "movingfloor",
        "dtd_pillar":       "pillar",
        "dtd_pillar_eagle": "pillar_eagle",
        "dtd_sandwave":     "sandwave",
    }),
    _group("end", {
        "end_inputwarp":      "inputwarp",
        "end_outputwarp":     "outputwarp",
        "end_soleannaswitch": "soleannaswitch",
    }),
    _group("flc", {
        "crater":              "crater",
        "flc_volcanicbomb":    "flamecore_volcanicbomb",
        "flc_flamecore":       "flamecore",
        "flamesequence":       "flamesequence",
        "flamesingle":         "flamesingle",
        "flc_door":            "flc_door",
        "freezedmantle":       "freezedmantle",
        "inclinedstonebridge": "inclinedstonebridge",
    }),
    _group("kdv", {
        # left/right stair stems are unverified against retail data
        "brokenstairs_right": "brokenstairs",
        "brokenstairs_left":  "brokenstairs2",
        "brokentower":        "brokentower",
        "kdv_decalog":        "decalog",
        "eagle":              "eagle",
        "espstairs_right":    "espstairs1",
        "espstairs_left":     "espstairs2",
        "gate":               "gate",
        "inclinedbridge":     "inclinedbridge",
        "kdv_door":           "kdv_door",
        "pendulum":           "pendulum",
        "kdv_rainbow":        "rainbow",
        "robustdoor":         "robustdoor",
        "rope":               "rope",
        "scaffold":           "scaffold",
        "windroad":           "windroad",
        "windswitch":         "windswitch",
    }),
    _group("rct", {
        "eggman_train":  "eggman_train",
        "freight_train": "freight_train",
        "normal_train":  "normal_train",
        "rct_belt":      "rct_belt",
        "rct_door":      "rct_door",
        "rct_seesaw":    "rct_seesaw",
        "rct_train":     "rct_train",
    }),
    _group("tpj", {
        "bungee":      "bungee",
        "espswing":    "esp_swing",
        "fruit":       "fruit",
        "hangingrock": "hangingrock",
        "lotus":       "lotus",
        "tarzan":      "tarzan",
        "turtle":      "turtle",
    }),
    _group("twn", {
        "twn_door":              "twn_door",
        "gondola":               "twn_gondola",
        "bell":                  "twn_obj_bell",
        "medal_of_royal_bronze": "twn_obj_bronzemdl",
        "medal_of_royal_silver": "twn_obj_silvermdl",
        "candlestick":           "twn_obj_candlestick",
        "kingdomcrest":          "twn_obj_crest",
        "darkness":              "twn_obj_darkness",
        "disk":                  "twn_obj_disk",
        "gliderope":             "twn_obj_gliderope",
        "glidewire":             "twn_obj_glidewire",
        "passring":              "twn_obj_passring",
        "present":               "twn_obj_present",
        "shopTV":                "twn_obj_shopTV",
        "trial_post":            "twn_obj_trialpillar",
        "venthole":              "twn_obj_venthole",
        "warpgate":              "twn_warpgate",
    }),
    _group("wvo", {
        "wvo_battleship":   "battleship",
        "wvo_jumpsplinter": "jumpsplinter",
        "wvo_orca":         "orca",
        "wvo_revolvingnet": "revolvingnet",
        "wvo_doorA":        "wvodoorA",
        "wvo_doorB":        "wvodoorB",
    }),
    _group("wap", {
        "wap_brokensnowball": "brokensnowball",
        "wap_conifer":        "conifer",
        "wap_pathsnowball":   "pathsnowball",
        "wap_searchlight":    "searchlight",
        "wap_snow":           "snow",
        "wap_door":           "wapdoor",
    }),
)

# Object types with no visual representation (trigger volumes, spawn points,
# sound sources, …). They resolve to nothing on purpose.
NON_VISUAL_TYPES: frozenset[str] = frozenset({
    "particle",
    "aqa_pond",
    "ambience",
    "ambience_collision",
    "wvo_waterslider",
    "chainjump",
    "cameraeventbox",
    "cameraeventcylinder",
    "eventbox",
    "player_start2",
    "player_goal",
    "amigo_collision",
    "pointsample",
    "positionSample",
    "common_stopplayercollision",
    "common_water_collision",
    "common_hint_collision",
    "common_windcollision_box",
    "impulsesphere",
    "snowboardjump",
})


def package_entries_for(object_type: str) -> Iterator[tuple[str, str]]:
    """Yield every (folder, stem) registered for *object_type*, in group order."""
    for group in PACKAGE_GROUPS:
        stem = group.packages.get(object_type)
        if stem is not None:
            yield group.folder, stem


def package_paths_for(object_type: str, package_root: str = "/xenon/object") -> list[str]:
    """Storage paths of every candidate package for *object_type*."""
    return [f"{package_root}/{folder}/{stem}.pkg" for folder, stem in package_entries_for(object_type)]


def all_object_types() -> list[tuple[str, str, str]]:
    """Flat (object type, folder, stem) listing in group order."""
    return [
        (object_type, group.folder, stem)
        for group in PACKAGE_GROUPS
        for object_type, stem in group.packages.items()
    ]
