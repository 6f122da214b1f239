"""
themes.py — Biome palettes (sky / ground / trees / grass / bug tints)
"""
from dataclasses import dataclass
from types import MappingProxyType

from config import LOCATIONS, DEFAULT_LOCATION

BASE_THEME = {
    "sky":         (123, 210, 203),
    "ground":      (108, 131, 59),
    "trees":       (99, 115, 44),
    "grass_front": (40, 99, 40),
    "grass_back":  (12, 60, 22),
    "bugs": {"hopper": (150, 215, 70), "beetle": (70, 45, 30), "moth": (245, 238, 215)},
}

# Only what differs from BASE_THEME
THEME_OVERRIDES = {
    "forest": {},
    "meadow": {
        "sky":         (159, 231, 255),
        "ground":      (68, 184, 74),
        "trees":       (43, 122, 47),
        "grass_front": (53, 177, 53),
        "grass_back":  (20, 95, 28),
        "bugs": {"hopper": (166, 255, 77), "beetle": (77, 43, 26), "moth": (255, 242, 204)},
    },
    "swamp": {
        "sky":         (127, 184, 166),
        "ground":      (47, 107, 61),
        "trees":       (20, 63, 42),
        "grass_front": (42, 138, 74),
        "grass_back":  (10, 35, 20),
        "bugs": {"hopper": (85, 255, 179), "beetle": (26, 26, 26), "moth": (191, 255, 234)},
    },
}


@dataclass(frozen=True)
class Theme:
    name: str
    sky: tuple
    ground: tuple
    trees: tuple
    grass_front: tuple
    grass_back: tuple
    bugs: MappingProxyType


_theme_cache = {}


def resolve_location(loc):
    """Unknown keys fall back to the default location."""
    if loc in THEME_OVERRIDES and loc in LOCATIONS:
        return loc
    print(f"[theme] unknown location {loc!r}, using {DEFAULT_LOCATION}")
    return DEFAULT_LOCATION


def _build(loc):
    o = THEME_OVERRIDES[loc]
    merged = {**BASE_THEME, **o}
    bugs = {**BASE_THEME["bugs"], **o.get("bugs", {})}
    return Theme(
        name=loc,
        sky=merged["sky"], ground=merged["ground"], trees=merged["trees"],
        grass_front=merged["grass_front"], grass_back=merged["grass_back"],
        bugs=MappingProxyType(bugs),
    )


def get_theme(loc=DEFAULT_LOCATION):
    loc = resolve_location(loc)
    if loc not in _theme_cache:
        _theme_cache[loc] = _build(loc)
    return _theme_cache[loc]
