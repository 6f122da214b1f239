"""
scene.py — Scene: สถานะเกมทั้งหมด (title / forest / map), grass, bugs, inventory
"""
import random
from config import SW, SH, BUG_TYPES, DEFAULT_LOCATION
from themes import get_theme, resolve_location
from grass import GrassField
from entities import Swarm


class Scene:
    """Owns every piece of mutable game state; driven by Game's loop and event handlers."""

    def __init__(self, w=SW, h=SH, rng=None):
        self.rng = rng or random.Random()
        self.w, self.h = w, h
        self.state = "title"
        self.location = DEFAULT_LOCATION
        self.grass = GrassField(self.rng)
        self.swarm = Swarm(rng=self.rng)
        self.inventory = {t: 0 for t in BUG_TYPES}
        self.mouse = (0, 0)

    @property
    def theme(self):
        return get_theme(self.location)

    @property
    def frame_size(self):
        """Size the forest was last laid out for (the live size before the first build)"""
        return self.grass.size or (self.w, self.h)

    @property
    def title_visible(self):
        return self.state == "title"

    @property
    def map_visible(self):
        return self.state == "map"

    # ── Forest setup ──
    def _rebuild(self):
        """New blades + every bug respawned with the current size/theme"""
        theme = self.theme
        self.grass.rebuild(self.w, self.h, theme)
        self.swarm.reset_all(self.w, self.h, theme)

    def _enter_forest(self):
        self.state = "forest"
        if not self.grass.built:
            self.grass.rebuild(self.w, self.h, self.theme)
        elif self.grass.needs_rebuild(self.w, self.h, self.location):
            self._rebuild()
        if not self.swarm.bugs:
            self.swarm.populate(self.w, self.h, self.theme)

    # ── Navigation ──
    def start(self):
        if self.state != "title": return False
        self._enter_forest()
        return True

    def open_map(self):
        # globe only works during gameplay
        if self.state != "forest": return False
        self.state = "map"
        return True

    def close_map(self):
        if self.state != "map": return False
        self._enter_forest()
        return True

    def set_location(self, loc):
        self.location = resolve_location(loc)
        if self.state == "forest":
            self._rebuild()

    def select_location(self, loc):
        if self.state not in ("map", "forest"): return False
        self.set_location(loc)
        if self.state == "map":
            self._enter_forest()
        return True

    def resize(self, w, h):
        self.w, self.h = max(1, int(w)), max(1, int(h))
        if self.state == "forest":
            self._rebuild()

    # ── Input ──
    def pointer_move(self, x, y):
        self.mouse = (x, y)

    def pointer_down(self, x, y):
        """Catch at most one bug; returns its type or None"""
        if self.state != "forest": return None
        t = self.swarm.catch(x, y)
        if t is not None:
            self.inventory[t] += 1
        return t

    # ── Frame ──
    def step(self):
        """One frame; returns how many bugs dropped back into the grass"""
        if self.state != "forest": return 0
        self.grass.update(*self.mouse)
        return self.swarm.update()
