"""
grass.py — Grass field: two layers of spring-damped blades that bend away from the mouse
"""
import math
import random
import pygame
from config import GRASS_RATIO, OFFSCREEN_BUFFER, BLADE_REACH, BACK_GRASS, FRONT_GRASS

CURVE_STEPS = 8   # segments per blade curve


def grass_top(h):
    """y of the grass line for a window of height h"""
    return h * GRASS_RATIO


def _tint(col, amt):
    """Blend col toward white by amt (0..1)"""
    return tuple(int(c + (255 - c) * amt) for c in col)


def bezier(p0, p1, p2, steps=CURVE_STEPS):
    pts = []
    for i in range(steps + 1):
        t = i / steps; u = 1 - t
        pts.append((u*u*p0[0] + 2*u*t*p1[0] + t*t*p2[0],
                    u*u*p0[1] + 2*u*t*p1[1] + t*t*p2[1]))
    return pts


class GrassBlade:
    __slots__ = ("x", "base_y", "height", "angle", "target", "color", "hl_col",
                 "curve", "stiffness", "damping", "strength", "max_bend",
                 "thickness", "highlight")

    def __init__(self, x, base_y, layer, color, rng=random):
        self.x = float(x); self.base_y = float(base_y)
        self.height = (40 + rng.random() * 50) * layer["height_scale"]
        self.angle = 0.0; self.target = 0.0

        self.color     = tuple(color)
        self.curve     = layer["curve"]
        self.stiffness = layer["stiffness"]
        self.damping   = layer["damping"]
        self.strength  = layer["interact"]
        self.max_bend  = layer["max_bend"]
        # picked once so the stroke doesn't flicker
        t = layer["thickness"]
        self.thickness = t if t is not None else 0.9 + rng.random() * 0.6
        self.highlight = layer["highlight"]
        self.hl_col    = _tint(self.color, self.highlight)

    def _clamp(self, v):
        return max(-self.max_bend, min(self.max_bend, v))

    def interact(self, mx, my):
        if math.hypot(self.x - mx, self.base_y - my) >= BLADE_REACH: return
        self.target = self._clamp((self.x - mx) * self.strength)

    def update(self):
        self.angle += (self.target - self.angle) * self.stiffness
        self.target *= self.damping
        self.angle = self._clamp(self.angle)

    def points(self):
        """Polyline of the blade: base → tip, control point pulled by curve"""
        h = self.height; s, c = math.sin(self.angle), math.cos(self.angle)
        tip  = (self.x + s*h,            self.base_y - c*h)
        ctrl = (self.x + s*h*self.curve, self.base_y - c*h*0.55)
        return bezier((self.x, self.base_y), ctrl, tip)

    def draw(self, surf):
        pts = self.points()
        pygame.draw.lines(surf, self.color, False, pts, max(1, round(self.thickness)))
        if self.highlight > 0:
            pygame.draw.lines(surf, self.hl_col, False, pts, max(1, round(self.thickness*0.6)))


def build_layer(w, base_y, layer, color, rng=random):
    return [GrassBlade(x, base_y, layer, color, rng)
            for x in range(-OFFSCREEN_BUFFER, int(w) + OFFSCREEN_BUFFER, layer["spacing"])]


class GrassField:
    """Back layer (dark, slow) + front layer (dense, reactive, highlighted)"""

    def __init__(self, rng=random):
        self.rng = rng
        self.back = []; self.front = []
        self.size = None       # (w, h) the blades were built for
        self.location = None   # theme name the blades were built for

    @property
    def built(self):
        return bool(self.front)

    def rebuild(self, w, h, theme):
        base_y = grass_top(h)
        self.back  = build_layer(w, base_y, BACK_GRASS,  theme.grass_back,  self.rng)
        self.front = build_layer(w, base_y, FRONT_GRASS, theme.grass_front, self.rng)
        self.size = (w, h); self.location = theme.name

    def needs_rebuild(self, w, h, loc):
        return not self.built or self.size != (w, h) or self.location != loc

    def update(self, mx, my):
        for g in self.back:  g.interact(mx, my); g.update()
        for g in self.front: g.interact(mx, my); g.update()

    def draw_back(self, surf):
        for g in self.back: g.draw(surf)

    def draw_front(self, surf):
        for g in self.front: g.draw(surf)
