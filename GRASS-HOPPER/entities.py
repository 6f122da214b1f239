"""
entities.py — Bug (กระโดดออกจากหญ้า แล้วจมกลับลงไป) และ Swarm (pool ขนาดคงที่)
"""
import math
import random
import pygame
from config import (
    BUG_COUNT, BUG_TYPES, BUG_RADIUS, BUG_MIN_SZ, GRAVITY, SPAWN_DEPTH,
    JUMP_MIN, JUMP_RAND, DRIFT, LOST_X, LOST_Y,
)
from grass import grass_top


def _shade(col, d):
    return tuple(max(0, min(255, c + d)) for c in col)

def _r(x, y, w, h):
    return pygame.Rect(int(x), int(y), max(1, int(w)), max(1, int(h)))


class Bug:
    def __init__(self, w, h, theme, rng=random):
        self.rng = rng
        self.reset(w, h, theme)

    def reset(self, w, h, theme):
        rng = self.rng
        # emerge from just under the grass line
        self.x = rng.random() * w
        self.y = grass_top(h) + SPAWN_DEPTH
        self.vx = (rng.random() - 0.5) * DRIFT
        self.vy = -JUMP_MIN - rng.random() * JUMP_RAND
        self.radius = BUG_RADIUS
        self.draw_size = max(BUG_MIN_SZ, self.radius * 2.6)
        self.type  = BUG_TYPES[int(rng.random() * len(BUG_TYPES))]
        self.color = theme.bugs[self.type]
        self.anim  = rng.random() * math.pi * 2

    def visible(self, h):
        return self.y < grass_top(h)

    def update(self, w, h, theme):
        gt = grass_top(h)
        self.vy += GRAVITY
        self.x += self.vx; self.y += self.vy
        self.anim += 0.4

        # falling back into the grass → respawn
        if self.vy > 0 and self.y >= gt:
            self.reset(w, h, theme); return "landed"

        if (self.x < -LOST_X or self.x > w + LOST_X or
                self.y < -LOST_Y or self.y > h + LOST_Y):
            self.reset(w, h, theme); return "lost"
        return None

    def is_clicked(self, mx, my):
        size = self.draw_size
        hw, hh = size * 0.65, size * 0.70
        return self.x - hw <= mx <= self.x + hw and self.y - hh <= my <= self.y + hh

    def draw(self, surf, h):
        if not self.visible(h): return
        s = self.draw_size = max(BUG_MIN_SZ, self.radius * 2.6)
        x, y = int(self.x), int(self.y)
        col = self.color; dark = _shade(col, -60)

        # shadow
        pygame.draw.ellipse(surf, _shade(col, -110), _r(x - s*0.35, y + s*0.18, s*0.7, s*0.2))

        if self.type == "hopper":
            d = 1 if self.vx >= 0 else -1
            pygame.draw.ellipse(surf, col,  _r(x - s*0.4, y - s*0.16, s*0.8, s*0.32))
            pygame.draw.ellipse(surf, dark, _r(x - s*0.4, y - s*0.16, s*0.8, s*0.32), 1)
            pygame.draw.circle(surf, col, (int(x + d*s*0.4), y - int(s*0.06)), int(s*0.14))
            # big back legs, kicked out while rising
            kick = 0.3 if self.vy < 0 else 0.12
            knee = (x - d*s*0.1, y - s*0.3)
            pygame.draw.line(surf, dark, (x, y), knee, 2)
            pygame.draw.line(surf, dark, knee, (x - d*s*0.45, y + s*kick), 2)
            pygame.draw.line(surf, dark, (int(x + d*s*0.45), y - int(s*0.14)),
                             (int(x + d*s*0.62), y - int(s*0.42)), 1)
        elif self.type == "beetle":
            r = s * 0.34
            for i in (-1, 0, 1):
                pygame.draw.line(surf, dark, (x - r*1.3, y + i*r*0.6), (x + r*1.3, y + i*r*0.6), 1)
            pygame.draw.circle(surf, col, (x, y), int(r))
            pygame.draw.circle(surf, dark, (x, int(y - r*1.05)), int(r*0.45))
            pygame.draw.line(surf, dark, (x, int(y - r)), (x, int(y + r)), 1)
            pygame.draw.circle(surf, _shade(col, 70), (int(x - r*0.35), int(y - r*0.35)), max(1, int(r*0.25)))
        else:
            flap = 0.55 + 0.45 * abs(math.sin(self.anim))
            ww, wh = s*0.42*flap, s*0.5
            for d in (-1, 1):
                wx = x + (0 if d > 0 else -ww)
                pygame.draw.ellipse(surf, col,  _r(wx, y - wh*0.6, ww, wh))
                pygame.draw.ellipse(surf, dark, _r(wx, y - wh*0.6, ww, wh), 1)
            pygame.draw.ellipse(surf, dark, _r(x - s*0.06, y - s*0.22, s*0.12, s*0.44))
            for d in (-1, 1):
                pygame.draw.line(surf, dark, (x, y - s*0.2), (x + d*s*0.14, y - s*0.4), 1)


class Swarm:
    """Fixed pool of bugs; bugs are reset in place, never added or removed"""

    def __init__(self, count=BUG_COUNT, rng=random):
        self.count = count
        self.rng = rng
        self.bugs = []
        self.w = self.h = 0
        self.theme = None

    def populate(self, w, h, theme):
        self.w, self.h, self.theme = w, h, theme
        if self.bugs: return
        self.bugs = [Bug(w, h, theme, self.rng) for _ in range(self.count)]

    def reset_all(self, w, h, theme):
        self.w, self.h, self.theme = w, h, theme
        for b in self.bugs: b.reset(w, h, theme)

    def update(self):
        landed = 0
        for b in self.bugs:
            if b.update(self.w, self.h, self.theme) == "landed": landed += 1
        return landed

    def draw(self, surf):
        for b in self.bugs: b.draw(surf, self.h)

    def catch(self, mx, my):
        """Front-most visible bug under the pointer is caught; returns its type"""
        for b in reversed(self.bugs):
            if b.visible(self.h) and b.is_clicked(mx, my):
                t = b.type
                b.reset(self.w, self.h, self.theme)
                return t
        return None
