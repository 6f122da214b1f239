"""
game.py — คลาส Game หลัก: loop, events, update, draw
"""
import sys
import traceback
import pygame

from config import SW, SH, FPS, CAPTION, PAL, LOCATIONS
from audio import Audio
from scene import Scene
from renderer import draw_scene
from ui import draw_title, draw_globe, draw_inventory, draw_world_map

LOC_KEYS = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2}


def make_font(size, bold=False):
    for fn in ["Segoe UI", "DejaVu Sans", "FreeSans", "Arial", None]:
        try: return pygame.font.SysFont(fn, size, bold=bold)
        except Exception: pass
    return pygame.font.Font(None, size)


class Game:
    def __init__(self):
        pygame.init()
        self.screen = pygame.display.set_mode((SW, SH), pygame.RESIZABLE)
        pygame.display.set_caption(CAPTION)
        self.clock = pygame.time.Clock()
        self.fonts = (make_font(20), make_font(46, True), make_font(15))

        self.audio = Audio()
        self.scene = Scene(*self.screen.get_size())
        self.frame = 0
        self.running = True

        # Hit rects, refreshed every draw
        R = pygame.Rect(0, 0, 0, 0)
        self._start = R
        self._globe = R
        self._map   = ([], R)   # ([(rect, loc)], close)

    # ── Main loop ──
    def run(self):
        while self.running:
            for tag, step in (("events", self._events), ("update", self._update), ("draw", self._draw)):
                try:
                    step()
                except Exception as e:
                    print(f"[{tag}] {e}")
                    traceback.print_exc()
            self.frame += 1
            self.clock.tick(FPS)
        pygame.quit(); sys.exit()

    # ── Events ──
    def _events(self):
        sc = self.scene
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.running = False; return

            if ev.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.get_surface()
                sc.resize(ev.w, ev.h)

            elif ev.type == pygame.MOUSEMOTION:
                sc.pointer_move(*ev.pos)

            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                self._click(ev.pos)

            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_F2: self.audio.toggle()
                elif sc.state == "title" and ev.key in (pygame.K_RETURN, pygame.K_SPACE):
                    self._start_game()
                elif sc.state == "forest" and ev.key == pygame.K_TAB:
                    self._open_map()
                elif sc.state == "map":
                    if ev.key == pygame.K_ESCAPE:
                        self.audio.play("click"); sc.close_map()
                    elif ev.key in LOC_KEYS:
                        self.audio.play("click"); sc.select_location(LOCATIONS[LOC_KEYS[ev.key]])

    def _start_game(self):
        self.audio.play("click")
        self.scene.start()

    def _open_map(self):
        if self.scene.open_map():
            self.audio.play("map")

    def _click(self, pos):
        sc = self.scene
        if sc.state == "title":
            if self._start.collidepoint(pos): self._start_game()

        elif sc.state == "map":
            btns, bclose = self._map
            for r, loc in btns:
                if r.collidepoint(pos):
                    self.audio.play("click"); sc.select_location(loc); return
            if bclose.collidepoint(pos):
                self.audio.play("click"); sc.close_map()

        elif sc.state == "forest":
            if self._globe.collidepoint(pos):
                self._open_map(); return
            # เก็บแมลง
            if sc.pointer_down(*pos) is not None:
                self.audio.play("catch")

    # ── Update ──
    def _update(self):
        # soft rustle when a bug drops back into the grass
        if self.scene.step():
            self.audio.play("rustle")

    # ── Draw ──
    def _draw(self):
        surf  = self.screen
        sc    = self.scene
        mouse = pygame.mouse.get_pos()

        if sc.title_visible:
            self._start = draw_title(surf, self.fonts, mouse, self.frame)
        else:
            # map freezes the forest behind the overlay
            draw_scene(surf, sc)
            draw_inventory(surf, self.fonts, sc.inventory, sc.theme)
            if sc.map_visible:
                self._map = draw_world_map(surf, self.fonts, mouse, sc.location)
            else:
                self._globe = draw_globe(surf, self.fonts, mouse)

        # FPS
        Fs = self.fonts[2]
        fps = Fs.render(f"FPS {int(self.clock.get_fps())}", True, PAL["ui_dim"])
        surf.blit(fps, (surf.get_width() - fps.get_width() - 8, surf.get_height() - 20))

        pygame.display.flip()
