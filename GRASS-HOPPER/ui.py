"""
ui.py — Title screen, globe button, inventory HUD, world map overlay
"""
import math
import pygame
from config import PAL, BUG_TYPES, BUG_NAMES, LOCATIONS, LOCATION_NAMES, CAPTION
from themes import get_theme

# ─────────────────────────────────────────────────────
#  UI HELPERS
# ─────────────────────────────────────────────────────
def _panel(surf, x, y, w, h, alpha=200):
    s = pygame.Surface((w, h), pygame.SRCALPHA)
    s.fill((*PAL["ui_panel"], alpha)); surf.blit(s, (x, y))
    pygame.draw.rect(surf, PAL["ui_border"], (x, y, w, h), 1, border_radius=8)

def _btn(surf, rect, text, font, hover=False, selected=False):
    bc = PAL["ui_hover"] if hover or selected else (38, 62, 34)
    fc = PAL["ui_gold"] if hover or selected else PAL["ui_text"]
    bd = PAL["ui_gold"] if hover or selected else PAL["ui_border"]
    pygame.draw.rect(surf, bc, rect, border_radius=7)
    pygame.draw.rect(surf, bd, rect, 2, border_radius=7)
    t = font.render(text, True, fc)
    surf.blit(t, (rect[0]+rect[2]//2-t.get_width()//2, rect[1]+rect[3]//2-t.get_height()//2))

def _dim(surf, alpha=140):
    s = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
    s.fill((0, 0, 0, alpha)); surf.blit(s, (0, 0))

# ─────────────────────────────────────────────────────
#  SCREENS
# ─────────────────────────────────────────────────────
def draw_title(surf, fonts, mouse, frame):
    F, Fm, Fs = fonts
    SW, SH = surf.get_size()
    surf.fill(PAL["ui_bg"])

    # Swaying grass backdrop
    base = int(SH * 0.8)
    for i in range(0, SW + 12, 9):
        sway = math.sin(i * 0.03 + frame * 0.03) * 10
        hgt = 30 + (i * 37 % 40)
        g = 70 + i % 60
        pygame.draw.line(surf, (18, g, 26), (i, SH), (i + int(sway), base - hgt), 2)

    name = CAPTION.split(" ", 1)[-1].upper()
    sh = Fm.render(name, True, (0, 40, 0))
    ti = Fm.render(name, True, PAL["ui_gold"])
    ox = SW//2 - ti.get_width()//2
    surf.blit(sh, (ox+3, SH//4+3)); surf.blit(ti, (ox, SH//4))
    sub = Fs.render("Move the mouse through the grass  •  click the bugs to catch them", True, PAL["ui_dim"])
    surf.blit(sub, (SW//2-sub.get_width()//2, SH//4 + ti.get_height() + 14))

    bstart = pygame.Rect(SW//2-90, SH//2, 180, 54)
    _btn(surf, bstart, "Start", F, bstart.collidepoint(mouse))
    return bstart


def draw_globe(surf, fonts, mouse):
    """Round globe button (top-right) that opens the world map"""
    SW = surf.get_width()
    r = 22
    rect = pygame.Rect(SW - 2*r - 14, 14, 2*r, 2*r)
    hover = rect.collidepoint(mouse)
    c = rect.center
    pygame.draw.circle(surf, (60, 130, 190) if hover else (45, 105, 165), c, r)
    pygame.draw.circle(surf, (80, 160, 80), (c[0]-6, c[1]-4), 9)
    pygame.draw.circle(surf, (80, 160, 80), (c[0]+8, c[1]+7), 6)
    pygame.draw.ellipse(surf, PAL["ui_text"], (c[0]-r//2, c[1]-r, r, 2*r), 1)
    pygame.draw.line(surf, PAL["ui_text"], (c[0]-r, c[1]), (c[0]+r, c[1]), 1)
    pygame.draw.circle(surf, PAL["ui_gold"] if hover else PAL["ui_border"], c, r, 2)
    return rect


def draw_inventory(surf, fonts, inventory, theme):
    F, Fm, Fs = fonts
    pw, ph = 170, 18 + len(BUG_TYPES) * 26
    _panel(surf, 12, 12, pw, ph, 190)
    for i, t in enumerate(BUG_TYPES):
        y = 22 + i * 26
        pygame.draw.circle(surf, theme.bugs[t], (30, y + 9), 7)
        pygame.draw.circle(surf, PAL["shadow"], (30, y + 9), 7, 1)
        lbl = F.render(f"{BUG_NAMES[t]}: {inventory.get(t, 0)}", True, PAL["ui_text"])
        surf.blit(lbl, (46, y + 9 - lbl.get_height()//2))


def draw_world_map(surf, fonts, mouse, current):
    """Location picker over the frozen forest; returns ([(rect, loc)], close_rect)"""
    F, Fm, Fs = fonts
    SW, SH = surf.get_size()
    _dim(surf)

    pw, ph = 520, 300
    px, py = SW//2 - pw//2, SH//2 - ph//2
    _panel(surf, px, py, pw, ph, 230)
    t = Fm.render("World Map", True, PAL["ui_gold"])
    surf.blit(t, (SW//2 - t.get_width()//2, py + 18))

    btns = []
    bw, bh, gap = 150, 120, 15
    bx0 = SW//2 - (len(LOCATIONS) * bw + (len(LOCATIONS)-1) * gap)//2
    for i, loc in enumerate(LOCATIONS):
        r = pygame.Rect(bx0 + i*(bw+gap), py + 90, bw, bh)
        th = get_theme(loc)
        hover = r.collidepoint(mouse)
        # tiny preview: sky over ground
        pygame.draw.rect(surf, th.sky, (r.x, r.y, r.w, r.h*2//3), border_top_left_radius=7, border_top_right_radius=7)
        pygame.draw.circle(surf, th.trees, (r.x + r.w//3, r.y + r.h*2//3), 22)
        pygame.draw.circle(surf, th.trees, (r.x + r.w*3//4, r.y + r.h*2//3), 18)
        pygame.draw.rect(surf, th.ground, (r.x, r.y + r.h*2//3, r.w, r.h - r.h*2//3),
                         border_bottom_left_radius=7, border_bottom_right_radius=7)
        sel = loc == current
        pygame.draw.rect(surf, PAL["ui_gold"] if hover or sel else PAL["ui_border"], r, 3 if sel else 2, border_radius=7)
        lbl = F.render(f"{i+1}. {LOCATION_NAMES[loc]}", True, PAL["ui_gold"] if sel else PAL["ui_text"])
        surf.blit(lbl, (r.centerx - lbl.get_width()//2, r.bottom + 6))
        btns.append((r, loc))

    bclose = pygame.Rect(SW//2 - 60, py + ph - 50, 120, 36)
    _btn(surf, bclose, "Close", Fs, bclose.collidepoint(mouse))
    return btns, bclose
