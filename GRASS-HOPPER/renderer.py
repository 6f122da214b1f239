"""
renderer.py — วาดฉาก forest: sky/trees/ground, grass layers, bugs, occluder
"""
import pygame
from config import TREE_STEP, TREE_X0, TREE_R, TREE_LINE, OCC_TOP, OCC_H, LIP_H, LIP_ALPHA
from grass import grass_top

_lip = None   # one strip, rebuilt when the width changes


def draw_trees(surf, col, w, h):
    """Row of canopy blobs behind the ground — silhouette only"""
    cy = int(h * TREE_LINE)
    for i in range(int(w / TREE_STEP) + 2):
        pygame.draw.circle(surf, col, (i * TREE_STEP + TREE_X0, cy), TREE_R)


def draw_background(surf, theme, w, h):
    gt = int(grass_top(h))
    surf.fill(theme.sky)
    draw_trees(surf, theme.trees, w, h)
    pygame.draw.rect(surf, theme.ground, (0, gt, w, max(h, surf.get_height()) - gt))


def draw_occluder(surf, theme, w, h):
    """Ground-colored band over the grass line hides bug bottoms as they sink in"""
    global _lip
    top = int(grass_top(h)) - OCC_TOP
    pygame.draw.rect(surf, theme.ground, (0, top, w, OCC_H))
    if _lip is None or _lip.get_width() != w:
        _lip = pygame.Surface((w, LIP_H))
        _lip.set_alpha(LIP_ALPHA); _lip.fill((0, 0, 0))
    surf.blit(_lip, (0, top))


def draw_scene(surf, scene):
    """Depth order: back grass → bugs → occluder → front grass"""
    # frozen map backdrop keeps the size the forest was laid out for
    theme, h = scene.theme, scene.frame_size[1]
    w = max(scene.frame_size[0], surf.get_width())
    draw_background(surf, theme, w, h)
    scene.grass.draw_back(surf)
    scene.swarm.draw(surf)
    draw_occluder(surf, theme, w, h)
    scene.grass.draw_front(surf)
