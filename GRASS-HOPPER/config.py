"""
config.py — ค่าคงที่และข้อมูลเกม (window, grass layers, bugs, palette)
"""

# ─────────────────────────────────────────────────────
#  WINDOW
# ─────────────────────────────────────────────────────
SW, SH = 1280, 720
FPS    = 60
CAPTION = "🦗 Grass Hopper"

# ─────────────────────────────────────────────────────
#  GROUND / GRASS
# ─────────────────────────────────────────────────────
GRASS_RATIO      = 0.66   # grass line at 66% of screen height
OFFSCREEN_BUFFER = 400    # extra grass offscreen so a wider window never shows gaps
BLADE_REACH      = 70     # pointer distance that still bends a blade

# Per-layer tuning. thickness=None → random per blade (0.9 .. 1.5)
BACK_GRASS = {
    "spacing": 3, "thickness": 1.2, "height_scale": 0.78, "curve": 0.40,
    "stiffness": 0.08, "damping": 0.90, "interact": 0.006, "max_bend": 0.38,
    "highlight": 0.0,
}
FRONT_GRASS = {
    "spacing": 2, "thickness": None, "height_scale": 1.0, "curve": 0.45,
    "stiffness": 0.15, "damping": 0.85, "interact": 0.015, "max_bend": 0.55,
    "highlight": 0.08,
}

# ─────────────────────────────────────────────────────
#  BUGS
# ─────────────────────────────────────────────────────
BUG_COUNT   = 7
BUG_TYPES   = ("hopper", "beetle", "moth")
BUG_NAMES   = {"hopper": "Hopper", "beetle": "Beetle", "moth": "Moth"}
BUG_RADIUS  = 12
BUG_MIN_SZ  = 18
GRAVITY     = 0.25
SPAWN_DEPTH = 18          # bugs start just below the grass line
JUMP_MIN, JUMP_RAND = 6.0, 4.0
DRIFT       = 3.0         # vx in [-DRIFT/2, DRIFT/2)
LOST_X, LOST_Y = 120, 200 # safety-reset margins outside the window

# ─────────────────────────────────────────────────────
#  LOCATIONS
# ─────────────────────────────────────────────────────
LOCATIONS        = ("forest", "meadow", "swamp")
LOCATION_NAMES   = {"forest": "Forest", "meadow": "Meadow", "swamp": "Swamp"}
DEFAULT_LOCATION = "forest"

# ─────────────────────────────────────────────────────
#  BACKGROUND / OCCLUDER
# ─────────────────────────────────────────────────────
TREE_STEP, TREE_X0, TREE_R = 120, 50, 90
TREE_LINE  = 0.6
OCC_TOP, OCC_H = 10, 26
LIP_H, LIP_ALPHA = 8, 36  # ~0.14 opacity

# ─────────────────────────────────────────────────────
#  UI PALETTE
# ─────────────────────────────────────────────────────
PAL = {
    "ui_bg":     (10, 18, 12),
    "ui_panel":  (14, 22, 12),
    "ui_text":   (225, 230, 210),
    "ui_dim":    (130, 145, 120),
    "ui_gold":   (240, 205, 90),
    "ui_border": (70, 110, 60),
    "ui_hover":  (58, 92, 50),
    "shadow":    (0, 0, 0),
}
