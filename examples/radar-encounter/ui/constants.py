"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 30

# Layout dimensions
SCREEN_W = 520
RADAR_H = 330
HUD_H = 90
SCREEN_H = RADAR_H + HUD_H

# Sector placement on screen
SECTOR_CENTER = (SCREEN_W / 2, RADAR_H - 20)
SECTOR_RADIUS = 290.0
ARC_SAMPLES = 32

# Enemy marker radii
ENEMY_R = 8
POP_R = 13
SHAKE_PX = 4
FLASH_WIDTH = 6

# Colors
BG_COLOR = (12, 16, 14)
HUD_BG = (24, 30, 28)
WEDGE_COLOR = (40, 90, 60)
WEDGE_FILL = (18, 30, 22)
RETICLE_COLOR = (120, 255, 160)
ENEMY_COLOR = (220, 70, 60)
POP_COLOR = (255, 220, 120)
FADE_COLOR = (90, 60, 55)
TOUCH_COLOR = (255, 255, 255)
CHAIN_COLOR = (250, 210, 40)
TARGET_COLOR = (70, 110, 160)
TARGET_HIT = (90, 230, 120)
TEXT_COLOR = (200, 210, 200)
TEXT_DIM = (120, 130, 125)
MISS_COLOR = (255, 90, 90)
HEALTH_FULL = (200, 60, 60)
HEALTH_EMPTY = (60, 40, 40)
FLASH_HIT = (255, 220, 120)
FLASH_MISS = (255, 60, 60)
FLASH_DEAD = (120, 255, 160)

# Weapon mode -> label shown in the HUD
WEAPON_LABELS: dict[str, str] = {
    "sweeping": "SWEEP",
    "bouncing": "BOUNCE",
    "chaining": "CHAIN",
    "dual_line": "TWIN LINES",
    "converging_arc": "CLOSING ARCS",
}
