"""HUD strip: health pips, weapon, flavor text and key hints."""
from __future__ import annotations

import pygame

from ui.constants import (
    HEALTH_EMPTY,
    HEALTH_FULL,
    HUD_BG,
    HUD_H,
    MISS_COLOR,
    RADAR_H,
    SCREEN_W,
    TEXT_COLOR,
    TEXT_DIM,
    WEAPON_LABELS,
)


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, snap: dict) -> None:
    pygame.draw.rect(surface, HUD_BG, pygame.Rect(0, RADAR_H, SCREEN_W, HUD_H))
    x0, y0 = 12, RADAR_H + 10

    # Health pips
    for i in range(snap["max_health"]):
        color = HEALTH_FULL if i < snap["health"] else HEALTH_EMPTY
        pygame.draw.rect(surface, color, pygame.Rect(x0 + i * 16, y0, 12, 12))

    label = WEAPON_LABELS.get(snap["weapon"]["mode"], snap["weapon"]["mode"])
    weapon = font.render(f"[{label}]", True, TEXT_COLOR)
    surface.blit(weapon, (SCREEN_W - weapon.get_width() - 12, y0 - 2))

    color = MISS_COLOR if snap["feedback"]["kind"] == "miss" else TEXT_COLOR
    text = font.render(snap["text"], True, color)
    surface.blit(text, (x0, y0 + 24))

    if snap["phase"] == "playing":
        hint = "Space attack  Left/Right weapon  R reset  Esc quit"
    else:
        hint = "R to play again  Esc quit"
    surface.blit(font.render(hint, True, TEXT_DIM), (x0, y0 + 50))
