"""Screen-edge flashes driven by encounter signals."""
from __future__ import annotations

import time

import pygame

from ui.constants import FLASH_WIDTH, RADAR_H, SCREEN_W


class Flash:
    """A colored border that fades out over ``duration`` seconds."""

    def __init__(self, color: tuple[int, int, int], duration: float) -> None:
        self.color = color
        self.created = time.monotonic()
        self.duration = duration

    def alpha(self) -> float:
        elapsed = time.monotonic() - self.created
        return max(0.0, 1.0 - elapsed / self.duration)


class FlashLayer:
    """Holds at most one flash; a newer signal replaces the older one."""

    def __init__(self) -> None:
        self._flash: Flash | None = None

    def on_signal(self, color: tuple[int, int, int], duration: float):
        def handler(signal: str, data: dict) -> None:
            self._flash = Flash(color, duration)
        return handler

    def clear(self) -> None:
        self._flash = None

    def draw(self, surface: pygame.Surface) -> None:
        if self._flash is None:
            return
        a = self._flash.alpha()
        if a <= 0.0:
            self._flash = None
            return
        r, g, b = self._flash.color
        color = (int(r * a), int(g * a), int(b * a))
        pygame.draw.rect(surface, color, pygame.Rect(0, 0, SCREEN_W, RADAR_H), FLASH_WIDTH)
