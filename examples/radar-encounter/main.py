"""Radar Encounter: play the sector-strike targeting encounter with pygame.

Controls:
  Space / Click   Attack
  Left / Right    Previous / next weapon
  R               Reset encounter
  Esc             Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from sector_strike import Encounter, EncounterConfig, SectorGeometry
from sector_strike.signals import ENEMY_DEAD, HIT, MISS, RESET
from ui.constants import (
    BG_COLOR,
    FLASH_DEAD,
    FLASH_HIT,
    FLASH_MISS,
    FPS,
    SCREEN_H,
    SCREEN_W,
    SECTOR_CENTER,
    SECTOR_RADIUS,
    TPS,
)
from ui.effects import FlashLayer
from ui.hud import draw_hud
from ui.radar import draw_radar


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Radar Encounter - sector-strike visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--health", type=int, default=6, help="Starting health (default: 6)")
    p.add_argument("--enemies", type=int, default=3, help="Enemy count (1-5, default: 3)")
    p.add_argument("--weapon", type=int, default=0, help="Starting weapon index (default: 0)")
    p.add_argument("--debug", action="store_true", help="Log encounter events to stderr")
    args = p.parse_args()
    args.enemies = max(1, min(5, args.enemies))
    return args


def main() -> None:
    args = parse_args()
    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s"
        )

    sector = SectorGeometry(center=SECTOR_CENTER, plane_radius=SECTOR_RADIUS)
    config = EncounterConfig(max_health=args.health, enemy_count=args.enemies)
    encounter = Encounter(config, sector=sector, seed=args.seed, weapon_index=args.weapon)
    logging.getLogger(__name__).info("seed %d", encounter.seed)

    # Signals are delivered at the end of each advance_tick
    flashes = FlashLayer()
    encounter.signals.subscribe(HIT, flashes.on_signal(FLASH_HIT, 0.3))
    encounter.signals.subscribe(MISS, flashes.on_signal(FLASH_MISS, 0.6))
    encounter.signals.subscribe(ENEMY_DEAD, flashes.on_signal(FLASH_DEAD, 0.4))
    encounter.signals.subscribe(RESET, lambda signal, data: flashes.clear())

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Radar Encounter")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    # Tick accumulator for fixed-rate encounter ticks
    tick_ms = 1000.0 / TPS
    accumulator = 0.0

    running = True
    while running:
        accumulator += clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    encounter.attempt_attack(pygame.time.get_ticks())
                elif event.key == pygame.K_LEFT:
                    encounter.switch_weapon(-1)
                elif event.key == pygame.K_RIGHT:
                    encounter.switch_weapon(1)
                elif event.key == pygame.K_r:
                    encounter.reset()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                encounter.attempt_attack(pygame.time.get_ticks())

        # --- Tick encounter at fixed rate ---
        while accumulator >= tick_ms:
            encounter.advance_tick(tick_ms)
            accumulator -= tick_ms

        # --- Render ---
        snap = encounter.snapshot()
        screen.fill(BG_COLOR)
        draw_radar(screen, sector, snap)
        draw_hud(screen, font, snap)
        flashes.draw(screen)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
