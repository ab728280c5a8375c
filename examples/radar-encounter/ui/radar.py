"""Radar wedge, enemies, targets and reticles, drawn from an encounter snapshot."""
from __future__ import annotations

import random

import pygame

from sector_strike import SectorGeometry, polar_to_plane
from ui.constants import (
    ARC_SAMPLES,
    CHAIN_COLOR,
    ENEMY_COLOR,
    ENEMY_R,
    FADE_COLOR,
    POP_COLOR,
    POP_R,
    RETICLE_COLOR,
    SHAKE_PX,
    TARGET_COLOR,
    TARGET_HIT,
    TOUCH_COLOR,
    WEDGE_COLOR,
    WEDGE_FILL,
)

_jitter = random.Random()


def _pt(sector: SectorGeometry, angle: float, radius: float, offset: tuple[int, int]) -> tuple[int, int]:
    x, y = polar_to_plane(angle, radius, sector)
    return int(x) + offset[0], int(y) + offset[1]


def _arc_points(
    sector: SectorGeometry, radius: float, offset: tuple[int, int]
) -> list[tuple[int, int]]:
    lo, hi = sector.min_angle, sector.max_angle
    step = (hi - lo) / ARC_SAMPLES
    return [_pt(sector, lo + i * step, radius, offset) for i in range(ARC_SAMPLES + 1)]


def _draw_arc(surface, sector, radius, color, offset, width=1) -> None:
    pygame.draw.lines(surface, color, False, _arc_points(sector, radius, offset), width)


def _draw_ray(surface, sector, angle, color, offset, width=1) -> None:
    start = _pt(sector, angle, sector.inner, offset)
    end = _pt(sector, angle, sector.outer, offset)
    pygame.draw.line(surface, color, start, end, width)


def draw_radar(surface: pygame.Surface, sector: SectorGeometry, snap: dict) -> None:
    """Draw one frame of the radar from ``Encounter.snapshot()``."""
    offset = (0, 0)
    if snap["shaking"]:
        offset = (_jitter.randint(-SHAKE_PX, SHAKE_PX), _jitter.randint(-SHAKE_PX, SHAKE_PX))

    # Wedge
    outer = _arc_points(sector, sector.outer, offset)
    inner = _arc_points(sector, sector.inner, offset)
    pygame.draw.polygon(surface, WEDGE_FILL, outer + inner[::-1])
    _draw_arc(surface, sector, sector.outer, WEDGE_COLOR, offset)
    _draw_arc(surface, sector, sector.inner, WEDGE_COLOR, offset)
    _draw_arc(surface, sector, sector.midpoint, WEDGE_COLOR, offset)
    _draw_ray(surface, sector, sector.min_angle, WEDGE_COLOR, offset)
    _draw_ray(surface, sector, sector.max_angle, WEDGE_COLOR, offset)
    _draw_ray(surface, sector, 0.0, WEDGE_COLOR, offset)

    mode = snap["weapon"]["mode"]
    touching = set(snap["touching"])

    if mode == "dual_line":
        _draw_line_targets(surface, sector, snap, touching, offset)
    elif mode == "converging_arc":
        _draw_arc_targets(surface, sector, snap, touching, offset)
    else:
        _draw_enemies(surface, sector, snap, touching, offset)

    _draw_reticle(surface, sector, snap["reticle"], offset)


def _draw_enemies(surface, sector, snap, touching, offset) -> None:
    chain = set(snap["chain"])
    for enemy in snap["enemies"]:
        state = enemy["lifecycle"]
        if state == "dead":
            continue
        pos = _pt(sector, enemy["angle"], enemy["radius"], offset)
        if state == "popping":
            pygame.draw.circle(surface, POP_COLOR, pos, POP_R)
        elif state == "fading":
            pygame.draw.circle(surface, FADE_COLOR, pos, ENEMY_R)
        else:
            pygame.draw.circle(surface, ENEMY_COLOR, pos, ENEMY_R)
            if enemy["index"] in chain:
                pygame.draw.circle(surface, CHAIN_COLOR, pos, ENEMY_R + 4, 2)
            if enemy["index"] in touching:
                pygame.draw.circle(surface, TOUCH_COLOR, pos, ENEMY_R + 1, 1)


def _draw_line_targets(surface, sector, snap, touching, offset) -> None:
    for target in snap["line_targets"]:
        color = TARGET_HIT if target["hit"] else TARGET_COLOR
        width = 3 if target["index"] in touching else 1
        _draw_ray(surface, sector, target["left"], color, offset, width)
        _draw_ray(surface, sector, target["right"], color, offset, width)


def _draw_arc_targets(surface, sector, snap, touching, offset) -> None:
    for target in snap["arc_targets"]:
        color = TARGET_HIT if target["hit"] else TARGET_COLOR
        width = 3 if target["index"] in touching else 1
        _draw_arc(surface, sector, target["top"], color, offset, width)
        _draw_arc(surface, sector, target["bottom"], color, offset, width)


def _draw_reticle(surface, sector, reticle, offset) -> None:
    if "radius" in reticle:
        _draw_arc(surface, sector, reticle["radius"], RETICLE_COLOR, offset, 2)
    elif "left" in reticle:
        _draw_ray(surface, sector, reticle["left"], RETICLE_COLOR, offset, 2)
        _draw_ray(surface, sector, reticle["right"], RETICLE_COLOR, offset, 2)
    else:
        _draw_arc(surface, sector, reticle["top"], RETICLE_COLOR, offset, 2)
        _draw_arc(surface, sector, reticle["bottom"], RETICLE_COLOR, offset, 2)
