"""Reticle states and their per-tick motion laws.

Every step function is pure: it takes the previous reticle and the elapsed
milliseconds and returns the next reticle.
"""
from __future__ import annotations

from dataclasses import dataclass

from sector_strike.config import EncounterConfig
from sector_strike.types import SectorGeometry


@dataclass(frozen=True, slots=True)
class RadialReticle:
    radius: float
    direction: int = 1


@dataclass(frozen=True, slots=True)
class DualLineReticle:
    left: float
    right: float


@dataclass(frozen=True, slots=True)
class ConvergingArcReticle:
    top: float
    bottom: float


Reticle = RadialReticle | DualLineReticle | ConvergingArcReticle


def sweep_step(
    reticle: RadialReticle, dt_ms: float, sector: SectorGeometry, config: EncounterConfig
) -> RadialReticle:
    """Grow toward the outer bound; wrap to the inner bound on the tick after."""
    if reticle.radius >= sector.outer:
        return RadialReticle(radius=sector.inner, direction=1)
    radius = reticle.radius + config.radial_speed * dt_ms / 1000.0
    return RadialReticle(radius=min(radius, sector.outer), direction=1)


def bounce_step(
    reticle: RadialReticle, dt_ms: float, sector: SectorGeometry, config: EncounterConfig
) -> RadialReticle:
    """Oscillate between the bounds, reversing on contact."""
    direction = reticle.direction
    radius = reticle.radius + direction * config.radial_speed * dt_ms / 1000.0
    if radius >= sector.outer:
        radius = sector.outer - config.bounce_nudge
        direction = -1
    elif radius <= sector.inner:
        radius = sector.inner + config.bounce_nudge
        direction = 1
    return RadialReticle(radius=radius, direction=direction)


def dual_line_step(
    reticle: DualLineReticle, dt_ms: float, sector: SectorGeometry, config: EncounterConfig
) -> DualLineReticle:
    """Both halves travel inward from their edge and restart on reaching 0."""
    left = reticle.left + config.line_speed_left * dt_ms / 1000.0
    if left >= 0.0:
        left = sector.min_angle
    right = reticle.right - config.line_speed_right * dt_ms / 1000.0
    if right <= 0.0:
        right = sector.max_angle
    return DualLineReticle(left=left, right=right)


def converging_arc_step(
    reticle: ConvergingArcReticle,
    dt_ms: float,
    sector: SectorGeometry,
    config: EncounterConfig,
) -> ConvergingArcReticle:
    """Top closes on the midpoint and restarts; bottom is always its mirror."""
    mid = sector.midpoint
    top = reticle.top - config.arc_speed * dt_ms / 1000.0
    if top <= mid:
        top = sector.outer
    return ConvergingArcReticle(top=top, bottom=2.0 * mid - top)
