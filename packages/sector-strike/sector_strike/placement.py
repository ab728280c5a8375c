"""Enemy and target placement inside the sector.

Point enemies get one disjoint radius band each, which guarantees radial
separation; angles and in-band radii are then sampled with a bounded number
of retries. When any enemy runs out of attempts, the whole layout falls back
to an evenly spaced deterministic placement, so placement always returns a
full set of positions.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from sector_strike.config import EncounterConfig
from sector_strike.geometry import angular_difference, planar_distance, polar_to_plane
from sector_strike.types import ArcTarget, LineTarget, SectorGeometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    angle: float
    radius: float


@dataclass(frozen=True)
class Placement:
    positions: tuple[Position, ...]
    used_fallback: bool = False


def _safe_angle_range(sector: SectorGeometry, config: EncounterConfig) -> tuple[float, float]:
    lo = sector.min_angle + config.edge_inset
    hi = sector.max_angle - config.edge_inset
    if lo >= hi:
        return sector.min_angle, sector.max_angle
    return lo, hi


def _bands(count: int, config: EncounterConfig) -> list[tuple[float, float]]:
    width = (config.radius_max - config.radius_min) / count
    return [
        (config.radius_min + i * width, config.radius_min + (i + 1) * width)
        for i in range(count)
    ]


def well_separated(
    candidate: Position,
    others: list[Position] | tuple[Position, ...],
    sector: SectorGeometry,
    config: EncounterConfig,
) -> bool:
    """Check a candidate against every accepted position."""
    p = polar_to_plane(candidate.angle, candidate.radius, sector)
    for other in others:
        if angular_difference(candidate.angle, other.angle) < config.min_angle_separation:
            return False
        if abs(candidate.radius - other.radius) < config.min_radius_separation:
            return False
        q = polar_to_plane(other.angle, other.radius, sector)
        if planar_distance(p, q) < config.min_planar_distance:
            return False
    return True


def fallback_positions(
    count: int, sector: SectorGeometry, config: EncounterConfig
) -> tuple[Position, ...]:
    """Evenly spaced layout: slot centers in angle, band centers in radius."""
    lo, hi = _safe_angle_range(sector, config)
    slot = (hi - lo) / count
    return tuple(
        Position(angle=lo + (i + 0.5) * slot, radius=(b_lo + b_hi) / 2.0)
        for i, (b_lo, b_hi) in enumerate(_bands(count, config))
    )


def generate_enemy_positions(
    rng: random.Random,
    count: int,
    sector: SectorGeometry,
    config: EncounterConfig,
) -> Placement:
    lo, hi = _safe_angle_range(sector, config)
    bands = _bands(count, config)
    order = rng.sample(range(count), count)

    accepted: list[Position] = []
    for i in range(count):
        b_lo, b_hi = bands[order[i]]
        for _ in range(config.max_placement_attempts):
            candidate = Position(angle=rng.uniform(lo, hi), radius=rng.uniform(b_lo, b_hi))
            if well_separated(candidate, accepted, sector, config):
                accepted.append(candidate)
                break
        else:
            logger.debug(
                "placement exhausted %d attempts for enemy %d, using fallback layout",
                config.max_placement_attempts,
                i,
            )
            return Placement(fallback_positions(count, sector, config), used_fallback=True)

    return Placement(tuple(accepted))


def generate_line_targets(
    rng: random.Random,
    count: int,
    sector: SectorGeometry,
    config: EncounterConfig,
) -> list[LineTarget]:
    """Symmetric left/right pairs. Target 0 sits on the center line."""
    targets = [LineTarget(index=0, left=0.0, right=0.0)]
    if count == 1:
        return targets

    _, hi = _safe_angle_range(sector, config)
    start = min(config.line_center_clearance, hi)
    zone = (hi - start) / (count - 1)
    for i in range(1, count):
        z_lo = start + (i - 1) * zone
        offset = rng.uniform(z_lo, z_lo + zone)
        targets.append(LineTarget(index=i, left=-offset, right=offset))
    return targets


def generate_arc_targets(
    rng: random.Random,
    count: int,
    sector: SectorGeometry,
    config: EncounterConfig,
) -> list[ArcTarget]:
    """Top/bottom radius pairs mirrored about the reticle band midpoint."""
    mid = sector.midpoint
    half_span = (sector.outer - sector.inner) / 2.0
    zone = half_span / count
    jitter = min(config.arc_jitter, zone / 4.0)

    targets = []
    for i in range(count):
        d = (i + 0.5) * zone + rng.uniform(-jitter, jitter)
        targets.append(ArcTarget(index=i, top=mid + d, bottom=mid - d))
    return targets
