"""Angle and polar-coordinate helpers for the sector. Pure functions."""
from __future__ import annotations

import math

from sector_strike.types import SectorGeometry

Point = tuple[float, float]

DEFAULT_SECTOR = SectorGeometry()


def angular_difference(a: float, b: float) -> float:
    """Shortest angular distance in degrees, in [0, 180]."""
    d = math.fmod(abs(a - b), 360.0)
    return 360.0 - d if d > 180.0 else d


def polar_to_plane(
    angle_deg: float, radius_frac: float, sector: SectorGeometry = DEFAULT_SECTOR
) -> Point:
    """Map sector-local polar coordinates to a plane point.

    The apex sits at ``sector.center``; 0 degrees points toward -y, positive
    angles lean toward +x.
    """
    a = math.radians(90.0 - angle_deg)
    cx, cy = sector.center
    r = sector.plane_radius * radius_frac
    return (cx + math.cos(a) * r, cy - math.sin(a) * r)


def planar_distance(p: Point, q: Point) -> float:
    return math.hypot(p[0] - q[0], p[1] - q[1])


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))
