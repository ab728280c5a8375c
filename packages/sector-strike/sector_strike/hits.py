"""Pure hit-detection predicates.

Nothing here mutates encounter state. Each function returns a ``Verdict``
for combat to apply, or the set of indices currently under the reticle.
"""
from __future__ import annotations

from typing import Sequence

from sector_strike.config import EncounterConfig
from sector_strike.geometry import angular_difference
from sector_strike.reticle import ConvergingArcReticle, DualLineReticle, RadialReticle
from sector_strike.types import (
    MISS,
    ArcTarget,
    Enemy,
    LineTarget,
    Verdict,
    VerdictKind,
)


def radial_candidates(
    reticle: RadialReticle, enemies: Sequence[Enemy], tolerance: float
) -> list[int]:
    """Indices of alive enemies inside the reticle's radius band, in index order."""
    return [
        e.index
        for e in sorted(enemies, key=lambda e: e.index)
        if e.alive and abs(e.radius - reticle.radius) <= tolerance
    ]


def dual_line_candidates(
    reticle: DualLineReticle, targets: Sequence[LineTarget], tolerance: float
) -> list[int]:
    return [
        t.index
        for t in targets
        if not t.hit
        and angular_difference(reticle.left, t.left) <= tolerance
        and angular_difference(reticle.right, t.right) <= tolerance
    ]


def converging_arc_candidates(
    reticle: ConvergingArcReticle, targets: Sequence[ArcTarget], tolerance: float
) -> list[int]:
    return [
        t.index
        for t in targets
        if not t.hit
        and abs(reticle.top - t.top) <= tolerance
        and abs(reticle.bottom - t.bottom) <= tolerance
    ]


def single_kill_hit(
    reticle: RadialReticle, enemies: Sequence[Enemy], config: EncounterConfig
) -> Verdict:
    found = radial_candidates(reticle, enemies, config.radius_tolerance)
    if not found:
        return MISS
    return Verdict(VerdictKind.KILL, (found[0],))


def chain_hit(
    reticle: RadialReticle,
    enemies: Sequence[Enemy],
    chain: Sequence[int],
    config: EncounterConfig,
) -> Verdict:
    """Prefer the first qualifying enemy that is not yet chained."""
    found = radial_candidates(reticle, enemies, config.radius_tolerance)
    if not found:
        return MISS
    fresh = [i for i in found if i not in chain]
    return Verdict(VerdictKind.CHAIN, ((fresh or found)[0],))


def dual_line_hit(
    reticle: DualLineReticle, targets: Sequence[LineTarget], config: EncounterConfig
) -> Verdict:
    found = dual_line_candidates(reticle, targets, config.angle_tolerance)
    if not found:
        return MISS
    return Verdict(VerdictKind.TARGETS, tuple(found))


def converging_arc_hit(
    reticle: ConvergingArcReticle, targets: Sequence[ArcTarget], config: EncounterConfig
) -> Verdict:
    found = converging_arc_candidates(reticle, targets, config.arc_tolerance)
    if not found:
        return MISS
    return Verdict(VerdictKind.TARGETS, tuple(found))
