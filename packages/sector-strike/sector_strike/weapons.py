"""Weapon catalogue. One class per mode: motion law, hit test, target geometry."""
from __future__ import annotations

import random
from typing import TYPE_CHECKING

from sector_strike import hits, placement
from sector_strike.config import EncounterConfig
from sector_strike.reticle import (
    ConvergingArcReticle,
    DualLineReticle,
    RadialReticle,
    Reticle,
    bounce_step,
    converging_arc_step,
    dual_line_step,
    sweep_step,
)
from sector_strike.types import KillRule, SectorGeometry, Verdict, WeaponMode

if TYPE_CHECKING:
    from sector_strike.types import EncounterState


class Weapon:
    """Base weapon. Subclasses fill in the mode-specific pieces."""

    mode: WeaponMode
    kill_rule: KillRule = KillRule.IMMEDIATE
    label: str = ""

    def initial_reticle(self, sector: SectorGeometry) -> Reticle:
        return RadialReticle(radius=sector.inner, direction=1)

    def step(
        self, reticle: Reticle, dt_ms: float, sector: SectorGeometry, config: EncounterConfig
    ) -> Reticle:
        raise NotImplementedError

    def hit_test(self, state: EncounterState, config: EncounterConfig) -> Verdict:
        raise NotImplementedError

    def touching(self, state: EncounterState, config: EncounterConfig) -> list[int]:
        """Indices under the reticle right now, for highlighting."""
        return hits.radial_candidates(state.reticle, state.enemies, config.radius_tolerance)

    def make_targets(
        self,
        state: EncounterState,
        rng: random.Random,
        sector: SectorGeometry,
        config: EncounterConfig,
    ) -> None:
        """Regenerate line/arc geometry on ``state``. Point modes have none."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Sweeping(Weapon):
    mode = WeaponMode.SWEEPING
    label = "sweep"

    def step(
        self, reticle: Reticle, dt_ms: float, sector: SectorGeometry, config: EncounterConfig
    ) -> Reticle:
        return sweep_step(reticle, dt_ms, sector, config)

    def hit_test(self, state: EncounterState, config: EncounterConfig) -> Verdict:
        return hits.single_kill_hit(state.reticle, state.enemies, config)


class Bouncing(Weapon):
    mode = WeaponMode.BOUNCING
    label = "bounce"

    def step(
        self, reticle: Reticle, dt_ms: float, sector: SectorGeometry, config: EncounterConfig
    ) -> Reticle:
        return bounce_step(reticle, dt_ms, sector, config)

    def hit_test(self, state: EncounterState, config: EncounterConfig) -> Verdict:
        return hits.single_kill_hit(state.reticle, state.enemies, config)


class Chaining(Weapon):
    mode = WeaponMode.CHAINING
    kill_rule = KillRule.CHAIN
    label = "chain"

    def step(
        self, reticle: Reticle, dt_ms: float, sector: SectorGeometry, config: EncounterConfig
    ) -> Reticle:
        return sweep_step(reticle, dt_ms, sector, config)

    def hit_test(self, state: EncounterState, config: EncounterConfig) -> Verdict:
        return hits.chain_hit(state.reticle, state.enemies, state.chain, config)


class DualLine(Weapon):
    mode = WeaponMode.DUAL_LINE
    kill_rule = KillRule.GEOMETRY
    label = "twin lines"

    def initial_reticle(self, sector: SectorGeometry) -> Reticle:
        return DualLineReticle(left=sector.min_angle, right=sector.max_angle)

    def step(
        self, reticle: Reticle, dt_ms: float, sector: SectorGeometry, config: EncounterConfig
    ) -> Reticle:
        return dual_line_step(reticle, dt_ms, sector, config)

    def hit_test(self, state: EncounterState, config: EncounterConfig) -> Verdict:
        return hits.dual_line_hit(state.reticle, state.line_targets, config)

    def touching(self, state: EncounterState, config: EncounterConfig) -> list[int]:
        return hits.dual_line_candidates(state.reticle, state.line_targets, config.angle_tolerance)

    def make_targets(
        self,
        state: EncounterState,
        rng: random.Random,
        sector: SectorGeometry,
        config: EncounterConfig,
    ) -> None:
        state.line_targets = placement.generate_line_targets(
            rng, config.enemy_count, sector, config
        )


class ConvergingArc(Weapon):
    mode = WeaponMode.CONVERGING_ARC
    kill_rule = KillRule.GEOMETRY
    label = "closing arcs"

    def initial_reticle(self, sector: SectorGeometry) -> Reticle:
        return ConvergingArcReticle(top=sector.outer, bottom=sector.inner)

    def step(
        self, reticle: Reticle, dt_ms: float, sector: SectorGeometry, config: EncounterConfig
    ) -> Reticle:
        return converging_arc_step(reticle, dt_ms, sector, config)

    def hit_test(self, state: EncounterState, config: EncounterConfig) -> Verdict:
        return hits.converging_arc_hit(state.reticle, state.arc_targets, config)

    def touching(self, state: EncounterState, config: EncounterConfig) -> list[int]:
        return hits.converging_arc_candidates(state.reticle, state.arc_targets, config.arc_tolerance)

    def make_targets(
        self,
        state: EncounterState,
        rng: random.Random,
        sector: SectorGeometry,
        config: EncounterConfig,
    ) -> None:
        state.arc_targets = placement.generate_arc_targets(
            rng, config.enemy_count, sector, config
        )


CATALOGUE: tuple[Weapon, ...] = (
    Sweeping(),
    Bouncing(),
    Chaining(),
    DualLine(),
    ConvergingArc(),
)


def weapon_index(mode: WeaponMode) -> int:
    for i, weapon in enumerate(CATALOGUE):
        if weapon.mode is mode:
            return i
    raise KeyError(mode)
