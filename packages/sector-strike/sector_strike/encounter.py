"""Encounter - owns the state and exposes the host-facing entry points."""

from __future__ import annotations

import logging
import os
import random
from typing import Any

from sector_strike import signals
from sector_strike.clock import Clock
from sector_strike.combat import Combat
from sector_strike.config import EncounterConfig
from sector_strike.narration import flavor_text
from sector_strike.placement import generate_enemy_positions
from sector_strike.reticle import ConvergingArcReticle, DualLineReticle, RadialReticle
from sector_strike.signals import SignalBus
from sector_strike.timers import TimerQueue
from sector_strike.types import (
    NO_FEEDBACK,
    EncounterState,
    Enemy,
    SectorGeometry,
    Verdict,
)
from sector_strike.weapons import CATALOGUE, Weapon

logger = logging.getLogger(__name__)


class Encounter:
    """One targeting encounter.

    The host calls ``advance_tick`` on its frame cadence and the input entry
    points (``attempt_attack``, ``switch_weapon``, ``reset``) between ticks.
    Delayed transitions fire inside ``advance_tick``; nothing else runs in
    the background.
    """

    def __init__(
        self,
        config: EncounterConfig | None = None,
        sector: SectorGeometry | None = None,
        seed: int | None = None,
        weapon_index: int = 0,
    ) -> None:
        self._config = config or EncounterConfig()
        self._sector = sector or SectorGeometry()
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._clock = Clock()
        self._timers = TimerQueue()
        self._signals = SignalBus()
        self._combat = Combat(self._config, self._timers, self._signals)
        self._state = self._new_state(weapon_index % len(CATALOGUE))

    # --- Properties ---

    @property
    def state(self) -> EncounterState:
        return self._state

    @property
    def config(self) -> EncounterConfig:
        return self._config

    @property
    def sector(self) -> SectorGeometry:
        return self._sector

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def now_ms(self) -> float:
        return self._clock.now_ms

    @property
    def tick_number(self) -> int:
        return self._clock.tick_number

    @property
    def signals(self) -> SignalBus:
        return self._signals

    @property
    def timers(self) -> TimerQueue:
        return self._timers

    @property
    def weapon(self) -> Weapon:
        return CATALOGUE[self._state.weapon_index]

    # --- Entry points ---

    def advance_tick(self, delta_ms: float) -> None:
        """Advance encounter time: fire due transitions, then move the reticle."""
        now = self._clock.advance(delta_ms)
        self._timers.advance(now)

        state = self._state
        if state.playing and not state.paused:
            state.reticle = self.weapon.step(state.reticle, delta_ms, self._sector, self._config)

        self._signals.flush()

    def attempt_attack(self, timestamp_ms: float) -> Verdict | None:
        """Resolve one attack intent. Returns the applied verdict, or None if dropped."""
        state = self._state
        last = state.last_attack_ms
        if last is not None and timestamp_ms - last < self._config.attack_debounce_ms:
            return None
        state.last_attack_ms = timestamp_ms

        if not state.playing or state.paused or state.victory_pending:
            return None

        weapon = self.weapon
        verdict = weapon.hit_test(state, self._config)
        logger.debug("attack at %.0fms with %s: %s", timestamp_ms, weapon.mode.value, verdict)
        self._combat.apply(state, verdict, weapon)
        return verdict

    def switch_weapon(self, direction: int) -> bool:
        """Rotate to the next (+1) or previous (-1) weapon. Returns False if refused."""
        if direction not in (1, -1):
            raise ValueError("direction must be 1 or -1")
        state = self._state
        if not state.playing or state.paused or state.victory_pending:
            logger.debug("weapon switch refused")
            return False

        self._timers.cancel_all()
        state.weapon_index = (state.weapon_index + direction) % len(CATALOGUE)
        weapon = self.weapon
        state.reticle = weapon.initial_reticle(self._sector)
        state.chain.clear()
        state.chain_resolving = False
        state.feedback = NO_FEEDBACK
        state.shaking = False
        weapon.make_targets(state, self._rng, self._sector, self._config)
        self._signals.publish(signals.WEAPON_SWITCHED, mode=weapon.mode.value)
        logger.debug("switched to %s", weapon.mode.value)
        return True

    def reset(self) -> None:
        """Start over with fresh placement. Pending transitions are discarded."""
        self._timers.cancel_all()
        self._signals.clear()
        self._state = self._new_state(self._state.weapon_index)
        self._signals.publish(signals.RESET)
        logger.debug("encounter reset")

    # --- Read side ---

    def touching(self) -> list[int]:
        state = self._state
        if not state.playing:
            return []
        return self.weapon.touching(state, self._config)

    def flavor_text(self) -> str:
        return flavor_text(self._state, self.weapon.mode.value)

    def snapshot(self) -> dict[str, Any]:
        """JSON-compatible view of everything a renderer needs."""
        state = self._state
        sector = self._sector
        return {
            "sector": {
                "min_angle": sector.min_angle,
                "max_angle": sector.max_angle,
                "inner": sector.inner,
                "outer": sector.outer,
                "center": list(sector.center),
                "plane_radius": sector.plane_radius,
            },
            "now_ms": self._clock.now_ms,
            "phase": state.phase.value,
            "health": state.health,
            "max_health": state.max_health,
            "remaining": state.remaining,
            "paused": state.paused,
            "shaking": state.shaking,
            "feedback": {
                "kind": state.feedback.kind.value,
                "subject": state.feedback.subject,
            },
            "weapon": {"index": state.weapon_index, "mode": self.weapon.mode.value},
            "reticle": _reticle_dict(state.reticle),
            "enemies": [
                {
                    "index": e.index,
                    "angle": e.angle,
                    "radius": e.radius,
                    "lifecycle": e.lifecycle.value,
                }
                for e in state.enemies
            ],
            "chain": list(state.chain),
            "line_targets": [
                {"index": t.index, "left": t.left, "right": t.right, "hit": t.hit}
                for t in state.line_targets
            ],
            "arc_targets": [
                {"index": t.index, "top": t.top, "bottom": t.bottom, "hit": t.hit}
                for t in state.arc_targets
            ],
            "touching": self.touching(),
            "text": self.flavor_text(),
        }

    # --- Internal ---

    def _new_state(self, weapon_index: int) -> EncounterState:
        config = self._config
        placed = generate_enemy_positions(
            self._rng, config.enemy_count, self._sector, config
        )
        weapon = CATALOGUE[weapon_index]
        state = EncounterState(
            health=config.max_health,
            max_health=config.max_health,
            remaining=config.enemy_count,
            enemies=[
                Enemy(index=i, angle=p.angle, radius=p.radius)
                for i, p in enumerate(placed.positions)
            ],
            reticle=weapon.initial_reticle(self._sector),
            weapon_index=weapon_index,
        )
        weapon.make_targets(state, self._rng, self._sector, config)
        return state


def _reticle_dict(reticle: object) -> dict[str, Any]:
    if isinstance(reticle, RadialReticle):
        return {"radius": reticle.radius, "direction": reticle.direction}
    if isinstance(reticle, DualLineReticle):
        return {"left": reticle.left, "right": reticle.right}
    if isinstance(reticle, ConvergingArcReticle):
        return {"top": reticle.top, "bottom": reticle.bottom}
    raise TypeError(f"Unknown reticle {reticle!r}")
