"""Combat rules: apply verdicts to an ``EncounterState`` and schedule follow-ups.

Every delayed effect goes through the ``TimerQueue``. Delayed callbacks
re-check the state they were scheduled against, so one that outlives its
situation (a duplicate verdict, a race with a reset) does nothing.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from sector_strike import signals
from sector_strike.config import EncounterConfig
from sector_strike.lifecycle import transition
from sector_strike.signals import SignalBus
from sector_strike.timers import ScheduledCall, TimerQueue
from sector_strike.types import (
    NO_FEEDBACK,
    ArcTarget,
    EncounterState,
    Enemy,
    Feedback,
    FeedbackKind,
    KillRule,
    Lifecycle,
    LineTarget,
    Phase,
    Verdict,
    VerdictKind,
    WeaponMode,
)

if TYPE_CHECKING:
    from sector_strike.weapons import Weapon

logger = logging.getLogger(__name__)


def find_enemy(state: EncounterState, index: int) -> Enemy | None:
    for enemy in state.enemies:
        if enemy.index == index:
            return enemy
    return None


class Combat:
    def __init__(
        self, config: EncounterConfig, timers: TimerQueue, bus: SignalBus
    ) -> None:
        self._config = config
        self._timers = timers
        self._bus = bus
        self._shake_call: ScheduledCall | None = None
        self._flash_call: ScheduledCall | None = None

    # --- Verdicts ---

    def apply(self, state: EncounterState, verdict: Verdict, weapon: Weapon) -> None:
        """Apply one verdict produced by ``weapon.hit_test``."""
        if not state.playing:
            logger.debug("ignoring %s verdict in phase %s", verdict.kind.value, state.phase.value)
            return
        if state.paused:
            logger.debug("ignoring %s verdict while resolving", verdict.kind.value)
            return

        if verdict.kind is VerdictKind.MISS:
            if weapon.kill_rule is KillRule.CHAIN:
                self.chain_miss(state)
            else:
                self.miss(state)
        elif verdict.kind is VerdictKind.KILL:
            self.kill(state, verdict.targets[0])
        elif verdict.kind is VerdictKind.CHAIN:
            self.chain_hit(state, verdict.targets[0])
        elif verdict.kind is VerdictKind.TARGETS:
            if weapon.mode is WeaponMode.DUAL_LINE:
                self.targets_hit(state, verdict.targets, state.line_targets)
            else:
                self.targets_hit(state, verdict.targets, state.arc_targets)

    def kill(self, state: EncounterState, index: int) -> bool:
        """Start the pop -> fade -> dead sequence for one enemy."""
        enemy = find_enemy(state, index)
        if enemy is None or not transition(enemy, Lifecycle.POPPING):
            return False

        if self._flash_call is not None:
            self._timers.cancel(self._flash_call)
            self._flash_call = None
        state.feedback = Feedback(FeedbackKind.HIT, index)
        state.paused = True
        self._bus.publish(signals.HIT, index=index)
        logger.debug("enemy %d hit, popping", index)
        self._timers.schedule(
            self._config.pop_ms, f"fade:{index}", lambda: self._fade(state, index)
        )
        return True

    def _fade(self, state: EncounterState, index: int) -> None:
        enemy = find_enemy(state, index)
        if enemy is None or not transition(enemy, Lifecycle.FADING):
            return
        self._timers.schedule(
            self._config.fade_ms, f"dead:{index}", lambda: self._dead(state, index)
        )

    def _dead(self, state: EncounterState, index: int) -> None:
        enemy = find_enemy(state, index)
        if enemy is None or not transition(enemy, Lifecycle.DEAD):
            return

        state.remaining = max(0, state.remaining - 1)
        if state.feedback == Feedback(FeedbackKind.HIT, index):
            state.feedback = NO_FEEDBACK
        self._bus.publish(signals.ENEMY_DEAD, index=index, remaining=state.remaining)
        logger.debug("enemy %d dead, %d remaining", index, state.remaining)
        self._shake(state)

        members = [find_enemy(state, i) for i in state.chain]
        if state.chain_resolving and all(
            e is None or e.lifecycle is Lifecycle.DEAD for e in members
        ):
            state.chain.clear()
            state.chain_resolving = False

        state.paused = state.chain_resolving or state.animating()

        if state.remaining == 0:
            self.schedule_victory(state)

    def miss(self, state: EncounterState) -> None:
        state.health = max(0, state.health - 1)
        state.feedback = Feedback(FeedbackKind.MISS)
        state.paused = True
        self._bus.publish(signals.MISS, health=state.health)
        logger.debug("miss, health now %d", state.health)
        self._timers.schedule(self._config.miss_ms, "recover", lambda: self._recover(state))

    def _recover(self, state: EncounterState) -> None:
        if state.feedback.kind is FeedbackKind.MISS:
            state.feedback = NO_FEEDBACK
        state.paused = state.chain_resolving or state.animating()
        if state.health == 0:
            self._set_phase(state, Phase.DEFEAT)

    def chain_hit(self, state: EncounterState, index: int) -> None:
        enemy = find_enemy(state, index)
        if enemy is None or not enemy.alive:
            logger.debug("ignoring chain hit on enemy %s", index)
            return
        if index in state.chain:
            logger.debug("enemy %d already chained", index)
            return

        state.chain.append(index)
        self._bus.publish(signals.CHAIN_GROWN, index=index, length=len(state.chain))
        self._flash(state, index)

        if len(state.chain) >= len(state.alive_enemies()):
            self._resolve_chain(state)

    def _resolve_chain(self, state: EncounterState) -> None:
        logger.debug("chain complete: %s", state.chain)
        state.chain_resolving = True
        state.paused = True
        for i, index in enumerate(list(state.chain)):
            if i == 0:
                self.kill(state, index)
            else:
                self._timers.schedule(
                    i * self._config.chain_stagger_ms,
                    f"chain_kill:{index}",
                    lambda index=index: self.kill(state, index),
                )

    def chain_miss(self, state: EncounterState) -> None:
        if state.chain:
            self._bus.publish(signals.CHAIN_BROKEN, length=len(state.chain))
            state.chain.clear()
        self.miss(state)

    def targets_hit(
        self,
        state: EncounterState,
        indices: Sequence[int],
        targets: Sequence[LineTarget] | Sequence[ArcTarget],
    ) -> None:
        newly = []
        for target in targets:
            if target.index in indices and not target.hit:
                target.hit = True
                newly.append(target.index)
        if not newly:
            logger.debug("ignoring repeat hit on targets %s", list(indices))
            return

        self._bus.publish(signals.TARGETS_HIT, indices=newly)
        self._flash(state, newly[0])
        if all(t.hit for t in targets):
            self.schedule_victory(state)

    # --- Phase ---

    def schedule_victory(self, state: EncounterState) -> None:
        if state.victory_pending or not state.playing:
            return
        state.victory_pending = True
        self._timers.schedule(
            self._config.victory_delay_ms,
            "victory",
            lambda: self._set_phase(state, Phase.VICTORY),
        )

    def _set_phase(self, state: EncounterState, phase: Phase) -> None:
        if not state.playing:
            return
        state.phase = phase
        state.victory_pending = False
        self._bus.publish(signals.PHASE_CHANGED, phase=phase.value)
        logger.debug("phase -> %s", phase.value)

    # --- Cosmetic timers ---

    def _shake(self, state: EncounterState) -> None:
        if self._shake_call is not None:
            self._timers.cancel(self._shake_call)
        state.shaking = True
        self._shake_call = self._timers.schedule(
            self._config.shake_ms, "shake", lambda: setattr(state, "shaking", False)
        )

    def _flash(self, state: EncounterState, subject: int) -> None:
        """Hit feedback without a pause, cleared after the pop duration."""
        if self._flash_call is not None:
            self._timers.cancel(self._flash_call)
        flash = Feedback(FeedbackKind.HIT, subject)
        state.feedback = flash

        def clear() -> None:
            if state.feedback == flash:
                state.feedback = NO_FEEDBACK

        self._flash_call = self._timers.schedule(self._config.pop_ms, "flash", clear)
