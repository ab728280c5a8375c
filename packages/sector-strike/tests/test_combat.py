"""Combat scenarios driven through the Encounter entry points."""
import pytest

from sector_strike import Encounter, EncounterConfig
from sector_strike.combat import Combat
from sector_strike.reticle import ConvergingArcReticle, DualLineReticle, RadialReticle
from sector_strike.signals import CHAIN_BROKEN, ENEMY_DEAD, PHASE_CHANGED, SignalBus
from sector_strike.timers import TimerQueue
from sector_strike.types import (
    ArcTarget,
    Feedback,
    FeedbackKind,
    Lifecycle,
    LineTarget,
    Phase,
    VerdictKind,
    WeaponMode,
)
from sector_strike.weapons import weapon_index


def make(mode=WeaponMode.SWEEPING, seed=42, **overrides):
    return Encounter(EncounterConfig(**overrides), seed=seed, weapon_index=weapon_index(mode))


def aim_at(enc, index):
    enc.state.reticle = RadialReticle(radius=enc.state.enemies[index].radius)


def aim_away(enc):
    enc.state.reticle = RadialReticle(radius=enc.sector.inner)


def run(enc, ms, step=50.0):
    for _ in range(int(ms // step)):
        enc.advance_tick(step)


def record(enc, signal):
    seen = []
    enc.signals.subscribe(signal, lambda name, data: seen.append(data))
    return seen


class TestMiss:

    def test_three_misses(self):
        """Health 5, Bouncing, three spaced misses -> health 2, still playing."""
        enc = make(WeaponMode.BOUNCING, max_health=5)
        for i in range(3):
            aim_away(enc)
            verdict = enc.attempt_attack(i * 2000.0)
            assert verdict.is_miss
            run(enc, 1000)
        assert enc.state.health == 2
        assert enc.state.phase is Phase.PLAYING

    def test_miss_pauses_then_recovers(self):
        enc = make()
        aim_away(enc)
        enc.attempt_attack(0.0)
        assert enc.state.paused
        assert enc.state.feedback.kind is FeedbackKind.MISS

        run(enc, 950)
        assert enc.state.paused

        run(enc, 50)
        assert not enc.state.paused
        assert enc.state.feedback.kind is FeedbackKind.NONE

    def test_defeat_exactly_once(self):
        enc = make(max_health=1)
        phases = record(enc, PHASE_CHANGED)
        aim_away(enc)
        enc.attempt_attack(0.0)
        assert enc.state.health == 0
        assert enc.state.phase is Phase.PLAYING

        run(enc, 1000)
        assert enc.state.phase is Phase.DEFEAT
        assert phases == [{"phase": "defeat"}]

        aim_away(enc)
        assert enc.attempt_attack(5000.0) is None
        run(enc, 2000)
        assert enc.state.health == 0
        assert phases == [{"phase": "defeat"}]

    def test_health_floor(self):
        enc = make()
        enc.state.health = 0
        combat = Combat(enc.config, TimerQueue(), SignalBus())
        combat.miss(enc.state)
        assert enc.state.health == 0


class TestSingleKill:

    def test_kill_sequence(self):
        enc = make()
        aim_at(enc, 1)
        verdict = enc.attempt_attack(0.0)
        assert verdict.kind is VerdictKind.KILL
        assert verdict.targets == (1,)

        enemy = enc.state.enemies[1]
        assert enemy.lifecycle is Lifecycle.POPPING
        assert enc.state.paused
        assert enc.state.feedback.kind is FeedbackKind.HIT
        assert enc.state.feedback.subject == 1

        run(enc, 600)
        assert enemy.lifecycle is Lifecycle.FADING
        assert enc.state.remaining == 3

        run(enc, 800)
        assert enemy.lifecycle is Lifecycle.DEAD
        assert enc.state.remaining == 2
        assert not enc.state.paused
        assert enc.state.feedback.kind is FeedbackKind.NONE
        assert enc.state.shaking

        run(enc, 300)
        assert not enc.state.shaking

    def test_last_enemy_victory(self):
        """One enemy left, a hit -> after the fade, none remain and Victory follows."""
        enc = make(enemy_count=1)
        aim_at(enc, 0)
        enc.attempt_attack(0.0)
        run(enc, 1400)
        assert enc.state.remaining == 0
        assert enc.state.phase is Phase.PLAYING

        run(enc, 500)
        assert enc.state.phase is Phase.VICTORY

    def test_single_long_tick_finishes_kill(self):
        """A lag spike covering pop and fade still lands the enemy Dead in that tick."""
        enc = make(enemy_count=1)
        aim_at(enc, 0)
        enc.attempt_attack(0.0)
        enc.advance_tick(1400.0)
        assert enc.state.enemies[0].lifecycle is Lifecycle.DEAD
        assert enc.state.remaining == 0
        assert enc.state.phase is Phase.PLAYING

        enc.advance_tick(500.0)
        assert enc.state.phase is Phase.VICTORY

    def test_uneven_frames_do_not_delay_death(self):
        enc = make(enemy_count=1)
        aim_at(enc, 0)
        enc.attempt_attack(0.0)
        enemy = enc.state.enemies[0]

        for _ in range(11):
            enc.advance_tick(116.7)
        assert enemy.lifecycle is Lifecycle.FADING

        enc.advance_tick(116.7)
        assert enemy.lifecycle is Lifecycle.DEAD

        for _ in range(4):
            enc.advance_tick(116.7)
        assert enc.state.phase is Phase.PLAYING

        enc.advance_tick(116.7)
        assert enc.state.phase is Phase.VICTORY

    def test_attack_ignored_while_victory_pending(self):
        enc = make(enemy_count=1, max_health=1)
        aim_at(enc, 0)
        enc.attempt_attack(0.0)
        run(enc, 1400)
        assert enc.state.victory_pending

        aim_away(enc)
        assert enc.attempt_attack(5000.0) is None
        assert enc.state.health == 1
        assert not enc.state.paused

        run(enc, 500)
        assert enc.state.phase is Phase.VICTORY
        assert enc.state.health == 1

    def test_clear_all_three(self):
        enc = make()
        phases = record(enc, PHASE_CHANGED)
        dead = record(enc, ENEMY_DEAD)
        for i in range(3):
            aim_at(enc, i)
            assert enc.attempt_attack(i * 5000.0).kind is VerdictKind.KILL
            run(enc, 1400)
        assert [d["remaining"] for d in dead] == [2, 1, 0]

        run(enc, 500)
        assert enc.state.phase is Phase.VICTORY
        assert phases == [{"phase": "victory"}]

    def test_hit_clears_stale_miss_feedback(self):
        enc = make()
        enc.state.feedback = Feedback(FeedbackKind.MISS)
        aim_at(enc, 0)
        enc.attempt_attack(0.0)
        assert enc.state.feedback.kind is FeedbackKind.HIT

    def test_duplicate_kill_ignored(self):
        enc = make()
        combat = Combat(enc.config, enc.timers, enc.signals)
        assert combat.kill(enc.state, 0)
        assert not combat.kill(enc.state, 0)
        assert not combat.kill(enc.state, 99)


class TestChain:

    def test_full_chain_staggered_kill(self):
        """Hit 0, 1, 2 -> all three die in sequence and the chain empties."""
        enc = make(WeaponMode.CHAINING)
        for i, t in enumerate((0.0, 300.0, 600.0)):
            aim_at(enc, i)
            verdict = enc.attempt_attack(t)
            assert verdict.kind is VerdictKind.CHAIN

        state = enc.state
        assert state.chain == [0, 1, 2]
        assert state.chain_resolving
        assert state.paused
        assert state.enemies[0].lifecycle is Lifecycle.POPPING
        assert state.enemies[1].lifecycle is Lifecycle.ALIVE

        run(enc, 250)
        assert state.enemies[1].lifecycle is Lifecycle.POPPING
        assert state.enemies[2].lifecycle is Lifecycle.ALIVE

        run(enc, 250)
        assert state.enemies[2].lifecycle is Lifecycle.POPPING

        run(enc, 1400)
        assert all(e.lifecycle is Lifecycle.DEAD for e in state.enemies)
        assert state.chain == []
        assert not state.chain_resolving
        assert not state.paused
        assert state.remaining == 0

        run(enc, 500)
        assert state.phase is Phase.VICTORY

    def test_rehit_does_not_grow_chain(self):
        enc = make(WeaponMode.CHAINING)
        aim_at(enc, 0)
        enc.attempt_attack(0.0)
        aim_at(enc, 0)
        verdict = enc.attempt_attack(300.0)
        assert verdict.kind is VerdictKind.CHAIN
        assert enc.state.chain == [0]
        assert enc.state.health == 6

    def test_chain_hit_does_not_pause(self):
        enc = make(WeaponMode.CHAINING)
        aim_at(enc, 2)
        enc.attempt_attack(0.0)
        assert not enc.state.paused
        assert enc.state.enemies[2].lifecycle is Lifecycle.ALIVE

    def test_miss_breaks_chain(self):
        enc = make(WeaponMode.CHAINING)
        broken = record(enc, CHAIN_BROKEN)
        for i, t in enumerate((0.0, 300.0)):
            aim_at(enc, i)
            enc.attempt_attack(t)
        assert enc.state.chain == [0, 1]

        aim_away(enc)
        assert enc.attempt_attack(600.0).is_miss
        assert enc.state.chain == []
        assert enc.state.health == 5
        assert enc.state.paused

        enc.advance_tick(0.0)
        assert broken == [{"length": 2}]


class TestTargetModes:

    def test_dual_line_hits_and_victory(self):
        enc = make(WeaponMode.DUAL_LINE)
        phases = record(enc, PHASE_CHANGED)
        state = enc.state
        state.line_targets = [
            LineTarget(index=0, left=-20.0, right=20.0),
            LineTarget(index=1, left=-30.0, right=30.0),
        ]

        state.reticle = DualLineReticle(left=-20.0, right=20.0)
        verdict = enc.attempt_attack(0.0)
        assert verdict.targets == (0,)
        assert state.line_targets[0].hit
        assert not state.line_targets[1].hit
        assert not state.paused
        assert state.health == 6

        state.reticle = DualLineReticle(left=-30.0, right=30.0)
        enc.attempt_attack(300.0)
        assert state.line_targets[1].hit
        assert state.phase is Phase.PLAYING

        run(enc, 500)
        assert state.phase is Phase.VICTORY
        assert phases == [{"phase": "victory"}]

    def test_single_half_is_a_miss(self):
        enc = make(WeaponMode.DUAL_LINE)
        state = enc.state
        state.line_targets = [LineTarget(index=0, left=-20.0, right=20.0)]
        state.reticle = DualLineReticle(left=-20.0, right=40.0)
        assert enc.attempt_attack(0.0).is_miss
        assert not state.line_targets[0].hit
        assert state.health == 5

    def test_converging_arc_victory(self):
        enc = make(WeaponMode.CONVERGING_ARC)
        state = enc.state
        state.arc_targets = [ArcTarget(index=0, top=0.7, bottom=0.4)]
        state.reticle = ConvergingArcReticle(top=0.71, bottom=0.39)
        assert enc.attempt_attack(0.0).kind is VerdictKind.TARGETS
        run(enc, 500)
        assert state.phase is Phase.VICTORY

    def test_hit_count_never_exceeds_targets(self):
        enc = make(WeaponMode.DUAL_LINE)
        state = enc.state
        state.line_targets = [
            LineTarget(index=0, left=-20.0, right=20.0),
            LineTarget(index=1, left=-30.0, right=30.0),
        ]
        state.reticle = DualLineReticle(left=-20.0, right=20.0)
        enc.attempt_attack(0.0)
        combat = Combat(enc.config, enc.timers, enc.signals)
        combat.targets_hit(state, (0,), state.line_targets)
        assert sum(t.hit for t in state.line_targets) == 1


class TestReset:

    def test_reset_cancels_in_flight_pop(self):
        """Reset while popping: later ticks never touch the new enemy set."""
        enc = make()
        aim_at(enc, 0)
        enc.attempt_attack(0.0)
        old = enc.state
        assert old.enemies[0].lifecycle is Lifecycle.POPPING

        enc.reset()
        assert len(enc.timers) == 0
        run(enc, 3000)

        state = enc.state
        assert state is not old
        assert all(e.lifecycle is Lifecycle.ALIVE for e in state.enemies)
        assert state.remaining == 3
        assert state.health == 6
        assert state.phase is Phase.PLAYING
        assert old.enemies[0].lifecycle is Lifecycle.POPPING

    def test_reset_after_defeat(self):
        enc = make(max_health=1)
        aim_away(enc)
        enc.attempt_attack(0.0)
        run(enc, 1000)
        assert enc.state.phase is Phase.DEFEAT

        enc.reset()
        assert enc.state.phase is Phase.PLAYING
        assert enc.state.health == 1
        assert enc.state.feedback.kind is FeedbackKind.NONE
        assert not enc.state.paused

    @pytest.mark.parametrize("mode", list(WeaponMode))
    def test_reset_keeps_weapon(self, mode):
        enc = make(mode)
        enc.reset()
        assert enc.weapon.mode is mode
