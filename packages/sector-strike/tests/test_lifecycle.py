"""Tests for the enemy lifecycle transition table."""
from sector_strike.lifecycle import TRANSITIONS, can_transition, transition
from sector_strike.types import Enemy, Lifecycle


def _enemy(state=Lifecycle.ALIVE):
    return Enemy(index=0, angle=0.0, radius=0.5, lifecycle=state)


class TestLifecycle:

    def test_full_sequence(self):
        enemy = _enemy()
        assert transition(enemy, Lifecycle.POPPING)
        assert transition(enemy, Lifecycle.FADING)
        assert transition(enemy, Lifecycle.DEAD)
        assert enemy.lifecycle is Lifecycle.DEAD

    def test_skipping_a_stage_is_ignored(self):
        enemy = _enemy()
        assert not transition(enemy, Lifecycle.DEAD)
        assert enemy.lifecycle is Lifecycle.ALIVE

    def test_dead_is_terminal(self):
        enemy = _enemy(Lifecycle.DEAD)
        for target in Lifecycle:
            assert not can_transition(enemy, target)

    def test_duplicate_request_is_noop(self):
        enemy = _enemy(Lifecycle.POPPING)
        assert not transition(enemy, Lifecycle.POPPING)
        assert enemy.lifecycle is Lifecycle.POPPING

    def test_table_covers_every_state(self):
        assert set(TRANSITIONS) == set(Lifecycle)
