"""Tests for flavor text selection."""
from sector_strike.narration import DEFEAT_TEXT, MISS_TEXT, VICTORY_TEXT, flavor_text
from sector_strike.reticle import RadialReticle
from sector_strike.types import EncounterState, Feedback, FeedbackKind, Phase


def _state(**kwargs):
    fields = dict(
        health=6,
        max_health=6,
        remaining=3,
        enemies=[],
        reticle=RadialReticle(radius=0.1),
    )
    fields.update(kwargs)
    return EncounterState(**fields)


class TestFlavorText:

    def test_opening_line(self):
        assert flavor_text(_state()).startswith("a cave clan descends")

    def test_follows_remaining(self):
        assert flavor_text(_state(remaining=1)) == "that's two. just one left."

    def test_miss(self):
        assert flavor_text(_state(feedback=Feedback(FeedbackKind.MISS))) == MISS_TEXT

    def test_hit_uses_count_after_kill(self):
        state = _state(remaining=3, feedback=Feedback(FeedbackKind.HIT, 0))
        assert flavor_text(state) == "direct hit! the leader falls."

    def test_chain_tag(self):
        state = _state(chain=[0, 2], feedback=Feedback(FeedbackKind.HIT, 2))
        assert flavor_text(state) == "tagged. chain of 2."

    def test_terminal_phases(self):
        assert flavor_text(_state(phase=Phase.VICTORY)) == VICTORY_TEXT
        assert flavor_text(_state(phase=Phase.DEFEAT)) == DEFEAT_TEXT

    def test_target_modes(self):
        assert flavor_text(_state(), "dual_line") == "bring both lines together on a mark."
