"""Flavor text for the current encounter state."""
from __future__ import annotations

from sector_strike.types import EncounterState, FeedbackKind, Phase

VICTORY_TEXT = "victory! the area is clear."
DEFEAT_TEXT = "defeat. the cave clan overwhelms you."
MISS_TEXT = "a miss. you brace for their attack"

# remaining enemies (after the kill in flight) -> line
_HIT_LINES = {
    2: "direct hit! the leader falls.",
    1: "another one down. just one left.",
    0: "that's all of them.",
}

_IDLE_LINES = {
    3: "a cave clan descends upon you. take out their leader first.",
    2: "one down. two to go. hit the one flanking from the right.",
    1: "that's two. just one left.",
    0: "that's all of them. what did they leave?",
}

_TARGET_LINES = {
    "dual_line": "bring both lines together on a mark.",
    "converging_arc": "let the arcs close on a mark.",
}


def flavor_text(state: EncounterState, weapon_mode: str | None = None) -> str:
    if state.phase is Phase.VICTORY:
        return VICTORY_TEXT
    if state.phase is Phase.DEFEAT:
        return DEFEAT_TEXT
    if state.feedback.kind is FeedbackKind.MISS:
        return MISS_TEXT
    if state.feedback.kind is FeedbackKind.HIT:
        if weapon_mode in _TARGET_LINES:
            return "a clean mark."
        if state.chain and not state.chain_resolving:
            return f"tagged. chain of {len(state.chain)}."
        after_kill = max(0, state.remaining - 1)
        return _HIT_LINES.get(after_kill, "direct hit!")
    if weapon_mode in _TARGET_LINES:
        return _TARGET_LINES[weapon_mode]
    return _IDLE_LINES.get(state.remaining, "")
