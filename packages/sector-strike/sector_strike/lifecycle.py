"""Enemy lifecycle transition table."""
from __future__ import annotations

import logging

from sector_strike.types import Enemy, Lifecycle

logger = logging.getLogger(__name__)

# state -> states reachable from it
TRANSITIONS: dict[Lifecycle, tuple[Lifecycle, ...]] = {
    Lifecycle.ALIVE: (Lifecycle.POPPING,),
    Lifecycle.POPPING: (Lifecycle.FADING,),
    Lifecycle.FADING: (Lifecycle.DEAD,),
    Lifecycle.DEAD: (),
}


def can_transition(enemy: Enemy, target: Lifecycle) -> bool:
    return target in TRANSITIONS[enemy.lifecycle]


def transition(enemy: Enemy, target: Lifecycle) -> bool:
    """Move ``enemy`` to ``target`` if the table allows it.

    Anything else is a stale request (a timer racing a reset, a duplicate
    verdict) and is ignored.
    """
    if not can_transition(enemy, target):
        logger.debug(
            "ignoring %s -> %s for enemy %d",
            enemy.lifecycle.value,
            target.value,
            enemy.index,
        )
        return False
    enemy.lifecycle = target
    return True
