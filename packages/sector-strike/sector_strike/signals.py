"""Presentation signals queued during a tick and delivered on flush."""
from __future__ import annotations

from typing import Any, Callable

HIT = "hit"
MISS = "miss"
CHAIN_GROWN = "chain_grown"
CHAIN_BROKEN = "chain_broken"
ENEMY_DEAD = "enemy_dead"
TARGETS_HIT = "targets_hit"
WEAPON_SWITCHED = "weapon_switched"
PHASE_CHANGED = "phase_changed"
RESET = "reset"

SIGNALS = (
    HIT,
    MISS,
    CHAIN_GROWN,
    CHAIN_BROKEN,
    ENEMY_DEAD,
    TARGETS_HIT,
    WEAPON_SWITCHED,
    PHASE_CHANGED,
    RESET,
)

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Combat publishes here; the renderer subscribes for sounds and effects.

    Handlers never run inside combat code: ``flush`` delivers the queue at
    the end of ``Encounter.advance_tick``.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        if signal_name not in SIGNALS:
            raise ValueError(f"Unknown signal {signal_name!r}")
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> list[str]:
        return [name for name, _ in self._queue]

    def flush(self) -> int:
        delivered = self._queue
        self._queue = []
        for signal_name, data in delivered:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
        return len(delivered)

    def clear(self) -> None:
        self._queue.clear()
