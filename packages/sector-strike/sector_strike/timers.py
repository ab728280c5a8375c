"""TimerQueue - one-shot delayed callbacks on the encounter clock."""
from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Callable


@dataclass(order=True)
class ScheduledCall:
    """One pending callback. Ordered by due time, then by schedule order."""

    due_ms: float
    seq: int
    name: str = field(compare=False)
    callback: Callable[[], None] = field(compare=False, repr=False)
    generation: int = field(compare=False, default=0)
    cancelled: bool = field(compare=False, default=False)


class TimerQueue:
    """Delayed transitions checked against one authoritative clock.

    ``cancel_all`` bumps the generation, so a call scheduled before it can
    never fire afterward, even if something still holds its handle.
    """

    def __init__(self) -> None:
        self._heap: list[ScheduledCall] = []
        self._seq: int = 0
        self._generation: int = 0
        self._now_ms: float = 0.0

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def generation(self) -> int:
        return self._generation

    def __len__(self) -> int:
        return sum(1 for call in self._heap if self._live(call))

    def _live(self, call: ScheduledCall) -> bool:
        return not call.cancelled and call.generation == self._generation

    def schedule(
        self, delay_ms: float, name: str, callback: Callable[[], None]
    ) -> ScheduledCall:
        """Queue ``callback`` to run once ``delay_ms`` of clock time has passed."""
        self._seq += 1
        call = ScheduledCall(
            due_ms=self._now_ms + max(0.0, delay_ms),
            seq=self._seq,
            name=name,
            callback=callback,
            generation=self._generation,
        )
        heapq.heappush(self._heap, call)
        return call

    def cancel(self, call: ScheduledCall) -> None:
        call.cancelled = True

    def cancel_all(self) -> None:
        self._generation += 1
        self._heap.clear()

    def pending(self) -> list[str]:
        """Names of live calls in firing order."""
        return [call.name for call in sorted(self._heap) if self._live(call)]

    def advance(self, now_ms: float) -> int:
        """Move the clock to ``now_ms`` and fire everything due. Returns count fired.

        While a callback runs, the queue reads its due time, so follow-ups it
        schedules are timed from when it was due. Those already due by
        ``now_ms`` join the same pass.
        """
        fired = 0
        while self._heap and self._heap[0].due_ms <= now_ms:
            call = heapq.heappop(self._heap)
            if not self._live(call):
                continue
            self._now_ms = call.due_ms
            call.callback()
            fired += 1
        self._now_ms = now_ms
        return fired
