"""Clock - encounter time in milliseconds, advanced by the host."""


class Clock:
    def __init__(self) -> None:
        self._now_ms = 0.0
        self._tick_number = 0

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self, delta_ms: float) -> float:
        if delta_ms < 0:
            raise ValueError("delta_ms must not be negative")
        self._tick_number += 1
        self._now_ms += delta_ms
        return self._now_ms
