"""Injectable time sources for interaction timestamps."""

from datetime import datetime, timedelta
from typing import Callable, Optional

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Wall-clock local time, truncated to whole seconds."""
    return datetime.now().replace(microsecond=0)


class FrozenClock:
    """Deterministic clock that returns a fixed instant, optionally ticking."""

    def __init__(self, start: datetime, step: Optional[timedelta] = None):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        if self.step is not None:
            self.current = self.current + self.step
        return now

    def advance(self, delta: timedelta) -> None:
        self.current = self.current + delta
