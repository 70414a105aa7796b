"""Timers that emit events once a deadline has passed, optionally repeating."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Deque, Optional


class Topic(Enum):
    """Available timer topics."""

    SELECTION_SCROLLING = "selection_scrolling"
    FRAME = "frame"


@dataclass(frozen=True)
class TimerId:
    """Uniquely identifies a timer."""

    topic: Topic
    tab_id: int


@dataclass
class Timer:
    """An event due to be emitted at ``deadline``."""

    deadline: float
    event: Any
    id: TimerId
    interval: Optional[float] = None


class Scheduler:
    """Keeps pending timers ordered by deadline and emits due events.

    ``send`` receives every event whose deadline has passed; ``clock`` returns
    the current time in seconds and defaults to a monotonic clock.
    """

    def __init__(
        self,
        send: Callable[[Any], None],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._send = send
        self._clock = clock
        self._timers: Deque[Timer] = deque()

    def __len__(self) -> int:
        return len(self._timers)

    @property
    def timers(self) -> tuple[Timer, ...]:
        return tuple(self._timers)

    def update(self) -> Optional[float]:
        """Emit every due event; return the nearest remaining deadline, if any."""
        now = self._clock()
        while self._timers and self._timers[0].deadline <= now:
            timer = self._timers.popleft()
            if timer.interval is not None:
                self.schedule(timer.event, timer.interval, True, timer.id)
            try:
                self._send(timer.event)
            except Exception:
                # A closed event loop must not stop the remaining timers.
                pass
        return self._timers[0].deadline if self._timers else None

    def schedule(self, event: Any, interval: float, repeat: bool, timer_id: TimerId) -> None:
        """Emit ``event`` after ``interval`` seconds, every ``interval`` if ``repeat``."""
        if interval < 0:
            raise ValueError("interval cannot be negative")
        deadline = self._clock() + interval
        index = next(
            (i for i, timer in enumerate(self._timers) if timer.deadline > deadline),
            len(self._timers),
        )
        self._timers.insert(
            index, Timer(deadline, event, timer_id, interval if repeat else None)
        )

    def unschedule(self, timer_id: TimerId) -> Optional[Timer]:
        """Cancel the first timer with ``timer_id`` and return it, if there was one."""
        for timer in self._timers:
            if timer.id == timer_id:
                self._timers.remove(timer)
                return timer
        return None

    def scheduled(self, timer_id: TimerId) -> bool:
        """Whether a timer with ``timer_id`` is pending."""
        return any(timer.id == timer_id for timer in self._timers)

    def unschedule_tab(self, tab_id: int) -> None:
        """Drop every timer of a tab, so repeating timers do not outlive it."""
        self._timers = deque(t for t in self._timers if t.id.tab_id != tab_id)