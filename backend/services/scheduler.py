"""
Single-threaded event scheduler driven by a virtual clock.

Every timed thing in a game (the main loop tick, the elapsed-time ticker,
each food's spawn and removal) is an event in one heap ordered by due time.
Nothing fires until the owner advances the clock, so tests can step a whole
game without waiting and the interactive frontend just feeds it wall time.
"""

import heapq
import itertools
import logging
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Timer:
    """Handle to a scheduled event. Pass it to EventScheduler.cancel()."""

    def __init__(self, callback: Callable[[], None], due: float, interval: Optional[float] = None, name: str = ""):
        self.callback = callback
        self.due = due
        self.interval = interval
        self.name = name
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not self.cancelled and (self.interval is not None or not self.fired)

    def __repr__(self):
        kind = f"every {self.interval:.3f}s" if self.interval is not None else "once"
        return f"<Timer {self.name or self.callback!r} due={self.due:.3f} {kind} active={self.active}>"


class EventScheduler:
    """
    Owns the sorted set of pending events.

    Events due at the same time fire in the order they were scheduled.
    Cancelled events stay in the heap and are dropped when popped.
    """

    def __init__(self, start: float = 0.0):
        self.now = start
        self._queue: List[Tuple[float, int, Timer]] = []
        self._sequence = itertools.count()

    def _push(self, timer: Timer) -> None:
        heapq.heappush(self._queue, (timer.due, next(self._sequence), timer))

    def call_later(self, delay: float, callback: Callable[[], None], name: str = "") -> Timer:
        """Run callback once, delay seconds from now."""
        timer = Timer(callback, self.now + max(0.0, delay), name=name)
        self._push(timer)
        return timer

    def call_every(self, interval: float, callback: Callable[[], None], name: str = "") -> Timer:
        """Run callback every interval seconds until cancelled."""
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}.")
        timer = Timer(callback, self.now + interval, interval=interval, name=name)
        self._push(timer)
        return timer

    def cancel(self, timer: Optional[Timer]) -> None:
        """Cancel timer. None, fired or already cancelled timers are ignored."""
        if timer is not None:
            timer.cancelled = True

    def pending(self) -> int:
        """Number of events that can still fire."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def next_due(self) -> Optional[float]:
        for due, _, timer in sorted(self._queue):
            if not timer.cancelled:
                return due
        return None

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward by seconds, firing every event due on the way.

        Returns the number of callbacks run.
        """
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards ({seconds}).")
        return self._run_until(self.now + seconds)

    def run_pending(self) -> int:
        """Fire the events due at the current time."""
        return self._run_until(self.now)

    def _run_until(self, target: float) -> int:
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = due
            if timer.interval is not None:
                timer.due = due + timer.interval
                self._push(timer)
            else:
                timer.fired = True
            timer.callback()
            fired += 1
        self.now = target
        return fired

    def clear(self) -> None:
        """Cancel everything."""
        for _, _, timer in self._queue:
            timer.cancelled = True
        self._queue.clear()
