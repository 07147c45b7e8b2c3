import asyncio
import heapq
import itertools
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Schedules a callback after a delay and returns a cancellable handle."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioScheduler:
    """Runs callbacks on the running asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(delay_ms, 0) / 1000, callback)


class _VirtualTimer:
    def __init__(self, due_ms: float, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class VirtualScheduler:
    """A scheduler driven by a virtual millisecond clock.

    Nothing fires until ``advance()`` or ``run_until_idle()`` is called.
    Timers due at the same instant fire in the order they were scheduled.
    """

    def __init__(self) -> None:
        self.now_ms: float = 0
        self._queue: list[tuple[float, int, _VirtualTimer]] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> _VirtualTimer:
        timer = _VirtualTimer(self.now_ms + max(delay_ms, 0), callback)
        heapq.heappush(self._queue, (timer.due_ms, next(self._counter), timer))
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled)

    def advance(self, delay_ms: float) -> int:
        """Move the clock forward, firing every timer that comes due. Returns the fired count."""
        target = self.now_ms + delay_ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due_ms, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now_ms = due_ms
            timer.callback()
            fired += 1
        self.now_ms = target
        return fired

    def run_until_idle(self, limit_ms: float = 600_000) -> int:
        """Fire timers in order until none remain or ``limit_ms`` of virtual time has passed."""
        deadline = self.now_ms + limit_ms
        fired = 0
        while self._queue:
            due_ms, _, timer = self._queue[0]
            if due_ms > deadline:
                logger.warning("Virtual scheduler stopped at %.0f ms with timers pending", self.now_ms)
                break
            heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now_ms = due_ms
            timer.callback()
            fired += 1
        return fired
