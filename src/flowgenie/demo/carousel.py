import logging
from collections.abc import Sequence

from ..config import TESTIMONIAL_INTERVAL_MS
from ..data.testimonials import TESTIMONIALS, Testimonial
from ..timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class TestimonialCarousel:
    """Round-robin testimonials that advance on their own every ``interval_ms``.

    Manual navigation restarts the countdown.
    """

    __test__ = False

    def __init__(
        self,
        scheduler: Scheduler,
        items: Sequence[Testimonial] = TESTIMONIALS,
        interval_ms: float = TESTIMONIAL_INTERVAL_MS,
    ) -> None:
        if not items:
            raise ValueError("TestimonialCarousel needs at least one item")
        self._scheduler = scheduler
        self._items = tuple(items)
        self._interval_ms = interval_ms
        self._index = 0
        self._timer: TimerHandle | None = None

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Testimonial:
        return self._items[self._index]

    def __len__(self) -> int:
        return len(self._items)

    def start(self) -> None:
        self._restart_countdown()

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def next(self) -> Testimonial:
        self._index = (self._index + 1) % len(self._items)
        self._restart_countdown()
        return self.current

    def previous(self) -> Testimonial:
        self._index = (self._index - 1) % len(self._items)
        self._restart_countdown()
        return self.current

    def _restart_countdown(self) -> None:
        self.stop()
        self._timer = self._scheduler.call_later(self._interval_ms, self._auto_advance)

    def _auto_advance(self) -> None:
        self._timer = None
        self.next()
