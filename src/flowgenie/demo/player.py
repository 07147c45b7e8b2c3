"""Typewriter playback for the use-case demo panel.

Each example plays in a fixed order: the question is typed one character at
a time, then the steps appear one line at a time, then the workflow payload
is revealed. Moving to another example throws away the playback state and
cancels every timer scheduled for the old one.
"""

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from ..config import (
    CHAR_DELAY_MAX_MS,
    CHAR_DELAY_MIN_MS,
    PHASE_DELAY_MS,
    STEP_INTERVAL_MS,
    TYPING_START_DELAY_MS,
)
from ..data.examples import DEMO_EXAMPLES, DemoExample
from ..timers import Scheduler, TimerHandle, VirtualScheduler

logger = logging.getLogger(__name__)


class Phase(StrEnum):
    IDLE = "idle"
    TYPING_QUESTION = "typing_question"
    TYPING_STEPS = "typing_steps"
    PAYLOAD_REVEALED = "payload_revealed"


@dataclass(frozen=True)
class PlaybackTiming:
    start_delay_ms: float = TYPING_START_DELAY_MS
    char_delay_min_ms: float = CHAR_DELAY_MIN_MS
    char_delay_max_ms: float = CHAR_DELAY_MAX_MS
    phase_delay_ms: float = PHASE_DELAY_MS
    step_interval_ms: float = STEP_INTERVAL_MS


@dataclass
class PlaybackState:
    typed_question_prefix: str = ""
    typed_step_lines: list[str] = field(default_factory=list)
    payload_revealed: bool = False
    phase: Phase = Phase.IDLE


@dataclass(frozen=True)
class PlaybackSnapshot:
    current_example_index: int
    example_id: str
    phase: Phase
    typed_question_prefix: str
    typed_step_lines: tuple[str, ...]
    payload_revealed: bool


PlaybackListener = Callable[[PlaybackSnapshot], None]


class ScriptedDemoPlayer:
    def __init__(
        self,
        scheduler: Scheduler,
        examples: Sequence[DemoExample] = DEMO_EXAMPLES,
        rng: random.Random | None = None,
        timing: PlaybackTiming | None = None,
    ) -> None:
        if not examples:
            raise ValueError("ScriptedDemoPlayer needs at least one example")
        self._scheduler = scheduler
        self._examples = tuple(examples)
        self._rng = rng or random.Random()
        self._timing = timing or PlaybackTiming()
        self._index = 0
        self._state = PlaybackState()
        self._timer: TimerHandle | None = None
        self._generation = 0
        self._listeners: list[PlaybackListener] = []

    @property
    def examples(self) -> tuple[DemoExample, ...]:
        return self._examples

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_example(self) -> DemoExample:
        return self._examples[self._index]

    def find_example(self, example_id: str) -> int | None:
        for i, example in enumerate(self._examples):
            if example.id == example_id:
                return i
        return None

    def snapshot(self) -> PlaybackSnapshot:
        return PlaybackSnapshot(
            current_example_index=self._index,
            example_id=self.current_example.id,
            phase=self._state.phase,
            typed_question_prefix=self._state.typed_question_prefix,
            typed_step_lines=tuple(self._state.typed_step_lines),
            payload_revealed=self._state.payload_revealed,
        )

    def subscribe(self, listener: PlaybackListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Navigation ---

    def start(self) -> None:
        """(Re)start playback of the current example from an empty state."""
        self._cancel_timer()
        self._state = PlaybackState()
        logger.debug("Starting playback of example %d (%s)", self._index, self.current_example.id)
        self._schedule(self._timing.start_delay_ms, self._begin_question)
        self._notify()

    def stop(self) -> None:
        self._cancel_timer()

    def next(self) -> int:
        return self.select_index((self._index + 1) % len(self._examples))

    def previous(self) -> int:
        return self.select_index((self._index - 1) % len(self._examples))

    def select_index(self, index: int) -> int:
        if not 0 <= index < len(self._examples):
            raise IndexError(f"Example index {index} out of range (0..{len(self._examples) - 1})")
        if index == self._index:
            return index
        self._index = index
        self.start()
        return index

    # --- Playback steps ---

    def _schedule(self, delay_ms: float, step: Callable[[], None]) -> None:
        generation = self._generation

        def fire() -> None:
            if generation != self._generation:
                return
            step()

        self._timer = self._scheduler.call_later(delay_ms, fire)

    def _cancel_timer(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _char_delay(self) -> float:
        low, high = self._timing.char_delay_min_ms, self._timing.char_delay_max_ms
        return low + self._rng.random() * (high - low)

    def _begin_question(self) -> None:
        self._state.phase = Phase.TYPING_QUESTION
        self._type_question()

    def _type_question(self) -> None:
        question = self.current_example.user_question
        typed = len(self._state.typed_question_prefix)
        if typed < len(question):
            self._state.typed_question_prefix = question[: typed + 1]
            self._notify()
        if len(self._state.typed_question_prefix) < len(question):
            self._schedule(self._char_delay(), self._type_question)
        else:
            self._schedule(self._timing.phase_delay_ms, self._begin_steps)

    def _begin_steps(self) -> None:
        self._state.phase = Phase.TYPING_STEPS
        self._notify()
        self._type_step()

    def _type_step(self) -> None:
        example = self.current_example
        lines = self._state.typed_step_lines
        if len(lines) < len(example.steps):
            lines.append(example.step_line(len(lines)))
            self._notify()
        if len(lines) < len(example.steps):
            self._schedule(self._timing.step_interval_ms, self._type_step)
        else:
            self._schedule(self._timing.phase_delay_ms, self._reveal_payload)

    def _reveal_payload(self) -> None:
        self._state.payload_revealed = True
        self._state.phase = Phase.PAYLOAD_REVEALED
        self._timer = None
        logger.debug("Payload revealed for example %s", self.current_example.id)
        self._notify()

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)


def transcript(
    example: DemoExample,
    rng: random.Random | None = None,
    timing: PlaybackTiming | None = None,
) -> list[tuple[float, PlaybackSnapshot]]:
    """Play one example to completion on a virtual clock and return every frame."""
    scheduler = VirtualScheduler()
    player = ScriptedDemoPlayer(scheduler, examples=[example], rng=rng, timing=timing)
    frames: list[tuple[float, PlaybackSnapshot]] = []
    player.subscribe(lambda snap: frames.append((scheduler.now_ms, snap)))
    player.start()
    scheduler.run_until_idle()
    return frames
