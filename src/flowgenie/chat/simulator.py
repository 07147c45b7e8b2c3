import logging
import random
import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

from ..config import RESPONSE_DELAY_MS
from ..data.responses import CANNED_RESPONSES
from ..timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

Role = Literal["user", "assistant"]


def _now() -> datetime:
    return datetime.now(UTC)


def _uuid() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Message:
    content: str
    role: Role
    id: str = field(default_factory=_uuid)
    timestamp: datetime = field(default_factory=_now)
    is_typing: bool = False


@dataclass(frozen=True)
class ChatSnapshot:
    messages: tuple[Message, ...]
    is_typing: bool

    @property
    def typing_indicator(self) -> Message | None:
        """The placeholder assistant bubble shown while a reply is pending."""
        if not self.is_typing:
            return None
        return Message(content="", role="assistant", id="typing", is_typing=True)


ChatListener = Callable[[ChatSnapshot], None]


class ChatSimulator:
    """Fakes an assistant: every accepted message gets one canned reply after a fixed delay."""

    def __init__(
        self,
        scheduler: Scheduler,
        responses: Sequence[str] = CANNED_RESPONSES,
        rng: random.Random | None = None,
        delay_ms: float = RESPONSE_DELAY_MS,
    ) -> None:
        if not responses:
            raise ValueError("ChatSimulator needs at least one canned response")
        self._scheduler = scheduler
        self._responses = tuple(responses)
        self._rng = rng or random.Random()
        self._delay_ms = delay_ms
        self._messages: list[Message] = []
        self._pending: TimerHandle | None = None
        self._generation = 0
        self._listeners: list[ChatListener] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def is_typing(self) -> bool:
        return self._pending is not None

    def snapshot(self) -> ChatSnapshot:
        return ChatSnapshot(messages=self.messages, is_typing=self.is_typing)

    def subscribe(self, listener: ChatListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def submit(self, text: str) -> Message | None:
        """Append the user's message and schedule the reply.

        Returns None without touching state when the text is blank or a reply
        is still pending.
        """
        if not text.strip() or self._pending is not None:
            logger.debug("Ignoring chat submission (blank=%s, typing=%s)", not text.strip(), self.is_typing)
            return None

        message = Message(content=text, role="user")
        self._messages.append(message)
        generation = self._generation
        self._pending = self._scheduler.call_later(self._delay_ms, lambda: self._respond(generation))
        self._notify()
        return message

    def _respond(self, generation: int) -> None:
        if generation != self._generation or self._pending is None:
            return
        self._pending = None
        content = self._rng.choice(self._responses)
        self._messages.append(Message(content=content, role="assistant"))
        self._notify()

    def reset(self) -> None:
        """Drop the pending reply and clear history, as when switching conversations."""
        self._cancel_pending()
        self._messages.clear()
        self._notify()

    def close(self) -> None:
        self._cancel_pending()

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
