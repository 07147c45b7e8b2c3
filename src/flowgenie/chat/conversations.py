import logging
import uuid
from collections.abc import Iterable
from dataclasses import dataclass

from ..data.conversations import SEED_CONVERSATIONS, SeedConversation

logger = logging.getLogger(__name__)

NEW_CHAT_NAME = "New Chat"


class ConversationNotFoundError(KeyError):
    pass


@dataclass
class Conversation:
    id: str
    name: str
    active: bool = False
    pinned: bool = False


class ConversationList:
    """The sidebar's in-memory conversation collection. Nothing is persisted."""

    def __init__(self, seed: Iterable[SeedConversation] = SEED_CONVERSATIONS) -> None:
        self._conversations = [
            Conversation(id=s.id, name=s.name, active=s.active, pinned=s.pinned) for s in seed
        ]

    def search(self, query: str = "") -> list[Conversation]:
        """Pinned conversations first, then the rest, optionally filtered by name."""
        ordered = [c for c in self._conversations if c.pinned] + [
            c for c in self._conversations if not c.pinned
        ]
        if not query:
            return ordered
        needle = query.lower()
        return [c for c in ordered if needle in c.name.lower()]

    def get(self, conversation_id: str) -> Conversation:
        for conv in self._conversations:
            if conv.id == conversation_id:
                return conv
        raise ConversationNotFoundError(conversation_id)

    @property
    def active(self) -> Conversation | None:
        return next((c for c in self._conversations if c.active), None)

    def select(self, conversation_id: str) -> Conversation:
        selected = self.get(conversation_id)
        for conv in self._conversations:
            conv.active = conv is selected
        return selected

    def start_new(self) -> Conversation:
        for conv in self._conversations:
            conv.active = False
        conv = Conversation(id=str(uuid.uuid4()), name=NEW_CHAT_NAME, active=True)
        self._conversations.insert(0, conv)
        logger.info("Started conversation %s", conv.id)
        return conv

    def rename(self, conversation_id: str, name: str) -> Conversation:
        conv = self.get(conversation_id)
        if not name.strip():
            raise ValueError("Chat name cannot be empty.")
        conv.name = name
        return conv

    def toggle_pin(self, conversation_id: str) -> bool:
        conv = self.get(conversation_id)
        conv.pinned = not conv.pinned
        return conv.pinned

    def delete(self, conversation_id: str) -> Conversation:
        conv = self.get(conversation_id)
        self._conversations.remove(conv)
        logger.info("Deleted conversation %s", conversation_id)
        return conv
