from dataclasses import dataclass


@dataclass(frozen=True)
class SeedConversation:
    id: str
    name: str
    active: bool = False
    pinned: bool = False


SEED_CONVERSATIONS: list[SeedConversation] = [
    SeedConversation(id="1", name="Email Automation", active=True, pinned=True),
    SeedConversation(id="2", name="Twitter Integration"),
    SeedConversation(id="3", name="CRM Data Sync"),
    SeedConversation(id="4", name="Website Monitoring"),
    SeedConversation(id="5", name="Lead Generation", pinned=True),
]
