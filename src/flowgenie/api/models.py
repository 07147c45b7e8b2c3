from datetime import datetime

from pydantic import BaseModel


class ChatRequest(BaseModel):
    message: str


class RenameRequest(BaseModel):
    name: str


class MessageOut(BaseModel):
    id: str
    role: str
    content: str
    timestamp: datetime
    is_typing: bool = False


class ChatOut(BaseModel):
    messages: list[MessageOut]
    is_typing: bool
    typing_indicator: MessageOut | None = None


class SubmitOut(BaseModel):
    accepted: bool
    message: MessageOut | None = None


class ConversationOut(BaseModel):
    id: str
    name: str
    active: bool
    pinned: bool


class Notice(BaseModel):
    title: str
    description: str


class ConversationActionOut(BaseModel):
    conversation: ConversationOut
    notice: Notice | None = None


class PlaybackOut(BaseModel):
    current_example_index: int
    example_id: str
    phase: str
    typed_question_prefix: str
    typed_step_lines: list[str]
    payload_revealed: bool


class DemoStepOut(BaseModel):
    title: str
    description: str


class DemoExampleOut(BaseModel):
    id: str
    user_question: str
    ai_response: str
    steps: list[DemoStepOut]
    payload: str


class TranscriptFrame(BaseModel):
    elapsed_ms: float
    playback: PlaybackOut


class PromptOut(BaseModel):
    icon: str
    text: str


class PromptsOut(BaseModel):
    example_prompts: list[PromptOut]
    action_pills: list[PromptOut]


class TestimonialOut(BaseModel):
    index: int
    total: int
    quote: str
    author: str
    role: str
