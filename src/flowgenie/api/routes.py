import logging
import random
from collections.abc import Callable

from fastapi import APIRouter, HTTPException, Request, Response
from sse_starlette.sse import EventSourceResponse

from ..chat.conversations import Conversation, ConversationNotFoundError
from ..chat.simulator import ChatSnapshot, Message
from ..config import SSE_PING_SECS
from ..data.examples import DemoExample
from ..data.responses import ACTION_PILLS, EXAMPLE_PROMPTS
from ..demo.carousel import TestimonialCarousel
from ..demo.player import PlaybackSnapshot, transcript
from .models import (
    ChatOut,
    ChatRequest,
    ConversationActionOut,
    ConversationOut,
    DemoExampleOut,
    DemoStepOut,
    MessageOut,
    Notice,
    PlaybackOut,
    PromptOut,
    PromptsOut,
    RenameRequest,
    SubmitOut,
    TestimonialOut,
    TranscriptFrame,
)
from .sse import sse_chat, sse_playback, stream_updates

logger = logging.getLogger(__name__)
router = APIRouter()


def _message_out(message: Message) -> MessageOut:
    return MessageOut(
        id=message.id,
        role=message.role,
        content=message.content,
        timestamp=message.timestamp,
        is_typing=message.is_typing,
    )


def _chat_out(snapshot: ChatSnapshot) -> ChatOut:
    indicator = snapshot.typing_indicator
    return ChatOut(
        messages=[_message_out(m) for m in snapshot.messages],
        is_typing=snapshot.is_typing,
        typing_indicator=_message_out(indicator) if indicator else None,
    )


def _playback_out(snapshot: PlaybackSnapshot) -> PlaybackOut:
    return PlaybackOut(
        current_example_index=snapshot.current_example_index,
        example_id=snapshot.example_id,
        phase=snapshot.phase.value,
        typed_question_prefix=snapshot.typed_question_prefix,
        typed_step_lines=list(snapshot.typed_step_lines),
        payload_revealed=snapshot.payload_revealed,
    )


def _example_out(example: DemoExample) -> DemoExampleOut:
    return DemoExampleOut(
        id=example.id,
        user_question=example.user_question,
        ai_response=example.ai_response,
        steps=[DemoStepOut(title=s.title, description=s.description) for s in example.steps],
        payload=example.payload,
    )


def _conversation_out(conv: Conversation) -> ConversationOut:
    return ConversationOut(id=conv.id, name=conv.name, active=conv.active, pinned=conv.pinned)


def _find_example(request: Request, example_id: str) -> DemoExample:
    player = request.app.state.demo_player
    index = player.find_example(example_id)
    if index is None:
        raise HTTPException(status_code=404, detail="Example not found")
    return player.examples[index]


def _event_stream(subscribe: Callable, initial, to_event: Callable[..., dict]) -> EventSourceResponse:
    return EventSourceResponse(stream_updates(subscribe, initial, to_event), ping=SSE_PING_SECS)


def chat_event(snapshot: ChatSnapshot) -> dict:
    return sse_chat(_chat_out(snapshot))


def playback_event(snapshot: PlaybackSnapshot) -> dict:
    return sse_playback(_playback_out(snapshot))


# --- Chat ---


@router.get("/api/chat")
async def get_chat(request: Request) -> ChatOut:
    return _chat_out(request.app.state.chat.snapshot())


@router.post("/api/chat")
async def submit_chat(req: ChatRequest, request: Request) -> SubmitOut:
    message = request.app.state.chat.submit(req.message)
    if message is None:
        return SubmitOut(accepted=False)
    return SubmitOut(accepted=True, message=_message_out(message))


@router.get("/api/chat/stream")
async def chat_stream(request: Request):
    chat = request.app.state.chat
    return _event_stream(chat.subscribe, chat.snapshot(), chat_event)


@router.get("/api/prompts")
async def list_prompts() -> PromptsOut:
    return PromptsOut(
        example_prompts=[PromptOut(icon=p.icon, text=p.text) for p in EXAMPLE_PROMPTS],
        action_pills=[PromptOut(icon=p.icon, text=p.text) for p in ACTION_PILLS],
    )


# --- Conversations ---


@router.get("/api/conversations")
async def list_conversations(request: Request, q: str = "") -> list[ConversationOut]:
    conversations = request.app.state.conversations
    return [_conversation_out(c) for c in conversations.search(q)]


@router.post("/api/conversations")
async def start_conversation(request: Request) -> ConversationActionOut:
    conv = request.app.state.conversations.start_new()
    request.app.state.chat.reset()
    return ConversationActionOut(conversation=_conversation_out(conv))


@router.post("/api/conversations/{conversation_id}/select")
async def select_conversation(conversation_id: str, request: Request) -> ConversationActionOut:
    try:
        conv = request.app.state.conversations.select(conversation_id)
    except ConversationNotFoundError:
        raise HTTPException(status_code=404, detail="Conversation not found")
    request.app.state.chat.reset()
    return ConversationActionOut(conversation=_conversation_out(conv))


@router.patch("/api/conversations/{conversation_id}")
async def rename_conversation(
    conversation_id: str, req: RenameRequest, request: Request
) -> ConversationActionOut:
    try:
        conv = request.app.state.conversations.rename(conversation_id, req.name)
    except ConversationNotFoundError:
        raise HTTPException(status_code=404, detail="Conversation not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ConversationActionOut(
        conversation=_conversation_out(conv),
        notice=Notice(title="Chat renamed", description=f'Chat has been renamed to "{conv.name}".'),
    )


@router.post("/api/conversations/{conversation_id}/pin")
async def toggle_pin_conversation(conversation_id: str, request: Request) -> ConversationActionOut:
    conversations = request.app.state.conversations
    try:
        pinned = conversations.toggle_pin(conversation_id)
    except ConversationNotFoundError:
        raise HTTPException(status_code=404, detail="Conversation not found")
    conv = conversations.get(conversation_id)
    notice = Notice(
        title="Chat pinned" if pinned else "Chat unpinned",
        description=f'"{conv.name}" has been {"pinned to" if pinned else "unpinned from"} the top.',
    )
    return ConversationActionOut(conversation=_conversation_out(conv), notice=notice)


@router.delete("/api/conversations/{conversation_id}")
async def delete_conversation(conversation_id: str, request: Request) -> ConversationActionOut:
    try:
        conv = request.app.state.conversations.delete(conversation_id)
    except ConversationNotFoundError:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return ConversationActionOut(
        conversation=_conversation_out(conv),
        notice=Notice(title="Chat deleted", description=f'"{conv.name}" has been deleted.'),
    )


# --- Use-case demo ---


@router.get("/api/demo")
async def get_playback(request: Request) -> PlaybackOut:
    return _playback_out(request.app.state.demo_player.snapshot())


@router.get("/api/demo/examples")
async def list_examples(request: Request) -> list[DemoExampleOut]:
    return [_example_out(e) for e in request.app.state.demo_player.examples]


@router.post("/api/demo/next")
async def next_example(request: Request) -> PlaybackOut:
    player = request.app.state.demo_player
    player.next()
    return _playback_out(player.snapshot())


@router.post("/api/demo/previous")
async def previous_example(request: Request) -> PlaybackOut:
    player = request.app.state.demo_player
    player.previous()
    return _playback_out(player.snapshot())


@router.post("/api/demo/select/{index}")
async def select_example(index: int, request: Request) -> PlaybackOut:
    player = request.app.state.demo_player
    try:
        player.select_index(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _playback_out(player.snapshot())


@router.get("/api/demo/stream")
async def playback_stream(request: Request):
    player = request.app.state.demo_player
    return _event_stream(player.subscribe, player.snapshot(), playback_event)


@router.get("/api/demo/examples/{example_id}/transcript")
async def example_transcript(example_id: str, request: Request, seed: int = 0) -> list[TranscriptFrame]:
    example = _find_example(request, example_id)
    frames = transcript(example, rng=random.Random(seed))
    return [TranscriptFrame(elapsed_ms=t, playback=_playback_out(snap)) for t, snap in frames]


@router.get("/api/demo/examples/{example_id}/payload")
async def download_payload(example_id: str, request: Request):
    example = _find_example(request, example_id)
    return Response(
        content=example.payload,
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="workflow.json"'},
    )


# --- Testimonials ---


def _testimonial_out(carousel: TestimonialCarousel) -> TestimonialOut:
    item = carousel.current
    return TestimonialOut(
        index=carousel.index,
        total=len(carousel),
        quote=item.quote,
        author=item.author,
        role=item.role,
    )


@router.get("/api/testimonials")
async def current_testimonial(request: Request) -> TestimonialOut:
    return _testimonial_out(request.app.state.carousel)


@router.post("/api/testimonials/next")
async def next_testimonial(request: Request) -> TestimonialOut:
    carousel = request.app.state.carousel
    carousel.next()
    return _testimonial_out(carousel)


@router.post("/api/testimonials/previous")
async def previous_testimonial(request: Request) -> TestimonialOut:
    carousel = request.app.state.carousel
    carousel.previous()
    return _testimonial_out(carousel)
