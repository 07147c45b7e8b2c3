import random

import pytest

from flowgenie.chat.simulator import ChatSimulator
from flowgenie.data.responses import CANNED_RESPONSES


@pytest.mark.parametrize("text", ["", " ", "\n\t  "])
def test_blank_submission_is_ignored(chat, scheduler, text):
    assert chat.submit(text) is None
    assert chat.messages == ()
    assert not chat.is_typing
    assert scheduler.pending == 0


def test_submit_appends_user_then_assistant(chat, scheduler):
    user = chat.submit("Build me a workflow")

    assert user is not None
    assert user.role == "user"
    assert user.content == "Build me a workflow"
    assert [m.role for m in chat.messages] == ["user"]
    assert chat.is_typing

    scheduler.advance(1499)
    assert len(chat.messages) == 1

    scheduler.advance(1)
    assert [m.role for m in chat.messages] == ["user", "assistant"]
    assert chat.messages[1].content == "r1"
    assert not chat.is_typing

    scheduler.run_until_idle()
    assert len(chat.messages) == 2


def test_submit_while_pending_is_noop(chat, scheduler):
    chat.submit("first")
    assert chat.submit("second") is None
    assert len(chat.messages) == 1

    scheduler.run_until_idle()
    assert [m.content for m in chat.messages] == ["first", "r1"]

    assert chat.submit("third") is not None
    scheduler.run_until_idle()
    assert [m.role for m in chat.messages] == ["user", "assistant", "user", "assistant"]


def test_reset_drops_pending_reply(chat, scheduler):
    chat.submit("hello")
    chat.reset()

    assert chat.messages == ()
    assert not chat.is_typing
    scheduler.run_until_idle()
    assert chat.messages == ()


def test_reply_after_reset_belongs_to_new_submission(chat, scheduler):
    chat.submit("old conversation")
    scheduler.advance(1000)
    chat.reset()
    chat.submit("new conversation")

    scheduler.advance(600)
    assert len(chat.messages) == 1

    scheduler.advance(900)
    assert [m.content for m in chat.messages] == ["new conversation", "r1"]


def test_responses_come_from_canned_list(scheduler):
    sim = ChatSimulator(scheduler, rng=random.Random(42))
    for i in range(10):
        sim.submit(f"question {i}")
        scheduler.run_until_idle()

    replies = [m.content for m in sim.messages if m.role == "assistant"]
    assert len(replies) == 10
    assert all(r in CANNED_RESPONSES for r in replies)


def test_listeners_receive_snapshots(chat, scheduler):
    snapshots = []
    unsubscribe = chat.subscribe(snapshots.append)

    chat.submit("hi")
    scheduler.run_until_idle()

    assert [s.is_typing for s in snapshots] == [True, False]
    assert len(snapshots[-1].messages) == 2

    unsubscribe()
    chat.reset()
    assert len(snapshots) == 2


def test_requires_responses(scheduler):
    with pytest.raises(ValueError):
        ChatSimulator(scheduler, responses=[])


def test_typing_indicator_only_while_pending(chat, scheduler):
    assert chat.snapshot().typing_indicator is None

    chat.submit("hi")
    indicator = chat.snapshot().typing_indicator
    assert indicator is not None
    assert indicator.is_typing
    assert indicator.role == "assistant"
    assert indicator.content == ""
    assert all(not m.is_typing for m in chat.messages)

    scheduler.run_until_idle()
    assert chat.snapshot().typing_indicator is None
