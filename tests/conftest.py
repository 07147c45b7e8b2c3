import random

import pytest
from fastapi.testclient import TestClient

from flowgenie.chat.conversations import ConversationList
from flowgenie.chat.simulator import ChatSimulator
from flowgenie.data.examples import DemoExample, DemoStep
from flowgenie.demo.player import PlaybackTiming, ScriptedDemoPlayer
from flowgenie.timers import VirtualScheduler


class FixedRandom(random.Random):
    """Always returns ``value`` from random() and the first item from choice()."""

    def __init__(self, value: float = 0.0) -> None:
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def scheduler():
    return VirtualScheduler()


@pytest.fixture
def fixed_rng():
    return FixedRandom()


@pytest.fixture
def chat(scheduler, fixed_rng):
    sim = ChatSimulator(scheduler, responses=["r1", "r2", "r3", "r4"], rng=fixed_rng)
    yield sim
    sim.close()


@pytest.fixture
def conversations():
    return ConversationList()


@pytest.fixture
def examples():
    return [
        DemoExample(
            id="first",
            user_question="Q1",
            ai_response="A1",
            steps=(DemoStep("Trigger:", "start"), DemoStep("Action:", "finish")),
            payload='{"nodes": []}',
        ),
        DemoExample(
            id="second",
            user_question="Q2?",
            ai_response="A2",
            steps=(DemoStep("Only:", "step"),),
            payload="{}",
        ),
    ]


@pytest.fixture
def player(scheduler, examples, fixed_rng):
    # fixed_rng makes every character take exactly 30 ms
    p = ScriptedDemoPlayer(scheduler, examples=examples, rng=fixed_rng, timing=PlaybackTiming())
    yield p
    p.stop()


@pytest.fixture
def client():
    from flowgenie.main import app

    with TestClient(app) as c:
        yield c
