import logging
import random
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from .api.routes import router
from .chat.conversations import ConversationList
from .chat.simulator import ChatSimulator
from .config import LOG_LEVEL, PORT, RANDOM_SEED, ROOT_PATH
from .demo.carousel import TestimonialCarousel
from .demo.player import ScriptedDemoPlayer
from .timers import AsyncioScheduler

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    scheduler = AsyncioScheduler()
    rng = random.Random(RANDOM_SEED)

    logger.info("Initializing chat simulator...")
    chat = ChatSimulator(scheduler, rng=rng)
    conversations = ConversationList()

    logger.info("Starting use-case demo playback...")
    demo_player = ScriptedDemoPlayer(scheduler, rng=rng)
    demo_player.start()

    carousel = TestimonialCarousel(scheduler)
    carousel.start()

    app.state.chat = chat
    app.state.conversations = conversations
    app.state.demo_player = demo_player
    app.state.carousel = carousel

    logger.info("Startup complete, ready to serve")
    yield

    # Shutdown
    logger.info("Shutting down...")
    carousel.stop()
    demo_player.stop()
    chat.close()


app = FastAPI(title="FlowGenie", root_path=ROOT_PATH, lifespan=lifespan)
app.include_router(router)


def run() -> None:
    uvicorn.run("flowgenie.main:app", host="0.0.0.0", port=PORT)
