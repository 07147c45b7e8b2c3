import os

PORT = int(os.environ.get("PORT", "19876"))
ROOT_PATH = os.environ.get("ROOT_PATH", "")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
RANDOM_SEED = int(os.environ["RANDOM_SEED"]) if os.environ.get("RANDOM_SEED") else None

RESPONSE_DELAY_MS = 1500
TYPING_START_DELAY_MS = 500
CHAR_DELAY_MIN_MS = 30
CHAR_DELAY_MAX_MS = 80
PHASE_DELAY_MS = 500
STEP_INTERVAL_MS = 300
TESTIMONIAL_INTERVAL_MS = 5000
SSE_PING_SECS = 15
