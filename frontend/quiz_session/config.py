import os
from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Config:
    # Backend
    API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000").rstrip("/")
    API_TOKEN = os.getenv("API_TOKEN", "")

    # HTTP timeouts (seconds)
    REQUEST_TIMEOUT = _int_env("REQUEST_TIMEOUT", 10)
    SUBMIT_TIMEOUT = _int_env("SUBMIT_TIMEOUT", 30)

    # Fire-and-forget status updates
    STATUS_WORKERS = _int_env("STATUS_WORKERS", 2)

    # Countdown
    TICK_SECONDS = _int_env("TICK_SECONDS", 1)

    # Rendering
    IMAGE_MAX_WIDTH = _int_env("IMAGE_MAX_WIDTH", 800)

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


config = Config()
