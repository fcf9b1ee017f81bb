# api/rate_limit.py
import os
from dotenv import load_dotenv
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from fastapi import FastAPI

load_dotenv()
RATE_LIMIT = os.getenv("RATE_LIMIT", "1000/hour")
RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() in ("true", "1", "yes")

limiter = Limiter(key_func=get_remote_address, enabled=RATE_LIMIT_ENABLED)


def register_rate_limit(app: FastAPI):
    """
    Register rate limiting middleware and exception handler to the FastAPI app.

    Attaches the slowapi limiter to the application state and configures the
    slowapi handler for 429 Too Many Requests responses.

    Args:
        app (FastAPI): The FastAPI application instance to configure

    Returns:
        None

    Note:
        Must be called during application initialization before adding routes.
        Per-route limits use RATE_LIMIT (env, default "1000/hour").
    """
    app.state.limiter = limiter
    app.add_exception_handler(429, _rate_limit_exceeded_handler)
