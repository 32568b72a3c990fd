"""Configuration for the backend API."""

import logging
import os
from typing import List, Optional
from dotenv import load_dotenv

from . import __version__

load_dotenv()


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    return value if value not in (None, "") else default


def parse_origins(value: Optional[str]) -> List[str]:
    """Split a comma separated origin list, dropping blank entries."""
    if not value:
        return []
    return [origin.strip() for origin in value.split(",") if origin.strip()]


# Service identity, reported by the health endpoints
APP_NAME = _env("APP_NAME", "Backend API")
APP_VERSION = _env("APP_VERSION", __version__)

# Origins allowed by CORS (frontend dev servers by default)
DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://localhost:3000"]
CORS_ORIGINS = parse_origins(_env("CORS_ORIGINS")) or DEFAULT_CORS_ORIGINS

LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise ValueError(f"Unknown LOG_LEVEL: {LOG_LEVEL!r}")

# Only used when running the app directly with uvicorn
HOST = _env("HOST", "0.0.0.0")
PORT = int(_env("PORT", "8001"))

# Vercel sets these on every deployment, including preview builds.
IS_VERCEL = bool(os.getenv("VERCEL") or os.getenv("VERCEL_ENV"))
