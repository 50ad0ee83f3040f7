"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import os
from pathlib import Path

# Load .env from backend root if present
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(key) or "").strip() or default


def _int(key: str, default: int) -> int:
    raw = _str(key)
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


# Logging
LOG_LEVEL = _str("MARKDOWN_BLOCKS_LOG_LEVEL", "INFO").upper()

# Service
PREVIEW_CHARS = _int("MARKDOWN_BLOCKS_PREVIEW_CHARS", 5000)
CORS_ORIGINS = [o.strip() for o in _str("MARKDOWN_BLOCKS_CORS_ORIGINS", "*").split(",") if o.strip()]


# Data dir (uploads); read at call time so tests can point it elsewhere
def data_dir() -> Path:
    configured = _str("MARKDOWN_BLOCKS_DATA_DIR")
    if configured:
        return Path(configured)
    return Path(__file__).resolve().parent.parent.parent / ".data"
