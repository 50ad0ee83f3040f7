"""Input layer: uploaded Markdown documents.

Uploads live in memory for the fast path and are persisted on disk so a
document can still be parsed after a server reload/restart.
"""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any

from .. import config

logger = logging.getLogger(__name__)

_upload_store: dict[str, dict[str, Any]] = {}


def _upload_dir() -> Path:
    return config.data_dir() / "uploads"


def _persist_upload(file_id: str, record: dict[str, Any]) -> None:
    upload_dir = _upload_dir()
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / f"{file_id}.json"
    path.write_text(json.dumps(record, ensure_ascii=False), encoding="utf-8")


def _load_upload_from_disk(file_id: str) -> dict[str, Any] | None:
    path = _upload_dir() / f"{file_id}.json"
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable upload %s: %s", file_id, e)
        return None


def make_preview(content: str, limit: int | None = None) -> str:
    limit = config.PREVIEW_CHARS if limit is None else limit
    return content[:limit] + ("..." if len(content) > limit else "")


def save_upload(content: str | bytes, filename: str = "README.md") -> dict[str, Any]:
    """Store uploaded content and return file_id and preview_markdown."""
    file_id = str(uuid.uuid4())
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    preview = make_preview(content)
    record = {
        "content": content,
        "filename": filename,
        "preview_markdown": preview,
    }
    _upload_store[file_id] = record
    _persist_upload(file_id, record)
    logger.info("Stored upload %s (%s, %d chars)", file_id, filename, len(content))
    return {"file_id": file_id, "preview_markdown": preview}


def get_upload(file_id: str) -> dict[str, Any] | None:
    """Retrieve stored upload by file_id."""
    rec = _upload_store.get(file_id)
    if rec is not None:
        return rec
    try:
        uuid.UUID(file_id)
    except ValueError:
        return None
    rec = _load_upload_from_disk(file_id)
    if rec is not None:
        _upload_store[file_id] = rec
    return rec
