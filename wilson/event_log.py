"""JSON-lines event log for chat activity (chat.request, chat.complete, chat.error)."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from datetime import UTC, datetime
from pathlib import Path
from threading import Lock
from typing import Any

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_LOG_PATH = REPO_ROOT / "logs" / "chat_events.jsonl"
ENV_FLAG = "CHAT_EVENT_LOGS_ENABLED"
ENV_PATH = "CHAT_EVENT_LOG_PATH"
_LOCK = Lock()


def _is_enabled() -> bool:
    value = os.getenv(ENV_FLAG, "").strip().lower()
    return value in {"1", "true", "yes", "on"}


def log_path() -> Path:
    override = os.getenv(ENV_PATH, "").strip()
    return Path(override) if override else DEFAULT_LOG_PATH


def log_event(event: str, payload: dict[str, Any] | None = None) -> None:
    """Append one JSON line for an event. No-op unless CHAT_EVENT_LOGS_ENABLED is set."""
    if not _is_enabled():
        return

    path = log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        data: dict[str, Any] = {"event": event, "ts": datetime.now(UTC).isoformat()}
        if payload:
            data.update(payload)
        line = json.dumps(data, ensure_ascii=False)
        with _LOCK, path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")
    except Exception as exc:
        logger.debug("Event log write failed: %s", exc)


async def alog_event(event: str, payload: dict[str, Any] | None = None) -> None:
    """log_event for async handlers; the file append runs in a worker thread."""
    if not _is_enabled():
        return
    await asyncio.to_thread(log_event, event, payload)
