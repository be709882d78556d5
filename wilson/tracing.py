"""Weave tracing helpers with lazy, best-effort initialization.

Model calls go through trace_call_async. When tracing is off
(WEAVE_DISABLED=1, or weave.init fails without credentials) the wrapped
function is called directly.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Any, Awaitable, Callable, TypeVar

import weave

logger = logging.getLogger(__name__)

_init_attempted = False
_enabled = False

T = TypeVar("T")


def _is_disabled() -> bool:
    return os.getenv("WEAVE_DISABLED") == "1"


def init_tracing(project: str | None = None) -> None:
    """Initialize Weave tracing once. Stay disabled if it can't start."""
    global _init_attempted, _enabled
    if _init_attempted:
        return
    _init_attempted = True

    if _is_disabled():
        _enabled = False
        return

    try:
        weave.init(project or os.getenv("WEAVE_PROJECT", "wilson"))
        _enabled = True
    except Exception as e:
        logger.debug("Weave tracing unavailable: %s", e)
        _enabled = False


async def trace_call_async(
    name: str,
    fn: Callable[..., Awaitable[T]],
    *args: Any,
    trace_meta: dict[str, Any] | None = None,
    **kwargs: Any,
) -> T:
    """Trace an async call when Weave is enabled."""
    init_tracing()
    start_time = time.time()
    try:
        if not _enabled:
            return await fn(*args, **kwargs)

        @weave.op(name=name)
        async def _wrapped(
            *args: Any, _trace_meta: dict[str, Any] | None = None, **kwargs: Any
        ) -> T:
            return await fn(*args, **kwargs)

        return await _wrapped(*args, _trace_meta=trace_meta, **kwargs)
    finally:
        logger.debug("%s took %.1fms", name, (time.time() - start_time) * 1000)
