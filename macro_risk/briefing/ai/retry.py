from __future__ import annotations

import os
import time
from typing import Callable, TypeVar

from .base import AIClient
from ...utils.logging import get_logger

T = TypeVar("T")
logger = get_logger("mr.ai.retry")

# Credential and request errors fail the same way on every attempt
NON_RETRYABLE_STATUS = frozenset({400, 401, 403})


def _env_override(name: str, default: T, cast: Callable[[str], T]) -> T:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", name, raw)
        return default


def with_retries(fn: Callable[[], T], *, retries: int = 2, backoff: float = 1.5) -> T:
    """Call ``fn`` up to ``retries + 1`` times, sleeping ``backoff ** attempt`` between tries.

    ``AI_RETRIES`` and ``AI_BACKOFF`` override the arguments. Errors carrying a
    ``status_code`` in ``NON_RETRYABLE_STATUS`` are raised immediately.
    """
    retries = _env_override("AI_RETRIES", retries, int)
    backoff = _env_override("AI_BACKOFF", backoff, float)
    last_exc: BaseException | None = None
    for attempt in range(retries + 1):
        try:
            return fn()
        except Exception as exc:  # noqa: BLE001 - re-raised after the last attempt
            last_exc = exc
            if getattr(exc, "status_code", None) in NON_RETRYABLE_STATUS:
                logger.warning("AI call rejected with HTTP %s; not retrying", exc.status_code)  # type: ignore[attr-defined]
                break
            if attempt >= retries:
                break
            sleep_s = backoff ** attempt
            logger.warning("AI call failed (attempt %s/%s): %s; retrying in %.1fs", attempt + 1, retries + 1, exc, sleep_s)
            time.sleep(sleep_s)
    assert last_exc is not None
    raise last_exc


def generate_with_retry(client: AIClient, prompt: str) -> str:
    return with_retries(lambda: client.generate(prompt))
