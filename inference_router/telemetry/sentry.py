"""Sentry reporting of fatal bootstrap errors."""

from __future__ import annotations

import logging
from typing import Any

from ..errors import classify_error
from ..config.telemetry import (
    SENTRY_DSN,
    SENTRY_RELEASE,
    SENTRY_TAG_BACKEND,
    SENTRY_ENVIRONMENT,
    SENTRY_SAMPLE_RATE,
    SENTRY_TAG_CATEGORY,
    SENTRY_FLUSH_TIMEOUT_S,
)

logger = logging.getLogger(__name__)

_initialized: bool = False


def init_sentry(dsn: str = SENTRY_DSN) -> bool:
    """Initialize the Sentry SDK when a DSN is configured. Idempotent.

    Returns:
        True when Sentry is active.
    """
    global _initialized  # noqa: PLW0603
    if _initialized:
        return True
    if not dsn:
        return False
    import sentry_sdk  # noqa: PLC0415

    kwargs: dict[str, Any] = {
        "dsn": dsn,
        "environment": SENTRY_ENVIRONMENT,
        "traces_sample_rate": 0.0,
        "sample_rate": SENTRY_SAMPLE_RATE,
        "attach_stacktrace": True,
    }
    if SENTRY_RELEASE:
        kwargs["release"] = SENTRY_RELEASE
    sentry_sdk.init(**kwargs)
    _initialized = True
    logger.info("Sentry initialized: environment=%s", SENTRY_ENVIRONMENT)
    return True


def shutdown_sentry() -> None:
    """Flush pending events. Idempotent."""
    global _initialized  # noqa: PLW0603
    if not _initialized:
        return
    import sentry_sdk  # noqa: PLC0415

    sentry_sdk.flush(timeout=SENTRY_FLUSH_TIMEOUT_S)
    _initialized = False


def capture_error(error: BaseException, *, backend: str | None = None) -> None:
    """Report a fatal error with its category tag. No-op when disabled."""
    if not _initialized:
        return
    import sentry_sdk  # noqa: PLC0415

    with sentry_sdk.new_scope() as scope:
        scope.set_tag(SENTRY_TAG_CATEGORY, classify_error(error))
        if backend:
            scope.set_tag(SENTRY_TAG_BACKEND, backend)
        sentry_sdk.capture_exception(error)


__all__ = ["capture_error", "init_sentry", "shutdown_sentry"]
