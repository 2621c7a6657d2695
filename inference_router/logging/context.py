"""Logging context helpers for the bootstrap stage field."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_STAGE: ContextVar[str] = ContextVar("stage", default="-")


@contextmanager
def log_stage(stage: str) -> Iterator[None]:
    """Tag every record emitted within the block with ``stage``."""
    token = _STAGE.set(stage)
    try:
        yield
    finally:
        _STAGE.reset(token)


def current_stage() -> str:
    return _STAGE.get()


def install_log_context() -> None:
    """Install a LogRecord factory that injects the stage field."""
    if getattr(install_log_context, "_installed", False):
        return

    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        record.stage = _STAGE.get()
        return record

    logging.setLogRecordFactory(record_factory)
    install_log_context._installed = True  # type: ignore[attr-defined]


__all__ = [
    "current_stage",
    "install_log_context",
    "log_stage",
]
