"""Exception classification helpers for log and telemetry labels."""

from __future__ import annotations

from .bootstrap import BootstrapError

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (TimeoutError, "timeout"),
    (ConnectionError, "connection"),
    (FileNotFoundError, "missing_file"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a metric-friendly category label."""

    if isinstance(exc, BootstrapError):
        return exc.category
    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
