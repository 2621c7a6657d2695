"""Tracing lifecycle, bootstrap stage spans and error reporting."""

from .traces import stage_span
from .otel import init_otel, shutdown_otel
from .sentry import init_sentry, capture_error, shutdown_sentry

__all__ = [
    "capture_error",
    "init_otel",
    "init_sentry",
    "shutdown_otel",
    "shutdown_sentry",
    "stage_span",
]
