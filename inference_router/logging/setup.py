"""Process-wide logging initialisation."""

from __future__ import annotations

import json
import logging
import contextlib

from ..config.logging import APP_LOG_LEVEL, APP_LOG_FORMAT, QUIET_LOGGERS, APP_LOG_DATEFMT
from ..telemetry.otel import init_otel
from .context import install_log_context


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, APP_LOG_DATEFMT),
            "level": record.levelname,
            "target": record.name,
            "stage": getattr(record, "stage", "-"),
            "message": record.getMessage(),
        }
        error_category = getattr(record, "error_category", None)
        if error_category:
            payload["error_category"] = error_category
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _build_formatter(json_output: bool) -> logging.Formatter:
    if json_output:
        return JsonFormatter()
    return logging.Formatter(APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT)


def init_logging(
    otlp_endpoint: str | None,
    otlp_service_name: str,
    json_output: bool,
) -> None:
    """Initialize root logging once per process and optional OTLP tracing.

    Args:
        otlp_endpoint: OTLP/HTTP collector endpoint; tracing is off when unset.
        otlp_service_name: ``service.name`` resource attribute for spans.
        json_output: Emit one JSON object per line instead of plain text.
    """
    install_log_context()
    formatter = _build_formatter(json_output)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    else:
        for handler in root_logger.handlers:
            with contextlib.suppress(Exception):
                handler.setLevel(APP_LOG_LEVEL)
                handler.setFormatter(formatter)
    root_logger.setLevel(APP_LOG_LEVEL)

    logging.getLogger("inference_router").setLevel(APP_LOG_LEVEL)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if otlp_endpoint:
        init_otel(otlp_endpoint, otlp_service_name)


__all__ = ["JsonFormatter", "init_logging"]
