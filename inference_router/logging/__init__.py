"""Logging setup and context utilities."""

from .setup import JsonFormatter, init_logging
from .context import log_stage, current_stage, install_log_context

__all__ = [
    "JsonFormatter",
    "current_stage",
    "init_logging",
    "install_log_context",
    "log_stage",
]
