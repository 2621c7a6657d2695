"""Application logging configuration values."""

import os


APP_LOG_LEVEL = (os.getenv("APP_LOG_LEVEL", "INFO") or "INFO").upper()
APP_LOG_FORMAT = os.getenv(
    "APP_LOG_FORMAT",
    "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] [%(stage)s] %(message)s",
)
APP_LOG_DATEFMT = os.getenv("APP_LOG_DATEFMT", "%Y-%m-%dT%H:%M:%S")

DEFAULT_OTLP_SERVICE_NAME = "text-generation-inference.router"

# Third-party loggers that are chatty at INFO during hub downloads
QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "filelock", "urllib3")


__all__ = [
    "APP_LOG_LEVEL",
    "APP_LOG_FORMAT",
    "APP_LOG_DATEFMT",
    "DEFAULT_OTLP_SERVICE_NAME",
    "QUIET_LOGGERS",
]
