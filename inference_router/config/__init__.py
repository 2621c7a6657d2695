"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- limits: serving limit defaults
- server: HTTP binding and surface defaults
- backends: backend variants and shard connection settings
- hub: hub/tokenizer resolution settings
- logging: log level and format
- telemetry: Sentry error-reporting settings

Functions live in inference_router/helpers/.
"""

from .limits import (
    DEFAULT_MAX_CONCURRENT_REQUESTS,
    DEFAULT_MAX_BEST_OF,
    DEFAULT_MAX_STOP_SEQUENCES,
    DEFAULT_MAX_TOP_N_TOKENS,
    DEFAULT_MAX_BATCH_PREFILL_TOKENS,
    DEFAULT_MAX_WAITING_TOKENS,
    DEFAULT_WAITING_SERVED_RATIO,
    DEFAULT_VALIDATION_WORKERS,
    DEFAULT_MAX_CLIENT_BATCH_SIZE,
    DEFAULT_STATIC_MAX_INPUT_TOKENS,
    DEFAULT_STATIC_MAX_TOTAL_TOKENS,
)
from .server import (
    DEFAULT_HOSTNAME,
    DEFAULT_PORT,
    DEFAULT_PROMETHEUS_PORT,
    DEFAULT_PAYLOAD_LIMIT,
    USAGE_STATS_LEVELS,
    DEFAULT_USAGE_STATS,
)
from .backends import (
    BACKEND_V3,
    BACKEND_TRTLLM,
    SUPPORTED_BACKENDS,
    DEFAULT_BACKEND,
    DEFAULT_MASTER_SHARD_UDS_PATH,
)
from .hub import (
    DEFAULT_REVISION,
    DEFAULT_TOKENIZER_OUTPUT_DIR,
    TOKENIZER_JSON_FILE,
    METADATA_FILES,
)
from .logging import DEFAULT_OTLP_SERVICE_NAME
from .telemetry import SENTRY_DSN, SENTRY_ENVIRONMENT

__all__ = [
    # Limits
    "DEFAULT_MAX_CONCURRENT_REQUESTS",
    "DEFAULT_MAX_BEST_OF",
    "DEFAULT_MAX_STOP_SEQUENCES",
    "DEFAULT_MAX_TOP_N_TOKENS",
    "DEFAULT_MAX_BATCH_PREFILL_TOKENS",
    "DEFAULT_MAX_WAITING_TOKENS",
    "DEFAULT_WAITING_SERVED_RATIO",
    "DEFAULT_VALIDATION_WORKERS",
    "DEFAULT_MAX_CLIENT_BATCH_SIZE",
    "DEFAULT_STATIC_MAX_INPUT_TOKENS",
    "DEFAULT_STATIC_MAX_TOTAL_TOKENS",
    # Server
    "DEFAULT_HOSTNAME",
    "DEFAULT_PORT",
    "DEFAULT_PROMETHEUS_PORT",
    "DEFAULT_PAYLOAD_LIMIT",
    "USAGE_STATS_LEVELS",
    "DEFAULT_USAGE_STATS",
    # Backends
    "BACKEND_V3",
    "BACKEND_TRTLLM",
    "SUPPORTED_BACKENDS",
    "DEFAULT_BACKEND",
    "DEFAULT_MASTER_SHARD_UDS_PATH",
    # Hub
    "DEFAULT_REVISION",
    "DEFAULT_TOKENIZER_OUTPUT_DIR",
    "TOKENIZER_JSON_FILE",
    "METADATA_FILES",
    # Logging
    "DEFAULT_OTLP_SERVICE_NAME",
    # Telemetry
    "SENTRY_DSN",
    "SENTRY_ENVIRONMENT",
]
