"""Serving limit defaults.

These are the values used when neither a CLI flag nor the matching
environment variable is provided. Optional limits (input/total tokens, batch
total tokens, batch size) have no default here: they are either supplied by
the operator or reported by the backend at connect time.
"""

from __future__ import annotations

DEFAULT_MAX_CONCURRENT_REQUESTS = 128
DEFAULT_MAX_BEST_OF = 2
DEFAULT_MAX_STOP_SEQUENCES = 4
DEFAULT_MAX_TOP_N_TOKENS = 5
DEFAULT_MAX_BATCH_PREFILL_TOKENS = 4096
DEFAULT_MAX_WAITING_TOKENS = 20
DEFAULT_WAITING_SERVED_RATIO = 1.2
DEFAULT_VALIDATION_WORKERS = 2
DEFAULT_MAX_CLIENT_BATCH_SIZE = 4

# Static limits used by backends that cannot report capacity (TensorRT-LLM)
DEFAULT_STATIC_MAX_INPUT_TOKENS = 1024
DEFAULT_STATIC_MAX_TOTAL_TOKENS = 2048


__all__ = [
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
]
