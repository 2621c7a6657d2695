"""Backend variant configuration.

Two variants are supported:
- v3: Python shards reached over a unix socket; capacity is reported at
  connect time (warmup) and may support chunked prefill.
- trtllm: TensorRT-LLM executor worker; capacity is static and a directly
  loadable tokenizer is required.
"""

from __future__ import annotations

BACKEND_V3 = "v3"
BACKEND_TRTLLM = "trtllm"
SUPPORTED_BACKENDS: tuple[str, ...] = (BACKEND_V3, BACKEND_TRTLLM)
DEFAULT_BACKEND = BACKEND_V3

# v3 shard connection
DEFAULT_MASTER_SHARD_UDS_PATH = "/tmp/text-generation-server-0"
SHARD_REQUEST_TIMEOUT_S = 600.0  # warmup can take minutes on large models
SHARD_INFO_ROUTE = "/info"
SHARD_CLEAR_CACHE_ROUTE = "/clear_cache"
SHARD_WARMUP_ROUTE = "/warmup"
SHARD_HEALTH_ROUTE = "/health"
SHARD_BASE_URL = "http://shard"

# v3 capacity fallbacks when the shard leaves a value undecided
V3_FALLBACK_MAX_TOTAL_TOKENS = 4096
V3_FALLBACK_MIN_BATCH_TOTAL_TOKENS = 16000

# TensorRT-LLM executor worker
TRT_WORKER_SHUTDOWN_TIMEOUT_S = 10.0


__all__ = [
    "BACKEND_V3",
    "BACKEND_TRTLLM",
    "SUPPORTED_BACKENDS",
    "DEFAULT_BACKEND",
    "DEFAULT_MASTER_SHARD_UDS_PATH",
    "SHARD_REQUEST_TIMEOUT_S",
    "SHARD_INFO_ROUTE",
    "SHARD_CLEAR_CACHE_ROUTE",
    "SHARD_WARMUP_ROUTE",
    "SHARD_HEALTH_ROUTE",
    "SHARD_BASE_URL",
    "V3_FALLBACK_MAX_TOTAL_TOKENS",
    "V3_FALLBACK_MIN_BATCH_TOTAL_TOKENS",
    "TRT_WORKER_SHUTDOWN_TIMEOUT_S",
]
