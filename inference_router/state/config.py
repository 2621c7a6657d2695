"""Serving configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ServingConfig:
    """Operator-supplied serving limits, binding and auth settings.

    Optional limits are ``None`` when the operator left them unset; backends
    that report capacity fill them in during negotiation (see
    ``runtime.negotiation``), producing a new instance via
    ``dataclasses.replace``.
    """

    tokenizer_name: str
    backend: str = "v3"
    max_concurrent_requests: int = 128
    max_best_of: int = 2
    max_stop_sequences: int = 4
    max_top_n_tokens: int = 5
    max_input_tokens: int | None = None
    max_total_tokens: int | None = None
    waiting_served_ratio: float = 1.2
    max_batch_prefill_tokens: int = 4096
    max_batch_total_tokens: int | None = None
    max_waiting_tokens: int = 20
    max_batch_size: int | None = None
    hostname: str = "0.0.0.0"
    port: int = 3000
    prometheus_port: int = 9000
    master_shard_uds_path: str = "/tmp/text-generation-server-0"
    tokenizer_config_path: str | None = None
    revision: str | None = None
    model_id: str | None = None
    trust_remote_code: bool = False
    validation_workers: int = 2
    api_key: str | None = None
    json_output: bool = False
    otlp_endpoint: str | None = None
    otlp_service_name: str = "text-generation-inference.router"
    cors_allow_origin: tuple[str, ...] = field(default_factory=tuple)
    disable_grammar_support: bool = False
    max_client_batch_size: int = 4
    executor_worker: Path | None = None
    usage_stats: str = "on"
    payload_limit: int = 2_000_000


__all__ = ["ServingConfig"]
