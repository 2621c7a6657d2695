"""Command-line parsing for the router.

Every flag can also be set through the matching upper-case environment
variable (``--max-input-tokens`` <- ``MAX_INPUT_TOKENS``); the flag wins
when both are given. Environment values go through the same type
conversion as flags, so a malformed value is a usage error.
"""

from __future__ import annotations

import os
import argparse
from collections.abc import Mapping, Sequence
from pathlib import Path

from ..state import ServingConfig
from ..helpers.env import env_flag
from ..config.limits import (
    DEFAULT_MAX_BEST_OF,
    DEFAULT_MAX_TOP_N_TOKENS,
    DEFAULT_MAX_STOP_SEQUENCES,
    DEFAULT_MAX_WAITING_TOKENS,
    DEFAULT_VALIDATION_WORKERS,
    DEFAULT_WAITING_SERVED_RATIO,
    DEFAULT_MAX_CLIENT_BATCH_SIZE,
    DEFAULT_MAX_CONCURRENT_REQUESTS,
    DEFAULT_MAX_BATCH_PREFILL_TOKENS,
)
from ..config.server import (
    DEFAULT_PORT,
    DEFAULT_HOSTNAME,
    USAGE_STATS_LEVELS,
    DEFAULT_USAGE_STATS,
    DEFAULT_PAYLOAD_LIMIT,
    DEFAULT_PROMETHEUS_PORT,
)
from ..config.logging import DEFAULT_OTLP_SERVICE_NAME
from ..config.backends import DEFAULT_BACKEND, SUPPORTED_BACKENDS, DEFAULT_MASTER_SHARD_UDS_PATH

PRINT_SCHEMA_COMMAND = "print-schema"

# argparse never checks choices against env-backed defaults
_CHOICE_FLAGS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("--backend", SUPPORTED_BACKENDS),
    ("--usage-stats", USAGE_STATS_LEVELS),
)


def _env_name(flag: str) -> str:
    return flag.lstrip("-").replace("-", "_").upper()


def _split_origins(values: Sequence[str] | None) -> tuple[str, ...]:
    origins: list[str] = []
    for value in values or ():
        origins.extend(part.strip() for part in value.split(",") if part.strip())
    return tuple(origins)


class _EnvDefaults:
    """Builds argparse defaults from an environment mapping."""

    def __init__(self, environ: Mapping[str, str]):
        self.environ = environ

    def value(self, flag: str, default=None):
        return self.environ.get(_env_name(flag), default)

    def flag(self, flag: str) -> bool:
        return env_flag(_env_name(flag), False, self.environ)

    def first(self, *names: str):
        for name in names:
            value = self.environ.get(name)
            if value:
                return value
        return None


def _add_limit_args(parser: argparse.ArgumentParser, env: _EnvDefaults) -> None:
    limits = parser.add_argument_group("limits")
    limits.add_argument("--max-concurrent-requests", type=int, default=env.value("--max-concurrent-requests", DEFAULT_MAX_CONCURRENT_REQUESTS))
    limits.add_argument("--max-best-of", type=int, default=env.value("--max-best-of", DEFAULT_MAX_BEST_OF))
    limits.add_argument("--max-stop-sequences", type=int, default=env.value("--max-stop-sequences", DEFAULT_MAX_STOP_SEQUENCES))
    limits.add_argument("--max-top-n-tokens", type=int, default=env.value("--max-top-n-tokens", DEFAULT_MAX_TOP_N_TOKENS))
    limits.add_argument("--max-input-tokens", type=int, default=env.value("--max-input-tokens"))
    limits.add_argument("--max-total-tokens", type=int, default=env.value("--max-total-tokens"))
    limits.add_argument("--waiting-served-ratio", type=float, default=env.value("--waiting-served-ratio", DEFAULT_WAITING_SERVED_RATIO))
    limits.add_argument("--max-batch-prefill-tokens", type=int, default=env.value("--max-batch-prefill-tokens", DEFAULT_MAX_BATCH_PREFILL_TOKENS))
    limits.add_argument("--max-batch-total-tokens", type=int, default=env.value("--max-batch-total-tokens"))
    limits.add_argument("--max-waiting-tokens", type=int, default=env.value("--max-waiting-tokens", DEFAULT_MAX_WAITING_TOKENS))
    limits.add_argument("--max-batch-size", type=int, default=env.value("--max-batch-size"))
    limits.add_argument("--validation-workers", type=int, default=env.value("--validation-workers", DEFAULT_VALIDATION_WORKERS))
    limits.add_argument("--max-client-batch-size", type=int, default=env.value("--max-client-batch-size", DEFAULT_MAX_CLIENT_BATCH_SIZE))
    limits.add_argument("--payload-limit", type=int, default=env.value("--payload-limit", DEFAULT_PAYLOAD_LIMIT))


def _add_server_args(parser: argparse.ArgumentParser, env: _EnvDefaults) -> None:
    server = parser.add_argument_group("server")
    server.add_argument("--hostname", default=env.value("--hostname", DEFAULT_HOSTNAME))
    server.add_argument("-p", "--port", type=int, default=env.value("--port", DEFAULT_PORT))
    server.add_argument("--prometheus-port", type=int, default=env.value("--prometheus-port", DEFAULT_PROMETHEUS_PORT))
    server.add_argument(
        "--api-key",
        "--auth-token",
        dest="api_key",
        default=env.first("API_KEY", "AUTH_TOKEN"),
        help="Require this key on authenticated routes",
    )
    server.add_argument(
        "--cors-allow-origin",
        action="append",
        help="Allowed CORS origin; repeat or comma-separate for several",
    )
    server.add_argument("--usage-stats", choices=USAGE_STATS_LEVELS, default=env.value("--usage-stats", DEFAULT_USAGE_STATS))
    server.add_argument("--disable-grammar-support", action="store_true", default=env.flag("--disable-grammar-support"))


def _add_model_args(parser: argparse.ArgumentParser, env: _EnvDefaults) -> None:
    model = parser.add_argument_group("model")
    model.add_argument("--backend", choices=SUPPORTED_BACKENDS, default=env.value("--backend", DEFAULT_BACKEND))
    model.add_argument("--tokenizer-name", default=env.value("--tokenizer-name"))
    model.add_argument("--tokenizer-config-path", default=env.value("--tokenizer-config-path"))
    model.add_argument("--revision", default=env.value("--revision"))
    model.add_argument("--model-id", default=env.value("--model-id"))
    model.add_argument("--trust-remote-code", action="store_true", default=env.flag("--trust-remote-code"))
    model.add_argument(
        "--master-shard-uds-path",
        default=env.value("--master-shard-uds-path", DEFAULT_MASTER_SHARD_UDS_PATH),
    )
    model.add_argument("--executor-worker", type=Path, default=env.value("--executor-worker"))


def _add_observability_args(parser: argparse.ArgumentParser, env: _EnvDefaults) -> None:
    observability = parser.add_argument_group("observability")
    observability.add_argument("--json-output", action="store_true", default=env.flag("--json-output"))
    observability.add_argument("--otlp-endpoint", default=env.value("--otlp-endpoint"))
    observability.add_argument("--otlp-service-name", default=env.value("--otlp-service-name", DEFAULT_OTLP_SERVICE_NAME))


def build_parser(environ: Mapping[str, str] | None = None) -> argparse.ArgumentParser:
    env = _EnvDefaults(os.environ if environ is None else environ)
    parser = argparse.ArgumentParser(
        prog="inference-router",
        description="Validate serving limits, resolve the tokenizer, connect the backend and serve.",
    )
    _add_model_args(parser, env)
    _add_limit_args(parser, env)
    _add_server_args(parser, env)
    _add_observability_args(parser, env)

    sub = parser.add_subparsers(dest="command")
    sub.add_parser(PRINT_SCHEMA_COMMAND, help="Print the server's OpenAPI schema as JSON and exit")
    return parser


def parse_args(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> argparse.Namespace:
    """Parse ``argv``; ``--tokenizer-name`` is required unless printing the schema."""
    parser = build_parser(environ)
    args = parser.parse_args(argv)
    if args.cors_allow_origin is None:
        origins = _EnvDefaults(os.environ if environ is None else environ).value("--cors-allow-origin")
        args.cors_allow_origin = [origins] if origins else []
    for flag, choices in _CHOICE_FLAGS:
        value = getattr(args, flag.lstrip("-").replace("-", "_"))
        if value not in choices:
            parser.error(
                f"argument {flag}: invalid choice: {value!r} (choose from {', '.join(choices)})"
            )
    if args.command is None and not args.tokenizer_name:
        parser.error("the following arguments are required: --tokenizer-name")
    return args


def config_from_args(args: argparse.Namespace) -> ServingConfig:
    return ServingConfig(
        tokenizer_name=args.tokenizer_name,
        backend=args.backend,
        max_concurrent_requests=args.max_concurrent_requests,
        max_best_of=args.max_best_of,
        max_stop_sequences=args.max_stop_sequences,
        max_top_n_tokens=args.max_top_n_tokens,
        max_input_tokens=args.max_input_tokens,
        max_total_tokens=args.max_total_tokens,
        waiting_served_ratio=args.waiting_served_ratio,
        max_batch_prefill_tokens=args.max_batch_prefill_tokens,
        max_batch_total_tokens=args.max_batch_total_tokens,
        max_waiting_tokens=args.max_waiting_tokens,
        max_batch_size=args.max_batch_size,
        hostname=args.hostname,
        port=args.port,
        prometheus_port=args.prometheus_port,
        master_shard_uds_path=args.master_shard_uds_path,
        tokenizer_config_path=args.tokenizer_config_path,
        revision=args.revision,
        model_id=args.model_id,
        trust_remote_code=args.trust_remote_code,
        validation_workers=args.validation_workers,
        api_key=args.api_key,
        json_output=args.json_output,
        otlp_endpoint=args.otlp_endpoint,
        otlp_service_name=args.otlp_service_name,
        cors_allow_origin=_split_origins(args.cors_allow_origin),
        disable_grammar_support=args.disable_grammar_support,
        max_client_batch_size=args.max_client_batch_size,
        executor_worker=args.executor_worker,
        usage_stats=args.usage_stats,
        payload_limit=args.payload_limit,
    )


__all__ = [
    "PRINT_SCHEMA_COMMAND",
    "build_parser",
    "config_from_args",
    "parse_args",
]
