"""Router entry point.

Usage:
    inference-router --tokenizer-name <id> [--backend v3|trtllm] [...]
    inference-router print-schema

Exit codes: 0 on clean shutdown or print-schema, 1 on any bootstrap
failure, 2 on usage errors.
"""

from __future__ import annotations

import json
import asyncio
import logging
from collections.abc import Mapping, Sequence

from .errors import BootstrapError, classify_error
from .logging import init_logging
from .telemetry import init_sentry, capture_error, shutdown_otel, shutdown_sentry
from .cli.args import PRINT_SCHEMA_COMMAND, parse_args, config_from_args
from .helpers.env import load_environment_context
from .runtime.bootstrap import run_bootstrap

logger = logging.getLogger(__name__)


def _print_schema() -> int:
    from .server.app import build_openapi_schema  # noqa: PLC0415

    print(json.dumps(build_openapi_schema(), indent=2))
    return 0


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    args = parse_args(argv, environ)
    if args.command == PRINT_SCHEMA_COMMAND:
        return _print_schema()

    config = config_from_args(args)
    init_logging(config.otlp_endpoint, config.otlp_service_name, config.json_output)
    init_sentry()
    env = load_environment_context(environ)
    try:
        asyncio.run(run_bootstrap(config, env))
    except BootstrapError as exc:
        logger.error("%s", exc, extra={"error_category": classify_error(exc)})
        capture_error(exc, backend=config.backend)
        return 1
    except KeyboardInterrupt:
        logger.info("interrupted")
    finally:
        shutdown_otel()
        shutdown_sentry()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
