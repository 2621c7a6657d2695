"""Bootstrap orchestration.

Stages run in a fixed order, cheapest first, so bad input is rejected
before any network, tokenizer or backend work:

1. validate: variant defaults, then argument validation pass 1
2. negotiate: capacity-reporting variants connect and re-validate
3. tokenizer: resolve; fatal when the variant needs a fast tokenizer and
   only an external one is available
4. connect: static-capacity variants connect with the tokenizer
5. serve: hand the backend to the server and block until it returns

Any BootstrapError aborts the sequence. A connected backend is always shut
down on the way out.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..errors import BootstrapError, ServerFailureError, ResourceResolutionError
from ..tokens import resolve_tokenizer
from ..helpers.validation import validate_arguments
from ..state import FastTokenizer, ServingConfig, ResolvedTokenizer, EnvironmentContext
from ..telemetry import stage_span
from ..backends import Backend, BackendVariant, get_variant
from .negotiation import connect_backend, negotiate_capacity

logger = logging.getLogger(__name__)

ServerRunner = Callable[[Backend, ServingConfig, ResolvedTokenizer], Awaitable[None]]
TokenizerResolver = Callable[[str, str | None, EnvironmentContext], Awaitable[ResolvedTokenizer]]


def _default_server_runner() -> ServerRunner:
    from ..server.run import run_server  # noqa: PLC0415

    return run_server


async def _resolve(
    variant: BackendVariant,
    config: ServingConfig,
    env: EnvironmentContext,
    resolver: TokenizerResolver,
) -> ResolvedTokenizer:
    tokenizer = await resolver(config.tokenizer_name, config.revision, env)
    if isinstance(tokenizer, FastTokenizer):
        logger.info("Successfully retrieved tokenizer %s", config.tokenizer_name)
    elif variant.requires_fast_tokenizer:
        raise ResourceResolutionError("Failed to retrieve Rust based tokenizer")
    else:
        logger.info("Tokenizer %s will be resolved externally", config.tokenizer_name)
    return tokenizer


async def _serve(runner: ServerRunner, backend: Backend, config: ServingConfig, tokenizer: ResolvedTokenizer) -> None:
    try:
        await runner(backend, config, tokenizer)
    except BootstrapError:
        raise
    except Exception as exc:
        raise ServerFailureError(str(exc) or type(exc).__name__) from exc


def validate_for_variant(variant: BackendVariant, config: ServingConfig) -> ServingConfig:
    """Apply variant defaults and run validation pass 1."""
    config = variant.prepare_config(config)
    validate_arguments(
        config,
        support_chunking=variant.support_chunking,
        preconditions=variant.preconditions(),
    )
    return config


async def run_bootstrap(
    config: ServingConfig,
    env: EnvironmentContext,
    *,
    variant: BackendVariant | None = None,
    server_runner: ServerRunner | None = None,
    resolver: TokenizerResolver = resolve_tokenizer,
) -> None:
    """Validate, size, resolve, connect and serve.

    Args:
        config: Parsed operator configuration.
        env: Environment captured at process start.
        variant: Backend variant; looked up from ``config.backend`` if None.
        server_runner: Server-run contract; defaults to the FastAPI server.
        resolver: Tokenizer resolver.

    Raises:
        BootstrapError: Any fatal bootstrap failure.
    """
    variant = variant or get_variant(config.backend)
    runner = server_runner or _default_server_runner()

    with stage_span("validate", backend=variant.name):
        config = validate_for_variant(variant, config)

    backend: Backend | None = None
    try:
        if variant.reports_capacity:
            with stage_span("negotiate", backend=variant.name):
                backend, _capacity, config = await negotiate_capacity(variant, config)

        with stage_span("tokenizer", tokenizer=config.tokenizer_name, revision=config.revision):
            tokenizer = await _resolve(variant, config, env, resolver)

        if backend is None:
            with stage_span("connect", backend=variant.name):
                backend, _capacity = await connect_backend(variant, config, tokenizer)
        logger.info("Successfully created backend")

        with stage_span("serve", hostname=config.hostname, port=config.port):
            await _serve(runner, backend, config, tokenizer)
    finally:
        if backend is not None:
            await backend.shutdown()


__all__ = ["ServerRunner", "run_bootstrap", "validate_for_variant"]
