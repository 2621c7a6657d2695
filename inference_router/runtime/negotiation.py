"""Capacity negotiation with backends that report their limits.

The backend is the authority: its reported limits replace whatever the
operator left unset (or set), and the cross-field limit rules are re-run
against them with the backend's chunking flag.
"""

from __future__ import annotations

import logging
import dataclasses

from ..errors import BootstrapError, BackendConnectionError
from ..helpers.validation import validate_limits
from ..state import ServingConfig, ResolvedTokenizer, CapacityDescriptor
from ..backends.base import Backend, BackendVariant

logger = logging.getLogger(__name__)


def _log_defaulted_limits(config: ServingConfig, capacity: CapacityDescriptor) -> None:
    if config.max_input_tokens is None:
        logger.info("Maximum input tokens defaulted to %d", capacity.max_input_tokens)
    if config.max_total_tokens is None:
        logger.info("Maximum total tokens defaulted to %d", capacity.max_total_tokens)


def apply_capacity(config: ServingConfig, capacity: CapacityDescriptor) -> ServingConfig:
    """Return ``config`` with the backend's authoritative limits."""
    return dataclasses.replace(
        config,
        max_input_tokens=capacity.max_input_tokens,
        max_total_tokens=capacity.max_total_tokens,
        max_batch_total_tokens=capacity.max_batch_total_tokens,
    )


async def connect_backend(
    variant: BackendVariant,
    config: ServingConfig,
    tokenizer: ResolvedTokenizer | None = None,
) -> tuple[Backend, CapacityDescriptor]:
    """Connect ``variant``, surfacing any failure as BackendConnectionError."""
    try:
        return await variant.connect(config, tokenizer)
    except BootstrapError:
        raise
    except Exception as exc:
        raise BackendConnectionError(str(exc) or type(exc).__name__) from exc


async def negotiate_capacity(
    variant: BackendVariant,
    config: ServingConfig,
    tokenizer: ResolvedTokenizer | None = None,
) -> tuple[Backend, CapacityDescriptor, ServingConfig]:
    """Connect a capacity-reporting backend and validate against its limits.

    Returns:
        The connected backend, its capacity, and the config with the
        authoritative limits applied.

    Raises:
        BackendConnectionError: The handshake failed. Not retried.
        ArgumentValidationError: The authoritative limits are inconsistent
            with the operator's prefill settings.
    """
    backend, capacity = await connect_backend(variant, config, tokenizer)
    _log_defaulted_limits(config, capacity)
    try:
        validate_limits(config, capacity=capacity)
    except BootstrapError:
        await backend.shutdown()
        raise
    return backend, capacity, apply_capacity(config, capacity)


__all__ = ["apply_capacity", "connect_backend", "negotiate_capacity"]
