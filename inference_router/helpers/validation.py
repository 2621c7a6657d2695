"""Serving argument validation.

Rules are evaluated in a fixed order and the first failure is reported, so
the same bad configuration always yields the same diagnostic:

1. ``validation_workers > 0``
2. ``max_batch_size > 0`` when set
3. ``max_input_tokens < max_total_tokens`` when both are known
4. ``max_input_tokens <= max_batch_prefill_tokens`` unless prefill chunking
   is supported (deferred while chunking support is unknown)
5. ``max_batch_prefill_tokens`` and ``max_total_tokens`` both fit in
   ``max_batch_total_tokens`` when it is known
6. backend-specific preconditions (e.g. executor worker on disk)

Everything here is pure: no network, no tokenizer, no backend.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..errors import ArgumentValidationError
from ..state import ServingConfig, CapacityDescriptor

Precondition = Callable[[ServingConfig], str | None]


def _check_workers(config: ServingConfig) -> None:
    if config.validation_workers <= 0:
        raise ArgumentValidationError(
            f"`validation_workers` must be > 0. Given: {config.validation_workers}"
        )


def _check_batch_size(config: ServingConfig) -> None:
    if config.max_batch_size is not None and config.max_batch_size <= 0:
        raise ArgumentValidationError(f"`max_batch_size` must be > 0. Given: {config.max_batch_size}")


def validate_limits(
    config: ServingConfig,
    *,
    capacity: CapacityDescriptor | None = None,
    support_chunking: bool | None = None,
) -> None:
    """Check the cross-field token limits (rules 3-5).

    Args:
        config: Operator configuration.
        capacity: Backend-reported limits; when given they supersede the
            config's input/total/batch-total values and chunking flag.
        support_chunking: Whether the backend chunks prefills. ``None`` means
            not yet known, which defers the prefill-vs-input rule.

    Raises:
        ArgumentValidationError: On the first violated rule.
    """
    max_input_tokens = config.max_input_tokens
    max_total_tokens = config.max_total_tokens
    max_batch_total_tokens = config.max_batch_total_tokens
    prefill = config.max_batch_prefill_tokens
    if capacity is not None:
        max_input_tokens = capacity.max_input_tokens
        max_total_tokens = capacity.max_total_tokens
        max_batch_total_tokens = capacity.max_batch_total_tokens
        support_chunking = capacity.support_chunking

    if max_input_tokens is not None and max_total_tokens is not None:
        if max_input_tokens >= max_total_tokens:
            raise ArgumentValidationError(
                "`max_input_tokens` must be < `max_total_tokens`. "
                f"Given: {max_input_tokens} and {max_total_tokens}"
            )

    if max_input_tokens is not None and support_chunking is False and max_input_tokens > prefill:
        raise ArgumentValidationError(
            "`max_batch_prefill_tokens` must be >= `max_input_tokens`. "
            f"Given: {prefill} and {max_input_tokens}"
        )

    if max_batch_total_tokens is not None:
        if prefill > max_batch_total_tokens:
            raise ArgumentValidationError(
                "`max_batch_prefill_tokens` must be <= `max_batch_total_tokens`. "
                f"Given: {prefill} and {max_batch_total_tokens}"
            )
        if max_total_tokens is not None and max_total_tokens > max_batch_total_tokens:
            raise ArgumentValidationError(
                "`max_total_tokens` must be <= `max_batch_total_tokens`. "
                f"Given: {max_total_tokens} and {max_batch_total_tokens}"
            )


def validate_arguments(
    config: ServingConfig,
    *,
    capacity: CapacityDescriptor | None = None,
    support_chunking: bool | None = None,
    preconditions: Iterable[Precondition] = (),
) -> None:
    """Run every rule over a parsed configuration.

    Without ``capacity`` this is the first pass; with it, the token limits
    are checked against the backend-reported values.

    Raises:
        ArgumentValidationError: On the first violated rule.
    """
    _check_workers(config)
    _check_batch_size(config)
    validate_limits(config, capacity=capacity, support_chunking=support_chunking)
    for precondition in preconditions:
        message = precondition(config)
        if message:
            raise ArgumentValidationError(message)


def executor_worker_exists(config: ServingConfig) -> str | None:
    """Precondition: the executor worker binary must exist on disk."""
    worker = config.executor_worker
    if worker is None:
        return "`executor_worker` is required for this backend"
    if not worker.exists():
        return f"`executor_worker` specified path doesn't exist: {worker}"
    return None


__all__ = [
    "Precondition",
    "validate_limits",
    "validate_arguments",
    "executor_worker_exists",
]
