"""Unit tests for capacity negotiation."""

from __future__ import annotations

import asyncio
import logging

import pytest

from inference_router.errors import BackendConnectionError, ArgumentValidationError
from inference_router.state import ServingConfig, CapacityDescriptor
from inference_router.backends import Backend, BackendVariant
from inference_router.runtime import apply_capacity, negotiate_capacity


class _Backend(Backend):
    name = "fake"

    def __init__(self) -> None:
        self.closed = False

    async def health(self) -> bool:
        return not self.closed

    async def shutdown(self) -> None:
        self.closed = True


class _Variant(BackendVariant):
    name = "fake"
    reports_capacity = True

    def __init__(self, capacity: CapacityDescriptor | None = None, error: Exception | None = None):
        self.capacity = capacity
        self.error = error
        self.backend = _Backend()

    async def connect(self, config, tokenizer=None):
        if self.error is not None:
            raise self.error
        return self.backend, self.capacity


def test_unset_limits_are_filled_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    capacity = CapacityDescriptor(1024, 2048, 4096, support_chunking=False)
    variant = _Variant(capacity)
    config = ServingConfig(tokenizer_name="org/model", max_batch_prefill_tokens=2048)
    with caplog.at_level(logging.INFO):
        backend, negotiated, updated = asyncio.run(negotiate_capacity(variant, config))
    assert backend is variant.backend
    assert negotiated == capacity
    assert (updated.max_input_tokens, updated.max_total_tokens, updated.max_batch_total_tokens) == (1024, 2048, 4096)
    assert "Maximum input tokens defaulted to 1024" in caplog.text
    assert "Maximum total tokens defaulted to 2048" in caplog.text


def test_operator_limits_are_not_reported_as_defaulted(caplog: pytest.LogCaptureFixture) -> None:
    capacity = CapacityDescriptor(1024, 2048, 4096)
    config = ServingConfig(tokenizer_name="org/model", max_input_tokens=1024, max_total_tokens=2048)
    with caplog.at_level(logging.INFO):
        asyncio.run(negotiate_capacity(_Variant(capacity), config))
    assert "defaulted" not in caplog.text


def test_connect_failure_is_backend_connection_error() -> None:
    variant = _Variant(error=ConnectionRefusedError("no shard at /tmp/sock"))
    with pytest.raises(BackendConnectionError, match="no shard"):
        asyncio.run(negotiate_capacity(variant, ServingConfig(tokenizer_name="org/model")))


def test_second_pass_rejects_and_closes_backend() -> None:
    capacity = CapacityDescriptor(8000, 8192, 16000, support_chunking=False)
    variant = _Variant(capacity)
    config = ServingConfig(tokenizer_name="org/model", max_batch_prefill_tokens=4096)
    with pytest.raises(ArgumentValidationError, match="max_batch_prefill_tokens"):
        asyncio.run(negotiate_capacity(variant, config))
    assert variant.backend.closed is True


def test_second_pass_allows_chunked_prefill() -> None:
    capacity = CapacityDescriptor(8000, 8192, 16000, support_chunking=True)
    config = ServingConfig(tokenizer_name="org/model", max_batch_prefill_tokens=4096)
    _, _, updated = asyncio.run(negotiate_capacity(_Variant(capacity), config))
    assert updated.max_input_tokens == 8000


def test_apply_capacity_returns_new_config() -> None:
    config = ServingConfig(tokenizer_name="org/model")
    updated = apply_capacity(config, CapacityDescriptor(10, 20, 30))
    assert config.max_input_tokens is None
    assert (updated.max_input_tokens, updated.max_total_tokens, updated.max_batch_total_tokens) == (10, 20, 30)
