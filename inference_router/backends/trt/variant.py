"""TensorRT-LLM backend variant.

Capacity is static: the limits come from the config (with 1024/2048 input
and total defaults) and prefill chunking is never supported. A directly
loadable tokenizer and an executor worker on disk are required.
"""

from __future__ import annotations

import dataclasses

from ...state import FastTokenizer, ServingConfig, ResolvedTokenizer, CapacityDescriptor
from ...helpers.validation import Precondition, executor_worker_exists
from ...config.limits import DEFAULT_STATIC_MAX_INPUT_TOKENS, DEFAULT_STATIC_MAX_TOTAL_TOKENS
from ...config.backends import BACKEND_TRTLLM
from ..base import Backend, BackendVariant
from .backend import TrtLlmBackend


class TrtLlmVariant(BackendVariant):
    name = BACKEND_TRTLLM
    reports_capacity = False
    requires_fast_tokenizer = True

    def prepare_config(self, config: ServingConfig) -> ServingConfig:
        return dataclasses.replace(
            config,
            max_input_tokens=(
                config.max_input_tokens
                if config.max_input_tokens is not None
                else DEFAULT_STATIC_MAX_INPUT_TOKENS
            ),
            max_total_tokens=(
                config.max_total_tokens
                if config.max_total_tokens is not None
                else DEFAULT_STATIC_MAX_TOTAL_TOKENS
            ),
        )

    def preconditions(self) -> tuple[Precondition, ...]:
        return (executor_worker_exists,)

    async def connect(
        self,
        config: ServingConfig,
        tokenizer: ResolvedTokenizer | None = None,
    ) -> tuple[Backend, CapacityDescriptor]:
        if not isinstance(tokenizer, FastTokenizer):
            raise ValueError("Failed to retrieve Rust based tokenizer")
        if config.executor_worker is None:
            raise ValueError("`executor_worker` is required for this backend")
        config = self.prepare_config(config)

        backend = TrtLlmBackend(
            tokenizer,
            config.model_id,
            config.executor_worker,
            config.max_concurrent_requests,
        )
        await backend.start()
        capacity = CapacityDescriptor(
            max_input_tokens=config.max_input_tokens,
            max_total_tokens=config.max_total_tokens,
            max_batch_total_tokens=config.max_batch_total_tokens,
            support_chunking=False,
        )
        return backend, capacity


__all__ = ["TrtLlmVariant"]
