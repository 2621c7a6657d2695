"""v3 backend: shards reached over a unix socket.

Connecting runs the shard handshake (info, clear cache, warmup). The shard
decides the effective limits:

- max_total_tokens: shard value, else requested, else 4096
- max_input_tokens: shard value, else requested, else total - 1
- max_batch_total_tokens: shard-supported value; a larger requested value is
  ignored with a warning. Without a shard value, the requested value or
  max(16000, total).
"""

from __future__ import annotations

import logging
from typing import Any

from ...state import ShardInfo, WarmupResult, ServingConfig, ResolvedTokenizer, CapacityDescriptor
from ...config.backends import BACKEND_V3, V3_FALLBACK_MAX_TOTAL_TOKENS, V3_FALLBACK_MIN_BATCH_TOTAL_TOKENS
from ..base import Backend, BackendVariant
from .client import ShardClient

logger = logging.getLogger(__name__)


class V3Backend(Backend):
    """Connected v3 shard handle."""

    name = BACKEND_V3

    def __init__(self, client: ShardClient, shard_info: ShardInfo, config: ServingConfig) -> None:
        self._client = client
        self.shard_info = shard_info
        self.waiting_served_ratio = config.waiting_served_ratio
        self.max_waiting_tokens = config.max_waiting_tokens
        self.max_batch_size = config.max_batch_size

    async def health(self) -> bool:
        return await self._client.health()

    async def shutdown(self) -> None:
        await self._client.close()
        logger.info("v3: shard client closed")

    def describe(self) -> dict[str, Any]:
        return {
            "backend": self.name,
            "dtype": self.shard_info.dtype,
            "device_type": self.shard_info.device_type,
            "support_chunking": self.shard_info.support_chunking,
            "use_prefix_caching": self.shard_info.use_prefix_caching,
            "attention_impl": self.shard_info.attention_impl,
            "block_size": self.shard_info.block_size,
            "speculate": self.shard_info.speculate,
            "waiting_served_ratio": self.waiting_served_ratio,
            "max_waiting_tokens": self.max_waiting_tokens,
        }


def _resolve_batch_total(requested: int | None, supported: int | None, max_total_tokens: int) -> int:
    if supported is None:
        return requested if requested is not None else max(V3_FALLBACK_MIN_BATCH_TOTAL_TOKENS, max_total_tokens)
    if requested is not None and requested > supported:
        logger.warning(
            "`max_batch_total_tokens` %d exceeds what the shard supports; using %d",
            requested,
            supported,
        )
        return supported
    return requested if requested is not None else supported


def derive_capacity(config: ServingConfig, warmup: WarmupResult, shard_info: ShardInfo) -> CapacityDescriptor:
    """Combine the requested limits with what the shard settled on."""
    max_total_tokens = warmup.max_total_tokens or config.max_total_tokens or V3_FALLBACK_MAX_TOTAL_TOKENS
    max_input_tokens = warmup.max_input_tokens or config.max_input_tokens or max_total_tokens - 1
    return CapacityDescriptor(
        max_input_tokens=max_input_tokens,
        max_total_tokens=max_total_tokens,
        max_batch_total_tokens=_resolve_batch_total(
            config.max_batch_total_tokens,
            warmup.max_supported_total_tokens,
            max_total_tokens,
        ),
        support_chunking=shard_info.support_chunking,
    )


class V3Variant(BackendVariant):
    name = BACKEND_V3
    reports_capacity = True
    requires_fast_tokenizer = False

    def build_client(self, config: ServingConfig) -> ShardClient:
        return ShardClient(config.master_shard_uds_path)

    async def connect(
        self,
        config: ServingConfig,
        tokenizer: ResolvedTokenizer | None = None,
    ) -> tuple[Backend, CapacityDescriptor]:
        client = self.build_client(config)
        try:
            shard_info = await client.info()
            logger.info(
                "v3: connected to shard at %s (dtype=%s, chunking=%s, prefix_caching=%s)",
                config.master_shard_uds_path,
                shard_info.dtype,
                shard_info.support_chunking,
                shard_info.use_prefix_caching,
            )
            await client.clear_cache()
            warmup = await client.warmup(
                max_input_tokens=config.max_input_tokens,
                max_prefill_tokens=config.max_batch_prefill_tokens,
                max_total_tokens=config.max_total_tokens,
                max_batch_size=config.max_batch_size,
            )
        except BaseException:
            await client.close()
            raise
        capacity = derive_capacity(config, warmup, shard_info)
        return V3Backend(client, shard_info, config), capacity


__all__ = ["V3Backend", "V3Variant", "derive_capacity"]
