"""JSON client for a v3 shard listening on a unix domain socket."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ...state import ShardInfo, WarmupResult
from ...config.backends import (
    SHARD_BASE_URL,
    SHARD_INFO_ROUTE,
    SHARD_HEALTH_ROUTE,
    SHARD_WARMUP_ROUTE,
    SHARD_CLEAR_CACHE_ROUTE,
    SHARD_REQUEST_TIMEOUT_S,
)

logger = logging.getLogger(__name__)


def _optional_int(payload: dict[str, Any], key: str) -> int | None:
    value = payload.get(key)
    return None if value is None else int(value)


def _parse_info(payload: dict[str, Any]) -> ShardInfo:
    return ShardInfo(
        requires_padding=bool(payload.get("requires_padding", False)),
        dtype=str(payload.get("dtype", "")),
        device_type=str(payload.get("device_type", "")),
        window_size=_optional_int(payload, "window_size"),
        speculate=int(payload.get("speculate", 0)),
        support_chunking=bool(payload.get("support_chunking", False)),
        use_prefix_caching=bool(payload.get("use_prefix_caching", False)),
        attention_impl=str(payload.get("attention_impl", "")),
        block_size=int(payload.get("block_size", 1)),
    )


class ShardClient:
    """Async client for the master shard.

    Args:
        uds_path: Unix socket the master shard listens on.
        timeout: Per-request timeout in seconds.
        transport: Override the socket transport (tests pass a MockTransport).
    """

    def __init__(
        self,
        uds_path: str,
        *,
        timeout: float = SHARD_REQUEST_TIMEOUT_S,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.uds_path = uds_path
        self._client = httpx.AsyncClient(
            transport=transport or httpx.AsyncHTTPTransport(uds=uds_path),
            base_url=SHARD_BASE_URL,
            timeout=timeout,
        )

    async def _request(self, method: str, route: str, json_body: dict[str, Any] | None = None) -> Any:
        response = await self._client.request(method, route, json=json_body)
        response.raise_for_status()
        if not response.content:
            return None
        return response.json()

    async def info(self) -> ShardInfo:
        payload = await self._request("GET", SHARD_INFO_ROUTE)
        return _parse_info(payload or {})

    async def clear_cache(self) -> None:
        await self._request("POST", SHARD_CLEAR_CACHE_ROUTE)

    async def warmup(
        self,
        *,
        max_input_tokens: int | None,
        max_prefill_tokens: int,
        max_total_tokens: int | None,
        max_batch_size: int | None,
    ) -> WarmupResult:
        """Warm the shard up with the requested limits.

        The shard answers with what it settled on; any value it leaves
        undecided comes back as None.
        """
        payload = await self._request(
            "POST",
            SHARD_WARMUP_ROUTE,
            {
                "max_input_tokens": max_input_tokens,
                "max_prefill_tokens": max_prefill_tokens,
                "max_total_tokens": max_total_tokens,
                "max_batch_size": max_batch_size,
            },
        )
        payload = payload or {}
        return WarmupResult(
            max_supported_total_tokens=_optional_int(payload, "max_supported_total_tokens"),
            max_input_tokens=_optional_int(payload, "max_input_tokens"),
            max_total_tokens=_optional_int(payload, "max_total_tokens"),
        )

    async def health(self) -> bool:
        try:
            await self._request("GET", SHARD_HEALTH_ROUTE)
        except httpx.HTTPError as exc:
            logger.warning("shard health check failed on %s: %s", self.uds_path, exc)
            return False
        return True

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["ShardClient"]
