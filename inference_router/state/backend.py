"""Backend capacity and shard handshake dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CapacityDescriptor:
    """Authoritative serving limits reported by a connected backend.

    Supersedes any operator-supplied optional limit of the same name.
    """

    max_input_tokens: int
    max_total_tokens: int
    max_batch_total_tokens: int | None
    support_chunking: bool = False


@dataclass(frozen=True, slots=True)
class ShardInfo:
    """Static facts a v3 shard reports during the handshake."""

    requires_padding: bool = False
    dtype: str = ""
    device_type: str = ""
    window_size: int | None = None
    speculate: int = 0
    support_chunking: bool = False
    use_prefix_caching: bool = False
    attention_impl: str = ""
    block_size: int = 1


@dataclass(frozen=True, slots=True)
class WarmupResult:
    """Limits a shard settled on after warming up with the requested ones."""

    max_supported_total_tokens: int | None
    max_input_tokens: int | None
    max_total_tokens: int | None


__all__ = ["CapacityDescriptor", "ShardInfo", "WarmupResult"]
