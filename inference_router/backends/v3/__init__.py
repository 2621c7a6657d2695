"""v3 shard backend."""

from .client import ShardClient
from .variant import V3Backend, V3Variant, derive_capacity

__all__ = ["ShardClient", "V3Backend", "V3Variant", "derive_capacity"]
