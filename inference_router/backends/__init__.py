"""Serving backends: variant contracts, registry and implementations.

- base.py: Backend and BackendVariant contracts
- registry.py: variant lookup by name
- v3/: shards reached over a unix socket, capacity reported at warmup
- trt/: TensorRT-LLM executor worker, static capacity
"""

from .base import Backend, BackendVariant
from .registry import get_variant

__all__ = ["Backend", "BackendVariant", "get_variant"]
