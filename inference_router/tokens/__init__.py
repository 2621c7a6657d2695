"""Tokenizer resolution: strategy chain and resolver."""

from .resolver import resolve_tokenizer
from .strategies import (
    DEFAULT_STRATEGIES,
    ResolutionContext,
    TokenizerStrategy,
    LegacyConfigStrategy,
    TransformersStrategy,
    resolve_with_transformers,
)

__all__ = [
    "DEFAULT_STRATEGIES",
    "LegacyConfigStrategy",
    "ResolutionContext",
    "TokenizerStrategy",
    "TransformersStrategy",
    "resolve_tokenizer",
    "resolve_with_transformers",
]
