"""Tokenizer resolution outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from tokenizers import Tokenizer


@dataclass(frozen=True, slots=True)
class FastTokenizer:
    """A directly loadable tokenizer, deserialized from ``tokenizer.json``."""

    tokenizer: Tokenizer = field(repr=False)
    path: Path


@dataclass(frozen=True, slots=True)
class ExternalTokenizer:
    """A tokenizer left for an out-of-process component to resolve."""

    tokenizer_name: str
    revision: str | None = None
    trust_remote_code: bool = False


ResolvedTokenizer = FastTokenizer | ExternalTokenizer


__all__ = ["FastTokenizer", "ExternalTokenizer", "ResolvedTokenizer"]
