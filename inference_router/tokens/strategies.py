"""Tokenizer resolution strategies.

Strategies are tried in order by the resolver, strictly one after another.
Each one tries to leave a serialized ``tokenizer.json`` in the output
directory and reports whether it succeeded; none of them raise.

1. TransformersStrategy: the richer path. Builds the tokenizer with
   transformers' AutoTokenizer and saves it, which materializes
   ``tokenizer.json`` for every fast-capable tokenizer family.
2. LegacyConfigStrategy: the narrow path. Reads only the fetched
   ``config.json`` to handle checkpoints that carry no tokenizer of their own
   (adapters pointing at a base model, legacy state-space models).
"""

from __future__ import annotations

import json
import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..state import HubMetadata, EnvironmentContext
from ..config.hub import DEFAULT_REVISION, LEGACY_SSM_TOKENIZER

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolutionContext:
    """Inputs shared by every strategy attempt."""

    tokenizer_name: str
    revision: str | None
    metadata: HubMetadata
    env: EnvironmentContext

    @property
    def output_dir(self) -> Path:
        return self.env.tokenizer_output_dir


def _save_pretrained_tokenizer(
    identifier: str,
    revision: str | None,
    env: EnvironmentContext,
) -> None:
    try:
        from transformers import AutoTokenizer  # noqa: PLC0415
    except Exception as exc:  # pragma: no cover - depends on the environment
        raise RuntimeError(f"Transformers is required for tokenizer resolution: {exc}") from exc

    tokenizer = AutoTokenizer.from_pretrained(
        identifier,
        revision=revision,
        trust_remote_code=False,
        token=env.hub_token,
        cache_dir=env.cache_dir,
        local_files_only=env.offline,
    )
    tokenizer.save_pretrained(str(env.tokenizer_output_dir))


def _read_model_config(path: Path | None) -> dict[str, Any] | None:
    if path is None:
        return None
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    return payload if isinstance(payload, dict) else None


async def resolve_with_transformers(
    identifier: str,
    revision: str | None,
    env: EnvironmentContext,
) -> bool:
    """Materialize ``identifier``'s tokenizer into the output dir.

    Returns:
        True on success, False if transformers failed for any reason.
    """
    try:
        await asyncio.to_thread(_save_pretrained_tokenizer, identifier, revision, env)
    except Exception as exc:  # noqa: BLE001 - a failed tier falls through to the next one
        logger.error("Failed to import python tokenizer %s: %s", identifier, exc)
        return False
    logger.info("tokenizer: saved %s (revision=%s) to %s", identifier, revision, env.tokenizer_output_dir)
    return True


class TokenizerStrategy(ABC):
    """One tier of the tokenizer fallback chain."""

    name: str = "strategy"

    @abstractmethod
    async def attempt(self, context: ResolutionContext) -> bool:
        """Try to produce ``tokenizer.json`` in the output dir."""


class TransformersStrategy(TokenizerStrategy):
    name = "transformers"

    async def attempt(self, context: ResolutionContext) -> bool:
        return await resolve_with_transformers(context.tokenizer_name, context.revision, context.env)


class LegacyConfigStrategy(TokenizerStrategy):
    name = "legacy-config"

    async def attempt(self, context: ResolutionContext) -> bool:
        config = _read_model_config(context.metadata.config_path)
        if config is None:
            return False

        logger.warning("Odd tokenizer detected, falling back on legacy tokenization")
        resolved = False
        base_model = config.get("base_model_name_or_path")
        if config.get("model_type") is None and base_model:
            if not await resolve_with_transformers(str(base_model), DEFAULT_REVISION, context.env):
                return False
            resolved = True
        if config.get("ssm_config") is not None:
            if not await resolve_with_transformers(LEGACY_SSM_TOKENIZER, DEFAULT_REVISION, context.env):
                return False
            resolved = True
        return resolved


DEFAULT_STRATEGIES: tuple[TokenizerStrategy, ...] = (
    TransformersStrategy(),
    LegacyConfigStrategy(),
)


__all__ = [
    "DEFAULT_STRATEGIES",
    "LegacyConfigStrategy",
    "ResolutionContext",
    "TokenizerStrategy",
    "TransformersStrategy",
    "resolve_with_transformers",
]
