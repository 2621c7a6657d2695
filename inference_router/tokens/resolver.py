"""Tokenizer resolver.

Runs the strategy chain for a tokenizer identifier and turns whatever it
leaves behind into a ResolvedTokenizer:

    locate -> fetch metadata -> strategies (in order, first success wins)
        -> load tokenizer.json if present -> FastTokenizer
        -> otherwise                       -> ExternalTokenizer

Only an unusable identifier is fatal. A failed strategy is logged and the
next one is tried.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from collections.abc import Sequence

from huggingface_hub.utils import HFValidationError, validate_repo_id

from ..errors import ResourceResolutionError
from ..hub import LocalPath, fetch_metadata, locate
from ..state import ExternalTokenizer, FastTokenizer, ResolvedTokenizer, EnvironmentContext
from ..config.hub import TOKENIZER_JSON_FILE
from .strategies import DEFAULT_STRATEGIES, ResolutionContext, TokenizerStrategy

logger = logging.getLogger(__name__)


def _require_identifier(tokenizer_name: str) -> str:
    identifier = (tokenizer_name or "").strip()
    if not identifier:
        raise ResourceResolutionError("tokenizer identifier is empty")
    return identifier


def _clear_stale_artifact(artifact: Path) -> None:
    try:
        artifact.unlink()
    except FileNotFoundError:
        return
    except OSError as exc:
        raise ResourceResolutionError(f"cannot clear stale tokenizer artifact {artifact}: {exc}") from exc
    logger.debug("tokenizer: removed stale artifact %s", artifact)


def _load_fast_tokenizer(artifact: Path):
    if not artifact.is_file():
        return None
    from tokenizers import Tokenizer  # noqa: PLC0415

    try:
        return Tokenizer.from_file(str(artifact))
    except Exception as exc:  # noqa: BLE001 - unreadable artifact selects the external path
        logger.warning("tokenizer: could not load %s: %s", artifact, exc)
        return None


def _select_external(identifier: str, revision: str | None, is_local: bool) -> ExternalTokenizer:
    if not is_local:
        try:
            validate_repo_id(identifier)
        except HFValidationError as exc:
            raise ResourceResolutionError(f"unusable tokenizer identifier {identifier!r}: {exc}") from exc
    return ExternalTokenizer(identifier, revision, trust_remote_code=False)


async def _run_strategies(strategies: Sequence[TokenizerStrategy], context: ResolutionContext) -> bool:
    for strategy in strategies:
        if await strategy.attempt(context):
            logger.info("tokenizer: %s strategy succeeded", strategy.name)
            return True
        logger.warning("tokenizer: %s strategy failed", strategy.name)
    return False


async def resolve_tokenizer(
    tokenizer_name: str,
    revision: str | None,
    env: EnvironmentContext,
    *,
    strategies: Sequence[TokenizerStrategy] = DEFAULT_STRATEGIES,
) -> ResolvedTokenizer:
    """Resolve ``tokenizer_name`` to a fast or external tokenizer.

    Args:
        tokenizer_name: Local directory or hub repo id.
        revision: Optional hub revision.
        env: Environment captured at process start.
        strategies: Ordered strategy chain; defaults to transformers then
            legacy-config.

    Returns:
        FastTokenizer when a ``tokenizer.json`` was produced and loads,
        otherwise ExternalTokenizer.

    Raises:
        ResourceResolutionError: The identifier is empty or not a usable
            repo id.
    """
    identifier = _require_identifier(tokenizer_name)
    location = locate(identifier, revision, env)
    metadata = await fetch_metadata(location)

    artifact = env.tokenizer_output_dir / TOKENIZER_JSON_FILE
    _clear_stale_artifact(artifact)

    context = ResolutionContext(identifier, revision, metadata, env)
    if not await _run_strategies(strategies, context):
        logger.warning("tokenizer: every strategy failed for %s", identifier)

    tokenizer = await asyncio.to_thread(_load_fast_tokenizer, artifact)
    if tokenizer is not None:
        return FastTokenizer(tokenizer, artifact)

    logger.warning("Could not find a fast tokenizer implementation for %s", identifier)
    return _select_external(identifier, revision, isinstance(location, LocalPath))


__all__ = ["resolve_tokenizer"]
