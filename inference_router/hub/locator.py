"""Resource location policy.

Decides, from a tokenizer identifier, an optional revision and the captured
environment, which source tokenizer files come from:

1. No revision and the identifier is an existing directory -> LocalPath
2. Otherwise, offline mode -> CachedRepo (never the network)
3. Otherwise -> RemoteRepo backed by an authenticated hub client

The decision depends only on its inputs and the filesystem, so repeated
calls with the same arguments choose the same variant.
"""

from __future__ import annotations

import logging
from pathlib import Path

from huggingface_hub import HfApi, constants
from huggingface_hub.utils import disable_progress_bars

from .. import __version__
from ..state import EnvironmentContext
from ..config.hub import DEFAULT_REVISION, HUB_LIBRARY_NAME
from .locations import CachedRepo, LocalPath, RemoteRepo, ResourceLocation

logger = logging.getLogger(__name__)


def _needs_hub(identifier: str, revision: str | None) -> bool:
    if revision is not None:
        return True
    try:
        return not Path(identifier).is_dir()
    except OSError:
        return True


def build_hub_api(env: EnvironmentContext) -> HfApi:
    """Build a hub API client from the captured environment.

    Progress bars are disabled: bootstrap output must stay log-friendly.
    """
    disable_progress_bars()
    user_agent = {"origin": env.user_agent_origin} if env.user_agent_origin else None
    return HfApi(
        token=env.hub_token,
        library_name=HUB_LIBRARY_NAME,
        library_version=__version__,
        user_agent=user_agent,
    )


def locate(identifier: str, revision: str | None, env: EnvironmentContext) -> ResourceLocation:
    """Choose the resource location for ``identifier``.

    Args:
        identifier: Local directory or hub repo id.
        revision: Explicit hub revision; its presence forces hub resolution.
        env: Environment captured at process start.

    Returns:
        The ResourceLocation variant to fetch files from.
    """
    if not _needs_hub(identifier, revision):
        logger.info("hub: using local tokenizer directory %s", identifier)
        return LocalPath(Path(identifier))

    resolved_revision = revision or DEFAULT_REVISION
    if env.offline:
        cache_dir = env.cache_dir or Path(constants.HF_HUB_CACHE)
        logger.warning("Offline mode active using cache defaults (cache_dir=%s)", cache_dir)
        return CachedRepo(identifier, resolved_revision, cache_dir)

    logger.info("Using the Hugging Face API")
    return RemoteRepo(identifier, resolved_revision, build_hub_api(env), env.cache_dir)


__all__ = ["build_hub_api", "locate"]
