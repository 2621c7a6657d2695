"""Environment helper utilities.

Provides functions for parsing environment variables and capturing the hub
environment once at process start.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from ..state import EnvironmentContext
from ..config.hub import (
    HUB_CACHE_ENV_VAR,
    HUB_TOKEN_ENV_VARS,
    HUB_OFFLINE_ENV_VAR,
    DEFAULT_TOKENIZER_OUTPUT_DIR,
    TOKENIZER_OUTPUT_DIR_ENV_VAR,
    HUB_USER_AGENT_ORIGIN_ENV_VAR,
)

_TRUTHY = {"1", "true", "yes", "on"}


def _first_set(environ: Mapping[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


def env_flag(name: str, default: bool, environ: Mapping[str, str] | None = None) -> bool:
    """Return True/False for typical truthy env encodings."""
    value = (os.environ if environ is None else environ).get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def load_environment_context(environ: Mapping[str, str] | None = None) -> EnvironmentContext:
    """Capture the hub-related environment into an immutable context.

    The hub token is taken from the first non-empty variable in
    ``HUB_TOKEN_ENV_VARS``. Offline mode follows the hub client's own
    convention: only ``HF_HUB_OFFLINE=1`` disables network access.
    """
    env = os.environ if environ is None else environ
    cache_dir = env.get(HUB_CACHE_ENV_VAR)
    output_dir = env.get(TOKENIZER_OUTPUT_DIR_ENV_VAR) or DEFAULT_TOKENIZER_OUTPUT_DIR
    return EnvironmentContext(
        hub_token=_first_set(env, HUB_TOKEN_ENV_VARS),
        cache_dir=Path(cache_dir) if cache_dir else None,
        user_agent_origin=env.get(HUB_USER_AGENT_ORIGIN_ENV_VAR) or None,
        offline=env.get(HUB_OFFLINE_ENV_VAR) == "1",
        tokenizer_output_dir=Path(output_dir),
    )


__all__ = [
    "env_flag",
    "load_environment_context",
]
