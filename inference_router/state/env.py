"""Process environment snapshot threaded through hub resolution."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class EnvironmentContext:
    """Hub-related environment, captured once at process start.

    Attributes:
        hub_token: Bearer token for the hub API, if any.
        cache_dir: Custom hub cache root, if configured.
        user_agent_origin: Value for the ``origin`` user-agent tag, if any.
        offline: Whether all network access is disabled.
        tokenizer_output_dir: Where resolution strategies write tokenizer.json.
    """

    hub_token: str | None = None
    cache_dir: Path | None = None
    user_agent_origin: str | None = None
    offline: bool = False
    tokenizer_output_dir: Path = Path("out")


__all__ = ["EnvironmentContext"]
