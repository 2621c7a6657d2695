"""Resource locations a tokenizer can be fetched from.

Each location implements the same ``fetch(file_name)`` capability, so the
resolver never needs to know which one it was handed:

- LocalPath: a ready local directory; no network is ever consulted.
- CachedRepo: the content-addressed hub cache only (offline mode).
- RemoteRepo: the hub API, downloading into the cache as needed.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from huggingface_hub import HfApi, try_to_load_from_cache

logger = logging.getLogger(__name__)


class ResourceLocation(ABC):
    """Where tokenizer and descriptor files are fetched from."""

    __slots__ = ()

    kind: ClassVar[str]

    @abstractmethod
    async def fetch(self, file_name: str) -> Path | None:
        """Return a local path to ``file_name``, or None when unavailable."""

    async def model_info(self) -> Any | None:
        """Return hub model info when the location can provide it."""
        return None


@dataclass(frozen=True, slots=True)
class LocalPath(ResourceLocation):
    path: Path

    kind: ClassVar[str] = "local"

    async def fetch(self, file_name: str) -> Path | None:
        candidate = self.path / file_name
        if candidate.is_file():
            return candidate
        return None


@dataclass(frozen=True, slots=True)
class CachedRepo(ResourceLocation):
    repo_id: str
    revision: str
    cache_dir: Path | None = None

    kind: ClassVar[str] = "cache"

    def _lookup(self, file_name: str) -> Path | None:
        try:
            cached = try_to_load_from_cache(
                self.repo_id,
                file_name,
                cache_dir=self.cache_dir,
                revision=self.revision,
            )
        except Exception as exc:  # noqa: BLE001 - best effort, absence is recorded
            logger.debug("hub: cache lookup failed for %s in %s: %s", file_name, self.repo_id, exc)
            return None
        # Non-str results are "not cached" or the cached-nonexistence sentinel
        if isinstance(cached, str):
            return Path(cached)
        return None

    async def fetch(self, file_name: str) -> Path | None:
        return await asyncio.to_thread(self._lookup, file_name)


@dataclass(frozen=True, slots=True)
class RemoteRepo(ResourceLocation):
    repo_id: str
    revision: str
    api: HfApi = field(repr=False, compare=False)
    cache_dir: Path | None = None

    kind: ClassVar[str] = "remote"

    def _download(self, file_name: str) -> Path | None:
        try:
            return Path(
                self.api.hf_hub_download(
                    repo_id=self.repo_id,
                    filename=file_name,
                    revision=self.revision,
                    cache_dir=self.cache_dir,
                )
            )
        except Exception as exc:  # noqa: BLE001 - best effort, absence is recorded
            logger.debug("hub: %s unavailable in %s@%s: %s", file_name, self.repo_id, self.revision, exc)
            return None

    def _model_info(self) -> Any | None:
        try:
            return self.api.model_info(self.repo_id, revision=self.revision)
        except Exception as exc:  # noqa: BLE001 - best effort
            logger.debug("hub: model info unavailable for %s: %s", self.repo_id, exc)
            return None

    async def fetch(self, file_name: str) -> Path | None:
        return await asyncio.to_thread(self._download, file_name)

    async def model_info(self) -> Any | None:
        return await asyncio.to_thread(self._model_info)


__all__ = [
    "ResourceLocation",
    "LocalPath",
    "CachedRepo",
    "RemoteRepo",
]
