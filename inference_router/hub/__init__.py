"""Hub resource location and metadata fetches."""

from .metadata import fetch_metadata
from .locator import locate, build_hub_api
from .locations import CachedRepo, LocalPath, RemoteRepo, ResourceLocation

__all__ = [
    "CachedRepo",
    "LocalPath",
    "RemoteRepo",
    "ResourceLocation",
    "build_hub_api",
    "fetch_metadata",
    "locate",
]
