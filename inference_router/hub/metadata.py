"""Best-effort fetch of auxiliary descriptor files."""

from __future__ import annotations

import logging

from ..state import HubMetadata
from ..config.hub import (
    CONFIG_FILE,
    METADATA_FILES,
    PROCESSOR_CONFIG_FILE,
    TOKENIZER_CONFIG_FILE,
    PREPROCESSOR_CONFIG_FILE,
)
from .locations import RemoteRepo, ResourceLocation

logger = logging.getLogger(__name__)


async def fetch_metadata(location: ResourceLocation) -> HubMetadata:
    """Fetch model/tokenizer/processor configs from ``location``.

    Each file is fetched independently and sequentially; a missing file is
    recorded as ``None`` and never raises. Hub model info is only requested
    from remote locations.
    """
    paths = {}
    for file_name in METADATA_FILES:
        paths[file_name] = await location.fetch(file_name)

    model_info = None
    if isinstance(location, RemoteRepo):
        model_info = await location.model_info()
        if model_info is None:
            logger.warning("Could not retrieve model info from the Hugging Face hub.")

    metadata = HubMetadata(
        config_path=paths[CONFIG_FILE],
        tokenizer_config_path=paths[TOKENIZER_CONFIG_FILE],
        preprocessor_config_path=paths[PREPROCESSOR_CONFIG_FILE],
        processor_config_path=paths[PROCESSOR_CONFIG_FILE],
        model_info=model_info,
    )
    if metadata.missing:
        logger.info("hub: descriptor files absent from %s source: %s", location.kind, ", ".join(metadata.missing))
    return metadata


__all__ = ["fetch_metadata"]
