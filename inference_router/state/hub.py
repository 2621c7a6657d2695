"""Hub metadata dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class HubMetadata:
    """Auxiliary descriptor files fetched ahead of tokenizer resolution.

    Every path is ``None`` when the file was absent from the located source;
    absence is never fatal at this stage.
    """

    config_path: Path | None = None
    tokenizer_config_path: Path | None = None
    preprocessor_config_path: Path | None = None
    processor_config_path: Path | None = None
    model_info: Any | None = None

    @property
    def missing(self) -> tuple[str, ...]:
        names = (
            ("config", self.config_path),
            ("tokenizer_config", self.tokenizer_config_path),
            ("preprocessor_config", self.preprocessor_config_path),
            ("processor_config", self.processor_config_path),
        )
        return tuple(name for name, path in names if path is None)


__all__ = ["HubMetadata"]
