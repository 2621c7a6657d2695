"""Abstract contracts for serving backends.

A BackendVariant describes how one kind of backend is brought up: whether it
reports capacity at connect time, whether it needs a directly loadable
tokenizer, which cheap preconditions it imposes, and how to connect. The
Backend it returns is the long-lived handle handed to the server.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..helpers.validation import Precondition
from ..state import ServingConfig, ResolvedTokenizer, CapacityDescriptor


class Backend(ABC):
    """A connected backend handle."""

    name: str = "backend"

    async def start(self) -> None:
        """Start any owned processes. Default: nothing to start."""

    @abstractmethod
    async def health(self) -> bool:
        """Return True while the backend can serve requests."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Release connections and owned processes."""

    def describe(self) -> dict[str, Any]:
        """Static facts exposed on the server's info route."""
        return {"backend": self.name}


class BackendVariant(ABC):
    """How one backend kind is validated, connected and sized."""

    name: str = "variant"
    reports_capacity: bool = False
    requires_fast_tokenizer: bool = False

    @property
    def support_chunking(self) -> bool | None:
        """Prefill chunking support known before connecting, else None."""
        return None if self.reports_capacity else False

    def prepare_config(self, config: ServingConfig) -> ServingConfig:
        """Fill variant defaults into the parsed config."""
        return config

    def preconditions(self) -> tuple[Precondition, ...]:
        """Cheap checks that must pass before any network or tokenizer I/O."""
        return ()

    @abstractmethod
    async def connect(
        self,
        config: ServingConfig,
        tokenizer: ResolvedTokenizer | None = None,
    ) -> tuple[Backend, CapacityDescriptor]:
        """Construct and connect the backend.

        Returns:
            The connected handle and the capacity it reports.
        """


__all__ = ["Backend", "BackendVariant"]
