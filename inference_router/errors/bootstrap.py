"""Bootstrap failure taxonomy.

Every error raised here terminates the process before any server socket is
opened. None of them are retried at this layer; retry policy, if any, belongs
to the I/O collaborator (hub client, backend connection).
"""

from __future__ import annotations


class BootstrapError(Exception):
    """Base class for fatal bootstrap failures.

    Attributes:
        category: Stable label used in logs and span attributes.
        message: Human-readable description surfaced to the operator.
    """

    category = "bootstrap"
    prefix = "Bootstrap error"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.prefix}: {message}")
        self.message = message


class ArgumentValidationError(BootstrapError):
    """Bad or inconsistent operator input, reported with field-level detail."""

    category = "argument_validation"
    prefix = "Argument validation error"


class ResourceResolutionError(BootstrapError):
    """Tokenizer/hub resolution exhausted every fallback."""

    category = "resource_resolution"
    prefix = "Tokenizer resolution error"


class BackendConnectionError(BootstrapError):
    """Backend handshake or construction failed."""

    category = "backend_connection"
    prefix = "Backend failed"


class ServerFailureError(BootstrapError):
    """The server collaborator failed after startup."""

    category = "server_failure"
    prefix = "WebServer error"


__all__ = [
    "BootstrapError",
    "ArgumentValidationError",
    "ResourceResolutionError",
    "BackendConnectionError",
    "ServerFailureError",
]
