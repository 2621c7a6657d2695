"""Centralized exception classes for the router bootstrap.

Organization:
    - bootstrap.py: fatal bootstrap failures (validation, resolution,
      backend connection, server failure)
    - classify.py: exception-to-label mapping
"""

from .classify import classify_error
from .bootstrap import (
    BootstrapError,
    ServerFailureError,
    BackendConnectionError,
    ArgumentValidationError,
    ResourceResolutionError,
)

__all__ = [
    "BootstrapError",
    "ArgumentValidationError",
    "ResourceResolutionError",
    "BackendConnectionError",
    "ServerFailureError",
    "classify_error",
]
