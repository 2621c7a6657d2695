"""Registry of backend variants.

Variants are imported lazily so that selecting one backend never imports
the other's dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import ArgumentValidationError
from ..config.backends import BACKEND_V3, BACKEND_TRTLLM, SUPPORTED_BACKENDS

if TYPE_CHECKING:
    from .base import BackendVariant


def get_variant(name: str) -> BackendVariant:
    """Return the variant registered under ``name``.

    Raises:
        ArgumentValidationError: ``name`` is not a supported backend.
    """
    if name == BACKEND_V3:
        from .v3.variant import V3Variant  # noqa: PLC0415

        return V3Variant()
    if name == BACKEND_TRTLLM:
        from .trt.variant import TrtLlmVariant  # noqa: PLC0415

        return TrtLlmVariant()
    raise ArgumentValidationError(
        f"`backend` must be one of {', '.join(SUPPORTED_BACKENDS)}. Given: {name}"
    )


__all__ = ["get_variant"]
