"""API key guard for the router's HTTP surface."""

from __future__ import annotations

import hmac
import logging

from fastapi import Request, Security, HTTPException
from fastapi.security.api_key import APIKeyHeader

from ..config.server import API_KEY_HEADER, API_KEY_SCHEME, API_KEY_ALT_HEADER

logger = logging.getLogger(__name__)

# Authorization: Bearer <key> or X-API-Key: <key>
authorization_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)
api_key_header = APIKeyHeader(name=API_KEY_ALT_HEADER, auto_error=False)


def extract_api_key(authorization: str | None, api_key: str | None) -> str | None:
    """Pull the presented key out of either supported header."""
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == API_KEY_SCHEME.lower() and token.strip():
            return token.strip()
    return api_key or None


def validate_api_key(provided_key: str, expected_key: str) -> bool:
    return hmac.compare_digest(provided_key.encode(), expected_key.encode())


async def require_api_key(
    request: Request,
    authorization: str | None = Security(authorization_header),
    api_key: str | None = Security(api_key_header),
) -> None:
    """FastAPI dependency enforcing the configured API key, if any.

    Raises:
        HTTPException: 401 when a key is configured and the request's key is
            missing or wrong.
    """
    expected = request.app.state.config.api_key
    if not expected:
        return

    provided = extract_api_key(authorization, api_key)
    if not provided:
        logger.warning("API key missing from request")
        raise HTTPException(
            status_code=401,
            detail=f"API key required. Provide via '{API_KEY_HEADER}: {API_KEY_SCHEME} <key>' or '{API_KEY_ALT_HEADER}'.",
        )
    if not validate_api_key(provided, expected):
        logger.warning("Invalid API key provided: %s...", provided[:4])
        raise HTTPException(status_code=401, detail="Invalid API key.")


__all__ = ["extract_api_key", "require_api_key", "validate_api_key"]
