"""FastAPI application for the router.

Routes are declared on module-level routers so the OpenAPI document can be
built without a backend (see ``build_openapi_schema``):

- GET /health: backend liveness, no authentication
- GET /info: model, limits and backend facts, behind the API key guard
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, FastAPI, Request, APIRouter
from fastapi.openapi.utils import get_openapi
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..state import FastTokenizer, ServingConfig, ResolvedTokenizer
from ..config.server import API_TITLE
from ..backends.base import Backend
from .auth import require_api_key
from .limits import PayloadLimitMiddleware

logger = logging.getLogger(__name__)

public_router = APIRouter()
api_router = APIRouter(dependencies=[Depends(require_api_key)])


@public_router.get("/health")
async def health(request: Request):
    """Health check endpoint (no authentication required)."""
    backend: Backend = request.app.state.backend
    if await backend.health():
        return {"status": "ok", "backend": backend.name}
    return ORJSONResponse({"status": "unavailable", "backend": backend.name}, status_code=503)


@api_router.get("/info")
async def info(request: Request) -> dict[str, Any]:
    """Model, serving limits and backend facts."""
    config: ServingConfig = request.app.state.config
    tokenizer: ResolvedTokenizer = request.app.state.tokenizer
    backend: Backend = request.app.state.backend
    return {
        "model_id": config.model_id or config.tokenizer_name,
        "tokenizer_name": config.tokenizer_name,
        "revision": config.revision,
        "tokenizer_config_path": config.tokenizer_config_path,
        "trust_remote_code": config.trust_remote_code,
        "fast_tokenizer": isinstance(tokenizer, FastTokenizer),
        "max_concurrent_requests": config.max_concurrent_requests,
        "max_best_of": config.max_best_of,
        "max_stop_sequences": config.max_stop_sequences,
        "max_top_n_tokens": config.max_top_n_tokens,
        "max_input_tokens": config.max_input_tokens,
        "max_total_tokens": config.max_total_tokens,
        "max_batch_total_tokens": config.max_batch_total_tokens,
        "max_batch_prefill_tokens": config.max_batch_prefill_tokens,
        "max_batch_size": config.max_batch_size,
        "max_client_batch_size": config.max_client_batch_size,
        "validation_workers": config.validation_workers,
        "grammar_support": not config.disable_grammar_support,
        "usage_stats": config.usage_stats,
        "version": __version__,
        **backend.describe(),
    }


def build_openapi_schema() -> dict[str, Any]:
    """OpenAPI document for the router's routes, no backend required."""
    return get_openapi(
        title=API_TITLE,
        version=__version__,
        routes=[*public_router.routes, *api_router.routes],
    )


def create_app(backend: Backend, config: ServingConfig, tokenizer: ResolvedTokenizer) -> FastAPI:
    """Build the router app bound to a connected backend."""
    app = FastAPI(title=API_TITLE, version=__version__, default_response_class=ORJSONResponse)
    app.state.backend = backend
    app.state.config = config
    app.state.tokenizer = tokenizer

    if config.cors_allow_origin:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(config.cors_allow_origin),
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(PayloadLimitMiddleware, limit=config.payload_limit)

    app.include_router(public_router)
    app.include_router(api_router)
    return app


__all__ = ["build_openapi_schema", "create_app"]
