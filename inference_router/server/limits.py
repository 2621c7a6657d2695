"""Request payload limit.

A declared ``Content-Length`` above the limit is rejected before the app
runs. Bodies without one (chunked uploads) are buffered up to the limit and
replayed to the app, or rejected as soon as they exceed it.
"""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Awaitable, Callable

from fastapi.responses import ORJSONResponse

logger = logging.getLogger(__name__)

Message = dict[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]


def _declared_length(scope: dict[str, Any]) -> int | None:
    for name, value in scope.get("headers", ()):
        if name.lower() == b"content-length":
            text = value.decode("latin-1").strip()
            return int(text) if text.isdigit() else None
    return None


class PayloadLimitMiddleware:
    """ASGI middleware answering 413 for bodies larger than ``limit`` bytes."""

    def __init__(self, app: Any, limit: int) -> None:
        self.app = app
        self.limit = limit

    async def _reject(self, scope: dict[str, Any], receive: Receive, send: Send) -> None:
        logger.warning("server: rejected %s %s over %d bytes", scope.get("method"), scope.get("path"), self.limit)
        response = ORJSONResponse({"error": f"payload exceeds {self.limit} bytes"}, status_code=413)
        await response(scope, receive, send)

    async def __call__(self, scope: dict[str, Any], receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = _declared_length(scope)
        if declared is not None:
            if declared > self.limit:
                await self._reject(scope, receive, send)
                return
            await self.app(scope, receive, send)
            return

        buffered: list[Message] = []
        size = 0
        while True:
            message = await receive()
            buffered.append(message)
            if message["type"] != "http.request":
                break
            size += len(message.get("body", b""))
            if size > self.limit:
                await self._reject(scope, receive, send)
                return
            if not message.get("more_body", False):
                break

        async def replay() -> Message:
            if buffered:
                return buffered.pop(0)
            return await receive()

        await self.app(scope, replay, send)


__all__ = ["PayloadLimitMiddleware"]
