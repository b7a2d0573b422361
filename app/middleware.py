# =============================================================================
# app/middleware.py - Request Body Size Limit
# =============================================================================
# Pure ASGI middleware that caps request bodies (JSON, form and multipart).
#
# - A declared Content-Length above the cap is answered with 413 before
#   the application is called at all.
# - Chunked bodies are counted as they stream in; crossing the cap raises a
#   413 HTTPException from inside receive(), which FastAPI re-raises
#   untouched and the HTTP exception handler turns into the JSON envelope.
# =============================================================================

import logging

from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.exceptions import HTTPException
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.exceptions import PayloadTooLargeError

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """Reject request bodies larger than `max_body_size` bytes."""

    def __init__(self, app: ASGIApp, max_body_size: int):
        self.app = app
        self.max_body_size = max_body_size

    @property
    def max_mb(self) -> int:
        return self.max_body_size // (1024 * 1024)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > self.max_body_size:
            logger.warning(
                f"Rejected {scope['method']} {scope['path']}: "
                f"body of {declared} bytes exceeds {self.max_body_size}"
            )
            response = JSONResponse(
                status_code=413,
                content=PayloadTooLargeError(self.max_mb).to_dict(),
            )
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_size:
                    logger.warning(f"Rejected {scope['method']} {scope['path']}: streamed body exceeds limit")
                    raise HTTPException(
                        status_code=413,
                        detail=PayloadTooLargeError(self.max_mb).message,
                    )
            return message

        await self.app(scope, limited_receive, send)
