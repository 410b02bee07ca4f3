"""
Request body size limit middleware
"""

import logging
from fastapi import HTTPException
from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

BODY_TOO_LARGE = "Request body too large"

class BodySizeLimitMiddleware:
    """
    Rejects request bodies larger than the limit

    A declared Content-Length over the limit is refused before routing. Bodies
    without one (chunked uploads) are counted as they stream in, and reading
    past the limit raises a 413 from inside body parsing.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = scope.get("method")
        path = scope.get("path")

        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None:
            try:
                declared = int(content_length)
            except ValueError:
                response = JSONResponse(status_code=400, content={"error": "Invalid Content-Length header"})
                await response(scope, receive, send)
                return

            if declared > self.max_body_bytes:
                logger.warning(
                    f"Rejected {method} {path}: body of {declared} bytes exceeds {self.max_body_bytes}"
                )
                response = JSONResponse(status_code=413, content={"error": BODY_TOO_LARGE})
                await response(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    logger.warning(
                        f"Rejected {method} {path}: streamed body passed {self.max_body_bytes} bytes"
                    )
                    raise HTTPException(status_code=413, detail=BODY_TOO_LARGE)
            return message

        await self.app(scope, limited_receive, send)
