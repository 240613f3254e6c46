"""Request body size limiting (pure ASGI middleware)."""

from fastapi import HTTPException
from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

DEFAULT_MAX_BODY_BYTES = 1 << 20


class RequestBodyTooLargeError(HTTPException):
    """Raised while a streamed request body is being read past the limit.

    Reported like any other unreadable body: 400 "invalid request body".

    It subclasses HTTPException so FastAPI's body parsing lets it through
    untouched instead of reporting a generic parse failure.
    """

    def __init__(self, max_body_bytes: int):
        self.max_body_bytes = max_body_bytes
        super().__init__(status_code=400, detail="invalid request body")


class BodySizeLimitMiddleware:
    """Rejects request bodies larger than ``max_body_bytes``.

    A declared Content-Length over the limit is refused before the app runs.
    Bodies without one are counted chunk by chunk as the endpoint reads them.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int = DEFAULT_MAX_BODY_BYTES):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > self.max_body_bytes:
            response = JSONResponse(
                status_code=400,
                content={"error": "invalid request body"},
            )
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    raise RequestBodyTooLargeError(self.max_body_bytes)
            return message

        await self.app(scope, limited_receive, send)
