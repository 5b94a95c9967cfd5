"""Generic JSON request-body parsing middleware.

No endpoint consumes a body today; routes added later read the decoded value
from `request.state.json_body`. Bodies are buffered up to a byte limit and
replayed to the application unchanged.
"""

import json
import logging

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

DEFAULT_JSON_BODY_LIMIT_BYTES = 100 * 1024
PAYLOAD_TOO_LARGE_STATUS = 413
MALFORMED_JSON_DETAIL = "Malformed JSON request body"
BODY_TOO_LARGE_DETAIL = "Request body exceeds the JSON size limit"


def api_is_json_content_type(content_type: str | None) -> bool:
    """Return whether a Content-Type header denotes a JSON document."""

    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def api_declared_body_too_large(content_length: str | None, limit_bytes: int) -> bool:
    """Return whether a Content-Length header already announces an oversized body."""

    if content_length is None or not content_length.strip().isdigit():
        return False
    return int(content_length) > limit_bytes


class JsonBodyMiddleware:
    """ASGI middleware decoding JSON request bodies with a size limit.

    Only objects and arrays are accepted at the top level. Oversized bodies
    answer 413 and malformed documents answer 400 before routing.
    """

    def __init__(self, app: ASGIApp, limit_bytes: int = DEFAULT_JSON_BODY_LIMIT_BYTES):
        """Initialize middleware.

        Args:
            app: Downstream ASGI application.
            limit_bytes: Maximum accepted JSON body size.

        Raises:
            ValueError: Raised when limit_bytes is negative.
        """

        if limit_bytes < 0:
            raise ValueError("limit_bytes must not be negative")
        self._app = app
        self._limit_bytes = limit_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self._app(scope, receive, send)
            return

        scope.setdefault("state", {})["json_body"] = None
        headers = Headers(scope=scope)
        if not api_is_json_content_type(headers.get("content-type")):
            await self._app(scope, receive, send)
            return

        if api_declared_body_too_large(headers.get("content-length"), self._limit_bytes):
            await self._reject(scope, receive, send, PAYLOAD_TOO_LARGE_STATUS, BODY_TOO_LARGE_DETAIL)
            return

        chunks: list[bytes] = []
        received_bytes = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            chunk = message.get("body", b"")
            received_bytes += len(chunk)
            if received_bytes > self._limit_bytes:
                await self._reject(scope, receive, send, PAYLOAD_TOO_LARGE_STATUS, BODY_TOO_LARGE_DETAIL)
                return
            chunks.append(chunk)
            more_body = message.get("more_body", False)

        raw_body = b"".join(chunks)
        if raw_body:
            try:
                json_body = json.loads(raw_body)
            except ValueError as error:
                logger.info("Rejected malformed JSON body on %s %s: %s", scope["method"], scope["path"], error)
                await self._reject(scope, receive, send, status.HTTP_400_BAD_REQUEST, MALFORMED_JSON_DETAIL)
                return
            if not isinstance(json_body, (dict, list)):
                await self._reject(scope, receive, send, status.HTTP_400_BAD_REQUEST, MALFORMED_JSON_DETAIL)
                return
            scope["state"]["json_body"] = json_body

        body_replayed = False

        async def replay_receive() -> Message:
            nonlocal body_replayed
            if not body_replayed:
                body_replayed = True
                return {"type": "http.request", "body": raw_body, "more_body": False}
            return await receive()

        await self._app(scope, replay_receive, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, status_code: int, detail: str) -> None:
        response = JSONResponse(content={"detail": detail}, status_code=status_code)
        await response(scope, receive, send)
