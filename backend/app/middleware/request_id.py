"""
Middleware that assigns a request ID to every incoming request.

A client-supplied X-Request-ID is reused when it looks sane so a trace can be
followed across services; otherwise a fresh one is generated.
"""

import uuid

from fastapi import Request

from core.logging import bind_context, clear_context

MAX_REQUEST_ID_LENGTH = 64


class RequestIDMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive=receive)
        request_id = request.headers.get("X-Request-ID", "")
        if not request_id or len(request_id) > MAX_REQUEST_ID_LENGTH or not request_id.isprintable():
            request_id = uuid.uuid4().hex[:16]
        scope.setdefault("state", {})["request_id"] = request_id

        clear_context()
        bind_context(request_id=request_id)

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                headers = message.setdefault("headers", [])
                headers.append((b"x-request-id", request_id.encode()))
            await send(message)

        await self.app(scope, receive, send_wrapper)
