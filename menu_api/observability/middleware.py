from __future__ import annotations

import uuid
from time import perf_counter
from typing import Any, Callable

import structlog
from starlette.datastructures import MutableHeaders
from starlette.responses import JSONResponse

from menu_api.core.errors import INTERNAL_ERROR_MESSAGE, error_payload
from menu_api.observability.metrics import HitCounter


class RequestContextMiddleware:
    """Outermost request stage: trace id, hit counting, access log, and the
    catch-all 500 responder."""

    def __init__(self, app: Callable[..., Any], hits: HitCounter) -> None:
        self.app = app
        self.hits = hits

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())
        path = scope.get("path", "")
        if len(path) > 1 and path.endswith("/"):
            # Non-strict routing: /api/menu/ is served as /api/menu.
            path = path.rstrip("/") or "/"
            scope = dict(scope, path=path)
            if scope.get("raw_path"):
                scope["raw_path"] = scope["raw_path"].rstrip(b"/") or b"/"
        method = scope.get("method", "GET")

        # Starlette exposes scope["state"] as request.state.
        scope.setdefault("state", {})["request_id"] = request_id

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=path,
            method=method,
        )

        self.hits.observe_request(method, path)

        start = perf_counter()
        status_code: int = 500
        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code, response_started

            if message.get("type") == "http.response.start":
                response_started = True
                status_code = int(message.get("status", 500))
                headers = MutableHeaders(scope=message)
                headers["X-Request-Id"] = request_id

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            structlog.get_logger("menu_api").exception("unhandled_exception")
            if response_started:
                raise
            response = JSONResponse(
                status_code=500,
                content=error_payload("INTERNAL_SERVER_ERROR", INTERNAL_ERROR_MESSAGE, request_id),
            )
            await response(scope, receive, send_wrapper)
        finally:
            elapsed_ms = (perf_counter() - start) * 1000.0
            query = scope.get("query_string", b"").decode("latin-1")

            structlog.get_logger("access").info(
                "http_request",
                query=query or None,
                status_code=status_code,
                elapsed_ms=round(elapsed_ms, 2),
            )

            structlog.contextvars.clear_contextvars()
