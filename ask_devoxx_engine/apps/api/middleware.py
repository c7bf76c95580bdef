"""ASGI middleware tagging each skill request with a correlation id."""

from __future__ import annotations

import time
import uuid

from ask_devoxx_engine.core.logging import (
    bind_correlation_id,
    get_logger,
    reset_correlation_id,
)

logger = get_logger(__name__)

CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")


def resolve_correlation_id(raw_headers) -> str:  # type: ignore[no-untyped-def]
    """Return the first correlation header the caller sent, or a fresh id."""
    received = {
        key.decode("latin-1").lower(): value.decode("latin-1") for key, value in raw_headers
    }
    for header in CORRELATION_HEADERS:
        value = received.get(header.lower())
        if value:
            return value
    return uuid.uuid4().hex


class CorrelationIdMiddleware:  # pylint: disable=too-few-public-methods
    """Bind a correlation id while the request runs and echo it on the response.

    Every log line written while handling the request carries the id as ``cid``;
    one ``http_request`` line summarises the call once the response is sent.
    """

    def __init__(self, app) -> None:  # type: ignore[no-untyped-def]
        self.app = app

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = resolve_correlation_id(scope.get("headers", []))
        echoed = [
            (name.encode("latin-1"), correlation_id.encode("latin-1"))
            for name in CORRELATION_HEADERS
        ]
        status_code = 500
        token = bind_correlation_id(correlation_id)
        started = time.perf_counter()

        async def send_with_correlation(message):  # type: ignore[no-untyped-def]
            nonlocal status_code
            if message.get("type") == "http.response.start":
                status_code = message.get("status", status_code)
                headers = list(message.get("headers", []))
                present = {key.lower() for key, _ in headers}
                headers.extend(item for item in echoed if item[0].lower() not in present)
                message["headers"] = headers
            await send(message)

        try:
            await self.app(scope, receive, send_with_correlation)
        finally:
            logger.info(
                "%s %s -> %d",
                scope.get("method", ""),
                scope.get("path", ""),
                status_code,
                extra={
                    "event": "http_request",
                    "method": scope.get("method", ""),
                    "path": scope.get("path", ""),
                    "status_code": status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
                },
            )
            reset_correlation_id(token)


__all__ = ["CorrelationIdMiddleware", "resolve_correlation_id"]
