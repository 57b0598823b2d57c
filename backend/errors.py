"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from config import CORS_HEADERS

logger = logging.getLogger(__name__)

SNIPPET_LIMIT = 4096


class AchievementsError(Exception):
    """Base exception for a failed refresh. Surfaces as 502 by default."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(AchievementsError):
    """A required setting (the Steam API key) is missing."""


class NetworkError(AchievementsError):
    """Transport failure, timeout, or non-2xx response from an upstream."""

    def __init__(self, target: str, status_code: int | None = None, body: str = "", reason: str = ""):
        self.target = target
        self.upstream_status = status_code
        self.body = body[:SNIPPET_LIMIT]
        if status_code is None:
            message = f"GET {target} failed: {reason or 'request error'}"
        else:
            message = f"GET {target} -> {status_code}: {self.body!r}"
        super().__init__(message)


class ParseError(AchievementsError):
    """Upstream payload could not be decoded into the expected shape."""

    def __init__(self, source: str, detail: str):
        self.source = source
        super().__init__(f"{source} json parse: {detail}")


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(AchievementsError)
    async def handle_achievements_error(_request: Request, exc: AchievementsError):
        logger.warning("Refresh failed (%s): %s", type(exc).__name__, exc)
        return PlainTextResponse(
            f"Failed to fetch achievements: {exc}",
            status_code=exc.status_code,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        # Served by ServerErrorMiddleware, outside the CORS middleware
        return PlainTextResponse("Internal server error", status_code=500, headers=CORS_HEADERS)
