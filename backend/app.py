"""FastAPI application entry point for the achievements API."""

import logging
import os
import sys

import httpx
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.staticfiles import StaticFiles

from config import CORS_HEADERS, Settings
from errors import register_error_handlers
from services.achievements import AchievementService
from services.cache import AchievementCache

settings = Settings()

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
    cache: AchievementCache | None = None,
) -> FastAPI:
    app = FastAPI(title="Achievements API", version="1.0.0")

    missing = settings.validate()
    if missing:
        logger.warning("Missing env vars (achievement refresh will fail): %s", ", ".join(missing))

    # One cache per app, shared by every request it serves
    app.state.settings = settings
    app.state.achievement_service = AchievementService(
        settings, cache or AchievementCache(), transport=transport
    )

    # CORS; preflight gets an empty 204
    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.achievements import router as achievements_router
    from routes.health import router as health_router

    app.include_router(health_router)
    app.include_router(achievements_router)

    # Front-end assets, if deployed alongside. Mounted last so API routes win.
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.info("No static directory at %s, serving API only", settings.static_dir)

    return app


app = create_app(settings)


if __name__ == "__main__":
    logger.info("Listening on :%d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
