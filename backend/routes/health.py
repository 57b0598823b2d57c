"""Readiness check route."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/ready")
async def ready(request: Request) -> dict:
    """Lightweight readiness check — no external calls."""
    settings = request.app.state.settings
    return {
        "status": "ok",
        "service": "achievements-api",
        "commit": settings.git_sha,
        "cache": request.app.state.achievement_service.cache.snapshot(),
    }
