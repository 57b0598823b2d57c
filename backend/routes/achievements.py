"""Achievement list route — cache-first, refreshed from Steam on a miss."""

import json

from fastapi import APIRouter, Depends, Request, Response

from services.achievements import AchievementService

router = APIRouter()


def get_service(request: Request) -> AchievementService:
    return request.app.state.achievement_service


@router.get("/api/achievements")
async def list_achievements(service: AchievementService = Depends(get_service)) -> Response:
    """Ranked achievements, most unlocked first. Upstream failures become 502 (see errors.py)."""
    achievements = await service.get_achievements()
    body = json.dumps([a.to_wire() for a in achievements], indent=2, ensure_ascii=False) + "\n"
    return Response(body, media_type="application/json; charset=utf-8")
