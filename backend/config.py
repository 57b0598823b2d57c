"""Centralized configuration — all env vars in one place."""

import os

TERRARIA_APP_ID = 105600

# Any origin, GET only
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class Settings:
    """Application settings loaded from environment variables.

    Read once at startup and handed to ``create_app``; nothing else in the
    service looks at the environment.
    """

    def __init__(self, environ: dict[str, str] | None = None):
        env = os.environ if environ is None else environ

        self.port: int = int(env.get("PORT") or 8080)
        self.environment: str = env.get("ENVIRONMENT", "local")
        self.git_sha: str = env.get("GIT_SHA", "unknown")
        self.static_dir: str = env.get("STATIC_DIR", "static")

        # Steam Web API
        self.steam_api_key: str | None = env.get("STEAM_API_KEY") or None
        self.app_id: int = int(env.get("STEAM_APP_ID") or TERRARIA_APP_ID)
        self.language: str = env.get("STEAM_LANGUAGE", "french")
        self.upstream_timeout_seconds: float = float(env.get("UPSTREAM_TIMEOUT_SECONDS") or 12.0)

        # 6h, avoids hammering the Steam API
        self.cache_ttl_seconds: int = int(env.get("CACHE_TTL_SECONDS") or 6 * 60 * 60)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing required env vars for the schema call."""
        missing = []
        if not self.steam_api_key:
            missing.append("STEAM_API_KEY")
        return missing
