"""Refresh pipeline and cache-first lookup for the achievement list."""

import asyncio
import logging

import httpx

from config import Settings
from models import Achievement
from services.cache import AchievementCache
from services.normalize import parse_global_percentages, parse_schema
from services.ranking import merge_and_rank
from services.steam_client import fetch_global_percentages, fetch_schema, require_api_key

logger = logging.getLogger(__name__)


class AchievementService:
    """Serves the ranked list from cache, refreshing from Steam on a miss.

    A failed refresh raises and leaves the cache as it was, so data that is
    still fresh keeps being served.
    """

    def __init__(
        self,
        settings: Settings,
        cache: AchievementCache,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self.cache = cache
        self._transport = transport
        # Refresh currently running; every concurrent miss awaits this one
        self._inflight: asyncio.Future | None = None

    async def get_achievements(self) -> list[Achievement]:
        data, hit = self.cache.lookup()
        if hit:
            logger.debug("Cache hit (%d achievements)", len(data))
            return data

        if self._inflight is None:
            self._inflight = asyncio.ensure_future(self._refresh_and_store())
            self._inflight.add_done_callback(self._refresh_done)
        else:
            logger.debug("Joining in-flight refresh")

        # A disconnecting client must not abort the refresh other requests share
        return await asyncio.shield(self._inflight)

    def _refresh_done(self, task: asyncio.Future) -> None:
        if self._inflight is task:
            self._inflight = None
        if not task.cancelled():
            # Mark retrieved; waiters may all have gone away
            task.exception()

    async def _refresh_and_store(self) -> list[Achievement]:
        data = await self.refresh()
        self.cache.store(data, self.settings.cache_ttl_seconds)
        return data

    async def refresh(self) -> list[Achievement]:
        """Fetch both datasets, merge, and rank. Does not touch the cache."""
        s = self.settings
        # Fail before either request goes out
        require_api_key(s.steam_api_key)
        logger.info("Refreshing achievements for app %d (lang=%s)", s.app_id, s.language)

        timeout = s.upstream_timeout_seconds
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            tasks = [
                asyncio.ensure_future(fetch_schema(client, s.steam_api_key, s.app_id, s.language, timeout)),
                asyncio.ensure_future(fetch_global_percentages(client, s.app_id, timeout)),
            ]
            try:
                schema_body, pct_body = await asyncio.gather(*tasks)
            except BaseException:
                # First failure wins; the sibling is cancelled and reaped before the client closes
                for t in tasks:
                    t.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        achievements = parse_schema(schema_body)
        percentages = parse_global_percentages(pct_body)
        result = merge_and_rank(achievements, percentages)

        logger.info(
            "Refreshed %d achievements (%d with global percentages)",
            len(result),
            sum(1 for a in achievements if a.api_name in percentages),
        )
        return result
