"""Steam Web API client for achievement schema and global unlock percentages.

Two read-only calls against ISteamUserStats. The schema call needs an API
key; the percentages call is public. No retries: the first failure is
raised to the caller.
"""

import asyncio
import logging

import httpx

from errors import SNIPPET_LIMIT, ConfigurationError, NetworkError

logger = logging.getLogger(__name__)

SCHEMA_URL = "https://api.steampowered.com/ISteamUserStats/GetSchemaForGame/v2/"
GLOBAL_PCT_URL = "https://api.steampowered.com/ISteamUserStats/GetGlobalAchievementPercentagesForApp/v0002/"

DEFAULT_TIMEOUT_SECONDS = 12.0


def _target(url: str, params: dict) -> str:
    """Printable request target with the API key masked."""
    if "key" in params:
        params = {**params, "key": "REDACTED"}
    return str(httpx.URL(url, params=params))


def require_api_key(api_key: str | None) -> str:
    if not api_key:
        raise ConfigurationError("missing STEAM_API_KEY env var (required for GetSchemaForGame)")
    return api_key


async def _get(client: httpx.AsyncClient, url: str, params: dict, timeout: float) -> bytes:
    """GET ``url`` and return the raw body, raising NetworkError on any failure.

    ``timeout`` bounds the whole request, body included; the client's own
    timeout only bounds each connect/read/write step.
    """
    target = _target(url, params)
    logger.info("GET %s", target)
    try:
        resp = await asyncio.wait_for(client.get(url, params=params), timeout)
    except asyncio.TimeoutError as e:
        raise NetworkError(target, reason=f"timeout after {timeout:g}s") from e
    except httpx.RequestError as e:
        raise NetworkError(target, reason=str(e) or type(e).__name__) from e

    if not resp.is_success:
        snippet = resp.content[:SNIPPET_LIMIT].decode("utf-8", errors="replace")
        raise NetworkError(target, resp.status_code, snippet)
    return resp.content


async def fetch_schema(
    client: httpx.AsyncClient,
    api_key: str | None,
    app_id: int,
    language: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> bytes:
    """Fetch the raw GetSchemaForGame body for ``app_id`` in ``language``."""
    params = {"key": require_api_key(api_key), "appid": app_id, "l": language, "format": "json"}
    return await _get(client, SCHEMA_URL, params, timeout)


async def fetch_global_percentages(
    client: httpx.AsyncClient, app_id: int, timeout: float = DEFAULT_TIMEOUT_SECONDS
) -> bytes:
    """Fetch the raw GetGlobalAchievementPercentagesForApp body."""
    # Valve documents "gameid", not "appid", for this method
    params = {"gameid": app_id, "format": "json"}
    return await _get(client, GLOBAL_PCT_URL, params, timeout)
