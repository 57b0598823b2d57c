"""Shared fixtures: a fake Steam Web API, payload builders, and a manual clock."""
import asyncio

import httpx
import pytest

from config import Settings

TEST_API_KEY = "test-key-123"


# ============================================================================
# Payload builders
# ============================================================================

def schema_item(key, name, hidden=0, description="", icon="", icongray=""):
    return {
        "name": key,
        "defaultvalue": 0,
        "displayName": name,
        "hidden": hidden,
        "description": description,
        "icon": icon,
        "icongray": icongray,
    }


def schema_payload(*items):
    return {
        "game": {
            "gameName": "Terraria",
            "gameVersion": "42",
            "availableGameStats": {"achievements": list(items)},
        }
    }


def pct_payload(*pairs):
    return {
        "achievementpercentages": {
            "achievements": [{"name": key, "percent": pct} for key, pct in pairs]
        }
    }


# ============================================================================
# Fake Steam
# ============================================================================

class FakeSteam:
    """Routes requests by endpoint and records every request it sees.

    ``schema_delay`` / ``pct_delay`` hold a response back; ``trickle`` makes
    the percentages body arrive one byte per ``trickle`` seconds.
    """

    def __init__(self):
        self.schema = schema_payload()
        self.percentages = pct_payload()
        self.schema_status = 200
        self.pct_status = 200
        self.schema_delay = 0.0
        self.pct_delay = 0.0
        self.trickle = 0.0
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []
        self.finished: list[str] = []

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if "GetSchemaForGame" in request.url.path:
            await asyncio.sleep(self.schema_delay)
            self.finished.append("schema")
            return self._respond(self.schema_status, self.schema)
        await asyncio.sleep(self.pct_delay)
        self.finished.append("percentages")
        if self.trickle:
            return httpx.Response(self.pct_status, content=self._trickle(self.percentages))
        return self._respond(self.pct_status, self.percentages)

    async def _trickle(self, body):
        for byte in httpx.Response(200, json=body).content:
            await asyncio.sleep(self.trickle)
            yield bytes([byte])

    @staticmethod
    def _respond(status, body):
        if isinstance(body, (str, bytes)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def steam():
    return FakeSteam()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings(tmp_path):
    return Settings({
        "STEAM_API_KEY": TEST_API_KEY,
        "STATIC_DIR": str(tmp_path / "no-static"),
    })


@pytest.fixture
def settings_without_key(tmp_path):
    return Settings({"STATIC_DIR": str(tmp_path / "no-static")})
