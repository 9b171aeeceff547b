"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from pubgroyale.api.client import PubgAPIClient
from pubgroyale.services.pubg_service import PubgService


class FakePubgAPI:
    """Canned responses keyed by URL path; records every request it serves."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, Any] = {}

    def add(self, path: str, json: Any = None, status_code: int = 200, content: bytes | None = None) -> None:
        if content is not None:
            self._routes[path] = (status_code, {"content": content})
        else:
            self._routes[path] = (status_code, {"json": json})

    def fail(self, path: str, exc_type: type[httpx.TransportError] = httpx.ConnectError) -> None:
        self._routes[path] = exc_type

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"errors": [{"title": "Not Found"}]})
        if isinstance(route, type):
            raise route("connection refused", request=request)
        status_code, kwargs = route
        return httpx.Response(status_code, **kwargs)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def fake_api() -> FakePubgAPI:
    return FakePubgAPI()


@pytest.fixture
async def api_client(fake_api):
    client = PubgAPIClient("test_key", transport=httpx.MockTransport(fake_api.handler))
    yield client
    await client.close()


@pytest.fixture
def service(api_client) -> PubgService:
    return PubgService(api_key="test_key", client=api_client)


@pytest.fixture
def match_document() -> dict:
    """A trimmed match document with roster, participant and telemetry asset."""
    return {
        "data": {
            "type": "match",
            "id": "abc",
            "attributes": {"gameMode": "squad-fpp", "mapName": "Baltic_Main", "duration": 1804},
        },
        "included": [
            {"type": "roster", "id": "r1", "attributes": {"won": "false"}},
            {"type": "participant", "id": "p1", "attributes": {"stats": {"kills": 3}}},
            {
                "type": "asset",
                "id": "a1",
                "attributes": {
                    "URL": "https://telemetry-cdn.pubg.com/bluehole-pubg/steam/2024/01/01/abc-telemetry.json",
                    "name": "telemetry",
                    "createdAt": "2024-01-01T00:00:00Z",
                },
            },
        ],
    }


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def monotonic(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock(monkeypatch) -> FakeClock:
    """Controls the cache's notion of time without touching the event loop's clock."""
    fake = FakeClock()
    monkeypatch.setattr("pubgroyale.services.cache.time", fake)
    return fake
