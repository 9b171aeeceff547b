"""PubgService: validates call options, picks the region and per-resource cache."""

from __future__ import annotations

import logging
from typing import Any, Awaitable

from pubgroyale.api.client import PubgAPIClient, ValidationError
from pubgroyale.api.endpoints import (
    get_match,
    get_player_by_id,
    get_player_by_name,
    get_player_stats,
    get_seasons,
    get_status,
    get_telemetry_url,
    get_tournament,
    get_tournaments,
)
from pubgroyale.api.models import Region
from pubgroyale.config import RESOURCES, CacheSettings, Settings
from pubgroyale.services.cache import TTLCache

log = logging.getLogger(__name__)


def _region_value(region: Region | str) -> str:
    if isinstance(region, Region):
        return region.value
    return region


class PubgService:
    """Client for the PUBG API with one TTL cache per resource type.

    Request methods are plain methods: missing required options raise
    `ValidationError` right away, before any I/O. Otherwise they return an
    awaitable that resolves to the parsed JSON document, or raises
    `ApiError` / `httpx.TransportError`.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        api_key: str | None = None,
        default_region: Region | str | None = None,
        cache: CacheSettings | None = None,
        client: PubgAPIClient | None = None,
    ) -> None:
        settings = settings or Settings()
        self.api_key = (api_key or settings.api_key).strip()
        if not self.api_key:
            raise ValidationError("Api key must be specified")
        self.default_region = _region_value(default_region or settings.default_region)
        cache_settings = cache or settings.cache
        self.caches: dict[str, TTLCache] = {
            name: TTLCache(cache_settings.ttl_for(name)) for name in RESOURCES
        }
        self.client = client or PubgAPIClient(self.api_key)

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> PubgService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _region(self, region: Region | str | None) -> str:
        if region is None:
            return self.default_region
        return _region_value(region)

    def player(
        self,
        id: str | None = None,
        name: str | None = None,
        region: Region | str | None = None,
    ) -> Awaitable[Any]:
        """Look up a player by account id or by name. The id wins if both are given."""
        if id is None and name is None:
            raise ValidationError('No player id or name specified through "id" or "name" option')
        shard = self._region(region)
        if id is not None:
            return get_player_by_id(self.client, self.caches["player"], shard, id)
        return get_player_by_name(self.client, self.caches["player"], shard, name)

    def player_stats(
        self,
        player_id: str | None = None,
        season_id: str | None = None,
        region: Region | str | None = None,
    ) -> Awaitable[Any]:
        if player_id is None:
            raise ValidationError('No player id specified through "player_id" option')
        if season_id is None:
            raise ValidationError('No season id specified through "season_id" option')
        return get_player_stats(
            self.client, self.caches["player_stats"], self._region(region), player_id, season_id
        )

    def seasons(self, region: Region | str | None = None) -> Awaitable[Any]:
        return get_seasons(self.client, self.caches["seasons"], self._region(region))

    def match(self, id: str | None = None, region: Region | str | None = None) -> Awaitable[Any]:
        if id is None:
            raise ValidationError('No match id specified through "id" option')
        return get_match(self.client, self.caches["match"], self._region(region), id)

    def telemetry(
        self, match_id: str | None = None, region: Region | str | None = None
    ) -> Awaitable[Any]:
        """Fetch the match document that carries the telemetry asset."""
        if match_id is None:
            raise ValidationError('No match id specified through "match_id" option')
        return get_match(self.client, self.caches["match"], self._region(region), match_id)

    def status(self) -> Awaitable[Any]:
        return get_status(self.client, self.caches["status"])

    def tournaments(self) -> Awaitable[Any]:
        return get_tournaments(self.client, self.caches["tournaments"])

    def tournament(self, id: str | None = None) -> Awaitable[Any]:
        if id is None:
            raise ValidationError('No tournament id specified through "id" option')
        return get_tournament(self.client, self.caches["tournament"], id)

    @staticmethod
    def get_telemetry_url(document: dict[str, Any]) -> str | None:
        return get_telemetry_url(document)

    def clear_cache(self, resource: str | None = None) -> None:
        """Drop cached outcomes for one resource type, or for all of them."""
        if resource is None:
            for cache in self.caches.values():
                cache.clear()
            return
        if resource not in self.caches:
            raise ValidationError(f"Unknown resource type: {resource}")
        log.debug("Clearing %s cache", resource)
        self.caches[resource].clear()
