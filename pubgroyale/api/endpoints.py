"""Path builders and fetch functions for the PUBG API."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError as ModelValidationError

from pubgroyale.api.client import PubgAPIClient
from pubgroyale.api.models import AssetAttributes, IncludedResource
from pubgroyale.services.cache import TTLCache

log = logging.getLogger(__name__)


def player_path(region: str, player_id: str) -> str:
    return f"/shards/{region}/players/{player_id}"


def player_name_path(region: str, name: str) -> str:
    return f"/shards/{region}/players?filter[playerNames]={quote(name, safe='')}"


def player_stats_path(region: str, player_id: str, season_id: str) -> str:
    return f"/shards/{region}/players/{player_id}/seasons/{season_id}"


def seasons_path(region: str) -> str:
    return f"/shards/{region}/seasons"


def match_path(region: str, match_id: str) -> str:
    return f"/shards/{region}/matches/{match_id}"


def tournament_path(tournament_id: str) -> str:
    return f"/tournaments/{tournament_id}"


STATUS_PATH = "/status"
TOURNAMENTS_PATH = "/tournaments"


async def get_player_by_id(
    client: PubgAPIClient, cache: TTLCache, region: str, player_id: str
) -> Any:
    return await client.request(player_path(region, player_id), cache)


async def get_player_by_name(
    client: PubgAPIClient, cache: TTLCache, region: str, name: str
) -> Any:
    return await client.request(player_name_path(region, name), cache)


async def get_player_stats(
    client: PubgAPIClient,
    cache: TTLCache,
    region: str,
    player_id: str,
    season_id: str,
) -> Any:
    """Lifetime stats of a player during one season."""
    return await client.request(player_stats_path(region, player_id, season_id), cache)


async def get_seasons(client: PubgAPIClient, cache: TTLCache, region: str) -> Any:
    return await client.request(seasons_path(region), cache)


async def get_match(client: PubgAPIClient, cache: TTLCache, region: str, match_id: str) -> Any:
    """Fetch a match document; its `included` list references the telemetry asset."""
    return await client.request(match_path(region, match_id), cache)


async def get_status(client: PubgAPIClient, cache: TTLCache) -> Any:
    return await client.request(STATUS_PATH, cache)


async def get_tournaments(client: PubgAPIClient, cache: TTLCache) -> Any:
    return await client.request(TOURNAMENTS_PATH, cache)


async def get_tournament(client: PubgAPIClient, cache: TTLCache, tournament_id: str) -> Any:
    return await client.request(tournament_path(tournament_id), cache)


def get_telemetry_url(document: dict[str, Any]) -> str | None:
    """Return the telemetry file URL from a match document, if it has one."""
    for raw in document.get("included") or []:
        try:
            resource = IncludedResource.model_validate(raw)
        except ModelValidationError:
            log.debug("Skipping malformed included resource: %r", raw)
            continue
        if resource.type == "asset":
            return AssetAttributes.model_validate(resource.attributes).url
    return None
