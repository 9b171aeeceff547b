"""Load .env and settings.yaml, expose client configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from pubgroyale.api.models import Region

log = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_TTL = 60.0

RESOURCES = (
    "player",
    "player_stats",
    "seasons",
    "status",
    "match",
    "tournaments",
    "tournament",
)


def _load_env(env_path: Path | None = None) -> None:
    load_dotenv(env_path or PROJECT_ROOT / ".env")


def _load_yaml(settings_path: Path | None = None) -> dict:
    settings_path = settings_path or PROJECT_ROOT / "settings.yaml"
    if settings_path.exists():
        try:
            with open(settings_path) as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError:
            log.warning("Failed to parse %s, using defaults", settings_path)
            return {}
    return {}


class CacheSettings(BaseModel):
    """TTL in seconds per resource type. Zero or less disables caching."""

    player: float = DEFAULT_TTL
    player_stats: float = DEFAULT_TTL
    seasons: float = DEFAULT_TTL
    status: float = DEFAULT_TTL
    match: float = DEFAULT_TTL
    tournaments: float = DEFAULT_TTL
    tournament: float = DEFAULT_TTL

    def ttl_for(self, resource: str) -> float:
        return getattr(self, resource)


class Settings(BaseModel):
    api_key: str = ""

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        return v.strip()

    default_region: Region | str = Region.STEAM
    cache: CacheSettings = Field(default_factory=CacheSettings)

    @field_validator("default_region")
    @classmethod
    def known_region(cls, v: Region | str) -> Region | str:
        try:
            return Region(v)
        except ValueError:
            return v


def load_settings(env_path: Path | None = None, settings_path: Path | None = None) -> Settings:
    _load_env(env_path)
    raw = _load_yaml(settings_path)
    raw["api_key"] = os.getenv("PUBG_API_KEY", "")
    return Settings(**raw)
