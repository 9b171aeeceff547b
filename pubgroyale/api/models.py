"""Pydantic models for the parts of PUBG API documents the client inspects."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Region(str, Enum):
    """Platform shards accepted in `/shards/{region}/...` paths."""

    STEAM = "steam"
    KAKAO = "kakao"
    PSN = "psn"
    XBOX = "xbox"
    STADIA = "stadia"
    CONSOLE = "console"
    TOURNAMENT = "tournament"


class ErrorObject(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = ""
    detail: str | None = None

    def message(self) -> str:
        if self.detail is not None:
            return f"{self.title}. Details: {self.detail}"
        return self.title


class ErrorEnvelope(BaseModel):
    """A JSON:API document; only `errors` matters here."""

    model_config = ConfigDict(extra="ignore")

    errors: list[ErrorObject] = Field(default_factory=list)


class AssetAttributes(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    url: str | None = Field(default=None, alias="URL")
    name: str | None = None
    description: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")


class IncludedResource(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str
    id: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
