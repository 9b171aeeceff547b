"""Async httpx wrapper with bearer auth, error envelopes and per-path caching."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError as ModelValidationError

from pubgroyale.api.models import ErrorEnvelope
from pubgroyale.services.cache import Outcome, TTLCache

log = logging.getLogger(__name__)

BASE_URL = "https://api.pubg.com"
ACCEPT = "application/vnd.api+json"


class ValidationError(ValueError):
    """A required option was not supplied."""


class ApiError(Exception):
    """The API answered with an error document."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        title: str | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.title = title
        self.detail = detail

    @classmethod
    def from_envelope(cls, envelope: ErrorEnvelope, status_code: int | None = None) -> ApiError:
        first = envelope.errors[0]
        return cls(first.message(), status_code=status_code, title=first.title, detail=first.detail)


class PubgAPIClient:
    """Async HTTP client for the PUBG API."""

    def __init__(
        self,
        api_key: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        kwargs: dict[str, Any] = {
            "base_url": BASE_URL,
            "headers": {
                "Authorization": f"Bearer {api_key}",
                "Accept": ACCEPT,
            },
        }
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    def _parse(self, response: httpx.Response) -> Any:
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise ApiError(
                f"HTTP {response.status_code}: {response.reason_phrase}",
                status_code=response.status_code,
            ) from None
        if isinstance(data, dict) and data.get("errors"):
            try:
                envelope = ErrorEnvelope.model_validate(data)
            except ModelValidationError:
                raise ApiError(
                    f"HTTP {response.status_code}: {response.reason_phrase}",
                    status_code=response.status_code,
                ) from None
            raise ApiError.from_envelope(envelope, status_code=response.status_code)
        return data

    async def request(self, path: str, cache: TTLCache) -> Any:
        """GET `path` and return the parsed document.

        Successes and failures are both stored in `cache` under `path`, so a
        failing request is replayed from cache until the entry expires.
        """
        cached = cache.retrieve(path)
        if cached is not None:
            log.debug("Cache hit for %s", path)
            return cached.unwrap()

        log.debug("GET %s", path)
        try:
            response = await self._client.get(path)
            data = self._parse(response)
        except ApiError as exc:
            log.warning("API error for %s: %s", path, exc)
            cache.add(path, Outcome.failed(exc))
            raise
        except httpx.TransportError as exc:
            log.warning("Transport error for %s: %s", path, exc)
            cache.add(path, Outcome.failed(exc))
            raise
        cache.add(path, Outcome.ok(data))
        return data
