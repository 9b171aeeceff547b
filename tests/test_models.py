"""Tests for API models."""

from __future__ import annotations

from pubgroyale.api.client import ApiError
from pubgroyale.api.models import ErrorEnvelope, ErrorObject, Region


class TestErrorObject:
    def test_title_only(self):
        assert ErrorObject(title="Not Found").message() == "Not Found"

    def test_title_and_detail(self):
        err = ErrorObject(title="Bad Request", detail="invalid shard")
        assert err.message() == "Bad Request. Details: invalid shard"


class TestErrorEnvelope:
    def test_ignores_unknown_fields(self):
        envelope = ErrorEnvelope.model_validate(
            {"errors": [{"title": "Unauthorized", "status": "401"}], "meta": {}}
        )
        assert envelope.errors[0].title == "Unauthorized"

    def test_api_error_from_envelope(self):
        envelope = ErrorEnvelope(errors=[ErrorObject(title="Too Many Requests")])
        err = ApiError.from_envelope(envelope, status_code=429)
        assert str(err) == "Too Many Requests"
        assert err.status_code == 429
        assert err.detail is None


class TestRegion:
    def test_values(self):
        assert Region.STEAM.value == "steam"
        assert Region("kakao") is Region.KAKAO
