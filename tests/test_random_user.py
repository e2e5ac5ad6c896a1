"""Tests for the random user API client."""

import asyncio

import httpx
import pytest

from conftest import mock_random_user_client, random_user_payload
from talent.exceptions import RandomUserError, RandomUserTimeoutError


class TestFetchIdentity:
    async def test_maps_first_result(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json=random_user_payload("Noa", "Kirel", "noa@example.com"))

        identity = await mock_random_user_client(handler).fetch_identity()

        assert identity.full_name == "Noa Kirel"
        assert identity.email == "noa@example.com"
        assert seen == ["https://randomuser.test/api"]

    async def test_only_first_result_is_used(self):
        payload = random_user_payload("First", "User", "first@example.com")
        payload["results"].append(
            {"name": {"first": "Second", "last": "User"}, "email": "second@example.com"}
        )

        identity = await mock_random_user_client(
            lambda request: httpx.Response(200, json=payload)
        ).fetch_identity()

        assert identity.email == "first@example.com"

    async def test_server_error(self):
        client = mock_random_user_client(lambda request: httpx.Response(500))
        with pytest.raises(RandomUserError) as exc_info:
            await client.fetch_identity()
        assert exc_info.value.status_code == 502
        assert "HTTP 500" in exc_info.value.message

    async def test_empty_results(self):
        client = mock_random_user_client(
            lambda request: httpx.Response(200, json={"results": []})
        )
        with pytest.raises(RandomUserError, match="no results"):
            await client.fetch_identity()

    async def test_malformed_payload(self):
        client = mock_random_user_client(
            lambda request: httpx.Response(200, json={"results": [{"gender": "male"}]})
        )
        with pytest.raises(RandomUserError, match="malformed"):
            await client.fetch_identity()

    async def test_non_json_body(self):
        client = mock_random_user_client(
            lambda request: httpx.Response(200, text="<html>busy</html>")
        )
        with pytest.raises(RandomUserError, match="malformed"):
            await client.fetch_identity()

    async def test_connection_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RandomUserError, match="request failed") as exc_info:
            await mock_random_user_client(handler).fetch_identity()
        assert not isinstance(exc_info.value, RandomUserTimeoutError)

    async def test_transport_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        with pytest.raises(RandomUserTimeoutError) as exc_info:
            await mock_random_user_client(handler).fetch_identity()
        assert exc_info.value.status_code == 504

    async def test_deadline_cancels_slow_request(self):
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(5)
            return httpx.Response(200, json=random_user_payload())

        with pytest.raises(RandomUserTimeoutError, match="timed out after 0.05s"):
            await mock_random_user_client(handler, timeout=0.05).fetch_identity()
