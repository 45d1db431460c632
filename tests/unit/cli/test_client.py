"""Unit tests for CLI HTTP client."""

import httpx
import pytest

from ntc_booking.cli.client import APIClient, decode_body
from ntc_booking.core.exceptions import ServiceResponseError, TransportError


def _client(handler, token=None) -> APIClient:
    return APIClient(
        base_url="http://test:8000/api/",
        timeout=5.0,
        token=token,
        transport=httpx.MockTransport(handler),
    )


class TestAPIClient:
    """Tests for APIClient class."""

    def test_client_initialization(self):
        client = APIClient(base_url="http://test:8000/api/", timeout=12.0)
        assert client.base_url == "http://test:8000/api"
        assert client.timeout == 12.0
        assert client.token is None

    def test_defaults_come_from_config(self):
        client = APIClient()
        assert client.base_url == "https://ntc-booking-system-1.onrender.com/api"
        assert client.timeout == 30.0

    @pytest.mark.asyncio
    async def test_path_is_joined_under_base_url(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=[])

        client = _client(handler)
        await client.call("GET", "/admin/routes")
        await client.close()

        assert seen[0].url == "http://test:8000/api/admin/routes"

    @pytest.mark.asyncio
    async def test_bearer_header_when_token_given(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={})

        client = _client(handler, token="tok-123")
        await client.call("GET", "/schedules")
        await client.close()

        assert seen[0].headers["Authorization"] == "Bearer tok-123"

    @pytest.mark.asyncio
    async def test_no_authorization_header_without_token(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={})

        client = _client(handler)
        await client.call("GET", "/schedules")
        await client.close()

        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_request_returns_error_responses(self):
        client = _client(lambda request: httpx.Response(404, json={"message": "nope"}))
        response = await client.request("GET", "/missing")
        await client.close()

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_call_raises_service_error_with_payload(self):
        client = _client(lambda request: httpx.Response(400, json={"message": "Route exists"}))

        with pytest.raises(ServiceResponseError) as exc_info:
            await client.call("POST", "/admin/routes", json={})
        await client.close()

        assert exc_info.value.status_code == 400
        assert exc_info.value.payload == {"message": "Route exists"}

    @pytest.mark.asyncio
    async def test_transport_failure_raises_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused")

        client = _client(handler)

        with pytest.raises(TransportError, match="Connection refused"):
            await client.call("GET", "/schedules")
        await client.close()

    @pytest.mark.asyncio
    async def test_close_client(self):
        client = _client(lambda request: httpx.Response(200))
        await client._get_client()
        assert client._client is not None

        await client.close()
        assert client._client is None


class TestDecodeBody:
    def test_json(self):
        assert decode_body(httpx.Response(200, json={"a": 1})) == {"a": 1}

    def test_text(self):
        assert decode_body(httpx.Response(500, text="Internal Server Error")) == "Internal Server Error"

    def test_empty(self):
        assert decode_body(httpx.Response(204)) is None
