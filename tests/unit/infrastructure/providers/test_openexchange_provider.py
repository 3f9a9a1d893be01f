# nosec B101

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from domain.exceptions.currency import ApiError, NetworkError
from infrastructure.providers.openexchange import OpenExchangeProvider

FETCHED_AT = datetime(2025, 11, 5, 10, 30, 0, tzinfo=UTC)


def make_response(payload, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.text = str(payload)
    response.json.return_value = payload
    return response


@pytest.fixture
def mock_client():
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def provider(mock_client):
    return OpenExchangeProvider(app_id="test_app", client=mock_client, clock=lambda: FETCHED_AT)


@pytest.mark.asyncio
async def test_fetch_rates_success(provider, mock_client):
    mock_client.get.return_value = make_response({
        "timestamp": 1762338600,
        "base": "USD",
        "rates": {"EUR": 0.8901, "PLN": 4.0660},
    })

    table = await provider.fetch_rates("USD")

    assert table.base_code == "USD"
    assert table.rates == {"EUR": 0.8901, "PLN": 4.0660}
    assert table.fetched_at == FETCHED_AT

    url = mock_client.get.call_args[0][0]
    params = mock_client.get.call_args[1]["params"]
    assert url == "https://openexchangerates.org/api/latest.json"
    assert params == {"base": "USD", "app_id": "test_app"}


def test_default_base_is_usd(provider):
    assert provider.base_code == "USD"
    assert provider.name == "openexchange"


@pytest.mark.asyncio
async def test_error_body_is_api_error(provider, mock_client):
    mock_client.get.return_value = make_response(
        {
            "error": True,
            "status": 401,
            "message": "invalid_app_id",
            "description": "Invalid App ID provided.",
        },
        status_code=401,
    )

    with pytest.raises(ApiError) as exc_info:
        await provider.fetch_rates("USD")

    assert "Invalid App ID provided." in str(exc_info.value)


@pytest.mark.asyncio
async def test_malformed_error_body_still_raises(provider, mock_client):
    mock_client.get.return_value = make_response({"error": True}, status_code=403)

    with pytest.raises(ApiError, match="Unknown error"):
        await provider.fetch_rates("USD")


@pytest.mark.asyncio
async def test_http_error_without_error_body(provider, mock_client):
    mock_client.get.return_value = make_response({"detail": "gateway"}, status_code=502)

    with pytest.raises(ApiError, match="HTTP error 502"):
        await provider.fetch_rates("USD")


@pytest.mark.asyncio
async def test_invalid_json_is_api_error(provider, mock_client):
    response = make_response(None)
    response.json.side_effect = ValueError("Expecting value")
    mock_client.get.return_value = response

    with pytest.raises(ApiError, match="Failed to parse response"):
        await provider.fetch_rates("USD")


@pytest.mark.asyncio
async def test_unexpected_shape_is_api_error(provider, mock_client):
    mock_client.get.return_value = make_response({"rates": {"EUR": "abc"}})

    with pytest.raises(ApiError, match="Failed to parse response"):
        await provider.fetch_rates("USD")


@pytest.mark.asyncio
async def test_transport_failure_is_network_error(provider, mock_client):
    mock_client.get.side_effect = httpx.ConnectError("Connection refused")

    with pytest.raises(NetworkError) as exc_info:
        await provider.fetch_rates("USD")

    assert str(exc_info.value) == "Network error: OpenExchange request failed: ConnectError"


@pytest.mark.asyncio
async def test_missing_rates_gives_empty_table(provider, mock_client):
    mock_client.get.return_value = make_response({"base": "USD"})

    table = await provider.fetch_rates("USD")

    assert table.rates == {}
