# nosec B101

import math
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from domain.exceptions.currency import ProviderError
from infrastructure.providers.frankfurter import FrankfurterProvider


def make_client(payload=None, json_error=None):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    if json_error is not None:
        mock_response.json.side_effect = json_error
    else:
        mock_response.json.return_value = payload
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    return mock_client


@pytest.mark.asyncio
async def test_fetch_rates_builds_request_and_parses_rates():
    mock_client = make_client({
        "amount": 1.0,
        "base": "USD",
        "date": "2024-03-06",
        "rates": {"EUR": 0.9213, "JPY": 149.87},
    })
    provider = FrankfurterProvider(client=mock_client)

    rates = await provider.fetch_rates("USD", ["EUR", "JPY"])

    assert rates == {"EUR": 0.9213, "JPY": 149.87}
    call_args = mock_client.get.call_args
    assert call_args[0][0] == "https://api.frankfurter.app/latest"
    assert call_args[1]["params"] == {"from": "USD", "to": "EUR,JPY"}


@pytest.mark.asyncio
async def test_custom_base_url_is_used():
    mock_client = make_client({"rates": {"EUR": 0.9}})
    provider = FrankfurterProvider(base_url="http://localhost:9000/", client=mock_client)

    await provider.fetch_rates("USD", ["EUR"])

    assert mock_client.get.call_args[0][0] == "http://localhost:9000/latest"


@pytest.mark.asyncio
async def test_missing_rates_object_returns_empty_mapping():
    provider = FrankfurterProvider(client=make_client({"message": "not found"}))

    assert await provider.fetch_rates("USD", ["EUR"]) == {}


@pytest.mark.asyncio
async def test_only_requested_symbols_are_returned():
    provider = FrankfurterProvider(client=make_client({"rates": {"EUR": 0.9, "GBP": 0.8}}))

    rates = await provider.fetch_rates("USD", ["EUR"])

    assert rates == {"EUR": 0.9}


@pytest.mark.asyncio
async def test_unusable_values_are_skipped():
    provider = FrankfurterProvider(client=make_client({
        "rates": {"EUR": "abc", "GBP": None, "JPY": "149.5", "CHF": True, "NOK": 1e400}
    }))

    rates = await provider.fetch_rates("USD", ["EUR", "GBP", "JPY", "CHF", "NOK"])

    assert rates == {"JPY": 149.5}
    assert all(math.isfinite(v) and v > 0 for v in rates.values())


@pytest.mark.asyncio
async def test_http_404_raises_provider_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    error_response = Mock()
    error_response.status_code = 404
    error_response.text = '{"message":"not found"}'
    mock_client.get.side_effect = httpx.HTTPStatusError(
        "Not found", request=Mock(), response=error_response
    )
    provider = FrankfurterProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates("XXX", ["EUR"])

    assert "HTTP error 404" in str(exc_info.value)


@pytest.mark.asyncio
async def test_network_timeout_raises_provider_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.ReadTimeout("Request timed out")
    provider = FrankfurterProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates("USD", ["EUR"])

    assert "request failed" in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_invalid_json_raises_provider_error():
    provider = FrankfurterProvider(client=make_client(json_error=ValueError("Invalid JSON")))

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates("USD", ["EUR"])

    assert "parsing error" in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_close_closes_client():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    provider = FrankfurterProvider(client=mock_client)

    await provider.close()

    mock_client.aclose.assert_awaited_once()
