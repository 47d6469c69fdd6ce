# nosec B101

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from domain.exceptions.currency import ProviderError
from infrastructure.providers.currencyapi import CurrencyAPIProvider


def make_client(payload):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    return mock_client


@pytest.mark.asyncio
async def test_fetch_rates_unwraps_value_objects():
    mock_client = make_client({
        "meta": {"last_updated_at": "2024-03-06T23:59:59Z"},
        "data": {
            "EUR": {"code": "EUR", "value": 0.9213},
            "JPY": {"code": "JPY", "value": 149.87},
        },
    })
    provider = CurrencyAPIProvider(api_key="key", client=mock_client)

    rates = await provider.fetch_rates("USD", ["EUR", "JPY"])

    assert rates == {"EUR": 0.9213, "JPY": 149.87}
    call_args = mock_client.get.call_args
    assert call_args[0][0] == "https://api.currencyapi.com/v3/latest"
    assert call_args[1]["params"] == {"base_currency": "USD", "currencies": "EUR,JPY"}


@pytest.mark.asyncio
async def test_error_message_payload_raises_provider_error():
    provider = CurrencyAPIProvider(
        api_key="key", client=make_client({"message": "Invalid authentication credentials"})
    )

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates("USD", ["EUR"])

    assert "Invalid authentication credentials" in str(exc_info.value)


def test_name_is_stable():
    provider = CurrencyAPIProvider(api_key="key", client=AsyncMock(spec=httpx.AsyncClient))

    assert provider.name == "currencyapi.com"
