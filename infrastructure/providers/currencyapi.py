from collections.abc import Sequence
from typing import Any

import httpx

from domain.exceptions.currency import ProviderError
from domain.models.currency import ProviderResult

from .base import BaseAPIProvider


class CurrencyAPIProvider(BaseAPIProvider):
    """currencyapi.com v3. Authentication travels in the ``apikey`` header and
    each rate is wrapped as ``{"code": "EUR", "value": 0.92}``."""

    BASE_URL = "https://api.currencyapi.com/v3"
    label = "CurrencyAPI"

    def __init__(self, api_key: str, base_url: str = BASE_URL, client: httpx.AsyncClient | None = None, timeout: float = 5):
        super().__init__(base_url=base_url, client=client, timeout=timeout, headers={"apikey": api_key})
        self.api_key = api_key

    @property
    def name(self) -> str:
        return "currencyapi.com"

    def _check_payload(self, data: dict[str, Any]) -> None:
        if "errors" in data or ("message" in data and "data" not in data):
            raise ProviderError(f"CurrencyAPI error: {data.get('message', 'Unknown error')}")

    async def fetch_rates(self, base: str, symbols: Sequence[str]) -> ProviderResult:
        data = await self._request(
            "latest", {"base_currency": base, "currencies": ",".join(symbols)}
        )
        return self._select_rates(data.get("data"), symbols)
