from collections.abc import Sequence

import httpx

from domain.models.currency import ProviderResult

from .base import BaseAPIProvider


class FawazCurrencyProvider(BaseAPIProvider):
    """Free currency-api by fawazahmed0, served from the jsDelivr CDN.

    The payload is keyed by the lower-cased base code, e.g.
    ``{"date": "2024-03-06", "usd": {"eur": 0.92, "jpy": 149.8}}``.
    """

    BASE_URL = "https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@latest/v1"
    label = "FreeCurrencyRates"

    def __init__(self, base_url: str = BASE_URL, client: httpx.AsyncClient | None = None, timeout: float = 5):
        super().__init__(base_url=base_url, client=client, timeout=timeout)

    @property
    def name(self) -> str:
        return "freeCurrencyRates"

    async def fetch_rates(self, base: str, symbols: Sequence[str]) -> ProviderResult:
        data = await self._request(f"currencies/{base.lower()}.json")
        return self._select_rates(data.get(base.lower()), symbols, key=str.lower)
