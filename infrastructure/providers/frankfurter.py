from collections.abc import Sequence

import httpx

from domain.models.currency import ProviderResult

from .base import BaseAPIProvider


class FrankfurterProvider(BaseAPIProvider):
    BASE_URL = "https://api.frankfurter.app"
    label = "Frankfurter"

    def __init__(self, base_url: str = BASE_URL, client: httpx.AsyncClient | None = None, timeout: float = 5):
        super().__init__(base_url=base_url, client=client, timeout=timeout)

    @property
    def name(self) -> str:
        return "frankfurter"

    async def fetch_rates(self, base: str, symbols: Sequence[str]) -> ProviderResult:
        data = await self._request("latest", {"from": base, "to": ",".join(symbols)})
        return self._select_rates(data.get("rates"), symbols)
