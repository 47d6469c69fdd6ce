from collections.abc import Sequence
from typing import Any

import httpx

from domain.exceptions.currency import ProviderError
from domain.models.currency import ProviderResult

from .base import BaseAPIProvider


class OpenExchangeProvider(BaseAPIProvider):
    BASE_URL = "https://openexchangerates.org/api"
    label = "OpenExchange"

    def __init__(self, app_id: str, base_url: str = BASE_URL, client: httpx.AsyncClient | None = None, timeout: float = 5):
        super().__init__(base_url=base_url, client=client, timeout=timeout)
        self.app_id = app_id

    @property
    def name(self) -> str:
        return "openexchange"

    def _check_payload(self, data: dict[str, Any]) -> None:
        if "error" in data:
            message = data.get("description", data.get("message", "Unknown error"))
            raise ProviderError(f"OpenExchange API error: {message}")

    async def fetch_rates(self, base: str, symbols: Sequence[str]) -> ProviderResult:
        data = await self._request(
            "latest.json", {"app_id": self.app_id, "base": base, "symbols": ",".join(symbols)}
        )
        return self._select_rates(data.get("rates"), symbols)
