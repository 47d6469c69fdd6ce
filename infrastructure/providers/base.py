import math
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

import httpx

from domain.exceptions.currency import ProviderError
from domain.models.currency import ProviderResult


class ExchangeRateProvider(Protocol):
    @property
    def name(self) -> str:
        ...

    async def fetch_rates(self, base: str, symbols: Sequence[str]) -> ProviderResult:
        ...

    async def close(self) -> None:
        ...


class BaseAPIProvider(ABC):
    """A base class for API providers, handling common HTTP logic."""

    label: str = "Provider"

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 5,
        headers: dict[str, str] | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={"accept": "application/json", **(headers or {})},
        )

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    async def fetch_rates(self, base: str, symbols: Sequence[str]) -> ProviderResult:
        ...

    def _check_payload(self, data: dict[str, Any]) -> None:
        """Hook for providers that report errors inside a 2xx body."""

    async def _request(self, endpoint: str, params: dict | None = None) -> dict[str, Any]:
        url = f"{self.base_url}/{endpoint}"
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()  # Raises HTTPStatusError for 4xx/5xx
            data = response.json()
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            self._check_payload(data)
            return data

        except ProviderError:
            raise
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"{self.label} HTTP error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise ProviderError(f"{self.label} request failed: {e.__class__.__name__}") from e
        except Exception as e:
            raise ProviderError(f"{self.label} response parsing error: {str(e)}") from e

    @staticmethod
    def _select_rates(
        rates: Mapping[str, Any] | None,
        symbols: Sequence[str],
        key: Callable[[str], str] = lambda symbol: symbol,
    ) -> ProviderResult:
        """Keep the requested symbols that carry a usable positive, finite rate."""
        if not isinstance(rates, Mapping):
            return {}

        selected: ProviderResult = {}
        for symbol in symbols:
            raw = rates.get(key(symbol))
            if isinstance(raw, Mapping):
                raw = raw.get("value")
            if raw is None or isinstance(raw, bool):
                continue
            try:
                value = float(raw)
            except (TypeError, ValueError):
                continue
            if math.isfinite(value) and value > 0:
                selected[symbol] = value
        return selected

    async def close(self) -> None:
        """Cleanly close the HTTP client."""
        await self._client.aclose()

    def __repr__(self):
        return f"<{self.__class__.__name__}(name={self.name})>"
