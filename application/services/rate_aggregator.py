import asyncio
import logging
from collections.abc import Sequence

from domain.exceptions.currency import NoRateResolvedError
from domain.models.currency import AggregatedRates, ProviderResult
from infrastructure.monitoring.metrics import MetricsRegistry
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateAggregator:
    """Fans a query out to every provider and averages what comes back."""

    def __init__(self, metrics: MetricsRegistry, provider_timeout: float | None = 5.0):
        self.metrics = metrics
        self.provider_timeout = provider_timeout

    async def _fetch_from_provider(
        self, provider: ExchangeRateProvider, base: str, symbols: Sequence[str]
    ) -> ProviderResult:
        self.metrics.record_request(provider.name)
        try:
            result = await asyncio.wait_for(
                provider.fetch_rates(base, symbols), timeout=self.provider_timeout
            )
        except asyncio.TimeoutError:
            logger.warning(f"Provider {provider.name} timed out after {self.provider_timeout}s")
            return {}
        except Exception as e:
            logger.warning(f"Provider {provider.name} failed: {e}")
            return {}

        self.metrics.record_response(provider.name)
        return result

    async def aggregate(
        self, base: str, symbols: Sequence[str], providers: Sequence[ExchangeRateProvider]
    ) -> AggregatedRates:
        results = await asyncio.gather(
            *(self._fetch_from_provider(provider, base, symbols) for provider in providers)
        )

        rates: dict[str, float] = {}
        for symbol in symbols:
            values = [result[symbol] for result in results if symbol in result]
            if not values:
                logger.warning(f"No provider resolved {base} -> {symbol}")
                raise NoRateResolvedError(base, symbol)
            # divide first so large finite rates cannot overflow to inf
            rates[symbol] = sum(value / len(values) for value in values)

        logger.debug(
            f"Aggregated {base} -> {','.join(symbols)} from "
            f"{sum(1 for r in results if r)}/{len(providers)} providers"
        )
        return AggregatedRates(base=base, rates=rates)
