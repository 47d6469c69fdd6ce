import logging
from collections.abc import Iterable, Sequence

from application.services.rate_aggregator import RateAggregator
from domain.models.currency import AggregatedRates, MetricsSnapshot, RateQuery
from infrastructure.cache.memory_cache import InMemoryRateCache
from infrastructure.monitoring.metrics import MetricsRegistry
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class ExchangeRateService:
    """Entry point for the HTTP layer: cache first, aggregate on a miss."""

    def __init__(
        self,
        providers: Sequence[ExchangeRateProvider],
        cache: InMemoryRateCache,
        metrics: MetricsRegistry,
        aggregator: RateAggregator | None = None,
    ):
        self.providers = list(providers)
        self.cache = cache
        self.metrics = metrics
        self.aggregator = aggregator or RateAggregator(metrics)

    async def get_rates(self, base: str, symbols: Iterable[str]) -> AggregatedRates:
        query = RateQuery.create(base, symbols)

        cached = self.cache.get(query.cache_key)
        if cached is not None:
            return cached

        # NoRateResolvedError propagates untouched: nothing cached, nothing counted
        result = await self.aggregator.aggregate(query.base, query.symbols, self.providers)

        self.cache.put(query.cache_key, result)
        self.metrics.record_query()
        logger.info(f"Resolved {query.cache_key} from {len(self.providers)} providers")
        return result

    def get_metrics_snapshot(self) -> MetricsSnapshot:
        return self.metrics.snapshot()
