"""
Shared fixtures: in-memory providers standing in for the HTTP adapters.
"""
import asyncio
from collections.abc import Sequence

import pytest

from application.services import ExchangeRateService, RateAggregator
from infrastructure.cache.memory_cache import InMemoryRateCache
from infrastructure.monitoring.metrics import MetricsRegistry


class FakeProvider:
    """Answers from a fixed rate table, optionally failing or stalling."""

    def __init__(
        self,
        name: str,
        rates: dict[str, float] | None = None,
        error: Exception | None = None,
        delay: float = 0.0,
    ):
        self._name = name
        self.rates = rates or {}
        self.error = error
        self.delay = delay
        self.calls: list[tuple[str, tuple[str, ...]]] = []
        self.closed = False

    @property
    def name(self) -> str:
        return self._name

    async def fetch_rates(self, base: str, symbols: Sequence[str]) -> dict[str, float]:
        self.calls.append((base, tuple(symbols)))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return {s: self.rates[s] for s in symbols if s in self.rates}

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_provider():
    return FakeProvider


@pytest.fixture
def metrics():
    return MetricsRegistry()


@pytest.fixture
def cache():
    return InMemoryRateCache()


@pytest.fixture
def healthy_providers():
    return [
        FakeProvider("freeCurrencyRates", {"EUR": 0.90, "JPY": 150.0, "GBP": 0.80}),
        FakeProvider("frankfurter", {"EUR": 0.92, "JPY": 152.0, "GBP": 0.78}),
    ]


@pytest.fixture
def service(healthy_providers, cache, metrics):
    return ExchangeRateService(
        providers=healthy_providers,
        cache=cache,
        metrics=metrics,
        aggregator=RateAggregator(metrics, provider_timeout=1.0),
    )
