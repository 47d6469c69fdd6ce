import asyncio
import logging

from application.services import ExchangeRateService, RateAggregator
from config.settings import Settings, get_settings
from infrastructure.cache.memory_cache import InMemoryRateCache
from infrastructure.monitoring.metrics import MetricsRegistry
from infrastructure.providers import (
	CurrencyAPIProvider,
	ExchangeRateProvider,
	FawazCurrencyProvider,
	FixerIOProvider,
	FrankfurterProvider,
	OpenExchangeProvider,
)

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	providers: list[ExchangeRateProvider] | None = None
	cache: InMemoryRateCache | None = None
	metrics: MetricsRegistry | None = None
	service: ExchangeRateService | None = None


deps = AppDependencies()


def build_providers(settings: Settings) -> list[ExchangeRateProvider]:
	timeout = settings.PROVIDER_TIMEOUT
	providers: list[ExchangeRateProvider] = [
		FawazCurrencyProvider(base_url=settings.FAWAZ_BASE_URL, timeout=timeout),
		FrankfurterProvider(base_url=settings.FRANKFURTER_BASE_URL, timeout=timeout),
	]

	if settings.FIXERIO_API_KEY:
		providers.append(
			FixerIOProvider(settings.FIXERIO_API_KEY, base_url=settings.FIXERIO_BASE_URL, timeout=timeout)
		)
	if settings.OPENEXCHANGE_APP_ID:
		providers.append(
			OpenExchangeProvider(
				settings.OPENEXCHANGE_APP_ID, base_url=settings.OPENEXCHANGE_BASE_URL, timeout=timeout
			)
		)
	if settings.CURRENCYAPI_API_KEY:
		providers.append(
			CurrencyAPIProvider(
				settings.CURRENCYAPI_API_KEY, base_url=settings.CURRENCYAPI_BASE_URL, timeout=timeout
			)
		)

	return providers


def init_dependencies(settings: Settings | None = None) -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = settings or get_settings()

	deps.providers = build_providers(settings)
	deps.cache = InMemoryRateCache()
	deps.metrics = MetricsRegistry()
	deps.service = ExchangeRateService(
		providers=deps.providers,
		cache=deps.cache,
		metrics=deps.metrics,
		aggregator=RateAggregator(deps.metrics, provider_timeout=settings.PROVIDER_TIMEOUT),
	)
	logger.info(f'Dependencies initialized with providers: {[p.name for p in deps.providers]}')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.providers:
		results = await asyncio.gather(
			*(provider.close() for provider in deps.providers), return_exceptions=True
		)
		for provider, result in zip(deps.providers, results, strict=True):
			if isinstance(result, Exception):
				logger.warning(f'Failed to close provider {provider.name}: {result}')

	deps.providers = None
	deps.cache = None
	deps.metrics = None
	deps.service = None
	logger.info('Cleanup complete')


def get_exchange_rate_service() -> ExchangeRateService:
	if deps.service is None:
		raise RuntimeError('Exchange rate service not initialized')
	return deps.service
