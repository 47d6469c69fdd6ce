from .responses import (
	ErrorResponse,
	ExchangeRatesResponse,
	HealthResponse,
	MetricsResponse,
	ProviderMetricsResponse,
)

__all__ = [
	'ErrorResponse',
	'ExchangeRatesResponse',
	'HealthResponse',
	'MetricsResponse',
	'ProviderMetricsResponse',
]
