from pydantic import BaseModel, ConfigDict, Field


class ExchangeRatesResponse(BaseModel):
	base: str = Field(..., description='Base currency code')
	rates: dict[str, float] = Field(..., description='Averaged rate per requested symbol')

	model_config = ConfigDict(
		json_schema_extra={'example': {'base': 'USD', 'rates': {'EUR': 0.9213, 'JPY': 149.87}}}
	)


class ProviderMetricsResponse(BaseModel):
	name: str = Field(..., description='Provider name')
	total_requests: int = Field(..., description='Calls issued to the provider')
	total_responses: int = Field(..., description='Calls the provider answered without error')


class MetricsResponse(BaseModel):
	total_queries: int = Field(..., description='Aggregations computed (cache misses that succeeded)')
	apis: list[ProviderMetricsResponse] = Field(default_factory=list)

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'total_queries': 3,
				'apis': [
					{'name': 'freeCurrencyRates', 'total_requests': 3, 'total_responses': 3},
					{'name': 'frankfurter', 'total_requests': 3, 'total_responses': 2},
				],
			}
		}
	)


class HealthResponse(BaseModel):
	status: str = Field(..., description='Service status')
	providers: list[str] = Field(..., description='Registered provider names')


class ErrorResponse(BaseModel):
	detail: str = Field(..., description='Human-readable error message')
