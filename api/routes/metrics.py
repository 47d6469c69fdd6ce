from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_exchange_rate_service
from api.schemas import HealthResponse, MetricsResponse, ProviderMetricsResponse
from application.services import ExchangeRateService

router = APIRouter(tags=['monitoring'])


@router.get(
	'/metrics',
	response_model=MetricsResponse,
	status_code=status.HTTP_200_OK,
	summary='Upstream usage counters',
)
async def get_metrics(
	service: Annotated[ExchangeRateService, Depends(get_exchange_rate_service)],
) -> MetricsResponse:
	snapshot = service.get_metrics_snapshot()
	return MetricsResponse(
		total_queries=snapshot.total_queries,
		apis=[
			ProviderMetricsResponse(
				name=name,
				total_requests=counters.requests_issued,
				total_responses=counters.responses_succeeded,
			)
			for name, counters in snapshot.providers.items()
		],
	)


@router.get(
	'/health',
	response_model=HealthResponse,
	status_code=status.HTTP_200_OK,
	summary='Liveness and registered providers',
)
async def health(
	service: Annotated[ExchangeRateService, Depends(get_exchange_rate_service)],
) -> HealthResponse:
	return HealthResponse(status='ok', providers=[p.name for p in service.providers])
