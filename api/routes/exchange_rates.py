from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import get_exchange_rate_service
from api.schemas import ErrorResponse, ExchangeRatesResponse
from application.services import ExchangeRateService

router = APIRouter(tags=['exchange-rates'])


@router.get(
	'/exchangeRates/{base}',
	response_model=ExchangeRatesResponse,
	status_code=status.HTTP_200_OK,
	responses={
		400: {'model': ErrorResponse, 'description': 'Invalid currency codes'},
		502: {'model': ErrorResponse, 'description': 'No provider could resolve a symbol'},
	},
	summary='Get averaged exchange rates',
)
async def get_exchange_rates(
	base: Annotated[
		str,
		Path(
			min_length=3,
			max_length=5,
		),
	],
	symbols: Annotated[
		str,
		Query(
			min_length=1,
			description='Comma separated target currency codes, e.g. EUR,JPY',
		),
	],
	service: Annotated[ExchangeRateService, Depends(get_exchange_rate_service)],
) -> ExchangeRatesResponse:
	result = await service.get_rates(base, symbols.split(','))
	return ExchangeRatesResponse(base=result.base, rates=dict(result.rates))
