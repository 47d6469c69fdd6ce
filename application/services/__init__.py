from .rate_aggregator import RateAggregator
from .rate_service import ExchangeRateService

__all__ = ['ExchangeRateService', 'RateAggregator']
