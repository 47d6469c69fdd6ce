from .base import BaseAPIProvider, ExchangeRateProvider
from .currencyapi import CurrencyAPIProvider
from .fawaz import FawazCurrencyProvider
from .fixerio import FixerIOProvider
from .frankfurter import FrankfurterProvider
from .openexchange import OpenExchangeProvider

__all__ = [
    'BaseAPIProvider',
    'ExchangeRateProvider',
    'CurrencyAPIProvider',
    'FawazCurrencyProvider',
    'FixerIOProvider',
    'FrankfurterProvider',
    'OpenExchangeProvider',
]
