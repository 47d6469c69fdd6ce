class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass

class ProviderError(CurrencyException):
    pass

class NoRateResolvedError(CurrencyException):
    """No provider resolved a requested symbol, so the whole query fails."""

    def __init__(self, base: str, symbol: str):
        self.base = base
        self.symbol = symbol
        super().__init__(f"No rates found for {symbol} (base {base})")
