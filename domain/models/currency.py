from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from domain.exceptions.currency import InvalidCurrencyError

ProviderResult = dict[str, float]


@dataclass(frozen=True)
class RateQuery:
    base: str
    symbols: tuple[str, ...]

    @classmethod
    def create(cls, base: str, symbols: Iterable[str]) -> "RateQuery":
        """Normalize raw input: upper-case codes, drop blanks and duplicates, sort symbols."""
        normalized_base = (base or "").strip().upper()
        if not normalized_base:
            raise InvalidCurrencyError("Base currency must not be empty")

        normalized_symbols = sorted({s.strip().upper() for s in symbols if s and s.strip()})
        if not normalized_symbols:
            raise InvalidCurrencyError("At least one target symbol is required")

        return cls(base=normalized_base, symbols=tuple(normalized_symbols))

    @property
    def cache_key(self) -> str:
        return f"{self.base}:{','.join(self.symbols)}"


@dataclass(frozen=True)
class AggregatedRates:
    base: str
    rates: Mapping[str, float]  # symbol -> averaged rate, read-only

    def __post_init__(self):
        # cached instances are shared between callers
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))


@dataclass(frozen=True)
class ProviderMetrics:
    requests_issued: int
    responses_succeeded: int


@dataclass(frozen=True)
class MetricsSnapshot:
    total_queries: int
    providers: dict[str, ProviderMetrics] = field(default_factory=dict)
